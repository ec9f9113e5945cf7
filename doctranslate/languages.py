"""Supported languages and wire-code normalization."""

from enum import Enum


class Lang(Enum):
    """A translatable language: wire ``code`` plus English ``label``.

    ``AUTO`` is the sentinel for "detect the source language".
    """

    AUTO = ("auto", "Auto Detect")
    AFRIKAANS = ("af", "Afrikaans")
    ALBANIAN = ("sq", "Albanian")
    AMHARIC = ("am", "Amharic")
    ARABIC = ("ar", "Arabic")
    ARMENIAN = ("hy", "Armenian")
    AZERBAIJANI = ("az", "Azerbaijani")
    BASQUE = ("eu", "Basque")
    BELARUSIAN = ("be", "Belarusian")
    BENGALI = ("bn", "Bengali")
    BOSNIAN = ("bs", "Bosnian")
    BULGARIAN = ("bg", "Bulgarian")
    CATALAN = ("ca", "Catalan")
    CEBUANO = ("ceb", "Cebuano")
    CHICHEWA = ("ny", "Chichewa")
    CHINESE_SIMPLIFIED = ("zh-CN", "Chinese (Simplified)")
    CHINESE_TRADITIONAL = ("zh-TW", "Chinese (Traditional)")
    CHINESE_CANTONESE = ("yue", "Chinese (Cantonese)")
    CHINESE_CLASSICAL = ("lzh", "Chinese (Classical)")
    CORSICAN = ("co", "Corsican")
    CROATIAN = ("hr", "Croatian")
    CZECH = ("cs", "Czech")
    DANISH = ("da", "Danish")
    DUTCH = ("nl", "Dutch")
    ENGLISH = ("en", "English")
    ESPERANTO = ("eo", "Esperanto")
    ESTONIAN = ("et", "Estonian")
    FILIPINO = ("tl", "Filipino")
    FINNISH = ("fi", "Finnish")
    FRENCH = ("fr", "French")
    FRISIAN = ("fy", "Frisian")
    GALICIAN = ("gl", "Galician")
    GEORGIAN = ("ka", "Georgian")
    GERMAN = ("de", "German")
    GREEK = ("el", "Greek")
    GUJARATI = ("gu", "Gujarati")
    HAITIAN_CREOLE = ("ht", "Haitian Creole")
    HAUSA = ("ha", "Hausa")
    HAWAIIAN = ("haw", "Hawaiian")
    HEBREW = ("iw", "Hebrew")
    HINDI = ("hi", "Hindi")
    HMONG = ("hmn", "Hmong")
    HUNGARIAN = ("hu", "Hungarian")
    ICELANDIC = ("is", "Icelandic")
    IGBO = ("ig", "Igbo")
    INDONESIAN = ("id", "Indonesian")
    IRISH = ("ga", "Irish")
    ITALIAN = ("it", "Italian")
    JAPANESE = ("ja", "Japanese")
    JAVANESE = ("jw", "Javanese")
    KANNADA = ("kn", "Kannada")
    KAZAKH = ("kk", "Kazakh")
    KHMER = ("km", "Khmer")
    KOREAN = ("ko", "Korean")
    KURDISH = ("ku", "Kurdish")
    KYRGYZ = ("ky", "Kyrgyz")
    LAO = ("lo", "Lao")
    LATIN = ("la", "Latin")
    LATVIAN = ("lv", "Latvian")
    LITHUANIAN = ("lt", "Lithuanian")
    LUXEMBOURGISH = ("lb", "Luxembourgish")
    MACEDONIAN = ("mk", "Macedonian")
    MALAGASY = ("mg", "Malagasy")
    MALAY = ("ms", "Malay")
    MALAYALAM = ("ml", "Malayalam")
    MALTESE = ("mt", "Maltese")
    MAORI = ("mi", "Maori")
    MARATHI = ("mr", "Marathi")
    MONGOLIAN = ("mn", "Mongolian")
    MYANMAR = ("my", "Myanmar (Burmese)")
    NEPALI = ("ne", "Nepali")
    NORWEGIAN = ("no", "Norwegian")
    PASHTO = ("ps", "Pashto")
    PERSIAN = ("fa", "Persian")
    POLISH = ("pl", "Polish")
    PORTUGUESE = ("pt", "Portuguese")
    PUNJABI = ("pa", "Punjabi")
    ROMANIAN = ("ro", "Romanian")
    RUSSIAN = ("ru", "Russian")
    SAMOAN = ("sm", "Samoan")
    SCOTS_GAELIC = ("gd", "Scots Gaelic")
    SERBIAN = ("sr", "Serbian")
    SESOTHO = ("st", "Sesotho")
    SHONA = ("sn", "Shona")
    SINDHI = ("sd", "Sindhi")
    SINHALA = ("si", "Sinhala")
    SLOVAK = ("sk", "Slovak")
    SLOVENIAN = ("sl", "Slovenian")
    SOMALI = ("so", "Somali")
    SPANISH = ("es", "Spanish")
    SUNDANESE = ("su", "Sundanese")
    SWAHILI = ("sw", "Swahili")
    SWEDISH = ("sv", "Swedish")
    TAJIK = ("tg", "Tajik")
    TAMIL = ("ta", "Tamil")
    TELUGU = ("te", "Telugu")
    THAI = ("th", "Thai")
    TURKISH = ("tr", "Turkish")
    UKRAINIAN = ("uk", "Ukrainian")
    URDU = ("ur", "Urdu")
    UZBEK = ("uz", "Uzbek")
    VIETNAMESE = ("vi", "Vietnamese")
    WELSH = ("cy", "Welsh")
    XHOSA = ("xh", "Xhosa")
    YIDDISH = ("yi", "Yiddish")
    YORUBA = ("yo", "Yoruba")
    ZULU = ("zu", "Zulu")

    def __init__(self, code: str, label: str) -> None:
        self.code = code
        self.label = label

    def __str__(self) -> str:
        return self.label

    @classmethod
    def sorted_values(cls) -> list["Lang"]:
        """All languages, ``AUTO`` first, the rest ordered by label."""
        others = sorted((lang for lang in cls if lang is not cls.AUTO), key=lambda lang: lang.label)
        return [cls.AUTO, *others]

    @classmethod
    def value_of_code(cls, code: str) -> "Lang":
        """Resolve a wire code, tolerating the variants the backend emits.

        Raises:
            ValueError: If the code matches no supported language.
        """
        if code in _BY_CODE:
            return _BY_CODE[code]

        folded = code.strip().lower().replace("_", "-")
        if folded in _BY_FOLDED_CODE:
            return _BY_FOLDED_CODE[folded]
        if folded in CODE_ALIASES:
            return _BY_CODE[CODE_ALIASES[folded]]

        # Region-qualified codes ("en-US", "pt-BR") resolve to the base language
        base = folded.split("-")[0]
        if base in _BY_FOLDED_CODE:
            return _BY_FOLDED_CODE[base]
        if base in CODE_ALIASES:
            return _BY_CODE[CODE_ALIASES[base]]

        raise ValueError(f"Unknown language code: {code!r}")


# Codes the backend (or callers) use that differ from the canonical wire code
CODE_ALIASES: dict[str, str] = {
    "zh": "zh-CN",
    "zh-hans": "zh-CN",
    "zh-sg": "zh-CN",
    "zh-hant": "zh-TW",
    "zh-hk": "zh-TW",
    "he": "iw",
    "jv": "jw",
    "fil": "tl",
    "nb": "no",
    "nn": "no",
}

_BY_CODE: dict[str, Lang] = {lang.code: lang for lang in Lang}
_BY_FOLDED_CODE: dict[str, Lang] = {lang.code.lower(): lang for lang in Lang}
