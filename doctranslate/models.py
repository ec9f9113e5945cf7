"""Translation request and result value types."""

from dataclasses import dataclass

from doctranslate.languages import Lang


@dataclass(frozen=True)
class TranslationRequest:
    """One outgoing translation call."""

    source_text: str
    source_lang: Lang
    target_lang: Lang
    documentation: bool = False


@dataclass(frozen=True)
class DictionaryTerm:
    """A candidate translation for a single word."""

    word: str
    reverse_translation: tuple[str, ...] = ()
    score: float | None = None


@dataclass(frozen=True)
class DictionaryEntry:
    """Dictionary translations grouped by part of speech."""

    pos: str
    terms: tuple[str, ...] = ()
    entries: tuple[DictionaryTerm, ...] = ()


@dataclass(frozen=True)
class TranslationResult:
    """Parsed translation.

    ``source_lang`` is the resolved source language: the caller's choice, or
    the backend-detected one when the caller asked for ``Lang.AUTO``.
    """

    source_lang: Lang
    target_lang: Lang
    translated_text: str
    original: str | None = None
    transliteration: str | None = None
    src_transliteration: str | None = None
    dictionaries: tuple[DictionaryEntry, ...] = ()
