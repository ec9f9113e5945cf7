"""Decoders for the Google Translate response bodies.

Documentation requests (``/translate_a/t``) answer with nested arrays::

    [[["translated text", "en"]]]

General requests (``/translate_a/single`` with ``dj=1``) answer with an object
whose ``sentences`` list mixes translation pairs and transliterations::

    {"sentences": [{"trans": "Hola", "orig": "Hello"},
                   {"translit": "...", "src_translit": "..."}],
     "dict": [...], "src": "en"}
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Callable

from doctranslate.errors import ParseError
from doctranslate.languages import Lang
from doctranslate.models import DictionaryEntry, DictionaryTerm

# Hard cap on array nesting in documentation responses
MAX_NESTING_DEPTH = 16


@dataclass(frozen=True)
class DocTranslation:
    translated_text: str
    lang: Lang | None = None


@dataclass(frozen=True)
class TranslationSentence:
    orig: str
    trans: str
    backend: int | None = None


@dataclass(frozen=True)
class TransliterationSentence:
    translit: str | None = None
    src_translit: str | None = None


Sentence = TranslationSentence | TransliterationSentence


@dataclass(frozen=True)
class GoogleTranslation:
    sentences: tuple[Sentence, ...]
    src: Lang | None = None
    dictionaries: tuple[DictionaryEntry, ...] = ()

    @property
    def translated_text(self) -> str:
        return "".join(s.trans for s in self.sentences if isinstance(s, TranslationSentence))

    @property
    def original_text(self) -> str:
        return "".join(s.orig for s in self.sentences if isinstance(s, TranslationSentence))

    @property
    def transliteration(self) -> str | None:
        return next(
            (s.translit for s in self.sentences
             if isinstance(s, TransliterationSentence) and s.translit),
            None,
        )

    @property
    def src_transliteration(self) -> str | None:
        return next(
            (s.src_translit for s in self.sentences
             if isinstance(s, TransliterationSentence) and s.src_translit),
            None,
        )


def loads(body: str) -> Any:
    try:
        return json.loads(body)
    except ValueError as exc:
        raise ParseError("Response is not valid JSON", body) from exc


def decode_lang(code: Any) -> Lang:
    if not isinstance(code, str):
        raise ParseError("Language code must be a string", code)
    try:
        return Lang.value_of_code(code)
    except ValueError as exc:
        raise ParseError("Unsupported language code", code) from exc


def decode_doc_translation(data: Any) -> DocTranslation:
    """Unwrap a nested-array documentation response.

    Descends through the first element while it is an array; the innermost
    array holds the text and, optionally, the detected language code.
    """
    if not isinstance(data, list):
        raise ParseError("Documentation response must be an array", data)

    array = data
    depth = 1
    while array and isinstance(array[0], list):
        depth += 1
        if depth > MAX_NESTING_DEPTH:
            raise ParseError(f"Array nesting exceeds {MAX_NESTING_DEPTH} levels", data)
        array = array[0]

    if not array:
        raise ParseError("Empty translation array", data)
    text = array[0]
    if not isinstance(text, str):
        raise ParseError("Translated text must be a string", array)

    lang = decode_lang(array[1]) if len(array) > 1 and array[1] is not None else None
    return DocTranslation(text, lang)


def _is_translation_sentence(entry: dict[str, Any]) -> bool:
    return "orig" in entry and "trans" in entry


def _is_transliteration_sentence(entry: dict[str, Any]) -> bool:
    return "translit" in entry or "src_translit" in entry


def _optional_str(entry: dict[str, Any], key: str) -> str | None:
    value = entry.get(key)
    if value is not None and not isinstance(value, str):
        raise ParseError(f"Field '{key}' must be a string", entry)
    return value


def _decode_translation_sentence(entry: dict[str, Any]) -> TranslationSentence:
    orig, trans = entry["orig"], entry["trans"]
    if not isinstance(orig, str) or not isinstance(trans, str):
        raise ParseError("Sentence 'orig' and 'trans' must be strings", entry)
    backend = entry.get("backend")
    return TranslationSentence(orig, trans, backend if isinstance(backend, int) else None)


def _decode_transliteration_sentence(entry: dict[str, Any]) -> TransliterationSentence:
    return TransliterationSentence(
        translit=_optional_str(entry, "translit"),
        src_translit=_optional_str(entry, "src_translit"),
    )


# Checked in order; the first matching predicate picks the variant
SENTENCE_VARIANTS: tuple[tuple[Callable[[dict[str, Any]], bool], Callable[[dict[str, Any]], Sentence]], ...] = (
    (_is_translation_sentence, _decode_translation_sentence),
    (_is_transliteration_sentence, _decode_transliteration_sentence),
)


def decode_sentence(entry: Any) -> Sentence:
    """Decode one ``sentences`` entry, failing on unrecognised shapes."""
    if not isinstance(entry, dict):
        raise ParseError("Sentence entry must be an object", entry)
    for matches, decode in SENTENCE_VARIANTS:
        if matches(entry):
            return decode(entry)
    raise ParseError("Cannot decode sentence entry", entry)


def decode_dictionary_entry(entry: Any) -> DictionaryEntry:
    try:
        terms = tuple(entry.get("terms") or ())
        words = tuple(
            DictionaryTerm(
                word=item["word"],
                reverse_translation=tuple(item.get("reverse_translation") or ()),
                score=item.get("score"),
            )
            for item in entry.get("entry") or ()
        )
        return DictionaryEntry(pos=entry.get("pos") or "", terms=terms, entries=words)
    except (AttributeError, KeyError, TypeError) as exc:
        raise ParseError("Malformed dictionary entry", entry) from exc


def decode_google_translation(data: Any) -> GoogleTranslation:
    if not isinstance(data, dict):
        raise ParseError("Translation response must be an object", data)

    sentences = data.get("sentences") or []
    dictionaries = data.get("dict") or []
    if not isinstance(sentences, list):
        raise ParseError("'sentences' must be an array", sentences)
    if not isinstance(dictionaries, list):
        raise ParseError("'dict' must be an array", dictionaries)

    src = data.get("src")
    return GoogleTranslation(
        sentences=tuple(decode_sentence(entry) for entry in sentences),
        src=decode_lang(src) if src is not None else None,
        dictionaries=tuple(decode_dictionary_entry(entry) for entry in dictionaries),
    )
