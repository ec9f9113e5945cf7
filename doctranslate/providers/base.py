"""Abstract translation provider interface."""

from abc import ABC, abstractmethod

from doctranslate.config import Settings, load_settings
from doctranslate.errors import TranslationError
from doctranslate.languages import Lang
from doctranslate.models import TranslationResult


class TranslationProvider(ABC):
    """Base class for all translation providers.

    Args:
        settings: Translator settings; the primary language is the default
            translation target.
    """

    name: str = ""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings or load_settings()
        self.primary_language: Lang = self.settings.primary_language

    @property
    def supported_source_languages(self) -> list[Lang]:
        return Lang.sorted_values()

    @property
    def supported_target_languages(self) -> list[Lang]:
        return [lang for lang in self.supported_source_languages if lang is not Lang.AUTO]

    def check_languages(self, source_lang: Lang, target_lang: Lang) -> None:
        """Reject language pairs this provider cannot translate.

        Raises:
            TranslationError: If either language is unsupported.
        """
        if source_lang not in self.supported_source_languages:
            raise TranslationError(f"{self.name}: unsupported source language {source_lang.code}")
        if target_lang not in self.supported_target_languages:
            raise TranslationError(f"{self.name}: unsupported target language {target_lang.code}")

    @abstractmethod
    async def translate(self, text: str, source_lang: Lang, target_lang: Lang) -> TranslationResult:
        """Translate plain text from source_lang to target_lang.

        Args:
            text: Source text to translate.
            source_lang: Source language, or ``Lang.AUTO`` to detect it.
            target_lang: Target language.

        Returns:
            Parsed translation.
        """
        ...

    @abstractmethod
    async def translate_documentation(
        self, text: str, source_lang: Lang, target_lang: Lang
    ) -> TranslationResult:
        """Translate HTML-formatted documentation, preserving its markup."""
        ...

    async def get_translated_documentation(self, text: str, language: Lang | None = None) -> str:
        """Translate documentation into the primary language.

        Args:
            text: Documentation HTML.
            language: Source language hint; ``None`` means detect it.

        Returns:
            The translated documentation.
        """
        result = await self.translate_documentation(text, language or Lang.AUTO, self.primary_language)
        return result.translated_text

    async def get_translated_text(self, text: str, language: Lang | None = None) -> str:
        """Translate plain text into the primary language."""
        result = await self.translate(text, language or Lang.AUTO, self.primary_language)
        return result.translated_text

    async def close(self) -> None:
        """Release provider resources. Nothing to release by default."""
