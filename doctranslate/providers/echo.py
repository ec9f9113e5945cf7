"""Echo provider: returns input text unchanged. For testing."""

from doctranslate.languages import Lang
from doctranslate.models import TranslationResult
from doctranslate.providers.base import TranslationProvider


class EchoProvider(TranslationProvider):
    """Returns the input text unchanged."""

    name = "echo"

    async def translate(self, text: str, source_lang: Lang, target_lang: Lang) -> TranslationResult:
        return TranslationResult(source_lang, target_lang, text, original=text)

    async def translate_documentation(
        self, text: str, source_lang: Lang, target_lang: Lang
    ) -> TranslationResult:
        return TranslationResult(source_lang, target_lang, text)
