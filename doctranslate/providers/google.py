"""Google Translate provider: the translate_a web endpoints over httpx."""

import logging

import httpx

from doctranslate.config import Settings
from doctranslate.errors import NetworkError, ParseError, TranslationError
from doctranslate.languages import Lang
from doctranslate.models import TranslationRequest, TranslationResult
from doctranslate.providers.base import TranslationProvider
from doctranslate.providers.google_response import (
    decode_doc_translation,
    decode_google_translation,
    loads,
)
from doctranslate.providers.google_token import tk

logger = logging.getLogger(__name__)

GOOGLE_TRANSLATE_URL_FORMAT = "https://{host}/translate_a/single"
GOOGLE_DOCUMENTATION_TRANSLATE_URL_FORMAT = "https://{host}/translate_a/t"
GOOGLE_REFERER = "https://translate.google.com/"
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)

# Response details for general requests: translation, dictionary,
# transliteration, spelling correction
DETAIL_FLAGS = ("t", "bd", "rm", "qca")

NOT_SUPPORTED_LANGUAGES = (Lang.CHINESE_CANTONESE, Lang.CHINESE_CLASSICAL)


class GoogleTranslateProvider(TranslationProvider):
    """Translates text and documentation through Google Translate.

    Args:
        settings: Host, token key, timeouts and primary language.
        transport: Optional httpx transport (tests use ``httpx.MockTransport``).
    """

    name = "google"

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(settings)
        settings = self.settings
        self.host: str = settings.google_host
        self.tkk: str = settings.google_tkk
        self._client: httpx.AsyncClient = httpx.AsyncClient(
            timeout=settings.http_timeout_seconds,
            transport=transport,
        )

    @property
    def supported_source_languages(self) -> list[Lang]:
        return [lang for lang in Lang.sorted_values() if lang not in NOT_SUPPORTED_LANGUAGES]

    async def translate(self, text: str, source_lang: Lang, target_lang: Lang) -> TranslationResult:
        return await self._execute(text, source_lang, target_lang, documentation=False)

    async def translate_documentation(
        self, text: str, source_lang: Lang, target_lang: Lang
    ) -> TranslationResult:
        return await self._execute(text, source_lang, target_lang, documentation=True)

    async def _execute(
        self, text: str, source_lang: Lang, target_lang: Lang, documentation: bool
    ) -> TranslationResult:
        self.check_languages(source_lang, target_lang)
        if not text or not text.strip():
            return TranslationResult(source_lang, target_lang, text, original=text)

        request = TranslationRequest(text, source_lang, target_lang, documentation)
        body = await self.send_request(
            self.build_request_url(request),
            self.build_request_headers(),
            self.build_request_params(request),
        )
        return self.parse_response(request, body)

    def build_request_url(self, request: TranslationRequest) -> str:
        url_format = (
            GOOGLE_DOCUMENTATION_TRANSLATE_URL_FORMAT
            if request.documentation
            else GOOGLE_TRANSLATE_URL_FORMAT
        )
        params: list[tuple[str, str]] = [
            ("sl", request.source_lang.code),
            ("tl", request.target_lang.code),
        ]
        if request.documentation:
            params += [("client", "te_lib"), ("format", "html")]
        else:
            params += [("client", "gtx")]
            params += [("dt", flag) for flag in DETAIL_FLAGS]
            params += [
                ("dj", "1"),
                ("ie", "UTF-8"),
                ("oe", "UTF-8"),
                # Language of the dictionary's part-of-speech names
                ("hl", self.primary_language.code),
            ]
        params.append(("tk", tk(request.source_text, self.tkk)))

        url = str(httpx.URL(url_format.format(host=self.host), params=params))
        logger.info("Translate url: %s", url)
        return url

    @staticmethod
    def build_request_headers() -> dict[str, str]:
        # The endpoints reject requests without a browser-like origin
        return {"User-Agent": USER_AGENT, "Referer": GOOGLE_REFERER}

    @staticmethod
    def build_request_params(request: TranslationRequest) -> dict[str, str]:
        return {"q": request.source_text}

    async def send_request(
        self, url: str, headers: dict[str, str], params: dict[str, str]
    ) -> str:
        """GET the url, with ``params`` added to its query, and return the body.

        Raises:
            NetworkError: The host could not be reached.
            TranslationError: The host answered with an error status.
        """
        # httpx replaces, rather than extends, a query passed alongside the url
        request_url = httpx.URL(url).copy_merge_params(params)
        try:
            response = await self._client.get(request_url, headers=headers)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.error(
                "Google Translate API error: %s %s",
                exc.response.status_code,
                exc.response.reason_phrase,
            )
            raise TranslationError(
                f"Google Translate answered HTTP {exc.response.status_code}",
                status_code=exc.response.status_code,
            ) from exc
        except httpx.TransportError as exc:
            logger.warning("Google Translate request to %s failed: %s", self.host, exc)
            raise NetworkError.wrap_if_network_error(exc, self.host) from exc
        return response.text

    def parse_response(self, request: TranslationRequest, body: str) -> TranslationResult:
        """Decode a response body into a TranslationResult.

        A detected language only replaces the source language when the
        caller asked for ``Lang.AUTO``.

        Raises:
            ParseError: The body does not have the expected shape.
        """
        logger.debug("Translate result: %s", body)
        data = loads(body)
        source_lang, target_lang = request.source_lang, request.target_lang

        if request.documentation:
            doc = decode_doc_translation(data)
            source = doc.lang if doc.lang is not None and source_lang is Lang.AUTO else source_lang
            return TranslationResult(source, target_lang, doc.translated_text)

        translation = decode_google_translation(data)
        source = source_lang
        if source_lang is Lang.AUTO:
            if translation.src is None:
                raise ParseError("Response does not name the detected language", data)
            source = translation.src
        return TranslationResult(
            source_lang=source,
            target_lang=target_lang,
            translated_text=translation.translated_text,
            original=request.source_text,
            transliteration=translation.transliteration,
            src_transliteration=translation.src_transliteration,
            dictionaries=translation.dictionaries,
        )

    async def close(self) -> None:
        """Close the underlying HTTP client."""
        await self._client.aclose()
