"""One asynchronous translation, observable without blocking the UI thread.

The fetch runs on the shared background worker. Callers either register an
``on_success`` callback or poll with ``non_blocking_get``, which waits in
short increments so the calling thread stays responsive and cancellable.

Failures never reach ``on_success`` callers: they are turned into a warning
notification shown on the UI thread, and anything waiting for the
translation falls back to the original text.
"""

import concurrent.futures
import logging
from typing import Callable

from doctranslate.cancellation import CancellationToken
from doctranslate.errors import NetworkError
from doctranslate.languages import Lang
from doctranslate.notifications import Notifier
from doctranslate.providers.base import TranslationProvider
from doctranslate.worker import BackgroundWorker, get_default_worker

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_IN_MILLIS = 3_000
TIME_TO_BLOCK_IN_MILLIS = 100


class AsyncTranslationTask:
    """Translate ``text`` in the background, starting immediately.

    Args:
        text: Text (or documentation HTML) to translate.
        provider: Translation provider performing the request.
        language: Source language hint; ``None`` lets the backend detect it.
        documentation: Translate as HTML documentation rather than plain text.
        worker: Worker to run on. Defaults to the process-wide worker.
        notifier: Receives failures. Defaults to a logging notifier.
        timeout_ms: Total time ``non_blocking_get`` may block.
        poll_interval_ms: Length of each blocking wait between cancellation checks.
    """

    def __init__(
        self,
        text: str,
        provider: TranslationProvider,
        language: Lang | None = None,
        *,
        documentation: bool = True,
        worker: BackgroundWorker | None = None,
        notifier: Notifier | None = None,
        timeout_ms: int = DEFAULT_TIMEOUT_IN_MILLIS,
        poll_interval_ms: int = TIME_TO_BLOCK_IN_MILLIS,
    ) -> None:
        if poll_interval_ms <= 0:
            raise ValueError("poll_interval_ms must be positive")
        self.text = text
        self.language = language
        self.provider = provider
        self.documentation = documentation
        self.timeout_ms = timeout_ms
        self.poll_interval_ms = poll_interval_ms
        self._notifier = notifier or Notifier()

        # Executes on the worker loop, never on the caller's thread
        self._future: concurrent.futures.Future[str] = (worker or get_default_worker()).submit(
            self._translate()
        )
        self._future.add_done_callback(self._on_done)
        logger.debug(
            "Translation task started: provider=%s chars=%d documentation=%s",
            provider.name, len(text), documentation,
        )

    @classmethod
    def start(
        cls,
        text: str,
        language: Lang | None,
        provider: TranslationProvider,
        **kwargs,
    ) -> "AsyncTranslationTask":
        return cls(text, provider, language, **kwargs)

    async def _translate(self) -> str:
        if self.documentation:
            return await self.provider.get_translated_documentation(self.text, self.language)
        return await self.provider.get_translated_text(self.text, self.language)

    def _on_done(self, future: "concurrent.futures.Future[str]") -> None:
        if future.cancelled():
            logger.debug("Translation task cancelled")
            return
        error = future.exception()
        if error is None:
            return
        if isinstance(error, NetworkError):
            logger.warning("Translation task failed: %s", error)
        else:
            logger.warning("Translation task failed", exc_info=error)
        self._notifier.show_warning(error, None)

    @property
    def is_processed(self) -> bool:
        return self._future.done()

    @property
    def is_succeeded(self) -> bool:
        future = self._future
        return future.done() and not future.cancelled() and future.exception() is None

    def on_success(self, callback: Callable[[str], None]) -> None:
        """Call ``callback`` with the translated text once the task succeeds.

        Fires immediately when the task already succeeded; never fires if it
        failed or was cancelled.
        """

        def _deliver(future: "concurrent.futures.Future[str]") -> None:
            if not future.cancelled() and future.exception() is None:
                callback(future.result())

        self._future.add_done_callback(_deliver)

    def cancel(self) -> bool:
        """Stop the background translation if it has not finished yet."""
        return self._future.cancel()

    def non_blocking_get(self, cancellation: CancellationToken | None = None) -> str | None:
        """Best-effort synchronous result.

        Blocks at most ``timeout_ms`` in ``poll_interval_ms`` slices, checking
        ``cancellation`` before each one.

        Returns:
            The translated text, or None if the translation failed or is not
            ready in time. The background work keeps running in the latter case.

        Raises:
            OperationCanceled: ``cancellation`` was signalled while waiting.
        """
        tries = self.timeout_ms // self.poll_interval_ms
        wait_seconds = self.poll_interval_ms / 1000

        # One long block would freeze the caller; check cancellation between slices
        while tries > 0:
            tries -= 1
            if cancellation is not None:
                cancellation.check_canceled()
            try:
                return self._future.result(timeout=wait_seconds)
            except concurrent.futures.TimeoutError:
                # The translation itself may have failed with a TimeoutError
                if self._future.done():
                    return None
                continue
            except Exception:
                return None

        # Not ready yet: callers show the original text
        return None
