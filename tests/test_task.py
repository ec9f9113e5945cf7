"""Tests for the asynchronous translation task and its bounded wait."""

import asyncio
import threading
import time

import httpx
import pytest

from doctranslate.cancellation import CancellationToken
from doctranslate.config import Settings
from doctranslate.errors import NetworkError, OperationCanceled, ParseError
from doctranslate.languages import Lang
from doctranslate.models import TranslationResult
from doctranslate.notifications import Modality, Notifier
from doctranslate.providers.base import TranslationProvider
from doctranslate.task import AsyncTranslationTask
from doctranslate.worker import BackgroundWorker


class DelayedProvider(TranslationProvider):
    """Provider whose answer (or failure) arrives after a controllable delay."""

    name = "delayed"

    def __init__(self, delay: float = 0.0, result: str = "translated", error: Exception | None = None):
        super().__init__(Settings(primary_language=Lang.GERMAN))
        self.delay = delay
        self.result = result
        self.error = error
        self.calls: list[tuple[str, str, Lang, Lang]] = []

    async def _answer(self, mode, text, source_lang, target_lang):
        self.calls.append((mode, text, source_lang, target_lang))
        await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        return TranslationResult(source_lang, target_lang, self.result)

    async def translate(self, text, source_lang, target_lang):
        return await self._answer("text", text, source_lang, target_lang)

    async def translate_documentation(self, text, source_lang, target_lang):
        return await self._answer("documentation", text, source_lang, target_lang)


class RecordingNotifier(Notifier):
    """Notifier that records what it displays and how it was scheduled."""

    def __init__(self):
        self.shown = []
        self.modalities = []
        self.displayed = threading.Event()
        super().__init__(display=self._display, invoke_later=self._invoke_later)

    def _display(self, notification):
        self.shown.append(notification)
        self.displayed.set()

    def _invoke_later(self, callback, modality):
        self.modalities.append(modality)
        callback()


@pytest.fixture
def worker():
    worker = BackgroundWorker(name="test-worker")
    yield worker
    worker.shutdown()


@pytest.fixture
def notifier():
    return RecordingNotifier()


class TestNonBlockingGet:
    """Test the bounded, cancellable wait."""

    def test_returns_immediately_when_ready(self, worker, notifier):
        """Work finishing before the first poll interval returns right away."""
        task = AsyncTranslationTask("Hallo", DelayedProvider(), worker=worker, notifier=notifier)
        started = time.monotonic()
        assert task.non_blocking_get() == "translated"
        assert time.monotonic() - started < 1.0
        assert task.is_processed
        assert task.is_succeeded

    def test_gives_up_after_timeout_budget(self, worker, notifier):
        """Slow work yields no result after roughly timeout_ms, not indefinitely."""
        task = AsyncTranslationTask(
            "Hallo",
            DelayedProvider(delay=10),
            worker=worker,
            notifier=notifier,
            timeout_ms=300,
            poll_interval_ms=50,
        )
        started = time.monotonic()
        assert task.non_blocking_get() is None
        elapsed = time.monotonic() - started
        assert 0.25 <= elapsed < 2.0
        # Background work continues independently
        assert not task.is_processed
        assert notifier.shown == []

    def test_default_budget(self, worker, notifier):
        task = AsyncTranslationTask("Hallo", DelayedProvider(), worker=worker, notifier=notifier)
        assert task.timeout_ms == 3000
        assert task.poll_interval_ms == 100

    def test_cancellation_mid_poll_aborts(self, worker, notifier):
        """Cancelling the caller's operation stops the wait before the budget is spent."""
        token = CancellationToken()
        task = AsyncTranslationTask(
            "Hallo",
            DelayedProvider(delay=10),
            worker=worker,
            notifier=notifier,
            timeout_ms=3000,
            poll_interval_ms=50,
        )
        timer = threading.Timer(0.2, token.cancel)
        timer.start()
        started = time.monotonic()
        with pytest.raises(OperationCanceled):
            task.non_blocking_get(token)
        timer.join()
        assert time.monotonic() - started < 2.0
        # Only the waiting caller disengages
        assert not task.is_processed

    def test_already_cancelled_raises_at_once(self, worker, notifier):
        token = CancellationToken()
        token.cancel()
        task = AsyncTranslationTask("Hallo", DelayedProvider(), worker=worker, notifier=notifier)
        with pytest.raises(OperationCanceled):
            task.non_blocking_get(token)

    def test_failure_returns_none_without_retrying(self, worker, notifier):
        task = AsyncTranslationTask(
            "Hallo",
            DelayedProvider(error=ParseError("bad shape", [1])),
            worker=worker,
            notifier=notifier,
        )
        started = time.monotonic()
        assert task.non_blocking_get() is None
        assert time.monotonic() - started < 1.0

    def test_background_timeout_error_is_a_failure(self, worker, notifier):
        """A TimeoutError raised by the work itself is not mistaken for a slow poll."""
        task = AsyncTranslationTask(
            "Hallo",
            DelayedProvider(error=TimeoutError("backend timeout")),
            worker=worker,
            notifier=notifier,
            timeout_ms=3000,
            poll_interval_ms=100,
        )
        started = time.monotonic()
        assert task.non_blocking_get() is None
        assert time.monotonic() - started < 1.0


class TestFailureHandling:
    """Test that failures become a single notification."""

    def test_network_failure_notifies_once(self, worker, notifier):
        error = NetworkError("translate.googleapis.com", httpx.ConnectError("refused"))
        received = []
        task = AsyncTranslationTask(
            "Hallo", DelayedProvider(error=error), worker=worker, notifier=notifier
        )
        task.on_success(received.append)

        assert notifier.displayed.wait(2.0)
        time.sleep(0.1)
        assert task.is_processed
        assert not task.is_succeeded
        assert len(notifier.shown) == 1
        assert notifier.shown[0].error is error
        assert "translate.googleapis.com" in notifier.shown[0].content
        assert received == []

    def test_notification_scheduled_non_modal(self, worker, notifier):
        AsyncTranslationTask(
            "Hallo", DelayedProvider(error=ParseError("bad")), worker=worker, notifier=notifier
        )
        assert notifier.displayed.wait(2.0)
        assert notifier.modalities == [Modality.NON_MODAL]

    def test_success_does_not_notify(self, worker, notifier):
        task = AsyncTranslationTask("Hallo", DelayedProvider(), worker=worker, notifier=notifier)
        assert task.non_blocking_get() == "translated"
        time.sleep(0.05)
        assert notifier.shown == []

    def test_cancel_suppresses_notification(self, worker, notifier):
        task = AsyncTranslationTask(
            "Hallo", DelayedProvider(delay=10), worker=worker, notifier=notifier
        )
        assert task.cancel()
        assert task.is_processed
        assert not task.is_succeeded
        assert task.non_blocking_get() is None
        assert notifier.shown == []


class TestOnSuccess:
    """Test callback delivery of the translated text."""

    def test_callback_after_completion(self, worker, notifier):
        task = AsyncTranslationTask("Hallo", DelayedProvider(), worker=worker, notifier=notifier)
        assert task.non_blocking_get() == "translated"
        received = []
        task.on_success(received.append)
        assert received == ["translated"]

    def test_callback_before_completion(self, worker, notifier):
        delivered = threading.Event()
        received = []

        def callback(text):
            received.append(text)
            delivered.set()

        task = AsyncTranslationTask(
            "Hallo", DelayedProvider(delay=0.1), worker=worker, notifier=notifier
        )
        task.on_success(callback)
        assert delivered.wait(2.0)
        assert received == ["translated"]

    def test_late_result_reaches_callback_after_wait_gave_up(self, worker, notifier):
        delivered = threading.Event()
        task = AsyncTranslationTask(
            "Hallo",
            DelayedProvider(delay=0.4),
            worker=worker,
            notifier=notifier,
            timeout_ms=100,
            poll_interval_ms=50,
        )
        assert task.non_blocking_get() is None
        task.on_success(lambda text: delivered.set())
        assert delivered.wait(2.0)
        assert task.is_succeeded


class TestRequests:
    """Test what the task asks the provider for."""

    def test_documentation_to_primary_language(self, worker, notifier):
        provider = DelayedProvider()
        task = AsyncTranslationTask("<p>Hi</p>", provider, worker=worker, notifier=notifier)
        task.non_blocking_get()
        assert provider.calls == [("documentation", "<p>Hi</p>", Lang.AUTO, Lang.GERMAN)]

    def test_language_hint(self, worker, notifier):
        provider = DelayedProvider()
        task = AsyncTranslationTask.start("Bonjour", Lang.FRENCH, provider, worker=worker, notifier=notifier)
        task.non_blocking_get()
        assert provider.calls == [("documentation", "Bonjour", Lang.FRENCH, Lang.GERMAN)]

    def test_plain_text_mode(self, worker, notifier):
        provider = DelayedProvider()
        task = AsyncTranslationTask(
            "Bonjour", provider, documentation=False, worker=worker, notifier=notifier
        )
        assert task.non_blocking_get() == "translated"
        assert provider.calls[0][0] == "text"

    def test_identical_requests_are_not_coalesced(self, worker, notifier):
        provider = DelayedProvider(delay=0.05)
        first = AsyncTranslationTask("Hallo", provider, worker=worker, notifier=notifier)
        second = AsyncTranslationTask("Hallo", provider, worker=worker, notifier=notifier)
        assert first.non_blocking_get() == second.non_blocking_get() == "translated"
        assert len(provider.calls) == 2

    def test_invalid_poll_interval(self, worker):
        with pytest.raises(ValueError):
            AsyncTranslationTask("Hallo", DelayedProvider(), worker=worker, poll_interval_ms=0)
