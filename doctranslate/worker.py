"""Shared background worker running translation coroutines off the caller's thread."""

import asyncio
import concurrent.futures
import logging
import threading
from typing import Any, Awaitable, Callable, Coroutine, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class BackgroundWorker:
    """An asyncio event loop on a dedicated daemon thread.

    Coroutines submitted from any thread run concurrently on the loop; the
    caller observes each one through a ``concurrent.futures.Future``.
    """

    def __init__(self, name: str = "doctranslate-worker") -> None:
        self.name = name
        self._loop: asyncio.AbstractEventLoop | None = None
        self._thread: threading.Thread | None = None
        self._lock = threading.Lock()

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def _ensure_started(self) -> asyncio.AbstractEventLoop:
        with self._lock:
            if self._loop is None or not self.is_running:
                loop = asyncio.new_event_loop()
                ready = threading.Event()
                thread = threading.Thread(
                    target=self._run, args=(loop, ready), name=self.name, daemon=True
                )
                thread.start()
                ready.wait()
                self._loop, self._thread = loop, thread
                logger.debug("Background worker %s started", self.name)
            return self._loop

    @staticmethod
    def _run(loop: asyncio.AbstractEventLoop, ready: threading.Event) -> None:
        asyncio.set_event_loop(loop)
        loop.call_soon(ready.set)
        try:
            loop.run_forever()
        finally:
            loop.close()

    def submit(self, coro: Coroutine[Any, Any, T]) -> "concurrent.futures.Future[T]":
        """Schedule ``coro`` on the worker loop without waiting for it."""
        return asyncio.run_coroutine_threadsafe(coro, self._ensure_started())

    def shutdown(
        self,
        timeout: float | None = 5.0,
        cleanup: Callable[[], Awaitable[Any]] | None = None,
    ) -> None:
        """Cancel pending work and stop the loop thread.

        Args:
            timeout: Seconds to wait for each stage of the shutdown.
            cleanup: Coroutine function awaited on the loop once pending work
                is cancelled, e.g. to close clients bound to the loop.
        """
        with self._lock:
            loop, thread = self._loop, self._thread
            self._loop = self._thread = None
        if loop is None or thread is None:
            return

        async def _cancel_pending() -> None:
            current = asyncio.current_task()
            tasks = [t for t in asyncio.all_tasks() if t is not current]
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            if cleanup is not None:
                await cleanup()

        try:
            asyncio.run_coroutine_threadsafe(_cancel_pending(), loop).result(timeout)
        except concurrent.futures.TimeoutError:
            logger.warning("Background worker %s: pending tasks did not stop in time", self.name)
        finally:
            loop.call_soon_threadsafe(loop.stop)
            thread.join(timeout)
            logger.debug("Background worker %s stopped", self.name)


_default_worker: BackgroundWorker | None = None
_default_lock = threading.Lock()


def get_default_worker() -> BackgroundWorker:
    """The process-wide worker shared by all tasks that do not bring their own."""
    global _default_worker
    with _default_lock:
        if _default_worker is None:
            _default_worker = BackgroundWorker()
        return _default_worker
