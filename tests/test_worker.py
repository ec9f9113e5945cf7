"""Tests for the shared background worker."""

import asyncio
import concurrent.futures
import threading

import pytest

from doctranslate.worker import BackgroundWorker, get_default_worker


class TestBackgroundWorker:
    """Test running coroutines on the worker thread."""

    def test_runs_off_the_calling_thread(self):
        worker = BackgroundWorker()

        async def thread_name():
            return threading.current_thread().name

        try:
            assert worker.submit(thread_name()).result(2.0) == worker.name
        finally:
            worker.shutdown()

    def test_coroutines_run_concurrently(self):
        worker = BackgroundWorker()

        async def slow(value):
            await asyncio.sleep(0.2)
            return value

        try:
            futures = [worker.submit(slow(i)) for i in range(10)]
            assert [f.result(1.0) for f in futures] == list(range(10))
        finally:
            worker.shutdown()

    def test_failure_lands_in_future(self):
        worker = BackgroundWorker()

        async def boom():
            raise RuntimeError("boom")

        try:
            with pytest.raises(RuntimeError, match="boom"):
                worker.submit(boom()).result(2.0)
        finally:
            worker.shutdown()

    def test_shutdown_cancels_pending_work(self):
        worker = BackgroundWorker()
        future = worker.submit(asyncio.sleep(30))
        worker.shutdown()
        with pytest.raises(concurrent.futures.CancelledError):
            future.result(2.0)
        assert not worker.is_running

    def test_cleanup_runs_after_pending_work_is_cancelled(self):
        worker = BackgroundWorker()
        events = []

        async def pending():
            try:
                await asyncio.sleep(30)
            except asyncio.CancelledError:
                events.append("cancelled")
                raise

        async def cleanup():
            events.append(("cleanup", threading.current_thread().name))

        future = worker.submit(pending())
        worker.submit(asyncio.sleep(0)).result(2.0)
        worker.shutdown(cleanup=cleanup)

        assert events == ["cancelled", ("cleanup", worker.name)]
        assert future.cancelled()
        assert not worker.is_running

    def test_failing_cleanup_still_stops_the_loop(self):
        worker = BackgroundWorker()
        worker.submit(asyncio.sleep(0)).result(2.0)

        async def cleanup():
            raise RuntimeError("close failed")

        with pytest.raises(RuntimeError, match="close failed"):
            worker.shutdown(cleanup=cleanup)
        assert not worker.is_running

    def test_cleanup_skipped_when_never_started(self):
        called = []

        async def cleanup():
            called.append(True)

        BackgroundWorker().shutdown(cleanup=cleanup)
        assert called == []

    def test_restarts_after_shutdown(self):
        worker = BackgroundWorker()
        worker.submit(asyncio.sleep(0)).result(2.0)
        worker.shutdown()
        assert worker.submit(asyncio.sleep(0, result="again")).result(2.0) == "again"
        worker.shutdown()

    def test_default_worker_is_shared(self):
        assert get_default_worker() is get_default_worker()
