"""Cooperative cancellation signal shared between a caller and its waits."""

import threading

from doctranslate.errors import OperationCanceled


class CancellationToken:
    """Thread-safe, one-way cancellation flag.

    The owner calls :meth:`cancel`; code waiting on its behalf calls
    :meth:`check_canceled` between bounded waits.
    """

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()

    def check_canceled(self) -> None:
        """Raise OperationCanceled if :meth:`cancel` has been called."""
        if self._event.is_set():
            raise OperationCanceled()
