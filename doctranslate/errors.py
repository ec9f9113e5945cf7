"""Error types raised by translation providers and tasks."""

from __future__ import annotations

import httpx


class TranslatorError(Exception):
    """Base exception for translation failures."""


class NetworkError(TranslatorError):
    """The translation backend could not be reached.

    Raised for transport-level failures only (connectivity, timeouts, TLS).
    Recoverable: callers may retry later or fall back to the original text.
    """

    def __init__(self, host: str, cause: BaseException | None = None) -> None:
        detail = f": {cause}" if cause is not None else ""
        super().__init__(f"Unable to reach {host}{detail}")
        self.host = host
        self.cause = cause

    @classmethod
    def wrap_if_network_error(cls, error: BaseException, host: str) -> BaseException:
        """Wrap transport failures into a NetworkError, pass anything else through."""
        if isinstance(error, httpx.TransportError):
            return cls(host, error)
        return error


class ParseError(TranslatorError):
    """The backend answered with a body of unexpected shape.

    Fatal to the request that produced it; ``fragment`` holds the raw JSON
    (or JSON fragment) that could not be decoded.
    """

    def __init__(self, message: str, fragment: object = None) -> None:
        super().__init__(message)
        self.fragment = fragment

    def __str__(self) -> str:
        message = super().__str__()
        if self.fragment is None:
            return message
        return f"{message}: {self.fragment}"


class TranslationError(TranslatorError):
    """The backend refused the request, or the request itself is invalid."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class OperationCanceled(Exception):
    """The waiting caller's operation was cancelled.

    Deliberately not a TranslatorError: cancellation is not a failure.
    """
