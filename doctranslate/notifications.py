"""Presentable failure notifications and their scheduling on the UI thread."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from doctranslate.errors import NetworkError, ParseError, TranslationError

logger = logging.getLogger(__name__)

NOTIFICATION_TITLE = "Documentation translation"


class Modality(Enum):
    """Scheduling priority of UI-thread callbacks."""

    NON_MODAL = "non_modal"
    DEFAULT = "default"
    ANY = "any"


@dataclass(frozen=True)
class Notification:
    title: str
    content: str
    error: BaseException
    context: Any = None


DisplayFn = Callable[[Notification], None]
InvokeLaterFn = Callable[[Callable[[], None], Modality], None]


def describe_error(error: BaseException) -> str:
    """One-line, user-facing description of a translation failure."""
    if isinstance(error, NetworkError):
        return f"Translation failed: unable to reach {error.host}. Check your network connection."
    if isinstance(error, ParseError):
        return "Translation failed: the translation service returned an unexpected response."
    if isinstance(error, TranslationError):
        return f"Translation failed: {error}"
    return f"Translation failed: {str(error) or type(error).__name__}"


def build_warning(error: BaseException, context: Any = None) -> Notification:
    return Notification(NOTIFICATION_TITLE, describe_error(error), error, context)


def log_notification(notification: Notification) -> None:
    logger.warning(
        "%s: %s",
        notification.title,
        notification.content,
        exc_info=(type(notification.error), notification.error, notification.error.__traceback__),
    )


def invoke_immediately(callback: Callable[[], None], modality: Modality) -> None:
    callback()


class Notifier:
    """Turns failures into warnings and hands them to the UI thread.

    Args:
        display: Renders a notification. Defaults to logging it.
        invoke_later: Schedules a callback on the UI thread at a given
            modality. Defaults to running it immediately.
    """

    def __init__(
        self,
        display: DisplayFn | None = None,
        invoke_later: InvokeLaterFn | None = None,
    ) -> None:
        self.display = display or log_notification
        self.invoke_later = invoke_later or invoke_immediately

    def show_warning(self, error: BaseException, context: Any = None) -> None:
        notification = build_warning(error, context)
        self.invoke_later(lambda: self.display(notification), Modality.NON_MODAL)
