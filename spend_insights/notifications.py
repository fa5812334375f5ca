"""Notification sinks for prediction outcomes (toast/alert style)."""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Optional

from spend_insights.utils.logging import get_logger


logger = get_logger(__name__)


class Notifier(ABC):
    """Fire-and-forget notice sink."""

    @abstractmethod
    def info(self, message: str) -> None:
        ...

    @abstractmethod
    def error(self, message: str) -> None:
        ...


class LoggingNotifier(Notifier):
    """Writes notices to the application log."""

    def __init__(self, name: str = "spend_insights.notices") -> None:
        self._logger = get_logger(name)

    def info(self, message: str) -> None:
        self._logger.info(message)

    def error(self, message: str) -> None:
        self._logger.error(message)


class CallbackNotifier(Notifier):
    """Forwards notices to UI callbacks."""

    def __init__(
        self,
        on_info: Optional[Callable[[str], None]] = None,
        on_error: Optional[Callable[[str], None]] = None,
    ) -> None:
        self._on_info = on_info
        self._on_error = on_error

    def info(self, message: str) -> None:
        if self._on_info is not None:
            self._on_info(message)

    def error(self, message: str) -> None:
        if self._on_error is not None:
            self._on_error(message)


def safe_notify(notifier: Optional[Notifier], level: str, message: str) -> None:
    """Deliver a notice; sink failures are logged and never propagate."""
    if notifier is None:
        return
    try:
        getattr(notifier, level)(message)
    except Exception as e:
        logger.warning(f"Notifier failed to deliver {level} notice: {e}")
