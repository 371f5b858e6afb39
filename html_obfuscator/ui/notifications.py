"""Notification severities, user-facing messages, and sinks.

WHY: The user must be told when input is empty, when obfuscation fails,
and when it succeeds, each distinctly, none of them fatal. Hosts show
notices differently (coloured banner, log line, test assertion), so the
controller talks to an abstract sink instead of widgets.

HOW: Severity is a str Enum. NotificationSink is an ABC with a single
notify() method. RecordingSink keeps every notice (tests, headless use);
LoggingSink forwards them to the logging module.

RULES:
- success, error, and info are the only severities
- Message texts live here so every host shows the same wording
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Messages
# ---------------------------------------------------------------------------

EMPTY_INPUT_MESSAGE = "Please paste some HTML code to obfuscate!"
SUCCESS_MESSAGE = "HTML obfuscated successfully!"
FAILURE_MESSAGE = (
    "An unexpected error occurred during obfuscation. "
    "Please check your input HTML for valid syntax."
)
NOTHING_TO_COPY_MESSAGE = "Nothing to copy! Please obfuscate some HTML first."
COPIED_MESSAGE = "Obfuscated HTML copied to clipboard!"
COPY_FAILED_MESSAGE = (
    "Failed to copy to clipboard. The clipboard may be unavailable "
    "in this environment. Please copy manually."
)


class Severity(str, Enum):
    """How a notice should be presented."""

    SUCCESS = "success"
    ERROR = "error"
    INFO = "info"


@dataclass(frozen=True)
class Notification:
    message: str
    severity: Severity


class NotificationSink(ABC):
    """Where the controller sends user-facing notices."""

    @abstractmethod
    def notify(self, message: str, severity: Severity) -> None:
        """Show ``message`` to the user with the given severity."""


class RecordingSink(NotificationSink):
    """Sink that keeps every notice in order."""

    def __init__(self) -> None:
        self.notifications: List[Notification] = []

    def notify(self, message: str, severity: Severity) -> None:
        self.notifications.append(Notification(message=message, severity=severity))

    @property
    def last(self) -> Optional[Notification]:
        return self.notifications[-1] if self.notifications else None


class LoggingSink(NotificationSink):
    """Sink that writes notices to the log (errors at ERROR, rest at INFO)."""

    def __init__(self, log: Optional[logging.Logger] = None) -> None:
        self._log = log or logger

    def notify(self, message: str, severity: Severity) -> None:
        level = logging.ERROR if severity == Severity.ERROR else logging.INFO
        self._log.log(level, "[%s] %s", severity.value, message)
