"""Obfuscate-and-copy workflow, independent of any widget toolkit.

WHY: The workflow has a handful of user-visible branches (blank input,
comment-only input, a failed build, a successful build, an empty copy, a
clipboard error) and every host must behave the same way on each.
Putting them in one class lets them be tested without a display.

HOW: ObfuscatorController receives a TextSurface (read input, write
output), a Clipboard, and a NotificationSink. obfuscate() and
copy_output() are the two button actions.

RULES:
- Blank raw input is rejected BEFORE the core runs
- On any failure the output surface is left untouched
- Every branch ends in exactly one notification
- Errors are logged; none propagate to the host's event loop
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Optional

from html_obfuscator.core.errors import EmptyInputError, ObfuscationFailure
from html_obfuscator.core.ir import OutputDocument
from html_obfuscator.core.normalizer import is_blank
from html_obfuscator.core.obfuscator import encode
from html_obfuscator.ui.notifications import (
    COPIED_MESSAGE,
    COPY_FAILED_MESSAGE,
    EMPTY_INPUT_MESSAGE,
    FAILURE_MESSAGE,
    NOTHING_TO_COPY_MESSAGE,
    SUCCESS_MESSAGE,
    NotificationSink,
    Severity,
)

logger = logging.getLogger(__name__)


class TextSurface(ABC):
    """The input and output text areas of a host."""

    @abstractmethod
    def get_input(self) -> str:
        """Return the raw markup the user entered."""

    @abstractmethod
    def get_output(self) -> str:
        """Return the text currently shown as output."""

    @abstractmethod
    def set_output(self, text: str) -> None:
        """Replace the output text."""


class Clipboard(ABC):
    """Host clipboard access."""

    @abstractmethod
    def copy(self, text: str) -> None:
        """Put ``text`` on the clipboard; raise on failure."""


class ObfuscatorController:
    """Drives obfuscation and copying for one host window.

    WHY: Hosts only wire buttons to obfuscate() and copy_output(); the
    branching and messages stay here.

    RULES:
    - unit_width is passed straight to the core (None = auto)
    - obfuscate() returns the OutputDocument on success, None otherwise
    - copy_output() returns True when the clipboard accepted the text
    """

    def __init__(
        self,
        surface: TextSurface,
        sink: NotificationSink,
        clipboard: Clipboard,
        unit_width: Optional[int] = None,
    ) -> None:
        self._surface = surface
        self._sink = sink
        self._clipboard = clipboard
        self.unit_width = unit_width

    def obfuscate(self) -> Optional[OutputDocument]:
        """Obfuscate the input surface into the output surface."""
        raw = self._surface.get_input()
        if is_blank(raw):
            self._sink.notify(EMPTY_INPUT_MESSAGE, Severity.ERROR)
            return None

        try:
            document = encode(raw, self.unit_width)
        except EmptyInputError:
            # Input held only comments
            self._sink.notify(EMPTY_INPUT_MESSAGE, Severity.ERROR)
            return None
        except ObfuscationFailure as exc:
            logger.error("Obfuscation error: %s", exc.message)
            self._sink.notify(
                "{} ({})".format(FAILURE_MESSAGE, exc.message), Severity.ERROR
            )
            return None

        self._surface.set_output(document.html)
        self._sink.notify(SUCCESS_MESSAGE, Severity.SUCCESS)
        return document

    def copy_output(self) -> bool:
        """Copy the output surface to the clipboard."""
        text = self._surface.get_output()
        if not text.strip():
            self._sink.notify(NOTHING_TO_COPY_MESSAGE, Severity.INFO)
            return False

        try:
            self._clipboard.copy(text)
        except Exception:
            logger.exception("Failed to copy text")
            self._sink.notify(COPY_FAILED_MESSAGE, Severity.ERROR)
            return False

        self._sink.notify(COPIED_MESSAGE, Severity.SUCCESS)
        return True
