"""Delivery-format contract: how an obfuscation result becomes files.

WHY: One obfuscation run yields several usable artifacts (the full
self-decoding page, the bare loader routine). The CLI saves them next to
the source file and the API advertises them under /formats; neither
should care which artifact a format picks out of the OutputDocument.

HOW: BaseFormatter declares a display ``name`` and ``format()``, which
maps an OutputDocument to FormatterOutput records. Each record pairs the
text to write with the file suffix and the MIME type the API reports.

RULES:
- Formatters only select and package; they never re-encode or re-run
  the routine, so every format carries the same payload
- ``suffix`` starts with a hyphen and ends with the file extension,
  e.g. ``"-obfuscated.html"``; the CLI prepends the input stem and
  inserts a counter before the extension on name conflicts
- Content is text; the CLI writes it as UTF-8
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from html_obfuscator.core.ir import OutputDocument


@dataclass
class FormatterOutput:
    """One delivery artifact cut from an OutputDocument.

    Attributes:
        suffix: Appended to the input stem, e.g. ``"-loader.js"`` turns
                ``landing.html`` into ``landing-loader.js``.
        content: The page or script text, exactly as it is delivered.
        media_type: ``"text/html"`` for pages, ``"application/javascript"``
                    for bare routines.
    """

    suffix: str
    content: str
    media_type: str


class BaseFormatter(ABC):
    """A way of packaging the obfuscated payload for delivery.

    New formats subclass this, pick their artifact out of the
    OutputDocument, and register under a key in FORMATTERS.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable format name, e.g. 'HTML Page'."""

    @abstractmethod
    def format(self, document: OutputDocument) -> list[FormatterOutput]:
        """Package ``document`` as one or more delivery artifacts."""
