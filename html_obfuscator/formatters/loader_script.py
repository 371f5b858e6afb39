"""Bare loader formatter — the reconstruction routine on its own.

WHY: Some sites cannot ship a whole new page; they already have a
template and only need a script to drop into it. This formatter emits
just the self-invoking routine, ready to be served as an external
script or pasted into an existing ``<script>`` element.

HOW: Takes OutputDocument.routine and appends a trailing newline so the
file ends cleanly.

RULES:
- Content is the routine text plus a newline, no script tags
- The routine still calls document.open/write/close, so it replaces
  whatever page loads it
- Output suffix: "-loader.js"
- Media type: "application/javascript"
"""

from typing import List

from html_obfuscator.core.ir import OutputDocument
from html_obfuscator.formatters.base import BaseFormatter, FormatterOutput


class LoaderScriptFormatter(BaseFormatter):
    """Formatter that writes only the reconstruction routine."""

    @property
    def name(self) -> str:
        return "Loader Script"

    def format(self, document: OutputDocument) -> List[FormatterOutput]:
        return [
            FormatterOutput(
                suffix="-loader.js",
                content=document.routine + "\n",
                media_type="application/javascript",
            )
        ]
