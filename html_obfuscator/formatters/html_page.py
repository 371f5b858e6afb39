"""Full-page formatter — the standalone obfuscated document.

WHY: The usual deliverable is a page that can be uploaded as is and
rebuilds itself in the browser.

RULES:
- Content is OutputDocument.html verbatim, nothing appended
- Output suffix: "-obfuscated.html"
- Media type: "text/html"
"""

from typing import List

from html_obfuscator.core.ir import OutputDocument
from html_obfuscator.formatters.base import BaseFormatter, FormatterOutput


class HtmlPageFormatter(BaseFormatter):
    """Formatter that writes the complete obfuscated page."""

    @property
    def name(self) -> str:
        return "HTML Page"

    def format(self, document: OutputDocument) -> List[FormatterOutput]:
        return [
            FormatterOutput(
                suffix="-obfuscated.html",
                content=document.html,
                media_type="text/html",
            )
        ]
