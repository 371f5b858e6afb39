"""Registry of delivery formats for obfuscated output.

WHY: The CLI's --formats flag and the API's /formats endpoint both name
formats by key. Keeping the mapping in one place means a new delivery
format shows up in both surfaces at once.

HOW: FORMATTERS maps a key to a formatter class. Callers instantiate per
run: ``FORMATTERS["loader_script"]().format(document)``. Dict order is
the order the CLI saves files in.

RULES:
- "html_page" stays first: it is the primary deliverable
- Keys are snake_case; they appear verbatim in CLI flags and API output
- Values are BaseFormatter subclasses, not instances
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from html_obfuscator.formatters.html_page import HtmlPageFormatter
from html_obfuscator.formatters.loader_script import LoaderScriptFormatter

if TYPE_CHECKING:
    from html_obfuscator.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "html_page": HtmlPageFormatter,
    "loader_script": LoaderScriptFormatter,
}
