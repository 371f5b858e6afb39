"""Python re-implementation of the reconstruction routine.

WHY: The generated routine only ever runs in a browser. To check that a
document really decodes back to its markup (in tests, in the CLI's
--reveal mode, and in the API's /reveal endpoint), the same steps have
to be replayed without a JavaScript engine.

HOW: parse_routine() pulls the hex literal and the slice width out of the
routine text. decode_code_units() mirrors the routine: slice, parse base
16, rebuild the UTF-16 string, run the closing-tag substitution.
extract_routine() finds the routine inside a full document.

RULES:
- Only documents produced by this package are recognized
- Surrogate pairs are recombined the way a JavaScript string would
- The closing-tag substitution is applied unconditionally, like the routine
- Anything unrecognizable raises MalformedDocumentError
"""

from __future__ import annotations

import re
from typing import Tuple

from html_obfuscator.config import CLOSING_SCRIPT_TAG
from html_obfuscator.core.errors import MalformedDocumentError

_SCRIPT_REGION_RE = re.compile(r"<script>\s*(.*?)\s*</script>", re.DOTALL | re.IGNORECASE)
_LITERAL_RE = re.compile(r"var a='([0-9a-f]*)'")
_WIDTH_RE = re.compile(r"b\.push\(a\.substring\(c,c\+(\d+)\)\)")


def _units_to_text(units: list[int]) -> str:
    data = b"".join(unit.to_bytes(2, "little") for unit in units)
    return data.decode("utf-16-le", "surrogatepass")


def decode_code_units(codes: str, unit_width: int = 2) -> str:
    """Rebuild the text encoded in ``codes``.

    Raises:
        MalformedDocumentError: The sequence is not a whole number of
            units or holds a non-hex slice.
    """
    if unit_width <= 0 or len(codes) % unit_width:
        raise MalformedDocumentError(
            "Code sequence of length {} does not split into {}-digit units.".format(
                len(codes), unit_width
            )
        )
    try:
        units = [int(codes[i:i + unit_width], 16) for i in range(0, len(codes), unit_width)]
    except ValueError as exc:
        raise MalformedDocumentError("Code sequence holds a non-hex unit.") from exc

    text = _units_to_text(units)
    # Same as the routine's replace(/<\x2Fscript>/g, '<'+'/script>').
    return text.replace(CLOSING_SCRIPT_TAG, "<" + "/script>")


def parse_routine(routine: str) -> Tuple[str, int]:
    """Return ``(codes, unit_width)`` embedded in a reconstruction routine."""
    literal = _LITERAL_RE.search(routine)
    width = _WIDTH_RE.search(routine)
    if literal is None or width is None:
        raise MalformedDocumentError("No reconstruction routine found.")
    return literal.group(1), int(width.group(1))


def decode_routine(routine: str) -> str:
    """Run the routine's reconstruction logic and return its output."""
    codes, unit_width = parse_routine(routine)
    return decode_code_units(codes, unit_width)


def extract_routine(document: str) -> str:
    """Return the text of the single script region in ``document``."""
    match = _SCRIPT_REGION_RE.search(document)
    if match is None:
        raise MalformedDocumentError("Document has no script region.")
    return match.group(1)


def reveal(document: str) -> str:
    """Recover the normalized markup from a generated document."""
    return decode_routine(extract_routine(document))
