"""Hex transcoding, reconstruction-routine synthesis, and document assembly.

WHY: The browser must rebuild the markup without the markup ever
appearing in the delivered source. The transcoder turns the normalized
text into a run of hex digits and generates a tiny self-invoking
JavaScript routine that turns those digits back into text and writes it
over the hosting document.

HOW: Three steps, all plain string work, nothing is evaluated here:
  1. encode_code_units() renders each UTF-16 code unit as fixed-width hex
  2. build_routine() embeds the hex literal in the loader expression
  3. render_document() drops the routine into the fixed HTML skeleton
build_document() runs all three and returns the OutputDocument;
transcode() returns just the final HTML text.

RULES:
- Width 2 output is the classic two-digit loader, byte for byte
- Width 2 refuses code units above 0xFF instead of emitting digits
  the routine would mis-slice
- Width None picks 2 when every unit fits in a byte, otherwise 4
- The routine text never contains a raw closing script tag; the
  substitution step still runs unconditionally on the rebuilt text
- Any unexpected error surfaces as ObfuscationFailure, never a partial
  document
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional

from html_obfuscator.config import (
    DOCUMENT_CHARSET,
    DOCUMENT_TITLE,
    NARROW_UNIT_WIDTH,
    WIDE_UNIT_WIDTH,
)
from html_obfuscator.core.errors import ObfuscationFailure
from html_obfuscator.core.ir import CodeUnitSequence, OutputDocument

logger = logging.getLogger(__name__)

_VALID_WIDTHS = (NARROW_UNIT_WIDTH, WIDE_UNIT_WIDTH)

# Routine fragments. The literal goes between PREFIX and the slicing loop.
# ``<\x2Fscript>`` and ``'<'+'/script>'`` keep the closing tag out of the
# routine's own source text.
_ROUTINE_PREFIX = "(function(){var a='"
_ROUTINE_SLICE = "',b=[],c,d='';for(c=0;c<a.length;c+={width}){{b.push(a.substring(c,c+{width}));}}"
_ROUTINE_DECODE = "for(c=0;c<b.length;c++){d+=String.fromCharCode(parseInt(b[c],16));}"
_ROUTINE_NEUTRALIZE = "d=d.replace(/<\\x2Fscript>/g,'<'+'/script>');"
_ROUTINE_RENDER = "document.open();document.write(d);document.close();})();"

_DOCUMENT_TEMPLATE = (
    "<!DOCTYPE html>\n"
    "<html>\n"
    "<head>\n"
    "    <meta charset=\"{charset}\">\n"
    "    <title>{title}</title>\n"
    "</head>\n"
    "<body>\n"
    "    <script>\n"
    "        {routine}\n"
    "    </script>\n"
    "</body>\n"
    "</html>"
)


def code_units(text: str) -> Iterator[int]:
    """Yield the UTF-16 code units of ``text``, in order.

    Characters outside the Basic Multilingual Plane come out as their
    surrogate pair. Lone surrogates pass through unchanged.
    """
    data = text.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def choose_unit_width(text: str) -> int:
    """Return 2 when every code unit fits in one byte, otherwise 4."""
    if all(unit <= 0xFF for unit in code_units(text)):
        return NARROW_UNIT_WIDTH
    return WIDE_UNIT_WIDTH


def encode_code_units(text: str, unit_width: Optional[int] = None) -> CodeUnitSequence:
    """Render ``text`` as concatenated fixed-width lowercase hex.

    Args:
        text: Normalized markup.
        unit_width: 2, 4, or None to pick automatically.

    Returns:
        The CodeUnitSequence holding the hex payload and its width.

    Raises:
        ObfuscationFailure: ``unit_width`` is not 2/4/None, or width 2 was
            forced on text holding a code unit above 0xFF.
    """
    if unit_width is None:
        unit_width = choose_unit_width(text)
    if unit_width not in _VALID_WIDTHS:
        raise ObfuscationFailure(
            "Unsupported unit width {}; expected 2 or 4.".format(unit_width)
        )

    limit = 16 ** unit_width
    digits = []
    for position, unit in enumerate(code_units(text)):
        if unit >= limit:
            raise ObfuscationFailure(
                "Character U+{:04X} at code unit {} does not fit in {} hex digits; "
                "use unit width 4 or auto.".format(unit, position, unit_width)
            )
        digits.append(format(unit, "0{}x".format(unit_width)))

    return CodeUnitSequence(codes="".join(digits), unit_width=unit_width)


def build_routine(sequence: CodeUnitSequence) -> str:
    """Generate the self-invoking loader expression for ``sequence``.

    The routine slices the literal into ``unit_width``-digit units, parses
    each as base 16, rebuilds the string, neutralizes closing script tags,
    and replaces the hosting document with the result.
    """
    return "".join([
        _ROUTINE_PREFIX,
        sequence.codes,
        _ROUTINE_SLICE.format(width=sequence.unit_width),
        _ROUTINE_DECODE,
        _ROUTINE_NEUTRALIZE,
        _ROUTINE_RENDER,
    ])


def render_document(routine: str) -> str:
    """Wrap ``routine`` in the fixed document skeleton."""
    return _DOCUMENT_TEMPLATE.format(
        charset=DOCUMENT_CHARSET,
        title=DOCUMENT_TITLE,
        routine=routine,
    )


def build_document(normalized: str, unit_width: Optional[int] = None) -> OutputDocument:
    """Transcode normalized text into a complete OutputDocument.

    WHY: Formatters and the API need every intermediate artifact, not
    just the final HTML.

    RULES:
    - ObfuscationFailure from the encoding step passes through as is
    - Any other exception is logged and wrapped in ObfuscationFailure
    - Nothing is returned unless the whole document was built
    """
    try:
        sequence = encode_code_units(normalized, unit_width)
        routine = build_routine(sequence)
        html = render_document(routine)
    except ObfuscationFailure:
        raise
    except Exception as exc:
        logger.exception("Building the output document failed")
        raise ObfuscationFailure(
            "An unexpected error occurred while building the document: {}".format(exc)
        ) from exc

    logger.debug(
        "Encoded %d code units at width %d (%d hex digits)",
        sequence.unit_count, sequence.unit_width, len(sequence.codes),
    )
    return OutputDocument(
        normalized=normalized,
        code_units=sequence,
        routine=routine,
        html=html,
    )


def transcode(normalized: str, unit_width: Optional[int] = None) -> str:
    """Transcode normalized text and return the final document text."""
    return build_document(normalized, unit_width).html
