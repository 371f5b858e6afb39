"""Intermediate representation dataclasses for an obfuscation run.

WHY: The transcoder produces several related artifacts: the hex code
sequence, the reconstruction routine, and the final document. Formatters,
the API, and tests each need a different piece. Returning one well-typed
container keeps them from re-deriving anything.

HOW: Two frozen dataclasses:
  CodeUnitSequence: the hex payload plus the digit width it was built with
  OutputDocument:   the normalized text, payload, routine, and final HTML

RULES:
- Both dataclasses are frozen; nothing mutates them after construction
- CodeUnitSequence.codes always has even length and is lowercase hex
- OutputDocument.html is exactly what gets delivered to the browser
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CodeUnitSequence:
    """Hex rendering of every UTF-16 code unit of the normalized text.

    RULES:
    - codes: concatenated lowercase hex, ``unit_width`` digits per unit
    - unit_width: 2 (one byte per unit) or 4 (full 16-bit unit)
    """

    codes: str
    unit_width: int

    @property
    def unit_count(self) -> int:
        """Number of code units encoded in the sequence."""
        return len(self.codes) // self.unit_width

    def pairs(self) -> list[str]:
        """Split the sequence into 2-digit byte slices, front to back."""
        return [self.codes[i:i + 2] for i in range(0, len(self.codes), 2)]


@dataclass(frozen=True)
class OutputDocument:
    """The complete result of one obfuscation.

    WHY: Callers mostly want ``html``, but the loader-script formatter
    needs ``routine`` on its own and the API reports the payload size.

    RULES:
    - normalized: the text the routine reconstructs at load time
    - code_units: the payload embedded in the routine
    - routine: the self-invoking JavaScript expression, no script tags
    - html: the full document skeleton with ``routine`` embedded verbatim
    """

    normalized: str
    code_units: CodeUnitSequence
    routine: str
    html: str

    @property
    def unit_width(self) -> int:
        return self.code_units.unit_width
