"""Exception types raised by the obfuscator core.

WHY: Callers need to tell "you gave me nothing" apart from "something
broke while building the document", and both apart from "this is not a
document I generated". Each surface reports them differently.

RULES:
- EmptyInputError and MalformedDocumentError are also ValueErrors, so
  generic input-validation handlers catch them
- ObfuscationFailure always carries a human-readable .message and is
  raised with ``from`` so the cause stays attached
"""

from __future__ import annotations


class ObfuscatorError(Exception):
    """Base class for all obfuscator errors."""


class EmptyInputError(ObfuscatorError, ValueError):
    """Raised when there is no content left to transform."""

    def __init__(self, message: str = "Input contains no markup to obfuscate.") -> None:
        super().__init__(message)
        self.message = message


class ObfuscationFailure(ObfuscatorError):
    """Raised when the output document cannot be built."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class MalformedDocumentError(ObfuscatorError, ValueError):
    """Raised when a document holds no recognizable reconstruction routine."""
