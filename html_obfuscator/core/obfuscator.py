"""Single entry point chaining normalization and transcoding.

WHY: Every surface (CLI, GUI controller, HTTP API) does the same thing:
clean the markup, then build the document. Keeping that sequence in one
function means the surfaces cannot drift apart.

RULES:
- EmptyInputError and ObfuscationFailure propagate unchanged
- Any other exception escaping either stage becomes ObfuscationFailure
"""

from __future__ import annotations

import logging
from typing import Optional

from html_obfuscator.core.errors import EmptyInputError, ObfuscationFailure
from html_obfuscator.core.ir import OutputDocument
from html_obfuscator.core.normalizer import normalize
from html_obfuscator.core.transcoder import build_document

logger = logging.getLogger(__name__)


def encode(markup: str, unit_width: Optional[int] = None) -> OutputDocument:
    """Obfuscate ``markup`` into a self-decoding OutputDocument.

    Args:
        markup: Raw markup text.
        unit_width: Hex digits per code unit (2 or 4), or None for auto.

    Returns:
        The complete OutputDocument.

    Raises:
        EmptyInputError: Nothing to obfuscate after cleaning.
        ObfuscationFailure: The document could not be built.
    """
    try:
        normalized = normalize(markup)
        return build_document(normalized, unit_width)
    except (EmptyInputError, ObfuscationFailure):
        raise
    except Exception as exc:
        logger.exception("Obfuscation failed")
        raise ObfuscationFailure(
            "An unexpected error occurred during obfuscation: {}".format(exc)
        ) from exc
