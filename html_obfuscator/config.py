"""Configuration constants, unit-width parsing, and .env loading.

WHY: Centralizes all configurable values so they are easy to find,
update, and override. The document skeleton constants, the default
code-unit width, and the API/GUI defaults are plain data, not buried
in logic, so both humans and tools can change them confidently.

HOW: python-dotenv loads the .env file on import. Constants are defined
as module-level strings and numbers. parse_unit_width() turns the
user-facing width choice ("auto", "2", "4") into the value the
transcoder expects.

RULES:
- DOCUMENT_TITLE and DOCUMENT_CHARSET are part of the output contract
  and are NOT overridable from the environment
- Everything else can be overridden via OBFUSCATOR_* environment variables
- "auto" width means: 2 hex digits when the text fits, otherwise 4
"""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

from dotenv import load_dotenv

# Load .env from the project root (where the script is run from)
load_dotenv()

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Output document skeleton
# ---------------------------------------------------------------------------

DOCUMENT_TITLE = "Obfuscated Page"
DOCUMENT_CHARSET = "UTF-8"

CLOSING_SCRIPT_TAG = "</script>"
"""The token that would terminate the hosting script region early."""

# ---------------------------------------------------------------------------
# Code-unit width
# ---------------------------------------------------------------------------

UNIT_WIDTH_CHOICES = ("auto", "2", "4")
"""User-facing width choices (CLI flag, API field, env var)."""

NARROW_UNIT_WIDTH = 2
WIDE_UNIT_WIDTH = 4


def parse_unit_width(value: Union[str, int, None]) -> Optional[int]:
    """Map a width choice to the transcoder's unit width.

    WHY: The CLI, the API and the environment all accept the width as a
    string. The transcoder wants either a concrete digit count or None
    (pick automatically).

    RULES:
    - None, "" and "auto" → None
    - "2"/2 → 2, "4"/4 → 4
    - Anything else raises ValueError listing the valid choices
    """
    if value is None:
        return None
    text = str(value).strip().lower()
    if text in ("", "auto"):
        return None
    if text == str(NARROW_UNIT_WIDTH):
        return NARROW_UNIT_WIDTH
    if text == str(WIDE_UNIT_WIDTH):
        return WIDE_UNIT_WIDTH
    raise ValueError(
        "Invalid unit width '{}'. Choose one of: {}".format(
            value, ", ".join(UNIT_WIDTH_CHOICES)
        )
    )


def resolve_default_unit_width(raw: Optional[str]) -> str:
    """Validate the OBFUSCATOR_UNIT_WIDTH setting.

    An unset or invalid value falls back to "auto"; an invalid one is
    logged so a typo in .env does not crash the GUI or CLI at startup.
    """
    if raw is None:
        return "auto"
    choice = raw.strip().lower() or "auto"
    if choice not in UNIT_WIDTH_CHOICES:
        logger.warning(
            "Ignoring OBFUSCATOR_UNIT_WIDTH=%r; expected one of %s. Using 'auto'.",
            raw, ", ".join(UNIT_WIDTH_CHOICES),
        )
        return "auto"
    return choice


DEFAULT_UNIT_WIDTH = resolve_default_unit_width(os.getenv("OBFUSCATOR_UNIT_WIDTH"))
"""Always one of UNIT_WIDTH_CHOICES."""

# ---------------------------------------------------------------------------
# UI, API and logging defaults
# ---------------------------------------------------------------------------

NOTICE_DURATION_S = float(os.getenv("OBFUSCATOR_NOTICE_SECONDS", "5"))
"""How long a transient notice stays visible in the GUI."""

API_HOST = os.getenv("OBFUSCATOR_API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("OBFUSCATOR_API_PORT", "8000"))

LOG_LEVEL = os.getenv("OBFUSCATOR_LOG_LEVEL", "WARNING").upper()
