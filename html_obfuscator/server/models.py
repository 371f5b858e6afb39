"""Pydantic request/response models for the HTTP API.

WHY: The FastAPI endpoints need typed schemas for request validation,
response serialization, and automatic OpenAPI documentation.

HOW: Each endpoint pair (request + response) has its own model. The unit
width is a closed enum matching the CLI choices. All models include Field
descriptions for rich OpenAPI docs.

RULES:
- All models use Field(description=...) for OpenAPI documentation
- UnitWidth values match config.UNIT_WIDTH_CHOICES exactly
- Python 3.9+ compatible (no PEP 604 unions, use Optional from typing)
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class UnitWidth(str, Enum):
    """Hex digits per UTF-16 code unit."""

    auto = "auto"
    narrow = "2"
    wide = "4"


# ---------------------------------------------------------------------------
# Request models
# ---------------------------------------------------------------------------


class ObfuscationRequest(BaseModel):
    """Markup to obfuscate plus encoding options."""

    markup: str = Field(description="Raw HTML markup to obfuscate.")
    unit_width: UnitWidth = Field(
        default=UnitWidth.auto,
        description=(
            "Hex digits per UTF-16 code unit. 'auto' uses 2 when every unit "
            "fits in one byte, otherwise 4. '2' rejects wider characters."
        ),
    )

    model_config = {"json_schema_extra": {
        "examples": [
            {"markup": "<p>Hi</p>", "unit_width": "auto"}
        ]
    }}


class RevealRequest(BaseModel):
    """A previously generated document to decode."""

    document: str = Field(description="Full obfuscated HTML document.")


# ---------------------------------------------------------------------------
# Response models
# ---------------------------------------------------------------------------


class ObfuscationResponse(BaseModel):
    """Result of one obfuscation.

    RULES:
    - document is the complete page, ready to serve
    - routine is the bare loader, for embedding in an existing page
    """

    document: str = Field(description="Complete obfuscated HTML document.")
    routine: str = Field(description="The self-invoking reconstruction routine on its own.")
    normalized: str = Field(description="The cleaned markup the routine rebuilds.")
    unit_width: int = Field(description="Hex digits used per code unit (2 or 4).")
    code_unit_count: int = Field(description="Number of UTF-16 code units encoded.")

    model_config = {"json_schema_extra": {
        "examples": [
            {
                "document": "<!DOCTYPE html>\n<html>...</html>",
                "routine": "(function(){var a='3c703e48693c2f703e',...})();",
                "normalized": "<p>Hi</p>",
                "unit_width": 2,
                "code_unit_count": 9,
            }
        ]
    }}


class RevealResponse(BaseModel):
    markup: str = Field(description="Markup rebuilt by the document's routine.")


class FormatInfo(BaseModel):
    """Description of an available output format."""

    key: str = Field(description="Format identifier.")
    name: str = Field(description="Human-readable format name.")
    suffix: str = Field(description="File suffix produced (e.g. '-obfuscated.html').")
    media_type: str = Field(description="MIME type of the produced file.")


class ErrorResponse(BaseModel):
    """Standard error response body.

    RULES:
    - detail is always a human-readable error message
    """

    detail: str = Field(description="Human-readable error description.")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(description="Service health status.", json_schema_extra={"example": "ok"})
    version: str = Field(description="API version string.", json_schema_extra={"example": "0.1.0"})
