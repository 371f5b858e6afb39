"""FastAPI application with obfuscation API routes and OpenAPI docs.

WHY: External clients (site builders, CMS hooks, curl) need an HTTP API
to obfuscate markup and to check what a generated page decodes to.
FastAPI provides automatic OpenAPI documentation and request validation.

HOW: A single FastAPI app exposes five endpoints grouped by tags.
POST /obfuscations returns the document and its parts as JSON;
POST /obfuscations/document returns the page itself as text/html;
POST /reveal decodes a generated page. /formats and /health are
informational.

RULES:
- Obfuscation runs inline in the request; it is pure and fast
- EmptyInputError and MalformedDocumentError → 400
- Text that cannot be encoded as UTF-8 (lone surrogates) → 400, since
  it could never be serialized back into a JSON response
- ObfuscationFailure → 422
- Error responses use the ErrorResponse schema
- Python 3.9+ compatible (no match/case, no PEP 604 unions)
"""

from __future__ import annotations

import logging
from typing import List

from fastapi import FastAPI, HTTPException
from fastapi.responses import Response

from html_obfuscator import __version__
from html_obfuscator.config import API_HOST, API_PORT, parse_unit_width
from html_obfuscator.core.decoder import reveal
from html_obfuscator.core.errors import (
    EmptyInputError,
    MalformedDocumentError,
    ObfuscationFailure,
)
from html_obfuscator.core.ir import OutputDocument
from html_obfuscator.core.obfuscator import encode
from html_obfuscator.formatters import FORMATTERS
from html_obfuscator.server.models import (
    ErrorResponse,
    FormatInfo,
    HealthResponse,
    ObfuscationRequest,
    ObfuscationResponse,
    RevealRequest,
    RevealResponse,
)

logger = logging.getLogger(__name__)

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Empty markup or markup that is not valid UTF-8"},
    422: {"model": ErrorResponse, "description": "Markup could not be obfuscated"},
}

app = FastAPI(
    title="HTML Obfuscator API",
    description=(
        "REST API that turns HTML markup into a self-decoding page whose "
        "source does not show the original markup, and decodes such pages "
        "back. Not a security boundary: the output decodes itself."
    ),
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _require_utf8(text: str, field: str) -> None:
    """Reject text holding lone surrogates with a 400.

    WHY: JSON allows escapes like "\\ud800" that decode to unpaired
    surrogates. The core passes them through, but the response could
    never be encoded as UTF-8.
    """
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise HTTPException(
            status_code=400,
            detail="{} is not valid UTF-8: unpaired surrogate U+{:04X} at position {}.".format(
                field, ord(exc.object[exc.start]), exc.start
            ),
        )


def _obfuscate(request: ObfuscationRequest) -> OutputDocument:
    """Run the core, translating its errors into HTTP errors."""
    _require_utf8(request.markup, "Markup")
    try:
        return encode(request.markup, parse_unit_width(request.unit_width.value))
    except EmptyInputError as exc:
        raise HTTPException(status_code=400, detail=exc.message)
    except ObfuscationFailure as exc:
        logger.warning("Obfuscation failed: %s", exc.message)
        raise HTTPException(status_code=422, detail=exc.message)


# ---------------------------------------------------------------------------
# Endpoints: Obfuscation
# ---------------------------------------------------------------------------


@app.post(
    "/obfuscations",
    response_model=ObfuscationResponse,
    status_code=201,
    tags=["obfuscation"],
    summary="Obfuscate markup",
    description=(
        "Strips comments, collapses whitespace, and returns the obfuscated "
        "document together with its reconstruction routine."
    ),
    responses=_ERROR_RESPONSES,
)
async def create_obfuscation(request: ObfuscationRequest) -> ObfuscationResponse:
    document = _obfuscate(request)
    return ObfuscationResponse(
        document=document.html,
        routine=document.routine,
        normalized=document.normalized,
        unit_width=document.unit_width,
        code_unit_count=document.code_units.unit_count,
    )


@app.post(
    "/obfuscations/document",
    tags=["obfuscation"],
    summary="Obfuscate markup and return the page",
    description="Same as POST /obfuscations but responds with the HTML page itself.",
    responses={
        200: {"content": {"text/html": {}}, "description": "The obfuscated page"},
        **_ERROR_RESPONSES,
    },
)
async def create_obfuscated_document(request: ObfuscationRequest) -> Response:
    document = _obfuscate(request)
    return Response(content=document.html, media_type="text/html")


@app.post(
    "/reveal",
    response_model=RevealResponse,
    tags=["obfuscation"],
    summary="Decode a generated page",
    description="Replays the page's reconstruction routine and returns the markup it writes.",
    responses={400: {"model": ErrorResponse, "description": "Not a generated document"}},
)
async def reveal_document(request: RevealRequest) -> RevealResponse:
    try:
        markup = reveal(request.document)
    except MalformedDocumentError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    _require_utf8(markup, "Revealed markup")
    return RevealResponse(markup=markup)


# ---------------------------------------------------------------------------
# Endpoints: Formats
# ---------------------------------------------------------------------------


@app.get(
    "/formats",
    response_model=List[FormatInfo],
    tags=["formats"],
    summary="List available output formats",
    description="Returns all registered output formats with their suffixes and MIME types.",
)
async def list_formats() -> List[FormatInfo]:
    sample = encode("<p></p>")
    result = []
    for key, formatter_cls in sorted(FORMATTERS.items()):
        formatter = formatter_cls()
        first = formatter.format(sample)[0]
        result.append(FormatInfo(
            key=key,
            name=formatter.name,
            suffix=first.suffix,
            media_type=first.media_type,
        ))
    return result


# ---------------------------------------------------------------------------
# Endpoints: Health
# ---------------------------------------------------------------------------


@app.get(
    "/health",
    response_model=HealthResponse,
    tags=["health"],
    summary="Health check",
    description="Liveness and readiness check for load balancers and orchestrators.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok", version=__version__)


def run_api():
    """Entry point for the html-obfuscator-api console script."""
    import uvicorn
    uvicorn.run(app, host=API_HOST, port=API_PORT)
