# File: swatches/api/error_handlers.py

"""
Global exception handlers.

Every failure leaves the API as ``{"error": <message>}`` with the status
the error carries:

  - SwatchesError (validation / not found / store) -> its own http_status
  - RequestValidationError (malformed JSON, body not an object) -> 422
  - HTTPException from routing or the static mount (unknown path under
    /api/v1, wrong method) -> its own status, detail as the message
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from swatches.core.errors import StoreError, SwatchesError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""

    @app.exception_handler(SwatchesError)
    async def swatches_error_handler(request: Request, exc: SwatchesError):
        if isinstance(exc, StoreError):
            logger.error(
                "%s %s failed in the store: %s",
                request.method, request.url.path, exc.message,
            )
        else:
            logger.info(
                "%s %s -> %s: %s",
                request.method, request.url.path, exc.http_status, exc.message,
            )
        return JSONResponse(status_code=exc.http_status, content=exc.to_response())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        logger.info("Unreadable body on %s: %s", request.url.path, exc.errors())
        return JSONResponse(
            status_code=422,
            content={"error": _describe(exc)},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.detail},
            headers=getattr(exc, "headers", None),
        )


def _describe(exc: RequestValidationError) -> str:
    parts = []
    for e in exc.errors():
        loc = ".".join(str(p) for p in e.get("loc", ()))
        parts.append(f"{loc}: {e.get('msg')}" if loc else str(e.get("msg")))
    return "; ".join(parts) or "Invalid request"
