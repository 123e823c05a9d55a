"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain, search
transport and framework exceptions to HTTP responses.
"""

import logging
from typing import Any

import httpx
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from whitehall.core.config import get_settings
from whitehall.domain.exceptions import WhitehallException

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status when applicable
_ERROR_CODE_STATUS: dict[str, int] = {
    "SEARCH_RESPONSE_INVALID": 502,
    "SERVICE_UNAVAILABLE": 503,
}


def _whitehall_exception_handler(
    request: Request, exc: WhitehallException
) -> JSONResponse:
    """Return JSON from WhitehallException.to_dict() with appropriate status code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    if status >= 500:
        logger.error("%s on %s: %s", exc.error_code, request.url.path, exc.message)
    return JSONResponse(status_code=status, content=exc.to_dict())


def _search_transport_exception_handler(
    request: Request, exc: httpx.HTTPError
) -> JSONResponse:
    """Search provider unreachable, timed out, or answered with an error status."""
    logger.error("Search provider request failed on %s: %r", request.url.path, exc)
    return JSONResponse(
        status_code=502,
        content={"error": "SEARCH_UNAVAILABLE", "message": "Search is temporarily unavailable"},
    )


def _validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 with validation error details."""
    return JSONResponse(
        status_code=422,
        content={
            "error": "VALIDATION_ERROR",
            "message": "Request validation failed",
            "details": exc.errors(),
        },
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (status + detail)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": "HTTP_ERROR", "message": exc.detail},
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    detail: Any = str(exc) if settings.debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"error": "INTERNAL_ERROR", "message": detail},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Handlers: WhitehallException (and subclasses), httpx.HTTPError,
    RequestValidationError, StarletteHTTPException, generic Exception.
    """
    app.add_exception_handler(WhitehallException, _whitehall_exception_handler)
    app.add_exception_handler(httpx.HTTPError, _search_transport_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
