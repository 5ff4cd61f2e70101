"""Error Handlers — global exception handlers mapping failures to the error envelope.

Invariants:
    - KeyforgeError → {"success": false, "error": <precise message>} with its http_status
    - RequestValidationError → coarse "Missing required fields" (400); field detail logged only
    - Framework HTTPException (404, 405) → same envelope, original status and headers
    - Exception (catch-all) → 500, never leaks internal details
    - Request bodies are never logged (they may carry secret keys)

Design Decisions:
    - Four handlers: domain (KeyforgeError), validation (Pydantic), routing (HTTPException), catch-all (Exception)
    - Coarse boundary message, precise core messages: the boundary only knows
      the shape was wrong, the core knows which field and why
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from keyforge.core.errors import InvalidRequestError, KeyforgeError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_keyforge_error_handler(app)
    _register_validation_error_handler(app)
    _register_http_exception_handler(app)
    _register_generic_error_handler(app)


def _register_keyforge_error_handler(app: FastAPI) -> None:
    """Register Keyforge domain error handler."""

    @app.exception_handler(KeyforgeError)
    async def keyforge_error_handler(request: Request, exc: KeyforgeError):
        """Handle all Keyforge domain errors."""
        logger.warning(
            f"KeyforgeError: {exc.message}",
            extra={"error_code": exc.code, "path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.http_status, content=exc.to_response(),
        )


def _register_validation_error_handler(app: FastAPI) -> None:
    """Register Pydantic validation error handler."""

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle Pydantic validation errors with the coarse boundary message."""
        logger.warning(
            f"Validation error on {request.url.path}: {_summarize(exc)}",
            extra={"error_code": "INVALID_REQUEST", "path": request.url.path},
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=InvalidRequestError().to_response(),
        )


def _register_http_exception_handler(app: FastAPI) -> None:
    """Register framework HTTPException handler (404, 405, ...)."""

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(
        request: Request, exc: StarletteHTTPException,
    ):
        """Wrap routing errors in the failure envelope, keeping status and headers."""
        logger.warning(
            f"HTTP {exc.status_code} on {request.url.path}: {exc.detail}",
            extra={"path": request.url.path},
        )
        return JSONResponse(
            status_code=exc.status_code,
            content={"success": False, "error": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {type(exc).__name__}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"success": False, "error": "An unexpected error occurred"},
        )


def _summarize(exc: RequestValidationError) -> list[dict]:
    """Field locations and messages only; input values are dropped."""
    return [
        {
            "field": ".".join(str(loc) for loc in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in exc.errors()
    ]
