"""Error Handlers — global exception handlers for the user API.

Invariants:
    - UsersApiError → its http_status with {"status", "message"[, "errors"]}
    - RequestValidationError → 400 with field-level error details
    - Exception (catch-all) → 500, never leaks internal details, never exits
    - Every error response uses the same {"status", "message"} envelope

Design Decisions:
    - Three-layer handler: domain (UsersApiError), validation (Pydantic), catch-all (Exception)
    - Extracted from main.py so tests can build an app with the same handlers
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from users_api.core.errors import UsersApiError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_users_api_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_users_api_error_handler(app: FastAPI) -> None:
    """Register domain/infrastructure error handler."""

    @app.exception_handler(UsersApiError)
    async def users_api_error_handler(request: Request, exc: UsersApiError):
        """Handle all user API domain/infrastructure errors."""
        log = logger.warning if exc.http_status < 500 else logger.error
        log(
            f"UsersApiError: {exc.message}",
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
        """Handle malformed bodies and wrong field types."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=_build_validation_error_response(exc),
        )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        logger.error(
            f"Unhandled exception on {request.url.path}: {exc}",
            exc_info=True,
        )
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "status": status.HTTP_500_INTERNAL_SERVER_ERROR,
                "message": "An unexpected error occurred",
            },
        )


def _build_validation_error_response(exc: RequestValidationError) -> dict:
    """Build structured validation error response."""
    return {
        "status": status.HTTP_400_BAD_REQUEST,
        "message": "Invalid request data",
        "errors": [
            {
                "field": ".".join(str(loc) for loc in e["loc"]),
                "message": e["msg"],
                "type": e["type"],
            }
            for e in exc.errors()
        ],
    }
