"""Error Handlers — global exception handlers mapping failures to ErrorBody.

Invariants:
    - DemoServerError → its http_status with {"error", "timestamp"}
    - RequestValidationError → 400 ErrorBody (never FastAPI's default 422 shape)
    - Exception (catch-all) → 500 ErrorBody, never leaks internal details
    - The CORS middleware renders route exceptions through internal_error_response
      so 500s keep their CORS headers; the registered catch-all covers the rest

Design Decisions:
    - Three-layer handler: domain (DemoServerError), validation (Pydantic), catch-all (Exception)
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.core.errors import DemoServerError
from app.schemas.responses import ErrorBody

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_domain_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=ErrorBody(error=message).model_dump(mode="json"),
    )


def _register_domain_error_handler(app: FastAPI) -> None:
    """Register request-level domain error handler."""

    @app.exception_handler(DemoServerError)
    async def domain_error_handler(request: Request, exc: DemoServerError):
        logger.warning(
            f"{exc.code}: {exc.message}",
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
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
        )
        return _error_response(status.HTTP_400_BAD_REQUEST, "Invalid request data")


def internal_error_response(request: Request, exc: Exception) -> JSONResponse:
    """Log an unhandled exception and render the opaque 500 ErrorBody."""
    logger.error(
        f"Unhandled exception on {request.url.path}: {exc}",
        exc_info=exc,
    )
    return _error_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR, "An unexpected error occurred",
    )


def _register_generic_error_handler(app: FastAPI) -> None:
    """Register catch-all error handler."""

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — never leaks internal details."""
        return internal_error_response(request, exc)
