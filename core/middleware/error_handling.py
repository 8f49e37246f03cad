"""
Error handling with security-compliant error sanitization.

Every error response has the shape ``{"message": ..., "errors": [...]}``
(``errors`` only for validation failures). Internal details are logged
server-side and never returned to the client.
"""

import logging
import re
from typing import Any, Callable
from fastapi import Request, Response, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from sqlalchemy.exc import SQLAlchemyError

from database.errors import InvalidChangeError, RecordNotFoundError, StorageError

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Internal server error"
VALIDATION_ERROR_MESSAGE = "Invalid request data"

# Patterns for sensitive data that should never be logged
SENSITIVE_PATTERNS = [
    re.compile(r'password["\s:=]+[^"\s,}]+', re.IGNORECASE),
    re.compile(r'token["\s:=]+[^"\s,}]+', re.IGNORECASE),
    re.compile(r'api[_-]?key["\s:=]+[^"\s,}]+', re.IGNORECASE),
    re.compile(r'secret["\s:=]+[^"\s,}]+', re.IGNORECASE),
    re.compile(r'cookie["\s:]+[^"\s,}]+', re.IGNORECASE),
    re.compile(r'\b\d{3}-\d{2}-\d{4}\b'),  # SSN
    re.compile(r'\b\d{16}\b'),  # Credit card
]

# Leading location segments FastAPI adds that mean nothing to API clients
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def sanitize_error_message(message: str) -> str:
    """
    Remove sensitive information from error messages.

    Args:
        message: Original error message

    Returns:
        Sanitized error message
    """
    sanitized = str(message)
    for pattern in SENSITIVE_PATTERNS:
        sanitized = pattern.sub('[REDACTED]', sanitized)
    return sanitized


def humanize_entity(name: str) -> str:
    """``OnboardingTask`` -> ``Onboarding task``."""
    words = re.sub(r"(?<!^)(?=[A-Z])", " ", name).lower()
    return words[:1].upper() + words[1:]


def format_validation_errors(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    """
    Format pydantic/FastAPI validation errors into a client-friendly list.

    Input values are never echoed back since they may hold passwords.
    """
    formatted = []
    for error in errors:
        loc = [str(part) for part in error.get("loc", ())]
        if len(loc) > 1 and loc[0] in _LOCATION_PREFIXES:
            loc = loc[1:]
        formatted.append(
            {
                "field": ".".join(loc),
                "message": sanitize_error_message(error.get("msg", "")),
                "type": error.get("type", "value_error"),
            }
        )
    return formatted


def error_response(status_code: int, message: str, **extra: Any) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": message, **extra})


class ErrorHandlingMiddleware:
    """
    Last-resort catch-all for exceptions no handler claimed.

    Responds 500 with the generic message and logs the sanitized error.
    """

    def __init__(self, app: Callable, debug: bool = False):
        """
        Args:
            app: The ASGI application
            debug: Whether to log tracebacks for database errors
        """
        self.app = app
        self.debug = debug

    async def __call__(self, scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        try:
            await self.app(scope, receive, send)
        except Exception as exc:
            response = await self._handle_exception(exc, scope)
            await response(scope, receive, send)

    async def _handle_exception(self, exc: Exception, scope: dict) -> Response:
        request_path = scope.get("path", "unknown")
        request_method = scope.get("method", "unknown")

        if isinstance(exc, SQLAlchemyError):
            # driver messages can carry bound parameters
            logger.error(
                f"SQLAlchemy error: {request_method} {request_path} - {type(exc).__name__}",
                exc_info=self.debug,
            )
        else:
            logger.error(
                f"Unhandled exception: {request_method} {request_path} - "
                f"{type(exc).__name__}: {sanitize_error_message(str(exc))}",
                exc_info=True,
            )

        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE)


def setup_error_handlers(app):
    """
    Set up exception handlers for FastAPI application.

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        """Handle HTTP exceptions."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": sanitize_error_message(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        """Validation failures are client errors (400), not 422."""
        errors = format_validation_errors(exc.errors())
        logger.warning(
            f"Validation error: {request.method} {request.url.path} - "
            f"fields: {[e['field'] for e in errors]}"
        )
        return error_response(
            status.HTTP_400_BAD_REQUEST, VALIDATION_ERROR_MESSAGE, errors=errors
        )

    @app.exception_handler(InvalidChangeError)
    async def invalid_change_handler(request: Request, exc: InvalidChangeError):
        return error_response(
            status.HTTP_400_BAD_REQUEST,
            VALIDATION_ERROR_MESSAGE,
            errors=[{"field": exc.field, "message": exc.message, "type": "value_error"}],
        )

    @app.exception_handler(RecordNotFoundError)
    async def not_found_handler(request: Request, exc: RecordNotFoundError):
        return error_response(
            status.HTTP_404_NOT_FOUND, f"{humanize_entity(exc.entity)} not found"
        )

    @app.exception_handler(StorageError)
    async def storage_error_handler(request: Request, exc: StorageError):
        # the service layer already logged the driver error with its traceback
        logger.error(
            f"Storage error: {request.method} {request.url.path} - {exc}"
        )
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE)

    @app.exception_handler(SQLAlchemyError)
    async def sqlalchemy_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error(
            f"SQLAlchemy error: {request.method} {request.url.path}",
            exc_info=exc,
        )
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, GENERIC_ERROR_MESSAGE)
