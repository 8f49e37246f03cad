"""
Core middleware package.

- Error handling with sensitive data sanitization
- Structured logging with PII masking
- Session authentication helpers used by the API dependencies
"""

from core.middleware.error_handling import (
    ErrorHandlingMiddleware,
    setup_error_handlers,
    sanitize_error_message,
)

from core.middleware.logging import (
    StructuredLoggingMiddleware,
    setup_logging,
)

from core.middleware.authentication import (
    AuthenticationError,
    SessionMissingError,
    SessionInvalidError,
    UserInactiveError,
    extract_session_token,
    resolve_session_user,
)

__all__ = [
    # Error handling
    "ErrorHandlingMiddleware",
    "setup_error_handlers",
    "sanitize_error_message",
    # Logging
    "StructuredLoggingMiddleware",
    "setup_logging",
    # Authentication
    "AuthenticationError",
    "SessionMissingError",
    "SessionInvalidError",
    "UserInactiveError",
    "extract_session_token",
    "resolve_session_user",
]
