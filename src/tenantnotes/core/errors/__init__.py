"""Error handling module with RFC 7807 Problem Details."""

from tenantnotes.core.errors.exceptions import (
    AppException,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    QuotaExceededError,
    ValidationError,
)
from tenantnotes.core.errors.handlers import (
    FieldError,
    ProblemDetail,
    register_exception_handlers,
)


__all__ = [
    # Exceptions
    "AppException",
    "AuthenticationError",
    "AuthorizationError",
    "ConflictError",
    # Handlers
    "FieldError",
    "NotFoundError",
    "ProblemDetail",
    "QuotaExceededError",
    "ValidationError",
    "register_exception_handlers",
]
