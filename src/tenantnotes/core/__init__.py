"""Core services and cross-cutting concerns."""

from tenantnotes.core.database import Base, get_db
from tenantnotes.core.errors import (
    AppException,
    AuthenticationError,
    AuthorizationError,
    ConflictError,
    NotFoundError,
    QuotaExceededError,
    ValidationError,
    register_exception_handlers,
)


__all__ = [
    # Errors
    "AppException",
    "AuthenticationError",
    "AuthorizationError",
    # Database
    "Base",
    "ConflictError",
    "NotFoundError",
    "QuotaExceededError",
    "ValidationError",
    "get_db",
    "register_exception_handlers",
]
