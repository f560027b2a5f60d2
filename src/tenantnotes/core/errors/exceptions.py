"""Domain exceptions for the application.

These exceptions represent business-logic errors and are automatically
converted to RFC 7807 Problem Details responses by the exception handlers.
"""

from typing import Any


class AppException(Exception):
    """Base exception for all application errors.

    All domain exceptions should inherit from this class.

    Attributes:
        message: Human-readable error message
        error_code: Machine-readable error code for clients
        status_code: HTTP status code for the response
        details: Additional error details
    """

    message: str = "An unexpected error occurred"
    error_code: str = "internal_error"
    status_code: int = 500

    def __init__(
        self,
        message: str | None = None,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.message = message or self.message
        self.error_code = error_code or self.error_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(AppException):
    """Raised when request data is missing or malformed.

    Example:
        raise ValidationError(
            "Title and content required",
            errors=[{"field": "title", "message": "Field required"}]
        )
    """

    message = "Validation error"
    error_code = "validation_error"
    status_code = 400

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if errors:
            details["errors"] = errors
        super().__init__(message=message, details=details, **kwargs)


class AuthenticationError(AppException):
    """Raised when a credential is missing, invalid or expired.

    Every flavour of credential failure is reported with the same message
    and code so clients cannot tell a forged token from an expired one.
    """

    message = "Invalid or expired credential"
    error_code = "invalid_token"
    status_code = 401


class AuthorizationError(AppException):
    """Raised when an authenticated caller lacks the role or tenant.

    Example:
        raise AuthorizationError("Admin access required", error_code="admin_required")
    """

    message = "Access forbidden"
    error_code = "forbidden"
    status_code = 403


class QuotaExceededError(AppException):
    """Raised when a tenant has used up its plan's note allowance."""

    message = "Note limit reached for free plan"
    error_code = "quota_exceeded"
    status_code = 403

    def __init__(
        self,
        message: str | None = None,
        upgrade_hint: str = "Upgrade to Pro to create unlimited notes",
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        details["upgrade_hint"] = upgrade_hint
        super().__init__(message=message, details=details, **kwargs)


class NotFoundError(AppException):
    """Raised when a resource is absent from the caller's visible scope.

    Resources owned by another tenant are reported exactly like missing
    ones, so no ``resource_id`` is echoed back for tenant-scoped lookups.

    Example:
        raise NotFoundError("Note not found", resource="note")
    """

    message = "Resource not found"
    error_code = "not_found"
    status_code = 404

    def __init__(
        self,
        message: str | None = None,
        resource: str | None = None,
        **kwargs: Any,
    ) -> None:
        details = kwargs.pop("details", {})
        if resource:
            details["resource"] = resource
        super().__init__(message=message, details=details, **kwargs)


class ConflictError(AppException):
    """Raised when a state transition is refused.

    Example:
        raise ConflictError("Tenant is already on Pro plan", error_code="already_pro")
    """

    message = "Resource conflict"
    error_code = "conflict"
    status_code = 400
