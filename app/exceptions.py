from typing import Any, Mapping, Optional


class AppError(Exception):
    """Base class for errors that map onto an HTTP error response.

    Attributes:
        message: human-readable message
        details: optional mapping with extra context (field errors, validation info)
        code: machine-readable error code, defaults to the class ``default_code``
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_message = "Application error"
    default_code = "APPLICATION_ERROR"

    def __init__(self, message: Optional[str] = None, details: Optional[Mapping[str, Any]] = None, code: Optional[str] = None):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = dict(self.details)
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(AppError):
    """Raised when input data is invalid or a precondition for a service call is not met."""

    http_status = 400
    default_message = "Invalid input"
    default_code = "SERVICE_VALIDATION_ERROR"


class UnauthorizedError(AppError):
    """Raised when authentication fails."""

    http_status = 401
    default_message = "Unauthorized"
    default_code = "UNAUTHORIZED"


class ForbiddenError(AppError):
    """Raised when a request is refused, e.g. a missing or stale CSRF token."""

    http_status = 403
    default_message = "Forbidden"
    default_code = "FORBIDDEN"


class NotFoundError(AppError):
    """Raised when a requested resource was not found."""

    http_status = 404
    default_message = "Not found"
    default_code = "NOT_FOUND"


class ConflictError(AppError):
    """Raised when a resource conflict occurs."""

    http_status = 409
    default_message = "Conflict"
    default_code = "CONFLICT"


class NonUniqueResultError(ConflictError):
    """Raised when a lookup that expects exactly one row matches several."""

    default_message = "More than one row matched"
    default_code = "NON_UNIQUE_RESULT"


class ConcurrentModificationError(AppError):
    """Raised when an update carries an ETag that no longer matches the stored row."""

    http_status = 412
    default_message = "The entity was modified by another request"
    default_code = "CONCURRENT_MODIFICATION"
