"""App-wide exception hierarchy.

Route handlers raise these; the handlers in ``exception_handlers`` turn them
into the ``{"success": false, ...}`` error envelope. Domain packages
(``auth``, ``user``) subclass the bases defined here.
"""

from typing import Any


class AppException(Exception):
    """Base exception for all application errors.

    Subclasses set ``status_code`` and ``error_type`` at class level.
    ``details`` is serialized into the response body when present and
    ``headers`` are copied onto the response.
    """

    status_code: int = 500
    error_type: str = "internal_error"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        details: Any = None,
    ):
        self.message = message
        self.details = details
        super().__init__(message)

    @property
    def headers(self) -> dict[str, str] | None:
        return None


# Validation errors (400)
class ValidationError(AppException):
    """Base class for validation errors."""

    status_code = 400
    error_type = "validation_error"

    def __init__(self, message: str = "Validation error", details: Any = None):
        super().__init__(message, details)


class BadRequestError(ValidationError):
    """Raised for general bad request errors."""

    error_type = "bad_request"

    def __init__(self, message: str = "Bad request"):
        super().__init__(message)


# Authorization errors (403)
class AuthorizationError(AppException):
    """Base class for authorization failures."""

    status_code = 403
    error_type = "authorization_error"

    def __init__(self, message: str = "Access denied"):
        super().__init__(message)


# Not found errors (404)
class NotFoundError(AppException):
    """Base class for resource not found errors."""

    status_code = 404
    error_type = "not_found"

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message)


# Conflict errors (409)
class ConflictError(AppException):
    """Base class for resource conflict errors."""

    status_code = 409
    error_type = "conflict"

    def __init__(self, message: str = "Resource conflict"):
        super().__init__(message)


# Rate limit errors (429)
class RateLimitError(AppException):
    """Raised when a rate limit window is exhausted.

    Carries the window state so the response can advertise when the client
    may retry.
    """

    status_code = 429
    error_type = "rate_limit_exceeded"

    def __init__(
        self,
        message: str = "Too many requests, please try again later.",
        *,
        limit: int | None = None,
        reset_at: int | None = None,
        retry_after: int | None = None,
    ):
        self.limit = limit
        self.reset_at = reset_at
        self.retry_after = retry_after
        super().__init__(message)

    @property
    def headers(self) -> dict[str, str] | None:
        headers: dict[str, str] = {}
        if self.limit is not None:
            headers["X-RateLimit-Limit"] = str(self.limit)
            headers["X-RateLimit-Remaining"] = "0"
        if self.reset_at is not None:
            headers["X-RateLimit-Reset"] = str(self.reset_at)
        if self.retry_after is not None:
            headers["Retry-After"] = str(self.retry_after)
        return headers or None


# Internal errors (500)
class InternalError(AppException):
    """Raised for internal server errors."""

    status_code = 500
    error_type = "internal_error"

    def __init__(self, message: str = "Internal server error"):
        super().__init__(message)
