"""Auth domain exceptions.

Authentication and authorization related exceptions.
"""

from aipromote.core.exceptions import AppException, AuthorizationError, NotFoundError


# Authentication errors (401)
class AuthenticationError(AppException):
    """Base class for authentication failures."""

    status_code = 401
    error_type = "authentication_error"

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message)

    @property
    def headers(self) -> dict[str, str] | None:
        return {"WWW-Authenticate": "Bearer"}


class MissingTokenError(AuthenticationError):
    """Raised when the Authorization header is absent."""

    error_type = "missing_token"

    def __init__(self, message: str = "No authentication token provided"):
        super().__init__(message)


class MalformedAuthHeaderError(AuthenticationError):
    """Raised when the Authorization header is not ``Bearer <token>``."""

    error_type = "malformed_auth_header"

    def __init__(self, message: str = "Malformed authorization header"):
        super().__init__(message)


class InvalidTokenError(AuthenticationError):
    """Raised when a token fails signature, expiry or claim checks."""

    error_type = "invalid_token"

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class InvalidCredentialsError(AuthenticationError):
    """Raised when an email/password combination is rejected.

    Used for both unknown accounts and wrong passwords.
    """

    error_type = "invalid_credentials"

    def __init__(self, message: str = "Invalid credentials"):
        super().__init__(message)


# Authorization errors (403)
class InsufficientPermissionsError(AuthorizationError):
    """Raised when the principal's role is not allowed."""

    error_type = "insufficient_permissions"

    def __init__(self, message: str = "Insufficient permissions"):
        super().__init__(message)


# Not found errors (404)
class VerificationTokenError(NotFoundError):
    """Raised when an email verification token is unknown, used or expired."""

    error_type = "invalid_verification_token"

    def __init__(self, message: str = "Invalid or expired verification token"):
        super().__init__(message)


class ResetTokenError(NotFoundError):
    """Raised when a password reset token is unknown, used or expired."""

    error_type = "invalid_reset_token"

    def __init__(self, message: str = "Invalid or expired reset token"):
        super().__init__(message)
