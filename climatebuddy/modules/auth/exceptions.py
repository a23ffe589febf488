"""Auth domain specific exceptions."""

from climatebuddy.modules.common import DomainError, ErrorCode


class AuthError(DomainError):
    """Base class for auth domain errors."""


class AuthValidationError(AuthError):
    """Raised when submitted credentials or signup data are malformed."""

    code = ErrorCode.VALIDATION


class AuthenticationError(AuthError):
    """Raised for wrong credentials and for invalid or expired tokens."""

    code = ErrorCode.UNAUTHORIZED
