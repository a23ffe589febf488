"""Account domain specific exceptions."""

from climatebuddy.modules.common import DomainError, ErrorCode


class AccountError(DomainError):
    """Base class for account domain errors."""


class AccountAlreadyExistsError(AccountError):
    """Raised when attempting to create an account with a registered email."""

    code = ErrorCode.VALIDATION


class AccountNotFoundError(AccountError):
    """Raised when the requested account cannot be found."""

    code = ErrorCode.NOT_FOUND
