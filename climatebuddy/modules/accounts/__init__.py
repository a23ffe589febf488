"""Account domain services and models."""

from .models import (
    Account,
    AccountCreateInput,
    Profile,
    ProfileUpdateInput,
    PublicUser,
    UNSET,
)
from .repository import AccountRepository
from .service import AccountService
from .exceptions import (
    AccountError,
    AccountAlreadyExistsError,
    AccountNotFoundError,
)

__all__ = [
    "Account",
    "AccountCreateInput",
    "AccountRepository",
    "AccountService",
    "AccountError",
    "AccountAlreadyExistsError",
    "AccountNotFoundError",
    "Profile",
    "ProfileUpdateInput",
    "PublicUser",
    "UNSET",
]
