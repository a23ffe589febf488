"""Repository protocol for accounts."""

from __future__ import annotations

from datetime import datetime
from typing import Protocol

from .models import Account, Profile


class AccountRepository(Protocol):
    """Abstract repository interface for account storage."""

    async def get_by_id(self, account_id: str) -> Account | None:
        ...

    async def get_by_email(self, email: str) -> Account | None:
        """Case-insensitive lookup."""
        ...

    async def count(self) -> int:
        ...

    async def add(self, account: Account) -> Account:
        ...

    async def set_last_login(self, account_id: str, timestamp: datetime) -> Account:
        ...

    async def update_profile(self, account_id: str, profile: Profile) -> Account:
        ...
