"""In-memory implementation of the account repository."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from typing import Iterable

from climatebuddy.modules.accounts.exceptions import AccountAlreadyExistsError, AccountNotFoundError
from climatebuddy.modules.accounts.models import Account, Profile
from climatebuddy.modules.accounts.repository import AccountRepository


class InMemoryAccountRepository(AccountRepository):
    """Accounts keyed by id, with a lowercase email index for lookups."""

    def __init__(self, accounts: Iterable[Account] = ()) -> None:
        self._accounts: dict[str, Account] = {}
        self._ids_by_email: dict[str, str] = {}
        for account in accounts:
            self._insert(account)

    async def get_by_id(self, account_id: str) -> Account | None:
        return self._accounts.get(account_id)

    async def get_by_email(self, email: str) -> Account | None:
        account_id = self._ids_by_email.get(email.lower())
        if account_id is None:
            return None
        return self._accounts.get(account_id)

    async def count(self) -> int:
        return len(self._accounts)

    async def add(self, account: Account) -> Account:
        self._insert(account)
        return account

    async def set_last_login(self, account_id: str, timestamp: datetime) -> Account:
        account = self._require(account_id)
        account.last_login = timestamp
        return account

    async def update_profile(self, account_id: str, profile: Profile) -> Account:
        account = self._require(account_id)
        account.profile = replace(profile, achievements=list(profile.achievements))
        return account

    def _insert(self, account: Account) -> None:
        email_key = account.email.lower()
        if email_key in self._ids_by_email:
            raise AccountAlreadyExistsError("An account with this email already exists")
        if account.id in self._accounts:
            raise ValueError(f"duplicate account id: {account.id}")
        self._accounts[account.id] = account
        self._ids_by_email[email_key] = account.id

    def _require(self, account_id: str) -> Account:
        account = self._accounts.get(account_id)
        if account is None:
            raise AccountNotFoundError("User not found")
        return account
