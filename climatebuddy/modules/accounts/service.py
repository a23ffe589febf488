"""Domain services for account management."""

from __future__ import annotations

import random
from dataclasses import replace
from datetime import datetime, timezone
from typing import Callable

from climatebuddy.core.crypto import PasswordHasher

from .exceptions import AccountAlreadyExistsError, AccountNotFoundError
from .models import Account, AccountCreateInput, Profile, ProfileUpdateInput
from .repository import AccountRepository

AVATAR_URL = "https://images.unsplash.com/photo-{photo_id}?w=150&h=150&fit=crop&crop=face"


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AccountService:
    """Encapsulates core account use cases."""

    def __init__(
        self,
        repository: AccountRepository,
        *,
        hasher: PasswordHasher | None = None,
        clock: Callable[[], datetime] = utcnow,
        rng: random.Random | None = None,
    ) -> None:
        self._repository = repository
        self._hasher = hasher or PasswordHasher()
        self._clock = clock
        self._rng = rng or random.Random()

    async def get_by_id(self, account_id: str) -> Account | None:
        return await self._repository.get_by_id(account_id)

    async def get_by_email(self, email: str) -> Account | None:
        return await self._repository.get_by_email(email)

    async def email_exists(self, email: str) -> bool:
        return await self._repository.get_by_email(email) is not None

    async def authenticate(self, email: str, password: str) -> Account | None:
        account = await self._repository.get_by_email(email)
        if account is None:
            self._hasher.verify_decoy(password)
            return None
        if not self._hasher.verify(password, account.password_hash):
            return None
        return account

    async def create_account(self, payload: AccountCreateInput) -> Account:
        if await self.email_exists(payload.email):
            raise AccountAlreadyExistsError("An account with this email already exists")

        now = self._clock()
        account = Account(
            id=await self._next_id(),
            name=payload.name,
            email=payload.email,
            password_hash=self._hasher.hash(payload.password),
            subscription=payload.subscription,
            avatar=AVATAR_URL.format(photo_id=self._rng.randrange(1_000_000_000)),
            created_at=now,
            last_login=now,
            profile=Profile(),
        )
        return await self._repository.add(account)

    async def set_last_login(self, account_id: str) -> Account:
        return await self._repository.set_last_login(account_id, self._clock())

    async def get_profile(self, account_id: str) -> Profile | None:
        account = await self._repository.get_by_id(account_id)
        if account is None:
            return None
        profile = account.profile
        return replace(profile, achievements=list(profile.achievements))

    async def update_profile(self, account_id: str, payload: ProfileUpdateInput) -> Account:
        current = await self._repository.get_by_id(account_id)
        if current is None:
            raise AccountNotFoundError("User not found")

        changes = payload.changes()
        if "achievements" in changes:
            changes["achievements"] = list(changes["achievements"])
        return await self._repository.update_profile(account_id, replace(current.profile, **changes))

    async def _next_id(self) -> str:
        # Sequential ids, skipping any already taken by seeded accounts.
        candidate = await self._repository.count() + 1
        while await self._repository.get_by_id(str(candidate)) is not None:
            candidate += 1
        return str(candidate)
