"""Load the static user-record file that seeds the in-memory stores."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Annotated, Optional

from pydantic import AfterValidator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from climatebuddy.core.crypto import PasswordHasher
from climatebuddy.modules.accounts.models import (
    Account,
    AgeGroup,
    KnowledgeLevel,
    Profile,
    Subscription,
)
from climatebuddy.modules.auth.models import DemoCredential
from climatebuddy.modules.sessions.models import Session

logger = logging.getLogger(__name__)


def _assume_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


# Timestamps without an offset are read as UTC.
UtcDatetime = Annotated[datetime, AfterValidator(_assume_utc)]


class _SeedModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class SeedProfile(_SeedModel):
    age_group: AgeGroup = "adult"
    knowledge_level: KnowledgeLevel = "beginner"
    language: str = "en"
    location: str = "Unknown"
    points: int = 0
    level: int = 1
    achievements: list[str] = Field(default_factory=list)


class SeedUser(_SeedModel):
    id: str
    name: str
    email: str
    password: str
    avatar: Optional[str] = None
    subscription: Subscription = "free"
    created_at: Optional[UtcDatetime] = None
    last_login: Optional[UtcDatetime] = None
    profile: SeedProfile = Field(default_factory=SeedProfile)


class SeedSession(_SeedModel):
    user_id: str
    token: str
    created_at: UtcDatetime
    expires_at: UtcDatetime


class SeedFile(_SeedModel):
    users: list[SeedUser] = Field(default_factory=list)
    sessions: list[SeedSession] = Field(default_factory=list)


@dataclass(slots=True)
class SeedData:
    accounts: list[Account] = field(default_factory=list)
    sessions: list[Session] = field(default_factory=list)
    demo_credentials: list[DemoCredential] = field(default_factory=list)


def parse_seed(raw: str | bytes, *, hasher: PasswordHasher | None = None) -> SeedData:
    hasher = hasher or PasswordHasher()
    seed = SeedFile.model_validate_json(raw)
    accounts = [_to_account(user, hasher) for user in seed.users]
    sessions = [
        Session(
            user_id=item.user_id,
            token=item.token,
            created_at=item.created_at,
            expires_at=item.expires_at,
        )
        for item in seed.sessions
    ]
    credentials = [
        DemoCredential(email=user.email, password=user.password, name=user.name)
        for user in seed.users
    ]
    return SeedData(accounts=accounts, sessions=sessions, demo_credentials=credentials)


def load_seed(path: Path, *, hasher: PasswordHasher | None = None) -> SeedData:
    data = parse_seed(path.read_bytes(), hasher=hasher)
    logger.info(
        "Loaded %d seed accounts and %d sessions from %s",
        len(data.accounts),
        len(data.sessions),
        path,
    )
    return data


def _to_account(user: SeedUser, hasher: PasswordHasher) -> Account:
    return Account(
        id=user.id,
        name=user.name,
        email=user.email,
        password_hash=hasher.hash(user.password),
        subscription=user.subscription,
        avatar=user.avatar,
        created_at=user.created_at,
        last_login=user.last_login,
        profile=Profile(**user.profile.model_dump()),
    )


__all__ = ["SeedData", "SeedFile", "load_seed", "parse_seed"]
