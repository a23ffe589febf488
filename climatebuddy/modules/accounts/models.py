"""Domain models for accounts."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal, Optional

Subscription = Literal["free", "premium", "enterprise"]
AgeGroup = Literal["child", "teen", "adult", "general"]
KnowledgeLevel = Literal["beginner", "intermediate", "advanced"]


@dataclass(slots=True)
class Profile:
    age_group: AgeGroup = "adult"
    knowledge_level: KnowledgeLevel = "beginner"
    language: str = "en"
    location: str = "Unknown"
    points: int = 0
    level: int = 1
    achievements: list[str] = field(default_factory=list)


@dataclass(slots=True)
class PublicUser:
    """Account fields that are safe to hand back to a caller."""

    id: str
    email: str
    name: str
    subscription: Subscription
    created_at: Optional[datetime]
    last_login: Optional[datetime]
    avatar: Optional[str] = None


@dataclass(slots=True)
class Account:
    id: str
    name: str
    email: str
    password_hash: str = field(repr=False)
    subscription: Subscription = "free"
    avatar: Optional[str] = None
    created_at: Optional[datetime] = None
    last_login: Optional[datetime] = None
    profile: Profile = field(default_factory=Profile)

    def to_public(self) -> PublicUser:
        return PublicUser(
            id=self.id,
            email=self.email,
            name=self.name,
            avatar=self.avatar,
            subscription=self.subscription,
            created_at=self.created_at,
            last_login=self.last_login,
        )


@dataclass(slots=True)
class AccountCreateInput:
    name: str
    email: str
    password: str
    subscription: Subscription = "free"


# Sentinel used to differentiate between "not provided" and explicit None.
UNSET = object()


@dataclass(slots=True)
class ProfileUpdateInput:
    age_group: AgeGroup | object = UNSET
    knowledge_level: KnowledgeLevel | object = UNSET
    language: str | object = UNSET
    location: str | object = UNSET
    points: int | object = UNSET
    level: int | object = UNSET
    achievements: list[str] | object = UNSET

    def changes(self) -> dict[str, object]:
        return {
            name: getattr(self, name)
            for name in self.__slots__
            if getattr(self, name) is not UNSET
        }
