"""Pydantic schemas used across the project.

Field names follow the camelCase shapes the browser client sends and reads
(``confirmPassword``, ``createdAt``, ``ageGroup``); snake_case names are
accepted as well.
"""
from __future__ import annotations

from datetime import datetime
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from climatebuddy.modules.accounts import ProfileUpdateInput
from climatebuddy.modules.auth import AuthResult, LoginInput, SignupInput


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class LoginRequest(CamelModel):
    email: str = ""
    password: str = ""
    remember_me: bool = False

    def to_input(self) -> LoginInput:
        return LoginInput(email=self.email, password=self.password, remember_me=self.remember_me)


class SignupRequest(CamelModel):
    name: str = ""
    email: str = ""
    password: str = ""
    confirm_password: str = ""
    agree_to_terms: bool = False
    newsletter: bool = False

    def to_input(self) -> SignupInput:
        return SignupInput(
            name=self.name,
            email=self.email,
            password=self.password,
            confirm_password=self.confirm_password,
            agree_to_terms=self.agree_to_terms,
            newsletter=self.newsletter,
        )


class ForgotPasswordRequest(CamelModel):
    email: str = ""


class PublicUserResponse(CamelModel):
    id: str
    email: str
    name: str
    avatar: Optional[str] = None
    subscription: Literal["free", "premium", "enterprise"]
    created_at: Optional[datetime] = None
    last_login: Optional[datetime] = None


class AuthResultResponse(CamelModel):
    success: bool
    user: Optional[PublicUserResponse] = None
    token: Optional[str] = None
    error: Optional[str] = None
    message: Optional[str] = None
    code: Optional[str] = None

    @classmethod
    def from_domain(cls, result: AuthResult) -> "AuthResultResponse":
        return cls(
            success=result.success,
            user=PublicUserResponse.model_validate(result.user) if result.user else None,
            token=result.token,
            error=result.error,
            message=result.message,
            code=result.code.value if result.code else None,
        )


class ProfileResponse(CamelModel):
    age_group: Literal["child", "teen", "adult", "general"]
    knowledge_level: Literal["beginner", "intermediate", "advanced"]
    language: str
    location: str
    points: int
    level: int
    achievements: list[str] = Field(default_factory=list)


class ProfileUpdateRequest(CamelModel):
    model_config = ConfigDict(extra="ignore")

    age_group: Optional[Literal["child", "teen", "adult", "general"]] = None
    knowledge_level: Optional[Literal["beginner", "intermediate", "advanced"]] = None
    language: Optional[str] = None
    location: Optional[str] = None
    points: Optional[int] = Field(default=None, ge=0)
    level: Optional[int] = Field(default=None, ge=1)
    achievements: Optional[list[str]] = None

    def to_input(self) -> ProfileUpdateInput:
        return ProfileUpdateInput(**self.model_dump(exclude_unset=True, exclude_none=True))


class DemoCredentialResponse(CamelModel):
    email: str
    password: str
    name: str


class StateValue(BaseModel):
    value: Any = None


class StateEntryResponse(BaseModel):
    key: str
    value: Any = None
