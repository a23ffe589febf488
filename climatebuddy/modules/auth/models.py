"""Inputs and results of the auth use cases."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from climatebuddy.modules.accounts.models import PublicUser
from climatebuddy.modules.common import ErrorCode


@dataclass(slots=True)
class LoginInput:
    email: str
    password: str
    remember_me: bool = False


@dataclass(slots=True)
class SignupInput:
    name: str
    email: str
    password: str
    confirm_password: str
    agree_to_terms: bool
    newsletter: bool = False


@dataclass(slots=True)
class DemoCredential:
    email: str
    password: str
    name: str


@dataclass(slots=True)
class AuthResult:
    """Outcome of an auth operation. Failures are values, never exceptions."""

    success: bool
    user: Optional[PublicUser] = None
    token: Optional[str] = None
    error: Optional[str] = None
    message: Optional[str] = None
    code: Optional[ErrorCode] = None

    @classmethod
    def ok(
        cls,
        *,
        user: PublicUser | None = None,
        token: str | None = None,
        message: str | None = None,
    ) -> "AuthResult":
        return cls(success=True, user=user, token=token, message=message)

    @classmethod
    def failure(cls, error: str, code: ErrorCode) -> "AuthResult":
        return cls(success=False, error=error, code=code)
