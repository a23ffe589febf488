"""Signup and login input checks."""

from __future__ import annotations

import re

from .exceptions import AuthValidationError

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 8


def require_credentials(email: str, password: str) -> None:
    if not email or not password:
        raise AuthValidationError("Email and password are required")


def require_signup_fields(name: str, email: str, password: str) -> None:
    if not name or not email or not password:
        raise AuthValidationError("All fields are required")


def validate_email(email: str) -> None:
    if not EMAIL_PATTERN.match(email):
        raise AuthValidationError("Please enter a valid email address")


def validate_password(password: str) -> None:
    if len(password) < MIN_PASSWORD_LENGTH:
        raise AuthValidationError(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long"
        )
    if not (
        re.search(r"[a-z]", password)
        and re.search(r"[A-Z]", password)
        and re.search(r"[0-9]", password)
    ):
        raise AuthValidationError(
            "Password must contain at least one uppercase letter, one lowercase letter, and one number"
        )


def validate_confirmation(password: str, confirm_password: str) -> None:
    if password != confirm_password:
        raise AuthValidationError("Passwords do not match")


def validate_terms(agree_to_terms: bool) -> None:
    if not agree_to_terms:
        raise AuthValidationError("You must agree to the terms and conditions")


__all__ = [
    "EMAIL_PATTERN",
    "MIN_PASSWORD_LENGTH",
    "require_credentials",
    "require_signup_fields",
    "validate_confirmation",
    "validate_email",
    "validate_password",
    "validate_terms",
]
