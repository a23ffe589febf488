"""Login, signup and session lifecycle for the ClimateBuddy client.

Every public coroutine first awaits the latency simulator and then runs to
completion against the in-memory stores. Domain failures are raised as
``DomainError`` subclasses internally and converted to a failed
``AuthResult`` at the method boundary, so nothing escapes to the caller.
"""

from __future__ import annotations

import functools
import logging
from datetime import datetime, timedelta
from typing import Awaitable, Callable, Sequence

from climatebuddy.core.latency import LatencySimulator
from climatebuddy.core.tokens import TokenIssuer
from climatebuddy.modules.accounts import (
    AccountAlreadyExistsError,
    AccountCreateInput,
    AccountNotFoundError,
    AccountService,
    Profile,
    ProfileUpdateInput,
)
from climatebuddy.modules.accounts.service import utcnow
from climatebuddy.modules.common import DomainError, ErrorCode
from climatebuddy.modules.sessions import Session, SessionRepository

from . import validators
from .exceptions import AuthenticationError, AuthValidationError
from .models import AuthResult, DemoCredential, LoginInput, SignupInput

logger = logging.getLogger(__name__)

UNEXPECTED_ERROR = "An unexpected error occurred"
UNEXPECTED_ERROR_RETRY = "An unexpected error occurred. Please try again."
INVALID_CREDENTIALS = "Invalid email or password"
RESET_LINK_SENT = "If an account with this email exists, a password reset link has been sent."
DEMO_CREDENTIAL_LIMIT = 3

AuthOperation = Callable[..., Awaitable[AuthResult]]


def service_boundary(operation: str, fallback_error: str = UNEXPECTED_ERROR) -> Callable[[AuthOperation], AuthOperation]:
    """Apply simulated latency and turn any failure into a failed ``AuthResult``."""

    def decorator(func: AuthOperation) -> AuthOperation:
        @functools.wraps(func)
        async def wrapper(self: "AuthService", *args, **kwargs) -> AuthResult:
            try:
                await self._latency.wait(operation)
                return await func(self, *args, **kwargs)
            except DomainError as exc:
                return AuthResult.failure(exc.message, exc.code)
            except Exception:  # pylint: disable=broad-except
                logger.exception("Unexpected error during %s", operation)
                return AuthResult.failure(fallback_error, ErrorCode.INTERNAL)

        return wrapper

    return decorator


class AuthService:
    def __init__(
        self,
        accounts: AccountService,
        sessions: SessionRepository,
        *,
        tokens: TokenIssuer,
        latency: LatencySimulator | None = None,
        token_ttl: timedelta = timedelta(hours=24),
        clock: Callable[[], datetime] = utcnow,
        demo_credentials: Sequence[DemoCredential] = (),
    ) -> None:
        self._accounts = accounts
        self._sessions = sessions
        self._tokens = tokens
        self._latency = latency or LatencySimulator.disabled()
        self._token_ttl = token_ttl
        self._clock = clock
        self._demo_credentials = list(demo_credentials)

    @service_boundary("login", UNEXPECTED_ERROR_RETRY)
    async def login(self, credentials: LoginInput) -> AuthResult:
        validators.require_credentials(credentials.email, credentials.password)

        account = await self._accounts.authenticate(credentials.email, credentials.password)
        if account is None:
            logger.info("Rejected login attempt for %s", credentials.email)
            raise AuthenticationError(INVALID_CREDENTIALS)

        account = await self._accounts.set_last_login(account.id)
        session = await self._create_session(account.id)
        logger.info("Account %s logged in", account.id)
        return AuthResult.ok(user=account.to_public(), token=session.token, message="Login successful")

    @service_boundary("signup", UNEXPECTED_ERROR_RETRY)
    async def signup(self, payload: SignupInput) -> AuthResult:
        validators.require_signup_fields(payload.name, payload.email, payload.password)
        if await self._accounts.email_exists(payload.email):
            raise AccountAlreadyExistsError("An account with this email already exists")
        validators.validate_email(payload.email)
        validators.validate_password(payload.password)
        validators.validate_confirmation(payload.password, payload.confirm_password)
        validators.validate_terms(payload.agree_to_terms)

        account = await self._accounts.create_account(
            AccountCreateInput(name=payload.name, email=payload.email, password=payload.password)
        )
        session = await self._create_session(account.id)
        logger.info("Created account %s", account.id)
        return AuthResult.ok(
            user=account.to_public(),
            token=session.token,
            message="Account created successfully",
        )

    @service_boundary("forgot_password", UNEXPECTED_ERROR_RETRY)
    async def forgot_password(self, email: str) -> AuthResult:
        if not email:
            raise AuthValidationError("Email is required")

        # Same answer for known and unknown addresses.
        account = await self._accounts.get_by_email(email)
        if account is not None:
            logger.debug("Password reset requested for account %s", account.id)
        return AuthResult.ok(message=RESET_LINK_SENT)

    @service_boundary("validate_token")
    async def validate_token(self, token: str) -> AuthResult:
        session = await self._sessions.get_by_token(token)
        if session is None:
            raise AuthenticationError("Invalid token")

        if session.is_expired(self._clock()):
            await self._sessions.delete(token)
            logger.info("Session for account %s expired", session.user_id)
            raise AuthenticationError("Token expired")

        account = await self._accounts.get_by_id(session.user_id)
        if account is None:
            raise AccountNotFoundError("User not found")
        return AuthResult.ok(user=account.to_public(), token=session.token)

    @service_boundary("logout")
    async def logout(self, token: str) -> AuthResult:
        if await self._sessions.delete(token):
            logger.info("Session revoked")
        return AuthResult.ok(message="Logged out successfully")

    async def get_user_profile(self, user_id: str) -> Profile | None:
        try:
            await self._latency.wait("get_user_profile")
            return await self._accounts.get_profile(user_id)
        except Exception:  # pylint: disable=broad-except
            logger.exception("Unexpected error while loading profile %s", user_id)
            return None

    @service_boundary("update_user_profile")
    async def update_user_profile(self, user_id: str, patch: ProfileUpdateInput) -> AuthResult:
        await self._accounts.update_profile(user_id, patch)
        return AuthResult.ok(message="Profile updated successfully")

    def get_demo_credentials(self) -> list[DemoCredential]:
        return self._demo_credentials[:DEMO_CREDENTIAL_LIMIT]

    async def _create_session(self, user_id: str) -> Session:
        now = self._clock()
        expires_at = now + self._token_ttl
        session = Session(
            user_id=user_id,
            token=self._tokens.issue(user_id, now, expires_at),
            created_at=now,
            expires_at=expires_at,
        )
        return await self._sessions.add(session)
