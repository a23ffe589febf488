"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable

from climatebuddy.core.config import Settings
from climatebuddy.core.crypto import PasswordHasher
from climatebuddy.core.latency import LatencySimulator
from climatebuddy.core.tokens import TokenIssuer
from climatebuddy.infrastructure.memory import (
    InMemoryAccountRepository,
    InMemorySessionRepository,
    load_seed,
)
from climatebuddy.modules.accounts import AccountService
from climatebuddy.modules.accounts.service import utcnow
from climatebuddy.modules.auth import AuthService
from climatebuddy.modules.client_state import ClientStateStore


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    accounts: InMemoryAccountRepository
    sessions: InMemorySessionRepository
    account_service: AccountService
    auth_service: AuthService
    client_state: ClientStateStore


def build_container(
    settings: Settings,
    *,
    clock: Callable[[], datetime] = utcnow,
    latency: LatencySimulator | None = None,
) -> ApplicationContainer:
    """Construct the stores and services once, seeded from the user file."""
    hasher = PasswordHasher(rounds=settings.security.bcrypt_rounds)
    seed = load_seed(settings.seed.users_file, hasher=hasher)
    accounts = InMemoryAccountRepository(seed.accounts)
    sessions = InMemorySessionRepository(seed.sessions)
    account_service = AccountService(
        accounts,
        hasher=hasher,
        clock=clock,
    )
    auth_service = AuthService(
        account_service,
        sessions,
        tokens=TokenIssuer.from_settings(settings.security),
        latency=latency or LatencySimulator.from_settings(settings.latency),
        token_ttl=timedelta(hours=settings.token_expire_hours),
        clock=clock,
        demo_credentials=seed.demo_credentials,
    )
    return ApplicationContainer(
        settings=settings,
        accounts=accounts,
        sessions=sessions,
        account_service=account_service,
        auth_service=auth_service,
        client_state=ClientStateStore(),
    )


__all__ = ["ApplicationContainer", "build_container"]
