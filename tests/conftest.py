from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from climatebuddy.core.config import LatencySettings, SecuritySettings, Settings
from climatebuddy.core.container import build_container
from climatebuddy.main import create_app


class FrozenClock:
    """Clock that only moves when a test tells it to."""

    def __init__(self, start: datetime) -> None:
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs) -> None:
        self.now += timedelta(**kwargs)


@pytest.fixture
def clock():
    return FrozenClock(datetime(2024, 4, 1, 12, 0, tzinfo=timezone.utc))


@pytest.fixture
def settings():
    return Settings(
        environment="test",
        latency=LatencySettings(enabled=False),
        security=SecuritySettings(secret_key="test-secret-key", bcrypt_rounds=4),
    )


@pytest.fixture
def container(settings, clock):
    return build_container(settings, clock=clock)


@pytest.fixture
def auth_service(container):
    return container.auth_service


@pytest.fixture
def client(settings, container):
    return TestClient(create_app(settings, container=container))
