from __future__ import annotations

from datetime import UTC, datetime, timedelta

import pytest

from authsvc.application.services.password_hashing import WerkzeugPasswordHasher
from authsvc.application.services.tokens import JwtTokenService
from authsvc.shared.config import AppConfig, AuthConfig, DatabaseConfig

SECRET = "test-signing-secret-0123456789abcdef0123456789"


class FixedClock:
    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2025, 1, 1, 12, 0, tzinfo=UTC)

    def now(self) -> datetime:
        return self.current

    def advance(self, delta: timedelta) -> None:
        self.current = self.current + delta


@pytest.fixture()
def clock() -> FixedClock:
    return FixedClock()


@pytest.fixture()
def hasher() -> WerkzeugPasswordHasher:
    # Low work factor keeps the suite fast.
    return WerkzeugPasswordHasher(iterations=1000)


@pytest.fixture()
def token_service(clock: FixedClock) -> JwtTokenService:
    return JwtTokenService(SECRET, clock=clock)


@pytest.fixture()
def app_config() -> AppConfig:
    return AppConfig(
        app_env="test",
        database=DatabaseConfig(url="sqlite://"),
        auth=AuthConfig(jwt_secret=SECRET, password_hash_iterations=1000),
    )


@pytest.fixture()
def secret() -> str:
    return SECRET
