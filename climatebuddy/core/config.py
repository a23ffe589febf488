"""Application configuration using pydantic settings with structured sections."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_USERS_FILE = Path(__file__).resolve().parent.parent / "data" / "users.json"

DelayRange = tuple[float, float]


class ServerSettings(BaseModel):
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False


class SecuritySettings(BaseModel):
    secret_key: str = Field(default="change-me", min_length=8)
    algorithm: str = "HS256"
    token_expire_hours: int = 24
    bcrypt_rounds: int = Field(default=12, ge=4, le=31)


class LatencySettings(BaseModel):
    """Simulated round-trip delay, in seconds, awaited by each auth operation."""

    enabled: bool = True
    login: DelayRange = (0.8, 1.5)
    signup: DelayRange = (1.0, 2.0)
    forgot_password: DelayRange = (0.5, 1.0)
    validate_token: DelayRange = (0.2, 0.5)
    logout: DelayRange = (0.2, 0.5)
    get_user_profile: DelayRange = (0.3, 0.8)
    update_user_profile: DelayRange = (0.5, 1.0)

    def ranges(self) -> dict[str, DelayRange]:
        return {name: value for name, value in self.model_dump().items() if name != "enabled"}


class SeedSettings(BaseModel):
    users_file: Path = DEFAULT_USERS_FILE


class Settings(BaseSettings):
    """Top-level application settings with nested sections."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_nested_delimiter="__",
        extra="ignore",
        case_sensitive=False,
    )

    environment: Literal["development", "staging", "production", "test"] = "development"
    debug: bool = False
    log_level: str = "INFO"
    project_name: str = "ClimateBuddy Auth Service"
    api_prefix: str = "/api"

    server: ServerSettings = ServerSettings()
    security: SecuritySettings = SecuritySettings()
    latency: LatencySettings = LatencySettings()
    seed: SeedSettings = SeedSettings()

    @property
    def host(self) -> str:
        return self.server.host

    @property
    def port(self) -> int:
        return self.server.port

    @property
    def secret_key(self) -> str:
        return self.security.secret_key

    @property
    def algorithm(self) -> str:
        return self.security.algorithm

    @property
    def token_expire_hours(self) -> int:
        return self.security.token_expire_hours


@lru_cache()
def get_settings() -> Settings:
    return Settings()
