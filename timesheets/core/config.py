from __future__ import annotations

from functools import lru_cache
from typing import Any, Iterable

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Environment-driven application configuration."""

    model_config = SettingsConfigDict(
        env_file=(".env", ".env.local"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    APP_NAME: str = "Timesheets"
    APP_ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    HOST: str = "0.0.0.0"
    PORT: int = 8089

    APP_SECRET: str = "dev-insecure-secret-change-me"
    SESSION_COOKIE_NAME: str = "ts_session"
    SESSION_MAX_AGE: int = 60 * 60 * 24 * 30
    SESSION_HTTPS_ONLY: bool = False

    JWT_SECRET: str = Field(
        default="development-secret-key-change-in-production",
        validation_alias=AliasChoices("JWT_SECRET", "NEXTAUTH_SECRET"),
    )
    JWT_ACCESS_TTL_MIN: int = 60 * 12

    # Mock directory login: every seeded user shares one password. A bcrypt
    # hash takes precedence over the plain value when set.
    SHARED_PASSWORD: str = "password123"
    SHARED_PASSWORD_HASH: str = ""

    WEEKLY_TARGET_HOURS: float = Field(default=40, gt=0)
    DEFAULT_PAGE: int = Field(default=1, ge=1)
    DEFAULT_PAGE_LIMIT: int = Field(default=10, ge=1)

    ALLOWED_ORIGINS: list[str] = Field(default_factory=list)
    SECURITY_HEADERS: bool = True

    @property
    def is_production(self) -> bool:
        return self.APP_ENV.lower() in {"prod", "production"}

    @field_validator("ALLOWED_ORIGINS", mode="before")
    @classmethod
    def parse_allowed_origins(cls, value: Any) -> list[str]:
        if value in (None, "", []):
            return []
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        if isinstance(value, Iterable):
            return [str(item).strip() for item in value if str(item).strip()]
        raise TypeError("ALLOWED_ORIGINS must be a comma separated string or list")

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalise_log_level(cls, value: Any) -> str:
        return str(value or "INFO").strip().upper()


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    return AppSettings()


settings = get_settings()
