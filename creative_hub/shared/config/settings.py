# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

import sys
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_PACKAGE_ROOT = Path(__file__).resolve().parents[2]

DEV_ORIGIN = "http://localhost:3000"
_WEAK_SECRETS = ("dev", "development", "test", "secret", "changeme", "")


def _parse_bool(value: str | bool) -> bool:
    if isinstance(value, str):
        return value.lower() in ("1", "true", "yes")
    return bool(value)


class DatabaseConfig(BaseSettings):
    url: str | None = Field(None, alias="DATABASE_URL")
    pool_size: int = Field(10, ge=1, alias="DATABASE_POOL_SIZE")
    max_overflow: int = Field(5, ge=0, alias="DATABASE_MAX_OVERFLOW")
    pool_timeout: float = Field(30.0, ge=0.1, alias="DATABASE_POOL_TIMEOUT")

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", validate_by_name=True
    )


class SecurityConfig(BaseSettings):
    # Token signing
    token_secret: str | None = Field(None, alias="JWT_SECRET")

    # CORS
    production_origin: str | None = Field(None, alias="PRODUCTION_ORIGIN")

    # Rate limiting
    enable_rate_limit: bool = Field(True, alias="ENABLE_RATE_LIMIT")
    rate_limit_requests: int = Field(100, ge=1, alias="RL_LIMIT")
    rate_limit_window: float = Field(15 * 60.0, ge=0.1, alias="RL_WINDOW")

    # HSTS
    enable_hsts: bool = Field(False, alias="ENABLE_HSTS")

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", validate_by_name=True
    )

    @field_validator("enable_rate_limit", "enable_hsts", mode="before")
    @classmethod
    def _parse_flags(cls, value: str | bool) -> bool:
        return _parse_bool(value)

    @property
    def allowed_origins(self) -> list[str]:
        origins = [DEV_ORIGIN]
        if self.production_origin:
            origins.append(self.production_origin.rstrip("/"))
        return origins


def _database_config_factory() -> DatabaseConfig:
    return DatabaseConfig()  # type: ignore[call-arg]


def _security_config_factory() -> SecurityConfig:
    return SecurityConfig()  # type: ignore[call-arg]


class AppConfig(BaseSettings):
    app_env: str = Field("development", alias="APP_ENV")
    variant: Literal["stateless", "persistent"] = Field("persistent", alias="APP_VARIANT")
    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(3000, ge=1, le=65535, alias="PORT")
    debug_logging: bool = Field(False, alias="DEBUG_LOGGING")
    static_dir: Path = Field(_PACKAGE_ROOT / "static", alias="STATIC_DIR")

    database: DatabaseConfig = Field(default_factory=_database_config_factory)
    security: SecurityConfig = Field(default_factory=_security_config_factory)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        validate_assignment=True,
        validate_by_name=True,
    )

    @field_validator("debug_logging", mode="before")
    @classmethod
    def _parse_debug_logging(cls, value: str | bool) -> bool:
        return _parse_bool(value)

    @model_validator(mode="after")
    def _validate_required_settings(self) -> "AppConfig":
        if not self.is_persistent():
            return self

        missing = []
        if not self.database.url:
            missing.append("DATABASE_URL")
        if not self.security.token_secret:
            missing.append("JWT_SECRET")
        if missing:
            raise ValueError(
                f"{', '.join(missing)} must be set for the persistent variant"
            )

        if self.is_production():
            if self.security.token_secret in _WEAK_SECRETS:
                raise ValueError("JWT_SECRET must be a strong random value in production")
            if not self.security.production_origin:
                print(
                    "\n⚠️  PRODUCTION WARNING: PRODUCTION_ORIGIN is not set, "
                    "only http://localhost:3000 may call the API cross-origin.\n",
                    file=sys.stderr,
                )
        return self

    def is_production(self) -> bool:
        return self.app_env.lower() in ("production", "prod")

    def is_persistent(self) -> bool:
        return self.variant == "persistent"


@lru_cache(maxsize=1)
def load_config() -> AppConfig:
    return AppConfig()  # type: ignore[call-arg]


__all__ = ["AppConfig", "DatabaseConfig", "SecurityConfig", "load_config"]
