# SPDX-FileCopyrightText: 2025 Roland Knall <rknall@gmail.com>
# SPDX-License-Identifier: GPL-2.0-only
"""Application configuration."""

from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Settings loaded from GUESTREPORTS_* environment variables or .env."""

    model_config = SettingsConfigDict(
        env_prefix="GUESTREPORTS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Report store
    store_url: str = Field(
        default="http://localhost:3001/api",
        description="Base URL of the report store API (without /reports)",
    )
    store_timeout: float | None = Field(
        default=None,
        description="Seconds to wait for the store; unset waits indefinitely",
    )

    # Presentation
    app_title: str = Field(
        default="Registro de Reportes de Oportunidad",
        description="Heading shown on every page",
    )

    # Server
    host: str = Field(default="127.0.0.1", description="Bind address for serve")
    port: int = Field(default=8000, description="Bind port for serve")

    log_level: str = Field(default="INFO", description="Log level")

    @field_validator("store_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalise the base URL so paths can be appended."""
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError("store_url must be an http(s) URL")
        return v

    @field_validator("store_timeout")
    @classmethod
    def validate_timeout(cls, v: float | None) -> float | None:
        """Validate timeout is positive when given."""
        if v is not None and v <= 0:
            raise ValueError("store_timeout must be positive")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is valid."""
        v_upper = v.upper()
        if v_upper not in VALID_LOG_LEVELS:
            raise ValueError(f"log_level must be one of {VALID_LOG_LEVELS}")
        return v_upper


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
