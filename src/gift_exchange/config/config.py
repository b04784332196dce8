# -*- coding: utf-8 -*-
"""Configuration loaded from environment via Pydantic Settings.

Nested env vars use <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, EXCHANGE__RETENTION_HOURS.
"""

from __future__ import annotations

from datetime import timedelta
from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """General application configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    app_name: str = "gift-exchange"
    service_name: Optional[str] = None
    service_version: Optional[str] = None
    environment: Literal["development", "test", "production"] = "development"


class LoggingSettings(BaseSettings):
    """Structured logging configuration for structlog/stdlib/Logfire."""

    model_config = SettingsConfigDict(extra="ignore")

    # Per-target levels (only the 5 standard levels)
    console_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    logfire_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    # Local outputs
    log_to_console: bool = True
    log_to_file: bool = False
    log_file_path: str = "logs/gift_exchange.log"
    # TimedRotatingFileHandler: when to rotate (S/M/H/D/W0–W6/midnight), interval, backups to keep
    log_file_when: Literal[
        "S", "M", "H", "D", "W0", "W1", "W2", "W3", "W4", "W5", "W6", "midnight"
    ] = "midnight"
    log_file_interval: int = 1
    log_file_backup_count: int = 30
    log_file_utc: bool = True

    # Main output format: JSONRenderer if True, ConsoleRenderer if False
    json_format: bool = False

    # Logfire integration via structlog
    logfire_enabled: bool = False
    logfire_token: Optional[str] = None


class ExchangeSettings(BaseSettings):
    """Draw, PIN and retention policy for exchanges (from env EXCHANGE__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    retention_hours: float = Field(
        default=24.0,
        gt=0.0,
        description="Hours an exchange stays available after creation.",
    )
    sweep_interval_seconds: float = Field(
        default=3600.0,
        ge=1.0,
        description="Interval between expiry sweeps in seconds.",
    )
    derangement_max_attempts: int = Field(
        default=2000,
        ge=1,
        description="Shuffles tried before the fallback policy applies.",
    )
    derangement_fallback: Literal["repair", "last_attempt"] = Field(
        default="repair",
        description=(
            "What to do when no shuffle was fixed-point free: 'repair' swaps residual "
            "self-maps away, 'last_attempt' returns the last shuffle unchanged."
        ),
    )
    pin_min: int = Field(default=1000, ge=0, description="Smallest PIN value (inclusive).")
    pin_max: int = Field(default=9999, ge=0, description="Largest PIN value (inclusive).")
    exchange_id_bytes: int = Field(
        default=10,
        ge=10,
        le=64,
        description="Random bytes in an exchange id (hex encoded, 10 bytes = 80 bits).",
    )
    max_participants: int = Field(
        default=1000,
        ge=2,
        description="Largest participant list accepted by create.",
    )
    random_seed: Optional[int] = Field(
        default=None,
        description="Seed for the derangement shuffle. PINs and ids never use it.",
    )

    @model_validator(mode="after")
    def _check_pin_space(self) -> ExchangeSettings:
        if self.pin_min > self.pin_max:
            raise ValueError("pin_min must be <= pin_max")
        if self.max_participants > self.pin_space:
            raise ValueError(
                f"max_participants ({self.max_participants}) exceeds PIN space ({self.pin_space})"
            )
        return self

    @property
    def pin_space(self) -> int:
        """Number of distinct PIN codes available."""
        return self.pin_max - self.pin_min + 1

    @property
    def retention(self) -> timedelta:
        """Retention window as a timedelta."""
        return timedelta(hours=self.retention_hours)


class Settings(BaseSettings):
    """Root application configuration.

    Groups all sub-configurations so the rest of the code does not
    read environment variables directly. Nested overrides use
    <section>__<key>, e.g. LOGGING__CONSOLE_LEVEL, EXCHANGE__PIN_MAX.
    """

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    app: AppSettings = Field(default_factory=AppSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    exchange: ExchangeSettings = Field(default_factory=ExchangeSettings)

    @classmethod
    def from_env(cls, **overrides: Any) -> Settings:
        """Build settings from environment (and .env), with optional overrides.

        Nested overrides can be passed as nested dicts, e.g.
        from_env(exchange={"retention_hours": 1}).

        Returns:
            A new Settings instance.
        """
        return cls(**overrides)


@lru_cache
def get_settings() -> Settings:
    """Return a single cached instance of Settings.

    Typical usage:

        from gift_exchange.config import get_settings

        settings = get_settings()
        retention = settings.exchange.retention
    """
    return Settings()
