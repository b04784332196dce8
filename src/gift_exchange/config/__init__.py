"""Configuration subpackage."""

from gift_exchange.config.config import (
    AppSettings,
    ExchangeSettings,
    LoggingSettings,
    Settings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "ExchangeSettings",
    "LoggingSettings",
    "Settings",
    "get_settings",
]
