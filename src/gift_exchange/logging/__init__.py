"""Logging setup (structlog + optional Logfire)."""

from gift_exchange.logging.config import configure_logging

__all__ = ["configure_logging"]
