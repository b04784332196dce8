"""Expiry sweeper: calls ExchangeRegistry.sweep_expired on a fixed interval until shutdown."""

from __future__ import annotations

import asyncio
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import structlog

if TYPE_CHECKING:
    from gift_exchange.config import Settings
    from gift_exchange.services.registry import ExchangeRegistry


class ExpirySweeper:
    """Runs registry.sweep_expired() every sweep_interval_seconds."""

    def __init__(
        self,
        registry: ExchangeRegistry,
        settings: Settings,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the sweeper.

        Args:
            registry: Injected ExchangeRegistry.
            settings: Application settings (uses settings.exchange.sweep_interval_seconds).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._registry = registry
        self._settings = settings
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def sweep_once(self) -> list[str]:
        """Run one sweep now; return the removed exchange ids."""
        try:
            return await self._registry.sweep_expired()
        except Exception as e:
            self._logger.exception(
                "expiry_sweep_exception",
                expiry_exception_type=type(e).__name__,
                expiry_exception_message=str(e),
            )
            raise

    async def run(self, shutdown_event: asyncio.Event) -> None:
        """Sweep every interval until shutdown_event is set or the task is cancelled.

        A failed sweep is logged by sweep_once and the loop keeps its schedule.
        """
        interval = self._settings.exchange.sweep_interval_seconds
        self._logger.info("expiry_sweeper_started", expiry_interval_seconds=interval)
        try:
            while not shutdown_event.is_set():
                try:
                    await asyncio.wait_for(shutdown_event.wait(), timeout=interval)
                except asyncio.TimeoutError:
                    try:
                        await self.sweep_once()
                    except Exception:
                        continue
        except asyncio.CancelledError:
            self._logger.info("expiry_sweeper_stopped", expiry_stop_reason="cancelled")
            raise
        self._logger.info("expiry_sweeper_stopped", expiry_stop_reason="shutdown")
