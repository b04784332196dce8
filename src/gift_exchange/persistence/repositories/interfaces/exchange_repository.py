# -*- coding: utf-8 -*-
"""Abstract interface for exchange storage (in-memory, DB, etc.)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from gift_exchange.models.exchange import Exchange


class IExchangeRepository(ABC):
    """Interface for storing Exchange records keyed by exchange_id.

    Implementations do no locking; ExchangeRegistry serialises access.
    """

    @abstractmethod
    async def get(self, exchange_id: str) -> Optional[Exchange]:
        """Return the exchange by id, or None if missing."""
        ...

    @abstractmethod
    async def save(self, exchange: Exchange) -> None:
        """Insert or replace an exchange (by id)."""
        ...

    @abstractmethod
    async def delete(self, exchange_id: str) -> bool:
        """Remove the exchange; return True if it was stored."""
        ...

    @abstractmethod
    async def list_all(self) -> list[Exchange]:
        """Return every stored exchange, oldest insertion first."""
        ...

    async def latest(self) -> Optional[Exchange]:
        """Return the most recently inserted exchange, or None if empty."""
        exchanges = await self.list_all()
        return exchanges[-1] if exchanges else None
