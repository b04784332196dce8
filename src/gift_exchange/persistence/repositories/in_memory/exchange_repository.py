"""In-memory exchange repository (keyed by exchange id, insertion ordered)."""

from __future__ import annotations

from gift_exchange.models.exchange import Exchange
from gift_exchange.persistence.repositories.interfaces.exchange_repository import (
    IExchangeRepository,
)


class InMemoryExchangeRepository(IExchangeRepository):
    """In-memory implementation of IExchangeRepository.

    Replacing an existing id keeps its original insertion position.
    """

    def __init__(self) -> None:
        """Initialize an empty in-memory store."""
        self._store: dict[str, Exchange] = {}

    async def get(self, exchange_id: str) -> Exchange | None:
        """Return the exchange by id, or None if missing."""
        return self._store.get(exchange_id)

    async def save(self, exchange: Exchange) -> None:
        """Insert or replace an exchange (by id)."""
        self._store[exchange.exchange_id] = exchange

    async def delete(self, exchange_id: str) -> bool:
        """Remove the exchange; return True if it was stored."""
        return self._store.pop(exchange_id, None) is not None

    async def list_all(self) -> list[Exchange]:
        """Return every stored exchange, oldest insertion first."""
        return list(self._store.values())

    async def latest(self) -> Exchange | None:
        """Return the most recently inserted exchange, or None if empty."""
        if not self._store:
            return None
        return next(reversed(self._store.values()))
