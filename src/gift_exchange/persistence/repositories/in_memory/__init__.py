"""In-memory repository implementations."""

from gift_exchange.persistence.repositories.in_memory.exchange_repository import (
    InMemoryExchangeRepository,
)

__all__ = ["InMemoryExchangeRepository"]
