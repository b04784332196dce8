"""Persistence layer (repositories, etc.)."""

from gift_exchange.persistence.repositories import (
    IExchangeRepository,
    InMemoryExchangeRepository,
)

__all__ = ["IExchangeRepository", "InMemoryExchangeRepository"]
