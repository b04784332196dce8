# -*- coding: utf-8 -*-
"""Repositories: interfaces (abstractions) and implementations (in_memory, etc.)."""

from gift_exchange.persistence.repositories.interfaces import IExchangeRepository
from gift_exchange.persistence.repositories.in_memory import InMemoryExchangeRepository

__all__ = ["IExchangeRepository", "InMemoryExchangeRepository"]
