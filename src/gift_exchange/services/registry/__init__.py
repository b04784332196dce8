# -*- coding: utf-8 -*-
"""Exchange registry (create, reveal, status, expiry)."""

from gift_exchange.services.registry.exchange_registry import ExchangeRegistry

__all__ = ["ExchangeRegistry"]
