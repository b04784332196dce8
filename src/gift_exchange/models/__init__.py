# -*- coding: utf-8 -*-
"""Domain models."""

from gift_exchange.models.draw import Draw
from gift_exchange.models.exchange import (
    CreatedExchange,
    Exchange,
    ExchangeStatus,
    RevealResult,
)

__all__ = [
    "CreatedExchange",
    "Draw",
    "Exchange",
    "ExchangeStatus",
    "RevealResult",
]
