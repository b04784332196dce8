# -*- coding: utf-8 -*-
"""Application services."""

from gift_exchange.services.assignment import AssignmentGenerator
from gift_exchange.services.expiry import ExpirySweeper
from gift_exchange.services.registry import ExchangeRegistry

__all__ = [
    "AssignmentGenerator",
    "ExchangeRegistry",
    "ExpirySweeper",
]
