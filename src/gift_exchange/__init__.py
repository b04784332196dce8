"""Gift exchange: derangement draws and one-time, PIN-authenticated reveals."""

from gift_exchange.config import get_settings
from gift_exchange.DI import Container
from gift_exchange.services import AssignmentGenerator, ExchangeRegistry, ExpirySweeper

__version__ = "0.0.1"
__all__ = [
    "AssignmentGenerator",
    "Container",
    "ExchangeRegistry",
    "ExpirySweeper",
    "get_settings",
]
