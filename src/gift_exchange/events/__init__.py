# -*- coding: utf-8 -*-
"""Event bus and event types."""

from gift_exchange.events.bus import get_event_bus
from gift_exchange.events.exchange_events import (
    ExchangeCreatedEvent,
    ExchangesExpiredEvent,
    ParticipantRevealedEvent,
)

__all__ = [
    "ExchangeCreatedEvent",
    "ExchangesExpiredEvent",
    "ParticipantRevealedEvent",
    "get_event_bus",
]
