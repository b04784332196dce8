"""Exchange lifecycle events (emitted by ExchangeRegistry).

Payloads carry names and counts only: never PINs, never recipients.
"""

from __future__ import annotations

from datetime import datetime

from bubus import BaseEvent  # type: ignore[import-untyped]


class ExchangeCreatedEvent(BaseEvent[None]):
    """Emitted after a new exchange has been stored."""

    exchange_id: str
    participants_count: int
    created_at: datetime


class ParticipantRevealedEvent(BaseEvent[None]):
    """Emitted after a participant consumed their one reveal."""

    exchange_id: str
    name: str
    revealed_count: int
    """Participants of this exchange that have revealed so far (including this one)."""
    participants_count: int


class ExchangesExpiredEvent(BaseEvent[None]):
    """Emitted when a sweep removed at least one exchange."""

    exchange_ids: list[str]
    swept_at: datetime
