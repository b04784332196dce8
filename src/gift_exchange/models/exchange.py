# -*- coding: utf-8 -*-
"""Exchange: one gift draw (participants, assignment, PINs and reveal flags).

Created once with all mappings filled; afterwards only reveals change it, one way per
participant, by producing a new copy (with_revealed). Expiry removes the whole exchange.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Optional


@dataclass(frozen=True, slots=True)
class ExchangeStatus:
    """Public view of an exchange: names and reveal flags only."""

    exchange_id: str
    participants: tuple[str, ...]
    revealed: dict[str, bool]

    def to_dict(self) -> dict[str, Any]:
        return {
            "exchangeId": self.exchange_id,
            "participants": list(self.participants),
            "revealed": dict(self.revealed),
        }


@dataclass(frozen=True, slots=True)
class CreatedExchange:
    """Organizer view returned by create: id, every PIN and the (all false) reveal flags."""

    exchange_id: str
    pins: dict[str, str]
    revealed: dict[str, bool]

    def to_dict(self) -> dict[str, Any]:
        return {
            "exchangeId": self.exchange_id,
            "pins": dict(self.pins),
            "revealed": dict(self.revealed),
        }


@dataclass(frozen=True, slots=True)
class RevealResult:
    """Result of a successful reveal."""

    recipient: str
    revealed: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {"recipient": self.recipient, "revealed": self.revealed}


@dataclass(frozen=True, slots=True)
class Exchange:
    """One gift draw.

    Identity: exchange_id (random hex token).
    assignment holds giver -> recipient for participants who have not revealed yet;
    revealed[name] is True exactly when name has no assignment entry any more.
    """

    exchange_id: str
    participants: tuple[str, ...]
    assignment: dict[str, str]
    """Remaining giver -> recipient entries. Entries are removed on reveal."""
    pins: dict[str, str]
    """PIN per participant, unique within the exchange, never regenerated."""
    revealed: dict[str, bool]
    created_at: datetime
    """Creation time (UTC); only used for expiry."""

    def has_participant(self, name: str) -> bool:
        return name in self.revealed

    def is_revealed(self, name: str) -> bool:
        return self.revealed.get(name, False)

    def recipient_of(self, name: str) -> Optional[str]:
        """Return the assigned recipient, or None once revealed (or unknown)."""
        return self.assignment.get(name)

    def is_expired(self, now: datetime, retention: timedelta) -> bool:
        """True when more than `retention` has passed since created_at."""
        return now - self.created_at > retention

    def with_revealed(self, name: str) -> Exchange:
        """Return a copy with name marked revealed and its assignment entry removed.

        Raises:
            KeyError: If name is not a participant.
            ValueError: If name was already revealed.
        """
        if not self.has_participant(name):
            raise KeyError(name)
        if self.revealed[name]:
            raise ValueError(f"{name!r} already revealed")
        assignment = {giver: r for giver, r in self.assignment.items() if giver != name}
        revealed = dict(self.revealed)
        revealed[name] = True
        return Exchange(
            exchange_id=self.exchange_id,
            participants=self.participants,
            assignment=assignment,
            pins=self.pins,
            revealed=revealed,
            created_at=self.created_at,
        )

    def to_status(self) -> ExchangeStatus:
        return ExchangeStatus(
            exchange_id=self.exchange_id,
            participants=self.participants,
            revealed=dict(self.revealed),
        )

    @classmethod
    def create(
        cls,
        exchange_id: str,
        participants: Sequence[str],
        assignment: Mapping[str, str],
        pins: Mapping[str, str],
        *,
        created_at: Optional[datetime] = None,
    ) -> Exchange:
        """Create a new exchange with every participant unrevealed.

        Raises:
            ValueError: If the assignment or PINs do not cover every participant.
        """
        names = set(participants)
        if set(assignment) != names or set(pins) != names:
            raise ValueError("assignment and pins must cover every participant")
        return cls(
            exchange_id=exchange_id,
            participants=tuple(participants),
            assignment=dict(assignment),
            pins=dict(pins),
            revealed={name: False for name in participants},
            created_at=created_at or datetime.now(timezone.utc),
        )
