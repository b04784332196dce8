# -*- coding: utf-8 -*-
"""ExchangeRegistry: create exchanges, one-time reveals, status views and expiry.

Owns the repository and the locking around it:
- a registry-wide lock serialises create and sweep_expired;
- a per-exchange lock serialises reveals of one exchange;
- sweep_expired takes the exchange lock before deleting, so an in-flight reveal never
  writes a swept exchange back. Lock order is always registry -> exchange.
"""

from __future__ import annotations

import asyncio
import hmac
import secrets
from collections.abc import Callable, Sequence
from datetime import datetime, timedelta, timezone
from typing import TYPE_CHECKING, Any, Optional

import structlog

from gift_exchange.events.exchange_events import (
    ExchangeCreatedEvent,
    ExchangesExpiredEvent,
    ParticipantRevealedEvent,
)
from gift_exchange.exceptions import (
    AlreadyRevealedError,
    ExchangeNotFoundError,
    InvalidPinError,
    UnknownParticipantError,
)
from gift_exchange.models.exchange import (
    CreatedExchange,
    Exchange,
    ExchangeStatus,
    RevealResult,
)
from gift_exchange.utils.validation import mask_token, validate_participants

if TYPE_CHECKING:
    from bubus import EventBus  # type: ignore[import-untyped]

    from gift_exchange.config import Settings
    from gift_exchange.persistence.repositories.interfaces import IExchangeRepository
    from gift_exchange.services.assignment import AssignmentGenerator


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _pin_matches(expected: str, supplied: Any) -> bool:
    """Exact, constant-time comparison. Anything but a str never matches."""
    if not isinstance(supplied, str):
        return False
    return hmac.compare_digest(expected.encode("utf-8"), supplied.encode("utf-8"))


class ExchangeRegistry:
    """Keyed collection of live exchanges."""

    def __init__(
        self,
        settings: Settings,
        repository: IExchangeRepository,
        generator: AssignmentGenerator,
        *,
        event_bus: Optional[EventBus] = None,
        clock: Callable[[], datetime] = _utc_now,
        token_factory: Callable[[int], str] = secrets.token_hex,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the registry.

        Args:
            settings: Application settings (uses settings.exchange).
            repository: Exchange storage (injected).
            generator: Draws assignment and PINs for new exchanges.
            event_bus: Optional bubus EventBus for lifecycle events.
            clock: Returns the current UTC time; used for created_at and expiry.
            token_factory: Returns a random hex token for n bytes (exchange ids).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._settings = settings.exchange
        self._repo = repository
        self._generator = generator
        self._event_bus = event_bus
        self._clock = clock
        self._token_factory = token_factory
        self._logger = get_logger(logger_name or self.__class__.__name__)
        self._registry_lock = asyncio.Lock()
        self._exchange_locks: dict[str, asyncio.Lock] = {}

    async def create(self, participants: Sequence[str]) -> CreatedExchange:
        """Draw and store a new exchange; return its id and every PIN (never the assignment).

        Raises:
            InvalidParticipantsError: Malformed participant list or too many names.
            InsufficientParticipantsError: Fewer than 2 participants.
        """
        names = validate_participants(participants, self._settings.max_participants)
        draw = self._generator.generate(names)

        async with self._registry_lock:
            exchange = Exchange.create(
                exchange_id=self._token_factory(self._settings.exchange_id_bytes),
                participants=names,
                assignment=draw.assignment,
                pins=draw.pins,
                created_at=self._clock(),
            )
            await self._repo.save(exchange)
            self._exchange_locks[exchange.exchange_id] = asyncio.Lock()

        self._logger.info(
            "exchange_created",
            exchange_id_masked=mask_token(exchange.exchange_id),
            exchange_participants_count=len(names),
        )
        self._emit(
            ExchangeCreatedEvent(
                exchange_id=exchange.exchange_id,
                participants_count=len(names),
                created_at=exchange.created_at,
            )
        )
        return CreatedExchange(
            exchange_id=exchange.exchange_id,
            pins=dict(exchange.pins),
            revealed=dict(exchange.revealed),
        )

    async def reveal(self, exchange_id: str, name: str, pin: str) -> RevealResult:
        """Return name's recipient once, after checking the PIN; later calls always fail.

        Checks run in this order: exchange exists -> name known -> not yet revealed -> PIN.

        Raises:
            ExchangeNotFoundError: Unknown or expired exchange.
            UnknownParticipantError: name is not part of the exchange.
            AlreadyRevealedError: name has already revealed.
            InvalidPinError: PIN does not match.
        """
        lock = await self._lock_for(exchange_id)
        async with lock:
            exchange = await self._get_live(exchange_id)
            if not exchange.has_participant(name):
                self._reject(exchange_id, "unknown_participant")
                raise UnknownParticipantError(exchange_id, name)
            recipient = exchange.recipient_of(name)
            if recipient is None or exchange.is_revealed(name):
                self._reject(exchange_id, "already_revealed")
                raise AlreadyRevealedError(exchange_id, name)
            if not _pin_matches(exchange.pins[name], pin):
                self._reject(exchange_id, "invalid_pin")
                raise InvalidPinError(exchange_id, name)

            updated = exchange.with_revealed(name)
            await self._repo.save(updated)

        revealed_count = sum(updated.revealed.values())
        self._logger.info(
            "exchange_participant_revealed",
            exchange_id_masked=mask_token(exchange_id),
            exchange_revealed_count=revealed_count,
            exchange_participants_count=len(updated.revealed),
        )
        self._emit(
            ParticipantRevealedEvent(
                exchange_id=exchange_id,
                name=name,
                revealed_count=revealed_count,
                participants_count=len(updated.revealed),
            )
        )
        return RevealResult(recipient=recipient)

    async def status(self, exchange_id: str) -> ExchangeStatus:
        """Return participant names and reveal flags of a live exchange.

        Raises:
            ExchangeNotFoundError: Unknown or expired exchange.
        """
        exchange = await self._get_live(exchange_id)
        return exchange.to_status()

    async def latest(self) -> ExchangeStatus | None:
        """Return the most recently created live exchange, or None if there is none.

        Convenience view for single-exchange deployments; it says nothing about which
        exchange a caller means when several are live.
        """
        # Insertion order is creation order: if the newest has expired, all have.
        exchange = await self._repo.latest()
        if exchange is None or exchange.is_expired(self._clock(), self._settings.retention):
            return None
        return exchange.to_status()

    async def sweep_expired(
        self,
        now: datetime | None = None,
        retention: timedelta | None = None,
    ) -> list[str]:
        """Delete every exchange older than retention at now; return the removed ids.

        Idempotent; live exchanges are untouched. Defaults: clock() and settings retention.
        """
        now = now if now is not None else self._clock()
        retention = retention if retention is not None else self._settings.retention
        removed: list[str] = []

        async with self._registry_lock:
            for exchange in await self._repo.list_all():
                if not exchange.is_expired(now, retention):
                    continue
                lock = self._exchange_locks.get(exchange.exchange_id)
                if lock is None:
                    await self._repo.delete(exchange.exchange_id)
                else:
                    async with lock:
                        await self._repo.delete(exchange.exchange_id)
                    self._exchange_locks.pop(exchange.exchange_id, None)
                removed.append(exchange.exchange_id)

        if removed:
            self._logger.info("exchanges_swept", exchanges_removed_count=len(removed))
            self._emit(ExchangesExpiredEvent(exchange_ids=removed, swept_at=now))
        else:
            self._logger.debug("exchanges_swept", exchanges_removed_count=0)
        return removed

    async def _lock_for(self, exchange_id: str) -> asyncio.Lock:
        """Return the exchange's lock; unknown ids get none (no lock per guessed id)."""
        lock = self._exchange_locks.get(exchange_id)
        if lock is not None:
            return lock
        if await self._repo.get(exchange_id) is None:
            self._reject(exchange_id, "not_found")
            raise ExchangeNotFoundError(exchange_id)
        return self._exchange_locks.setdefault(exchange_id, asyncio.Lock())

    async def _get_live(self, exchange_id: str) -> Exchange:
        exchange = await self._repo.get(exchange_id)
        if exchange is None or exchange.is_expired(self._clock(), self._settings.retention):
            self._reject(exchange_id, "not_found")
            raise ExchangeNotFoundError(exchange_id)
        return exchange

    def _reject(self, exchange_id: str, reason: str) -> None:
        self._logger.info(
            "exchange_request_rejected",
            exchange_id_masked=mask_token(exchange_id),
            exchange_reject_reason=reason,
        )

    def _emit(self, event: Any) -> None:
        if self._event_bus is None:
            return
        self._event_bus.dispatch(event)
