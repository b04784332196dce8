# -*- coding: utf-8 -*-
"""AssignmentGenerator: derangement draw and per-exchange unique PINs.

No I/O; only consumes randomness. The shuffle source is injectable (seeded in tests),
PINs come from the OS CSPRNG unless another source is injected.
"""

from __future__ import annotations

import random
import secrets
from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

import structlog

from gift_exchange.exceptions import InsufficientParticipantsError, InvalidParticipantsError
from gift_exchange.models.draw import Draw

if TYPE_CHECKING:
    from gift_exchange.config import Settings


def _fixed_points(perm: Sequence[int]) -> list[int]:
    return [i for i, target in enumerate(perm) if target == i]


def repair_fixed_points(perm: list[int]) -> list[int]:
    """Swap every self-mapped slot with its neighbour; returns perm (mutated in place).

    For a fixed point i and any j != i, swapping perm[i] and perm[j] leaves perm[i] != i
    (perm[j] was not i) and perm[j] == i != j, so each swap removes one fixed point
    and adds none. Requires len(perm) >= 2.
    """
    n = len(perm)
    for i in _fixed_points(perm):
        if perm[i] != i:
            # Already cleared by an earlier swap.
            continue
        j = (i + 1) % n
        perm[i], perm[j] = perm[j], perm[i]
    return perm


class AssignmentGenerator:
    """Produces a giver -> recipient derangement and unique PINs for a participant list."""

    def __init__(
        self,
        settings: Settings,
        *,
        rng: random.Random | None = None,
        pin_rng: random.Random | None = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: str | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            settings: Application settings (uses settings.exchange).
            rng: Shuffle source; defaults to random.Random(settings.exchange.random_seed).
            pin_rng: PIN source; defaults to secrets.SystemRandom().
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._settings = settings.exchange
        self._rng = rng if rng is not None else random.Random(self._settings.random_seed)
        self._pin_rng = pin_rng if pin_rng is not None else secrets.SystemRandom()
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def derange(self, n: int) -> list[int]:
        """Return a permutation of range(n), fixed-point free under the default policy.

        Rejection sampling over uniform shuffles, bounded by derangement_max_attempts.
        When the budget runs out, 'repair' swaps the residual fixed points away and
        'last_attempt' returns the last shuffle as is.

        Raises:
            InsufficientParticipantsError: If n < 2.
        """
        if n < 2:
            raise InsufficientParticipantsError(n)

        max_attempts = self._settings.derangement_max_attempts
        perm = list(range(n))
        for _ in range(max_attempts):
            perm = list(range(n))
            self._rng.shuffle(perm)
            if not _fixed_points(perm):
                return perm

        residual = len(_fixed_points(perm))
        if self._settings.derangement_fallback == "last_attempt":
            self._logger.warning(
                "derangement_budget_exhausted",
                derangement_attempts=max_attempts,
                derangement_fallback="last_attempt",
                derangement_fixed_points=residual,
            )
            return perm

        self._logger.warning(
            "derangement_budget_exhausted",
            derangement_attempts=max_attempts,
            derangement_fallback="repair",
            derangement_fixed_points=residual,
        )
        return repair_fixed_points(perm)

    def draw_pins(self, participants: Sequence[str]) -> dict[str, str]:
        """Return a PIN per participant, drawn uniformly and redrawn on collision.

        Raises:
            InvalidParticipantsError: If there are more participants than PIN codes.
        """
        if len(participants) > self._settings.pin_space:
            raise InvalidParticipantsError(
                f"{len(participants)} participants exceed the PIN space ({self._settings.pin_space})"
            )
        low, high = self._settings.pin_min, self._settings.pin_max
        pins: dict[str, str] = {}
        used: set[str] = set()
        for name in participants:
            pin = str(self._pin_rng.randint(low, high))
            while pin in used:
                pin = str(self._pin_rng.randint(low, high))
            used.add(pin)
            pins[name] = pin
        return pins

    def generate(self, participants: Sequence[str]) -> Draw:
        """Build the draw for participants: participants[i] -> participants[perm[i]].

        Raises:
            InsufficientParticipantsError: If fewer than 2 participants.
            InvalidParticipantsError: If a name appears twice (a repeated name could draw
                itself even when no slot maps to itself).
        """
        if len(set(participants)) != len(participants):
            raise InvalidParticipantsError("participant names must be unique")
        perm = self.derange(len(participants))
        assignment = {participants[i]: participants[perm[i]] for i in range(len(participants))}
        pins = self.draw_pins(participants)
        self._logger.debug(
            "assignment_generated",
            assignment_participants_count=len(participants),
        )
        return Draw(assignment=assignment, pins=pins)
