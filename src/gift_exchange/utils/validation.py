"""Validation helpers for participant lists and log masking."""

from __future__ import annotations

from typing import Any

from gift_exchange.exceptions import InsufficientParticipantsError, InvalidParticipantsError


def validate_participants(value: Any, max_count: int | None = None) -> list[str]:
    """Return the participants as a list of str, in the given order.

    Names are kept exactly as given (no stripping or case folding), so "A" and "a"
    are different participants.

    Raises:
        InvalidParticipantsError: Not a list/tuple, a name is not a non-empty str,
            more than max_count names, or a name appears twice.
        InsufficientParticipantsError: Fewer than 2 names.
    """
    if not isinstance(value, (list, tuple)):
        raise InvalidParticipantsError("participants must be a list of names")
    for name in value:
        if not isinstance(name, str) or not name:
            raise InvalidParticipantsError("participant names must be non-empty strings")
    if len(value) < 2:
        raise InsufficientParticipantsError(len(value))
    if max_count is not None and len(value) > max_count:
        raise InvalidParticipantsError(
            f"too many participants ({len(value)} > {max_count})"
        )
    if len(set(value)) != len(value):
        raise InvalidParticipantsError("participant names must be unique")
    return list(value)


def mask_token(token: str | None) -> str:
    """Return a masked token for logging (e.g. 3f9a...c2d1)."""
    if not token or len(token) < 10:
        return "***"
    return f"{token[:4]}...{token[-4:]}"
