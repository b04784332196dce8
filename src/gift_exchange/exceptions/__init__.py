"""Exceptions subpackage."""

from gift_exchange.exceptions.exceptions import (
    AlreadyRevealedError,
    ExchangeNotFoundError,
    GiftExchangeError,
    InsufficientParticipantsError,
    InvalidParticipantsError,
    InvalidPinError,
    UnknownParticipantError,
)

__all__ = [
    "AlreadyRevealedError",
    "ExchangeNotFoundError",
    "GiftExchangeError",
    "InsufficientParticipantsError",
    "InvalidParticipantsError",
    "InvalidPinError",
    "UnknownParticipantError",
]
