"""Custom exceptions for exchange creation and reveals.

Each class carries the status code a transport layer should answer with.
Messages and attributes never include PINs or recipients.
"""

from __future__ import annotations


class GiftExchangeError(Exception):
    """Base exception for gift exchange errors."""

    status_code: int = 400

    def __init__(
        self,
        message: str,
        *,
        exchange_id: str | None = None,
        name: str | None = None,
    ) -> None:
        super().__init__(message)
        self.exchange_id = exchange_id
        self.name = name


class InsufficientParticipantsError(GiftExchangeError):
    """Raised when fewer than two participants are supplied (no derangement exists)."""

    def __init__(self, count: int) -> None:
        super().__init__(f"at least 2 participants are required, got {count}")
        self.count = count


class InvalidParticipantsError(GiftExchangeError):
    """Raised when the participant list is malformed or too long."""

    pass


class ExchangeNotFoundError(GiftExchangeError):
    """Raised when the exchange id is unknown or the exchange has expired."""

    status_code = 404

    def __init__(self, exchange_id: str) -> None:
        super().__init__("exchange not found", exchange_id=exchange_id)


class UnknownParticipantError(GiftExchangeError):
    """Raised when the name is not part of the exchange."""

    def __init__(self, exchange_id: str, name: str) -> None:
        super().__init__("unknown participant", exchange_id=exchange_id, name=name)


class AlreadyRevealedError(GiftExchangeError):
    """Raised when the participant has already used their reveal."""

    status_code = 409

    def __init__(self, exchange_id: str, name: str) -> None:
        super().__init__("recipient already revealed", exchange_id=exchange_id, name=name)


class InvalidPinError(GiftExchangeError):
    """Raised when the supplied PIN does not match the participant's PIN."""

    status_code = 403

    def __init__(self, exchange_id: str, name: str) -> None:
        super().__init__("invalid PIN", exchange_id=exchange_id, name=name)
