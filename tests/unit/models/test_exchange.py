# -*- coding: utf-8 -*-
"""Unit tests for the Exchange model and its views."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from gift_exchange.models.draw import Draw
from gift_exchange.models.exchange import CreatedExchange, Exchange


def _exchange(now: datetime) -> Exchange:
    return Exchange.create(
        exchange_id="ex-1",
        participants=["A", "B", "C"],
        assignment={"A": "B", "B": "C", "C": "A"},
        pins={"A": "1111", "B": "2222", "C": "3333"},
        created_at=now,
    )


def test_create_initialises_all_unrevealed(now_utc: datetime) -> None:
    exchange = _exchange(now_utc)

    assert exchange.participants == ("A", "B", "C")
    assert exchange.revealed == {"A": False, "B": False, "C": False}
    assert exchange.created_at == now_utc


def test_create_rejects_mappings_missing_participants(now_utc: datetime) -> None:
    with pytest.raises(ValueError):
        Exchange.create(
            exchange_id="ex-1",
            participants=["A", "B"],
            assignment={"A": "B"},
            pins={"A": "1111", "B": "2222"},
            created_at=now_utc,
        )


def test_with_revealed_returns_copy_and_keeps_original(now_utc: datetime) -> None:
    exchange = _exchange(now_utc)

    updated = exchange.with_revealed("B")

    assert updated.revealed["B"] is True
    assert "B" not in updated.assignment
    assert updated.recipient_of("B") is None
    assert updated.assignment == {"A": "B", "C": "A"}
    assert exchange.revealed["B"] is False
    assert exchange.recipient_of("B") == "C"
    assert updated.pins == exchange.pins


def test_with_revealed_twice_raises(now_utc: datetime) -> None:
    updated = _exchange(now_utc).with_revealed("A")

    with pytest.raises(ValueError):
        updated.with_revealed("A")


def test_with_revealed_unknown_name_raises(now_utc: datetime) -> None:
    with pytest.raises(KeyError):
        _exchange(now_utc).with_revealed("Z")


def test_is_expired_is_strict(now_utc: datetime) -> None:
    exchange = _exchange(now_utc)
    window = timedelta(hours=24)

    assert exchange.is_expired(now_utc + window, window) is False
    assert exchange.is_expired(now_utc + window + timedelta(microseconds=1), window) is True


def test_views_use_wire_names(now_utc: datetime) -> None:
    exchange = _exchange(now_utc)

    assert exchange.to_status().to_dict() == {
        "exchangeId": "ex-1",
        "participants": ["A", "B", "C"],
        "revealed": {"A": False, "B": False, "C": False},
    }
    created = CreatedExchange(exchange_id="ex-1", pins={"A": "1111"}, revealed={"A": False})
    assert created.to_dict() == {
        "exchangeId": "ex-1",
        "pins": {"A": "1111"},
        "revealed": {"A": False},
    }


def test_draw_fixed_points() -> None:
    draw = Draw(assignment={"A": "A", "B": "C", "C": "B"}, pins={})

    assert draw.fixed_points() == ["A"]
