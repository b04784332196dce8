# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

import random
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest

from gift_exchange.config.config import ExchangeSettings, Settings
from gift_exchange.persistence.repositories.in_memory.exchange_repository import (
    InMemoryExchangeRepository,
)
from gift_exchange.services.assignment.assignment_generator import AssignmentGenerator
from gift_exchange.services.registry.exchange_registry import ExchangeRegistry


class FakeClock:
    """Settable clock; call it to get the current time."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


class FakeEventBus:
    """Minimal event bus fake for asserting dispatched events."""

    def __init__(self) -> None:
        self.dispatched: list[Any] = []

    def dispatch(self, event: Any) -> None:
        self.dispatched.append(event)


@pytest.fixture
def now_utc() -> datetime:
    """Stable UTC timestamp for deterministic assertions."""
    return datetime(2026, 12, 1, 18, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def settings_factory() -> Callable[..., Settings]:
    """Build Settings with exchange overrides, ignoring the environment for the rest."""

    def _build(**exchange_overrides: Any) -> Settings:
        return Settings(exchange=ExchangeSettings(**exchange_overrides))

    return _build


@pytest.fixture
def settings(settings_factory: Callable[..., Settings]) -> Settings:
    return settings_factory()


@pytest.fixture
def clock(now_utc: datetime) -> FakeClock:
    return FakeClock(now_utc)


@pytest.fixture
def event_bus() -> FakeEventBus:
    return FakeEventBus()


@pytest.fixture
def exchange_repo() -> InMemoryExchangeRepository:
    """Fresh in-memory exchange repository per test."""
    return InMemoryExchangeRepository()


@pytest.fixture
def generator(settings: Settings) -> AssignmentGenerator:
    """Generator with a seeded shuffle source and seeded PIN source."""
    return AssignmentGenerator(settings, rng=random.Random(1234), pin_rng=random.Random(99))


@pytest.fixture
def registry(
    settings: Settings,
    exchange_repo: InMemoryExchangeRepository,
    generator: AssignmentGenerator,
    event_bus: FakeEventBus,
    clock: FakeClock,
) -> ExchangeRegistry:
    return ExchangeRegistry(
        settings,
        exchange_repo,
        generator,
        event_bus=event_bus,
        clock=clock,
    )
