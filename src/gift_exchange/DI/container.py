# -*- coding: utf-8 -*-
"""Dependency injection container (dependency-injector)."""

from __future__ import annotations

from dependency_injector import containers, providers

from gift_exchange.config import get_settings
from gift_exchange.events.bus import get_event_bus
from gift_exchange.persistence.repositories.in_memory import InMemoryExchangeRepository
from gift_exchange.services.assignment import AssignmentGenerator
from gift_exchange.services.expiry import ExpirySweeper
from gift_exchange.services.registry import ExchangeRegistry


class Container(containers.DeclarativeContainer):
    """Application container. Wires settings, repository, generator, registry and sweeper.

    The registry is the single owner of exchange state; hand container.exchange_registry()
    to whatever transport is built around it.
    """

    config = providers.Callable(get_settings)

    event_bus = providers.Callable(get_event_bus)

    exchange_repository = providers.Singleton(InMemoryExchangeRepository)

    assignment_generator = providers.Singleton(
        AssignmentGenerator,
        settings=config,
    )

    exchange_registry = providers.Singleton(
        ExchangeRegistry,
        settings=config,
        repository=exchange_repository,
        generator=assignment_generator,
        event_bus=event_bus,
    )

    expiry_sweeper = providers.Singleton(
        ExpirySweeper,
        registry=exchange_registry,
        settings=config,
    )
