# -*- coding: utf-8 -*-
"""Dependency injection."""

from gift_exchange.DI.container import Container

__all__ = ["Container"]
