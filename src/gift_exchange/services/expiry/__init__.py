# -*- coding: utf-8 -*-
"""Periodic expiry sweep."""

from gift_exchange.services.expiry.expiry_sweeper import ExpirySweeper

__all__ = ["ExpirySweeper"]
