# -*- coding: utf-8 -*-
"""Utility modules."""

from gift_exchange.utils.validation import mask_token, validate_participants

__all__ = ["mask_token", "validate_participants"]
