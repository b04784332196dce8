# -*- coding: utf-8 -*-
"""Assignment generation (derangement + PINs)."""

from gift_exchange.services.assignment.assignment_generator import (
    AssignmentGenerator,
    repair_fixed_points,
)

__all__ = ["AssignmentGenerator", "repair_fixed_points"]
