"""Draw: output of the assignment generator (assignment + PINs), before it is stored."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Draw:
    """Giver -> recipient assignment and the PIN of every participant."""

    assignment: dict[str, str]
    pins: dict[str, str]

    def fixed_points(self) -> list[str]:
        """Names assigned to themselves (empty for a proper derangement)."""
        return [giver for giver, recipient in self.assignment.items() if giver == recipient]
