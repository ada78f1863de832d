"""
Equal split component models.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SplitAllocation:
    """Per-position shares for an equal split across `count` writers."""

    count: int
    equal_share: float
    first_share: float  # equal_share plus the rounding remainder

    def share_for(self, position: int) -> float:
        """Share for the writer at a list position."""
        return self.first_share if position == 0 else self.equal_share
