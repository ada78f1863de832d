"""
Share validation component models.

Result and error types for ownership share reconciliation.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final

# Totals within this distance of 100 are considered balanced.
SHARE_TOLERANCE: Final = 0.01

FULL_SHARE: Final = 100.0


@dataclass(frozen=True)
class ShareValidationOutput:
    """Outcome of reconciling writer shares against 100%."""

    valid: bool
    total_share: float
    remaining: float


@dataclass(frozen=True)
class ShareValidationError:
    """Share validation error."""

    code: str
    message: str
    field: str | None = None
