"""
Share validation component.

Public API for reconciling writer ownership shares to 100%.
"""

from .component import describe, total_share, validate, validation_errors
from .models import (
    FULL_SHARE,
    SHARE_TOLERANCE,
    ShareValidationError,
    ShareValidationOutput,
)

__all__ = [
    # Functions
    "describe",
    "total_share",
    "validate",
    "validation_errors",
    # Models
    "ShareValidationError",
    "ShareValidationOutput",
    "FULL_SHARE",
    "SHARE_TOLERANCE",
]
