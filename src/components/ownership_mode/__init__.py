"""
Ownership mode component.

Public API for one-way simple to advanced field mirroring.
"""

from .component import (
    MIRRORS,
    mirrored_fields,
    on_advanced_field_edited,
    on_share_edited,
)

__all__ = [
    "MIRRORS",
    "mirrored_fields",
    "on_advanced_field_edited",
    "on_share_edited",
]
