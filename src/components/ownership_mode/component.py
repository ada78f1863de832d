"""
Ownership mode component.

Keeps simple-mode and advanced-mode ownership fields consistent.

Synchronisation is one-directional: a simple-mode share edit is mirrored
into mechanical ownership, while advanced-mode edits never flow back into
share and never touch any other field. MIRRORS is the single source of
truth for which fields follow which.
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final

from src.domain.entities import ADVANCED_FIELDS, AdvancedField, WriterEntry

MIRRORS: Final = MappingProxyType(
    {
        "share": ("mechanical_ownership",),
        "mechanical_ownership": (),
        "performance_ownership": (),
        "mechanical_collection": (),
        "performance_collection": (),
    }
)


def mirrored_fields(source: str) -> tuple[str, ...]:
    """Fields that receive a copy when `source` is edited."""
    if source not in MIRRORS:
        raise ValueError(f"Unknown ownership field: {source}")
    return MIRRORS[source]


def _apply(writer: WriterEntry, source: str, value: float) -> WriterEntry:
    update = {source: value}
    for target in mirrored_fields(source):
        update[target] = value
    return writer.model_copy(update=update)


def on_share_edited(writer: WriterEntry, new_share: float) -> WriterEntry:
    """
    Apply a simple-mode share edit.

    Sets share and mirrors the same value into mechanical ownership.
    Performance and collection fields are left as they are.
    """
    return _apply(writer, "share", new_share)


def on_advanced_field_edited(
    writer: WriterEntry,
    field: AdvancedField,
    value: float,
) -> WriterEntry:
    """
    Apply an advanced-mode edit to one of the four ownership/collection fields.

    Only the named field changes; share is never updated from here.

    Raises:
        ValueError: If field is not an advanced-mode field
    """
    if field not in ADVANCED_FIELDS:
        raise ValueError(f"Not an advanced ownership field: {field}")
    return _apply(writer, field, value)
