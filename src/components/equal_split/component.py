"""
Equal split component.

Redistributes 100% evenly across the writers of a work.

Shares are truncated to two decimal places and the remainder goes to the
first writer in list order, so the result always reconciles to 100.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from src.components.share_validation.models import FULL_SHARE
from src.domain.entities import EditorMode, WriterEntry

from .models import SplitAllocation


def compute_allocation(count: int) -> SplitAllocation:
    """
    Compute the per-writer share for an equal split.

    Args:
        count: Number of writers (must be positive)

    Returns:
        SplitAllocation with the truncated share and the first writer's share
    """
    if count <= 0:
        raise ValueError(f"Cannot split across {count} writers")

    equal_share = math.floor(FULL_SHARE / count * 100) / 100
    remainder = FULL_SHARE - equal_share * count

    return SplitAllocation(
        count=count,
        equal_share=equal_share,
        first_share=round(equal_share + remainder, 2),
    )


def split_equally(
    writers: Sequence[WriterEntry],
    mode: EditorMode = "simple",
) -> list[WriterEntry]:
    """
    Give every writer an equal share of 100%.

    Returns a new list; the input is never mutated. In advanced mode the
    same values are also written to mechanical and performance ownership.
    Collection fields are left untouched.

    Args:
        writers: Writers in display order
        mode: Current editor mode

    Returns:
        New list of writers with reallocated shares
    """
    if not writers:
        return []

    allocation = compute_allocation(len(writers))

    result: list[WriterEntry] = []
    for idx, writer in enumerate(writers):
        share = allocation.share_for(idx)
        update: dict[str, float] = {"share": share}
        if mode == "advanced":
            update["mechanical_ownership"] = share
            update["performance_ownership"] = share
        result.append(writer.model_copy(update=update))

    return result
