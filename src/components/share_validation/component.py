"""
Share validation component.

Pure functions that check writer ownership percentages reconcile to 100%.
Used to gate save actions and to render the inline balance diagnostic.
"""

from __future__ import annotations

from collections.abc import Sequence

from src.domain.entities import EditorMode, WriterEntry

from .models import (
    FULL_SHARE,
    SHARE_TOLERANCE,
    ShareValidationError,
    ShareValidationOutput,
)


def _ownership(writer: WriterEntry, mode: EditorMode) -> float:
    if mode == "advanced":
        return writer.mechanical_ownership
    return writer.share


def total_share(writers: Sequence[WriterEntry], mode: EditorMode = "simple") -> float:
    """Sum the ownership share of every writer, resolved or not."""
    return sum((_ownership(w, mode) for w in writers), 0.0)


def validate(
    writers: Sequence[WriterEntry],
    mode: EditorMode = "simple",
    tolerance: float = SHARE_TOLERANCE,
) -> ShareValidationOutput:
    """
    Check that writer shares reconcile to 100%.

    An empty list is vacuously valid. Writers without a linked composer
    still count toward the total.

    Args:
        writers: Writers attached to the work
        mode: "simple" sums share, "advanced" sums mechanical ownership
        tolerance: Maximum allowed distance from 100

    Returns:
        ShareValidationOutput with validity, total and remaining percentage
    """
    if not writers:
        return ShareValidationOutput(valid=True, total_share=0.0, remaining=FULL_SHARE)

    total = total_share(writers, mode)
    return ShareValidationOutput(
        valid=abs(total - FULL_SHARE) < tolerance,
        total_share=total,
        remaining=FULL_SHARE - total,
    )


def _format_percent(value: float) -> str:
    return f"{round(value, 2):g}"


def describe(result: ShareValidationOutput) -> str:
    """Render the balance diagnostic shown next to the writer list."""
    if result.valid:
        return "Balanced"
    if result.remaining > 0:
        return f"{_format_percent(result.remaining)}% remaining"
    return f"{_format_percent(-result.remaining)}% over"


def validation_errors(
    writers: Sequence[WriterEntry],
    mode: EditorMode = "simple",
    require_writers: bool = False,
    tolerance: float = SHARE_TOLERANCE,
) -> list[ShareValidationError]:
    """
    Collect errors that block a save.

    Args:
        writers: Writers attached to the work
        mode: Editor mode used to pick the ownership field
        require_writers: Reject an empty writer list
        tolerance: Maximum allowed distance from 100

    Returns:
        List of errors; empty when the writers may be saved
    """
    if not writers:
        if require_writers:
            return [
                ShareValidationError(
                    code="writers_required",
                    message="Please add at least one writer",
                    field="writers",
                )
            ]
        return []

    result = validate(writers, mode, tolerance)
    if result.valid:
        return []

    return [
        ShareValidationError(
            code="share_total_invalid",
            message=(
                "Total ownership must be 100% "
                f"(Currently: {result.total_share:.1f}%)"
            ),
            field="share" if mode == "simple" else "mechanical_ownership",
        )
    ]
