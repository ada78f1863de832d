"""
Work writers component input/output models.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from src.domain.entities import ComposerCandidate, EditorMode, NewComposer, WriterEntry

# --- Errors ---


@dataclass(frozen=True)
class WriterError:
    """Writer list or save error."""

    code: str
    message: str
    field: str | None = None


# --- Inputs ---


@dataclass(frozen=True)
class AddComposerInput:
    """Attach an existing directory composer as a writer."""

    writers: tuple[WriterEntry, ...]
    composer: ComposerCandidate


@dataclass(frozen=True)
class CreateComposerInput:
    """Create a directory composer and attach it as a writer."""

    writers: tuple[WriterEntry, ...]
    composer: NewComposer


@dataclass(frozen=True)
class SaveWritersInput:
    """Persist a work's writers and derived rights chain."""

    work_id: str
    writers: tuple[WriterEntry, ...]
    mode: EditorMode = "simple"


# --- Outputs ---


@dataclass(frozen=True)
class WriterListOutput:
    """Writer list after an edit."""

    writers: tuple[WriterEntry, ...]
    errors: tuple[WriterError, ...] = ()

    @property
    def success(self) -> bool:
        return not self.errors


@dataclass(frozen=True)
class SaveOutput:
    """Outcome of a save."""

    success: bool
    errors: tuple[WriterError, ...] = ()
    payload: dict[str, Any] | None = field(default=None, compare=False)
