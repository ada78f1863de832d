"""
Work writers component - writer list edits and rights-chain saves.

Shell Layer - converts service tuples into component outputs.
"""

from __future__ import annotations

from ._impl import WorkWritersService
from .models import (
    AddComposerInput,
    CreateComposerInput,
    SaveOutput,
    SaveWritersInput,
    WriterListOutput,
)


def run_add_composer(
    input_data: AddComposerInput,
    service: WorkWritersService,
) -> WriterListOutput:
    """Attach an existing composer as a writer."""
    writers, errors = service.add_existing_composer(input_data.writers, input_data.composer)
    return WriterListOutput(writers=tuple(writers), errors=tuple(errors))


def run_create_composer(
    input_data: CreateComposerInput,
    service: WorkWritersService,
) -> WriterListOutput:
    """Create a composer and attach it as a writer."""
    writers, errors = service.create_and_add_composer(
        input_data.writers, input_data.composer
    )
    return WriterListOutput(writers=tuple(writers), errors=tuple(errors))


def run_save(
    input_data: SaveWritersInput,
    service: WorkWritersService,
) -> SaveOutput:
    """Persist writers and the derived rights chain."""
    return service.save(input_data.work_id, input_data.writers, input_data.mode)


def run(
    input_data: AddComposerInput | CreateComposerInput | SaveWritersInput,
    service: WorkWritersService,
) -> WriterListOutput | SaveOutput:
    """
    Run work writers operation based on input type.

    This is the main entry point following the atomic component pattern.
    """
    if isinstance(input_data, AddComposerInput):
        return run_add_composer(input_data, service)

    if isinstance(input_data, CreateComposerInput):
        return run_create_composer(input_data, service)

    if isinstance(input_data, SaveWritersInput):
        return run_save(input_data, service)

    raise TypeError(f"Unknown input type: {type(input_data)}")
