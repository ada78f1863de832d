"""
Work writers component.

Public API for managing a work's writers and persisting the rights chain.
"""

from ._impl import (
    WorkWritersService,
    build_update_request,
    create_work_writers_service,
    hydrate_writers,
    writer_from_composer,
    writer_temp_id,
)
from .component import run, run_add_composer, run_create_composer, run_save
from .models import (
    AddComposerInput,
    CreateComposerInput,
    SaveOutput,
    SaveWritersInput,
    WriterError,
    WriterListOutput,
)
from .ports import ComposerDirectoryPort, PublisherDirectoryPort, WorkRepositoryPort

__all__ = [
    # Entry points
    "run",
    "run_add_composer",
    "run_create_composer",
    "run_save",
    # Service
    "WorkWritersService",
    "build_update_request",
    "create_work_writers_service",
    "hydrate_writers",
    "writer_from_composer",
    "writer_temp_id",
    # Models
    "AddComposerInput",
    "CreateComposerInput",
    "SaveOutput",
    "SaveWritersInput",
    "WriterError",
    "WriterListOutput",
    # Ports
    "ComposerDirectoryPort",
    "PublisherDirectoryPort",
    "WorkRepositoryPort",
]
