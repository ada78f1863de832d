"""
WorkWritersService - writer list management and rights-chain persistence.

Orchestrates the pure share and rights-chain components with the composer
directory, publisher directory and work repository ports.

Key behaviors:
- A composer can only be attached to a work once
- Hydrated writers take their controlled flag from the composer record
- Saves are blocked until shares reconcile to 100%
- Composers and rights_chain are written in one repository call
- A failed save reports "save_failed" and leaves the caller's state as is
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any

from src.components.rights_chain import RightsChainConfig, chain_to_json, generate
from src.components.share_validation import validation_errors
from src.domain.entities import (
    ComposerCandidate,
    EditorMode,
    NewComposer,
    NewPublisher,
    PublisherCandidate,
    WorkComposerRow,
    WriterEntry,
)
from src.domain.lookups import DEFAULT_ROLE_CODE
from src.domain.schemas import WorkComposerPayload, WorkRightsUpdateRequest
from src.rules.models import Rules, WritersRules

from .models import SaveOutput, WriterError
from .ports import ComposerDirectoryPort, PublisherDirectoryPort, WorkRepositoryPort

logger = logging.getLogger(__name__)


# --- Writer Construction ---


def writer_temp_id(composer_id: str) -> str:
    """Editor-session key for a writer linked to a composer."""
    return f"writer-{composer_id}"


def writer_from_composer(
    composer: ComposerCandidate,
    role: str = DEFAULT_ROLE_CODE,
) -> WriterEntry:
    """New writer for a directory composer, with no share allocated yet."""
    return WriterEntry(
        temp_id=writer_temp_id(composer.id),
        composer_id=composer.id,
        name=composer.name,
        role=role,
        is_controlled=composer.controlled,
    )


def hydrate_writers(rows: Iterable[WorkComposerRow]) -> list[WriterEntry]:
    """
    Rebuild editor writers from stored work composer rows.

    Missing role defaults to Composer/Author, missing share to 0, and the
    controlled flag comes from the linked composer record.
    """
    writers: list[WriterEntry] = []
    for idx, row in enumerate(rows):
        composer = row.composer
        writers.append(
            WriterEntry(
                id=row.id,
                temp_id=writer_temp_id(row.composer_id or str(idx)),
                composer_id=row.composer_id,
                name=composer.name if composer else "Unknown",
                role=row.role or DEFAULT_ROLE_CODE,
                share=row.share or 0.0,
                is_controlled=composer.controlled if composer else False,
                mechanical_ownership=row.mechanical_ownership or 0.0,
                performance_ownership=row.performance_ownership or 0.0,
                mechanical_collection=row.mechanical_collection or 0.0,
                performance_collection=row.performance_collection or 0.0,
            )
        )
    return writers


def build_update_request(
    writers: Sequence[WriterEntry],
    mode: EditorMode,
    default_publisher_id: str,
) -> WorkRightsUpdateRequest:
    """Build the single update carrying composers and the derived chain."""
    composers = [
        WorkComposerPayload(
            composer_id=w.composer_id,
            role=w.role,
            share=w.share,
            mechanical_ownership=w.mechanical_ownership,
            performance_ownership=w.performance_ownership,
            mechanical_collection=w.mechanical_collection,
            performance_collection=w.performance_collection,
        )
        for w in writers
    ]
    rights_chain = chain_to_json(generate(writers, mode, default_publisher_id))
    return WorkRightsUpdateRequest(composers=composers, rights_chain=rights_chain)


# --- Service ---


class WorkWritersService:
    """
    Work writers service.

    Manages the writer list of a work and persists it together with the
    derived rights chain.
    """

    def __init__(
        self,
        composers: ComposerDirectoryPort,
        publishers: PublisherDirectoryPort,
        repo: WorkRepositoryPort,
        config: RightsChainConfig | None = None,
        writer_rules: WritersRules | None = None,
    ) -> None:
        """Initialize service."""
        self._composers = composers
        self._publishers = publishers
        self._repo = repo
        self._config = config or RightsChainConfig()
        self._writer_rules = writer_rules or WritersRules()

    @property
    def config(self) -> RightsChainConfig:
        return self._config

    # --- Directory lookups ---

    def search_composers(self, query: str) -> list[ComposerCandidate]:
        """Search the composer directory."""
        return self._composers.search(query.strip())

    def find_composer_by_name(self, name: str) -> ComposerCandidate | None:
        """Directory composer whose name matches exactly, ignoring case."""
        wanted = name.strip().lower()
        if not wanted:
            return None
        return next(
            (
                c
                for c in self._composers.search(name.strip())
                if c.name.strip().lower() == wanted
            ),
            None,
        )

    def list_publishers(self) -> list[PublisherCandidate]:
        """List publishers available for controlled writers."""
        return self._publishers.list_all()

    def search_publishers(self, query: str) -> list[PublisherCandidate]:
        """Search the publisher directory."""
        return self._publishers.search(query.strip())

    def create_publisher(
        self, data: NewPublisher
    ) -> tuple[PublisherCandidate | None, list[WriterError]]:
        """
        Create a publisher in the directory.

        Returns:
            Tuple of (publisher, errors). Publisher is None if validation fails.
        """
        if not data.name.strip():
            return None, [
                WriterError(
                    code="publisher_name_required",
                    message="Publisher name is required",
                    field="name",
                )
            ]

        publisher = self._publishers.create(data)
        logger.info("Created publisher %s (%s)", publisher.id, publisher.name)
        return publisher, []

    # --- Writer list edits ---

    def add_blank_writer(
        self,
        writers: Sequence[WriterEntry],
        temp_id: str,
    ) -> tuple[list[WriterEntry], list[WriterError]]:
        """
        Append a writer not yet linked to a directory composer.

        Returns:
            Tuple of (writers, errors). Writers are unchanged if the session
            key is already taken.
        """
        if any(w.temp_id == temp_id for w in writers):
            return list(writers), [
                WriterError(
                    code="writer_key_taken",
                    message=f"Writer '{temp_id}' already exists",
                    field="temp_id",
                )
            ]

        blank = WriterEntry(
            temp_id=temp_id,
            role=self._writer_rules.default_role,
            is_controlled=self._writer_rules.default_controlled,
        )
        return [*writers, blank], []

    def add_existing_composer(
        self,
        writers: Sequence[WriterEntry],
        composer: ComposerCandidate,
    ) -> tuple[list[WriterEntry], list[WriterError]]:
        """
        Attach a directory composer as a new writer.

        Returns:
            Tuple of (writers, errors). Writers are unchanged on error.
        """
        if any(w.composer_id == composer.id for w in writers):
            return list(writers), [
                WriterError(
                    code="composer_already_added",
                    message=f"Composer '{composer.name}' is already a writer on this work",
                    field="composer_id",
                )
            ]

        writer = writer_from_composer(composer, role=self._writer_rules.default_role)
        return [*writers, writer], []

    def create_and_add_composer(
        self,
        writers: Sequence[WriterEntry],
        data: NewComposer,
    ) -> tuple[list[WriterEntry], list[WriterError]]:
        """
        Create a composer in the directory and attach it as a writer.

        A composer whose name already exists in the directory is never
        created twice: if it is already on the work the call fails with
        composer_already_added, otherwise with composer_exists so the caller
        can attach the existing record. Directory failures propagate.
        """
        if not data.name.strip():
            return list(writers), [
                WriterError(
                    code="composer_name_required",
                    message="Composer name is required",
                    field="name",
                )
            ]

        existing = self.find_composer_by_name(data.name)
        if existing is not None:
            if any(w.composer_id == existing.id for w in writers):
                return self.add_existing_composer(writers, existing)
            return list(writers), [
                WriterError(
                    code="composer_exists",
                    message=(
                        f"A composer named '{existing.name}' already exists "
                        f"(id {existing.id}); add the existing composer instead"
                    ),
                    field="name",
                )
            ]

        composer = self._composers.create(data)
        logger.info("Created composer %s (%s)", composer.id, composer.name)
        return self.add_existing_composer(writers, composer)

    def remove_writer(
        self,
        writers: Sequence[WriterEntry],
        temp_id: str,
    ) -> list[WriterEntry]:
        """Remove a writer by its session key."""
        return [w for w in writers if w.temp_id != temp_id]

    def assign_publisher(
        self,
        writers: Sequence[WriterEntry],
        temp_id: str,
        publisher_id: str | None,
    ) -> tuple[list[WriterEntry], list[WriterError]]:
        """
        Set or clear the publisher of a controlled writer.

        Clearing falls back to the configured default publisher in the chain.
        """
        target = next((w for w in writers if w.temp_id == temp_id), None)
        if target is None:
            return list(writers), [
                WriterError(
                    code="writer_not_found",
                    message=f"Writer '{temp_id}' not found",
                    field="temp_id",
                )
            ]
        if not target.is_controlled:
            return list(writers), [
                WriterError(
                    code="writer_not_controlled",
                    message="Only controlled writers can be assigned a publisher",
                    field="publisher_id",
                )
            ]

        updated = target.model_copy(update={"publisher_id": publisher_id or None})
        return [updated if w.temp_id == temp_id else w for w in writers], []

    # --- Persistence ---

    def hydrate(self, rows: Iterable[WorkComposerRow]) -> list[WriterEntry]:
        """Rebuild writers from stored rows."""
        return hydrate_writers(rows)

    def build_payload(
        self,
        writers: Sequence[WriterEntry],
        mode: EditorMode = "simple",
    ) -> dict[str, Any]:
        """Build the work update payload without persisting it."""
        request = build_update_request(writers, mode, self._config.default_publisher_id)
        return request.to_payload()

    def check(
        self,
        writers: Sequence[WriterEntry],
        mode: EditorMode = "simple",
    ) -> list[WriterError]:
        """Errors that would block saving these writers."""
        return [
            WriterError(code=e.code, message=e.message, field=e.field)
            for e in validation_errors(
                writers,
                mode,
                require_writers=self._writer_rules.require_writers,
                tolerance=self._writer_rules.share_tolerance,
            )
        ]

    def save(
        self,
        work_id: str,
        writers: Sequence[WriterEntry],
        mode: EditorMode = "simple",
    ) -> SaveOutput:
        """
        Validate, derive the rights chain and persist it with the composers.

        The chain is rebuilt from scratch on every save. Validation errors
        block the save without touching the repository.
        """
        errors = self.check(writers, mode)
        if errors:
            logger.warning(
                "Rejected save for work %s: %s",
                work_id,
                "; ".join(e.message for e in errors),
            )
            return SaveOutput(success=False, errors=tuple(errors))

        payload = self.build_payload(writers, mode)

        try:
            self._repo.update_work(work_id, payload)
        except Exception:
            logger.exception("Failed to save IP chain for work %s", work_id)
            return SaveOutput(
                success=False,
                errors=(
                    WriterError(code="save_failed", message="Failed to save IP chain"),
                ),
                payload=payload,
            )

        logger.info(
            "Saved %d writers and rights chain for work %s (%s mode)",
            len(writers),
            work_id,
            mode,
        )
        return SaveOutput(success=True, payload=payload)


def create_work_writers_service(
    composers: ComposerDirectoryPort,
    publishers: PublisherDirectoryPort,
    repo: WorkRepositoryPort,
    rules: Rules | None = None,
) -> WorkWritersService:
    """Create a WorkWritersService, configured from rules when given."""
    if rules is None:
        return WorkWritersService(composers=composers, publishers=publishers, repo=repo)

    return WorkWritersService(
        composers=composers,
        publishers=publishers,
        repo=repo,
        config=RightsChainConfig.from_rules(rules),
        writer_rules=rules.writers,
    )
