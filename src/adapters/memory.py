"""
In-memory directory and work repository adapters.

Implement ComposerDirectoryPort, PublisherDirectoryPort and
WorkRepositoryPort without any I/O. Used for local development and tests.

Key behaviors:
- Directories are scoped to a single account
- Search is a case-insensitive substring match on name (and CAE for composers)
- The repository stores a deep copy of each payload and keeps every update
  for test assertions
- The repository can be told to fail, to exercise save error handling
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass, field
from typing import Any
from uuid import uuid4

from src.domain.entities import (
    ComposerCandidate,
    NewComposer,
    NewPublisher,
    PublisherCandidate,
)

logger = logging.getLogger(__name__)


class RepositoryUnavailableError(RuntimeError):
    """Raised by the in-memory repository when configured to fail."""


def _matches(query: str, *values: str | None) -> bool:
    needle = query.strip().lower()
    if not needle:
        return True
    return any(v is not None and needle in v.lower() for v in values)


@dataclass
class InMemoryComposerDirectory:
    """Composer directory for one account."""

    account_id: str
    composers: dict[str, ComposerCandidate] = field(default_factory=dict)

    def search(self, query: str) -> list[ComposerCandidate]:
        return [
            c
            for c in self.composers.values()
            if _matches(query, c.name, c.cae)
        ]

    def create(self, data: NewComposer) -> ComposerCandidate:
        composer = ComposerCandidate(id=str(uuid4()), **data.model_dump())
        self.composers[composer.id] = composer
        logger.info(
            "Composer %s created in account %s", composer.id, self.account_id
        )
        return composer

    def add(self, composer: ComposerCandidate) -> ComposerCandidate:
        """Seed an existing composer."""
        self.composers[composer.id] = composer
        return composer


@dataclass
class InMemoryPublisherDirectory:
    """Publisher directory for one account."""

    account_id: str
    publishers: dict[str, PublisherCandidate] = field(default_factory=dict)

    def list_all(self) -> list[PublisherCandidate]:
        return sorted(self.publishers.values(), key=lambda p: p.name.lower())

    def search(self, query: str) -> list[PublisherCandidate]:
        return [p for p in self.list_all() if _matches(query, p.name)]

    def create(self, data: NewPublisher) -> PublisherCandidate:
        publisher = PublisherCandidate(id=str(uuid4()), name=data.name)
        self.publishers[publisher.id] = publisher
        logger.info(
            "Publisher %s created in account %s", publisher.id, self.account_id
        )
        return publisher


@dataclass
class StoredWorkUpdate:
    """Record of a persisted update for test assertions."""

    work_id: str
    payload: dict[str, Any]


@dataclass
class InMemoryWorkRepository:
    """Work repository holding the latest composers and rights chain per work."""

    works: dict[str, dict[str, Any]] = field(default_factory=dict)
    updates: list[StoredWorkUpdate] = field(default_factory=list)
    fail_with: Exception | None = None

    def update_work(self, work_id: str, payload: dict[str, Any]) -> None:
        if self.fail_with is not None:
            raise self.fail_with

        stored = copy.deepcopy(payload)
        # Composers and chain replace the previous values wholesale
        self.works[work_id] = stored
        self.updates.append(StoredWorkUpdate(work_id=work_id, payload=stored))
        logger.debug(
            "Work %s updated: %d composers", work_id, len(stored.get("composers", []))
        )

    def get_work(self, work_id: str) -> dict[str, Any] | None:
        return self.works.get(work_id)
