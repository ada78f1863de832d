"""
Work writers component port definitions.

The composer and publisher directories only resolve references; they never
drive rights-chain logic. Directory adapters are scoped to one account.
"""

from __future__ import annotations

from typing import Any, Protocol

from src.domain.entities import (
    ComposerCandidate,
    NewComposer,
    NewPublisher,
    PublisherCandidate,
)


class ComposerDirectoryPort(Protocol):
    """Search/create interface for the account's composers."""

    def search(self, query: str) -> list[ComposerCandidate]:
        """Find composers whose name or CAE matches the query."""
        ...

    def create(self, data: NewComposer) -> ComposerCandidate:
        """Create a composer and return it with its assigned ID."""
        ...


class PublisherDirectoryPort(Protocol):
    """List/search/create interface for the account's publishers."""

    def list_all(self) -> list[PublisherCandidate]:
        """List all publishers."""
        ...

    def search(self, query: str) -> list[PublisherCandidate]:
        """Find publishers whose name matches the query."""
        ...

    def create(self, data: NewPublisher) -> PublisherCandidate:
        """Create a publisher and return it with its assigned ID."""
        ...


class WorkRepositoryPort(Protocol):
    """Persistence for a work's composers and rights chain."""

    def update_work(self, work_id: str, payload: dict[str, Any]) -> None:
        """
        Write composers and rights_chain in a single update.

        Raises on failure; a failed update must leave the work unchanged.
        """
        ...
