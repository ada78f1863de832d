"""
Work writers component unit tests.

Tests for writer list edits, hydration and rights-chain saves.
"""

from __future__ import annotations

from typing import Any

import pytest

from src.components.rights_chain import RightsChainConfig
from src.components.work_writers import (
    AddComposerInput,
    CreateComposerInput,
    SaveWritersInput,
    WorkWritersService,
    hydrate_writers,
    run,
    run_add_composer,
    run_create_composer,
    run_save,
)
from src.domain.entities import (
    ComposerCandidate,
    NewComposer,
    NewPublisher,
    PublisherCandidate,
    WorkComposerRow,
    WriterEntry,
)
from src.rules.models import WritersRules

# --- Mock Ports ---


class MockComposerDirectory:
    """In-memory composer directory for testing."""

    def __init__(self) -> None:
        self.created: list[NewComposer] = []
        self.queries: list[str] = []
        self.existing: list[ComposerCandidate] = [ComposerCandidate(id="c-search", name="Found")]

    def search(self, query: str) -> list[ComposerCandidate]:
        self.queries.append(query)
        return list(self.existing)

    def create(self, data: NewComposer) -> ComposerCandidate:
        self.created.append(data)
        return ComposerCandidate(
            id=f"c-new-{len(self.created)}", name=data.name, controlled=data.controlled
        )


class MockPublisherDirectory:
    """In-memory publisher directory for testing."""

    def __init__(self) -> None:
        self._publishers: list[PublisherCandidate] = []

    def list_all(self) -> list[PublisherCandidate]:
        return list(self._publishers)

    def search(self, query: str) -> list[PublisherCandidate]:
        return [p for p in self._publishers if query.lower() in p.name.lower()]

    def create(self, data: NewPublisher) -> PublisherCandidate:
        publisher = PublisherCandidate(id=f"p-{len(self._publishers) + 1}", name=data.name)
        self._publishers.append(publisher)
        return publisher


class MockWorkRepo:
    """Records update calls."""

    def __init__(self, error: Exception | None = None) -> None:
        self.calls: list[tuple[str, dict[str, Any]]] = []
        self.error = error

    def update_work(self, work_id: str, payload: dict[str, Any]) -> None:
        if self.error is not None:
            raise self.error
        self.calls.append((work_id, payload))


@pytest.fixture
def composers() -> MockComposerDirectory:
    return MockComposerDirectory()


@pytest.fixture
def publishers() -> MockPublisherDirectory:
    return MockPublisherDirectory()


@pytest.fixture
def repo() -> MockWorkRepo:
    return MockWorkRepo()


@pytest.fixture
def service(
    composers: MockComposerDirectory,
    publishers: MockPublisherDirectory,
    repo: MockWorkRepo,
) -> WorkWritersService:
    return WorkWritersService(
        composers=composers,
        publishers=publishers,
        repo=repo,
        config=RightsChainConfig(default_publisher_id="pub-default"),
    )


def composer(cid: str = "c-1", controlled: bool = True) -> ComposerCandidate:
    return ComposerCandidate(id=cid, name=f"Composer {cid}", controlled=controlled)


# --- Writer List Tests ---


class TestAddComposer:
    """Attaching composers as writers."""

    def test_add_existing_composer(self, service: WorkWritersService) -> None:
        result = run_add_composer(AddComposerInput(writers=(), composer=composer()), service)

        assert result.success is True
        assert len(result.writers) == 1
        writer = result.writers[0]
        assert writer.composer_id == "c-1"
        assert writer.temp_id == "writer-c-1"
        assert writer.role == "CA"
        assert writer.share == 0
        assert writer.is_controlled is True

    def test_controlled_flag_from_composer(self, service: WorkWritersService) -> None:
        writers, _ = service.add_existing_composer([], composer(controlled=False))
        assert writers[0].is_controlled is False

    def test_duplicate_composer_rejected(self, service: WorkWritersService) -> None:
        writers, _ = service.add_existing_composer([], composer())
        again, errors = service.add_existing_composer(writers, composer())

        assert again == writers
        assert [e.code for e in errors] == ["composer_already_added"]

    def test_default_role_from_rules(
        self,
        composers: MockComposerDirectory,
        publishers: MockPublisherDirectory,
        repo: MockWorkRepo,
    ) -> None:
        service = WorkWritersService(
            composers=composers,
            publishers=publishers,
            repo=repo,
            writer_rules=WritersRules(default_role="C"),
        )
        writers, _ = service.add_existing_composer([], composer())
        assert writers[0].role == "C"

    def test_create_and_add(
        self, service: WorkWritersService, composers: MockComposerDirectory
    ) -> None:
        result = run_create_composer(
            CreateComposerInput(writers=(), composer=NewComposer(name="New Writer")),
            service,
        )

        assert result.success is True
        assert result.writers[0].composer_id == "c-new-1"
        assert result.writers[0].name == "New Writer"
        assert len(composers.created) == 1

    def test_create_requires_name(
        self, service: WorkWritersService, composers: MockComposerDirectory
    ) -> None:
        writers, errors = service.create_and_add_composer([], NewComposer(name="  "))

        assert writers == []
        assert errors[0].code == "composer_name_required"
        assert composers.created == []

    def test_create_blocked_when_name_exists(
        self, service: WorkWritersService, composers: MockComposerDirectory
    ) -> None:
        composers.existing.append(ComposerCandidate(id="c-dup", name="Jane Doe"))
        writers, errors = service.create_and_add_composer([], NewComposer(name=" jane DOE "))

        assert writers == []
        assert [e.code for e in errors] == ["composer_exists"]
        assert "c-dup" in errors[0].message
        assert composers.created == []

    def test_create_existing_composer_already_on_work(
        self, service: WorkWritersService, composers: MockComposerDirectory
    ) -> None:
        existing = ComposerCandidate(id="c-dup", name="Jane Doe")
        composers.existing.append(existing)
        writers, _ = service.add_existing_composer([], existing)

        again, errors = service.create_and_add_composer(writers, NewComposer(name="Jane Doe"))

        assert again == writers
        assert [e.code for e in errors] == ["composer_already_added"]
        assert composers.created == []

    def test_partial_name_match_still_creates(
        self, service: WorkWritersService, composers: MockComposerDirectory
    ) -> None:
        composers.existing.append(ComposerCandidate(id="c-dup", name="Jane Doe"))
        writers, errors = service.create_and_add_composer([], NewComposer(name="Jane"))

        assert errors == []
        assert writers[0].composer_id == "c-new-1"
        assert len(composers.created) == 1

    def test_add_blank_writer(self, service: WorkWritersService) -> None:
        writers, errors = service.add_blank_writer([], "writer-tmp")
        assert errors == []
        assert writers[0].composer_id is None
        assert writers[0].is_controlled is True
        assert writers[0].role == "CA"

    def test_add_blank_writer_rejects_taken_key(self, service: WorkWritersService) -> None:
        writers, _ = service.add_existing_composer([], composer("c-1"))
        again, errors = service.add_blank_writer(writers, "writer-c-1")

        assert again == writers
        assert [e.code for e in errors] == ["writer_key_taken"]

    def test_remove_writer(self, service: WorkWritersService) -> None:
        writers, _ = service.add_existing_composer([], composer("c-1"))
        writers, _ = service.add_existing_composer(writers, composer("c-2"))
        remaining = service.remove_writer(writers, "writer-c-1")
        assert [w.composer_id for w in remaining] == ["c-2"]


class TestAssignPublisher:
    """Publisher assignment on controlled writers."""

    def test_assign(self, service: WorkWritersService) -> None:
        writers, _ = service.add_existing_composer([], composer())
        updated, errors = service.assign_publisher(writers, "writer-c-1", "pub-x")
        assert errors == []
        assert updated[0].publisher_id == "pub-x"

    def test_clear(self, service: WorkWritersService) -> None:
        writers, _ = service.add_existing_composer([], composer())
        writers, _ = service.assign_publisher(writers, "writer-c-1", "pub-x")
        cleared, _ = service.assign_publisher(writers, "writer-c-1", "")
        assert cleared[0].publisher_id is None

    def test_unknown_writer(self, service: WorkWritersService) -> None:
        _, errors = service.assign_publisher([], "missing", "pub-x")
        assert errors[0].code == "writer_not_found"

    def test_uncontrolled_writer(self, service: WorkWritersService) -> None:
        writers, _ = service.add_existing_composer([], composer(controlled=False))
        unchanged, errors = service.assign_publisher(writers, "writer-c-1", "pub-x")
        assert errors[0].code == "writer_not_controlled"
        assert unchanged[0].publisher_id is None


class TestDirectories:
    """Directory passthroughs."""

    def test_search_composers_strips_query(
        self, service: WorkWritersService, composers: MockComposerDirectory
    ) -> None:
        results = service.search_composers("  smith ")
        assert composers.queries == ["smith"]
        assert results[0].id == "c-search"

    def test_create_and_search_publishers(self, service: WorkWritersService) -> None:
        publisher, errors = service.create_publisher(NewPublisher(name="Acme Music"))
        assert errors == []
        assert publisher is not None
        assert service.search_publishers("acme") == [publisher]
        assert service.list_publishers() == [publisher]

    def test_create_publisher_requires_name(self, service: WorkWritersService) -> None:
        publisher, errors = service.create_publisher(NewPublisher(name=""))
        assert publisher is None
        assert errors[0].code == "publisher_name_required"


# --- Hydration Tests ---


class TestHydrate:
    """Rebuilding writers from stored rows."""

    def test_defaults(self) -> None:
        rows = [WorkComposerRow(id="row-1", composer_id="c-1")]
        writer = hydrate_writers(rows)[0]

        assert writer.id == "row-1"
        assert writer.temp_id == "writer-c-1"
        assert writer.role == "CA"
        assert writer.share == 0
        assert writer.name == "Unknown"
        assert writer.is_controlled is False

    def test_from_row(self) -> None:
        rows = [
            WorkComposerRow(
                id="row-1",
                composer_id="c-1",
                role="AR",
                share=45,
                mechanical_ownership=45,
                composer=ComposerCandidate(id="c-1", name="Ada", controlled=True),
            )
        ]
        writer = hydrate_writers(rows)[0]

        assert writer.role == "AR"
        assert writer.share == 45
        assert writer.mechanical_ownership == 45
        assert writer.name == "Ada"
        assert writer.is_controlled is True

    def test_unlinked_row_keyed_by_position(self) -> None:
        rows = [
            WorkComposerRow(id="row-1", composer_id="c-1"),
            WorkComposerRow(id="row-2", share=20),
        ]
        writers = hydrate_writers(rows)

        assert [w.temp_id for w in writers] == ["writer-c-1", "writer-1"]
        assert writers[1].composer_id is None
        assert writers[1].share == 20


# --- Save Tests ---


class TestSave:
    """Saving writers and the derived chain."""

    def _writers(self, service: WorkWritersService) -> list[WriterEntry]:
        writers, _ = service.add_existing_composer([], composer("c-1"))
        writers, _ = service.add_existing_composer(writers, composer("c-2", controlled=False))
        return [
            writers[0].model_copy(update={"share": 70}),
            writers[1].model_copy(update={"share": 30}),
        ]

    def test_save_success(self, service: WorkWritersService, repo: MockWorkRepo) -> None:
        writers = self._writers(service)
        result = run_save(SaveWritersInput(work_id="w-1", writers=tuple(writers)), service)

        assert result.success is True
        assert len(repo.calls) == 1
        work_id, payload = repo.calls[0]
        assert work_id == "w-1"
        assert set(payload) == {"composers", "rights_chain"}
        assert payload["composers"][0] == {
            "composerId": "c-1",
            "role": "CA",
            "share": 70.0,
            "mechanicalOwnership": 0.0,
            "performanceOwnership": 0.0,
            "mechanicalCollection": 0.0,
            "performanceCollection": 0.0,
        }
        children = payload["rights_chain"][0]["children"]
        assert len(children) == 2
        assert children[0]["publisherId"] == "pub-default"

    def test_invalid_total_blocks_save(
        self, service: WorkWritersService, repo: MockWorkRepo
    ) -> None:
        writers, _ = service.add_existing_composer([], composer())
        writers = [writers[0].model_copy(update={"share": 87})]
        result = service.save("w-1", writers)

        assert result.success is False
        assert result.errors[0].code == "share_total_invalid"
        assert repo.calls == []

    def test_empty_writers_saved_by_default(
        self, service: WorkWritersService, repo: MockWorkRepo
    ) -> None:
        result = service.save("w-1", [])

        assert result.success is True
        assert repo.calls[0][1] == {
            "composers": [],
            "rights_chain": [{"territory": "World", "children": []}],
        }

    def test_empty_writers_rejected_when_required(
        self,
        composers: MockComposerDirectory,
        publishers: MockPublisherDirectory,
        repo: MockWorkRepo,
    ) -> None:
        service = WorkWritersService(
            composers=composers,
            publishers=publishers,
            repo=repo,
            writer_rules=WritersRules(require_writers=True),
        )
        result = service.save("w-1", [])
        assert result.errors[0].code == "writers_required"
        assert repo.calls == []

    def test_repository_failure(
        self,
        composers: MockComposerDirectory,
        publishers: MockPublisherDirectory,
    ) -> None:
        service = WorkWritersService(
            composers=composers,
            publishers=publishers,
            repo=MockWorkRepo(error=ConnectionError("boom")),
        )
        writers = [WriterEntry(temp_id="w", composer_id="c-1", share=100)]
        result = service.save("w-1", writers)

        assert result.success is False
        assert [e.code for e in result.errors] == ["save_failed"]
        assert result.errors[0].message == "Failed to save IP chain"
        # Session state untouched
        assert writers[0].share == 100

    def test_advanced_mode_uses_mechanical_ownership(
        self, service: WorkWritersService, repo: MockWorkRepo
    ) -> None:
        writers = [
            WriterEntry(
                temp_id="w",
                composer_id="c-1",
                share=0,
                is_controlled=False,
                mechanical_ownership=100,
            )
        ]
        result = service.save("w-1", writers, mode="advanced")

        assert result.success is True
        node = repo.calls[0][1]["rights_chain"][0]["children"][0]
        assert node["mechanicalOwnership"] == 100

    def test_run_dispatch_unknown_input(self, service: WorkWritersService) -> None:
        with pytest.raises(TypeError):
            run("bogus", service)  # type: ignore[arg-type]
