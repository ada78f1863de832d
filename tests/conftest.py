from pathlib import Path

import pytest

from src.adapters.memory import (
    InMemoryComposerDirectory,
    InMemoryPublisherDirectory,
    InMemoryWorkRepository,
)
from src.components.work_writers import WorkWritersService, create_work_writers_service
from src.domain.entities import ComposerCandidate
from src.rules.loader import load_rules
from src.rules.models import Rules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rules_path() -> Path:
    return PROJECT_ROOT / "rights_chain_rules.yaml"


@pytest.fixture
def rules(rules_path: Path) -> Rules:
    """Load the REAL rules from project root."""
    return load_rules(rules_path)


@pytest.fixture
def composer_directory() -> InMemoryComposerDirectory:
    directory = InMemoryComposerDirectory(account_id="acct-1")
    directory.add(ComposerCandidate(id="c-ada", name="Ada Lovelace", cae="00014107338", controlled=True))
    directory.add(ComposerCandidate(id="c-bob", name="Bob Writer", main_pro="PRS", controlled=False))
    return directory


@pytest.fixture
def publisher_directory() -> InMemoryPublisherDirectory:
    return InMemoryPublisherDirectory(account_id="acct-1")


@pytest.fixture
def work_repo() -> InMemoryWorkRepository:
    return InMemoryWorkRepository()


@pytest.fixture
def work_ctx(
    composer_directory: InMemoryComposerDirectory,
    publisher_directory: InMemoryPublisherDirectory,
    work_repo: InMemoryWorkRepository,
    rules: Rules,
) -> WorkWritersService:
    """
    Creates a WorkWritersService backed by in-memory adapters and real rules.
    """
    return create_work_writers_service(
        composers=composer_directory,
        publishers=publisher_directory,
        repo=work_repo,
        rules=rules,
    )
