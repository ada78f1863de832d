from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

from src.domain.lookups import DEFAULT_ROLE_CODE, PRO_LIST

# --- Enums / Literals ---
EditorMode = Literal["simple", "advanced"]
AdvancedField = Literal[
    "mechanical_ownership",
    "performance_ownership",
    "mechanical_collection",
    "performance_collection",
]

ADVANCED_FIELDS: tuple[AdvancedField, ...] = (
    "mechanical_ownership",
    "performance_ownership",
    "mechanical_collection",
    "performance_collection",
)

# --- Writers ---

class WriterEntry(BaseModel):
    """One writer attached to a work during an editing session."""

    model_config = ConfigDict(frozen=True)

    id: str | None = None  # Set once persisted
    temp_id: str
    composer_id: str | None = None  # Unset until linked to a directory composer
    name: str = ""
    role: str = DEFAULT_ROLE_CODE

    # Simple mode
    share: float = 0.0

    is_controlled: bool = True
    publisher_id: str | None = None  # Only meaningful when controlled

    # Advanced mode
    mechanical_ownership: float = 0.0
    performance_ownership: float = 0.0
    mechanical_collection: float = 0.0
    performance_collection: float = 0.0

# --- Directory Candidates ---

class ComposerCandidate(BaseModel):
    id: str
    name: str
    first_name: str | None = None
    surname: str | None = None
    cae: str | None = None
    main_pro: str | None = None
    controlled: bool = False

class NewComposer(BaseModel):
    name: str
    first_name: str | None = None
    surname: str | None = None
    cae: str | None = None
    main_pro: str | None = None
    controlled: bool = True

    @field_validator("main_pro")
    @classmethod
    def _known_pro(cls, value: str | None) -> str | None:
        if value is not None and value not in PRO_LIST:
            raise ValueError(f"unknown PRO '{value}'")
        return value

class PublisherCandidate(BaseModel):
    id: str
    name: str

class NewPublisher(BaseModel):
    name: str

# --- Stored Work Composers ---

class WorkComposerRow(BaseModel):
    """Join-table row as returned by the work resource."""

    id: str
    composer_id: str | None = None  # Unset for rows not yet linked to a composer
    role: str | None = None
    share: float | None = None
    mechanical_ownership: float | None = None
    performance_ownership: float | None = None
    mechanical_collection: float | None = None
    performance_collection: float | None = None
    composer: ComposerCandidate | None = None
