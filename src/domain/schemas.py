from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# --- Work Update Payload ---

class WorkComposerPayload(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    composer_id: str | None = None
    role: str
    share: float
    mechanical_ownership: float
    performance_ownership: float
    mechanical_collection: float
    performance_collection: float


class WorkRightsUpdateRequest(BaseModel):
    """Composers and the derived rights chain, always written together."""

    composers: list[WorkComposerPayload] = Field(default_factory=list)
    rights_chain: list[dict[str, Any]] = Field(min_length=1)

    def to_payload(self) -> dict[str, Any]:
        return {
            "composers": [c.model_dump(by_alias=True) for c in self.composers],
            "rights_chain": self.rights_chain,
        }
