from pydantic import BaseModel, Field, field_validator

from src.domain.lookups import DEFAULT_ROLE_CODE, ROLE_LABELS, SYSTEM_PUBLISHER_ID


class ProjectRules(BaseModel):
    slug: str
    rules_version: str

class RightsChainRules(BaseModel):
    default_publisher_id: str = Field(default=SYSTEM_PUBLISHER_ID, min_length=1)

class WritersRules(BaseModel):
    default_role: str = DEFAULT_ROLE_CODE
    default_controlled: bool = True
    require_writers: bool = False
    share_tolerance: float = Field(default=0.01, gt=0, le=1)

    @field_validator("default_role")
    @classmethod
    def _known_role(cls, value: str) -> str:
        if value not in ROLE_LABELS:
            raise ValueError(f"unknown writer role code '{value}'")
        return value

class Rules(BaseModel):
    project: ProjectRules
    rights_chain: RightsChainRules = Field(default_factory=RightsChainRules)
    writers: WritersRules = Field(default_factory=WritersRules)
