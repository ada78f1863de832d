"""
Rights chain component models.

Node types of the derived rights-chain tree and builder configuration.

The tree is always Territory -> (Publisher -> Composer | Composer).
Nodes serialise to the camelCase JSON stored alongside the work record.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from src.domain.lookups import ORIGINAL_PUBLISHER, SYSTEM_PUBLISHER_ID, WORLD_TERRITORY

# --- Configuration ---


@dataclass(frozen=True)
class RightsChainConfig:
    """Rights chain configuration from rules."""

    default_publisher_id: str = SYSTEM_PUBLISHER_ID

    @classmethod
    def from_rules(cls, rules: Any) -> RightsChainConfig:
        """Build config from loaded Rules."""
        return cls(default_publisher_id=rules.rights_chain.default_publisher_id)


# --- Nodes ---


@dataclass(frozen=True)
class ComposerNode:
    """Leaf node for a single writer."""

    composer_id: str
    category: str
    controlled: bool
    mechanical_ownership: float
    performance_ownership: float
    mechanical_collection: float
    performance_collection: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "composerId": self.composer_id,
            "category": self.category,
            "controlled": self.controlled,
            "mechanicalOwnership": self.mechanical_ownership,
            "performanceOwnership": self.performance_ownership,
            "mechanicalCollection": self.mechanical_collection,
            "performanceCollection": self.performance_collection,
        }


@dataclass(frozen=True)
class PublisherNode:
    """Original publisher administering one controlled writer."""

    publisher_id: str
    mechanical_collection: float
    performance_collection: float
    child: ComposerNode
    category: Literal["Original Publisher"] = ORIGINAL_PUBLISHER
    controlled: Literal[True] = True
    mechanical_ownership: float = 0.0
    performance_ownership: float = 0.0

    @property
    def children(self) -> tuple[ComposerNode]:
        return (self.child,)

    def to_dict(self) -> dict[str, Any]:
        return {
            "publisherId": self.publisher_id,
            "category": self.category,
            "controlled": self.controlled,
            "mechanicalOwnership": self.mechanical_ownership,
            "performanceOwnership": self.performance_ownership,
            "mechanicalCollection": self.mechanical_collection,
            "performanceCollection": self.performance_collection,
            "children": [self.child.to_dict()],
        }


ChainNode = PublisherNode | ComposerNode


@dataclass(frozen=True)
class TerritoryNode:
    """Root of the rights chain."""

    children: tuple[ChainNode, ...] = field(default_factory=tuple)
    territory: str = WORLD_TERRITORY

    def to_dict(self) -> dict[str, Any]:
        return {
            "territory": self.territory,
            "children": [child.to_dict() for child in self.children],
        }


RightsChain = list[TerritoryNode]


# --- Totals ---


@dataclass(frozen=True)
class TerritoryTotals:
    """Sum of each share field over every node of a territory."""

    mechanical_ownership: float = 0.0
    performance_ownership: float = 0.0
    mechanical_collection: float = 0.0
    performance_collection: float = 0.0

    def to_dict(self) -> dict[str, float]:
        return {
            "totalMechanicalOwnership": self.mechanical_ownership,
            "totalPerformanceOwnership": self.performance_ownership,
            "totalMechanicalCollection": self.mechanical_collection,
            "totalPerformanceCollection": self.performance_collection,
        }
