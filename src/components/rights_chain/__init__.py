"""
Rights chain component.

Public API for deriving the territory/publisher/composer rights tree.
"""

from .component import (
    build_node,
    chain_to_json,
    generate,
    generate_with_config,
    territory_totals,
    writer_ownership,
)
from .models import (
    ChainNode,
    ComposerNode,
    PublisherNode,
    RightsChain,
    RightsChainConfig,
    TerritoryNode,
    TerritoryTotals,
)

__all__ = [
    # Functions
    "build_node",
    "chain_to_json",
    "generate",
    "generate_with_config",
    "territory_totals",
    "writer_ownership",
    # Models
    "ChainNode",
    "ComposerNode",
    "PublisherNode",
    "RightsChain",
    "RightsChainConfig",
    "TerritoryNode",
    "TerritoryTotals",
]
