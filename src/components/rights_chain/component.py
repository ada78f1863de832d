"""
Rights chain component.

Pure transform from a flat writer list to the hierarchical rights chain.

The builder is total and deterministic: it never raises, never validates
share totals, and is re-run from scratch on every call. Callers must check
share validation before persisting the result.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any

from src.domain.entities import EditorMode, WriterEntry
from src.domain.lookups import PUBLISHER_PERFORMANCE_RATIO, role_label

from .models import (
    ChainNode,
    ComposerNode,
    PublisherNode,
    RightsChain,
    RightsChainConfig,
    TerritoryNode,
    TerritoryTotals,
)


def writer_ownership(writer: WriterEntry, mode: EditorMode) -> float:
    """Ownership used for the chain: share in simple mode, mechanical otherwise."""
    if mode == "simple":
        return writer.share
    return writer.mechanical_ownership


def build_node(
    writer: WriterEntry,
    mode: EditorMode,
    default_publisher_id: str,
) -> ChainNode | None:
    """
    Build the top-level node for one writer.

    Returns None for writers not yet linked to a directory composer.
    """
    if not writer.composer_id:
        return None

    ownership = writer_ownership(writer, mode)
    category = role_label(writer.role)

    if not writer.is_controlled:
        # Uncontrolled writers keep both ownership and collection on their share
        return ComposerNode(
            composer_id=writer.composer_id,
            category=category,
            controlled=False,
            mechanical_ownership=ownership,
            performance_ownership=ownership,
            mechanical_collection=ownership,
            performance_collection=ownership,
        )

    performance_split = ownership * PUBLISHER_PERFORMANCE_RATIO
    return PublisherNode(
        publisher_id=writer.publisher_id or default_publisher_id,
        mechanical_collection=ownership,
        performance_collection=performance_split,
        child=ComposerNode(
            composer_id=writer.composer_id,
            category=category,
            controlled=True,
            mechanical_ownership=ownership,
            performance_ownership=ownership,
            mechanical_collection=0.0,
            performance_collection=performance_split,
        ),
    )


def generate(
    writers: Sequence[WriterEntry],
    mode: EditorMode,
    default_publisher_id: str,
) -> RightsChain:
    """
    Derive the rights chain for a work.

    Args:
        writers: Writers in display order
        mode: Editor mode deciding which ownership field is used
        default_publisher_id: Publisher for controlled writers without one

    Returns:
        Single-element list holding the World territory node
    """
    children = tuple(
        node
        for node in (build_node(w, mode, default_publisher_id) for w in writers)
        if node is not None
    )
    return [TerritoryNode(children=children)]


def generate_with_config(
    writers: Sequence[WriterEntry],
    mode: EditorMode,
    config: RightsChainConfig | None = None,
) -> RightsChain:
    """Derive the rights chain using the configured default publisher."""
    config = config or RightsChainConfig()
    return generate(writers, mode, config.default_publisher_id)


def chain_to_json(chain: RightsChain) -> list[dict[str, Any]]:
    """Serialise a rights chain to plain nested JSON-compatible data."""
    return [territory.to_dict() for territory in chain]


def _walk(nodes: Iterable[ChainNode]) -> Iterable[ChainNode]:
    for node in nodes:
        yield node
        if isinstance(node, PublisherNode):
            yield from _walk(node.children)


def territory_totals(territory: TerritoryNode) -> TerritoryTotals:
    """Sum each share field over every node in the territory, recursively."""
    mech_own = perf_own = mech_col = perf_col = 0.0
    for node in _walk(territory.children):
        mech_own += node.mechanical_ownership
        perf_own += node.performance_ownership
        mech_col += node.mechanical_collection
        perf_col += node.performance_collection

    return TerritoryTotals(
        mechanical_ownership=mech_own,
        performance_ownership=perf_own,
        mechanical_collection=mech_col,
        performance_collection=perf_col,
    )
