"""
Entry/exit classification: flag graphs with no in-degree-zero node or no out-degree-zero node.
"""

from __future__ import annotations

from typing import Sequence

from personaflow.analysis.adjacency import AdjacencyIndex
from personaflow.analysis.warnings import (
    KIND_NO_ENTRY_NODES,
    KIND_NO_EXIT_NODES,
    AnalysisWarning,
)
from personaflow.graph.nodes import PersonaNode


def entry_nodes(index: AdjacencyIndex) -> list[str]:
    """Nodes with no incoming edge, in node order."""
    return [n for n in index.node_ids if index.in_degree(n) == 0]


def exit_nodes(index: AdjacencyIndex) -> list[str]:
    """Nodes with no outgoing edge, in node order."""
    return [n for n in index.node_ids if index.out_degree(n) == 0]


def check_entry_exit(
    nodes: Sequence[PersonaNode],
    index: AdjacencyIndex,
) -> list[AnalysisWarning]:
    """
    no-entry-nodes then no-exit-nodes, each listing every node id.
    An isolated node counts as both entry and exit.
    """
    if not index.node_ids:
        return []

    all_ids = tuple(index.node_ids)
    warnings: list[AnalysisWarning] = []
    if not entry_nodes(index):
        warnings.append(
            AnalysisWarning(
                id="no-entry-nodes",
                kind=KIND_NO_ENTRY_NODES,
                message="No entry point: every node has at least one incoming edge",
                node_ids=all_ids,
                severity="info",
            )
        )
    if not exit_nodes(index):
        warnings.append(
            AnalysisWarning(
                id="no-exit-nodes",
                kind=KIND_NO_EXIT_NODES,
                message="No exit point: every node has at least one outgoing edge",
                node_ids=all_ids,
                severity="info",
            )
        )
    return warnings
