"""
Unused memory: a memory node should be both written (incoming) and read (outgoing).
"""

from __future__ import annotations

from typing import Sequence

from personaflow.analysis.adjacency import AdjacencyIndex
from personaflow.analysis.warnings import KIND_UNUSED_MEMORY, AnalysisWarning
from personaflow.graph.nodes import PersonaNode


def check_unused_memory(
    nodes: Sequence[PersonaNode],
    index: AdjacencyIndex,
) -> list[AnalysisWarning]:
    warnings: list[AnalysisWarning] = []
    for n in nodes:
        if n.persona_type != "memory":
            continue
        has_incoming = index.in_degree(n.id) > 0
        has_outgoing = index.out_degree(n.id) > 0
        if has_incoming and has_outgoing:
            continue

        if has_incoming:
            issue = "has no outgoing edges (never read)"
        elif has_outgoing:
            issue = "has no incoming edges (never written)"
        else:
            issue = "is not connected to any nodes"
        warnings.append(
            AnalysisWarning(
                id=f"unused-memory-{n.id}",
                kind=KIND_UNUSED_MEMORY,
                message=f'Memory "{n.name}" {issue}',
                node_ids=(n.id,),
                severity="warning",
            )
        )
    return warnings
