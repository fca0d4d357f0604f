"""
Downstream reachability: does a forward path of length >= 1 reach a node matching a predicate?
Used by the unverified-executor rule.
"""

from __future__ import annotations

from typing import Callable, Mapping, Sequence

from personaflow.analysis.adjacency import AdjacencyIndex
from personaflow.analysis.warnings import KIND_UNVERIFIED_EXECUTOR, AnalysisWarning
from personaflow.graph.nodes import PersonaNode

VERIFIER_TYPES = ("critic", "humanCheckpoint")


def is_verifier(persona_type: str) -> bool:
    return persona_type in VERIFIER_TYPES


def has_downstream(
    start: str,
    predicate: Callable[[str], bool],
    forward: Mapping[str, list[str]],
    persona_by_id: Mapping[str, str],
) -> bool:
    """
    DFS from start over forward edges with an explicit stack.
    Returns True as soon as a successor's persona type satisfies predicate.
    Each node is expanded at most once, so cycles terminate.
    """
    visited: set[str] = set()
    stack: list[str] = [start]
    while stack:
        node = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        successors = forward.get(node, [])
        for succ in successors:
            persona_type = persona_by_id.get(succ)
            if persona_type is None:
                continue
            if predicate(persona_type):
                return True
        # Reversed so the first successor is expanded first, as in recursive DFS.
        for succ in reversed(successors):
            if succ not in visited:
                stack.append(succ)
    return False


def check_unverified_executors(
    nodes: Sequence[PersonaNode],
    index: AdjacencyIndex,
) -> list[AnalysisWarning]:
    """One warning per executor with no reachable critic or human checkpoint, in node order."""
    persona_by_id = {n.id: n.persona_type for n in nodes}
    warnings: list[AnalysisWarning] = []
    for n in nodes:
        if n.persona_type != "executor":
            continue
        if has_downstream(n.id, is_verifier, index.forward, persona_by_id):
            continue
        warnings.append(
            AnalysisWarning(
                id=f"unverified-{n.id}",
                kind=KIND_UNVERIFIED_EXECUTOR,
                message=(
                    f'Executor "{n.name}" has no downstream Critic/Verifier '
                    "or Human Checkpoint"
                ),
                node_ids=(n.id,),
                severity="warning",
            )
        )
    return warnings
