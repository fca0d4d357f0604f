"""
Weak connectivity: split the graph (edge direction ignored) into components and flag all but the largest.
"""

from __future__ import annotations

from collections import deque
from typing import Mapping, Sequence

from personaflow.analysis.adjacency import AdjacencyIndex
from personaflow.analysis.warnings import KIND_DISCONNECTED_SUBGRAPH, AnalysisWarning
from personaflow.graph.nodes import PersonaNode

DISCONNECTED_WARNING_ID = "disconnected-subgraph"


def weakly_connected_components(
    node_ids: Sequence[str],
    undirected: Mapping[str, set[str]],
) -> list[list[str]]:
    """
    BFS flood fill seeded in node order. Each component lists nodes in discovery order.
    Neighbours are visited in node order so output does not depend on set iteration.
    """
    order = {n: i for i, n in enumerate(node_ids)}
    seen: set[str] = set()
    components: list[list[str]] = []

    for root in node_ids:
        if root in seen:
            continue
        seen.add(root)
        component: list[str] = []
        q: deque[str] = deque([root])
        while q:
            n = q.popleft()
            component.append(n)
            for neighbour in sorted(undirected.get(n, ()), key=order.__getitem__):
                if neighbour not in seen:
                    seen.add(neighbour)
                    q.append(neighbour)
        components.append(component)

    return components


def check_disconnected(
    nodes: Sequence[PersonaNode],
    index: AdjacencyIndex,
) -> list[AnalysisWarning]:
    """One info warning listing every node outside the largest component (first found wins ties)."""
    components = weakly_connected_components(index.node_ids, index.undirected)
    if len(components) <= 1:
        return []

    main = components[0]
    for component in components[1:]:
        if len(component) > len(main):
            main = component

    detached = [c for c in components if c is not main]
    orphan_ids = [n for c in detached for n in c]
    name_by_id = {n.id: n.name for n in nodes}
    names = ", ".join(name_by_id.get(i, i) for i in orphan_ids)
    groups = "group" if len(detached) == 1 else "groups"
    return [
        AnalysisWarning(
            id=DISCONNECTED_WARNING_ID,
            kind=KIND_DISCONNECTED_SUBGRAPH,
            message=(
                f"{len(detached)} {groups} of nodes not connected to the main graph: {names}"
            ),
            node_ids=tuple(orphan_ids),
            severity="info",
        )
    ]
