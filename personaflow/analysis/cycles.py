"""
Cycle detection: every node taking part in at least one directed cycle, reported as one aggregate warning.

Back-edge DFS gives cycle members in discovery order. Members it cannot see (cycles closed
through an already finished node) are filled in from strongly connected components.
Both traversals use explicit stacks.
"""

from __future__ import annotations

from typing import Iterator, Mapping, Sequence

from personaflow.analysis.adjacency import AdjacencyIndex
from personaflow.analysis.warnings import KIND_UNBOUNDED_LOOP, AnalysisWarning
from personaflow.graph.nodes import PersonaNode

CYCLE_WARNING_ID = "cycle-detected"


def _back_edge_cycle_nodes(
    node_ids: Sequence[str],
    forward: Mapping[str, list[str]],
) -> list[str]:
    """
    DFS with visited + on-stack sets. On each back edge node -> succ, the current path
    from succ through node is a cycle; its members are accumulated (deduplicated, in order).
    Search continues after every cycle.
    """
    visited: set[str] = set()
    on_stack: set[str] = set()
    found: dict[str, None] = {}

    for root in node_ids:
        if root in visited:
            continue
        path: list[str] = [root]
        position: dict[str, int] = {root: 0}
        visited.add(root)
        on_stack.add(root)
        work: list[tuple[str, Iterator[str]]] = [(root, iter(forward.get(root, [])))]

        while work:
            node, successors = work[-1]
            descended = False
            for succ in successors:
                if succ not in visited:
                    visited.add(succ)
                    on_stack.add(succ)
                    position[succ] = len(path)
                    path.append(succ)
                    work.append((succ, iter(forward.get(succ, []))))
                    descended = True
                    break
                if succ in on_stack:
                    for member in path[position[succ]:]:
                        found.setdefault(member, None)
            if descended:
                continue
            work.pop()
            on_stack.discard(node)
            path.pop()
            del position[node]

    return list(found)


def strongly_connected_components(
    node_ids: Sequence[str],
    forward: Mapping[str, list[str]],
) -> list[list[str]]:
    """Tarjan's algorithm with an explicit work stack; components in completion order."""
    index: dict[str, int] = {}
    lowlink: dict[str, int] = {}
    counter = 0
    scc_stack: list[str] = []
    on_stack: set[str] = set()
    sccs: list[list[str]] = []

    for root in node_ids:
        if root in index:
            continue
        index[root] = lowlink[root] = counter
        counter += 1
        scc_stack.append(root)
        on_stack.add(root)
        work: list[tuple[str, Iterator[str]]] = [(root, iter(forward.get(root, [])))]

        while work:
            v, successors = work[-1]
            descended = False
            for w in successors:
                if w not in index:
                    index[w] = lowlink[w] = counter
                    counter += 1
                    scc_stack.append(w)
                    on_stack.add(w)
                    work.append((w, iter(forward.get(w, []))))
                    descended = True
                    break
                if w in on_stack:
                    lowlink[v] = min(lowlink[v], index[w])
            if descended:
                continue

            work.pop()
            if work:
                parent = work[-1][0]
                lowlink[parent] = min(lowlink[parent], lowlink[v])
            if lowlink[v] == index[v]:
                component: list[str] = []
                while True:
                    w = scc_stack.pop()
                    on_stack.discard(w)
                    component.append(w)
                    if w == v:
                        break
                sccs.append(component)

    return sccs


def _is_cyclic_component(component: list[str], forward: Mapping[str, list[str]]) -> bool:
    if len(component) > 1:
        return True
    node = component[0]
    return node in forward.get(node, [])


def find_cycle_nodes(
    node_ids: Sequence[str],
    forward: Mapping[str, list[str]],
) -> list[str]:
    """
    All nodes on at least one directed cycle (self-loops included).
    Order: back-edge discovery order, then remaining cyclic-component members in node order.
    """
    discovered = _back_edge_cycle_nodes(node_ids, forward)
    seen = set(discovered)

    missing: set[str] = set()
    for component in strongly_connected_components(node_ids, forward):
        if _is_cyclic_component(component, forward):
            missing.update(n for n in component if n not in seen)

    return discovered + [n for n in node_ids if n in missing]


def check_cycles(
    nodes: Sequence[PersonaNode],
    index: AdjacencyIndex,
) -> list[AnalysisWarning]:
    """At most one unbounded-loop warning covering every cycle member."""
    cycle_nodes = find_cycle_nodes(index.node_ids, index.forward)
    if not cycle_nodes:
        return []

    name_by_id = {n.id: n.name for n in nodes}
    names = ", ".join(name_by_id.get(i, i) for i in cycle_nodes)
    return [
        AnalysisWarning(
            id=CYCLE_WARNING_ID,
            kind=KIND_UNBOUNDED_LOOP,
            message=f"Possible unbounded loop detected involving: {names}",
            node_ids=tuple(cycle_nodes),
            severity="warning",
        )
    ]
