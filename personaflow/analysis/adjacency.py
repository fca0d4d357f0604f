"""
Build forward, reverse, and undirected adjacency views from a node/edge snapshot.
Every node id is present in each view; edges touching unknown ids are skipped.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable

from personaflow.graph.edges import PersonaEdge
from personaflow.graph.nodes import PersonaNode


@dataclass
class AdjacencyIndex:
    """
    Adjacency lists for one analysis pass.
    forward/reverse keep edge order and parallel edges; undirected is a neighbour set.
    """

    node_ids: list[str] = field(default_factory=list)
    forward: dict[str, list[str]] = field(default_factory=dict)
    reverse: dict[str, list[str]] = field(default_factory=dict)
    undirected: dict[str, set[str]] = field(default_factory=dict)

    def successors(self, node: str) -> list[str]:
        """Targets of edges from node (order preserved)."""
        return self.forward.get(node, [])

    def predecessors(self, node: str) -> list[str]:
        """Sources of edges into node (order preserved)."""
        return self.reverse.get(node, [])

    def in_degree(self, node: str) -> int:
        return len(self.reverse.get(node, []))

    def out_degree(self, node: str) -> int:
        return len(self.forward.get(node, []))

    def add_node(self, node: str) -> None:
        if node in self.forward:
            return
        self.node_ids.append(node)
        self.forward[node] = []
        self.reverse[node] = []
        self.undirected[node] = set()

    def add_edge(self, source: str, target: str) -> bool:
        """Record source -> target. Returns False (and records nothing) if an endpoint is unknown."""
        if source not in self.forward or target not in self.forward:
            return False
        self.forward[source].append(target)
        self.reverse[target].append(source)
        self.undirected[source].add(target)
        self.undirected[target].add(source)
        return True


def build_adjacency_index(
    nodes: Iterable[PersonaNode],
    edges: Iterable[PersonaEdge],
) -> AdjacencyIndex:
    """
    Build an AdjacencyIndex in O(|nodes| + |edges|).
    Nodes: every node id in input order. Edges: each edge whose source and target both exist.
    """
    index = AdjacencyIndex()
    for n in nodes:
        index.add_node(n.id)
    for e in edges:
        index.add_edge(e.source, e.target)
    return index
