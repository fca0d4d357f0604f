"""
Persona graph data model, immutable editing helpers, and deterministic dict serialization.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from personaflow.graph.edges import PersonaEdge
from personaflow.graph.nodes import AGENT_TYPES, NodeMeta, PersonaNode

DEFAULT_SCHEMA_VERSION = "1.0"


@dataclass(frozen=True)
class GraphStats:
    """Node counts shown in the editor status strip."""

    agents: int
    tools: int
    memory: int


@dataclass(frozen=True)
class PersonaGraph:
    """
    Snapshot of a persona architecture: nodes and directed edges in canvas order.
    Editing helpers never mutate; they return a new PersonaGraph.
    """

    nodes: tuple[PersonaNode, ...] = ()
    edges: tuple[PersonaEdge, ...] = ()
    name: str | None = None

    def node_by_id(self, node_id: str) -> PersonaNode | None:
        for n in self.nodes:
            if n.id == node_id:
                return n
        return None

    def edge_by_id(self, edge_id: str) -> PersonaEdge | None:
        for e in self.edges:
            if e.id == edge_id:
                return e
        return None

    def with_node(self, node: PersonaNode) -> PersonaGraph:
        """Append node. Raises ValueError if a node with the same id exists."""
        if self.node_by_id(node.id) is not None:
            raise ValueError(f"Duplicate node id: {node.id}")
        return replace(self, nodes=self.nodes + (node,))

    def without_node(self, node_id: str) -> PersonaGraph:
        """Remove node and every edge touching it."""
        return replace(
            self,
            nodes=tuple(n for n in self.nodes if n.id != node_id),
            edges=tuple(
                e for e in self.edges if e.source != node_id and e.target != node_id
            ),
        )

    def update_node(
        self,
        node_id: str,
        *,
        name: str | None = None,
        meta: NodeMeta | None = None,
    ) -> PersonaGraph:
        nodes = []
        for n in self.nodes:
            if n.id == node_id:
                if name is not None:
                    n = replace(n, name=name)
                if meta is not None:
                    n = replace(n, meta=meta)
            nodes.append(n)
        return replace(self, nodes=tuple(nodes))

    def with_edge(self, edge: PersonaEdge) -> PersonaGraph:
        """
        Append edge unless one already joins the same source and target.
        Raises ValueError if another edge already uses edge.id.
        """
        for e in self.edges:
            if e.source == edge.source and e.target == edge.target:
                return self
        if self.edge_by_id(edge.id) is not None:
            raise ValueError(f"Duplicate edge id: {edge.id}")
        return replace(self, edges=self.edges + (edge,))

    def without_edge(self, edge_id: str) -> PersonaGraph:
        return replace(self, edges=tuple(e for e in self.edges if e.id != edge_id))

    def reconnect_edge(
        self,
        edge_id: str,
        *,
        source: str | None = None,
        target: str | None = None,
    ) -> PersonaGraph:
        """Move one or both endpoints of an edge, keeping its id, label and flags."""
        edges = []
        for e in self.edges:
            if e.id == edge_id:
                e = replace(
                    e,
                    source=e.source if source is None else source,
                    target=e.target if target is None else target,
                )
            edges.append(e)
        return replace(self, edges=tuple(edges))

    def relabel_edge(self, edge_id: str, label: str | None) -> PersonaGraph:
        return replace(
            self,
            edges=tuple(replace(e, label=label) if e.id == edge_id else e for e in self.edges),
        )


def build_persona_graph(
    nodes: list[PersonaNode],
    edges: list[PersonaEdge],
    name: str | None = None,
) -> PersonaGraph:
    """Build a PersonaGraph. Raises ValueError on duplicate node ids or edge ids; dangling edges are kept."""
    seen: set[str] = set()
    for n in nodes:
        if n.id in seen:
            raise ValueError(f"Duplicate node id: {n.id}")
        seen.add(n.id)
    seen_edges: set[str] = set()
    for e in edges:
        if e.id in seen_edges:
            raise ValueError(f"Duplicate edge id: {e.id}")
        seen_edges.add(e.id)
    return PersonaGraph(nodes=tuple(nodes), edges=tuple(edges), name=name)


def compute_graph_stats(nodes: tuple[PersonaNode, ...] | list[PersonaNode]) -> GraphStats:
    return GraphStats(
        agents=sum(1 for n in nodes if n.persona_type in AGENT_TYPES),
        tools=sum(1 for n in nodes if n.persona_type == "tool"),
        memory=sum(1 for n in nodes if n.persona_type == "memory"),
    )


def node_meta_to_dict(meta: NodeMeta) -> dict:
    """Only populated fields are emitted."""
    d: dict = {}
    if meta.description is not None:
        d["description"] = meta.description
    if meta.responsibilities is not None:
        d["responsibilities"] = meta.responsibilities
    if meta.risks:
        d["risks"] = list(meta.risks)
    return d


def persona_graph_to_dict(g: PersonaGraph, schema_version: str = DEFAULT_SCHEMA_VERSION) -> dict:
    """
    Return a JSON-serializable dict in the editor's export shape.
    Node and edge order is canvas order, since analysis output order depends on it.
    """
    return {
        "version": schema_version,
        "nodes": [
            {
                "id": n.id,
                "type": n.persona_type,
                "name": n.name,
                "position": (
                    None
                    if n.position is None
                    else {"x": n.position[0], "y": n.position[1]}
                ),
                "meta": node_meta_to_dict(n.meta),
            }
            for n in g.nodes
        ],
        "edges": [
            {
                "id": e.id,
                "source": e.source,
                "target": e.target,
                "label": e.label,
                "animated": e.animated,
            }
            for e in g.edges
        ],
    }
