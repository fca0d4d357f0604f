"""Tests for persona graph model: nodes, edges, editing helpers, stats, dict serialization."""

import json

import pytest

from personaflow.graph import (
    ALL_NODE_CONFIGS,
    PERSONA_TYPES,
    NodeMeta,
    PersonaEdge,
    PersonaGraph,
    PersonaNode,
    build_persona_graph,
    compute_graph_stats,
    get_node_config,
    is_agent_type,
    persona_graph_to_dict,
)


def _small_graph() -> PersonaGraph:
    nodes = [
        PersonaNode("r", "router", "Router"),
        PersonaNode("e", "executor", "Executor"),
        PersonaNode("c", "critic", "Critic"),
    ]
    edges = [
        PersonaEdge("r-e", "r", "e"),
        PersonaEdge("e-c", "e", "c", label="verify"),
    ]
    return build_persona_graph(nodes, edges, name="small")


def test_persona_types_closed_set():
    """Seven persona types, each with a sidebar config."""
    assert set(PERSONA_TYPES) == {
        "planner", "executor", "critic", "router", "tool", "memory", "humanCheckpoint",
    }
    assert {c.type for c in ALL_NODE_CONFIGS} == set(PERSONA_TYPES)
    assert get_node_config("humanCheckpoint").label == "Human Review"
    assert get_node_config("nope") is None


def test_is_agent_type():
    """Planner, executor, critic, router are agents; tool, memory, humanCheckpoint are not."""
    assert is_agent_type("planner") and is_agent_type("router")
    assert not is_agent_type("tool")
    assert not is_agent_type("humanCheckpoint")


def test_node_is_frozen():
    """PersonaNode is an immutable dataclass."""
    n = PersonaNode("a", "planner", "A")
    with pytest.raises(Exception):
        n.name = "B"


def test_build_rejects_duplicate_ids():
    """Duplicate node ids violate graph invariant."""
    with pytest.raises(ValueError, match="Duplicate node id"):
        build_persona_graph(
            [PersonaNode("a", "planner", "A"), PersonaNode("a", "critic", "A2")], []
        )


def test_build_keeps_dangling_edges():
    """Edges to unknown nodes are legal in the model."""
    g = build_persona_graph([PersonaNode("a", "planner", "A")], [PersonaEdge("x", "a", "ghost")])
    assert len(g.edges) == 1


def test_with_node_appends_and_rejects_duplicate():
    """with_node returns a new graph; original is untouched."""
    g = _small_graph()
    g2 = g.with_node(PersonaNode("m", "memory", "Memory"))
    assert len(g.nodes) == 3
    assert [n.id for n in g2.nodes] == ["r", "e", "c", "m"]
    with pytest.raises(ValueError):
        g2.with_node(PersonaNode("m", "tool", "Other"))


def test_without_node_removes_incident_edges():
    """Deleting a node cascades to its edges."""
    g = _small_graph().without_node("e")
    assert [n.id for n in g.nodes] == ["r", "c"]
    assert g.edges == ()


def test_with_edge_prevents_duplicate_pair():
    """A second edge with the same source and target is ignored."""
    g = _small_graph()
    same = g.with_edge(PersonaEdge("dup", "r", "e"))
    assert same is g
    g2 = g.with_edge(PersonaEdge("c-r", "c", "r"))
    assert [e.id for e in g2.edges] == ["r-e", "e-c", "c-r"]


def test_build_rejects_duplicate_edge_ids():
    """Edge ids are unique too; without_edge would otherwise drop both."""
    with pytest.raises(ValueError, match="Duplicate edge id: 1"):
        build_persona_graph(
            [PersonaNode("a", "planner", "A"), PersonaNode("b", "executor", "B")],
            [PersonaEdge("1", "a", "b"), PersonaEdge("1", "b", "a")],
        )


def test_with_edge_rejects_duplicate_id():
    g = _small_graph()
    with pytest.raises(ValueError, match="Duplicate edge id: r-e"):
        g.with_edge(PersonaEdge("r-e", "c", "r"))
    # Same pair still wins over a reused id.
    assert g.with_edge(PersonaEdge("r-e", "r", "e")) is g


def test_without_reconnect_relabel_edge():
    """Edge helpers remove, move, and relabel by edge id."""
    g = _small_graph()
    assert [e.id for e in g.without_edge("r-e").edges] == ["e-c"]
    moved = g.reconnect_edge("e-c", target="r")
    assert moved.edge_by_id("e-c").target == "r"
    assert moved.edge_by_id("e-c").source == "e"
    assert moved.edge_by_id("e-c").label == "verify"
    assert g.relabel_edge("r-e", "dispatch").edge_by_id("r-e").label == "dispatch"


def test_update_node():
    """update_node replaces name and meta, keeping id and type."""
    g = _small_graph().update_node("c", name="Verifier", meta=NodeMeta(description="checks"))
    c = g.node_by_id("c")
    assert c.name == "Verifier"
    assert c.persona_type == "critic"
    assert c.meta.description == "checks"
    assert g.node_by_id("missing") is None


def test_graph_stats():
    """Agents, tools, memory are counted; human checkpoints count as none of these."""
    nodes = [
        PersonaNode("1", "planner", "P"),
        PersonaNode("2", "executor", "E"),
        PersonaNode("3", "tool", "T"),
        PersonaNode("4", "memory", "M"),
        PersonaNode("5", "humanCheckpoint", "H"),
    ]
    stats = compute_graph_stats(nodes)
    assert (stats.agents, stats.tools, stats.memory) == (2, 1, 1)


def test_persona_graph_to_dict_structure():
    """Export shape keeps canvas order and omits empty meta fields."""
    g = PersonaGraph(
        nodes=(
            PersonaNode("b", "tool", "B", NodeMeta(risks=("rate limits",)), (1.0, 2.0)),
            PersonaNode("a", "planner", "A"),
        ),
        edges=(PersonaEdge("x", "a", "b", animated=True),),
    )
    d = persona_graph_to_dict(g)
    assert d["version"] == "1.0"
    assert [n["id"] for n in d["nodes"]] == ["b", "a"]
    assert d["nodes"][0] == {
        "id": "b",
        "type": "tool",
        "name": "B",
        "position": {"x": 1.0, "y": 2.0},
        "meta": {"risks": ["rate limits"]},
    }
    assert d["nodes"][1]["position"] is None
    assert d["nodes"][1]["meta"] == {}
    assert d["edges"][0] == {
        "id": "x", "source": "a", "target": "b", "label": None, "animated": True,
    }
    assert json.dumps(d, sort_keys=True) == json.dumps(persona_graph_to_dict(g), sort_keys=True)
