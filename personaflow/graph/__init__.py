"""Persona graph model, loading, and Mermaid rendering."""

from personaflow.graph.edges import PersonaEdge
from personaflow.graph.graph import (
    GraphStats,
    PersonaGraph,
    build_persona_graph,
    compute_graph_stats,
    persona_graph_to_dict,
)
from personaflow.graph.loader import load_persona_graph
from personaflow.graph.mermaid import graph_to_mermaid
from personaflow.graph.nodes import (
    AGENT_CONFIGS,
    AGENT_TYPES,
    ALL_NODE_CONFIGS,
    PERSONA_TYPES,
    SYSTEM_CONFIGS,
    SYSTEM_TYPES,
    NodeConfig,
    NodeMeta,
    PersonaNode,
    PersonaType,
    get_node_config,
    is_agent_type,
)

__all__ = [
    "AGENT_CONFIGS",
    "AGENT_TYPES",
    "ALL_NODE_CONFIGS",
    "GraphStats",
    "NodeConfig",
    "NodeMeta",
    "PERSONA_TYPES",
    "PersonaEdge",
    "PersonaGraph",
    "PersonaNode",
    "PersonaType",
    "SYSTEM_CONFIGS",
    "SYSTEM_TYPES",
    "build_persona_graph",
    "compute_graph_stats",
    "get_node_config",
    "graph_to_mermaid",
    "is_agent_type",
    "load_persona_graph",
    "persona_graph_to_dict",
]
