"""Persona node types and the node catalog shown in the editor sidebar."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal, get_args

PersonaType = Literal[
    "planner",
    "executor",
    "critic",
    "router",
    "tool",
    "memory",
    "humanCheckpoint",
]

PERSONA_TYPES: tuple[str, ...] = get_args(PersonaType)

AGENT_TYPES: tuple[str, ...] = ("planner", "executor", "critic", "router")
SYSTEM_TYPES: tuple[str, ...] = ("tool", "memory", "humanCheckpoint")


@dataclass(frozen=True)
class NodeMeta:
    """Free-form node metadata. Not read by the analysis engine."""

    description: str | None = None
    responsibilities: str | None = None
    risks: tuple[str, ...] = ()


@dataclass(frozen=True)
class PersonaNode:
    """A typed node on the architecture canvas."""

    id: str
    persona_type: PersonaType
    name: str
    meta: NodeMeta = field(default_factory=NodeMeta)
    position: tuple[float, float] | None = None


@dataclass(frozen=True)
class NodeConfig:
    """Sidebar entry for one persona type."""

    type: PersonaType
    label: str
    description: str


AGENT_CONFIGS: tuple[NodeConfig, ...] = (
    NodeConfig("planner", "Planner", "Decomposes goals into sub-tasks"),
    NodeConfig("executor", "Executor", "Executes tools and API calls"),
    NodeConfig("critic", "Critic/Verifier", "Validates agent outputs"),
    NodeConfig("router", "Router", "Routes requests to appropriate agents"),
)

SYSTEM_CONFIGS: tuple[NodeConfig, ...] = (
    NodeConfig("tool", "Tool", "External tool or API integration"),
    NodeConfig("memory", "Memory", "Persistent storage for context"),
    NodeConfig("humanCheckpoint", "Human Review", "Human-in-the-loop checkpoint"),
)

ALL_NODE_CONFIGS: tuple[NodeConfig, ...] = AGENT_CONFIGS + SYSTEM_CONFIGS


def get_node_config(persona_type: str) -> NodeConfig | None:
    for config in ALL_NODE_CONFIGS:
        if config.type == persona_type:
            return config
    return None


def is_agent_type(persona_type: str) -> bool:
    return persona_type in AGENT_TYPES
