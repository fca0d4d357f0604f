"""Edge type for persona graphs."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PersonaEdge:
    """A directed edge from source node id to target node id (information or control flow)."""

    id: str
    source: str
    target: str
    label: str | None = None
    animated: bool = False  # presentation only
