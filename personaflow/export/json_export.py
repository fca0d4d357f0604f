"""
JSON export in the editor's interchange shape; loads back through load_persona_graph.
"""

from __future__ import annotations

import json
from datetime import datetime, timezone

from personaflow.graph.graph import DEFAULT_SCHEMA_VERSION, PersonaGraph, persona_graph_to_dict

DEFAULT_EXPORT_NAME = "PersonaFlow Export"


def export_to_json(
    graph: PersonaGraph,
    *,
    include_metadata: bool = True,
    minify: bool = False,
    schema_version: str = DEFAULT_SCHEMA_VERSION,
    exported_at: datetime | None = None,
) -> str:
    """
    Serialize graph to a JSON string.

    With include_metadata, adds "name" (graph name or the default export name)
    and "exportedAt" (ISO-8601, UTC now unless exported_at is given).
    """
    data = persona_graph_to_dict(graph, schema_version=schema_version)
    if include_metadata:
        data["name"] = graph.name or DEFAULT_EXPORT_NAME
        stamp = exported_at or datetime.now(timezone.utc)
        data["exportedAt"] = stamp.isoformat()

    if minify:
        return json.dumps(data, separators=(",", ":"))
    return json.dumps(data, indent=2)
