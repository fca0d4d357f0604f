"""
Graph loader: build a PersonaGraph from an exported JSON/YAML document or a dict.
Accepts the export shape (type/name at node root) and the editor shape (data.personaType/data.name).
Dangling edges are kept and reported as warnings; they are legal mid-edit.
"""

from __future__ import annotations

import json
from pathlib import Path

import yaml

from personaflow.graph.edges import PersonaEdge
from personaflow.graph.graph import PersonaGraph, build_persona_graph
from personaflow.graph.nodes import PERSONA_TYPES, NodeMeta, PersonaNode


def load_persona_graph(
    source: PersonaGraph | str | Path | dict,
) -> tuple[PersonaGraph, list[str]]:
    """
    Load a PersonaGraph from various sources.

    Args:
        source: Can be:
            - PersonaGraph instance: returned as-is
            - str or Path: .json file (json) or .yaml/.yml file (PyYAML)
            - dict: document with "nodes" and "edges" lists

    Returns:
        (PersonaGraph, list of load warning strings)

    Raises:
        FileNotFoundError: If source is a file path that doesn't exist
        ValueError: If the document is malformed, has unknown persona types or duplicate node ids
        TypeError: If source is of an unsupported type
    """
    if isinstance(source, PersonaGraph):
        return source, []

    if isinstance(source, (str, Path)):
        return _load_from_dict(_read_document(Path(source)))

    if isinstance(source, dict):
        return _load_from_dict(source)

    raise TypeError(
        f"Unsupported source type for load_persona_graph: {type(source).__name__}"
    )


def _read_document(file_path: Path) -> dict:
    if not file_path.exists():
        raise FileNotFoundError(f"Graph file not found: {file_path}")

    content = file_path.read_text(encoding="utf-8")
    try:
        if file_path.suffix.lower() == ".json":
            data = json.loads(content)
        else:
            data = yaml.safe_load(content)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise ValueError(f"Failed to parse graph file {file_path}: {e}") from e

    if data is None:
        raise ValueError(f"Graph file {file_path} is empty")
    if not isinstance(data, dict):
        raise ValueError(f"Graph file {file_path}: expected dict, got {type(data).__name__}")
    return data


def _load_from_dict(data: dict) -> tuple[PersonaGraph, list[str]]:
    raw_nodes = data.get("nodes", [])
    raw_edges = data.get("edges", [])
    if not isinstance(raw_nodes, list):
        raise ValueError(f"Graph 'nodes' must be a list, got {type(raw_nodes).__name__}")
    if not isinstance(raw_edges, list):
        raise ValueError(f"Graph 'edges' must be a list, got {type(raw_edges).__name__}")

    nodes = [_node_from_dict(n) for n in raw_nodes]
    edges = [_edge_from_dict(e) for e in raw_edges]

    name = data.get("name")
    if name is not None and not isinstance(name, str):
        raise ValueError(f"Graph 'name' must be a string, got {type(name).__name__}")

    graph = build_persona_graph(nodes, edges, name=name)

    warnings: list[str] = []
    node_ids = {n.id for n in nodes}
    for e in edges:
        missing = [end for end in (e.source, e.target) if end not in node_ids]
        if missing:
            warnings.append(
                f"edge {e.id}: references unknown node(s) {', '.join(missing)}; ignored by analysis"
            )
    return graph, warnings


def _require_str(d: dict, key: str, what: str) -> str:
    value = d.get(key)
    if value is None:
        raise ValueError(f"{what} '{key}' is required")
    if not isinstance(value, str):
        raise ValueError(f"{what} '{key}' must be a string, got {type(value).__name__}")
    return value


def _node_from_dict(d: dict) -> PersonaNode:
    if not isinstance(d, dict):
        raise ValueError(f"Node entry must be a dict, got {type(d).__name__}")

    node_id = _require_str(d, "id", "Node")
    # Editor shape nests persona fields under "data"; its root "type" is the renderer name.
    if isinstance(d.get("data"), dict):
        body = d["data"]
        persona_type = _require_str(body, "personaType", f"Node {node_id}")
    else:
        body = d
        persona_type = _require_str(body, "type", f"Node {node_id}")
    if persona_type not in PERSONA_TYPES:
        raise ValueError(f"Node {node_id}: unknown persona type '{persona_type}'")
    name = _require_str(body, "name", f"Node {node_id}")

    return PersonaNode(
        id=node_id,
        persona_type=persona_type,
        name=name,
        meta=_meta_from_dict(body.get("meta") or {}, node_id),
        position=_position_from_value(d.get("position"), node_id),
    )


def _meta_from_dict(d: dict, node_id: str) -> NodeMeta:
    if not isinstance(d, dict):
        raise ValueError(f"Node {node_id}: 'meta' must be a dict, got {type(d).__name__}")
    risks = d.get("risks") or []
    if not isinstance(risks, list) or not all(isinstance(r, str) for r in risks):
        raise ValueError(f"Node {node_id}: 'meta.risks' must be a list of strings")
    return NodeMeta(
        description=d.get("description"),
        responsibilities=d.get("responsibilities"),
        risks=tuple(risks),
    )


def _position_from_value(value, node_id: str) -> tuple[float, float] | None:
    if value is None:
        return None
    if isinstance(value, dict) and "x" in value and "y" in value:
        return (float(value["x"]), float(value["y"]))
    if isinstance(value, (list, tuple)) and len(value) == 2:
        return (float(value[0]), float(value[1]))
    raise ValueError(f"Node {node_id}: 'position' must be {{x, y}} or a pair")


def _edge_from_dict(d: dict) -> PersonaEdge:
    if not isinstance(d, dict):
        raise ValueError(f"Edge entry must be a dict, got {type(d).__name__}")
    edge_id = _require_str(d, "id", "Edge")
    label = d.get("label")
    if label is not None and not isinstance(label, str):
        raise ValueError(f"Edge {edge_id}: 'label' must be a string, got {type(label).__name__}")
    animated = d.get("animated", False)
    if not isinstance(animated, bool):
        raise ValueError(f"Edge {edge_id}: 'animated' must be a bool, got {type(animated).__name__}")
    return PersonaEdge(
        id=edge_id,
        source=_require_str(d, "source", f"Edge {edge_id}"),
        target=_require_str(d, "target", f"Edge {edge_id}"),
        label=label,
        animated=animated,
    )
