"""
Generate a Mermaid flowchart from a persona graph, optionally marking nodes flagged by analysis.
"""

from __future__ import annotations

from typing import Iterable

from personaflow.graph.graph import PersonaGraph

FLAGGED_CLASS = "flagged"

# Mermaid reserves "end", "subgraph", etc. as bare words.
_RESERVED = {"end", "subgraph", "graph", "flowchart", "class", "classDef", "style", "click"}


def _mermaid_node_id(node_id: str) -> str:
    """Map a persona node id to a Mermaid-safe identifier."""
    safe = "".join(ch if ch.isalnum() or ch == "_" else "_" for ch in node_id)
    if not safe or safe[0].isdigit() or safe in _RESERVED:
        safe = f"n_{safe}"
    return safe


def _assign_mermaid_ids(node_ids: Iterable[str]) -> dict[str, str]:
    """Node id -> unique Mermaid id. Collisions after sanitizing get _2, _3, ... suffixes."""
    ids: dict[str, str] = {}
    used: set[str] = set()
    for node_id in node_ids:
        if node_id in ids:
            continue
        base = _mermaid_node_id(node_id)
        candidate = base
        suffix = 2
        while candidate in used:
            candidate = f"{base}_{suffix}"
            suffix += 1
        used.add(candidate)
        ids[node_id] = candidate
    return ids


def _escape_label(text: str) -> str:
    return text.replace('"', "#quot;")


def graph_to_mermaid(graph: PersonaGraph, warnings: Iterable | None = None) -> str:
    """
    Produce a Mermaid flowchart string from a PersonaGraph.

    Nodes are labeled "name (personaType)"; edges carry their label when set.
    Edges whose endpoints are not in the graph are omitted. When warnings
    (AnalysisWarning objects) are given, every implicated node gets the
    "flagged" class.

    Returns:
        Mermaid flowchart string (flowchart TB).
    """
    lines = ["flowchart TB"]
    mermaid_ids = _assign_mermaid_ids(n.id for n in graph.nodes)
    node_ids = set(mermaid_ids)
    for n in graph.nodes:
        nid = mermaid_ids[n.id]
        lines.append(f'  {nid}["{_escape_label(n.name)} ({n.persona_type})"]')
    for e in graph.edges:
        if e.source not in node_ids or e.target not in node_ids:
            continue
        src = mermaid_ids[e.source]
        tgt = mermaid_ids[e.target]
        arrow = "-.->" if e.animated else "-->"
        if e.label:
            lines.append(f'  {src} {arrow}|"{_escape_label(e.label)}"| {tgt}')
        else:
            lines.append(f"  {src} {arrow} {tgt}")

    if warnings:
        flagged: list[str] = []
        for w in warnings:
            for node_id in w.node_ids:
                if node_id in node_ids and node_id not in flagged:
                    flagged.append(node_id)
        if flagged:
            lines.append(f"  classDef {FLAGGED_CLASS} stroke:#d97706,stroke-width:3px")
            ids = ",".join(mermaid_ids[i] for i in flagged)
            lines.append(f"  class {ids} {FLAGGED_CLASS}")
    return "\n".join(lines)
