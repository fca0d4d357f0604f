"""
Generate LangGraph Python source from a persona graph.

Agents and human checkpoints become StateGraph nodes; routers get conditional edges;
tools become stub functions; any memory node switches compilation to a MemorySaver checkpointer.
"""

from __future__ import annotations

import re

from personaflow.graph.graph import PersonaGraph
from personaflow.graph.nodes import AGENT_TYPES, PersonaNode

STATE_KEYS = ("messages", "plan", "feedback")
GRAPH_NODE_TYPES = AGENT_TYPES + ("humanCheckpoint",)
_RESERVED_NAMES = set(STATE_KEYS) | {"__start__", "__end__"}

_NODE_BODIES = {
    "planner": (
        "# Implement planning logic here",
        'return {"plan": "Generated plan"}',
    ),
    "executor": (
        "# Implement execution logic here",
        'return {"messages": state["messages"] + [{"role": "assistant", "content": "Executed"}]}',
    ),
    "critic": (
        "# Implement critique logic here",
        'return {"feedback": "Review feedback"}',
    ),
    "router": (
        "# Routing happens in the route function below",
        "return {}",
    ),
    "humanCheckpoint": (
        "# Execution pauses before this node for human review",
        "return {}",
    ),
}

_TYPE_TITLES = {
    "planner": "Planner",
    "executor": "Executor",
    "critic": "Critic",
    "router": "Router",
    "humanCheckpoint": "Human checkpoint",
}


def sanitize_python_identifier(name: str) -> str:
    """Lowercase; characters outside [A-Za-z0-9_] become "_"; a leading digit is prefixed with "_"."""
    ident = re.sub(r"[^a-zA-Z0-9_]", "_", name)
    ident = re.sub(r"^[0-9]", lambda m: "_" + m.group(0), ident)
    return ident.lower()


def assign_python_names(nodes: tuple[PersonaNode, ...] | list[PersonaNode]) -> dict[str, str]:
    """Node id -> unique identifier. Collisions and state keys get _2, _3, ... suffixes."""
    names: dict[str, str] = {}
    used: set[str] = set()
    for n in nodes:
        base = sanitize_python_identifier(n.name) or "node"
        candidate = base
        suffix = 2
        while candidate in used or candidate in _RESERVED_NAMES:
            candidate = f"{base}_{suffix}"
            suffix += 1
        used.add(candidate)
        names[n.id] = candidate
    return names


def _docstring_text(text: str) -> str:
    return " ".join(text.split()).replace("\\", "\\\\").replace('"', '\\"')


def _quoted(ident: str) -> str:
    return f'"{ident}"'


def generate_langgraph_code(
    graph: PersonaGraph,
    *,
    include_types: bool = True,
    include_logging: bool = False,
    framework_version: str = "latest",
) -> str:
    """
    Return LangGraph Python source for graph.

    Raises:
        ValueError: If the graph has no agent or human checkpoint nodes
    """
    graph_nodes = [n for n in graph.nodes if n.persona_type in GRAPH_NODE_TYPES]
    if not graph_nodes:
        raise ValueError("Graph has no agent or human checkpoint nodes to generate")
    tool_nodes = [n for n in graph.nodes if n.persona_type == "tool"]
    memory_nodes = [n for n in graph.nodes if n.persona_type == "memory"]
    checkpoints = [n for n in graph_nodes if n.persona_type == "humanCheckpoint"]

    names = assign_python_names(graph.nodes)
    graph_ids = {n.id for n in graph_nodes}
    known_ids = {n.id for n in graph.nodes}
    persona_by_id = {n.id: n.persona_type for n in graph.nodes}

    graph_edges: list[tuple[str, str]] = []
    side_edges: list[tuple[str, str]] = []
    for e in graph.edges:
        if e.source in graph_ids and e.target in graph_ids:
            if (e.source, e.target) not in graph_edges:
                graph_edges.append((e.source, e.target))
        elif e.source in known_ids and e.target in known_ids:
            side_edges.append((e.source, e.target))

    state_type = "State" if include_types else None
    sig = f"(state: {state_type}) -> dict" if include_types else "(state)"

    lines: list[str] = [
        '"""',
        "Generated LangGraph workflow from PersonaFlow",
        f"Framework version: {framework_version}",
        '"""',
        "",
    ]
    if include_logging:
        lines.append("import logging")
    lines.append("from typing import TypedDict")
    lines.append("")
    lines.append("from langgraph.graph import END, START, StateGraph")
    if memory_nodes:
        lines.append("from langgraph.checkpoint.memory import MemorySaver")
    lines.append("")
    if include_logging:
        lines.append("logger = logging.getLogger(__name__)")
        lines.append("")
    lines += [
        "",
        "class State(TypedDict):",
        '    """Graph state schema"""',
        "",
        "    messages: list",
        "    plan: str",
        "    feedback: str",
        "",
    ]

    if tool_nodes:
        lines.append("")
        lines.append("# Tool definitions")
        for tool in tool_nodes:
            tool_sig = "(input_data: dict) -> dict" if include_types else "(input_data)"
            lines.append(f"def {names[tool.id]}_tool{tool_sig}:")
            lines.append(f'    """Tool: {_docstring_text(tool.name)}"""')
            if include_logging:
                lines.append(f"    logger.info({('Executing tool: ' + tool.name)!r})")
            lines.append("    # Implement tool logic here")
            lines.append('    return {"result": "placeholder"}')
            lines.append("")

    lines.append("")
    lines.append("# Node functions")
    for node in graph_nodes:
        comment, ret = _NODE_BODIES[node.persona_type]
        title = _TYPE_TITLES[node.persona_type]
        lines.append(f"def {names[node.id]}_node{sig}:")
        lines.append(f'    """{title}: {_docstring_text(node.name)}"""')
        if include_logging:
            lines.append(f"    logger.info({('Executing ' + node.name)!r})")
        lines.append(f"    {comment}")
        lines.append(f"    {ret}")
        lines.append("")

    routers = [n for n in graph_nodes if n.persona_type == "router"]
    router_targets: dict[str, list[str]] = {
        r.id: [t for s, t in graph_edges if s == r.id] for r in routers
    }
    for router in routers:
        targets = router_targets[router.id]
        if not targets:
            continue
        route_sig = f"(state: {state_type}) -> str" if include_types else "(state)"
        lines.append("")
        lines.append(f"def {names[router.id]}_route{route_sig}:")
        lines.append("    # Choose the next node from the state")
        lines.append(f"    return {_quoted(names[targets[0]])}")
        lines.append("")

    lines.append("")
    lines.append("# Build graph")
    lines.append("workflow = StateGraph(State)")
    lines.append("")
    for node in graph_nodes:
        ident = names[node.id]
        lines.append(f"workflow.add_node({_quoted(ident)}, {ident}_node)")
    lines.append("")

    has_incoming = {t for s, t in graph_edges if s != t}
    entries = [n for n in graph_nodes if n.id not in has_incoming] or [graph_nodes[0]]
    for entry in entries:
        lines.append(f"workflow.add_edge(START, {_quoted(names[entry.id])})")

    for router in routers:
        targets = router_targets[router.id]
        ident = names[router.id]
        if not targets:
            continue
        lines.append("")
        lines.append(f"# Conditional edges from {ident}")
        lines.append("workflow.add_conditional_edges(")
        lines.append(f"    {_quoted(ident)},")
        lines.append(f"    {ident}_route,")
        lines.append("    {")
        for t in targets:
            lines.append(f"        {_quoted(names[t])}: {_quoted(names[t])},")
        lines.append("    },")
        lines.append(")")

    lines.append("")
    for s, t in graph_edges:
        if persona_by_id[s] == "router":
            continue
        lines.append(f"workflow.add_edge({_quoted(names[s])}, {_quoted(names[t])})")

    has_outgoing = {s for s, _ in graph_edges}
    for node in graph_nodes:
        if node.id not in has_outgoing:
            lines.append(f"workflow.add_edge({_quoted(names[node.id])}, END)")

    if side_edges:
        lines.append("")
        lines.append("# Tool and memory connections (not graph edges)")
        for s, t in side_edges:
            lines.append(f"# {names[s]} -> {names[t]}")

    lines.append("")
    lines.append("# Compile graph")
    compile_args: list[str] = []
    if memory_nodes:
        lines.append("memory = MemorySaver()")
        compile_args.append("checkpointer=memory")
    if checkpoints:
        interrupt = ", ".join(_quoted(names[c.id]) for c in checkpoints)
        compile_args.append(f"interrupt_before=[{interrupt}]")
    lines.append(f"app = workflow.compile({', '.join(compile_args)})")

    lines += [
        "",
        "# Example usage:",
        "# initial_state = {",
        '#     "messages": [{"role": "user", "content": "Hello"}],',
        '#     "plan": "",',
        '#     "feedback": ""',
        "# }",
        "# result = app.invoke(initial_state)",
        "",
    ]
    return "\n".join(lines)
