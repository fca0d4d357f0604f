"""Tests for LangGraph code generation: naming, wiring, and compiling the generated source."""

import pytest

from personaflow.examples import get_example
from personaflow.export import (
    assign_python_names,
    generate_langgraph_code,
    sanitize_python_identifier,
)
from personaflow.graph import PersonaEdge, PersonaGraph, PersonaNode


def _compile(code: str):
    """Execute generated source and return its compiled app."""
    namespace = {"__name__": "generated_workflow"}
    exec(compile(code, "<generated>", "exec"), namespace)
    return namespace["app"]


def test_sanitize_python_identifier():
    assert sanitize_python_identifier("Task Planner") == "task_planner"
    assert sanitize_python_identifier("Search-API v2") == "search_api_v2"
    assert sanitize_python_identifier("2nd Step") == "_2nd_step"
    assert sanitize_python_identifier("") == ""


def test_assign_python_names_deduplicates():
    """Duplicates, empty names, and state keys get numbered suffixes."""
    nodes = [
        PersonaNode("1", "planner", "A"),
        PersonaNode("2", "critic", "a"),
        PersonaNode("3", "executor", "Plan"),
        PersonaNode("4", "tool", "!!!"),
        PersonaNode("5", "tool", ""),
    ]
    assert assign_python_names(nodes) == {
        "1": "a",
        "2": "a_2",
        "3": "plan_2",
        "4": "___",
        "5": "node",
    }


def test_default_example_source():
    code = generate_langgraph_code(get_example("user-query-router").graph)
    assert "from langgraph.graph import END, START, StateGraph" in code
    assert "from langgraph.checkpoint.memory import MemorySaver" in code
    assert 'workflow.add_node("user_query_handler", user_query_handler_node)' in code
    assert 'workflow.add_node("human_review", human_review_node)' in code
    assert "def search_api_tool(input_data: dict) -> dict:" in code
    assert 'workflow.add_edge(START, "user_query_handler")' in code
    assert '"task_planner": "task_planner",' in code
    assert '"action_executor": "action_executor",' in code
    assert 'workflow.add_edge("task_planner", "action_executor")' in code
    assert 'workflow.add_edge("human_review", END)' in code
    assert '"user_query_handler", "task_planner")' not in code
    assert "# action_executor -> search_api" in code
    assert 'app = workflow.compile(checkpointer=memory, interrupt_before=["human_review"])' in code
    # Tools and memory are not graph nodes.
    assert 'add_node("search_api"' not in code
    assert 'add_node("conversation_memory"' not in code


def test_default_example_compiles():
    """Generated code builds a LangGraph app with every agent and checkpoint node."""
    app = _compile(generate_langgraph_code(get_example("user-query-router").graph))
    node_ids = set(app.get_graph().nodes)
    assert {
        "user_query_handler",
        "task_planner",
        "action_executor",
        "quality_verifier",
        "human_review",
    } <= node_ids


def test_cyclic_graph_without_entry_compiles():
    """With no in-degree-zero node, START wires to the first graph node."""
    g = PersonaGraph(
        nodes=(
            PersonaNode("p", "planner", "Planner"),
            PersonaNode("c", "critic", "Critic"),
        ),
        edges=(PersonaEdge("1", "p", "c"), PersonaEdge("2", "c", "p")),
    )
    code = generate_langgraph_code(g)
    assert 'workflow.add_edge(START, "planner")' in code
    assert 'workflow.add_edge(START, "critic")' not in code
    assert "END)" not in code.split("# Compile graph")[0].split("# Build graph")[1]
    assert "MemorySaver" not in code
    assert "app = workflow.compile()" in code
    _compile(code)


def test_router_without_targets_goes_to_end():
    g = PersonaGraph(nodes=(PersonaNode("r", "router", "Dispatch"),))
    code = generate_langgraph_code(g)
    assert "def dispatch_route" not in code
    assert 'workflow.add_edge("dispatch", END)' in code
    _compile(code)


def test_options_logging_and_untyped():
    g = get_example("research-loop").graph
    code = generate_langgraph_code(
        g, include_types=False, include_logging=True, framework_version="0.2"
    )
    assert "Framework version: 0.2" in code
    assert "logger = logging.getLogger(__name__)" in code
    assert "logger.info('Executing Research Planner')" in code
    assert "def research_planner_node(state):" in code
    assert "def web_search_tool(input_data):" in code
    _compile(code)


def test_quotes_in_names_are_escaped():
    g = PersonaGraph(nodes=(PersonaNode("x", "planner", 'The "Boss" \\ planner'),))
    code = generate_langgraph_code(g, include_logging=True)
    _compile(code)


def test_graph_without_agents_rejected():
    g = PersonaGraph(nodes=(PersonaNode("t", "tool", "Only Tool"),))
    with pytest.raises(ValueError, match="no agent"):
        generate_langgraph_code(g)
