"""
Bundled example graphs for the editor's examples gallery.
"""

from __future__ import annotations

from dataclasses import dataclass

from personaflow.graph.edges import PersonaEdge
from personaflow.graph.graph import PersonaGraph
from personaflow.graph.nodes import NodeMeta, PersonaNode


@dataclass(frozen=True)
class ExampleGraph:
    id: str
    name: str
    description: str
    graph: PersonaGraph


def _user_query_router() -> ExampleGraph:
    """User queries are routed, planned, executed, and verified. Memory is read but never written."""
    nodes = (
        PersonaNode(
            "1", "router", "User Query Handler",
            NodeMeta(description="Routes incoming requests to appropriate agents"),
            (250.0, 50.0),
        ),
        PersonaNode(
            "2", "planner", "Task Planner",
            NodeMeta(description="Breaks down complex tasks into steps"),
            (100.0, 200.0),
        ),
        PersonaNode(
            "3", "executor", "Action Executor",
            NodeMeta(description="Executes planned actions using tools"),
            (400.0, 200.0),
        ),
        PersonaNode(
            "4", "critic", "Quality Verifier",
            NodeMeta(description="Validates outputs and checks for errors"),
            (250.0, 350.0),
        ),
        PersonaNode(
            "5", "tool", "Search API",
            NodeMeta(description="External search capability"),
            (550.0, 300.0),
        ),
        PersonaNode(
            "6", "memory", "Conversation Memory",
            NodeMeta(description="Stores context and history"),
            (-50.0, 300.0),
        ),
        PersonaNode(
            "7", "humanCheckpoint", "Human Review",
            NodeMeta(description="Manual approval for critical actions"),
            (250.0, 500.0),
        ),
    )
    edges = (
        PersonaEdge("e1-2", "1", "2", animated=True),
        PersonaEdge("e1-3", "1", "3", animated=True),
        PersonaEdge("e2-3", "2", "3"),
        PersonaEdge("e3-4", "3", "4"),
        PersonaEdge("e3-5", "3", "5"),
        PersonaEdge("e6-2", "6", "2"),
        PersonaEdge("e4-7", "4", "7"),
    )
    return ExampleGraph(
        id="user-query-router",
        name="User Query Router",
        description="Routes incoming requests to appropriate agents based on complexity heuristics.",
        graph=PersonaGraph(nodes=nodes, edges=edges, name="User Query Router"),
    )


def _research_loop() -> ExampleGraph:
    """A planner/executor/critic loop with a human sign-off; the loop is flagged on purpose."""
    nodes = (
        PersonaNode("planner", "planner", "Research Planner", position=(0.0, 0.0)),
        PersonaNode("executor", "executor", "Web Researcher", position=(0.0, 150.0)),
        PersonaNode("search", "tool", "Web Search", position=(200.0, 150.0)),
        PersonaNode("critic", "critic", "Fact Checker", position=(0.0, 300.0)),
        PersonaNode("notes", "memory", "Research Notes", position=(-200.0, 150.0)),
        PersonaNode("review", "humanCheckpoint", "Editor Sign-off", position=(0.0, 450.0)),
    )
    edges = (
        PersonaEdge("p-e", "planner", "executor"),
        PersonaEdge("e-s", "executor", "search"),
        PersonaEdge("e-n", "executor", "notes", label="write"),
        PersonaEdge("n-c", "notes", "critic", label="read"),
        PersonaEdge("e-c", "executor", "critic"),
        PersonaEdge("c-p", "critic", "planner", label="revise", animated=True),
        PersonaEdge("c-r", "critic", "review"),
    )
    return ExampleGraph(
        id="research-loop",
        name="Research Loop",
        description="Iterative research with fact checking and a final human review.",
        graph=PersonaGraph(nodes=nodes, edges=edges, name="Research Loop"),
    )


_EXAMPLES: tuple[ExampleGraph, ...] = (_user_query_router(), _research_loop())

DEFAULT_EXAMPLE_ID = "user-query-router"


def list_examples() -> list[ExampleGraph]:
    return list(_EXAMPLES)


def get_example(example_id: str) -> ExampleGraph:
    """Raises KeyError for an unknown id."""
    for example in _EXAMPLES:
        if example.id == example_id:
            return example
    raise KeyError(example_id)
