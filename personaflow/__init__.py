"""PersonaFlow: multi-agent architecture graphs and their integrity analysis."""

from personaflow.analysis import AnalysisWarning, GraphAnalyzer, analyze, analyze_graph
from personaflow.graph import PersonaEdge, PersonaGraph, PersonaNode

__all__ = [
    "AnalysisWarning",
    "GraphAnalyzer",
    "PersonaEdge",
    "PersonaGraph",
    "PersonaNode",
    "analyze",
    "analyze_graph",
]
