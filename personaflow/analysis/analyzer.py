"""
GraphAnalyzer: build the adjacency index once, run every rule in fixed order, flatten into one warning list.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Callable, Iterable, Sequence

from personaflow.analysis.adjacency import AdjacencyIndex, build_adjacency_index
from personaflow.analysis.connectivity import check_disconnected
from personaflow.analysis.cycles import check_cycles
from personaflow.analysis.entry_exit import check_entry_exit
from personaflow.analysis.memory import check_unused_memory
from personaflow.analysis.profile import AnalysisProfile, default_analysis_profile
from personaflow.analysis.reachability import check_unverified_executors
from personaflow.analysis.warnings import AnalysisWarning
from personaflow.graph.edges import PersonaEdge
from personaflow.graph.graph import PersonaGraph
from personaflow.graph.nodes import PersonaNode

Rule = Callable[[Sequence[PersonaNode], AdjacencyIndex], list[AnalysisWarning]]

RULES: tuple[Rule, ...] = (
    check_unverified_executors,
    check_unused_memory,
    check_disconnected,
    check_cycles,
    check_entry_exit,
)


class GraphAnalyzer:
    """Stateless analyzer; the profile only filters and re-grades rule output."""

    def __init__(self, profile: AnalysisProfile | None = None) -> None:
        self.profile = profile or default_analysis_profile()

    def analyze(
        self,
        nodes: Iterable[PersonaNode],
        edges: Iterable[PersonaEdge],
    ) -> list[AnalysisWarning]:
        """
        Return warnings in rule order: unverified-executor, unused-memory,
        disconnected-subgraph, unbounded-loop, no-entry-nodes/no-exit-nodes.
        Edges naming unknown nodes are ignored. Empty graph -> [].
        """
        node_list = list(nodes)
        if not node_list:
            return []
        index = build_adjacency_index(node_list, edges)

        warnings: list[AnalysisWarning] = []
        for rule in RULES:
            for w in rule(node_list, index):
                if not self.profile.is_enabled(w.kind):
                    continue
                severity = self.profile.severity_for(w.kind, w.severity)
                if severity != w.severity:
                    w = replace(w, severity=severity)
                warnings.append(w)
        return warnings

    def analyze_graph(self, graph: PersonaGraph) -> list[AnalysisWarning]:
        return self.analyze(graph.nodes, graph.edges)


def analyze(
    nodes: Iterable[PersonaNode],
    edges: Iterable[PersonaEdge],
    *,
    profile: AnalysisProfile | None = None,
) -> list[AnalysisWarning]:
    """Convenience: run GraphAnalyzer(profile).analyze(nodes, edges)."""
    return GraphAnalyzer(profile).analyze(nodes, edges)


def analyze_graph(
    graph: PersonaGraph,
    *,
    profile: AnalysisProfile | None = None,
) -> list[AnalysisWarning]:
    return GraphAnalyzer(profile).analyze_graph(graph)
