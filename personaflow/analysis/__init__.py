"""Graph integrity analysis: adjacency, reachability, cycles, connectivity, entry/exit, GraphAnalyzer."""

from personaflow.analysis.adjacency import AdjacencyIndex, build_adjacency_index
from personaflow.analysis.analyzer import GraphAnalyzer, analyze, analyze_graph
from personaflow.analysis.connectivity import check_disconnected, weakly_connected_components
from personaflow.analysis.cycles import (
    check_cycles,
    find_cycle_nodes,
    strongly_connected_components,
)
from personaflow.analysis.entry_exit import check_entry_exit, entry_nodes, exit_nodes
from personaflow.analysis.memory import check_unused_memory
from personaflow.analysis.profile import (
    AnalysisProfile,
    default_analysis_profile,
    load_analysis_profile,
)
from personaflow.analysis.reachability import (
    check_unverified_executors,
    has_downstream,
    is_verifier,
)
from personaflow.analysis.warnings import (
    SEVERITIES,
    WARNING_KINDS,
    AnalysisWarning,
    Severity,
    WarningKind,
    is_valid_system,
    summarize_warnings,
    warning_to_dict,
)

__all__ = [
    "AdjacencyIndex",
    "AnalysisProfile",
    "AnalysisWarning",
    "GraphAnalyzer",
    "SEVERITIES",
    "Severity",
    "WARNING_KINDS",
    "WarningKind",
    "analyze",
    "analyze_graph",
    "build_adjacency_index",
    "check_cycles",
    "check_disconnected",
    "check_entry_exit",
    "check_unused_memory",
    "check_unverified_executors",
    "default_analysis_profile",
    "entry_nodes",
    "exit_nodes",
    "find_cycle_nodes",
    "has_downstream",
    "is_valid_system",
    "is_verifier",
    "load_analysis_profile",
    "strongly_connected_components",
    "summarize_warnings",
    "warning_to_dict",
    "weakly_connected_components",
]
