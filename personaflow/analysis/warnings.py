"""
Analysis warning model, rule kinds, severities, and JSON form.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Literal, get_args

WarningKind = Literal[
    "unverified-executor",
    "unused-memory",
    "disconnected-subgraph",
    "unbounded-loop",
    "no-entry-nodes",
    "no-exit-nodes",
]
Severity = Literal["info", "warning", "error"]

# Presentation order of rule outputs in analyze().
WARNING_KINDS: tuple[str, ...] = get_args(WarningKind)
SEVERITIES: tuple[str, ...] = get_args(Severity)

KIND_UNVERIFIED_EXECUTOR = "unverified-executor"
KIND_UNUSED_MEMORY = "unused-memory"
KIND_DISCONNECTED_SUBGRAPH = "disconnected-subgraph"
KIND_UNBOUNDED_LOOP = "unbounded-loop"
KIND_NO_ENTRY_NODES = "no-entry-nodes"
KIND_NO_EXIT_NODES = "no-exit-nodes"


@dataclass(frozen=True)
class AnalysisWarning:
    """One diagnostic produced by a rule; node_ids are in discovery order."""

    id: str
    kind: WarningKind
    message: str
    node_ids: tuple[str, ...]
    severity: Severity = "warning"


def is_valid_system(warnings: Iterable[AnalysisWarning]) -> bool:
    """True when no warning has severity error."""
    return not any(w.severity == "error" for w in warnings)


def summarize_warnings(warnings: Iterable[AnalysisWarning]) -> dict[str, int]:
    """Count warnings per severity; all severities are present."""
    counts = {s: 0 for s in SEVERITIES}
    for w in warnings:
        counts[w.severity] += 1
    return counts


def warning_to_dict(w: AnalysisWarning) -> dict:
    return {
        "id": w.id,
        "type": w.kind,
        "message": w.message,
        "nodeIds": list(w.node_ids),
        "severity": w.severity,
    }
