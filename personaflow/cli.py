"""
PersonaFlow CLI: analyze, export, and browse example persona graphs.
"""

import argparse
import json
import sys
from pathlib import Path

from personaflow.analysis import (
    GraphAnalyzer,
    is_valid_system,
    load_analysis_profile,
    summarize_warnings,
    warning_to_dict,
)
from personaflow.examples import get_example, list_examples
from personaflow.export import export_to_json, generate_langgraph_code
from personaflow.graph import (
    PersonaGraph,
    compute_graph_stats,
    graph_to_mermaid,
    load_persona_graph,
)

EXAMPLE_PREFIX = "example:"
EXPORT_FORMATS = ("json", "mermaid", "langgraph")


def main(argv: list[str] | None = None) -> int:
    """
    Main CLI entry point.

    Returns:
        Exit code: 0 on success, 1 on errors/warnings
    """
    parser = argparse.ArgumentParser(
        prog="personaflow",
        description="PersonaFlow: integrity analysis and export for multi-agent architecture graphs",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    analyze_parser = subparsers.add_parser("analyze", help="Analyze a graph for integrity warnings")
    analyze_parser.add_argument("path", help=f"Graph file (.json/.yaml) or {EXAMPLE_PREFIX}<id>")
    analyze_parser.add_argument(
        "--profile",
        help="Analysis profile YAML file path (default: all rules, built-in severities)",
    )
    analyze_parser.add_argument(
        "--output",
        help="Output JSON file path (default: print to stdout)",
    )

    export_parser = subparsers.add_parser("export", help="Export a graph")
    export_parser.add_argument("path", help=f"Graph file (.json/.yaml) or {EXAMPLE_PREFIX}<id>")
    export_parser.add_argument(
        "--format",
        choices=EXPORT_FORMATS,
        default="json",
        help="Export format (default: json)",
    )
    export_parser.add_argument(
        "--output",
        help="Output file path (default: print to stdout)",
    )

    examples_parser = subparsers.add_parser("examples", help="List or show bundled example graphs")
    examples_parser.add_argument("example_id", nargs="?", help="Example id to print as JSON")

    args = parser.parse_args(argv)

    if args.command == "analyze":
        return _run_analyze(args.path, args.profile, args.output)
    if args.command == "export":
        return _run_export(args.path, args.format, args.output)
    if args.command == "examples":
        return _run_examples(args.example_id)
    parser.print_help()
    return 1


def _load_graph(path: str) -> tuple[PersonaGraph, list[str]]:
    """Load a graph from a file or an example:<id> reference."""
    if path.startswith(EXAMPLE_PREFIX):
        example_id = path[len(EXAMPLE_PREFIX):]
        try:
            return get_example(example_id).graph, []
        except KeyError:
            raise ValueError(f"Unknown example: {example_id}") from None
    return load_persona_graph(Path(path))


def _emit(text: str, output: str | None) -> None:
    if output:
        Path(output).write_text(text, encoding="utf-8")
    else:
        print(text)


def _print_warnings(warnings: list[str]) -> None:
    for warning in warnings:
        print(f"Warning: {warning}", file=sys.stderr)


def _run_analyze(path: str, profile: str | None, output: str | None) -> int:
    """
    Run the analyze command.

    Args:
        path: Graph file path or example reference
        profile: Optional analysis profile file path
        output: Optional output file path (None = stdout)

    Returns:
        Exit code: 0 when the graph has no analysis or load warnings, 1 otherwise
    """
    try:
        graph, load_warnings = _load_graph(path)
        analysis_profile = load_analysis_profile(profile)
        warnings = GraphAnalyzer(analysis_profile).analyze_graph(graph)

        stats = compute_graph_stats(graph.nodes)
        report = {
            "valid": is_valid_system(warnings),
            "stats": {"agents": stats.agents, "tools": stats.tools, "memory": stats.memory},
            "summary": summarize_warnings(warnings),
            "warnings": [warning_to_dict(w) for w in warnings],
        }
        _emit(json.dumps(report, indent=2, sort_keys=True), output)

        _print_warnings(load_warnings)
        if warnings or load_warnings:
            return 1
        return 0

    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def _run_export(path: str, fmt: str, output: str | None) -> int:
    try:
        graph, load_warnings = _load_graph(path)
        if fmt == "json":
            text = export_to_json(graph)
        elif fmt == "mermaid":
            text = graph_to_mermaid(graph, GraphAnalyzer().analyze_graph(graph))
        else:
            text = generate_langgraph_code(graph)
        _emit(text, output)

        _print_warnings(load_warnings)
        return 1 if load_warnings else 0

    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def _run_examples(example_id: str | None) -> int:
    if example_id is None:
        for example in list_examples():
            print(f"{example.id}\t{example.name}")
        return 0
    try:
        example = get_example(example_id)
    except KeyError:
        print(f"Error: Unknown example: {example_id}", file=sys.stderr)
        return 1
    print(export_to_json(example.graph, include_metadata=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
