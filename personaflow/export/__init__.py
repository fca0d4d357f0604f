"""Graph export: JSON interchange and LangGraph code generation."""

from personaflow.export.json_export import DEFAULT_EXPORT_NAME, export_to_json
from personaflow.export.langgraph_codegen import (
    assign_python_names,
    generate_langgraph_code,
    sanitize_python_identifier,
)

__all__ = [
    "DEFAULT_EXPORT_NAME",
    "assign_python_names",
    "export_to_json",
    "generate_langgraph_code",
    "sanitize_python_identifier",
]
