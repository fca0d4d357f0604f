"""
Analysis profile loader: supports YAML files, dicts, AnalysisProfile instances, and defaults.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from personaflow.analysis.warnings import SEVERITIES, WARNING_KINDS


@dataclass(frozen=True)
class AnalysisProfile:
    """Which rules run and any severity overrides. Default: every rule, built-in severities."""

    name: str = "default"
    disabled_rules: frozenset[str] = frozenset()
    severity_overrides: tuple[tuple[str, str], ...] = ()

    def is_enabled(self, kind: str) -> bool:
        return kind not in self.disabled_rules

    def severity_for(self, kind: str, default: str) -> str:
        for k, severity in self.severity_overrides:
            if k == kind:
                return severity
        return default


def default_analysis_profile() -> AnalysisProfile:
    return AnalysisProfile()


def load_analysis_profile(
    source: AnalysisProfile | str | Path | dict | None,
) -> AnalysisProfile:
    """
    Load an AnalysisProfile from various sources.

    Args:
        source: Can be:
            - AnalysisProfile instance: returned as-is
            - str or Path: treated as YAML file path
            - dict: constructed directly from dict keys
            - None: returns default_analysis_profile()

    Returns:
        AnalysisProfile instance

    Raises:
        FileNotFoundError: If source is a file path that doesn't exist
        ValueError: If the YAML is invalid or fields have unknown values or wrong types
        TypeError: If source is of an unsupported type
    """
    if source is None:
        return default_analysis_profile()

    if isinstance(source, AnalysisProfile):
        return source

    if isinstance(source, (str, Path)):
        return _load_from_yaml_file(source)

    if isinstance(source, dict):
        return _load_from_dict(source)

    raise TypeError(
        f"Unsupported source type for load_analysis_profile: {type(source).__name__}"
    )


def _load_from_yaml_file(path: str | Path) -> AnalysisProfile:
    """Load AnalysisProfile from a YAML file."""
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Profile file not found: {file_path}")

    try:
        data = yaml.safe_load(file_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse YAML file {file_path}: {e}") from e

    if data is None:
        raise ValueError(f"YAML file {file_path} is empty")
    if not isinstance(data, dict):
        raise ValueError(f"YAML file {file_path}: expected dict, got {type(data).__name__}")

    # Either profile fields at the root, or several profiles under analysis_profiles (first wins).
    if "analysis_profiles" in data:
        profiles = data["analysis_profiles"]
        if not isinstance(profiles, dict) or not profiles:
            raise ValueError(
                f"YAML file {file_path}: 'analysis_profiles' must be a non-empty dict"
            )
        profile_name = next(iter(profiles.keys()))
        profile_data = profiles[profile_name]
        if not isinstance(profile_data, dict):
            raise ValueError(
                f"YAML file {file_path}: profile '{profile_name}' must be a dict"
            )
        return _load_from_dict(profile_data, default_name=str(profile_name))
    return _load_from_dict(data)


def _load_from_dict(data: dict, default_name: str | None = None) -> AnalysisProfile:
    """
    Construct AnalysisProfile from a dict.

    Raises:
        ValueError: If fields have invalid types or name unknown rules/severities
    """
    name = data.get("name", default_name or "default")
    if not isinstance(name, str):
        raise ValueError(f"Profile 'name' must be a string, got {type(name).__name__}")

    disabled = data.get("disabled_rules") or []
    if not isinstance(disabled, list):
        raise ValueError(
            f"Profile 'disabled_rules' must be a list, got {type(disabled).__name__}"
        )
    for kind in disabled:
        if kind not in WARNING_KINDS:
            raise ValueError(f"Profile 'disabled_rules': unknown rule '{kind}'")

    overrides = data.get("severity_overrides") or {}
    if not isinstance(overrides, dict):
        raise ValueError(
            f"Profile 'severity_overrides' must be a dict, got {type(overrides).__name__}"
        )
    for kind, severity in overrides.items():
        if kind not in WARNING_KINDS:
            raise ValueError(f"Profile 'severity_overrides': unknown rule '{kind}'")
        if severity not in SEVERITIES:
            raise ValueError(
                f"Profile 'severity_overrides': unknown severity '{severity}' for '{kind}'"
            )

    return AnalysisProfile(
        name=name,
        disabled_rules=frozenset(disabled),
        severity_overrides=tuple((k, overrides[k]) for k in WARNING_KINDS if k in overrides),
    )
