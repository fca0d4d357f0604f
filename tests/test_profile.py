"""
Tests for analysis profile loader: YAML loading, dict construction, defaults, error handling.
"""

import tempfile
from pathlib import Path

import pytest

from personaflow.analysis import (
    AnalysisProfile,
    default_analysis_profile,
    load_analysis_profile,
)


def test_default_analysis_profile():
    """Default enables every rule with no overrides."""
    profile = default_analysis_profile()
    assert profile.name == "default"
    assert profile.disabled_rules == frozenset()
    assert profile.severity_overrides == ()
    assert profile.is_enabled("unbounded-loop")
    assert profile.severity_for("unbounded-loop", "warning") == "warning"
    with pytest.raises(Exception):  # dataclass.FrozenInstanceError
        profile.name = "changed"


def test_load_analysis_profile_none():
    assert load_analysis_profile(None) == default_analysis_profile()


def test_load_analysis_profile_passthrough():
    original = AnalysisProfile(name="custom")
    assert load_analysis_profile(original) is original


def test_load_analysis_profile_dict():
    profile = load_analysis_profile(
        {
            "name": "strict",
            "disabled_rules": ["disconnected-subgraph"],
            "severity_overrides": {"unbounded-loop": "error", "unverified-executor": "error"},
        }
    )
    assert profile.name == "strict"
    assert not profile.is_enabled("disconnected-subgraph")
    assert profile.is_enabled("unbounded-loop")
    assert profile.severity_for("unbounded-loop", "warning") == "error"
    assert profile.severity_for("no-exit-nodes", "info") == "info"
    # Overrides are stored in rule order, independent of mapping order.
    assert profile.severity_overrides == (
        ("unverified-executor", "error"),
        ("unbounded-loop", "error"),
    )


def test_load_analysis_profile_yaml_root():
    yaml_content = """
name: yaml-profile
disabled_rules:
  - no-entry-nodes
severity_overrides:
  unused-memory: info
"""
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "profile.yaml"
        path.write_text(yaml_content)
        profile = load_analysis_profile(path)
        assert profile.name == "yaml-profile"
        assert profile.disabled_rules == frozenset({"no-entry-nodes"})
        assert profile.severity_for("unused-memory", "warning") == "info"
        assert load_analysis_profile(str(path)) == profile


def test_load_analysis_profile_yaml_nested():
    """Multi-profile format uses the first entry and its key as default name."""
    yaml_content = """
analysis_profiles:
  relaxed:
    disabled_rules: [no-entry-nodes, no-exit-nodes]
  strict:
    severity_overrides:
      unbounded-loop: error
"""
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "profiles.yaml"
        path.write_text(yaml_content)
        profile = load_analysis_profile(path)
        assert profile.name == "relaxed"
        assert profile.disabled_rules == frozenset({"no-entry-nodes", "no-exit-nodes"})


def test_load_analysis_profile_missing_file():
    with pytest.raises(FileNotFoundError):
        load_analysis_profile("/nonexistent/profile.yaml")


def test_load_analysis_profile_empty_yaml():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "empty.yaml"
        path.write_text("")
        with pytest.raises(ValueError, match="empty"):
            load_analysis_profile(path)


def test_load_analysis_profile_invalid_yaml():
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "bad.yaml"
        path.write_text("name: [unclosed\n")
        with pytest.raises(ValueError, match="Failed to parse"):
            load_analysis_profile(path)


@pytest.mark.parametrize(
    "data, message",
    [
        ({"name": 3}, "'name' must be a string"),
        ({"disabled_rules": "unbounded-loop"}, "must be a list"),
        ({"disabled_rules": ["made-up"]}, "unknown rule 'made-up'"),
        ({"severity_overrides": ["error"]}, "must be a dict"),
        ({"severity_overrides": {"made-up": "info"}}, "unknown rule"),
        ({"severity_overrides": {"unbounded-loop": "fatal"}}, "unknown severity 'fatal'"),
    ],
)
def test_load_analysis_profile_validation(data, message):
    with pytest.raises(ValueError, match=message):
        load_analysis_profile(data)


def test_load_analysis_profile_unsupported_type():
    with pytest.raises(TypeError):
        load_analysis_profile(42)
