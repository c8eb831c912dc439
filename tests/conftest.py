"""
Shared test fixtures for ccswitch tests.

This module provides common fixtures used across all test types:
- Sample profiles documents
- Profiles and settings files in tmp_path
- JSON read/write helpers
- A CliRunner
"""

import json
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

# ============================================================================
# SAMPLE DATA
# ============================================================================


@pytest.fixture
def sample_profiles() -> dict[str, Any]:
    """Profiles document with a model-bearing and an empty profile."""
    return {
        "default": "a",
        "profiles": {
            "a": {"ANTHROPIC_MODEL": "m1"},
            "b": {},
            "deepseek": {
                "ANTHROPIC_AUTH_TOKEN": "sk-deepseek-1234567890",
                "ANTHROPIC_BASE_URL": "https://api.deepseek.com/anthropic",
                "ANTHROPIC_MODEL": "deepseek-chat",
                "ANTHROPIC_SMALL_FAST_MODEL": "deepseek-lite",
            },
        },
        "descriptions": {
            "a": "Profile A",
            "deepseek": "DeepSeek API",
        },
    }


# ============================================================================
# FILE FIXTURES
# ============================================================================


@pytest.fixture
def write_json():
    """Write data as JSON to a path, creating parent directories."""

    def _write(path: Path, data: Any) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=4))
        return path

    return _write


@pytest.fixture
def read_json():
    def _read(path: Path) -> Any:
        return json.loads(path.read_text())

    return _read


@pytest.fixture
def settings_file(tmp_path) -> Path:
    """Path for a settings file (not created)."""
    return tmp_path / "claude" / "settings.json"


@pytest.fixture
def profiles_file(tmp_path, sample_profiles, write_json) -> Path:
    """Profiles file written from sample_profiles."""
    return write_json(tmp_path / "ccswitch" / "ccs.json", sample_profiles)


@pytest.fixture
def runner() -> CliRunner:
    """CliRunner with a wide terminal so rich tables are not truncated."""
    return CliRunner(env={"COLUMNS": "200"})
