"""Pytest configuration and fixtures for ccswitch tests.

CRITICAL: Protects the real ~/.claude/settings.json and ~/.ccswitch/ccs.json
from test modifications.
"""

import pytest


@pytest.fixture(autouse=True)
def isolate_home(tmp_path, monkeypatch):
    """Point HOME at a temporary directory for every test.

    Commands fall back to ~/.ccswitch/ccs.json and ~/.claude/settings.json
    when no path is given, so without this a test could rewrite the
    developer's real Claude Code settings.
    """
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.setenv("USERPROFILE", str(home_dir))
    monkeypatch.delenv("CCSWITCH_PROFILES", raising=False)
    monkeypatch.delenv("CCSWITCH_SETTINGS", raising=False)
    return home_dir
