"""Default locations and path resolution for ccswitch.

Home-directory lookups take an explicit ``home`` argument so the profile
store and settings document can be exercised against a temporary
directory without touching the process environment.
"""

import logging
from pathlib import Path

from ccswitch.errors import CCSwitchError

logger = logging.getLogger(__name__)

DEFAULT_PROFILES_PATH = "~/.ccswitch/ccs.json"
DEFAULT_SETTINGS_PATH = "~/.claude/settings.json"

PROFILES_ENVVAR = "CCSWITCH_PROFILES"
SETTINGS_ENVVAR = "CCSWITCH_SETTINGS"


def expand_home(path: str | Path, home: str | Path | None = None) -> Path:
    """Expand a leading ``~`` in path.

    Only ``~`` and ``~/...`` are expanded; ``~user`` forms are left alone.

    Args:
        path: Path that may start with ``~``
        home: Home directory to expand against (defaults to ``Path.home()``)

    Returns:
        Expanded path
    """
    text = str(path)
    if text != "~" and not text.startswith("~/"):
        return Path(text)

    home_dir = Path(home) if home is not None else Path.home()
    if text == "~":
        return home_dir
    return home_dir / text[2:]


def resolve_settings_path(
    override: str | None,
    profiles_path: str | Path,
    home: str | Path | None = None,
) -> str:
    """Pick the settings file to operate on.

    Precedence: explicit override, then the ``settingsPath`` recorded in
    the profiles file, then ``~/.claude/settings.json``.
    """
    if override:
        return override

    # profile_store imports this module
    from ccswitch.profile_store import ProfileStore

    if expand_home(profiles_path, home).exists():
        try:
            configured = ProfileStore.load(profiles_path, home=home).settings_path()
        except CCSwitchError as e:
            logger.debug(f"Ignoring profiles file while resolving settings path: {e}")
        else:
            if configured:
                return configured

    return DEFAULT_SETTINGS_PATH


__all__ = [
    "DEFAULT_PROFILES_PATH",
    "DEFAULT_SETTINGS_PATH",
    "PROFILES_ENVVAR",
    "SETTINGS_ENVVAR",
    "expand_home",
    "resolve_settings_path",
]
