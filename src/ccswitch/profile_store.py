"""Read-only store of named environment profiles.

The profile store is a JSON document, by default ``~/.ccswitch/ccs.json``:

    {
        "default": "anthropic",
        "settingsPath": "~/.claude/settings.json",
        "profiles": {
            "anthropic": {
                "ANTHROPIC_BASE_URL": "https://api.anthropic.com",
                "ANTHROPIC_API_KEY": "sk-...",
                "ANTHROPIC_MODEL": "claude-sonnet-4-5"
            }
        },
        "descriptions": {
            "anthropic": "Official Anthropic API"
        }
    }

Each profile is a flat map of variable name to string value. The store is
loaded once per invocation and never written back.
"""

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any

from ccswitch.errors import ConfigParseError, ConfigReadError, ProfilesNotFoundError
from ccswitch.paths import expand_home

logger = logging.getLogger(__name__)

DEFAULT_PROFILE_NAME = "default"

MODEL_VARIABLE = "ANTHROPIC_MODEL"

# Filled from ANTHROPIC_MODEL when a profile leaves them out
MODEL_TIER_VARIABLES = (
    "ANTHROPIC_DEFAULT_HAIKU_MODEL",
    "ANTHROPIC_DEFAULT_OPUS_MODEL",
    "ANTHROPIC_DEFAULT_SONNET_MODEL",
    "ANTHROPIC_SMALL_FAST_MODEL",
)


def _parse_profiles(data: Any, path: Path) -> dict[str, dict[str, str]]:
    """Validate the ``profiles`` section.

    Raises:
        ConfigParseError: If the section or any profile has the wrong shape
    """
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigParseError("'profiles' must be a JSON object", path=str(path))

    profiles: dict[str, dict[str, str]] = {}
    for name, env in data.items():
        if not isinstance(env, dict):
            raise ConfigParseError(f"Profile '{name}' must be a JSON object", path=str(path))
        for key, value in env.items():
            if not isinstance(value, str):
                raise ConfigParseError(
                    f"Profile '{name}' variable {key} must be a string",
                    path=str(path),
                    details=f"got {type(value).__name__}",
                )
        profiles[name] = dict(env)
    return profiles


def _parse_descriptions(data: Any, path: Path) -> dict[str, str]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigParseError("'descriptions' must be a JSON object", path=str(path))
    for name, text in data.items():
        if not isinstance(text, str):
            raise ConfigParseError(
                f"Description for '{name}' must be a string",
                path=str(path),
                details=f"got {type(text).__name__}",
            )
    return dict(data)


class ProfileStore:
    """Profiles loaded from a ccswitch profiles file.

    Attributes:
        path: Resolved path the store was loaded from
    """

    def __init__(
        self,
        path: Path,
        profiles: dict[str, dict[str, str]],
        descriptions: dict[str, str] | None = None,
        default: str | None = None,
        settings_path: str | None = None,
    ):
        self.path = path
        self._profiles = profiles
        self._descriptions = descriptions or {}
        self._default = default
        self._settings_path = settings_path

    @classmethod
    def load(cls, path: str | Path, home: str | Path | None = None) -> "ProfileStore":
        """Load a profile store from disk.

        Args:
            path: Profiles file path (a leading ``~`` is expanded)
            home: Home directory used for ``~`` expansion

        Returns:
            ProfileStore instance

        Raises:
            ProfilesNotFoundError: If the file does not exist
            ConfigParseError: If the file is not a valid profiles document
            ConfigReadError: If the file exists but cannot be read
        """
        resolved = expand_home(path, home)
        if not resolved.exists():
            raise ProfilesNotFoundError(str(resolved))

        try:
            with open(resolved, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ConfigParseError(
                f"Invalid JSON in profiles file {resolved}", path=str(resolved), details=str(e)
            ) from e
        except OSError as e:
            raise ConfigReadError(
                f"Cannot read profiles file {resolved}", path=str(resolved), details=str(e)
            ) from e

        if not isinstance(data, dict):
            raise ConfigParseError(
                f"Profiles file {resolved} must contain a JSON object", path=str(resolved)
            )

        default = data.get("default")
        settings_path = data.get("settingsPath")

        store = cls(
            path=resolved,
            profiles=_parse_profiles(data.get("profiles"), resolved),
            descriptions=_parse_descriptions(data.get("descriptions"), resolved),
            default=default if isinstance(default, str) else None,
            settings_path=settings_path if isinstance(settings_path, str) else None,
        )
        logger.debug(f"Loaded {len(store._profiles)} profiles from: {resolved}")
        return store

    def has(self, name: str) -> bool:
        """Return True if a profile with this name exists."""
        return name in self._profiles

    def default(self) -> str:
        """Name of the profile used when none is given."""
        return self._default or DEFAULT_PROFILE_NAME

    def get(self, name: str) -> dict[str, str]:
        """Return a copy of a profile's variables.

        When the profile sets ANTHROPIC_MODEL, any missing model tier
        variable is filled with the same value. Unknown names return an
        empty dict; callers check ``has`` to report errors.
        """
        env = dict(self._profiles.get(name, {}))
        model = env.get(MODEL_VARIABLE)
        if model is not None:
            for key in MODEL_TIER_VARIABLES:
                env.setdefault(key, model)
        return env

    def settings_path(self) -> str | None:
        """Settings file override recorded in the profiles file, if any."""
        return self._settings_path or None

    def names(self) -> list[str]:
        return sorted(self._profiles)

    def describe(self, name: str) -> str | None:
        return self._descriptions.get(name)

    @property
    def profiles(self) -> MappingProxyType:
        """Raw profiles as stored (no derived variables)."""
        return MappingProxyType(self._profiles)

    @property
    def descriptions(self) -> MappingProxyType:
        return MappingProxyType(self._descriptions)

    def __len__(self) -> int:
        return len(self._profiles)

    def __contains__(self, name: object) -> bool:
        return name in self._profiles


__all__ = [
    "DEFAULT_PROFILE_NAME",
    "MODEL_TIER_VARIABLES",
    "MODEL_VARIABLE",
    "ProfileStore",
]
