"""Claude Code settings document.

``settings.json`` belongs to Claude Code. ccswitch owns only two of its
top-level fields:

- ``env``: environment variables exported to the Claude Code process
- ``model``: the model Claude Code starts with

Every other field is kept as-is across a read/write cycle. The document is
held as a plain ordered dict, so unknown fields round-trip unchanged.
"""

import json
import logging
from pathlib import Path
from typing import Any

from ccswitch.errors import ConfigParseError, ConfigReadError, ConfigWriteError
from ccswitch.paths import expand_home

logger = logging.getLogger(__name__)

ENV_FIELD = "env"
MODEL_FIELD = "model"


class SettingsDocument:
    """In-memory view of a settings.json file.

    Attributes:
        path: Resolved path of the settings file
    """

    def __init__(self, path: Path, data: dict[str, Any] | None = None):
        self.path = path
        self._data: dict[str, Any] = data if data is not None else {}

    @classmethod
    def load(cls, path: str | Path, home: str | Path | None = None) -> "SettingsDocument":
        """Load a settings document, creating an empty one if missing.

        Args:
            path: Settings file path (a leading ``~`` is expanded)
            home: Home directory used for ``~`` expansion

        Returns:
            SettingsDocument instance

        Raises:
            ConfigWriteError: If the missing file cannot be created
            ConfigParseError: If the file is not a JSON object
            ConfigReadError: If the file exists but cannot be read
        """
        resolved = expand_home(path, home)

        if not resolved.exists():
            logger.debug(f"Settings file not found, creating: {resolved}")
            cls(resolved).write()

        try:
            with open(resolved, encoding="utf-8") as f:
                data = json.load(f)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise ConfigParseError(
                f"Invalid JSON in settings file {resolved}", path=str(resolved), details=str(e)
            ) from e
        except OSError as e:
            raise ConfigReadError(
                f"Cannot read settings file {resolved}", path=str(resolved), details=str(e)
            ) from e

        if not isinstance(data, dict):
            raise ConfigParseError(
                f"Settings file {resolved} must contain a JSON object", path=str(resolved)
            )

        logger.debug(f"Loaded settings from: {resolved}")
        return cls(resolved, data)

    def get(self, field: str, default: Any = None) -> Any:
        return self._data.get(field, default)

    def set(self, field: str, value: Any) -> None:
        self._data[field] = value

    def unset(self, field: str) -> None:
        """Remove a field; missing fields are ignored."""
        self._data.pop(field, None)

    def has(self, field: str) -> bool:
        return field in self._data

    def __contains__(self, field: object) -> bool:
        return field in self._data

    @property
    def env(self) -> dict[str, Any]:
        """The ``env`` field, or an empty dict if absent or not an object."""
        value = self._data.get(ENV_FIELD)
        return dict(value) if isinstance(value, dict) else {}

    @env.setter
    def env(self, value: dict[str, Any] | None) -> None:
        self._data[ENV_FIELD] = dict(value or {})

    @property
    def model(self) -> str | None:
        value = self._data.get(MODEL_FIELD)
        return value if isinstance(value, str) else None

    @model.setter
    def model(self, value: str | None) -> None:
        if value is None:
            self.unset(MODEL_FIELD)
        else:
            self._data[MODEL_FIELD] = value

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)

    def dumps(self) -> str:
        """Serialize the document as written to disk."""
        return json.dumps(self._data, indent=4, ensure_ascii=False) + "\n"

    def write(self) -> None:
        """Write the document back to its path, overwriting in place.

        Raises:
            ConfigWriteError: If the directory or file cannot be written
        """
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(self.dumps(), encoding="utf-8")
        except OSError as e:
            raise ConfigWriteError(
                f"Failed to write settings file {self.path}", path=str(self.path), details=str(e)
            ) from e

        logger.debug(f"Wrote settings to: {self.path}")


__all__ = ["ENV_FIELD", "MODEL_FIELD", "SettingsDocument"]
