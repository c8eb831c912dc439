"""Project a profile onto the settings document.

Activation replaces the settings ``env`` field with the profile's
variables and keeps ``model`` in step with ANTHROPIC_MODEL. Resolution
runs before the settings file is opened, so an unknown profile never
touches it.
"""

import logging
from collections.abc import Mapping

from ccswitch.errors import ProfileNotFoundError
from ccswitch.profile_store import MODEL_VARIABLE, ProfileStore
from ccswitch.settings_document import SettingsDocument

logger = logging.getLogger(__name__)


def resolve_profile_name(store: ProfileStore, requested: str | None = None) -> str:
    """Pick the profile to activate.

    An explicit name wins over the store default.

    Raises:
        ProfileNotFoundError: If the resolved name is not in the store
    """
    name = requested if requested else store.default()
    if not store.has(name):
        raise ProfileNotFoundError(name, available=store.names(), default=store.default())

    logger.debug(f"Resolved profile: {name}" + ("" if requested else " (default)"))
    return name


def activate(settings: SettingsDocument, env: Mapping[str, str] | None) -> None:
    """Write a profile's variables into the settings and persist them.

    Raises:
        ConfigWriteError: If the settings file cannot be written
    """
    variables = dict(env or {})
    settings.env = variables

    if MODEL_VARIABLE in variables:
        settings.model = variables[MODEL_VARIABLE]
    else:
        settings.unset("model")

    settings.write()


def reset(settings: SettingsDocument) -> None:
    """Clear ``env`` and remove ``model``."""
    activate(settings, {})


def switch_profile(
    store: ProfileStore,
    settings_path: str,
    requested: str | None = None,
    home: str | None = None,
) -> tuple[str, dict[str, str]]:
    """Resolve, load, activate.

    Returns:
        Tuple of (profile name, activated variables)
    """
    name = resolve_profile_name(store, requested)
    settings = SettingsDocument.load(settings_path, home=home)
    env = store.get(name)
    activate(settings, env)
    logger.debug(f"Activated profile '{name}' in {settings.path}")
    return name, env


__all__ = ["activate", "reset", "resolve_profile_name", "switch_profile"]
