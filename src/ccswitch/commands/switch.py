"""Profile activation commands for ccswitch.

- use: Project a profile into the Claude settings file
- reset: Clear the profile variables from the Claude settings file
"""

import logging

import click
from rich.markup import escape

from ccswitch.activation import reset, switch_profile
from ccswitch.commands.cli_helpers import (
    console,
    exit_with_error,
    exit_with_unexpected,
    print_profile_details,
    profiles_option,
    select_profile,
    settings_option,
    stdin_is_interactive,
)
from ccswitch.errors import CCSwitchError
from ccswitch.paths import resolve_settings_path
from ccswitch.profile_store import ProfileStore
from ccswitch.settings_document import SettingsDocument

logger = logging.getLogger(__name__)


@click.command(name="use")
@click.argument("profile", required=False)
@profiles_option
@settings_option
def use_command(profile: str | None, profiles_path: str, settings_path: str | None):
    """Switch the active Claude API profile.

    Writes the profile's variables into the settings "env" field and sets
    "model" from ANTHROPIC_MODEL. Other settings are kept.

    Without PROFILE, an interactive terminal gets a selection menu;
    otherwise the default profile from the profiles file is used.

    \b
    EXAMPLES:
        $ ccswitch use deepseek
        $ ccswitch use
        $ ccswitch use glm --settings ./.claude/settings.json
    """
    try:
        store = ProfileStore.load(profiles_path)

        if not profile and len(store) > 0 and stdin_is_interactive():
            profile = select_profile(store)
            if profile is None:
                console.print("Operation cancelled.")
                return

        path = resolve_settings_path(settings_path, profiles_path)
        name, env = switch_profile(store, path, profile)

        console.print(f"[green]✓ Switched to profile:[/green] {escape(name)}")
        print_profile_details(env)

    except CCSwitchError as e:
        exit_with_error(e)
    except Exception as e:
        exit_with_unexpected(e, "switch profile")


@click.command(name="reset")
@profiles_option
@settings_option
def reset_command(profiles_path: str, settings_path: str | None):
    """Reset Claude settings to their default state.

    Empties "env" and removes "model"; all other settings are kept.

    \b
    EXAMPLES:
        $ ccswitch reset
        $ ccswitch reset --settings ./.claude/settings.json
    """
    try:
        path = resolve_settings_path(settings_path, profiles_path)
        settings = SettingsDocument.load(path)
        reset(settings)

        console.print("[green]✓[/green] Settings have been reset to default")
        logger.debug(f"Reset settings file: {settings.path}")

    except CCSwitchError as e:
        exit_with_error(e)
    except Exception as e:
        exit_with_unexpected(e, "reset settings")
