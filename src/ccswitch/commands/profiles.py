"""Profile inspection commands for ccswitch.

- list: Table of all profiles, default marked
- show: One profile's variables, or the live settings file
"""

import logging

import click
from rich.markup import escape
from rich.table import Table

from ccswitch.activation import resolve_profile_name
from ccswitch.commands.cli_helpers import (
    console,
    exit_with_error,
    exit_with_unexpected,
    print_variables,
    profiles_option,
    settings_option,
)
from ccswitch.errors import CCSwitchError
from ccswitch.masking import mask_env
from ccswitch.paths import resolve_settings_path
from ccswitch.profile_store import ProfileStore
from ccswitch.settings_document import SettingsDocument

logger = logging.getLogger(__name__)


def _truncate(value: str, width: int) -> str:
    if len(value) > width:
        return value[: width - 3] + "..."
    return value


@click.command(name="list")
@profiles_option
def list_profiles(profiles_path: str):
    """List all configured profiles.

    The default profile is marked in the Status column.

    \b
    EXAMPLES:
        $ ccswitch list
        $ ccswitch ls --profiles ./ccs.json
    """
    try:
        store = ProfileStore.load(profiles_path)

        if len(store) == 0:
            console.print("[yellow]No profiles configured.[/yellow]")
            return

        default_name = store.default()

        table = Table(title="Available Claude API Profiles")
        table.add_column("Profile", style="green", no_wrap=True)
        table.add_column("Description", max_width=28)
        table.add_column("URL", style="blue", max_width=38)
        table.add_column("Model", style="yellow", max_width=18)
        table.add_column("Status", style="cyan")

        for name in store.names():
            env = store.profiles[name]
            table.add_row(
                escape(name),
                escape(_truncate(store.describe(name) or "", 28)),
                escape(_truncate(env.get("ANTHROPIC_BASE_URL", ""), 38)),
                escape(_truncate(env.get("ANTHROPIC_MODEL", ""), 18)),
                "Default" if name == default_name else "",
            )

        console.print(table)
        console.print(f"\nTotal profiles: {len(store)}")

    except CCSwitchError as e:
        exit_with_error(e)
    except Exception as e:
        exit_with_unexpected(e, "list profiles")


def _show_current(profiles_path: str, settings_path: str | None) -> None:
    path = resolve_settings_path(settings_path, profiles_path)
    settings = SettingsDocument.load(path)

    console.print("Current Claude Settings:")
    console.print(f"  Settings file: {escape(str(settings.path))}")
    console.print(f"  Model: {escape(settings.model or '(default)')}")

    env = settings.env
    if env:
        print_variables("Environment Variables", mask_env(env))


def _show_profile(profiles_path: str, name: str) -> None:
    store = ProfileStore.load(profiles_path)
    resolve_profile_name(store, name)

    console.print(f"Profile: {escape(name)}")
    if name == store.default():
        console.print("  (default profile)")

    description = store.describe(name)
    if description:
        console.print(f"  Description: {escape(description)}")

    env = store.get(name)
    if env:
        print_variables("Configuration", mask_env(env))
    else:
        console.print("\nConfiguration:")
        console.print("  (no custom configuration)")


@click.command(name="show")
@click.argument("profile", required=False)
@profiles_option
@settings_option
@click.option(
    "--current", "-c", is_flag=True, help="Show current Claude settings instead of a profile"
)
def show_profile(profile: str | None, profiles_path: str, settings_path: str | None, current: bool):
    """Show a profile, or the current Claude settings.

    Credentials are masked. Without PROFILE, or with --current, the live
    settings file is shown.

    \b
    EXAMPLES:
        $ ccswitch show deepseek
        $ ccswitch show --current
    """
    try:
        if current or not profile:
            _show_current(profiles_path, settings_path)
        else:
            _show_profile(profiles_path, profile)

    except CCSwitchError as e:
        exit_with_error(e)
    except Exception as e:
        exit_with_unexpected(e, "show profile")
