"""Shared helpers for ccswitch commands.

Holds the common ``--profiles``/``--settings`` options, the interactive
profile menu, and the printers used by more than one command.
"""

import logging
import sys
from collections.abc import Mapping

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ccswitch.errors import CCSwitchError, ProfileNotFoundError
from ccswitch.paths import DEFAULT_PROFILES_PATH, PROFILES_ENVVAR, SETTINGS_ENVVAR
from ccswitch.profile_store import ProfileStore

logger = logging.getLogger(__name__)
console = Console(soft_wrap=True)

profiles_option = click.option(
    "--profiles",
    "-p",
    "profiles_path",
    envvar=PROFILES_ENVVAR,
    default=DEFAULT_PROFILES_PATH,
    show_default=True,
    help="Path to the profiles configuration file",
)

settings_option = click.option(
    "--settings",
    "-s",
    "settings_path",
    envvar=SETTINGS_ENVVAR,
    default=None,
    help="Path to the Claude settings file (default: from profiles file, else ~/.claude/settings.json)",
)


def stdin_is_interactive() -> bool:
    """True when both stdin and stdout are terminals."""
    return sys.stdin.isatty() and sys.stdout.isatty()


def select_profile(store: ProfileStore) -> str | None:
    """Ask the user to pick a profile from a numbered menu.

    The store default is preselected when it exists.

    Returns:
        Selected profile name, or None if cancelled
    """
    names = store.names()
    if not names:
        return None

    default_name = store.default()
    default_index = names.index(default_name) + 1 if default_name in names else 1

    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Profile", style="green")
    table.add_column("URL", style="blue")
    table.add_column("Model", style="yellow")

    for idx, name in enumerate(names, 1):
        env = store.profiles[name]
        table.add_row(
            str(idx),
            escape(name),
            escape(env.get("ANTHROPIC_BASE_URL", "-")),
            escape(env.get("ANTHROPIC_MODEL", "-")),
        )

    console.print("\n[bold]Select profile:[/bold]\n")
    console.print(table)
    console.print()

    while True:
        try:
            selection = click.prompt(
                "Enter profile number (or 'q' to quit)",
                type=str,
                default=str(default_index),
            )

            if selection.lower() == "q":
                return None

            idx = int(selection) - 1
            if 0 <= idx < len(names):
                return names[idx]
            click.echo(f"Invalid selection. Please enter 1-{len(names)}", err=True)
        except (ValueError, click.Abort):
            click.echo("\nSelection cancelled", err=True)
            return None


def print_profile_details(env: Mapping[str, str]) -> None:
    if not env:
        return

    console.print("\nProfile details:")
    if "ANTHROPIC_BASE_URL" in env:
        console.print(f"  URL: {escape(env['ANTHROPIC_BASE_URL'])}")
    if "ANTHROPIC_MODEL" in env:
        console.print(f"  Model: {escape(env['ANTHROPIC_MODEL'])}")
    if "ANTHROPIC_SMALL_FAST_MODEL" in env:
        console.print(f"  Fast Model: {escape(env['ANTHROPIC_SMALL_FAST_MODEL'])}")


def print_variables(title: str, env: Mapping[str, str]) -> None:
    """Print already-masked variables in key order."""
    console.print(f"\n{title}:")
    for key in sorted(env):
        console.print(f"  {escape(key)}: {escape(env[key])}")


def print_profile_not_found(error: ProfileNotFoundError) -> None:
    """Print the missing profile and the valid names, default marked '*'."""
    console.print(f"[red]Error:[/red] {escape(str(error))}")
    if not error.available:
        console.print("\nNo profiles configured.")
        return

    console.print("\nAvailable profiles:")
    for name in error.available:
        marker = " *" if name == error.default else "  "
        console.print(f"{marker} {escape(name)}")


def exit_with_error(error: CCSwitchError) -> None:
    """Report a ccswitch error and exit 1."""
    if isinstance(error, ProfileNotFoundError):
        print_profile_not_found(error)
    else:
        console.print(f"[red]Error:[/red] {escape(str(error))}")
    sys.exit(1)


def exit_with_unexpected(error: Exception, action: str) -> None:
    console.print(f"[red]Unexpected error:[/red] {escape(str(error))}")
    logger.error(f"Failed to {action}: {error}", exc_info=True)
    sys.exit(1)


__all__ = [
    "console",
    "exit_with_error",
    "exit_with_unexpected",
    "print_profile_details",
    "print_profile_not_found",
    "print_variables",
    "profiles_option",
    "select_profile",
    "settings_option",
    "stdin_is_interactive",
]
