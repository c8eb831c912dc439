"""Init command for ccswitch.

Writes a profiles file from a built-in template.
"""

import logging

import click
from rich.markup import escape

from ccswitch.commands.cli_helpers import (
    console,
    exit_with_error,
    exit_with_unexpected,
    profiles_option,
)
from ccswitch.errors import CCSwitchError, ConfigWriteError, ProfilesExistError
from ccswitch.paths import expand_home
from ccswitch.templates import render_template

logger = logging.getLogger(__name__)


@click.command(name="init")
@profiles_option
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing configuration")
@click.option("--full", is_flag=True, help="Use the full template with all known providers")
def init_command(profiles_path: str, force: bool, full: bool):
    """Create a profiles file from a built-in template.

    Fails if the file already exists unless --force is given.

    \b
    EXAMPLES:
        $ ccswitch init
        $ ccswitch init --full
        $ ccswitch init --profiles ./ccs.json --force
    """
    try:
        target = expand_home(profiles_path)

        if target.exists() and not force:
            raise ProfilesExistError(str(target))

        config_dir = target.parent
        if not config_dir.is_dir():
            try:
                config_dir.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise ConfigWriteError(
                    f"Failed to create directory {config_dir}", path=str(config_dir), details=str(e)
                ) from e
            console.print(f"Created directory: {escape(str(config_dir))}")

        try:
            target.write_text(render_template(full=full), encoding="utf-8")
        except OSError as e:
            raise ConfigWriteError(
                f"Failed to write configuration file {target}", path=str(target), details=str(e)
            ) from e

        config_type = "full" if full else "default"
        logger.debug(f"Wrote {config_type} template to: {target}")
        console.print(
            f"[green]✓[/green] {config_type} configuration file created: {escape(str(target))}"
        )

    except CCSwitchError as e:
        exit_with_error(e)
    except Exception as e:
        exit_with_unexpected(e, "initialize configuration")
