"""ccswitch command-line entry point."""

import logging

import click

from ccswitch import __version__
from ccswitch.click_group import CCSwitchGroup
from ccswitch.commands import (
    init_command,
    list_profiles,
    reset_command,
    show_profile,
    use_command,
)

logger = logging.getLogger(__name__)


@click.group(
    cls=CCSwitchGroup,
    invoke_without_command=True,
    context_settings={"help_option_names": ["--help", "-h"]},
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.version_option(version=__version__, prog_name="ccswitch")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """ccswitch - manage and switch Claude Code API profiles.

    Profiles are named sets of environment variables (base URL, model,
    credentials). Switching a profile rewrites the "env" and "model"
    fields of Claude Code's settings.json and leaves everything else
    alone.

    \b
    COMMANDS:
        init          Create a profiles file from a built-in template
        list          List profiles (aliases: ls, profiles)
        show          Show a profile or the current settings
        use           Switch the active profile (aliases: switch, set)
        reset         Clear env and model from the settings file

    \b
    EXAMPLES:
        $ ccswitch init --full
        $ ccswitch list
        $ ccswitch use deepseek
        $ ccswitch show --current
        $ ccswitch reset

    \b
    CONFIGURATION:
        Profiles file: ~/.ccswitch/ccs.json   (--profiles, CCSWITCH_PROFILES)
        Settings file: ~/.claude/settings.json (--settings, CCSWITCH_SETTINGS,
                       or "settingsPath" in the profiles file)

    For help on any command: ccswitch <command> --help
    """
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.debug("Debug logging enabled")

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)


main.add_command(init_command)
main.add_command(list_profiles)
main.add_command(show_profile)
main.add_command(use_command)
main.add_command(reset_command)

main.add_alias("ls", "list")
main.add_alias("profiles", "list")
main.add_alias("switch", "use")
main.add_alias("set", "use")


if __name__ == "__main__":
    main()
