"""Custom Click group with automatic help display on errors.

Usage errors print the message followed by the help of the command that
failed, then exit non-zero.
"""

import sys
from typing import Any

import click


class CCSwitchGroup(click.Group):
    """Click group that auto-displays contextual help on usage errors."""

    def main(self, *args: Any, standalone_mode: bool = True, **kwargs: Any) -> Any:
        """Run the CLI, showing contextual help for usage errors at any level."""
        if not standalone_mode:
            return super().main(*args, standalone_mode=False, **kwargs)

        try:
            rv = super().main(*args, standalone_mode=False, **kwargs)
        except click.exceptions.UsageError as e:
            click.echo(f"Error: {e.format_message()}", err=True)
            if e.ctx is not None:
                click.echo("")
                click.echo(e.ctx.get_help())
            sys.exit(e.exit_code)
        except click.exceptions.ClickException as e:
            e.show()
            sys.exit(e.exit_code)
        except click.exceptions.Abort:
            click.echo("Aborted!", err=True)
            sys.exit(1)

        # Non-standalone main returns Exit codes instead of raising them
        sys.exit(rv if isinstance(rv, int) else 0)

    def invoke(self, ctx: click.Context) -> Any:
        """Invoke the subcommand, showing its help on usage errors."""
        try:
            return super().invoke(ctx)
        except (
            click.exceptions.UsageError,
            click.exceptions.BadParameter,
            click.exceptions.MissingParameter,
        ) as e:
            click.echo(f"Error: {e.format_message()}", err=True)

            # Prefer the subcommand context when the error came from one
            error_ctx = e.ctx if hasattr(e, "ctx") and e.ctx else ctx

            click.echo("")
            click.echo(error_ctx.get_help())
            error_ctx.exit(e.exit_code if hasattr(e, "exit_code") else 1)
            return None

    def resolve_command(
        self, ctx: click.Context, args: list[str]
    ) -> tuple[str | None, click.Command | None, list[str]]:
        """Resolve aliases, and show help when the command is unknown."""
        cmd_name = args[0] if args else None
        if cmd_name in self.aliases:
            args = [self.aliases[cmd_name], *args[1:]]

        try:
            return super().resolve_command(ctx, args)
        except click.UsageError as e:
            # Parameter errors belong to invoke()
            if isinstance(e, click.exceptions.MissingParameter | click.exceptions.BadParameter):
                raise
            click.echo(f"Error: {e.format_message()}", err=True)
            click.echo("")
            click.echo(ctx.get_help())
            ctx.exit(1)
            return None, None, []

    @property
    def aliases(self) -> dict[str, str]:
        """Alias name to command name."""
        return getattr(self, "_aliases", {})

    def add_alias(self, alias: str, command_name: str) -> None:
        if not hasattr(self, "_aliases"):
            self._aliases: dict[str, str] = {}
        self._aliases[alias] = command_name
