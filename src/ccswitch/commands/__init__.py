"""Command groups for the ccswitch CLI."""

from ccswitch.commands.init import init_command
from ccswitch.commands.profiles import list_profiles, show_profile
from ccswitch.commands.switch import reset_command, use_command

__all__ = ["init_command", "list_profiles", "reset_command", "show_profile", "use_command"]
