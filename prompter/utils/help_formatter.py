"""Custom Click group that accepts a bare profile name in place of a subcommand.

``prompter PROFILE`` is shorthand for ``prompter run PROFILE``. Options given
before the profile belong to the group and are picked up by ``run``.
"""

import click
from click import Context
from click import HelpFormatter
from click.shell_completion import CompletionItem

from ..commands.completions import complete_profiles

DEFAULT_COMMAND = "run"


class PrompterGroup(click.Group):
    """Click group routing unknown first arguments to the ``run`` command.

    Commands are listed in registration order rather than alphabetically, so
    help output reads in the order a new user needs them.
    """

    def list_commands(self, ctx: Context) -> list[str]:
        return list(self.commands)

    def resolve_command(self, ctx: Context, args: list[str]):
        cmd_name = args[0]
        if self.get_command(ctx, cmd_name) is None and not cmd_name.startswith("-"):
            default = self.get_command(ctx, DEFAULT_COMMAND)
            if default is not None:
                return DEFAULT_COMMAND, default, args
        return super().resolve_command(ctx, args)

    def shell_complete(self, ctx: Context, incomplete: str) -> list[CompletionItem]:
        """Offer profile names alongside command names."""
        items = super().shell_complete(ctx, incomplete)
        if not incomplete.startswith("-"):
            items.extend(complete_profiles(ctx, None, incomplete))
        return items

    def format_usage(self, ctx: Context, formatter: HelpFormatter) -> None:
        formatter.write_usage(ctx.command_path, "[OPTIONS] [PROFILE | COMMAND [ARGS]...]")
