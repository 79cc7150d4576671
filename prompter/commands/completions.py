"""Shell completion script generation."""

import logging

import click
from click.shell_completion import CompletionItem
from click.shell_completion import get_completion_class

from ..config import list_profiles
from ..config import load_config_and_library
from ..errors import PrompterError

logger = logging.getLogger(__name__)

PROG_NAME = "prompter"
COMPLETE_VAR = "_PROMPTER_COMPLETE"
SHELLS = ("bash", "zsh", "fish")


def _instructions(shell: str) -> list[str]:
    if shell == "bash":
        return [
            "# For bash (~/.bashrc):",
            f"#   source <({PROG_NAME} completions bash)",
        ]
    if shell == "zsh":
        return [
            "# For zsh (~/.zshrc):",
            f"#   {PROG_NAME} completions zsh > ~/.zsh/completions/_{PROG_NAME}",
            "#   # Ensure fpath includes ~/.zsh/completions",
        ]
    return [
        "# For fish (~/.config/fish/config.fish):",
        f"#   {PROG_NAME} completions fish | source",
    ]


def completion_script(cli: click.Command, shell: str) -> str:
    """Return the completion script for ``shell`` prefixed with install instructions."""
    comp_cls = get_completion_class(shell)
    if comp_cls is None:
        raise click.BadParameter(f"Unsupported shell: {shell}")
    source = comp_cls(cli, {}, PROG_NAME, COMPLETE_VAR).source()

    lines = [
        f"# Shell completion for {PROG_NAME}",
        "#",
        "# To enable completions, add this to your shell config:",
        "#",
        *_instructions(shell),
        "",
        source,
    ]
    return "\n".join(lines)


def complete_profiles(ctx: click.Context, param, incomplete: str) -> list[CompletionItem]:
    """Complete profile names from the active configuration.

    Any failure to read the configuration yields no suggestions.
    """
    override = ctx.params.get("config") or ctx.find_root().params.get("config")
    try:
        cfg, _lib = load_config_and_library(override)
    except PrompterError as e:
        logger.debug(f"Profile completion unavailable: {e}")
        return []
    return [CompletionItem(name) for name in list_profiles(cfg) if name.startswith(incomplete)]


@click.command("completions")
@click.argument("shell", type=click.Choice(SHELLS))
@click.pass_context
def completions_cmd(ctx, shell):
    """Generate shell completion scripts."""
    click.echo(completion_script(ctx.find_root().command, shell))
