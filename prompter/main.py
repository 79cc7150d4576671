"""prompter CLI - compose reusable prompt snippets into a single prompt."""

import logging
import sys
from pathlib import Path

import click

from . import __version__
from .commands.completions import complete_profiles
from .commands.completions import completions_cmd
from .commands.doctor import doctor_cmd
from .commands.init import init_cmd
from .config import list_profiles
from .config import load_config_and_library
from .console import print_error
from .console import print_success
from .errors import PrompterError
from .errors import ValidationError
from .logging_setup import init_logging
from .parser import unescape
from .renderer import render_to_writer
from .utils.help_formatter import PrompterGroup
from .validator import validate

logger = logging.getLogger(__name__)

CONFIG_OPTION_HELP = "Override configuration file path (library is read from ./library next to it)"


def config_option(f):
    return click.option(
        "--config",
        "-c",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        metavar="FILE",
        help=CONFIG_OPTION_HELP,
    )(f)


def effective_config_override(ctx: click.Context, config: Path | None) -> Path | None:
    """Subcommand ``--config`` wins over the one given before the subcommand."""
    if config is not None:
        return config
    return ctx.ensure_object(dict).get("config")


def _pick(own: str | None, inherited: str | None) -> str | None:
    value = own if own is not None else inherited
    return unescape(value) if value is not None else None


@click.group(cls=PrompterGroup, invoke_without_command=True)
@click.version_option(__version__, "--version", "-V", prog_name="prompter", message="%(prog)s %(version)s")
@click.option("--separator", "-s", metavar="STRING", help="Separator written after each file")
@click.option("--pre-prompt", "-p", metavar="TEXT", help="Pre-prompt text to inject at the beginning")
@click.option("--post-prompt", "-P", metavar="TEXT", help="Post-prompt text to inject at the end")
@config_option
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging on stderr")
@click.pass_context
def cli(ctx, separator, pre_prompt, post_prompt, config, verbose):
    """A CLI tool for composing reusable prompt snippets.

    Run PROFILE directly (shorthand for 'prompter run PROFILE') or use one of
    the commands below.
    """
    init_logging(verbose=verbose)
    ctx.ensure_object(dict).update(
        separator=separator,
        pre_prompt=pre_prompt,
        post_prompt=post_prompt,
        config=config,
    )

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        ctx.exit(0)


@cli.command("run")
@click.argument("profile", shell_complete=complete_profiles)
@click.option("--separator", "-s", metavar="STRING", help="Separator written after each file")
@click.option("--pre-prompt", "-p", metavar="TEXT", help="Pre-prompt text to inject at the beginning")
@click.option("--post-prompt", "-P", metavar="TEXT", help="Post-prompt text to inject at the end")
@config_option
@click.pass_context
def run(ctx, profile, separator, pre_prompt, post_prompt, config):
    """Render a profile (concatenated file contents)."""
    inherited = ctx.ensure_object(dict)
    try:
        cfg, lib = load_config_and_library(effective_config_override(ctx, config))
        stdout = sys.stdout.buffer
        render_to_writer(
            cfg,
            lib,
            stdout,
            profile,
            separator=_pick(separator, inherited.get("separator")),
            pre_prompt=_pick(pre_prompt, inherited.get("pre_prompt")),
            post_prompt=_pick(post_prompt, inherited.get("post_prompt")),
        )
        stdout.flush()
    except PrompterError as e:
        print_error(e)
        sys.exit(1)


@cli.command("list")
@config_option
@click.pass_context
def list_cmd(ctx, config):
    """List available profiles."""
    try:
        cfg, _lib = load_config_and_library(effective_config_override(ctx, config))
    except PrompterError as e:
        print_error(e)
        sys.exit(1)

    for name in list_profiles(cfg):
        click.echo(name)


@cli.command("validate")
@config_option
@click.pass_context
def validate_cmd(ctx, config):
    """Validate configuration and library references."""
    try:
        cfg, lib = load_config_and_library(effective_config_override(ctx, config))
        validate(cfg, lib)
    except ValidationError as e:
        print_error(f"Validation errors:\n{e}")
        sys.exit(1)
    except PrompterError as e:
        print_error(e)
        sys.exit(1)

    print_success("All profiles valid")


@cli.command("version")
def version_cmd():
    """Show version information."""
    click.echo(f"prompter {__version__}")


cli.add_command(init_cmd)
cli.add_command(completions_cmd)
cli.add_command(doctor_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == "__main__":
    main()
