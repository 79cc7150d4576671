"""Health check for the local prompter installation."""

import logging
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path

import click

from ..config import read_config_text
from ..console import console
from ..errors import PrompterError
from ..errors import ValidationError
from ..parser import parse_config_toml
from ..paths import library_path_for_config_override
from ..paths import resolve_config_path
from ..utils.error_format import escape_markup
from ..validator import validate

logger = logging.getLogger(__name__)


@dataclass
class DoctorReport:
    errors: int = 0
    warnings: int = 0

    def ok(self, message: str) -> None:
        _line(f"  ✅ {message}")

    def error(self, message: str, hint: str | None = None) -> None:
        self.errors += 1
        _line(f"  ❌ [red]{message}[/red]")
        if hint:
            _line(f"  ℹ️  {hint}")

    def warning(self, message: str) -> None:
        self.warnings += 1
        _line(f"  ⚠️  [yellow]{message}[/yellow]")

    def summary(self) -> str:
        if not self.errors and not self.warnings:
            return "✨ [bright_green]Everything looks healthy![/bright_green]"
        parts = []
        if self.errors:
            parts.append(_plural(self.errors, "error"))
        if self.warnings:
            parts.append(_plural(self.warnings, "warning"))
        icon = "❌" if self.errors else "⚠️ "
        return f"{icon} {', '.join(parts)} found"


def _plural(count: int, noun: str) -> str:
    return f"{count} {noun}" if count == 1 else f"{count} {noun}s"


def _line(text: str = "") -> None:
    console.print(text, highlight=False, soft_wrap=True)


def check_configuration(report: DoctorReport, config_override: Path | None) -> None:
    """Check the config file and library directory, recording every finding in ``report``."""
    cfg_path = resolve_config_path(config_override)
    lib = library_path_for_config_override(config_override, cfg_path)
    shown_cfg = escape_markup(cfg_path)
    shown_lib = escape_markup(lib)

    cfg = None
    if cfg_path.is_file():
        report.ok(f"Config file: {shown_cfg}")
        try:
            text = read_config_text(cfg_path)
        except PrompterError as e:
            report.error(escape_markup(e))
            text = None

        if text is not None:
            try:
                tomllib.loads(text)
                report.ok("Config is valid TOML")
            except tomllib.TOMLDecodeError as e:
                report.warning(f"Config is not strict TOML: {escape_markup(e)}")

            try:
                cfg = parse_config_toml(text)
                report.ok(f"Config parses ({_plural(len(cfg.profiles), 'profile')})")
            except PrompterError as e:
                report.error(f"Config does not parse: {escape_markup(e)}")
    else:
        report.error(
            f"Config file not found: {shown_cfg}",
            hint="Run 'prompter init' to create default configuration",
        )

    if lib.is_dir():
        report.ok(f"Library directory: {shown_lib}")
    else:
        report.error(
            f"Library directory not found: {shown_lib}",
            hint="Run 'prompter init' to create default library",
        )

    if cfg is None:
        return

    try:
        validate(cfg, lib)
        report.ok("All profiles valid")
    except ValidationError as e:
        for message in e.messages:
            report.error(escape_markup(message))


@click.command("doctor")
@click.option(
    "--config",
    "-c",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    metavar="FILE",
    help="Override configuration file path",
)
@click.pass_context
def doctor_cmd(ctx, config):
    """Check configuration and library health."""
    if config is None:
        config = ctx.ensure_object(dict).get("config")

    _line("🏥 [bold]prompter health check[/bold]")
    _line("========================")
    _line()

    report = DoctorReport()
    _line("Configuration:")
    check_configuration(report, config)
    _line()

    _line(report.summary())
    logger.debug(f"Doctor finished with {report.errors} errors, {report.warnings} warnings")
    if report.errors:
        sys.exit(1)
