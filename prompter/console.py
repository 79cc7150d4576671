"""Shared Rich console instances for CLI output.

``console`` writes to stdout and is used for status messages; rendered
prompts bypass it and go straight to the binary stdout stream. ``err_console``
carries errors and diagnostics so they never mix with rendered output.
"""

from rich.console import Console

from .utils.error_format import escape_markup

console = Console()
err_console = Console(stderr=True)


def print_success(msg: str) -> None:
    """Print a success line, decorated only when stdout is a terminal."""
    if console.is_terminal:
        console.print(f"✅ [bright_green]{escape_markup(msg)}[/bright_green]")
    else:
        console.print(msg, markup=False, highlight=False, soft_wrap=True)


def print_info(msg: str) -> None:
    if console.is_terminal:
        console.print(f"ℹ️  [bright_blue]{escape_markup(msg)}[/bright_blue]")
    else:
        console.print(msg, markup=False, highlight=False, soft_wrap=True)


def print_error(msg: object) -> None:
    """Print an error message on stderr with markup in ``msg`` left literal."""
    err_console.print(f"[red]{escape_markup(msg)}[/red]", highlight=False, soft_wrap=True)


__all__ = ["console", "err_console", "print_error", "print_info", "print_success"]
