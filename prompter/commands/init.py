"""Scaffold the default configuration and sample snippet library."""

import logging
import sys
from pathlib import Path

import click

from ..console import console
from ..console import print_error
from ..console import print_info
from ..console import print_success
from ..errors import PrompterError
from ..paths import config_path
from ..paths import library_dir
from ..utils.error_format import format_error_message

logger = logging.getLogger(__name__)

DEFAULT_CONFIG = """# Prompter configuration
# Profiles map to sets of markdown files and/or other profiles.
# Files are relative to $HOME/.local/prompter/library

[python.api]
depends_on = ["a/b/c.md", "f/g/h.md"]

[general.testing]
depends_on = ["python.api", "a/b/d.md"]
"""

SAMPLE_SNIPPETS: dict[str, str] = {
    "a/b/c.md": "# a/b/c.md\nExample snippet for python.api.\n",
    "a/b.md": "# a/b.md\nFolder-level notes.\n",
    "a/b/d.md": "# a/b/d.md\nGeneral testing snippet.\n",
    "f/g/h.md": "# f/g/h.md\nShared helper snippet.\n",
}


def _mkdir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise PrompterError(f"Failed to create {path}: {format_error_message(e, include_type=False)}") from e


def _write_if_missing(path: Path, contents: str) -> bool:
    if path.exists():
        logger.debug(f"Keeping existing {path}")
        return False
    try:
        path.write_text(contents, encoding="utf-8")
    except OSError as e:
        raise PrompterError(f"Failed to write {path}: {format_error_message(e, include_type=False)}") from e
    return True


def init_scaffold(status=None) -> tuple[Path, Path]:
    """Create the default config and library. Existing files are never overwritten.

    Args:
        status: Optional Rich status whose message tracks progress

    Returns:
        (config file path, library root)

    Raises:
        PrompterError: If a directory or file cannot be created
    """

    def step(message: str) -> None:
        if status is not None:
            status.update(message)

    cfg_path = config_path()
    lib = library_dir()

    step("Creating config directory...")
    _mkdir(cfg_path.parent)

    step("Creating library directory...")
    _mkdir(lib)

    step("Writing default config...")
    _write_if_missing(cfg_path, DEFAULT_CONFIG)

    for relative, contents in SAMPLE_SNIPPETS.items():
        path = lib / relative
        step(f"Creating {path.name}")
        _mkdir(path.parent)
        _write_if_missing(path, contents)

    return cfg_path, lib


@click.command("init")
def init_cmd():
    """Initialize default config and library."""
    try:
        if console.is_terminal:
            with console.status("Initializing prompter...", spinner="dots") as status:
                cfg_path, lib = init_scaffold(status)
        else:
            cfg_path, lib = init_scaffold()
    except PrompterError as e:
        print_error(f"Init failed: {e}")
        sys.exit(1)

    print_success(f"Initialized config at {cfg_path}")
    print_info(f"Library root at {lib}")
