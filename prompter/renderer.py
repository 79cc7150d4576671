"""Render a resolved profile into a single prompt document."""

import logging
import platform
import sys
from datetime import datetime
from pathlib import Path
from typing import BinaryIO

import click

from .config import Config
from .errors import RenderError
from .resolver import resolve
from .utils.error_format import format_error_message

logger = logging.getLogger(__name__)

DEFAULT_PRE_PROMPT = (
    "You are an LLM coding agent. Here are invariants that you must adhere to. "
    "Please respond with 'Got it' when you have studied these and understand them. "
    "At that point, the operator will give you further instructions. "
    "You are *not* to do anything to the contents of this directory until you have "
    "been explicitly asked to, by the operator.\n\n"
)

DEFAULT_POST_PROMPT = "Now, read the @AGENTS.md and @CLAUDE.md files in this directory, if they exist."

_OS_NAMES = {"darwin": "macos", "win32": "windows", "cygwin": "windows"}
_ARCH_NAMES = {"amd64": "x86_64", "x64": "x86_64", "arm64": "aarch64"}


def os_name() -> str:
    if sys.platform.startswith("linux"):
        return "linux"
    return _OS_NAMES.get(sys.platform, sys.platform)


def arch_name() -> str:
    machine = platform.machine().lower()
    return _ARCH_NAMES.get(machine, machine) or "unknown"


def _is_terminal(writer: BinaryIO) -> bool:
    isatty = getattr(writer, "isatty", None)
    return bool(isatty is not None and isatty())


def format_system_prefix(color: bool = False) -> str:
    """Describe the current date and platform for the rendered prompt."""
    date = datetime.now().strftime("%Y-%m-%d")
    os_id = os_name()
    arch = arch_name()

    if color:
        return (
            f"🗓️  Today is {click.style(date, fg='bright_cyan')}, and you are running on a "
            f"{click.style(arch, fg='bright_green')}/{click.style(os_id, fg='bright_green')} system.\n\n"
        )
    return f"Today is {date}, and you are running on a {arch}/{os_id} system.\n\n"


def _write(writer: BinaryIO, data: bytes) -> None:
    try:
        writer.write(data)
    except OSError as e:
        raise RenderError(f"Write error: {format_error_message(e, include_type=False)}") from e


def render_to_writer(
    cfg: Config,
    lib: Path,
    writer: BinaryIO,
    profile: str,
    separator: str | None = None,
    pre_prompt: str | None = None,
    post_prompt: str | None = None,
) -> None:
    """Resolve ``profile`` and stream the composed prompt to ``writer``.

    Layout: pre-prompt, blank line, system prefix, then for each file a blank
    line followed by its raw bytes and the separator (when non-empty), and
    finally a double blank line and the post-prompt.

    Args:
        cfg: Parsed configuration
        lib: Library root for snippet files
        writer: Binary sink
        profile: Profile name to render
        separator: Text written after every file
        pre_prompt: Leading text (defaults to DEFAULT_PRE_PROMPT)
        post_prompt: Trailing text; overrides the config's post_prompt,
            which overrides DEFAULT_POST_PROMPT

    Raises:
        ResolveError: If the profile cannot be resolved (nothing is written)
        RenderError: If a snippet cannot be read or the sink rejects a write
    """
    files = resolve(profile, cfg, lib)

    _write(writer, (pre_prompt if pre_prompt is not None else DEFAULT_PRE_PROMPT).encode("utf-8"))

    _write(writer, b"\n")
    _write(writer, format_system_prefix(color=_is_terminal(writer)).encode("utf-8"))

    sep = (separator or "").encode("utf-8")
    for path in files:
        _write(writer, b"\n")
        try:
            data = path.read_bytes()
        except OSError as e:
            raise RenderError(f"Failed to read {path}: {format_error_message(e, include_type=False)}") from e
        _write(writer, data)
        if sep:
            _write(writer, sep)

    if post_prompt is not None:
        post_prompt_text = post_prompt
    elif cfg.post_prompt is not None:
        post_prompt_text = cfg.post_prompt
    else:
        post_prompt_text = DEFAULT_POST_PROMPT

    _write(writer, b"\n\n")
    _write(writer, post_prompt_text.encode("utf-8"))
    logger.debug(f"Rendered profile '{profile}' ({len(files)} files)")
