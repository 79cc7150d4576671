"""Parser for the restricted TOML subset used by prompter configuration files.

Supported grammar:

    # comments (quote-aware)
    post_prompt = "text with \\n escapes"

    [profile.name]
    depends_on = ["a/b.md", "other.profile"]

    [multi]
    depends_on = [
      "x.md",
      "y.md",
    ]

Items in ``depends_on`` are delimited purely by double quotes, so commas and
trailing commas are insignificant. Unknown keys are ignored.
"""

import logging
from collections.abc import Iterator
from dataclasses import dataclass

from .config import Config
from .errors import ConfigSyntaxError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Scanning:
    """Reading top-level lines."""


@dataclass(frozen=True)
class _CollectingArray:
    """Accumulating a depends_on array that spans several lines."""

    section: str | None
    partial_text: str


def _unquoted_chars(text: str) -> Iterator[tuple[int, str]]:
    """Yield (index, char) for characters outside double-quoted strings.

    A backslash inside a string escapes the next character, so ``\\"`` does
    not close the string. Quote characters themselves are not yielded.
    """
    in_string = False
    escaped = False
    for index, char in enumerate(text):
        if in_string:
            if escaped:
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
        elif char == '"':
            in_string = True
        else:
            yield index, char


def strip_comments(line: str) -> str:
    """Drop everything from the first ``#`` that is not inside a string."""
    for index, char in _unquoted_chars(line):
        if char == "#":
            return line[:index]
    return line


def contains_closing_bracket_outside_quotes(text: str) -> bool:
    return any(char == "]" for _, char in _unquoted_chars(text))


def parse_array_items(text: str) -> list[str]:
    """Extract the quoted items of an array literal.

    Scanning starts after the first ``[`` and stops at the first ``]`` outside
    a string. Inside a string a backslash copies the following character
    verbatim.

    Raises:
        ConfigSyntaxError: If a quoted item is never closed
    """
    items: list[str] = []
    buf: list[str] = []
    in_string = False
    escaped = False
    started = False

    for char in text:
        if not started:
            if char == "[":
                started = True
            continue
        if char == "]" and not in_string:
            break
        if in_string:
            if escaped:
                buf.append(char)
                escaped = False
            elif char == "\\":
                escaped = True
            elif char == '"':
                in_string = False
                items.append("".join(buf))
                buf.clear()
            else:
                buf.append(char)
        elif char == '"':
            in_string = True

    if in_string:
        raise ConfigSyntaxError("Unterminated string in array")
    return items


def unescape(text: str) -> str:
    """Convert ``\\n``, ``\\t``, ``\\r``, ``\\"`` and ``\\\\`` into literal characters.

    Any other escaped character keeps its backslash, as does a trailing lone
    backslash.

    Examples:
        >>> unescape("line1\\\\nline2")
        'line1\\nline2'
        >>> unescape("keep\\\\q")
        'keep\\\\q'
    """
    out: list[str] = []
    chars = iter(text)
    for char in chars:
        if char != "\\":
            out.append(char)
            continue
        following = next(chars, None)
        if following == "n":
            out.append("\n")
        elif following == "t":
            out.append("\t")
        elif following == "r":
            out.append("\r")
        elif following == '"':
            out.append('"')
        elif following == "\\" or following is None:
            out.append("\\")
        else:
            out.append("\\" + following)
    return "".join(out)


def _array_items(section: str | None, buffer: str) -> list[str]:
    try:
        return parse_array_items(buffer)
    except ConfigSyntaxError as e:
        raise ConfigSyntaxError(f"Invalid depends_on array for [{section or ''}]: {e}") from e


def _store_array(profiles: dict[str, list[str]], section: str | None, buffer: str) -> None:
    items = _array_items(section, buffer)
    if section is None:
        raise ConfigSyntaxError("depends_on outside of a profile section")
    if section in profiles:
        logger.debug(f"Replacing depends_on for [{section}]")
    profiles[section] = items


def parse_config_toml(text: str) -> Config:
    """Parse configuration text into a Config.

    Args:
        text: Configuration file contents

    Returns:
        Parsed configuration

    Raises:
        ConfigSyntaxError: On the first malformed construct
    """
    profiles: dict[str, list[str]] = {}
    post_prompt: str | None = None
    current: str | None = None
    seen_sections: set[str] = set()
    state: _Scanning | _CollectingArray = _Scanning()

    for raw_line in text.split("\n"):
        line = strip_comments(raw_line).strip()
        if not line:
            continue

        if isinstance(state, _CollectingArray):
            buffer = f"{state.partial_text} {line}"
            if contains_closing_bracket_outside_quotes(buffer):
                _store_array(profiles, state.section, buffer)
                state = _Scanning()
            else:
                state = _CollectingArray(state.section, buffer)
            continue

        if line.startswith("[") and line.endswith("]"):
            name = line[1:-1].strip()
            if not name:
                raise ConfigSyntaxError("Empty section name []")
            if name in seen_sections:
                logger.warning(f"Profile [{name}] is defined more than once; the last definition wins")
            seen_sections.add(name)
            current = name
            continue

        key, sep, value = line.partition("=")
        if not sep:
            continue
        key = key.strip()
        value = value.strip()

        if key == "post_prompt":
            if len(value) < 2 or not value.startswith('"') or not value.endswith('"'):
                raise ConfigSyntaxError("post_prompt must be a string")
            post_prompt = unescape(value[1:-1])
            continue

        if key != "depends_on":
            continue
        if not value.startswith("["):
            raise ConfigSyntaxError("depends_on must be an array")
        if contains_closing_bracket_outside_quotes(value):
            _store_array(profiles, current, value)
        else:
            state = _CollectingArray(current, value)

    if isinstance(state, _CollectingArray):
        # An open string at end of input is fatal; an unclosed array is dropped
        _array_items(state.section, state.partial_text)
        logger.warning(f"Ignoring unterminated depends_on array for [{state.section or ''}]")

    logger.debug(f"Parsed {len(profiles)} profiles")
    return Config(profiles=profiles, post_prompt=post_prompt)
