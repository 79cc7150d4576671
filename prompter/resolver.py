"""Profile resolution: depth-first expansion of profiles into snippet files."""

import logging
from pathlib import Path
from pathlib import PurePosixPath

from .config import Config
from .errors import CycleError
from .errors import MissingFileError
from .errors import UnknownProfileError

logger = logging.getLogger(__name__)

SNIPPET_EXTENSION = "md"


def is_file_reference(dep: str) -> bool:
    """Return True if a dependency token names a snippet file rather than a profile.

    The check is purely syntactic: the token's extension must equal the
    snippet extension, ignoring case. A bare ``.md`` has no extension.
    """
    suffix = PurePosixPath(dep).suffix
    return suffix[1:].lower() == SNIPPET_EXTENSION if suffix else False


def resolve_profile(
    name: str,
    cfg: Config,
    lib: Path,
    seen_files: set[Path],
    stack: list[str],
    out: list[Path],
) -> None:
    """Recursively expand ``name`` into ``out``.

    Files are emitted in declared order; nested profiles are expanded fully
    before the next sibling token. A file already in ``seen_files`` is
    skipped, so the first occurrence across the whole traversal wins.

    Args:
        name: Profile to expand
        cfg: Parsed configuration
        lib: Library root that file references are joined onto
        seen_files: Paths already emitted (shared across the traversal)
        stack: Profiles currently being expanded (for cycle detection)
        out: Accumulator for resolved paths

    Raises:
        CycleError: If ``name`` is already being expanded
        UnknownProfileError: If ``name`` is not defined
        MissingFileError: If a referenced snippet does not exist
    """
    if name in stack:
        raise CycleError([*stack, name])
    deps = cfg.profiles.get(name)
    if deps is None:
        raise UnknownProfileError(name)

    stack.append(name)
    for dep in deps:
        if is_file_reference(dep):
            path = lib / dep
            if not path.exists():
                raise MissingFileError(path, name)
            if path not in seen_files:
                seen_files.add(path)
                out.append(path)
        else:
            resolve_profile(dep, cfg, lib, seen_files, stack, out)
    stack.pop()


def resolve(name: str, cfg: Config, lib: Path) -> list[Path]:
    """Resolve a profile into its ordered, deduplicated list of snippet paths."""
    out: list[Path] = []
    resolve_profile(name, cfg, lib, set(), [], out)
    logger.debug(f"Resolved profile '{name}' to {len(out)} files")
    return out
