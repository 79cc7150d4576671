"""Whole-configuration validation with aggregated reporting."""

import logging
from pathlib import Path

from .config import Config
from .errors import CycleError
from .errors import ResolveError
from .errors import ValidationError
from .resolver import is_file_reference
from .resolver import resolve_profile

logger = logging.getLogger(__name__)


def _canonical_cycle(chain: list[str]) -> tuple[str, ...]:
    """Identify a cycle independent of the profile it was entered from.

    ``chain`` ends with the repeated profile; the cycle proper starts at that
    profile's first occurrence. Rotations of the same loop compare equal.
    """
    loop = chain[chain.index(chain[-1]) : -1]
    rotations = [tuple(loop[i:] + loop[:i]) for i in range(len(loop))]
    return min(rotations)


def collect_problems(cfg: Config, lib: Path) -> list[str]:
    """Return a message for every missing file, unknown profile and cycle."""
    errors: list[str] = []

    for profile, deps in cfg.profiles.items():
        for dep in deps:
            if is_file_reference(dep):
                path = lib / dep
                if not path.exists():
                    errors.append(f"Missing file: {path} (referenced by [{profile}])")
            elif dep not in cfg.profiles:
                errors.append(f"Unknown profile: {dep} (referenced by [{profile}])")

    reported: set[tuple[str, ...]] = set()
    for name in cfg.profiles:
        try:
            resolve_profile(name, cfg, lib, set(), [], [])
        except CycleError as e:
            key = _canonical_cycle(e.chain)
            if key in reported:
                continue
            reported.add(key)
            errors.append(str(e))
        except ResolveError as e:
            # Missing files and unknown profiles were reported by the structural pass
            logger.debug(f"Ignoring during cycle check of [{name}]: {e}")

    return errors


def validate(cfg: Config, lib: Path) -> None:
    """Check every profile of ``cfg`` against the library at ``lib``.

    Raises:
        ValidationError: Carrying all problems found, one message per line
    """
    errors = collect_problems(cfg, lib)
    if errors:
        raise ValidationError(errors)
    logger.debug(f"Validated {len(cfg.profiles)} profiles")
