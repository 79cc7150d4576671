"""CLI path policy for the configuration file and snippet library.

Core functions receive already-resolved paths; this module decides where
they live:

- Config:  ~/.config/prompter/config.toml
- Library: ~/.local/prompter/library

With ``--config FILE`` the library is the ``library`` directory next to FILE.
"""

from pathlib import Path

CONFIG_RELATIVE = Path(".config") / "prompter" / "config.toml"
LIBRARY_RELATIVE = Path(".local") / "prompter" / "library"


def config_path() -> Path:
    """Default configuration file location."""
    return Path.home() / CONFIG_RELATIVE


def library_dir() -> Path:
    """Default library root."""
    return Path.home() / LIBRARY_RELATIVE


def config_path_override(path: Path) -> Path:
    """Make a user-supplied config path absolute (relative to the working directory)."""
    if path.is_absolute():
        return path
    return Path.cwd() / path


def library_dir_for_config(config: Path) -> Path:
    return config.parent / "library"


def resolve_config_path(config_override: Path | None) -> Path:
    if config_override is None:
        return config_path()
    return config_path_override(config_override)


def library_path_for_config_override(config_override: Path | None, resolved_config: Path) -> Path:
    """Pick the library root that belongs with the chosen configuration file."""
    if config_override is not None:
        return library_dir_for_config(resolved_config)
    return library_dir()
