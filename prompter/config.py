"""Configuration model and loading."""

import logging
from pathlib import Path

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field

from .errors import ConfigReadError
from .paths import library_path_for_config_override
from .paths import resolve_config_path

logger = logging.getLogger(__name__)


class Config(BaseModel):
    """Parsed prompter configuration.

    Attributes:
        profiles: Profile name to ordered dependency tokens (files or profile names)
        post_prompt: Optional text appended at the end of rendered output
    """

    model_config = ConfigDict(frozen=True)

    profiles: dict[str, list[str]] = Field(default_factory=dict)
    post_prompt: str | None = None


def list_profiles(cfg: Config) -> list[str]:
    """Return all profile names in lexicographic order."""
    return sorted(cfg.profiles)


def read_config_text(path: Path) -> str:
    """Read configuration text from disk.

    Raises:
        ConfigReadError: If the file cannot be read
    """
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigReadError(path, e) from e


def load_config(path: Path) -> Config:
    """Read and parse the configuration file at ``path``."""
    from .parser import parse_config_toml

    logger.debug(f"Loading configuration from {path}")
    return parse_config_toml(read_config_text(path))


def load_config_and_library(config_override: Path | None) -> tuple[Config, Path]:
    """Read the configuration and pick the library root that belongs with it.

    Args:
        config_override: ``--config`` value, or None for the default location

    Raises:
        PrompterError: If the configuration cannot be read or parsed
    """
    cfg_path = resolve_config_path(config_override)
    cfg = load_config(cfg_path)
    lib = library_path_for_config_override(config_override, cfg_path)
    logger.debug(f"Using config {cfg_path} with library {lib}")
    return cfg, lib
