"""prompter - compose reusable prompt snippets from a library into one prompt.

Profiles in a small TOML-like configuration map names to ordered lists of
snippet files and other profiles. The core entry points are re-exported here.
"""

__version__ = "0.1.0"

from .config import Config
from .config import list_profiles
from .config import load_config
from .errors import ConfigReadError
from .errors import ConfigSyntaxError
from .errors import CycleError
from .errors import MissingFileError
from .errors import PrompterError
from .errors import RenderError
from .errors import ResolveError
from .errors import UnknownProfileError
from .errors import ValidationError
from .parser import parse_config_toml
from .parser import unescape
from .renderer import render_to_writer
from .resolver import resolve
from .resolver import resolve_profile
from .validator import validate

__all__ = [
    "Config",
    "ConfigReadError",
    "ConfigSyntaxError",
    "CycleError",
    "MissingFileError",
    "PrompterError",
    "RenderError",
    "ResolveError",
    "UnknownProfileError",
    "ValidationError",
    "list_profiles",
    "load_config",
    "parse_config_toml",
    "render_to_writer",
    "resolve",
    "resolve_profile",
    "unescape",
    "validate",
]
