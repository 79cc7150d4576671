"""Exception hierarchy for prompter.

Every failure the core can report derives from PrompterError, so the CLI
layer can catch one type, print its message and exit non-zero. The str() of
each exception is the user-facing message.
"""

from pathlib import Path


class PrompterError(Exception):
    """Base class for all prompter failures."""


class ConfigSyntaxError(PrompterError):
    """Malformed configuration text. Parsing stops at the first offense."""


class ConfigReadError(PrompterError):
    """The configuration file could not be read from disk."""

    def __init__(self, path: Path, reason: object):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read {path}: {reason}")


class ResolveError(PrompterError):
    """A profile could not be expanded into a file list."""


class UnknownProfileError(ResolveError):
    """Referenced profile name does not exist in the configuration."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown profile: {name}")


class CycleError(ResolveError):
    """A profile reference revisits a profile that is still being expanded.

    Attributes:
        chain: Profile names from the first entry to the repeated name, inclusive
    """

    def __init__(self, chain: list[str]):
        self.chain = list(chain)
        super().__init__(f"Cycle detected: {' -> '.join(self.chain)}")


class MissingFileError(ResolveError):
    """A snippet file referenced by a profile does not exist in the library."""

    def __init__(self, path: Path, referenced_by: str):
        self.path = path
        self.referenced_by = referenced_by
        super().__init__(f"Missing file: {path} (referenced by [{referenced_by}])")


class ValidationError(PrompterError):
    """Aggregated report of every problem found by the validator."""

    def __init__(self, messages: list[str]):
        self.messages = list(messages)
        super().__init__("\n".join(self.messages))


class RenderError(PrompterError):
    """Reading a snippet or writing to the output sink failed."""
