"""CLI commands for prompter beyond the core run/list/validate."""

__all__ = [
    "completions",
    "doctor",
    "init",
]
