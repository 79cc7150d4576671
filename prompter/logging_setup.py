"""
Logging bootstrap for the prompter CLI.

Diagnostics always go to stderr so stdout stays reserved for rendered
prompts. Setting PROMPTER_LOG_PATH additionally appends structured JSONL
records to that file.
"""

import json
import logging
import os
from datetime import UTC
from datetime import datetime
from pathlib import Path

LOG_PATH_ENV = "PROMPTER_LOG_PATH"
LOG_LEVEL_ENV = "PROMPTER_LOG_LEVEL"

# Attributes every LogRecord carries; anything else was passed via ``extra``
_RECORD_ATTRS = frozenset(
    {
        "msg",
        "args",
        "levelname",
        "levelno",
        "pathname",
        "filename",
        "module",
        "exc_info",
        "exc_text",
        "stack_info",
        "lineno",
        "funcName",
        "created",
        "msecs",
        "relativeCreated",
        "thread",
        "threadName",
        "processName",
        "process",
        "taskName",
        "name",
    }
)


class JsonlHandler(logging.Handler):
    def __init__(self, path: str):
        super().__init__()
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def emit(self, record: logging.LogRecord) -> None:
        try:
            base = {
                "ts": datetime.now(UTC).isoformat(timespec="milliseconds"),
                "lvl": record.levelname,
                "schema": {"name": "prompter.log", "ver": "1.0.0"},
                "logger": record.name,
                "message": record.getMessage(),
            }
            for k, v in record.__dict__.items():
                if k in _RECORD_ATTRS:
                    continue
                base.setdefault(k, v)
            with self.path.open("a", encoding="utf-8") as f:
                f.write(json.dumps(base, ensure_ascii=False, default=str) + "\n")
        except Exception:
            self.handleError(record)


class StderrHandler(logging.StreamHandler):
    """Plain ``level: message`` lines on stderr."""

    def __init__(self) -> None:
        super().__init__()
        self.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))


def init_logging(verbose: bool = False, path: str | None = None, level: str | None = None) -> None:
    """Configure the ``prompter`` logger.

    Args:
        verbose: Show DEBUG records on stderr instead of WARNING and above
        path: JSONL log file (defaults to $PROMPTER_LOG_PATH; disabled when unset)
        level: JSONL log level (defaults to $PROMPTER_LOG_LEVEL, then INFO)
    """
    path = path or os.environ.get(LOG_PATH_ENV)
    level = (level or os.environ.get(LOG_LEVEL_ENV, "INFO")).upper()

    logger = logging.getLogger("prompter")
    logger.setLevel(logging.DEBUG)
    logger.propagate = False
    # Remove handlers from a previous call to avoid duplicates
    for h in list(logger.handlers):
        if isinstance(h, JsonlHandler | StderrHandler):
            logger.removeHandler(h)
            h.close()

    console_handler = StderrHandler()
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.addHandler(console_handler)

    if path:
        file_handler = JsonlHandler(path)
        file_handler.setLevel(getattr(logging, level, logging.INFO))
        logger.addHandler(file_handler)
