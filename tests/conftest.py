"""Shared fixtures for prompter tests."""

import logging
from pathlib import Path

import pytest

from prompter.config import Config


def write_snippet(lib: Path, relative: str, contents: str) -> Path:
    path = lib / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(contents, encoding="utf-8")
    return path


@pytest.fixture
def lib(tmp_path: Path) -> Path:
    """Empty library root."""
    root = tmp_path / "library"
    root.mkdir()
    return root


@pytest.fixture
def nested_lib(lib: Path) -> Path:
    """Library with two snippets used by the ``child``/``root`` profiles."""
    write_snippet(lib, "a/x.md", "AX\n")
    write_snippet(lib, "f/y.md", "FY\n")
    return lib


@pytest.fixture
def nested_cfg() -> Config:
    return Config(profiles={"child": ["a/x.md"], "root": ["child", "f/y.md", "a/x.md"]})


@pytest.fixture
def home(tmp_path: Path, monkeypatch) -> Path:
    """Isolated HOME so default config and library paths live under tmp_path."""
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.setenv("USERPROFILE", str(home_dir))
    monkeypatch.delenv("PROMPTER_LOG_PATH", raising=False)
    return home_dir


@pytest.fixture
def snippet(lib: Path):
    """Factory writing a snippet file into ``lib``."""

    def _write(relative: str, contents: str) -> Path:
        return write_snippet(lib, relative, contents)

    return _write


@pytest.fixture(autouse=True)
def reset_prompter_logger():
    """Drop handlers bound to streams of a finished CliRunner invocation."""
    yield
    logger = logging.getLogger("prompter")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.propagate = True
