"""Tests for the init scaffold."""

from click.testing import CliRunner

from prompter.commands.init import DEFAULT_CONFIG
from prompter.commands.init import SAMPLE_SNIPPETS
from prompter.commands.init import init_scaffold
from prompter.config import load_config
from prompter.main import cli
from prompter.validator import validate


class RecordingStatus:
    def __init__(self):
        self.messages: list[str] = []

    def update(self, message: str) -> None:
        self.messages.append(message)


def test_scaffold_creates_config_and_library(home):
    cfg_path, lib = init_scaffold()

    assert cfg_path == home / ".config" / "prompter" / "config.toml"
    assert lib == home / ".local" / "prompter" / "library"
    assert cfg_path.read_text(encoding="utf-8") == DEFAULT_CONFIG
    for relative, contents in SAMPLE_SNIPPETS.items():
        assert (lib / relative).read_text(encoding="utf-8") == contents


def test_scaffold_is_a_valid_setup(home):
    cfg_path, lib = init_scaffold()
    cfg = load_config(cfg_path)

    assert cfg.profiles == {
        "python.api": ["a/b/c.md", "f/g/h.md"],
        "general.testing": ["python.api", "a/b/d.md"],
    }
    validate(cfg, lib)


def test_existing_files_are_not_overwritten(home):
    cfg_path, lib = init_scaffold()
    cfg_path.write_text("# mine\n", encoding="utf-8")
    (lib / "a" / "b" / "c.md").write_text("edited", encoding="utf-8")

    init_scaffold()

    assert cfg_path.read_text(encoding="utf-8") == "# mine\n"
    assert (lib / "a" / "b" / "c.md").read_text(encoding="utf-8") == "edited"


def test_scaffold_reports_progress(home):
    status = RecordingStatus()
    init_scaffold(status)

    assert status.messages[0] == "Creating config directory..."
    assert "Writing default config..." in status.messages
    assert "Creating c.md" in status.messages


def test_init_command(home):
    result = CliRunner().invoke(cli, ["init"])

    assert result.exit_code == 0, result.output
    assert "Initialized config at" in result.output
    assert "Library root at" in result.output
    assert (home / ".config" / "prompter" / "config.toml").is_file()


def test_init_command_twice_succeeds(home):
    runner = CliRunner()
    assert runner.invoke(cli, ["init"]).exit_code == 0
    assert runner.invoke(cli, ["init"]).exit_code == 0


def test_init_command_failure(home):
    # A file where the config directory should be
    (home / ".config").write_text("in the way", encoding="utf-8")

    result = CliRunner().invoke(cli, ["init"])

    assert result.exit_code == 1
    assert "Init failed: Failed to create" in result.output
