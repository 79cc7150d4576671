"""Tests for depth-first profile resolution."""

import pytest

from prompter.config import Config
from prompter.errors import CycleError
from prompter.errors import MissingFileError
from prompter.errors import UnknownProfileError
from prompter.resolver import is_file_reference
from prompter.resolver import resolve
from prompter.resolver import resolve_profile


@pytest.mark.parametrize(
    "dep, expected",
    [
        ("a/b/c.md", True),
        ("notes.md", True),
        ("UPPER.MD", True),
        ("Mixed.Md", True),
        ("python.api", False),
        ("general.testing", False),
        ("readme.txt", False),
        (".md", False),
        ("dir.md/child", False),
        ("plain", False),
    ],
)
def test_is_file_reference(dep, expected):
    assert is_file_reference(dep) is expected


def test_nested_profile_order(nested_cfg, nested_lib):
    assert resolve("root", nested_cfg, nested_lib) == [nested_lib / "a/x.md", nested_lib / "f/y.md"]


def test_files_are_deduplicated_first_occurrence_wins(lib, snippet):
    snippet("x.md", "X")
    snippet("y.md", "Y")
    snippet("z.md", "Z")
    cfg = Config(
        profiles={
            "top": ["y.md", "inner", "x.md", "z.md"],
            "inner": ["x.md", "y.md"],
        }
    )
    assert resolve("top", cfg, lib) == [lib / "y.md", lib / "x.md", lib / "z.md"]


def test_diamond_is_not_a_cycle(lib, snippet):
    snippet("shared.md", "S")
    snippet("left.md", "L")
    cfg = Config(
        profiles={
            "top": ["left", "right"],
            "left": ["shared", "left.md"],
            "right": ["shared"],
            "shared": ["shared.md"],
        }
    )
    assert resolve("top", cfg, lib) == [lib / "shared.md", lib / "left.md"]


def test_empty_profile_resolves_to_nothing(lib):
    assert resolve("empty", Config(profiles={"empty": []}), lib) == []


def test_unknown_profile(lib):
    with pytest.raises(UnknownProfileError, match="Unknown profile: nope") as exc_info:
        resolve("nope", Config(), lib)
    assert exc_info.value.name == "nope"


def test_unknown_nested_profile(lib):
    cfg = Config(profiles={"top": ["ghost"]})
    with pytest.raises(UnknownProfileError, match="Unknown profile: ghost"):
        resolve("top", cfg, lib)


def test_cycle_reports_chain(lib):
    cfg = Config(profiles={"a": ["b"], "b": ["a"]})
    with pytest.raises(CycleError) as exc_info:
        resolve("a", cfg, lib)
    assert exc_info.value.chain == ["a", "b", "a"]
    assert str(exc_info.value) == "Cycle detected: a -> b -> a"


def test_self_reference_is_a_cycle(lib):
    with pytest.raises(CycleError, match="Cycle detected: loop -> loop"):
        resolve("loop", Config(profiles={"loop": ["loop"]}), lib)


def test_cycle_entered_from_outside(lib):
    cfg = Config(profiles={"entry": ["a"], "a": ["b"], "b": ["a"]})
    with pytest.raises(CycleError) as exc_info:
        resolve("entry", cfg, lib)
    assert exc_info.value.chain == ["entry", "a", "b", "a"]


def test_missing_file(lib):
    cfg = Config(profiles={"p": ["missing.md"]})
    with pytest.raises(MissingFileError) as exc_info:
        resolve("p", cfg, lib)
    assert exc_info.value.path == lib / "missing.md"
    assert exc_info.value.referenced_by == "p"
    assert str(exc_info.value) == f"Missing file: {lib / 'missing.md'} (referenced by [p])"


def test_missing_file_reports_innermost_profile(lib, snippet):
    snippet("ok.md", "OK")
    cfg = Config(profiles={"outer": ["ok.md", "inner"], "inner": ["gone.md"]})
    with pytest.raises(MissingFileError) as exc_info:
        resolve("outer", cfg, lib)
    assert exc_info.value.referenced_by == "inner"


def test_resolve_profile_accumulates_into_shared_state(nested_cfg, nested_lib):
    seen: set = set()
    stack: list[str] = []
    out: list = []
    resolve_profile("child", nested_cfg, nested_lib, seen, stack, out)
    resolve_profile("root", nested_cfg, nested_lib, seen, stack, out)

    assert out == [nested_lib / "a/x.md", nested_lib / "f/y.md"]
    assert stack == []
