from pathlib import Path

import pytest

from kiln.conflicts import can_provision, describe_conflict
from kiln.errors import ArgumentError, ConflictError
from kiln.paths import resolve_destination


def test_resolve_destination_joins_segments_with_space(tmp_path):
    assert resolve_destination(["my", "site"], cwd=tmp_path) == tmp_path / "my site"
    assert resolve_destination(["blog"], cwd=tmp_path) == tmp_path / "blog"
    assert resolve_destination(["a", "b", "c"], cwd=tmp_path) == tmp_path / "a b c"


def test_resolve_destination_normalizes_and_keeps_absolute(tmp_path):
    assert resolve_destination(["../blog"], cwd=tmp_path / "www") == tmp_path / "blog"
    assert resolve_destination(["./x/./y/"], cwd=tmp_path) == tmp_path / "x" / "y"

    absolute = tmp_path / "elsewhere"
    assert resolve_destination([str(absolute)], cwd=Path("/unused")) == absolute


def test_resolve_destination_defaults_to_cwd_and_expands_home(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    assert resolve_destination(["site"]) == Path.cwd() / "site"

    monkeypatch.setenv("HOME", str(tmp_path / "home"))
    assert resolve_destination(["~/site"]) == tmp_path / "home" / "site"


def test_resolve_destination_touches_nothing(tmp_path):
    target = resolve_destination(["not", "there"], cwd=tmp_path)
    assert target.is_absolute()
    assert not target.exists()
    assert list(tmp_path.iterdir()) == []


def test_resolve_destination_requires_a_segment(tmp_path):
    with pytest.raises(ArgumentError, match="You must specify a path."):
        resolve_destination([], cwd=tmp_path)


def test_can_provision_missing_and_empty(tmp_path):
    assert can_provision(tmp_path / "missing")
    empty = tmp_path / "empty"
    empty.mkdir()
    assert can_provision(empty)


def test_can_provision_denies_any_entry(tmp_path):
    with_file = tmp_path / "with-file"
    with_file.mkdir()
    (with_file / "stray.txt").write_text("x", encoding="utf-8")
    assert not can_provision(with_file)

    with_dir = tmp_path / "with-dir"
    (with_dir / "nested" / "deeper").mkdir(parents=True)
    assert not can_provision(with_dir)

    hidden = tmp_path / "hidden"
    hidden.mkdir()
    (hidden / ".git").mkdir()
    assert not can_provision(hidden)


def test_can_provision_denies_regular_file(tmp_path):
    target = tmp_path / "file.txt"
    target.write_text("x", encoding="utf-8")
    assert not can_provision(target)


def test_force_always_allows(tmp_path):
    busy = tmp_path / "busy"
    busy.mkdir()
    (busy / "stray.txt").write_text("x", encoding="utf-8")
    regular = tmp_path / "file.txt"
    regular.write_text("x", encoding="utf-8")

    for path in (busy, regular, tmp_path / "missing", tmp_path):
        assert can_provision(path, force=True)


def test_describe_conflict_names_path_and_force(tmp_path):
    error = describe_conflict(tmp_path)
    assert isinstance(error, ConflictError)
    assert error.path == tmp_path
    assert str(tmp_path) in str(error)
    assert "exists and is not empty" in str(error)
    assert "--force" in error.remediation
    assert str(tmp_path) in error.remediation
