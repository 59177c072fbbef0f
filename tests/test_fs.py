from pathlib import Path

import pytest

from lc.errors import TraversalError
from lc.filtering.fs import build_ignore_spec, iter_files

from .conftest import write


def _rel(root: Path, paths):
    return [p.relative_to(root).as_posix() for p in paths]


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    write(tmp_path / "main.go", "package main\n")
    write(tmp_path / "pkg" / "a.go", "package pkg\n")
    write(tmp_path / "pkg" / "b.GO", "package pkg\n")
    write(tmp_path / "pkg" / "notes.txt", "x\n")
    write(tmp_path / "pkg" / "filego", "x\n")
    write(tmp_path / ".git" / "hooks" / "x.go", "package git\n")
    write(tmp_path / "vendor" / "lib" / "v.go", "package lib\n")
    return tmp_path


def test_suffix_filter_and_git_skip(tree: Path):
    assert _rel(tree, iter_files(tree, ".go")) == [
        "main.go",
        "pkg/a.go",
        "vendor/lib/v.go",
    ]


def test_suffix_is_literal_and_case_sensitive(tree: Path):
    assert _rel(tree, iter_files(tree, ".GO")) == ["pkg/b.GO"]
    # A suffix without the dot matches names without one too
    assert "pkg/filego" in _rel(tree, iter_files(tree, "go"))


def test_exclude_patterns_prune_directories(tree: Path):
    spec = build_ignore_spec(tree, ["vendor/"])
    assert _rel(tree, iter_files(tree, ".go", ignore_spec=spec)) == ["main.go", "pkg/a.go"]


def test_exclude_file_pattern(tree: Path):
    spec = build_ignore_spec(tree, ["a.go"])
    assert "pkg/a.go" not in _rel(tree, iter_files(tree, ".go", ignore_spec=spec))


def test_gitignore_only_when_enabled(tree: Path):
    write(tree / ".gitignore", "# comment\npkg/\n")
    assert build_ignore_spec(tree, []) is None
    spec = build_ignore_spec(tree, [], use_gitignore=True)
    assert _rel(tree, iter_files(tree, ".go", ignore_spec=spec)) == ["main.go", "vendor/lib/v.go"]


def test_gitignore_missing_is_fine(tmp_path: Path):
    assert build_ignore_spec(tmp_path, [], use_gitignore=True) is None


def test_missing_root_is_fatal(tmp_path: Path):
    with pytest.raises(TraversalError):
        list(iter_files(tmp_path / "absent", ".go"))


def test_file_as_root_is_fatal(tmp_path: Path):
    f = write(tmp_path / "x.go", "x\n")
    with pytest.raises(TraversalError):
        list(iter_files(f, ".go"))
