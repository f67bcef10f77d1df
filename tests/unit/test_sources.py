# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Unit tests for C source discovery."""

from pathlib import Path

from protoscan.sources import IgnoreMatcher, discover_sources


def _write_file(path: Path, content: str = "") -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def test_ph5_src_001_file_root_is_returned_as_is(tmp_path: Path) -> None:
    source = tmp_path / "unit.i"
    _write_file(source, "int x;")

    assert discover_sources(source) == [source]


def test_ph5_src_002_directory_walk_honors_gitignore_and_skips_git(
    tmp_path: Path,
) -> None:
    _write_file(tmp_path / ".gitignore", "build/\n")
    _write_file(tmp_path / "a.c")
    _write_file(tmp_path / "notes.txt")
    _write_file(tmp_path / "sub" / "b.c")
    _write_file(tmp_path / "sub" / ".gitignore", "skip.c\n")
    _write_file(tmp_path / "sub" / "skip.c")
    _write_file(tmp_path / "build" / "generated.c")
    _write_file(tmp_path / ".git" / "hooks.c")

    found = discover_sources(tmp_path)

    assert found == [tmp_path / "a.c", tmp_path / "sub" / "b.c"]


def test_ph5_src_003_patterns_select_other_extensions(tmp_path: Path) -> None:
    _write_file(tmp_path / "a.c")
    _write_file(tmp_path / "a.i")
    _write_file(tmp_path / "deep" / "b.i")

    found = discover_sources(tmp_path, patterns=("*.i",))

    assert found == [tmp_path / "a.i", tmp_path / "deep" / "b.i"]


def test_ph5_src_004_nested_anchored_patterns_are_rebased(tmp_path: Path) -> None:
    _write_file(tmp_path / "lib" / ".gitignore", "/gen.c\n")

    matcher = IgnoreMatcher.from_project_root(tmp_path)

    assert matcher.matches("lib/gen.c", is_dir=False)
    assert not matcher.matches("gen.c", is_dir=False)
    assert not matcher.matches("", is_dir=True)
