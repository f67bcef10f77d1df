# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Discover C input files beneath a project root."""

import logging
import os
from pathlib import Path

import pathspec

logger = logging.getLogger(__name__)

DEFAULT_PATTERNS: tuple[str, ...] = ("*.c",)


class IgnoreMatcher:
    """Match project paths against .gitignore patterns."""

    def __init__(self, spec: pathspec.GitIgnoreSpec) -> None:
        """Initialize matcher.

        Args:
            spec: Compiled gitignore matcher.
        """
        self._spec = spec

    @classmethod
    def from_project_root(cls, root: Path) -> "IgnoreMatcher":
        """Build matcher from root and nested .gitignore files.

        Args:
            root: Project root.

        Returns:
            Configured ignore matcher.

        Raises:
            OSError: If .gitignore files cannot be read.
            UnicodeDecodeError: If .gitignore files contain invalid UTF-8.
        """
        patterns: list[str] = []
        for ignore_path in sorted(root.rglob(".gitignore")):
            base = ignore_path.parent.relative_to(root).as_posix()
            if base == ".":
                base = ""
            for line in ignore_path.read_text(encoding="utf-8").splitlines():
                patterns.append(_rebase_gitignore_line(line=line, base=base))
        return cls(spec=pathspec.GitIgnoreSpec.from_lines(patterns))

    def matches(self, relative_path: str, is_dir: bool) -> bool:
        """Check whether a project-relative path is ignored."""
        normalized = relative_path.replace(os.sep, "/").strip("/")
        if not normalized:
            return False
        if self._spec.match_file(normalized):
            return True
        return is_dir and self._spec.match_file(f"{normalized}/")


def discover_sources(
    root: Path, patterns: tuple[str, ...] = DEFAULT_PATTERNS
) -> list[Path]:
    """List the files to scan.

    A file root is returned as is. A directory root is walked recursively in
    sorted order; ``.git`` directories and paths ignored by ``.gitignore``
    files are skipped.

    Args:
        root: File or directory to scan.
        patterns: File name globs selecting inputs inside a directory.

    Returns:
        Paths of the input files.

    Raises:
        OSError: If the tree or its .gitignore files cannot be read.
    """
    if root.is_file():
        return [root]

    matcher = IgnoreMatcher.from_project_root(root)
    found: list[Path] = []
    queue: list[Path] = [root]
    while queue:
        current = queue.pop(0)
        for child in sorted(current.iterdir(), key=lambda item: item.name):
            if child.name == ".git" and child.is_dir():
                continue
            relative = child.relative_to(root).as_posix()
            if matcher.matches(relative_path=relative, is_dir=child.is_dir()):
                logger.debug(f"Skipping ignored path (path={relative})")
                continue
            if child.is_dir():
                queue.append(child)
            elif any(child.match(pattern) for pattern in patterns):
                found.append(child)

    found.sort()
    logger.info(f"Source discovery completed (root={root} files={len(found)})")
    return found


def _rebase_gitignore_line(line: str, base: str) -> str:
    """Translate one .gitignore line to a root-relative pattern.

    Args:
        line: Original .gitignore line.
        base: Directory of the .gitignore file relative to the root.

    Returns:
        Root-relative pattern line.
    """
    if not base or not line:
        return line
    if line.lstrip().startswith("#"):
        return line
    if line.startswith(r"\!") or line.startswith(r"\#"):
        return line
    is_negation = line.startswith("!")
    pattern = line[1:] if is_negation else line
    anchored = pattern.startswith("/")
    normalized_pattern = pattern[1:] if anchored else pattern
    prefixed = f"{base}/{normalized_pattern}" if normalized_pattern else base
    if anchored:
        prefixed = f"/{prefixed}"
    if is_negation:
        return f"!{prefixed}"
    return prefixed
