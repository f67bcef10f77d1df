# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Line-oriented views over preprocessed source text."""

import logging
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SourceLines:
    """Immutable sequence of physical source lines.

    Attributes:
        lines: One entry per physical line, without line terminators.
            Blank lines are kept so that line indexes match the input.
    """

    lines: tuple[str, ...]

    @classmethod
    def from_text(cls, text: str) -> "SourceLines":
        """Split text into lines.

        Only ``\\n`` separates lines; a trailing ``\\r`` is dropped from each
        line. A final newline does not produce an extra empty line.

        Args:
            text: Raw input text.

        Returns:
            Line view of ``text``.
        """
        if not text:
            return cls(lines=())
        parts = text.split("\n")
        if text.endswith("\n"):
            parts.pop()
        return cls(lines=tuple(part.rstrip("\r") for part in parts))

    def __len__(self) -> int:
        return len(self.lines)

    def __getitem__(self, index: int) -> str:
        return self.lines[index]

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)


def join_text(pieces: Iterable[str], separator: str = "\n") -> str:
    """Concatenate pieces with a separator between each pair."""
    return separator.join(pieces)
