# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Delimiter search helpers over source lines.

Only ``find_matching_brace`` knows about string literals. The other helpers
are used where a delimiter inside a string does not change the outcome.
"""

import logging
from dataclasses import dataclass

from protoscan.lines import SourceLines

logger = logging.getLogger(__name__)

NOT_FOUND_OFFSET: int = 100000000


class UnbalancedBraceError(RuntimeError):
    """Represent input whose braces never return to depth zero."""


@dataclass(frozen=True)
class OffsetTriple:
    """Location of a delimiter relative to a start line.

    Attributes:
        line_delta: Lines between the start line and the match; ``-1`` if
            nothing was found.
        byte_offset: Index of the match within its line.
        total_offset: Characters scanned from the start of the start line up
            to the match. Line terminators are not counted.
    """

    line_delta: int
    byte_offset: int
    total_offset: int

    @property
    def found(self) -> bool:
        return self.line_delta != -1


NOT_FOUND = OffsetTriple(
    line_delta=-1, byte_offset=NOT_FOUND_OFFSET, total_offset=NOT_FOUND_OFFSET
)


@dataclass(frozen=True)
class LinePosition:
    """Absolute line and byte index of a character."""

    line: int
    index: int


def find_char(
    lines: SourceLines, start: int, target: str, start_byte: int = 0
) -> OffsetTriple:
    """Find the first ``target`` at or after ``start``.

    Args:
        lines: Source lines.
        start: Line index where the search begins.
        target: Single character to look for.
        start_byte: Index within the start line where the search begins.

    Returns:
        Offsets of the first match, or ``NOT_FOUND``.
    """
    total = 0
    for line_index in range(start, len(lines)):
        text = lines[line_index]
        first = start_byte if line_index == start else 0
        position = text.find(target, first)
        if position != -1:
            return OffsetTriple(
                line_delta=line_index - start,
                byte_offset=position,
                total_offset=total + position - first,
            )
        total += len(text) - first
    return NOT_FOUND


def find_matching_paren(
    lines: SourceLines, start: int, left: OffsetTriple
) -> OffsetTriple:
    """Find the ``)`` closing the ``(`` located at ``left``.

    Nested parentheses are counted so that function-pointer arguments such as
    ``int (*cb)(int)`` do not end the argument list early.

    Args:
        lines: Source lines.
        start: Line index the ``left`` offsets are relative to.
        left: Location of the opening parenthesis.

    Returns:
        Offsets of the matching parenthesis relative to ``start``, or
        ``NOT_FOUND``.
    """
    if not left.found:
        return NOT_FOUND
    first_line = start + left.line_delta
    depth = 1
    total = left.total_offset - left.byte_offset
    for line_index in range(first_line, len(lines)):
        text = lines[line_index]
        first = left.byte_offset + 1 if line_index == first_line else 0
        for position in range(first, len(text)):
            char = text[position]
            if char == "(":
                depth += 1
            elif char == ")":
                depth -= 1
                if depth == 0:
                    return OffsetTriple(
                        line_delta=line_index - start,
                        byte_offset=position,
                        total_offset=total + position,
                    )
        total += len(text)
    return NOT_FOUND


def find_matching_brace(
    lines: SourceLines, start: int, left_index: int
) -> LinePosition:
    """Find the ``}`` closing the ``{`` at ``lines[start][left_index]``.

    Braces inside double-quoted strings are ignored. A quote toggles the
    string state unless preceded by a backslash; the first character looked
    at on each line has nothing before it and always toggles. A brace
    followed by ``'`` is taken as a character literal and not counted.

    Args:
        lines: Source lines.
        start: Line holding the opening brace.
        left_index: Index of the opening brace within that line.

    Returns:
        Position of the matching closing brace.

    Raises:
        UnbalancedBraceError: If the input ends before the brace is closed.
    """
    depth = 1
    in_string = False
    for line_index in range(start, len(lines)):
        text = lines[line_index]
        first = left_index + 1 if line_index == start else 0
        for position in range(first, len(text)):
            char = text[position]
            if char == '"' and (position == first or text[position - 1] != "\\"):
                in_string = not in_string
                continue
            if in_string or char not in "{}":
                continue
            following = text[position + 1] if position + 1 < len(text) else ""
            if following == "'":
                continue
            if char == "{":
                depth += 1
            else:
                depth -= 1
                if depth == 0:
                    return LinePosition(line=line_index, index=position)
    logger.warning(
        f"Matching right brace not found (start_line={start} left_index={left_index})"
    )
    raise UnbalancedBraceError(
        f"matching right brace not found for '{{' at line {start + 1}"
    )


def find_semicolon(
    lines: SourceLines, start: int, after_index: int = -1
) -> LinePosition | None:
    """Find the first ``;`` after ``lines[start][after_index]``.

    Args:
        lines: Source lines.
        start: Line index where the search begins.
        after_index: Index in the start line after which to search; ``-1``
            searches the whole start line.

    Returns:
        Position of the semicolon, or ``None`` when the input has no more.
    """
    offsets = find_char(lines, start, ";", start_byte=after_index + 1)
    if not offsets.found:
        return None
    return LinePosition(line=start + offsets.line_delta, index=offsets.byte_offset)
