# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Locate the next function definition signature in preprocessed C."""

import logging
from dataclasses import dataclass

from protoscan.lines import SourceLines
from protoscan.locator import (
    find_char,
    find_matching_brace,
    find_matching_paren,
    find_semicolon,
)

logger = logging.getLogger(__name__)

BLANK_CHARACTERS: str = " \t\r\n"


@dataclass(frozen=True)
class CandidateSignature:
    """Span of lines holding one function signature.

    Attributes:
        start_line: First line of the signature.
        stop_line: Line holding the ``)`` that closes the argument list.
        close_paren_index: Index of that ``)`` within ``stop_line``.
    """

    start_line: int
    stop_line: int
    close_paren_index: int


class SignatureClassifier:
    """Classify source positions by the order of ``(``, ``)``, ``{`` and ``;``.

    A function definition reads ``... ( ... ) {``: both parentheses come
    before the left brace and nothing ends in a semicolon first. A struct,
    enum or union opens a brace before any parenthesis, and a declaration or
    prototype reaches a semicolon first.
    """

    def __init__(self, lines: SourceLines) -> None:
        """Initialize classifier.

        Args:
            lines: Preprocessed source lines.
        """
        self._lines = lines

    def next_signature(self, begin: int) -> CandidateSignature | None:
        """Find the next function definition at or after ``begin``.

        Args:
            begin: Line index where the search starts.

        Returns:
            The next signature, or ``None`` when the input holds no more.

        Raises:
            UnbalancedBraceError: If a skipped block never closes.
        """
        lines = self._lines
        while True:
            position = self._skip_ignorable_lines(begin)
            if position is None:
                return None

            left_paren = find_char(lines, position, "(")
            if not left_paren.found:
                return None
            right_paren = find_matching_paren(lines, position, left_paren)
            left_brace = find_char(lines, position, "{")
            semicolon = find_char(lines, position, ";")

            if not right_paren.found or not left_brace.found:
                logger.debug(
                    f"No complete signature remains (line={position} "
                    f"right_paren={right_paren.found} left_brace={left_brace.found})"
                )
                return None

            if left_brace.total_offset < left_paren.total_offset:
                brace_line = position + left_brace.line_delta
                closing = find_matching_brace(
                    lines, brace_line, left_brace.byte_offset
                )
                terminator = find_semicolon(lines, closing.line, closing.index)
                if terminator is None:
                    logger.debug(
                        f"Block is not followed by a semicolon (line={brace_line})"
                    )
                    return None
                logger.debug(
                    f"Skipping braced block (start={position} end={terminator.line})"
                )
                begin = terminator.line + 1
                continue

            if semicolon.found and (
                semicolon.total_offset < left_brace.total_offset
                or semicolon.total_offset < left_paren.total_offset
            ):
                end_line = position + semicolon.line_delta
                logger.debug(f"Skipping statement (start={position} end={end_line})")
                begin = end_line + 1
                continue

            # The text between ')' and '{' is not checked. Stray tokens there
            # are left to the qualifier filter.
            return CandidateSignature(
                start_line=position,
                stop_line=position + right_paren.line_delta,
                close_paren_index=right_paren.byte_offset,
            )

    def _skip_ignorable_lines(self, begin: int) -> int | None:
        """Advance past preprocessor markers, blank lines and ``//`` lines.

        Returns:
            The first line that is none of these, or ``None`` at end of input.
        """
        while True:
            for skip in (
                self._next_non_marker_line,
                self._next_non_blank_line,
                self._next_non_double_slash_line,
            ):
                following = skip(begin)
                if following is None:
                    return None
                if following != begin:
                    begin = following
                    break
            else:
                return begin

    def _next_non_marker_line(self, start: int) -> int | None:
        for index in range(start, len(self._lines)):
            if not self._lines[index].startswith("#"):
                return index
        return None

    def _next_non_blank_line(self, start: int) -> int | None:
        for index in range(start, len(self._lines)):
            if self._lines[index].strip(BLANK_CHARACTERS):
                return index
        return None

    def _next_non_double_slash_line(self, start: int) -> int | None:
        for index in range(start, len(self._lines)):
            if not self._lines[index].startswith("//"):
                return index
        return None
