# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Unit tests for delimiter search helpers."""

import pytest

from protoscan.lines import SourceLines
from protoscan.locator import (
    NOT_FOUND,
    NOT_FOUND_OFFSET,
    LinePosition,
    UnbalancedBraceError,
    find_char,
    find_matching_brace,
    find_matching_paren,
    find_semicolon,
)


def _lines(*rows: str) -> SourceLines:
    return SourceLines(lines=tuple(rows))


def test_ph1_loc_001_find_char_crosses_lines_and_counts_total_offset() -> None:
    lines = _lines("int a", "", "foo(x)")

    offsets = find_char(lines, 0, "(")

    assert offsets.found
    assert offsets.line_delta == 2
    assert offsets.byte_offset == 3
    assert offsets.total_offset == 8


def test_ph1_loc_002_find_char_returns_sentinel_when_missing() -> None:
    offsets = find_char(_lines("int a;", "int b;"), 0, "{")

    assert offsets == NOT_FOUND
    assert not offsets.found
    assert offsets.total_offset == NOT_FOUND_OFFSET
    assert offsets.byte_offset == NOT_FOUND_OFFSET


def test_ph1_loc_003_find_char_honors_start_line_and_start_byte() -> None:
    lines = _lines("a(b(c", "(")

    assert find_char(lines, 0, "(", start_byte=2).byte_offset == 3
    assert find_char(lines, 0, "(", start_byte=2).total_offset == 1
    assert find_char(lines, 1, "(").line_delta == 0


def test_ph1_loc_004_matching_paren_skips_nested_function_pointer_args() -> None:
    lines = _lines("int f(int (*cb)(int),", "      int x)")
    left = find_char(lines, 0, "(")

    right = find_matching_paren(lines, 0, left)

    assert right.line_delta == 1
    assert right.byte_offset == 11
    assert right.total_offset == len(lines[0]) + 11


def test_ph1_loc_005_matching_paren_not_found_for_unclosed_list() -> None:
    lines = _lines("int f(int a,", "      int b")
    left = find_char(lines, 0, "(")

    assert find_matching_paren(lines, 0, left) == NOT_FOUND
    assert find_matching_paren(lines, 0, NOT_FOUND) == NOT_FOUND


def test_ph1_loc_006_matching_brace_tracks_nested_blocks() -> None:
    lines = _lines("void f(void) {", "  if (x) { y(); }", "}")

    closing = find_matching_brace(lines, 0, lines[0].index("{"))

    assert closing == LinePosition(line=2, index=0)


def test_ph1_loc_007_matching_brace_ignores_braces_inside_strings() -> None:
    lines = _lines("{", '  char *s = "a}b";', '  char *t = "{";', "}")

    assert find_matching_brace(lines, 0, 0) == LinePosition(line=3, index=0)


def test_ph1_loc_008_matching_brace_respects_escaped_quotes() -> None:
    lines = _lines("{", '  s = "x\\"}";', "}")

    assert find_matching_brace(lines, 0, 0) == LinePosition(line=2, index=0)


def test_ph1_loc_009_matching_brace_skips_character_literals() -> None:
    lines = _lines("{", "  c = '}';", "  d = '{';", "}")

    assert find_matching_brace(lines, 0, 0) == LinePosition(line=3, index=0)


def test_ph1_loc_010_quote_at_line_start_always_toggles() -> None:
    lines = _lines("{", '"}"', "}")

    assert find_matching_brace(lines, 0, 0) == LinePosition(line=2, index=0)


def test_ph1_loc_011_matching_brace_raises_when_input_ends() -> None:
    lines = _lines("int f(void) {", "  if (x) {", "  }")

    with pytest.raises(UnbalancedBraceError, match="matching right brace not found"):
        find_matching_brace(lines, 0, lines[0].index("{"))


def test_ph1_loc_012_find_semicolon_searches_after_given_index() -> None:
    lines = _lines("struct s { int a; } v", "  ;")

    closing = lines[0].index("}")

    assert find_semicolon(lines, 0, closing) == LinePosition(line=1, index=2)
    assert find_semicolon(lines, 0) == LinePosition(line=0, index=16)
    assert find_semicolon(lines, 1, 2) is None
