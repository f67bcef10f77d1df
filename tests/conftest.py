# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
import sys
from pathlib import Path

import pytest


def _add_src_to_path() -> None:
    root = Path(__file__).resolve().parents[1]
    src_path = root / "src"
    if str(src_path) not in sys.path:
        sys.path.insert(0, str(src_path))


_add_src_to_path()


@pytest.fixture
def cpp_output() -> str:
    """Return a small translation unit as the preprocessor emits it."""
    return "\n".join(
        [
            '# 1 "sample.c"',
            '# 1 "<built-in>"',
            "",
            "typedef unsigned int size_t;",
            "struct pair {",
            "    int a;",
            "    int b;",
            "};",
            '# 12 "sample.c"',
            "",
            "size_t length(const char *s)",
            "{",
            "    size_t n = 0;",
            "    while (s[n]) n++;",
            "    return n;",
            "}",
            "",
            "static int hidden(void)",
            "{",
            "    return 0;",
            "}",
            "",
            "int sum(struct pair p) { return p.a + p.b; }",
            "",
        ]
    )
