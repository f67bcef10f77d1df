# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Render extraction results as a C header body."""

import re
from collections.abc import Sequence
from pathlib import Path

from protoscan.lines import join_text
from protoscan.model import ExtractionResult

DEFAULT_GUARD: str = "PROTOTYPES_H"


def guard_for(output_path: Path | None) -> str:
    """Derive an include guard from the header file name.

    ``allheaders.h`` becomes ``ALLHEADERS_H``; without a path the default
    guard is used.
    """
    if output_path is None:
        return DEFAULT_GUARD
    guard = re.sub(r"[^0-9A-Za-z]", "_", output_path.name).upper()
    if guard[:1].isdigit():
        guard = f"_{guard}"
    return guard


def render_header(results: Sequence[ExtractionResult], guard: str = DEFAULT_GUARD) -> str:
    """Wrap the prototypes of all results in an include guard.

    Each input with at least one prototype gets a comment naming it, followed
    by its prototypes.

    Args:
        results: Extraction results in output order.
        guard: Include guard macro name.

    Returns:
        Header text ending with a newline.
    """
    lines = [f"#ifndef {guard}", f"#define {guard}", ""]
    for result in results:
        if not result.prototypes:
            continue
        lines.append(f"/* {result.file_path} */")
        lines.extend(result.prototypes)
        lines.append("")
    lines.append(f"#endif /* {guard} */")
    return join_text(lines, separator="\n") + "\n"
