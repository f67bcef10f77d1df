# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Capture and normalize function signatures into prototypes."""

import logging

from protoscan.classifier import CandidateSignature
from protoscan.config import DEFAULT_QUALIFIER, DEFAULT_REJECTED_QUALIFIERS
from protoscan.lines import SourceLines, join_text

logger = logging.getLogger(__name__)


def capture_signature(lines: SourceLines, candidate: CandidateSignature) -> str:
    """Return the raw signature text terminated by a semicolon.

    Args:
        lines: Source lines.
        candidate: Signature span found by the classifier.

    Returns:
        Lines of the signature joined by spaces, cut after the closing
        parenthesis, followed by ``;``.
    """
    pieces = list(lines.lines[candidate.start_line : candidate.stop_line])
    last = lines[candidate.stop_line]
    pieces.append(last[: candidate.close_paren_index + 1])
    pieces.append(";")
    return join_text(pieces, separator=" ")


def clean_signature(raw: str, qualifier: str = DEFAULT_QUALIFIER) -> str:
    """Normalize signature spacing and prepend ``qualifier``.

    Every ``(`` gets one space on each side and every ``)`` one space before
    it. All other whitespace collapses to single spaces.

    Args:
        raw: Captured signature text.
        qualifier: Leading token of the prototype.

    Returns:
        Cleaned prototype, e.g. ``extern int foo ( int a ) ;``.
    """
    tokens = [qualifier]
    for word in raw.split():
        tokens.append(word.replace("(", " ( ").replace(")", " )"))
    return " ".join(join_text(tokens, separator=" ").split())


def is_exported(
    prototype: str,
    rejected: frozenset[str] = DEFAULT_REJECTED_QUALIFIERS,
) -> bool:
    """Check whether a cleaned prototype names a callable external function.

    The qualifier is the first word, so a storage class written in the
    source shows up as the second word.
    """
    words = prototype.split()
    return len(words) < 2 or words[1] not in rejected


def apply_prestring(prototype: str, prestring: str | None) -> str:
    """Place ``prestring`` before the prototype, separated by whitespace."""
    if not prestring:
        return prototype
    if prestring[-1].isspace():
        return f"{prestring}{prototype}"
    return f"{prestring} {prototype}"
