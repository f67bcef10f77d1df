# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Domain models for extraction results."""

from dataclasses import dataclass

from protoscan.lines import join_text


@dataclass(frozen=True)
class ExtractionResult:
    """Represent the prototypes extracted from one input.

    Attributes:
        file_path: Input the prototypes were read from.
        prototypes: Cleaned prototypes in source order.
        complete: ``False`` when parsing stopped on unbalanced braces; the
            prototypes found before that point are still listed.
        error: Reason the parse stopped early, if it did.
    """

    file_path: str
    prototypes: tuple[str, ...]
    complete: bool = True
    error: str | None = None

    @property
    def count(self) -> int:
        return len(self.prototypes)

    def to_text(self) -> str:
        """Join prototypes with newlines."""
        return join_text(self.prototypes, separator="\n")


@dataclass(frozen=True)
class ExtractionError:
    """Represent an input that could not be read or preprocessed."""

    file_path: str
    message: str
