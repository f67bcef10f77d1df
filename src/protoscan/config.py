# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Configuration values for prototype extraction."""

from dataclasses import dataclass

DEFAULT_QUALIFIER: str = "extern"
DEFAULT_REJECTED_QUALIFIERS: frozenset[str] = frozenset({"static", "extern", "typedef"})
DEFAULT_CPP_COMMAND: str = "cpp"
DEFAULT_CPP_ARGS: tuple[str, ...] = ("-ansi",)


@dataclass(frozen=True)
class ExtractionConfig:
    """Describe how extracted prototypes are written.

    Attributes:
        prestring: Optional text placed before every prototype, for example
            an export annotation such as ``LEPT_DLL``.
        qualifier: Token that starts every cleaned prototype.
        rejected_qualifiers: Storage-class words that, found right after the
            qualifier, mark a definition that is not externally callable.
    """

    prestring: str | None = None
    qualifier: str = DEFAULT_QUALIFIER
    rejected_qualifiers: frozenset[str] = DEFAULT_REJECTED_QUALIFIERS


@dataclass(frozen=True)
class PreprocessorConfig:
    """Describe the C preprocessor invocation.

    Attributes:
        command: Preprocessor executable.
        args: Arguments placed before the input path.
    """

    command: str = DEFAULT_CPP_COMMAND
    args: tuple[str, ...] = DEFAULT_CPP_ARGS
