# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Public import surface for prototype extraction."""

from protoscan.config import ExtractionConfig, PreprocessorConfig
from protoscan.extractor import PrototypeExtractor, parse_for_protos
from protoscan.lines import SourceLines
from protoscan.locator import UnbalancedBraceError
from protoscan.model import ExtractionError, ExtractionResult
from protoscan.preprocessor import PreprocessError, preprocess

__all__ = [
    "ExtractionConfig",
    "ExtractionError",
    "ExtractionResult",
    "PreprocessError",
    "PreprocessorConfig",
    "PrototypeExtractor",
    "SourceLines",
    "UnbalancedBraceError",
    "parse_for_protos",
    "preprocess",
]
