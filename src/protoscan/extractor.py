# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Extract function prototypes from preprocessed C source."""

import logging
from pathlib import Path

from protoscan.classifier import CandidateSignature, SignatureClassifier
from protoscan.config import ExtractionConfig
from protoscan.lines import SourceLines
from protoscan.locator import UnbalancedBraceError, find_char, find_matching_brace
from protoscan.model import ExtractionResult
from protoscan.signature import (
    apply_prestring,
    capture_signature,
    clean_signature,
    is_exported,
)

logger = logging.getLogger(__name__)


class PrototypeExtractor:
    """Collect prototypes for the function definitions in a cpp output."""

    def __init__(self, config: ExtractionConfig | None = None) -> None:
        """Initialize extractor.

        Args:
            config: Output options; defaults to no prestring and ``extern``.
        """
        self._config = config or ExtractionConfig()

    def extract(self, text: str, file_path: str = "<string>") -> ExtractionResult:
        """Extract prototypes from preprocessed source text.

        Definitions whose source already carries ``static``, ``extern`` or
        ``typedef`` are left out. Unbalanced braces stop the scan; what was
        collected until then is returned with ``complete=False``.

        Args:
            text: Output of the C preprocessor.
            file_path: Label recorded in the result.

        Returns:
            Extraction result for ``text``.
        """
        lines = SourceLines.from_text(text)
        classifier = SignatureClassifier(lines)
        prototypes: list[str] = []
        cursor = 0
        try:
            while True:
                candidate = classifier.next_signature(cursor)
                if candidate is None:
                    break
                prototype = self._build_prototype(lines, candidate)
                if prototype is not None:
                    prototypes.append(prototype)
                cursor = self._skip_function_body(lines, candidate)
        except UnbalancedBraceError as exc:
            logger.warning(
                f"Parse stopped early (file_path={file_path} "
                f"prototypes={len(prototypes)} error={exc})"
            )
            return ExtractionResult(
                file_path=file_path,
                prototypes=tuple(prototypes),
                complete=False,
                error=str(exc),
            )

        logger.info(
            f"Prototype extraction completed (file_path={file_path} "
            f"prototypes={len(prototypes)})"
        )
        return ExtractionResult(file_path=file_path, prototypes=tuple(prototypes))

    def extract_file(self, path: Path) -> ExtractionResult:
        """Read ``path`` and extract its prototypes.

        Raises:
            OSError: If the file cannot be read.
        """
        text = path.read_text(encoding="utf-8", errors="replace")
        return self.extract(text, file_path=str(path))

    def _build_prototype(
        self, lines: SourceLines, candidate: CandidateSignature
    ) -> str | None:
        raw = capture_signature(lines, candidate)
        prototype = clean_signature(raw, qualifier=self._config.qualifier)
        if not is_exported(prototype, rejected=self._config.rejected_qualifiers):
            logger.debug(f"Skipping non-exported definition (prototype={prototype})")
            return None
        return apply_prestring(prototype, self._config.prestring)

    def _skip_function_body(
        self, lines: SourceLines, candidate: CandidateSignature
    ) -> int:
        """Return the line after the ``}`` that closes the function body."""
        body = find_char(
            lines,
            candidate.stop_line,
            "{",
            start_byte=candidate.close_paren_index + 1,
        )
        if not body.found:
            raise UnbalancedBraceError(
                f"function body not found after line {candidate.stop_line + 1}"
            )
        closing = find_matching_brace(
            lines, candidate.stop_line + body.line_delta, body.byte_offset
        )
        return closing.line + 1


def parse_for_protos(text: str, prestring: str | None = None) -> str:
    """Return the prototypes of ``text`` as newline-separated lines.

    Example:
        >>> parse_for_protos("int foo(int a)\\n{\\n    return a;\\n}\\n")
        'extern int foo ( int a ) ;'
    """
    extractor = PrototypeExtractor(ExtractionConfig(prestring=prestring))
    return extractor.extract(text).to_text()
