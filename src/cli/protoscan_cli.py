# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Command line interface for prototype extraction."""

import argparse
import json
import logging
import sys
from dataclasses import asdict
from pathlib import Path
from typing import TextIO

from rich.console import Console
from rich.logging import RichHandler
from rich.style import Style
from rich.table import Table
from rich.text import Text

from protoscan.config import DEFAULT_CPP_ARGS, ExtractionConfig, PreprocessorConfig
from protoscan.extractor import PrototypeExtractor
from protoscan.header import guard_for, render_header
from protoscan.model import ExtractionError, ExtractionResult
from protoscan.preprocessor import PreprocessError, preprocess
from protoscan.sources import DEFAULT_PATTERNS, discover_sources

logger = logging.getLogger(__name__)

LOG_LEVELS: tuple[str, ...] = ("DEBUG", "INFO", "WARNING", "ERROR")


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure application logging with Rich handler.

    Args:
        level: Logging severity threshold.
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the top-level CLI parser.

    Returns:
        Configured argument parser instance.
    """
    parser = argparse.ArgumentParser(prog="protoscan")
    parser.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default="WARNING",
        help="Logging severity threshold.",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)
    extract_parser = subparsers.add_parser("extract")
    extract_parser.add_argument(
        "--path",
        required=True,
        help="Preprocessed file, C source file, or directory of sources.",
    )
    extract_parser.add_argument(
        "--prestring",
        default=None,
        help="Text placed before every prototype, e.g. an export annotation.",
    )
    extract_parser.add_argument(
        "--preprocess",
        action="store_true",
        help="Run each input through the C preprocessor first.",
    )
    extract_parser.add_argument(
        "--cpp", default="cpp", help="Preprocessor executable."
    )
    extract_parser.add_argument(
        "--cpp-arg",
        action="append",
        default=None,
        help="Preprocessor argument; repeatable. Defaults to -ansi.",
    )
    extract_parser.add_argument(
        "--pattern",
        action="append",
        default=None,
        help="File glob used inside directories; repeatable. Defaults to *.c.",
    )
    extract_parser.add_argument(
        "--format",
        choices=("text", "json", "table", "header"),
        default="text",
        help="Output format.",
    )
    extract_parser.add_argument(
        "--guard",
        required=False,
        help="Include guard for --format header.",
    )
    extract_parser.add_argument(
        "--output",
        required=False,
        help="Optional output file path for the rendered payload.",
    )
    return parser


def run(argv: list[str], stdout: TextIO, stderr: TextIO) -> int:
    """Run CLI command.

    Args:
        argv: CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code: 0 on success, 1 when any input was partial or failed,
        2 on invalid usage.
    """
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit:
        logger.warning(f"Argument parsing failed (argv={argv})")
        return 2
    logging.getLogger().setLevel(args.log_level)
    if args.command == "extract":
        return _run_extract(args=args, stdout=stdout, stderr=stderr)

    logger.warning(f"Unsupported command (command={args.command})")
    stderr.write(f"Unsupported command: {args.command}\n")
    return 2


def _run_extract(args: argparse.Namespace, stdout: TextIO, stderr: TextIO) -> int:
    """Run extract command.

    Args:
        args: Parsed CLI arguments.
        stdout: Standard output stream.
        stderr: Standard error stream.

    Returns:
        Exit code.
    """
    root_path = Path(args.path)
    if not root_path.exists():
        logger.warning(f"Path does not exist (path={root_path})")
        stderr.write(f"Path does not exist: {root_path}\n")
        return 2

    patterns = tuple(args.pattern) if args.pattern else DEFAULT_PATTERNS
    try:
        sources = discover_sources(root_path, patterns=patterns)
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning(f"Source discovery failed (path={root_path} error={exc})")
        stderr.write(f"Source discovery failed: {exc}\n")
        return 2

    extractor = PrototypeExtractor(ExtractionConfig(prestring=args.prestring))
    cpp_config = PreprocessorConfig(
        command=args.cpp,
        args=tuple(args.cpp_arg) if args.cpp_arg is not None else DEFAULT_CPP_ARGS,
    )
    results: list[ExtractionResult] = []
    errors: list[ExtractionError] = []
    for source in sources:
        try:
            if args.preprocess:
                text = preprocess(source, cpp_config)
            else:
                text = source.read_text(encoding="utf-8", errors="replace")
        except (OSError, PreprocessError) as exc:
            logger.warning(f"Skipping input (path={source} error={exc})")
            errors.append(ExtractionError(file_path=str(source), message=str(exc)))
            continue
        results.append(extractor.extract(text, file_path=str(source)))

    output_path = Path(args.output) if args.output else None
    try:
        _write_output(
            results=results,
            errors=errors,
            output_format=args.format,
            guard=args.guard or guard_for(output_path),
            output_path=output_path,
            stdout=stdout,
        )
    except OSError as exc:
        logger.warning(
            f"Failed to write output file (output_path={args.output} error={exc})"
        )
        stderr.write(f"Failed to write output file: {args.output}\n")
        return 2

    incomplete = [result for result in results if not result.complete]
    _write_summary(results=results, errors=errors, stderr=stderr)
    logger.info(
        f"Extraction completed (path={root_path} files={len(results)} "
        f"incomplete={len(incomplete)} errors={len(errors)})"
    )
    if incomplete or errors:
        return 1
    return 0


def _write_output(
    results: list[ExtractionResult],
    errors: list[ExtractionError],
    output_format: str,
    guard: str,
    output_path: Path | None,
    stdout: TextIO,
) -> None:
    """Render results in the requested format.

    Raises:
        OSError: If directory creation or file writing fails.
    """
    if output_format == "table":
        if output_path is None:
            _write_table(results=results, stream=stdout)
            return
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with output_path.open("w", encoding="utf-8") as handle:
            _write_table(results=results, stream=handle)
        return
    if output_format == "json":
        payload = (
            json.dumps(_json_payload(results, errors), indent=2, sort_keys=True) + "\n"
        )
    elif output_format == "header":
        payload = render_header(results, guard=guard)
    else:
        payload = "".join(
            f"{prototype}\n" for result in results for prototype in result.prototypes
        )

    if output_path is not None:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(payload, encoding="utf-8")
        return
    console = Console(file=stdout, force_terminal=False, color_system="truecolor")
    console.print(
        payload,
        markup=False,
        highlight=False,
        emoji=False,
        soft_wrap=True,
        end="",
    )


def _json_payload(
    results: list[ExtractionResult], errors: list[ExtractionError]
) -> dict[str, object]:
    return {
        "results": [asdict(result) for result in results],
        "errors": [asdict(error) for error in errors],
    }


def _write_table(results: list[ExtractionResult], stream: TextIO) -> None:
    """Write one table of prototypes per input file.

    Args:
        results: Extraction results.
        stream: Target text stream.
    """
    console = Console(file=stream, force_terminal=False, color_system="truecolor")
    for result in results:
        status = "complete" if result.complete else "incomplete"
        console.rule(
            f"{result.file_path} ({status})",
            style=Style(color="cyan" if result.complete else "red"),
            characters="-",
        )
        table = Table(show_header=True, show_lines=False, expand=True)
        table.add_column("#", ratio=1, justify="right")
        table.add_column("prototype", ratio=12, overflow="fold")
        for number, prototype in enumerate(result.prototypes, start=1):
            table.add_row(str(number), Text(prototype))
        console.print(table)


def _write_summary(
    results: list[ExtractionResult],
    errors: list[ExtractionError],
    stderr: TextIO,
) -> None:
    """Write counts, partial inputs and failed inputs to stderr."""
    incomplete = [result for result in results if not result.complete]
    total = sum(result.count for result in results)
    for result in incomplete:
        stderr.write(f"incomplete: {result.file_path}: {result.error}\n")
    for error in errors:
        stderr.write(f"error: {error.file_path}: {error.message}\n")
    stderr.write(
        f"prototypes={total} files={len(results)} "
        f"incomplete={len(incomplete)} errors={len(errors)}\n"
    )


def main() -> None:
    """Run the CLI application and exit."""
    configure_logging()
    exit_code = run(sys.argv[1:], stdout=sys.stdout, stderr=sys.stderr)
    raise SystemExit(exit_code)


if __name__ == "__main__":
    main()
