# Copyright 2026 Zsolt Kulcsar and Contributors. Licensed under the EUPL-1.2 or later
"""Run the C preprocessor over a source file."""

import logging
import subprocess
from pathlib import Path

from protoscan.config import PreprocessorConfig

logger = logging.getLogger(__name__)


class PreprocessError(RuntimeError):
    """Represent a failed preprocessor invocation."""


def build_command(path: Path, config: PreprocessorConfig) -> list[str]:
    """Return the argument vector that preprocesses ``path``."""
    return [config.command, *config.args, str(path)]


def preprocess(path: Path, config: PreprocessorConfig | None = None) -> str:
    """Preprocess one C file and return the output text.

    Args:
        path: C source file.
        config: Preprocessor command; defaults to ``cpp -ansi``.

    Returns:
        Preprocessor standard output.

    Raises:
        PreprocessError: If the executable is missing or exits non-zero.
    """
    config = config or PreprocessorConfig()
    command = build_command(path, config)
    try:
        completed = subprocess.run(
            command,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            check=False,
        )
    except OSError as exc:
        logger.warning(f"Preprocessor could not start (command={command} error={exc})")
        raise PreprocessError(f"cannot run {config.command}: {exc}") from exc

    if completed.returncode != 0:
        stderr_text = completed.stderr.strip()
        logger.warning(
            f"Preprocessor failed (path={path} returncode={completed.returncode} "
            f"stderr={stderr_text})"
        )
        raise PreprocessError(
            f"{config.command} exited with status {completed.returncode}: {stderr_text}"
        )
    return completed.stdout
