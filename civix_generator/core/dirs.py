"""Idempotent directory creation for generated artifacts."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from .errors import FilesystemError
from .report import GenerationReport


def ensure_dirs(dirs: Iterable[Path], report: GenerationReport) -> list[Path]:
    """Create missing directories (with ancestors) and report each new one.

    Directories that already exist are left alone and produce no report line.

    Args:
        dirs: Directories that must exist afterwards
        report: Report that receives one line per created directory

    Returns:
        The directories that were actually created by this call

    Raises:
        FilesystemError: If the OS refuses to create a directory
    """
    created: list[Path] = []
    for directory in dirs:
        if directory.is_dir():
            continue
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise FilesystemError(directory, exc) from exc
        report.info(f"Created directory {directory}")
        created.append(directory)
    return created
