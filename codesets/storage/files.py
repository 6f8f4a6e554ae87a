"""File-system collaborators for the comparison pipeline.

Every function takes explicit paths; nothing here changes the working
directory. I/O failures are raised as ResourceError subclasses naming the
file and the underlying cause.
"""

from __future__ import annotations

import os
import tempfile
from dataclasses import dataclass
from pathlib import Path

from codesets.constants import DEFAULT_ENCODING, FILE_WARNING_THRESHOLD
from codesets.types import (
    ErrorCode,
    ErrorContext,
    FileReadError,
    RecoveryAction,
    ReportWriteError,
    ResourceError,
)
from codesets.utils.logger import logger


@dataclass(frozen=True)
class InputFile:
    """An input file: the name used in reports and its full path."""

    name: str
    path: Path


def list_input_files(
    directory: str | Path,
    extension: str,
    exclude: str | None = None,
    warning_threshold: int = FILE_WARNING_THRESHOLD,
) -> list[InputFile]:
    """List input files directly inside a directory.

    Args:
        directory: Directory to scan (not recursive).
        extension: File extension to keep, compared case-insensitively.
        exclude: File name to leave out, normally the report file.
        warning_threshold: Log a warning when more files than this are found.

    Returns:
        Input files sorted by name.

    Raises:
        ResourceError: The directory does not exist or cannot be listed.
    """
    base = Path(directory)
    if not base.is_dir():
        raise ResourceError(
            f"Input directory not found: {base}",
            user_message=f"Input directory '{base}' does not exist.",
            context=ErrorContext(operation="list", file_path=str(base), component="storage"),
            recovery_actions=[RecoveryAction(description="Pass an existing directory")],
            code=ErrorCode.DIRECTORY_NOT_FOUND,
        )

    suffix = extension.lower()
    excluded = exclude.lower() if exclude else None
    try:
        entries = sorted(base.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise ResourceError(
            f"Failed to list {base}: {e}",
            user_message=f"Could not list input directory '{base}'.",
            context=ErrorContext(operation="list", file_path=str(base), component="storage"),
            original_error=e,
            code=ErrorCode.DIRECTORY_NOT_FOUND,
        ) from e

    files = [
        InputFile(name=entry.name, path=entry)
        for entry in entries
        if entry.is_file()
        and entry.name.lower().endswith(suffix)
        and entry.name.lower() != excluded
    ]

    if len(files) > warning_threshold:
        logger.warning(
            f"Found {len(files)} input files in {base}; comparison cost grows quickly "
            f"beyond {warning_threshold} files"
        )
    logger.debug(f"Found {len(files)} '{extension}' files in {base}")
    return files


def read_lines(path: str | Path, encoding: str = DEFAULT_ENCODING) -> list[str]:
    """Read all lines of a file, line terminators removed, empty lines kept.

    Undecodable bytes are replaced rather than failing the run.

    Raises:
        FileReadError: The file could not be opened or read.
    """
    try:
        with open(path, encoding=encoding, errors="replace") as fh:
            return [line.rstrip("\n") for line in fh]
    except (OSError, LookupError) as e:
        raise FileReadError(str(path), e) from e


def load_inputs(files: list[InputFile], encoding: str = DEFAULT_ENCODING) -> dict[str, list[str]]:
    """Read every input file, keyed by file name."""
    return {f.name: read_lines(f.path, encoding) for f in files}


def write_report(path: str | Path, text: str, encoding: str = DEFAULT_ENCODING) -> Path:
    """Atomically replace a file's contents.

    The text goes to a temporary file in the same directory which is then
    renamed over the destination, so readers never see a partial report.

    Raises:
        ReportWriteError: Writing or renaming failed. The temporary file is
            removed and the destination is left untouched.
    """
    target = Path(path)
    tmp_name: str | None = None
    try:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{target.name}.", suffix=".tmp", dir=target.parent
        )
        with os.fdopen(fd, "w", encoding=encoding) as fh:
            fh.write(text)
        os.replace(tmp_name, target)
    except (OSError, LookupError, UnicodeEncodeError) as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise ReportWriteError(str(target), e) from e

    logger.debug(f"Wrote report to {target} ({len(text)} chars)")
    return target
