"""Per-file code extraction.

Runs the line parser over every line of one file and collects the file's
unique code set plus its invalid ranges in line order.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable

from codesets.parsing.line_parser import LineParser
from codesets.types import FileCodeSet, InvalidRangeRecord, LineContext
from codesets.utils.logger import logger


@dataclass(frozen=True)
class FileExtraction:
    """Result of extracting one file."""

    code_set: FileCodeSet
    invalid_ranges: tuple[InvalidRangeRecord, ...] = field(default_factory=tuple)
    lines_read: int = 0

    @property
    def file_name(self) -> str:
        return self.code_set.file_name

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "file_name": self.file_name,
            "code_count": len(self.code_set),
            "lines_read": self.lines_read,
            "invalid_ranges": [r.to_dict() for r in self.invalid_ranges],
        }


class FileCodeExtractor:
    """Builds a FileCodeSet from the raw lines of one file."""

    def __init__(self, parser: LineParser | None = None) -> None:
        self._parser = parser or LineParser()

    def extract(self, lines: Iterable[str], file_name: str) -> FileExtraction:
        """Parse every line of a file.

        Args:
            lines: Raw lines in file order, empty lines included.
            file_name: Identifier of the file, used in signatures and diagnostics.

        Returns:
            FileExtraction with the unique code set and invalid ranges.
            A file without codes yields an empty code set.
        """
        codes: set[str] = set()
        invalid: list[InvalidRangeRecord] = []
        line_count = 0

        for line_number, line in enumerate(lines, start=1):
            line_count = line_number
            parsed = self._parser.parse(line, LineContext(file_name, line_number))
            codes.update(parsed.codes)
            invalid.extend(parsed.invalid_ranges)

        logger.debug(
            f"Extracted {len(codes)} codes from {file_name} "
            f"({line_count} lines, {len(invalid)} invalid ranges)"
        )
        return FileExtraction(
            code_set=FileCodeSet(file_name=file_name, codes=frozenset(codes)),
            invalid_ranges=tuple(invalid),
            lines_read=line_count,
        )
