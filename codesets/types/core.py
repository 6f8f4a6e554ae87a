"""
Core types for code-set comparison.

These are the foundational data structures passed between the line parser,
the file extractor, the signature builder and the report formatter.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


def normalize_code(raw: str) -> str:
    """Normalize a code token: trimmed and case-folded."""
    return raw.strip().casefold()


class InvalidRangeReason(StrEnum):
    """Why a range match was rejected."""

    START_GREATER_THAN_END = "start-greater-than-end"
    PARSE_FAILURE = "parse-failure"
    RANGE_TOO_WIDE = "range-too-wide"


class CodeOrder(StrEnum):
    """How codes are ordered inside a report section."""

    LEXICAL = "lexical"
    NUMERIC = "numeric"


@dataclass(frozen=True)
class LineContext:
    """Provenance of a single input line."""

    file_name: str
    line_number: int

    def __post_init__(self) -> None:
        if self.line_number < 1:
            raise ValueError("line_number must be >= 1")


@dataclass(frozen=True)
class InvalidRangeRecord:
    """A malformed range occurrence, with enough context to find it again."""

    file_name: str
    line_number: int
    line: str
    range_text: str
    reason: InvalidRangeReason
    start: int | None = None
    end: int | None = None

    @property
    def location(self) -> str:
        """Get location string for display."""
        return f"{self.file_name}:{self.line_number}"

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "file_name": self.file_name,
            "line_number": self.line_number,
            "line": self.line,
            "range": self.range_text,
            "start": self.start,
            "end": self.end,
            "reason": str(self.reason),
        }


@dataclass(frozen=True)
class ParsedLine:
    """Codes and invalid ranges found on one line."""

    codes: tuple[str, ...] = ()
    invalid_ranges: tuple[InvalidRangeRecord, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.codes and not self.invalid_ranges


@dataclass(frozen=True)
class FileCodeSet:
    """The unique codes found in one file. Membership only, no order."""

    file_name: str
    codes: frozenset[str] = field(default_factory=frozenset)

    def __contains__(self, code: object) -> bool:
        return code in self.codes

    def __len__(self) -> int:
        return len(self.codes)

    @property
    def is_empty(self) -> bool:
        return not self.codes
