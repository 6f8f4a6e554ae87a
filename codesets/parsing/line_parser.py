"""Line-level code parsing.

Extracts bare codes and inline ranges from one line of text. A range is
``S-E`` (or ``S|E`` in the alternate dialect) and expands to every integer
from S to E inclusive.
"""

from __future__ import annotations

import re
from typing import Iterator

from codesets.constants import COMMENT_PREFIX, MAX_RANGE_SPAN, RANGE_DELIMITERS
from codesets.types import (
    InvalidRangeReason,
    InvalidRangeRecord,
    LineContext,
    ParsedLine,
    normalize_code,
)


def build_code_pattern(delimiters: tuple[str, ...] = RANGE_DELIMITERS) -> re.Pattern[str]:
    """Compile the code/range pattern for the given range delimiters."""
    delimiter_class = "".join(re.escape(d) for d in delimiters)
    return re.compile(rf"([0-9]+)(?:[{delimiter_class}]([0-9]+))?")


def is_skippable(line: str) -> bool:
    """Blank lines and ``#`` comment lines carry no codes."""
    stripped = line.strip()
    return not stripped or stripped.startswith(COMMENT_PREFIX)


class LineParser:
    """Parses codes out of single lines.

    Each match on a line is evaluated on its own, so a malformed range is
    recorded and skipped without affecting the other matches on that line.
    Ranges covering more than ``max_range_span`` values are rejected as
    ``range-too-wide`` rather than expanded.

    Usage:
        parser = LineParser()
        parsed = parser.parse("100 105-107", LineContext("a.txt", 1))
        parsed.codes  # ("100", "105", "106", "107")
    """

    def __init__(
        self,
        delimiters: tuple[str, ...] = RANGE_DELIMITERS,
        max_range_span: int = MAX_RANGE_SPAN,
    ) -> None:
        if not delimiters:
            raise ValueError("at least one range delimiter is required")
        if max_range_span < 1:
            raise ValueError("max_range_span must be >= 1")
        self._pattern = build_code_pattern(delimiters)
        self._max_range_span = max_range_span

    def parse(self, line: str, context: LineContext) -> ParsedLine:
        """Extract codes and invalid ranges from one line.

        Args:
            line: Raw line text.
            context: File name and 1-based line number for diagnostics.

        Returns:
            ParsedLine with codes in match order and any invalid ranges.
        """
        if is_skippable(line):
            return ParsedLine()

        codes: list[str] = []
        invalid: list[InvalidRangeRecord] = []

        for match in self._pattern.finditer(line):
            start_text, end_text = match.group(1), match.group(2)
            if end_text is None:
                codes.append(normalize_code(start_text))
                continue

            bounds = self._parse_range(match.group(0), start_text, end_text, line, context)
            if isinstance(bounds, InvalidRangeRecord):
                invalid.append(bounds)
                continue
            codes.extend(expand_range(*bounds))

        return ParsedLine(codes=tuple(codes), invalid_ranges=tuple(invalid))

    def _parse_range(
        self,
        range_text: str,
        start_text: str,
        end_text: str,
        line: str,
        context: LineContext,
    ) -> tuple[int, int] | InvalidRangeRecord:
        """Return the range bounds, or an InvalidRangeRecord if it cannot be expanded."""

        def reject(
            reason: InvalidRangeReason, start: int | None, end: int | None
        ) -> InvalidRangeRecord:
            return InvalidRangeRecord(
                file_name=context.file_name,
                line_number=context.line_number,
                line=line,
                range_text=range_text,
                reason=reason,
                start=start,
                end=end,
            )

        # int() only fails past the interpreter's digit limit; keep whichever
        # bound did parse.
        start = _parse_bound(start_text)
        end = _parse_bound(end_text)
        if start is None or end is None:
            return reject(InvalidRangeReason.PARSE_FAILURE, start, end)

        if start > end:
            return reject(InvalidRangeReason.START_GREATER_THAN_END, start, end)
        if end - start + 1 > self._max_range_span:
            return reject(InvalidRangeReason.RANGE_TOO_WIDE, start, end)
        return start, end


def _parse_bound(text: str) -> int | None:
    try:
        return int(text)
    except ValueError:
        return None


def expand_range(start: int, end: int) -> Iterator[str]:
    """Yield every integer in [start, end] as a decimal string."""
    for value in range(start, end + 1):
        yield str(value)
