"""
Phase 1 Tests: Core Types

These tests verify the shared dataclasses:
- Normalization of codes
- Validation behavior
- Serialization to dict
"""

from dataclasses import FrozenInstanceError

import pytest

from codesets.types import (
    FileCodeSet,
    InvalidRangeReason,
    InvalidRangeRecord,
    LineContext,
    ParsedLine,
    normalize_code,
)


class TestNormalizeCode:
    """Tests for normalize_code."""

    def test_trims_whitespace(self):
        assert normalize_code("  100\t") == "100"

    def test_case_folds(self):
        assert normalize_code("AbC") == normalize_code("aBc")

    def test_keeps_leading_zeros(self):
        assert normalize_code("007") == "007"


class TestLineContext:
    """Tests for LineContext."""

    def test_creation(self):
        ctx = LineContext("a.txt", 3)
        assert ctx.file_name == "a.txt"
        assert ctx.line_number == 3

    def test_line_numbers_are_one_based(self):
        with pytest.raises(ValueError, match="line_number must be >= 1"):
            LineContext("a.txt", 0)


class TestInvalidRangeRecord:
    """Tests for InvalidRangeRecord."""

    def _record(self) -> InvalidRangeRecord:
        return InvalidRangeRecord(
            file_name="a.txt",
            line_number=4,
            line="10-5 legacy block",
            range_text="10-5",
            reason=InvalidRangeReason.START_GREATER_THAN_END,
            start=10,
            end=5,
        )

    def test_reason_values(self):
        assert InvalidRangeReason.START_GREATER_THAN_END == "start-greater-than-end"
        assert InvalidRangeReason.PARSE_FAILURE == "parse-failure"
        assert InvalidRangeReason.RANGE_TOO_WIDE == "range-too-wide"

    def test_location(self):
        assert self._record().location == "a.txt:4"

    def test_to_dict(self):
        assert self._record().to_dict() == {
            "file_name": "a.txt",
            "line_number": 4,
            "line": "10-5 legacy block",
            "range": "10-5",
            "start": 10,
            "end": 5,
            "reason": "start-greater-than-end",
        }

    def test_frozen(self):
        record = self._record()
        with pytest.raises(FrozenInstanceError):
            record.start = 1  # type: ignore[misc]


class TestFileCodeSet:
    """Tests for FileCodeSet."""

    def test_membership(self):
        code_set = FileCodeSet("a.txt", frozenset({"100", "101"}))
        assert "100" in code_set
        assert "102" not in code_set
        assert len(code_set) == 2

    def test_empty_by_default(self):
        code_set = FileCodeSet("empty.txt")
        assert code_set.is_empty
        assert len(code_set) == 0


class TestParsedLine:
    def test_default_is_empty(self):
        assert ParsedLine().is_empty

    def test_with_codes_not_empty(self):
        assert not ParsedLine(codes=("1",)).is_empty
