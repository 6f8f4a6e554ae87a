"""
Phase 3 Tests: Comparator pipeline

End-to-end over already-read lines: extraction, the insufficient input
precondition, signature buckets and rendering.
"""

import pytest

from codesets.comparison import CodeSetComparator, ensure_sufficient_input
from codesets.config import ComparisonConfig
from codesets.types import CodeOrder, FileCodeSet, InsufficientInputError, InvalidRangeReason


def grouped(buckets):
    return {buckets.names(signature): codes for signature, codes in buckets.items()}


class TestCompare:
    def test_three_file_scenario(self, three_file_inputs):
        result = CodeSetComparator().compare(three_file_inputs)
        assert result.file_names == ("fileA", "fileB", "fileC")
        assert result.file_code_sets["fileA"].codes == frozenset({"100", "101", "102", "200"})
        assert grouped(result.buckets) == {
            ("fileA", "fileB", "fileC"): frozenset({"100"}),
            ("fileA", "fileB"): frozenset({"101"}),
            ("fileA",): frozenset({"102", "200"}),
            ("fileB",): frozenset({"300"}),
            ("fileC",): frozenset({"400"}),
        }
        assert result.total_codes == 6
        assert result.invalid_ranges == []

    def test_render_order(self, three_file_inputs):
        comparator = CodeSetComparator()
        text = comparator.render(comparator.compare(three_file_inputs))
        titles = [line for line in text.splitlines() if line.startswith("Codes ")]
        assert titles == [
            "Codes common to ALL files (1):",
            "Codes common to 2 files (fileA, fileB) (1):",
            "Codes unique to file 'fileA' (2):",
            "Codes unique to file 'fileB' (1):",
            "Codes unique to file 'fileC' (1):",
        ]

    def test_malformed_range_reported_and_excluded(self, three_file_inputs):
        three_file_inputs["fileB"].append("10-5")
        comparator = CodeSetComparator()
        result = comparator.compare(three_file_inputs)

        assert len(result.invalid_ranges) == 1
        record = result.invalid_ranges[0]
        assert record.reason == InvalidRangeReason.START_GREATER_THAN_END
        assert record.range_text == "10-5"
        assert record.file_name == "fileB"
        assert record.line_number == 4
        assert not {"5", "6", "10"} & result.buckets.all_codes()
        assert result.file_code_sets["fileB"].codes == frozenset({"100", "101", "300"})
        assert "Invalid ranges (1):" in comparator.render(result)

    def test_invalid_ranges_keep_input_then_line_order(self):
        inputs = {"b": ["1", "9-2"], "a": ["1", "8-1", "7-1"]}
        result = CodeSetComparator().compare(inputs)
        assert [(r.file_name, r.line_number) for r in result.invalid_ranges] == [
            ("b", 2),
            ("a", 2),
            ("a", 3),
        ]

    def test_logs_invalid_range_summary(self, log_messages):
        CodeSetComparator().compare({"a": ["1", "5-1"], "b": ["1"]})
        assert any("1 invalid ranges" in m for m in log_messages)

    def test_file_without_codes_still_compared(self):
        result = CodeSetComparator().compare({"a": ["1"], "b": ["1"], "c": ["# none"]})
        assert result.file_names == ("a", "b", "c")
        assert grouped(result.buckets) == {("a", "b"): frozenset({"1"})}

    def test_config_code_order_used_for_render_and_dict(self):
        comparator = CodeSetComparator(ComparisonConfig(code_order=CodeOrder.NUMERIC))
        result = comparator.compare({"a": ["9 10"], "b": ["1"]})
        assert result.code_order == CodeOrder.NUMERIC
        assert result.to_dict()["signatures"][0]["codes"] == ["9", "10"]
        assert "  9\n  10\n" in comparator.render(result)

    def test_default_code_order_is_lexical(self):
        result = CodeSetComparator().compare({"a": ["9 10"], "b": ["1"]})
        assert result.to_dict()["signatures"][0]["codes"] == ["10", "9"]

    def test_max_range_span_from_config(self):
        comparator = CodeSetComparator(ComparisonConfig(max_range_span=3))
        result = comparator.compare({"a": ["1 10-12 20-30"], "b": ["1"]})
        assert result.file_code_sets["a"].codes == frozenset({"1", "10", "11", "12"})
        [record] = result.invalid_ranges
        assert record.reason == InvalidRangeReason.RANGE_TOO_WIDE
        assert (record.start, record.end) == (20, 30)
        assert "(range-too-wide)" in comparator.render(result)

    def test_to_dict(self, three_file_inputs):
        data = CodeSetComparator().compare(three_file_inputs).to_dict()
        assert data["files"][0] == {"name": "fileA", "code_count": 4}
        assert data["total_codes"] == 6
        assert [s["files"] for s in data["signatures"]][:2] == [
            ["fileA", "fileB", "fileC"],
            ["fileA", "fileB"],
        ]
        assert data["invalid_ranges"] == []


class TestInsufficientInput:
    def test_single_file(self):
        with pytest.raises(InsufficientInputError) as exc_info:
            CodeSetComparator().compare({"only": ["100", "101"]})
        assert exc_info.value.participating == ["only"]

    def test_only_one_file_has_codes(self):
        with pytest.raises(InsufficientInputError):
            CodeSetComparator().compare({"a": ["100"], "b": ["# empty"], "c": ["9-1"]})

    def test_no_files(self):
        with pytest.raises(InsufficientInputError):
            CodeSetComparator().compare({})

    def test_two_files_is_enough(self):
        ensure_sufficient_input({
            "a": FileCodeSet("a", frozenset({"1"})),
            "b": FileCodeSet("b", frozenset({"2"})),
        })
