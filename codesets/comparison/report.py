"""Plain-text report rendering.

Layout:
- header listing every compared file
- invalid range diagnostics grouped by file (only when there are any)
- one section per signature, most files first, then by joined file names
"""

from __future__ import annotations

from typing import Callable, Iterable, Sequence

from codesets.comparison.signatures import Signature, SignatureBuckets
from codesets.types import CodeOrder, InvalidRangeRecord

REPORT_TITLE = "Code comparison report"
INDENT = "  "


def lexical_key(code: str) -> str:
    return code


def numeric_key(code: str) -> tuple[int, str, int, str]:
    """Order digit strings by value without int(), then by width.

    Leading zeros are ignored for the value, so "7" < "10" and "007" sorts
    right after "7".
    """
    significant = code.lstrip("0")
    return (len(significant), significant, len(code), code)


CODE_SORT_KEYS: dict[CodeOrder, Callable[[str], object]] = {
    CodeOrder.LEXICAL: lexical_key,
    CodeOrder.NUMERIC: numeric_key,
}


def sort_codes(codes: Iterable[str], order: CodeOrder = CodeOrder.LEXICAL) -> list[str]:
    """Sort codes for display."""
    return sorted(codes, key=CODE_SORT_KEYS[order])


def group_by_file(records: Iterable[InvalidRangeRecord]) -> dict[str, list[InvalidRangeRecord]]:
    """Group records by file, files in order of first appearance."""
    grouped: dict[str, list[InvalidRangeRecord]] = {}
    for record in records:
        grouped.setdefault(record.file_name, []).append(record)
    return grouped


class ReportFormatter:
    """Renders signature buckets and diagnostics into report text."""

    def __init__(self, code_order: CodeOrder = CodeOrder.LEXICAL) -> None:
        self.code_order = code_order

    def format(
        self,
        buckets: SignatureBuckets,
        file_names: Sequence[str],
        invalid_ranges: Sequence[InvalidRangeRecord] = (),
    ) -> str:
        """Render the full report.

        Args:
            buckets: Codes grouped by signature.
            file_names: Every compared file, including files without codes.
            invalid_ranges: Malformed range records in encounter order.

        Returns:
            Report text ending with a newline.
        """
        all_names = sorted(file_names)
        lines: list[str] = []
        lines.extend(self._format_header(all_names))

        if invalid_ranges:
            lines.append("")
            lines.extend(self._format_invalid_ranges(invalid_ranges))

        for signature, codes in buckets.ordered():
            if not codes:
                continue
            lines.append("")
            lines.append(self.section_title(buckets, signature, len(all_names), len(codes)))
            lines.extend(f"{INDENT}{code}" for code in sort_codes(codes, self.code_order))

        return "\n".join(lines) + "\n"

    def section_title(
        self,
        buckets: SignatureBuckets,
        signature: Signature,
        total_files: int,
        code_count: int,
    ) -> str:
        """Header line for one signature section."""
        names = buckets.names(signature)
        if len(names) == total_files:
            return f"Codes common to ALL files ({code_count}):"
        if len(names) == 1:
            return f"Codes unique to file '{names[0]}' ({code_count}):"
        return f"Codes common to {len(names)} files ({', '.join(names)}) ({code_count}):"

    def _format_header(self, file_names: Sequence[str]) -> list[str]:
        lines = [
            REPORT_TITLE,
            "=" * len(REPORT_TITLE),
            f"Files compared ({len(file_names)}):",
        ]
        lines.extend(f"{INDENT}{name}" for name in file_names)
        return lines

    def _format_invalid_ranges(self, records: Sequence[InvalidRangeRecord]) -> list[str]:
        lines = [f"Invalid ranges ({len(records)}):"]
        for file_name, file_records in group_by_file(records).items():
            lines.append(f"{INDENT}{file_name}:")
            for record in file_records:
                lines.append(
                    f"{INDENT * 2}line {record.line_number}: '{record.range_text}' "
                    f"({record.reason}) in: {record.line.rstrip()}"
                )
        return lines
