"""Comparison pipeline.

The CodeSetComparator is the single entry point for comparing files:

    raw lines -> FileCodeExtractor -> FileCodeSets -> SignatureBuilder
              -> SignatureBuckets -> ReportFormatter -> report text

It performs no I/O. Callers hand in already-read lines keyed by file name
and get back a ComparisonResult; storage.files covers reading and writing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from codesets.comparison.report import ReportFormatter, sort_codes
from codesets.comparison.signatures import SignatureBuckets, SignatureBuilder
from codesets.config import ComparisonConfig
from codesets.constants import MIN_PARTICIPATING_FILES
from codesets.parsing import FileCodeExtractor, LineParser
from codesets.types import CodeOrder, FileCodeSet, InsufficientInputError, InvalidRangeRecord
from codesets.utils.logger import logger


@dataclass
class ComparisonResult:
    """Everything produced by one comparison run."""

    file_code_sets: dict[str, FileCodeSet]
    buckets: SignatureBuckets
    invalid_ranges: list[InvalidRangeRecord] = field(default_factory=list)
    code_order: CodeOrder = CodeOrder.LEXICAL

    @property
    def file_names(self) -> tuple[str, ...]:
        return self.buckets.file_names

    @property
    def total_codes(self) -> int:
        return len(self.buckets.all_codes())

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization, in the same order as the report."""
        return {
            "files": [
                {"name": name, "code_count": len(self.file_code_sets[name])}
                for name in self.file_names
            ],
            "total_codes": self.total_codes,
            "signatures": [
                {
                    "files": list(self.buckets.names(signature)),
                    "codes": sort_codes(codes, self.code_order),
                }
                for signature, codes in self.buckets.ordered()
            ],
            "invalid_ranges": [r.to_dict() for r in self.invalid_ranges],
        }


class CodeSetComparator:
    """Runs extraction, signature building and report rendering.

    Usage:
        comparator = CodeSetComparator()
        result = comparator.compare({"a.txt": lines_a, "b.txt": lines_b})
        text = comparator.render(result)
    """

    def __init__(
        self,
        config: ComparisonConfig | None = None,
        extractor: FileCodeExtractor | None = None,
    ) -> None:
        self.config = config or ComparisonConfig()
        self._extractor = extractor or FileCodeExtractor(
            LineParser(max_range_span=self.config.max_range_span)
        )
        self._builder = SignatureBuilder(self.config.file_warning_threshold)
        self._formatter = ReportFormatter(self.config.code_order)

    def extract_all(
        self,
        inputs: Mapping[str, Iterable[str]],
    ) -> tuple[dict[str, FileCodeSet], list[InvalidRangeRecord]]:
        """Extract every file independently.

        Invalid ranges are concatenated in input order, then line order.
        """
        code_sets: dict[str, FileCodeSet] = {}
        invalid: list[InvalidRangeRecord] = []
        for file_name, lines in inputs.items():
            extraction = self._extractor.extract(lines, file_name)
            code_sets[file_name] = extraction.code_set
            invalid.extend(extraction.invalid_ranges)

        if invalid:
            logger.warning(f"Found {len(invalid)} invalid ranges; they are excluded from comparison")
        return code_sets, invalid

    def compare(self, inputs: Mapping[str, Iterable[str]]) -> ComparisonResult:
        """Compare the code sets of all inputs.

        Args:
            inputs: File name to the file's raw lines.

        Returns:
            ComparisonResult with per-file sets, buckets and invalid ranges.

        Raises:
            InsufficientInputError: Fewer than two files yielded any codes.
        """
        code_sets, invalid = self.extract_all(inputs)
        ensure_sufficient_input(code_sets)
        buckets = self._builder.build(code_sets)
        return ComparisonResult(
            file_code_sets=code_sets,
            buckets=buckets,
            invalid_ranges=invalid,
            code_order=self.config.code_order,
        )

    def render(self, result: ComparisonResult) -> str:
        """Render a ComparisonResult as report text."""
        return self._formatter.format(result.buckets, result.file_names, result.invalid_ranges)


def ensure_sufficient_input(code_sets: Mapping[str, FileCodeSet]) -> None:
    """Raise InsufficientInputError unless at least two files have codes."""
    participating = sorted(name for name, code_set in code_sets.items() if not code_set.is_empty)
    if len(participating) < MIN_PARTICIPATING_FILES:
        raise InsufficientInputError(
            f"{len(participating)} of {len(code_sets)} files contain codes; "
            f"at least {MIN_PARTICIPATING_FILES} are required",
            participating=participating,
        )
