"""Code-set comparison.

Components:
- SignatureBuilder / SignatureBuckets: group codes by containing-file set
- ReportFormatter: deterministic plain-text report
- CodeSetComparator: the whole pipeline over already-read lines
"""

from .comparator import CodeSetComparator, ComparisonResult, ensure_sufficient_input
from .report import ReportFormatter, group_by_file, numeric_key, sort_codes
from .signatures import Signature, SignatureBuckets, SignatureBuilder

__all__ = [
    "CodeSetComparator",
    "ComparisonResult",
    "ensure_sufficient_input",
    "ReportFormatter",
    "group_by_file",
    "numeric_key",
    "sort_codes",
    "Signature",
    "SignatureBuckets",
    "SignatureBuilder",
]
