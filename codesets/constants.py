"""Shared constants for Codesets.

Centralizes input discovery defaults, the reserved report file name and the
comparison size envelope.
"""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(timezone.utc)


# Extension of input files picked up from the input directory.
DEFAULT_EXTENSION: str = ".txt"

# Report file written into the input directory. Always excluded from input.
DEFAULT_REPORT_NAME: str = "comparison_report.txt"

DEFAULT_ENCODING: str = "utf-8"

# Signature building scans every file for every code, and the number of
# distinct signatures is bounded by 2**n - 1. Above this many files a warning
# is logged but processing continues.
FILE_WARNING_THRESHOLD: int = 10

# Comparison needs at least this many files that yield codes.
MIN_PARTICIPATING_FILES: int = 2

COMMENT_PREFIX: str = "#"

# Range delimiters: "S-E" and the alternate "S|E" dialect.
RANGE_DELIMITERS: tuple[str, ...] = ("-", "|")

# Widest range a single match may expand to. Wider ranges are recorded as
# invalid instead of being expanded.
MAX_RANGE_SPAN: int = 1_000_000
