"""
Codesets type definitions.

This module exports the data types and errors shared by every stage of the
comparison pipeline.
"""

# Core types
from .core import (
    CodeOrder,
    FileCodeSet,
    InvalidRangeReason,
    InvalidRangeRecord,
    LineContext,
    ParsedLine,
    normalize_code,
)

# Error types
from .errors import (
    CodesetsError,
    ConfigurationError,
    ErrorCode,
    ErrorContext,
    ErrorSeverity,
    FileReadError,
    InsufficientInputError,
    RecoveryAction,
    ReportWriteError,
    ResourceError,
)

__all__ = [
    # Core types
    "CodeOrder",
    "FileCodeSet",
    "InvalidRangeReason",
    "InvalidRangeRecord",
    "LineContext",
    "ParsedLine",
    "normalize_code",
    # Error types
    "ErrorCode",
    "ErrorSeverity",
    "RecoveryAction",
    "ErrorContext",
    "CodesetsError",
    "ConfigurationError",
    "InsufficientInputError",
    "ResourceError",
    "FileReadError",
    "ReportWriteError",
]
