"""Code parsing.

Components:
- LineParser: codes and invalid ranges from one line
- FileCodeExtractor: a FileCodeSet from all lines of one file

Usage:
    from codesets.parsing import FileCodeExtractor

    extraction = FileCodeExtractor().extract(lines, "fileA.txt")
    extraction.code_set.codes
"""

from .extractor import FileCodeExtractor, FileExtraction
from .line_parser import LineParser, build_code_pattern, expand_range, is_skippable

__all__ = [
    "FileCodeExtractor",
    "FileExtraction",
    "LineParser",
    "build_code_pattern",
    "expand_range",
    "is_skippable",
]
