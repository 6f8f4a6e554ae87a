"""
Codesets - multi-file numeric code comparison.

Reads a directory of plain-text code lists and reports, for every code seen
anywhere, exactly which files contain it:
- Bare codes and inline ranges (``100-105`` or ``100|105``)
- Grouping of codes by their containing-file set ("signature")
- Deterministic report ordering by file count, then file names
- Malformed range diagnostics with file and line provenance
"""

__version__ = "0.1.0"
