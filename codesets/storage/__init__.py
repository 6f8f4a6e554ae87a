"""
Storage layer for Codesets.

Lists input files, reads their lines and writes the report atomically.
"""

from .files import InputFile, list_input_files, load_inputs, read_lines, write_report

__all__ = [
    "InputFile",
    "list_input_files",
    "load_inputs",
    "read_lines",
    "write_report",
]
