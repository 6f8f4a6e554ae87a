"""
Pytest configuration and shared fixtures for Codesets tests.
"""

from pathlib import Path
from typing import Callable

import pytest
from loguru import logger

# fileA/fileB/fileC scenario: 100 is everywhere, 101 in A and B, the rest unique.
THREE_FILE_INPUTS: dict[str, list[str]] = {
    "fileA": ["# codes for A", "100-102", "", "200"],
    "fileB": ["100", "101", "300"],
    "fileC": ["100 400"],
}


@pytest.fixture
def three_file_inputs() -> dict[str, list[str]]:
    """Raw lines for the three-file comparison scenario."""
    return {name: list(lines) for name, lines in THREE_FILE_INPUTS.items()}


@pytest.fixture
def write_inputs(tmp_path: Path) -> Callable[[dict[str, str]], Path]:
    """Factory writing {file name: text} into tmp_path and returning the directory."""

    def _write(files: dict[str, str]) -> Path:
        for name, text in files.items():
            (tmp_path / name).write_text(text, encoding="utf-8")
        return tmp_path

    return _write


@pytest.fixture
def log_messages():
    """Capture loguru messages (caplog does not see loguru)."""
    messages: list[str] = []
    sink_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(sink_id)
