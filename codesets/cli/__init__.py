"""Command line interface for Codesets."""

from .main import cli, main

__all__ = ["cli", "main"]
