"""
Logging utility for Codesets.

The report itself goes to a file (or stdout with ``--stdout``), so all log
output goes to STDERR to keep piped reports clean.

Library modules import ``logger`` from here and never configure sinks
themselves; the CLI calls configure_logging() once at startup.
"""

import os
import sys

from loguru import logger as loguru_logger

LOG_FORMAT = "{level: <8} | {name}:{function} - {message}"


def _stderr_sink(message: str) -> None:
    # Resolve sys.stderr per write; it may be swapped after setup (click's CliRunner does).
    sys.stderr.write(message)


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled."""
    for var in ("CODESETS_DEBUG", "DEBUG"):
        if os.environ.get(var, "").lower() == "true":
            return True
    return False


def configure_logging(verbose: bool = False) -> int:
    """Replace loguru's default sink with a single stderr sink.

    Args:
        verbose: Log at DEBUG instead of WARNING.

    Returns:
        The id of the installed sink.
    """
    level = "DEBUG" if verbose or is_debug_enabled() else "WARNING"
    loguru_logger.remove()
    return loguru_logger.add(_stderr_sink, level=level, format=LOG_FORMAT)


# Export loguru logger for direct use
logger = loguru_logger
