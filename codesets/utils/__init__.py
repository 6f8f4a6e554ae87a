"""
Codesets utility modules.

- Logging (loguru, stderr only)
"""

from .logger import configure_logging, is_debug_enabled, logger

__all__ = [
    "configure_logging",
    "is_debug_enabled",
    "logger",
]
