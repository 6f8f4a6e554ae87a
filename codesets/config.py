"""Comparison configuration.

Defaults live in constants.py. Each field can be overridden through a
``CODESETS_*`` environment variable, and CLI options override both.
"""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass, replace
from typing import Any, Mapping

from codesets.constants import (
    DEFAULT_ENCODING,
    DEFAULT_EXTENSION,
    DEFAULT_REPORT_NAME,
    FILE_WARNING_THRESHOLD,
    MAX_RANGE_SPAN,
)
from codesets.types import CodeOrder, ConfigurationError, ErrorContext

ENV_PREFIX = "CODESETS_"


@dataclass(frozen=True)
class ComparisonConfig:
    """Settings for one comparison run."""

    # Input discovery
    extension: str = DEFAULT_EXTENSION
    report_name: str = DEFAULT_REPORT_NAME
    encoding: str = DEFAULT_ENCODING

    # Warn (but continue) above this many input files
    file_warning_threshold: int = FILE_WARNING_THRESHOLD

    # Ranges wider than this are reported as invalid, not expanded
    max_range_span: int = MAX_RANGE_SPAN

    # Ordering of codes inside a report section
    code_order: CodeOrder = CodeOrder.LEXICAL

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ComparisonConfig:
        """Build a config from defaults plus ``CODESETS_*`` overrides."""
        env = os.environ if environ is None else environ
        overrides: dict[str, Any] = {}

        for name in ("extension", "report_name", "encoding", "code_order"):
            value = env.get(ENV_PREFIX + name.upper())
            if value:
                overrides[name] = value

        for name in ("file_warning_threshold", "max_range_span"):
            key = ENV_PREFIX + name.upper()
            value = env.get(key)
            if not value:
                continue
            try:
                overrides[name] = int(value)
            except ValueError as e:
                raise ConfigurationError(
                    f"{key} must be an integer, got {value!r}",
                    context=ErrorContext(operation="load_config", component="config"),
                    original_error=e,
                ) from e

        return cls().with_overrides(**overrides)

    def with_overrides(self, **overrides: Any) -> ComparisonConfig:
        """Return a validated copy with the given non-None fields replaced."""
        values = {k: v for k, v in overrides.items() if v is not None}
        if "code_order" in values:
            values["code_order"] = _parse_code_order(values["code_order"])
        if "extension" in values:
            values["extension"] = _normalize_extension(values["extension"])
        config = replace(self, **values)
        config.validate()
        return config

    def validate(self) -> None:
        """Raise ConfigurationError if any field is unusable."""
        context = ErrorContext(operation="validate_config", component="config")
        if not self.extension or self.extension == ".":
            raise ConfigurationError("extension must not be empty", context=context)
        if not self.report_name or "/" in self.report_name or "\\" in self.report_name:
            raise ConfigurationError(
                f"report_name must be a bare file name, got {self.report_name!r}",
                context=context,
            )
        try:
            codecs.lookup(self.encoding)
        except LookupError as e:
            raise ConfigurationError(
                f"unknown encoding {self.encoding!r}",
                context=context,
                original_error=e,
            ) from e
        if self.file_warning_threshold < 1:
            raise ConfigurationError(
                f"file_warning_threshold must be positive, got {self.file_warning_threshold}",
                context=context,
            )
        if self.max_range_span < 1:
            raise ConfigurationError(
                f"max_range_span must be positive, got {self.max_range_span}",
                context=context,
            )


def _normalize_extension(extension: str) -> str:
    extension = extension.strip()
    if extension and not extension.startswith("."):
        extension = "." + extension
    return extension


def _parse_code_order(value: CodeOrder | str) -> CodeOrder:
    try:
        return CodeOrder(str(value).strip().lower())
    except ValueError as e:
        allowed = ", ".join(o.value for o in CodeOrder)
        raise ConfigurationError(
            f"code_order must be one of: {allowed}; got {value!r}",
            context=ErrorContext(operation="validate_config", component="config"),
            original_error=e,
        ) from e
