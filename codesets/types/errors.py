"""
Error handling system for Codesets.

Fatal conditions (bad configuration, too few participating files, I/O
failures) are raised as CodesetsError subclasses. Malformed ranges are not
errors: they are collected as InvalidRangeRecord values and reported.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any

from codesets.constants import utcnow


class ErrorCode(IntEnum):
    """Internal error codes for categorization."""

    # File System Errors (2000-2999)
    FILE_NOT_FOUND = 2001
    FILE_READ_FAILED = 2002
    FILE_WRITE_FAILED = 2003
    DIRECTORY_NOT_FOUND = 2004

    # Comparison Errors (3000-3999)
    INSUFFICIENT_INPUT = 3001

    # Configuration Errors (4000-4999)
    INVALID_CONFIG = 4001


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


@dataclass
class RecoveryAction:
    """Suggested action to recover from an error."""

    description: str
    command: str | None = None


@dataclass
class ErrorContext:
    """Context information for an error."""

    operation: str | None = None
    file_path: str | None = None
    component: str | None = None
    timestamp: datetime = field(default_factory=utcnow)
    additional_info: dict[str, Any] = field(default_factory=dict)


class CodesetsError(Exception):
    """Base error class for Codesets."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        user_message: str,
        severity: str = ErrorSeverity.MEDIUM,
        context: ErrorContext | None = None,
        recovery_actions: list[RecoveryAction] | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.severity = severity
        self.user_message = user_message
        self.context = context or ErrorContext()
        self.recovery_actions = recovery_actions or []
        self.original_error = original_error

        self.context.timestamp = utcnow()

    def get_formatted_message(self) -> str:
        """Get a formatted error message for display to users."""
        parts = [
            f"[Error] {self.user_message}",
            f"   Code: {self.code.value}",
        ]

        if self.context.operation:
            parts.append(f"   Operation: {self.context.operation}")
        if self.context.file_path:
            parts.append(f"   File: {self.context.file_path}")
        if self.original_error:
            parts.append(f"   Cause: {self.original_error}")

        if self.recovery_actions:
            parts.append("")
            parts.append("Suggested actions:")
            for i, action in enumerate(self.recovery_actions, 1):
                parts.append(f"   {i}. {action.description}")
                if action.command:
                    parts.append(f"      Run: {action.command}")

        return "\n".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "name": self.__class__.__name__,
            "code": self.code.value,
            "message": str(self),
            "user_message": self.user_message,
            "severity": self.severity,
            "context": {
                "operation": self.context.operation,
                "file_path": self.context.file_path,
                "component": self.context.component,
                "timestamp": self.context.timestamp.isoformat(),
                "additional_info": self.context.additional_info,
            },
            "recovery_actions": [
                {"description": a.description, "command": a.command}
                for a in self.recovery_actions
            ],
            "original_error": str(self.original_error) if self.original_error else None,
        }


class ConfigurationError(CodesetsError):
    """Error related to configuration issues."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        context: ErrorContext | None = None,
        recovery_actions: list[RecoveryAction] | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CONFIG,
            message=message,
            user_message=user_message or message,
            severity=ErrorSeverity.HIGH,
            context=context,
            recovery_actions=recovery_actions,
            original_error=original_error,
        )


class InsufficientInputError(CodesetsError):
    """Fewer than two files yielded any codes, so there is nothing to compare."""

    def __init__(
        self,
        message: str,
        participating: list[str] | None = None,
        context: ErrorContext | None = None,
    ) -> None:
        context = context or ErrorContext(operation="compare", component="comparator")
        context.additional_info.setdefault("participating_files", list(participating or []))
        super().__init__(
            code=ErrorCode.INSUFFICIENT_INPUT,
            message=message,
            user_message="At least two files with codes are required for a comparison.",
            severity=ErrorSeverity.HIGH,
            context=context,
            recovery_actions=[
                RecoveryAction(description="Add more input files containing codes"),
                RecoveryAction(description="Check the --extension option matches your files"),
            ],
        )
        self.participating = list(participating or [])


class ResourceError(CodesetsError):
    """Error related to resource access (input directory, files)."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        context: ErrorContext | None = None,
        recovery_actions: list[RecoveryAction] | None = None,
        original_error: Exception | None = None,
        code: ErrorCode = ErrorCode.FILE_NOT_FOUND,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            user_message=user_message or "Resource access failed.",
            severity=ErrorSeverity.HIGH,
            context=context,
            recovery_actions=recovery_actions,
            original_error=original_error,
        )


class FileReadError(ResourceError):
    """Reading an input file failed."""

    def __init__(self, file_path: str, original_error: Exception) -> None:
        super().__init__(
            message=f"Failed to read {file_path}: {original_error}",
            user_message=f"Could not read input file '{file_path}'.",
            context=ErrorContext(operation="read", file_path=file_path, component="storage"),
            original_error=original_error,
            code=ErrorCode.FILE_READ_FAILED,
        )


class ReportWriteError(ResourceError):
    """Writing the report file failed. No partial report is left behind."""

    def __init__(self, file_path: str, original_error: Exception) -> None:
        super().__init__(
            message=f"Failed to write {file_path}: {original_error}",
            user_message=f"Could not write report file '{file_path}'.",
            context=ErrorContext(operation="write", file_path=file_path, component="storage"),
            original_error=original_error,
            code=ErrorCode.FILE_WRITE_FAILED,
        )
