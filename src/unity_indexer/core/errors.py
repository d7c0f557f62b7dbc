"""Unity indexer error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Scan
- 4xxx: Output
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2003

    # Scan (3xxx)
    NOT_A_PROJECT_ROOT = 3001
    FILE_READ_FAILURE = 3002
    TRAVERSAL_FAILURE = 3003

    # Output (4xxx)
    OUTPUT_WRITE_FAILURE = 4001


@dataclass(frozen=True, slots=True)
class UnityIndexerError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'NOT_A_PROJECT_ROOT')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(UnityIndexerError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class ScanError(UnityIndexerError):
    """Project traversal and per-file read errors."""

    @property
    def path(self) -> str:
        return str(self.details.get("path", ""))

    @classmethod
    def not_a_project_root(cls, path: str, source_dir: str) -> "ScanError":
        return cls(
            code=ErrorCode.NOT_A_PROJECT_ROOT,
            message=f"No '{source_dir}' directory under {path}; is this a Unity project root?",
            details={"path": path, "source_dir": source_dir},
        )

    @classmethod
    def file_read_failure(cls, path: str, reason: str) -> "ScanError":
        return cls(
            code=ErrorCode.FILE_READ_FAILURE,
            message=f"Failed to read {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def traversal_failure(cls, path: str, reason: str) -> "ScanError":
        return cls(
            code=ErrorCode.TRAVERSAL_FAILURE,
            message=f"Failed to walk {path}: {reason}",
            details={"path": path, "reason": reason},
        )


class OutputError(UnityIndexerError):
    """Errors persisting a rendered document."""

    @classmethod
    def write_failure(cls, path: str, reason: str) -> "OutputError":
        return cls(
            code=ErrorCode.OUTPUT_WRITE_FAILURE,
            message=f"Failed to write {path}: {reason}",
            details={"path": path, "reason": reason},
        )
