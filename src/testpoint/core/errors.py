"""TestPoint error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Index
- 7xxx: Target
- 9xxx: Internal

The locator core never raises; absent results are turned into TargetError
by the command layer, which is the only place a NotFound becomes an error.
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

    # Index (3xxx)
    INDEX_GRAMMAR_UNAVAILABLE = 3001
    INDEX_SOURCE_UNREADABLE = 3002

    # Target (7xxx)
    TARGET_NO_TEST_MARKER = 7001
    TARGET_METHOD_NOT_FOUND = 7002
    TARGET_CLASS_NOT_FOUND = 7003
    TARGET_INVALID_POSITION = 7004
    TARGET_RUNNER_UNKNOWN = 7005

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class TestPointError(Exception):
    """Base error with structured context for CLI and JSON output."""

    __test__ = False

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'TARGET_NO_TEST_MARKER')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(TestPointError):
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


class IndexingError(TestPointError):
    """Errors raised while building a symbol index for a source file."""

    @classmethod
    def grammar_unavailable(cls, grammar: str) -> "IndexingError":
        return cls(
            code=ErrorCode.INDEX_GRAMMAR_UNAVAILABLE,
            message=f"Tree-sitter grammar not installed: {grammar}",
            details={"grammar": grammar},
        )

    @classmethod
    def source_unreadable(cls, path: str, reason: str) -> "IndexingError":
        return cls(
            code=ErrorCode.INDEX_SOURCE_UNREADABLE,
            message=f"Cannot read {path}: {reason}",
            details={"path": path, "reason": reason},
        )


class TargetError(TestPointError):
    """No runnable test construct could be resolved."""

    @classmethod
    def no_test_marker(cls, path: str) -> "TargetError":
        return cls(
            code=ErrorCode.TARGET_NO_TEST_MARKER,
            message=f"No test code found in {path}",
            details={"path": path},
        )

    @classmethod
    def method_not_found(cls, path: str, offset: int) -> "TargetError":
        return cls(
            code=ErrorCode.TARGET_METHOD_NOT_FOUND,
            message=f"No test method found before offset {offset} in {path}",
            details={"path": path, "offset": offset},
        )

    @classmethod
    def class_not_found(cls, path: str, offset: int) -> "TargetError":
        return cls(
            code=ErrorCode.TARGET_CLASS_NOT_FOUND,
            message=f"No test class found before offset {offset} in {path}",
            details={"path": path, "offset": offset},
        )

    @classmethod
    def invalid_position(cls, line: int, column: int | None, reason: str) -> "TargetError":
        return cls(
            code=ErrorCode.TARGET_INVALID_POSITION,
            message=f"Invalid position line={line} column={column}: {reason}",
            details={"line": line, "column": column, "reason": reason},
        )

    @classmethod
    def runner_unknown(cls, pack_id: str) -> "TargetError":
        return cls(
            code=ErrorCode.TARGET_RUNNER_UNKNOWN,
            message=f"Unknown runner pack: {pack_id}",
            details={"pack_id": pack_id},
        )


class InternalError(TestPointError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
