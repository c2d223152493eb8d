"""FeatureGate error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Supply (publishing, resolution, lookup)
- 9xxx: Internal
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Supply (3xxx)
    PUBLISH_FAILED = 3001
    RESOLUTION_FAILED = 3002
    FEATURE_NOT_FOUND = 3003

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class FeatureGateError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'PUBLISH_FAILED')."""
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


class ConfigError(FeatureGateError):
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


class PublishError(FeatureGateError):
    """Scratch storage could not take a submission."""

    @classmethod
    def write_failed(cls, path: str, reason: str) -> "PublishError":
        return cls(
            code=ErrorCode.PUBLISH_FAILED,
            message=f"Could not write submission to {path}: {reason}",
            details={"path": path, "reason": reason},
        )


class ResolutionError(FeatureGateError):
    """A location could not be turned into features."""

    @classmethod
    def unsupported_location(cls, uri: str) -> "ResolutionError":
        return cls(
            code=ErrorCode.RESOLUTION_FAILED,
            message=f"Unsupported feature location: {uri}",
            details={"uri": uri},
        )

    @classmethod
    def unreadable(cls, uri: str, reason: str) -> "ResolutionError":
        return cls(
            code=ErrorCode.RESOLUTION_FAILED,
            message=f"Could not read {uri}: {reason}",
            details={"uri": uri, "reason": reason},
        )

    @classmethod
    def parse_failed(cls, uri: str, line: int, reason: str) -> "ResolutionError":
        return cls(
            code=ErrorCode.RESOLUTION_FAILED,
            message=f"{uri}:{line}: {reason}",
            details={"uri": uri, "line": line, "reason": reason},
        )


class FeatureNotFoundError(FeatureGateError):
    """An explicitly requested feature file does not exist."""

    @classmethod
    def for_uri(cls, uri: str) -> "FeatureNotFoundError":
        return cls(
            code=ErrorCode.FEATURE_NOT_FOUND,
            message=f"Feature not found: {uri}",
            details={"uri": uri},
        )


class InternalError(FeatureGateError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
