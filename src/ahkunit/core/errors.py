"""Exceptions raised by ahkunit.

Only a broken configuration or runner template is raised. Anything that
goes wrong while a test runs (unreadable output, launch failure, timeout)
is reported as that test's outcome instead.

Error code ranges:
- 2xxx: Config
- 7xxx: Test execution
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Execution (7xxx)
    TEMPLATE_INVALID = 7001
    INVALID_TEST_ID = 7002

    @property
    def category(self) -> str:
        return "config" if self < 7000 else "execution"


@dataclass(eq=False)
class AhkUnitError(Exception):
    """Base error: a code, a user-facing message, and machine-readable details.

    Not frozen: contextlib assigns ``__traceback__`` on exceptions that
    propagate through generator-based ``with`` blocks.
    """

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "code": int(self.code),
            "error": self.code.name,
            "category": self.code.category,
            "message": self.message,
        }
        if self.details:
            data["details"] = self.details
        return data

    def __str__(self) -> str:
        return f"{self.message} ({self.code.name})"


class ConfigError(AhkUnitError):
    """A config file that cannot be read or a value that fails validation."""

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


class ExecutionError(AhkUnitError):
    """A test that cannot be turned into a runnable script."""

    @classmethod
    def template_invalid(cls, marker: str) -> "ExecutionError":
        return cls(
            code=ErrorCode.TEMPLATE_INVALID,
            message=f"Runner template is missing the '{marker}' marker",
            details={"marker": marker},
        )

    @classmethod
    def invalid_test_id(cls, test_id: str) -> "ExecutionError":
        return cls(
            code=ErrorCode.INVALID_TEST_ID,
            message=f"Not a runnable test id: {test_id}",
            details={"test_id": test_id},
        )
