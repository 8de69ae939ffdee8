"""Test operations module - discovery, execution, coverage."""

from ahkunit.testing.models import (
    ExecutionOutcome,
    ParsedError,
    RunSummary,
    TestClassNode,
    TestMethodNode,
    TestNode,
    TestStatus,
)
from ahkunit.testing.ops import RunResult, TestOps
from ahkunit.testing.parser import parse_test_file
from ahkunit.testing.protocol import parse_execution_output
from ahkunit.testing.runner import TestExecutor

__all__ = [
    "TestOps",
    "TestExecutor",
    "RunResult",
    "RunSummary",
    "ExecutionOutcome",
    "ParsedError",
    "TestClassNode",
    "TestMethodNode",
    "TestNode",
    "TestStatus",
    "parse_test_file",
    "parse_execution_output",
]
