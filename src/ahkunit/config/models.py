"""Configuration models.

Each section is a pydantic model with defaults, so an empty config is a
working one. Any field can be set from the environment as
AHKUNIT__<SECTION>__<FIELD>, for example:

    AHKUNIT__LOGGING__LEVEL=DEBUG
    AHKUNIT__TESTING__EXECUTABLE_PATH=D:\\AutoHotkey\\v2\\AutoHotkey64.exe
    AHKUNIT__TESTING__FAIL_ON_WARNING=true

See `ahkunit.config.loader` for how files, env vars and overrides combine.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_EXECUTABLE_PATH = r"C:\Program Files\AutoHotkey\v2\AutoHotkey64.exe"
DEFAULT_TEST_FILE_GLOB = "**/*.test.ahk"
STREAM_DESTINATIONS = ("stderr", "stdout")


class LogOutputConfig(BaseModel):
    """Where one stream of log events goes and how it is rendered."""

    format: Literal["json", "console"] = "console"
    destination: str = Field(
        default="stderr",
        description="'stderr', 'stdout', or an absolute log file path (~ is expanded).",
    )
    level: LogLevel | None = Field(
        default=None,
        description="Minimum level for this output. None uses the root level.",
    )

    @field_validator("destination")
    @classmethod
    def check_destination(cls, v: str) -> str:
        if v in STREAM_DESTINATIONS:
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"Log file destination must be an absolute path, got {v!r}")
        return str(path)


class LoggingConfig(BaseModel):
    """Root level plus one or more outputs. Quiet by default so test output stays readable."""

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. DEBUG logs every parsed line classification.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class TestingConfig(BaseModel):
    """Test discovery and execution configuration.

    Env vars:
        AHKUNIT__TESTING__EXECUTABLE_PATH: AutoHotkey v2 interpreter
        AHKUNIT__TESTING__TEST_FILE_GLOB: Glob selecting test files
        AHKUNIT__TESTING__FAIL_ON_WARNING: Treat interpreter warnings as failures
        AHKUNIT__TESTING__TIMEOUT_SEC: Per-test timeout
        AHKUNIT__TESTING__PARALLELISM: Max concurrent interpreter processes
    """

    executable_path: str = Field(
        default=DEFAULT_EXECUTABLE_PATH,
        description="Path to the AutoHotkey v2 interpreter.",
    )
    test_file_glob: str = Field(
        default=DEFAULT_TEST_FILE_GLOB,
        description="Glob (relative to the project root) selecting test files.",
    )
    fail_on_warning: bool = Field(
        default=False,
        description="Fail a test when the interpreter reports a warning, even if it passed.",
    )
    timeout_sec: float | None = Field(
        default=None,
        description="Per-test timeout. None waits forever. "
        "RISK: a native fault can open a modal dialog and block the interpreter indefinitely.",
    )
    parallelism: int | None = Field(
        default=None,
        description="Max concurrent interpreter processes. None runs every requested test at once.",
    )
    template_path: str | None = Field(
        default=None,
        description="Custom runner template. None uses the bundled test-runner.ahk.",
    )

    @field_validator("timeout_sec")
    @classmethod
    def validate_timeout(cls, v: float | None) -> float | None:
        if v is not None and v <= 0:
            raise ValueError(f"Timeout must be positive, got {v}")
        return v

    @field_validator("parallelism")
    @classmethod
    def validate_parallelism(cls, v: int | None) -> int | None:
        if v is not None and v < 1:
            raise ValueError(f"Parallelism must be at least 1, got {v}")
        return v


class AhkUnitConfig(BaseModel):
    """Root configuration for ahkunit: one attribute per section."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    testing: TestingConfig = Field(default_factory=TestingConfig)
