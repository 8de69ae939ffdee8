"""Config module exports."""

from ahkunit.config.loader import load_config
from ahkunit.config.models import (
    AhkUnitConfig,
    LoggingConfig,
    LogOutputConfig,
    TestingConfig,
)

__all__ = [
    "load_config",
    "AhkUnitConfig",
    "LoggingConfig",
    "LogOutputConfig",
    "TestingConfig",
]
