"""Bundled runner script template."""

from pathlib import Path

TEMPLATE_NAME = "test-runner.ahk"


def get_runner_template() -> str:
    """Return the bundled test-runner.ahk source."""
    return (Path(__file__).parent / TEMPLATE_NAME).read_text(encoding="utf-8")


__all__ = ["TEMPLATE_NAME", "get_runner_template"]
