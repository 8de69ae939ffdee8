"""Shared CLI helpers."""

from pathlib import Path

import click
from rich.console import Console

from ahkunit.config import AhkUnitConfig, TestingConfig, load_config
from ahkunit.core.errors import ConfigError, ExecutionError
from ahkunit.core.logging import configure_logging
from ahkunit.testing.runner import TestExecutor

console = Console(highlight=False)


def project_root(path: Path) -> Path:
    """Directory holding .ahkunit/ config for a file or directory argument."""
    resolved = path.resolve()
    return resolved.parent if resolved.is_file() else resolved


def load_cli_config(ctx: click.Context, path: Path) -> AhkUnitConfig:
    """Load config for `path`, turning config errors into click errors."""
    try:
        config = load_config(project_root(path))
    except ConfigError as e:
        raise click.ClickException(e.message) from e
    verbose = bool(ctx.obj and ctx.obj.get("verbose"))
    if verbose:
        configure_logging(level="DEBUG")
    else:
        configure_logging(config=config.logging)
    return config


def build_cli_executor(config: TestingConfig) -> TestExecutor:
    """Load and check the runner template, turning failures into click errors."""
    try:
        return TestExecutor(config)
    except ExecutionError as e:
        raise click.ClickException(e.message) from e
    except OSError as e:
        raise click.ClickException(
            f"Cannot read runner template {config.template_path}: {e.strerror or e}"
        ) from e
