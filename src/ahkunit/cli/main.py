"""ahkunit CLI - ahkunit command."""

import click

from ahkunit import __version__
from ahkunit.cli.discover import discover_command
from ahkunit.cli.run import run_command
from ahkunit.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="ahkunit")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """ahkunit - discover and run AutoHotkey v2 unit tests."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    if verbose:
        configure_logging(level="DEBUG")


cli.add_command(discover_command, name="discover")
cli.add_command(run_command, name="run")


if __name__ == "__main__":
    cli()
