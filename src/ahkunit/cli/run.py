"""ahkunit run command - execute tests and report results."""

import asyncio
import json
from pathlib import Path
from typing import Any

import click
from rich.table import Table

from ahkunit.cli.utils import build_cli_executor, console, load_cli_config
from ahkunit.core.errors import ExecutionError
from ahkunit.testing.coverage import CoverageReport, build_summary, build_text_summary
from ahkunit.testing.discovery import collect_leaf_ids
from ahkunit.testing.identity import TestIdentity
from ahkunit.testing.models import ExecutionOutcome, RunSummary, TestStatus
from ahkunit.testing.ops import RunResult, TestOps

_STATUS_LABELS = {
    TestStatus.PASSED: "[green]PASS[/green]",
    TestStatus.FAILED: "[red]FAIL[/red]",
    TestStatus.ERRORED: "[red]ERROR[/red]",
    TestStatus.SKIPPED: "[yellow]SKIPPED[/yellow]",
}


def _display_name(test_id: str) -> str:
    try:
        return TestIdentity.parse(test_id).dotted_name
    except ExecutionError:
        return test_id


def _is_selected(test_id: str, selected: tuple[str, ...]) -> bool:
    """Match a test id or dotted name, or any ancestor of either."""
    name = _display_name(test_id)
    return any(
        test_id == s or test_id.startswith(s + "::") or name == s or name.startswith(s + ".")
        for s in selected
    )


def _outcome_to_dict(outcome: ExecutionOutcome) -> dict[str, Any]:
    data: dict[str, Any] = {
        "id": outcome.test_id,
        "status": outcome.status.value,
        "message": outcome.message,
        "duration_ms": outcome.duration_ms,
    }
    if outcome.error is not None:
        data["location"] = {
            "file": outcome.error.location.file,
            "line": outcome.error.location.line,
        }
    return data


def _print_outcome(outcome: ExecutionOutcome) -> None:
    name = _display_name(outcome.test_id or "")
    console.print(f"{_STATUS_LABELS[outcome.status]}: {name}")
    if outcome.status in (TestStatus.FAILED, TestStatus.ERRORED) and outcome.message:
        console.print(outcome.message.replace("\r\n", "\n"), style="dim", markup=False)
    if outcome.output:
        console.print(outcome.output, markup=False)


def _print_summary(summary: RunSummary) -> None:
    console.print(f"Ran {summary.total} tests")
    if summary.passed:
        console.print(f"    [green]{summary.passed} passed[/green]")
    if summary.failed:
        console.print(f"    [red]{summary.failed} failed[/red]")
    if summary.errored:
        console.print(f"    [red]{summary.errored} errored[/red]")
    if summary.skipped:
        console.print(f"    [yellow]{summary.skipped} skipped[/yellow]")


def _print_coverage(report: CoverageReport) -> None:
    table = Table(title="Coverage")
    table.add_column("File")
    table.add_column("Covered", justify="right")
    table.add_column("Total", justify="right")
    table.add_column("%", justify="right")
    for fc in report.files.values():
        table.add_row(fc.path, str(fc.covered), str(fc.total), f"{fc.line_rate * 100.0:.1f}")
    console.print(table)
    console.print(build_text_summary(report))


def _result_to_dict(result: RunResult) -> dict[str, Any]:
    data: dict[str, Any] = {
        "run_id": result.run_id,
        "cancelled": result.cancelled,
        "duration_seconds": round(result.duration_seconds, 3),
        "summary": {
            "total": result.summary.total,
            "passed": result.summary.passed,
            "failed": result.summary.failed,
            "errored": result.summary.errored,
            "skipped": result.summary.skipped,
        },
        "tests": [_outcome_to_dict(o) for o in result.outcomes],
    }
    if result.coverage is not None:
        data["coverage"] = build_summary(result.coverage)
    return data


@click.command()
@click.argument("path", default=".", type=click.Path(exists=True, path_type=Path))
@click.option(
    "-k",
    "--test",
    "selected",
    multiple=True,
    help="Run only tests under this id or dotted name, e.g. MathTests.Adds (repeatable)",
)
@click.option("--coverage", is_flag=True, help="Collect line coverage")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def run_command(
    ctx: click.Context,
    path: Path,
    selected: tuple[str, ...],
    coverage: bool,
    as_json: bool,
) -> None:
    """Run the tests found in PATH (a test file or a directory).

    Exits with status 1 if any test failed or errored.
    """
    config = load_cli_config(ctx, path)
    executor = build_cli_executor(config.testing)
    ops = TestOps(path.resolve(), config.testing, executor=executor)
    test_ids = collect_leaf_ids(ops.discover())

    if selected:
        test_ids = [t for t in test_ids if _is_selected(t, selected)]

    if not test_ids:
        if as_json:
            click.echo(json.dumps({"summary": {"total": 0}, "tests": []}))
        else:
            console.print("No tests to run.")
        return

    if not as_json:
        console.print(f"Collected {len(test_ids)} tests to run")

    result = asyncio.run(ops.run(test_ids, coverage=coverage))

    if as_json:
        click.echo(json.dumps(_result_to_dict(result), indent=2))
    else:
        for outcome in result.outcomes:
            _print_outcome(outcome)
        _print_summary(result.summary)
        if result.coverage is not None:
            _print_coverage(result.coverage)

    if not result.summary.ok:
        ctx.exit(1)
