"""ahkunit discover command - print the test tree."""

import json
from pathlib import Path
from typing import Any

import click
from rich.tree import Tree

from ahkunit.cli.utils import console, load_cli_config
from ahkunit.testing.models import TestNode
from ahkunit.testing.ops import TestOps


def _node_to_dict(node: TestNode) -> dict[str, Any]:
    return {
        "id": node.id,
        "label": node.label,
        "kind": node.kind,
        "line": node.line,
        "children": [_node_to_dict(c) for c in node.children],
    }


def _add_branch(tree: Tree, node: TestNode) -> None:
    style = "bold" if node.kind == "class" else ""
    branch = tree.add(f"[{style}]{node.label}[/{style}]" if style else node.label)
    for child in node.children:
        _add_branch(branch, child)


@click.command()
@click.argument("path", default=".", type=click.Path(exists=True, path_type=Path))
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.pass_context
def discover_command(ctx: click.Context, path: Path, as_json: bool) -> None:
    """List the tests found in PATH (a test file or a directory)."""
    config = load_cli_config(ctx, path)
    ops = TestOps(path.resolve(), config.testing)
    nodes = ops.discover()

    if as_json:
        click.echo(json.dumps([_node_to_dict(n) for n in nodes], indent=2))
        return

    if not any(n.children for n in nodes):
        console.print("No tests found.")
        return

    for node in nodes:
        if not node.children:
            continue
        tree = Tree(f"[cyan]{node.label}[/cyan]")
        for child in node.children:
            _add_branch(tree, child)
        console.print(tree)
