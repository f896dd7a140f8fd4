"""Entry point for the treeops CLI."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Annotated, List, Optional

import typer
from pydantic import ValidationError

from treeops.config import get_default_order, get_log_level, get_version
from treeops.logger import configure_logging, suppress_info_and_below
from treeops.tree import (
    SearchOrder,
    TreeNode,
    dump_forest,
    enumerate_nodes,
    enumerate_reverse,
    find_one,
    load_forest,
    next_of,
    prev_of,
    remove,
)

app = typer.Typer(
    name="treeops",
    help="Walk, search and edit trees stored as JSON documents.",
    no_args_is_help=False,
)

FileArgument = Annotated[
    Path,
    typer.Argument(help="JSON file holding a tree object or an array of trees."),
]
OrderOption = Annotated[
    Optional[SearchOrder],
    typer.Option(
        "--order",
        "-o",
        help="Enumeration order. Defaults to TREEOPS_DEFAULT_ORDER or depth-first.",
    ),
]


def _read(path: Path) -> List[TreeNode]:
    """Load a forest, turning load failures into a clean exit."""
    try:
        forest = load_forest(path)
    except (OSError, json.JSONDecodeError, ValidationError) as e:
        logging.error(f"Could not load tree from {path}: {e}")
        raise typer.Exit(code=1)
    logging.info(f"Loaded {len(forest)} root(s) from {path}")
    return forest


def _find_named(
    forest: List[TreeNode], name: str, order: SearchOrder
) -> TreeNode:
    node = find_one(forest, lambda n: n.name == name, order)
    if node is None:
        logging.warning(f"No node named '{name}' in the tree")
        raise typer.Exit(code=1)
    return node


@app.callback(invoke_without_command=True)
def callback(
    ctx: typer.Context,
    quiet: Annotated[
        bool, typer.Option("--quiet", "-q", help="Only log warnings and errors.")
    ] = False,
):
    """Callback function that runs before any subcommand."""
    configure_logging(get_log_level())
    if quiet:
        ctx.with_resource(suppress_info_and_below())
    if ctx.invoked_subcommand is None:
        typer.echo("No command given, see --help for subcommands")


@app.command()
def walk(
    file: FileArgument,
    order: OrderOption = None,
    reverse: Annotated[
        bool, typer.Option("--reverse", "-r", help="Enumerate back to front.")
    ] = False,
):
    """Print the name of every node in enumeration order."""
    order = order or get_default_order()
    forest = _read(file)
    enumerate_fn = enumerate_reverse if reverse else enumerate_nodes
    for node in enumerate_fn(forest, order):
        typer.echo(node.name)


@app.command()
def find(
    file: FileArgument,
    name: Annotated[str, typer.Argument(help="Name of the node to look for.")],
    order: OrderOption = None,
):
    """Print the first node with the given name as JSON."""
    order = order or get_default_order()
    forest = _read(file)
    node = _find_named(forest, name, order)
    typer.echo(node.model_dump_json(indent=2))


@app.command()
def neighbours(
    file: FileArgument,
    name: Annotated[str, typer.Argument(help="Name of the node to look for.")],
    order: OrderOption = None,
):
    """Print the names of the nodes before and after the named node."""
    order = order or get_default_order()
    forest = _read(file)
    node = _find_named(forest, name, order)
    before = prev_of(forest, node, order)
    after = next_of(forest, node, order)
    typer.echo(f"previous: {before.name if before is not None else '-'}")
    typer.echo(f"next: {after.name if after is not None else '-'}")


@app.command("remove")
def remove_node(
    file: FileArgument,
    name: Annotated[str, typer.Argument(help="Name of the node to remove.")],
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output", "-O", help="Write the result here instead of stdout."
        ),
    ] = None,
):
    """Remove the first node with the given name and print the result."""
    forest = _read(file)
    node = _find_named(forest, name, SearchOrder.DEPTH_FIRST)
    remove(forest, node)
    document = dump_forest(forest)
    if output is None:
        typer.echo(document)
    else:
        output.write_text(document + "\n", encoding="utf-8")
        logging.info(f"Wrote {len(forest)} root(s) to {output}")


@app.command()
def version():
    """Print the installed treeops version."""
    typer.echo(get_version())


if __name__ == "__main__":
    app()
