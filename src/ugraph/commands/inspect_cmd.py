"""Command: diagnostic dump of a graph."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ugraph.commands._base import UgCommand
from ugraph.commands._context import graph_input

if TYPE_CHECKING:
    from ugraph.commands._context import AppContext


@click.command(
    "inspect",
    cls=UgCommand,
    examples="""\
  ugraph inspect a:b b:c c:a
  ugraph inspect a:b -n x -n y
  ugraph -v inspect a:a a:b
  ugraph --json inspect 1:2 2:3""",
)
@click.option(
    "--max-nodes",
    type=click.IntRange(min=1),
    default=None,
    help="Max nodes to list (default from config).",
)
@graph_input
@click.pass_obj
def inspect_cmd(
    app: AppContext,
    max_nodes: int | None,
    edges: tuple[str, ...],
    nodes: tuple[str, ...],
) -> None:
    """Show adjacency, size, order, and component count."""
    limit = max_nodes if max_nodes is not None else app.settings.inspect.max_nodes
    app.emit(app.load_graph(edges, nodes).inspect(max_nodes=limit))
