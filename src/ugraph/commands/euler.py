"""Command: Euler circuit via Fleury's algorithm."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ugraph.commands._base import UgCommand
from ugraph.commands._context import graph_input

if TYPE_CHECKING:
    from ugraph.commands._context import AppContext


@click.command(
    cls=UgCommand,
    examples="""\
  ugraph euler a:b b:c c:d d:a
  ugraph euler a:b b:c c:d d:a --start c
  ugraph -q euler a:b b:c c:a c:d d:e e:c""",
)
@click.option("-s", "--start", default=None, help="Node to start and end the circuit at.")
@graph_input
@click.pass_obj
def euler(
    app: AppContext,
    start: str | None,
    edges: tuple[str, ...],
    nodes: tuple[str, ...],
) -> None:
    """Find a closed walk that uses every edge exactly once."""
    app.emit(app.load_graph(edges, nodes).euler_circuit(start))
