"""Command group: structural queries on a graph."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from ugraph.commands._base import UgGroup
from ugraph.commands._context import graph_input

if TYPE_CHECKING:
    from ugraph.commands._context import AppContext

_ANALYZE_EXAMPLES = """\
  ugraph analyze components a:b c:d -n e
  ugraph analyze bridge c d a:b b:c c:a c:d d:e e:f f:d
  ugraph analyze degree a a:a a:b
  ugraph analyze neighbors a a:b a:b a:c"""


@click.group(cls=UgGroup, examples=_ANALYZE_EXAMPLES)
def analyze() -> None:
    """Connectivity, bridge, and adjacency queries."""


@analyze.command(
    examples="""\
  ugraph analyze components a:b c:d
  ugraph analyze components a:b -n x -n y
  ugraph --json analyze components a:b b:c"""
)
@graph_input
@click.pass_obj
def components(app: AppContext, edges: tuple[str, ...], nodes: tuple[str, ...]) -> None:
    """List connected components, largest first."""
    app.emit(app.load_graph(edges, nodes).components())


@analyze.command(
    examples="""\
  ugraph analyze bridge a b a:b b:c c:a
  ugraph -q analyze bridge c d a:b b:c c:a c:d d:e e:f f:d"""
)
@click.argument("u")
@click.argument("v")
@graph_input
@click.pass_obj
def bridge(
    app: AppContext,
    u: str,
    v: str,
    edges: tuple[str, ...],
    nodes: tuple[str, ...],
) -> None:
    """Check whether edge U-V is a bridge."""
    app.emit(app.load_graph(edges, nodes).bridge(u, v))


@analyze.command(
    examples="""\
  ugraph analyze degree a a:b a:c
  ugraph analyze degree a a:a"""
)
@click.argument("node")
@graph_input
@click.pass_obj
def degree(app: AppContext, node: str, edges: tuple[str, ...], nodes: tuple[str, ...]) -> None:
    """Show NODE's degree (a self-loop counts once)."""
    app.emit(app.load_graph(edges, nodes).degree(node))


@analyze.command(
    examples="""\
  ugraph analyze neighbors a a:b a:c
  ugraph -q analyze neighbors a a:b a:b"""
)
@click.argument("node")
@graph_input
@click.pass_obj
def neighbors(app: AppContext, node: str, edges: tuple[str, ...], nodes: tuple[str, ...]) -> None:
    """List NODE's adjacency in insertion order, parallel edges repeated."""
    app.emit(app.load_graph(edges, nodes).neighbors(node))
