"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Turns EDGES/--node arguments into a loaded
GraphService and routes ServiceResult output (stdout/stderr + exit code).
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING, Any, TypeVar

import click

from ugraph.output.formatters import OutputSettings, format_result
from ugraph.services.graph import GraphService

if TYPE_CHECKING:
    from ugraph.config.settings import UgraphSettings
    from ugraph.services.result import ServiceResult

_F = TypeVar("_F", bound=Callable[..., Any])


def graph_input(func: _F) -> _F:
    """Add the ``EDGES...`` argument and ``--node`` option to a command.

    Apply below any positional arguments the command declares itself,
    since EDGES is variadic.
    """
    func = click.option(
        "-n",
        "--node",
        "nodes",
        multiple=True,
        help="Add a node with no edges (repeatable).",
    )(func)
    return click.argument("edges", nargs=-1)(func)


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: UgraphSettings) -> None:
        self.settings = settings

        from ugraph.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def parse_edges(self, tokens: Iterable[str]) -> list[tuple[str, str]]:
        """Split ``u<sep>v`` tokens into endpoint pairs.

        Raises:
            click.BadParameter: A token does not have exactly two non-empty ends.
        """
        sep = self.settings.cli.edge_separator
        edges: list[tuple[str, str]] = []
        for token in tokens:
            parts = token.split(sep)
            if len(parts) != 2 or not all(parts):
                msg = f"{token!r} is not an edge of the form 'u{sep}v'"
                raise click.BadParameter(msg, param_hint="EDGES")
            edges.append((parts[0], parts[1]))
        return edges

    def load_graph(self, edges: Iterable[str], nodes: Iterable[str] = ()) -> GraphService:
        """Build a GraphService holding the graph described on the command line."""
        service = GraphService()
        service.load(nodes=nodes, edges=self.parse_edges(edges))
        return service

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings go to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if settings.quiet:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
