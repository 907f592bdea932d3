"""Subcommand modules for ugraph.

Provides register_commands() which uses deferred imports to keep
``ugraph --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the ``analyze`` group and the standalone commands."""
    from ugraph.commands.analyze import analyze

    cli.add_command(analyze)

    from ugraph.commands.euler import euler
    from ugraph.commands.inspect_cmd import inspect_cmd

    cli.add_command(inspect_cmd)
    cli.add_command(euler)
