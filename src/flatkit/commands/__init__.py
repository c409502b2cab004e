"""Subcommand modules for flatkit.

Provides register_commands() which uses deferred imports to keep
``flatkit --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from flatkit.commands.flatten import flatten_cmd
    from flatkit.commands.inspect import inspect_cmd

    cli.add_command(flatten_cmd)
    cli.add_command(inspect_cmd)
