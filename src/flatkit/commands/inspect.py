"""Command: describe the shape of a JSON value."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from flatkit.commands._base import FlatkitCommand, read_value

if TYPE_CHECKING:
    from flatkit.commands._context import AppContext


@click.command(
    "inspect",
    cls=FlatkitCommand,
    examples="""\
  flatkit inspect '[1, [2, [3]]]'
  flatkit --json inspect '{"a": 1}'""",
)
@click.argument("value", default="-")
@click.pass_obj
def inspect_cmd(app: AppContext, value: str) -> None:
    """Report whether VALUE is array-like and how deeply it nests."""
    from flatkit.services.flatten import FlattenService

    app.emit(FlattenService(app.settings).inspect(read_value(value)))
