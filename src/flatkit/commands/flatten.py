"""Command: flatten a JSON array."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from flatkit.commands._base import FlatkitCommand, read_value

if TYPE_CHECKING:
    from flatkit.commands._context import AppContext


@click.command(
    "flatten",
    cls=FlatkitCommand,
    examples="""\
  flatkit flatten '[1, [2, 3], [4, [5, 6]]]'
  flatkit flatten '[1, [2, 3], [4, [5, 6]]]' --depth 2
  echo '[[1], [[2]]]' | flatkit -q flatten --deep
  flatkit --json flatten '[1, [2]]'""",
)
@click.argument("value", default="-")
@click.option(
    "--depth",
    type=float,
    default=None,
    help="Nesting levels to collapse (floored; default from [flatten] default_depth).",
)
@click.option("--deep", is_flag=True, help="Flatten completely, ignoring --depth.")
@click.pass_obj
def flatten_cmd(app: AppContext, value: str, depth: float | None, deep: bool) -> None:
    """Flatten the JSON array VALUE (or stdin when VALUE is '-')."""
    from flatkit.services.flatten import FlattenService

    app.emit(FlattenService(app.settings).flatten(read_value(value), depth=depth, deep=deep))
