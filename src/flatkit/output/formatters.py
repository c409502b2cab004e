"""Rich/JSON output helpers.

The CLI renders ServiceResult for humans (Rich output) or machines
(--json). The formatter layer adapts ServiceResult to the requested
output mode.
"""

from __future__ import annotations

import json as _json
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from rich.markup import escape

from flatkit.output.console import create_console, get_output

if TYPE_CHECKING:
    from flatkit.services.result import ServiceResult


@dataclass(frozen=True)
class OutputSettings:
    """How a result should be rendered."""

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    indent: int = 2
    width: int = 120


def _compact(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return _json.dumps(value, separators=(",", ":"))
    return str(value)


def _format_quiet(result: ServiceResult) -> str:
    if result.ok and "result" in result.data:
        return _compact(result.data["result"])
    if result.ok:
        return f"OK: {result.op}"
    error_msg = result.error.message if result.error else "Unknown error"
    return f"ERROR: {result.op} - {error_msg}"


def _format_rich(result: ServiceResult, settings: OutputSettings) -> str:
    console = create_console(width=settings.width)
    if not result.ok:
        error_msg = result.error.message if result.error else "Unknown error"
        console.print(f"[flatkit.error]ERROR:[/] [flatkit.op]{result.op}[/] - {escape(error_msg)}")
        return get_output(console).rstrip("\n")

    console.print(f"[flatkit.ok]OK:[/] [flatkit.op]{result.op}[/]")
    for key, value in result.data.items():
        console.print(f"  [flatkit.key]{key}:[/] {escape(_compact(value))}", soft_wrap=True)
    if settings.verbose and result.meta:
        for key, value in result.meta.items():
            console.print(f"  [flatkit.meta]{key}: {escape(_compact(value))}[/]", soft_wrap=True)
    return get_output(console).rstrip("\n")


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a ServiceResult for display.

    Args:
        result: The service result to format.
        settings: Output mode. When given, *json_output* is ignored.
        json_output: Shorthand for ``OutputSettings(json_output=True)``.
    """
    if settings is None:
        settings = OutputSettings(json_output=json_output)
    if settings.json_output:
        return result.model_dump_json(indent=settings.indent or None)
    if settings.quiet:
        return _format_quiet(result)
    return _format_rich(result, settings)
