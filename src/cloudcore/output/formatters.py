"""Rich/JSON output for OperationResult.

Human mode prints ``OK: <op>`` followed by the payload; a mapping stored
under ``entries`` renders as a two-column table.  ``--json`` mode prints
the serialized result unchanged.
"""

from __future__ import annotations

import json as _json
from typing import TYPE_CHECKING, Any

from rich.markup import escape
from rich.table import Table

from cloudcore.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from cloudcore.services.result import OperationResult

TABLE_KEY = "entries"


def _render_entries(console: Console, entries: dict[str, Any]) -> None:
    table = Table(show_header=True, header_style="cc.op", box=None, pad_edge=False)
    table.add_column("Key", style="cc.key", overflow="fold")
    table.add_column("Value", style="cc.value", overflow="fold")
    for key, value in entries.items():
        text = escape(str(value)) if value != "" else "[cc.empty](empty)[/]"
        table.add_row(escape(str(key)), text)
    console.print(table)


def _render_value(value: Any) -> str:
    if isinstance(value, (dict, list)):
        return escape(_json.dumps(value, separators=(",", ":"), default=str))
    return escape(str(value))


def format_result(result: OperationResult, *, json_output: bool = False) -> str:
    """Format an OperationResult for display.

    Args:
        result: The operation result to format.
        json_output: If True, return JSON; otherwise return human-readable text.
    """
    if json_output:
        return result.model_dump_json(indent=2)

    console = create_console()
    if result.ok:
        console.print(f"[cc.ok]OK[/]: [cc.op]{escape(result.op)}[/]")
        for key, value in result.data.items():
            if key == TABLE_KEY and isinstance(value, dict):
                _render_entries(console, value)
            else:
                console.print(
                    f"  [cc.key]{escape(key)}[/]: {_render_value(value)}", soft_wrap=True
                )
    else:
        message = result.error.message if result.error else "Unknown error"
        console.print(
            f"[cc.error]ERROR[/]: {escape(result.op)} - {escape(message)}", soft_wrap=True
        )
    return get_output(console).rstrip("\n")
