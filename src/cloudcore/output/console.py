"""Rich Console factory and theme for cloudcore output.

Consoles render into a StringIO buffer so formatters keep a
``-> str`` contract.  Rich drops color codes automatically when the buffer
is not a terminal (tests, pipes).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

CLOUDCORE_THEME = Theme(
    {
        "cc.ok": "bold green",
        "cc.error": "bold red",
        "cc.warning": "bold yellow",
        "cc.op": "bold cyan",
        "cc.key": "dim",
        "cc.value": "",
        "cc.empty": "dim italic",
    }
)


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    return Console(
        file=StringIO(),
        theme=CLOUDCORE_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()
