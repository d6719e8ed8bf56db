"""Command: human-readable byte sizes."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from cloudcore.commands._base import CloudCoreCommand
from cloudcore.domain.conversions import to_size_suffix
from cloudcore.services.result import OperationResult

if TYPE_CHECKING:
    from cloudcore.commands._context import AppContext


@click.command(
    cls=CloudCoreCommand,
    examples="""\
  cloudcore size 1024
  cloudcore size 1073741824 --decimals 3
  cloudcore size -- -2048""",
)
@click.argument("value", type=float)
@click.option("--decimals", type=int, default=1, show_default=True, help="Decimal places.")
@click.pass_obj
def size(app: AppContext, value: float, decimals: int) -> None:
    """Format VALUE bytes with a KB/MB/GB... suffix."""
    number: int | float = int(value) if value.is_integer() else value
    try:
        text = to_size_suffix(number, decimals)
    except ValueError as exc:
        app.emit(OperationResult.failure("size", "INVALID_ARGUMENT", str(exc)))
        return
    app.emit(OperationResult.success("size", {"bytes": number, "size": text}))
