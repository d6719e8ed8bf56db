"""Command: flatten a JSON document into path/value pairs."""

from __future__ import annotations

from typing import TYPE_CHECKING, TextIO

import click

from cloudcore.commands._base import CloudCoreCommand
from cloudcore.domain.flatten import as_flat_string_dictionary
from cloudcore.domain.jsonutil import json_to_dict
from cloudcore.domain.strings import StringCasing
from cloudcore.services.result import OperationResult

if TYPE_CHECKING:
    from cloudcore.commands._context import AppContext


@click.command(
    cls=CloudCoreCommand,
    examples="""\
  cloudcore flatten order.json
  cloudcore flatten order.json --casing lowercase
  cloudcore flatten order.json --delimiter .
  cat order.json | cloudcore --json flatten -""",
)
@click.argument("source", type=click.File("r", encoding="utf-8"))
@click.option(
    "--casing",
    type=click.Choice([c.value for c in StringCasing]),
    default=None,
    help="Key casing (default from [flatten] config).",
)
@click.option("--delimiter", default=None, help="Separator between nested keys.")
@click.pass_obj
def flatten(
    app: AppContext,
    source: TextIO,
    casing: str | None,
    delimiter: str | None,
) -> None:
    """Flatten a JSON document into delimiter-joined keys."""
    config = app.settings.flatten
    try:
        document = json_to_dict(source.read())
    except ValueError as exc:
        app.emit(OperationResult.failure("flatten", "INVALID_JSON", str(exc)))
        return

    entries = as_flat_string_dictionary(
        document,
        key_casing=StringCasing(casing) if casing else config.key_casing,
        key_delimiter=delimiter if delimiter is not None else config.key_delimiter,
    )
    app.emit(OperationResult.success("flatten", {"count": len(entries), "entries": entries}))
