"""Command: substitute a JSON model into a placeholder template."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import TYPE_CHECKING

import click

from cloudcore.commands._base import CloudCoreCommand
from cloudcore.errors import TemplateMappingError
from cloudcore.infrastructure.templates import FileTemplateMapper
from cloudcore.services.result import OperationResult

if TYPE_CHECKING:
    from cloudcore.commands._context import AppContext


@click.command(
    cls=CloudCoreCommand,
    examples="""\
  cloudcore render invoice.html order.json
  cloudcore render invoice.html order.json --output invoice.out.html
  cloudcore render invoice.html order.json --strict""",
)
@click.argument("template", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("model", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option(
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the rendered content to a file instead of printing it.",
)
@click.option(
    "--strict/--no-strict",
    default=None,
    help="Fail on unmapped placeholders (default from config).",
)
@click.pass_obj
def render(
    app: AppContext,
    template: Path,
    model: Path,
    output_path: Path | None,
    strict: bool | None,
) -> None:
    """Fill TEMPLATE placeholders with values from the MODEL JSON file."""
    overrides: dict[str, object] = {"directory": str(template.parent)}
    if strict is not None:
        overrides["strict"] = strict
    mapper = FileTemplateMapper(app.settings.templates.model_copy(update=overrides))

    try:
        document = json.loads(model.read_text(encoding="utf-8"))
        content = asyncio.run(mapper.map_to_html(template.name, document))
    except json.JSONDecodeError as exc:
        app.emit(OperationResult.failure("render", "INVALID_JSON", str(exc)))
        return
    except TemplateMappingError as exc:
        app.emit(OperationResult.failure("render", "TEMPLATE_MAPPING", str(exc)))
        return

    if output_path is not None:
        output_path.write_text(content, encoding="utf-8")
        data = {"template": template.name, "output": str(output_path)}
    else:
        data = {"template": template.name, "content": content}
    app.emit(OperationResult.success("render", data))
