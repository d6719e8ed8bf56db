"""FileTemplateMapper — placeholder templates loaded through Jinja2 loaders.

Templates are located with Jinja2's loader machinery (a template directory,
an in-memory mapping, or both) but rendered with cloudcore's own
``{{Key:Path}}`` placeholder substitution, not Jinja syntax.

PDF output uses WeasyPrint, an optional dependency installed with the
``pdf`` extra.  It is imported on first use.
"""

from __future__ import annotations

import base64
import io
import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from jinja2 import (
    BaseLoader,
    ChoiceLoader,
    DictLoader,
    Environment,
    FileSystemLoader,
    TemplateNotFound,
)

from cloudcore.config.models import TemplateConfig
from cloudcore.contracts.templates import TemplateResult
from cloudcore.domain.placeholders import substitute_placeholders
from cloudcore.domain.strings import find_between_delimiters
from cloudcore.errors import TemplateMappingError

logger = logging.getLogger(__name__)


def build_template_environment(
    directory: str | Path | None = None,
    *,
    templates: Mapping[str, str] | None = None,
) -> Environment:
    """Build a Jinja2 environment searching in-memory *templates* before *directory*."""
    loaders: list[BaseLoader] = []
    if templates:
        loaders.append(DictLoader(dict(templates)))
    if directory is not None:
        loaders.append(FileSystemLoader(str(directory)))
    return Environment(loader=ChoiceLoader(loaders), keep_trailing_newline=True)


def _render_pdf(html: str) -> bytes:
    """Render *html* to PDF bytes. Raises ImportError if WeasyPrint is missing."""
    from weasyprint import HTML

    return HTML(string=html).write_pdf()


class FileTemplateMapper:
    """TemplateMapper backed by template files.

    A template id is the template's name relative to the template directory
    (``"invoice.html"``).  With ``strict`` enabled, mapping fails when any
    placeholder has no matching model value.
    """

    def __init__(
        self,
        config: TemplateConfig | None = None,
        *,
        templates: Mapping[str, str] | None = None,
    ) -> None:
        self.config = config or TemplateConfig()
        self.environment = build_template_environment(self.config.directory, templates=templates)

    async def get_template_content(self, template_id: str) -> TemplateResult:
        loader = self.environment.loader
        assert loader is not None
        try:
            source, _filename, _uptodate = loader.get_source(self.environment, template_id)
        except TemplateNotFound:
            logger.debug("Template %s not found", template_id)
            return TemplateResult(template_id=template_id, template_found=False)

        keys = find_between_delimiters(
            source, self.config.start_delimiter, self.config.end_delimiter
        )
        return TemplateResult(
            template_id=template_id,
            template_found=True,
            template_keys=keys,
            template_content=source,
        )

    async def map_to_html(self, template_id: str, model: Any) -> str:
        """Substitute *model* values into the template.

        Raises:
            TemplateMappingError: If the template does not exist, or in strict
                mode when placeholders remain unmapped.
        """
        template = await self.get_template_content(template_id)
        if not template.template_found or template.template_content is None:
            raise TemplateMappingError(
                f"Template {template_id} could not be found",
                template_id=template_id,
                template_found=False,
            )

        result = substitute_placeholders(
            template.template_content,
            model,
            self.config.start_delimiter,
            self.config.end_delimiter,
        )
        if self.config.strict and result.unmapped_keys:
            raise TemplateMappingError(
                f"Template {template_id} has unmapped placeholders: "
                + ", ".join(sorted(set(result.unmapped_keys))),
                template_id=template_id,
                template_found=True,
                template_keys=template.template_keys,
                model_key_values=result.model_key_values,
            )
        logger.debug(
            "Mapped %d of %d placeholders in %s",
            result.substituted_value_count,
            len(result.placeholder_keys),
            template_id,
        )
        return result.substituted_content

    async def map_to_html_as_pdf_stream(self, template_id: str, model: Any) -> io.BytesIO:
        html = await self.map_to_html(template_id, model)
        return io.BytesIO(_render_pdf(html))

    async def map_to_html_as_pdf_base64(self, template_id: str, model: Any) -> str:
        stream = await self.map_to_html_as_pdf_stream(template_id, model)
        return base64.b64encode(stream.getvalue()).decode("ascii")
