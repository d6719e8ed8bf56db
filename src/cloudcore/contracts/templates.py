"""Template mapper contract."""

from __future__ import annotations

from typing import Any, BinaryIO, Protocol, runtime_checkable

from pydantic import BaseModel, Field


class TemplateResult(BaseModel):
    """A looked-up template and the placeholder keys it contains."""

    template_id: str
    template_found: bool = False
    template_keys: list[str] = Field(default_factory=list)
    template_content: str | None = None


@runtime_checkable
class TemplateMapper(Protocol):
    async def get_template_content(self, template_id: str) -> TemplateResult: ...

    async def map_to_html(self, template_id: str, model: Any) -> str: ...

    async def map_to_html_as_pdf_base64(self, template_id: str, model: Any) -> str: ...

    async def map_to_html_as_pdf_stream(self, template_id: str, model: Any) -> BinaryIO: ...
