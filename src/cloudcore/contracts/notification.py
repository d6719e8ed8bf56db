"""Email and SMS notification contracts and message models."""

from __future__ import annotations

import io
import json
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core import to_jsonable_python


class EmailAttachment(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    name: str
    content_type: str
    content: io.IOBase


class EmailMessage(BaseModel):
    to: list[str] = Field(default_factory=list)
    subject: str = ""
    content: str = ""
    attachments: list[EmailAttachment] = Field(default_factory=list)


class EmailTemplateMessage(BaseModel):
    """An email rendered by the provider from a stored template."""

    to: list[str] = Field(default_factory=list)
    subject: str = ""
    template_id: str = ""
    template_object: Any = None
    attachments: list[EmailAttachment] = Field(default_factory=list)

    def template_object_as_json(self) -> str:
        """Serialise the template object; ``""`` when none is set."""
        if self.template_object is None:
            return ""
        if isinstance(self.template_object, BaseModel):
            return self.template_object.model_dump_json()
        return json.dumps(to_jsonable_python(self.template_object))

    def template_object_type(self) -> type | None:
        if self.template_object is None:
            return None
        return type(self.template_object)


class SmsLink(BaseModel):
    title: str
    link: str

    @field_validator("title", "link")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value

    def __str__(self) -> str:
        return f"{self.title}: {self.link}"


class SmsMessage(BaseModel):
    to: list[str] = Field(default_factory=list)
    text: str = ""
    links: list[SmsLink] = Field(default_factory=list)

    @property
    def full_content(self) -> str:
        """The text followed by one ``title: link`` line per link."""
        if not self.links:
            return self.text
        return self.text + "\n" + "\n".join(str(link) for link in self.links)


@runtime_checkable
class EmailProvider(Protocol):
    name: str

    def send(self, email: EmailMessage | EmailTemplateMessage) -> bool: ...

    async def send_async(self, email: EmailMessage | EmailTemplateMessage) -> bool: ...


@runtime_checkable
class SmsProvider(Protocol):
    name: str

    def send(self, sms: SmsMessage) -> bool: ...

    async def send_async(self, sms: SmsMessage) -> bool: ...
