"""Signed access and entity configuration contracts."""

from __future__ import annotations

import datetime as dt
from enum import IntEnum
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, Field


class AccessPermission(IntEnum):
    NONE = 0
    READ = 1
    WRITE = 2
    DELETE = 3
    LIST = 4
    ADD = 5
    CREATE = 6
    UPDATE = 7


class SignedAccessConfig(BaseModel):
    """Permissions and expiry requested for a signed (shared access) URL."""

    access_permissions: list[AccessPermission] = Field(default_factory=list)
    access_expiry: dt.datetime | None = None


@runtime_checkable
class EntityConfig(Protocol):
    """Configuration describing a messaging or storage entity to create."""

    entity_name: str
