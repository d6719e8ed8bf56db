"""Authentication contracts and a bearer token value type."""

from __future__ import annotations

import datetime as dt
from typing import Protocol, runtime_checkable

from pydantic import BaseModel, Field


@runtime_checkable
class AccessToken(Protocol):
    bearer_token: str
    expires: dt.datetime

    @property
    def has_expired(self) -> bool: ...


@runtime_checkable
class Authentication(Protocol):
    """A named credential source able to hand out access tokens."""

    name: str

    @property
    def access_token(self) -> AccessToken | None: ...


class BearerAccessToken(BaseModel):
    """A bearer token and its expiry time (UTC)."""

    bearer_token: str
    expires: dt.datetime = Field(default_factory=lambda: dt.datetime.max.replace(tzinfo=dt.UTC))

    @property
    def has_expired(self) -> bool:
        expires = self.expires
        if expires.tzinfo is None:
            expires = expires.replace(tzinfo=dt.UTC)
        return expires <= dt.datetime.now(dt.UTC)
