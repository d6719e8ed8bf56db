"""Identity provider contracts (users and groups)."""

from __future__ import annotations

from enum import IntEnum
from typing import Protocol, runtime_checkable


class IdentityType(IntEnum):
    ALL = -1
    USER = 0
    GROUP = 1


@runtime_checkable
class Identity(Protocol):
    id: str
    display_name: str
    type: IdentityType
    email: str | None
    member_of: set[str]


@runtime_checkable
class IdentityProvider(Protocol):
    async def get_users(self, include_member_of: bool = False) -> list[Identity]: ...

    async def get_groups(self, include_member_of: bool = False) -> list[Identity]: ...

    async def get_identities(self, include_member_of: bool = False) -> list[Identity]: ...

    async def get_user(self, id: str, include_member_of: bool = False) -> Identity | None: ...

    async def get_group(self, id: str, include_member_of: bool = False) -> Identity | None: ...

    async def get_identity(
        self, id: str, include_member_of: bool = False
    ) -> Identity | None: ...

    async def get_users_group_memberships(self, id: str) -> list[Identity]: ...

    def close(self) -> None: ...
