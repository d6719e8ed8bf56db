"""Named instance contract."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class NamedInstance(Protocol):
    """Anything registered by name, such as one of several storage accounts."""

    name: str
