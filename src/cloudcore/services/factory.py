"""NamedInstanceFactory — look up one of several same-typed instances by name.

Applications often hold several clients of one kind (two storage accounts,
a primary and a fallback messenger).  The factory indexes them by their
``name`` so callers can ask for a specific one.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from cloudcore.contracts.named import NamedInstance

logger = logging.getLogger(__name__)


class NamedInstanceFactory[T: NamedInstance]:
    """Index *instances* by name.

    An instance with an empty name is registered under its class name.
    Name clashes are resolved by appending the first free counter
    (``storage``, ``storage1``, ``storage2``).  The resolved name is
    written back to the instance.
    """

    def __init__(self, instances: Iterable[T]) -> None:
        self._instances: dict[str, T] = {}
        for instance in instances:
            name = instance.name or type(instance).__name__
            if name in self._instances:
                resolved = self._generate_name(name)
                logger.debug("Duplicate instance name %r registered as %r", name, resolved)
                name = resolved
            instance.name = name
            self._instances[name] = instance

    def _generate_name(self, suggested: str) -> str:
        increment = 1
        while f"{suggested}{increment}" in self._instances:
            increment += 1
        return f"{suggested}{increment}"

    @property
    def instances(self) -> dict[str, T]:
        return dict(self._instances)

    def __getitem__(self, name: str) -> T:
        try:
            return self._instances[name]
        except KeyError:
            raise KeyError(f"No instance registered with name {name!r}") from None

    def try_get(self, name: str) -> T | None:
        return self._instances.get(name)

    def __contains__(self, name: object) -> bool:
        return name in self._instances

    def __iter__(self) -> Iterator[str]:
        return iter(self._instances)

    def __len__(self) -> int:
        return len(self._instances)
