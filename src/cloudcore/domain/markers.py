"""Field markers carried in ``typing.Annotated`` metadata.

Markers tag model fields with behaviour the flattener and introspection
helpers act on::

    class Customer(BaseModel):
        id: Annotated[str, Identity]
        email: Annotated[str, PersonalData]
        api_key: Annotated[str, SensitiveInfo]
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Marker:
    """Base class for all field markers."""

    label: str

    def __repr__(self) -> str:
        return self.label


@dataclass(frozen=True, slots=True, repr=False)
class Named(Marker):
    """Override the display name of a field: ``Annotated[str, Named("FullName")]``."""

    label: str = field(default="Named", init=False)
    name: str

    def __repr__(self) -> str:
        return f"Named({self.name!r})"


def named(name: str) -> Named:
    return Named(name)


PersonalData = Marker("PersonalData")
SensitiveInfo = Marker("SensitiveInfo")
Identity = Marker("Identity")
Key = Marker("Key")
Required = Marker("Required")

MASKED_MARKERS: frozenset[Marker] = frozenset({PersonalData, SensitiveInfo})
