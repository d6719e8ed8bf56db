"""Enum helpers — descriptions, name listings and forgiving conversion.

``convert_to_enum`` never raises: blank or unknown input resolves to the
enum's default member (the member valued ``0``, else the first member).
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BeforeValidator

from cloudcore.domain.strings import add_space_before_caps


class DescriptiveEnum(Enum):
    """Enum whose members may carry a human description.

    Declare members as ``MEMBER = (value, "description")`` or a bare value::

        class Colour(DescriptiveEnum):
            RED = 0, "Bright red"
            BLUE = 1
    """

    def __new__(cls, value: Any, description: str | None = None) -> DescriptiveEnum:
        member = object.__new__(cls)
        member._value_ = value
        member._description = description
        return member

    @property
    def description(self) -> str:
        return self._description or self.name


def to_description(member: Enum) -> str:
    """Return the member's description, falling back to its name."""
    description = getattr(member, "description", None)
    if isinstance(description, str) and description:
        return description
    return member.name


def list_from_enum(enum_cls: type[Enum], add_spaces_to_capitals: bool = False) -> list[str]:
    """Return the sorted member names of *enum_cls*."""
    names = sorted(enum_cls.__members__)
    if add_spaces_to_capitals:
        return [add_space_before_caps(name) or name for name in names]
    return names


def enum_default[E: Enum](enum_cls: type[E]) -> E:
    """The member valued ``0``, or the first declared member."""
    for member in enum_cls:
        if member.value == 0 and not isinstance(member.value, bool):
            return member
    return next(iter(enum_cls))


def convert_int_to_enum[E: Enum](enum_cls: type[E], value: int) -> E:
    try:
        return enum_cls(value)
    except ValueError:
        return enum_default(enum_cls)


def convert_string_to_enum[E: Enum](enum_cls: type[E], value: str | None) -> E:
    """Match a member name case-insensitively, or a numeric string by value."""
    if value is None or not value.strip():
        return enum_default(enum_cls)
    text = value.strip()
    for name, member in enum_cls.__members__.items():
        if name.casefold() == text.casefold():
            return member
    try:
        return convert_int_to_enum(enum_cls, int(text))
    except ValueError:
        pass
    try:
        return enum_cls(text)
    except ValueError:
        return enum_default(enum_cls)


def convert_to_enum[E: Enum](enum_cls: type[E], value: Any) -> E:
    """Convert *value* to a member of *enum_cls*, defaulting on failure."""
    if isinstance(value, enum_cls):
        return value
    if value is None:
        return enum_default(enum_cls)
    if isinstance(value, str):
        return convert_string_to_enum(enum_cls, value)
    if isinstance(value, int) and not isinstance(value, bool):
        return convert_int_to_enum(enum_cls, value)
    try:
        return enum_cls(value)
    except ValueError:
        return enum_default(enum_cls)


def lenient_enum(enum_cls: type[Enum]) -> BeforeValidator:
    """Pydantic validator mapping blank or unknown input to the enum default.

    Usage::

        status: Annotated[Status, lenient_enum(Status)] = Status.NONE
    """
    return BeforeValidator(lambda value: convert_to_enum(enum_cls, value))

