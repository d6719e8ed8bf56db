"""Type introspection — scalar detection and property descriptions.

Properties are discovered from pydantic model fields, dataclass fields,
mapping items or public instance attributes, in that order of preference.
Field markers (:mod:`cloudcore.domain.markers`) are read from
``Annotated`` metadata.
"""

from __future__ import annotations

import dataclasses
import datetime as dt
import types
import typing
import uuid
from collections.abc import Iterable, Mapping
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, TypeAdapter, ValidationError

from cloudcore.domain.markers import (
    Identity,
    Key,
    Marker,
    Named,
    PersonalData,
    Required,
    SensitiveInfo,
)

SYSTEM_TYPES: tuple[type, ...] = (
    str,
    bytes,
    bool,
    int,
    float,
    complex,
    Decimal,
    dt.datetime,
    dt.date,
    dt.time,
    dt.timedelta,
    uuid.UUID,
    Enum,
)


# --- Type predicates ---


def _unwrap_optional(tp: Any) -> Any:
    """Return ``X`` for ``X | None``; other types pass through."""
    origin = typing.get_origin(tp)
    if origin is typing.Annotated:
        return _unwrap_optional(typing.get_args(tp)[0])
    if origin in (typing.Union, types.UnionType):
        args = [a for a in typing.get_args(tp) if a is not type(None)]
        if len(args) == 1:
            return _unwrap_optional(args[0])
    return tp


def is_system_type(tp: Any) -> bool:
    """True for scalar types (and ``Optional`` scalars) that render as plain text."""
    if tp is None:
        return False
    tp = _unwrap_optional(tp)
    if typing.get_origin(tp) is not None:
        return False
    return isinstance(tp, type) and issubclass(tp, SYSTEM_TYPES)


def is_enumerable_type(tp: Any) -> bool:
    """True for iterable container types other than strings, bytes and mappings."""
    tp = _unwrap_optional(tp)
    origin = typing.get_origin(tp) or tp
    if not isinstance(origin, type) or is_system_type(origin):
        return False
    if issubclass(origin, BaseModel):
        return False
    return issubclass(origin, Iterable) and not issubclass(origin, Mapping)


def is_system_value(value: Any) -> bool:
    return isinstance(value, SYSTEM_TYPES)


def is_enumerable_value(value: Any) -> bool:
    return (
        isinstance(value, Iterable)
        and not isinstance(value, (str, bytes, bytearray, Mapping, BaseModel))
        and not is_system_value(value)
    )


def is_null_or_default(value: Any) -> bool:
    """True for ``None`` and for the default value of the value's own type.

    The default of an enum is its member valued ``0``.
    """
    if value is None:
        return True
    if isinstance(value, Enum):
        return value.value == 0 and not isinstance(value.value, bool)
    if isinstance(value, (bool, int, float, complex, Decimal, str, bytes)):
        return not value
    if isinstance(value, uuid.UUID):
        return value.int == 0
    if isinstance(value, dt.timedelta):
        return value == dt.timedelta(0)
    return False


def throw_if_null_or_default(value: Any, name: str = "value") -> Any:
    if is_null_or_default(value):
        raise ValueError(f"{name} cannot be null or default")
    return value


def change_type(value: Any, tp: Any) -> Any:
    """Coerce *value* into *tp* using pydantic; ``None`` when it cannot."""
    try:
        return TypeAdapter(tp).validate_python(value)
    except (ValidationError, TypeError, ValueError):
        return None


# --- Property descriptions ---


@dataclasses.dataclass(frozen=True, slots=True)
class PropertyDescription:
    """A single discovered property of an object."""

    name: str
    type: Any
    value: Any
    is_system_type: bool
    is_enumerable: bool
    markers: tuple[Marker, ...] = ()
    required: bool = False

    @property
    def has_required(self) -> bool:
        return self.required or Required in self.markers

    @property
    def has_key(self) -> bool:
        return Key in self.markers or Identity in self.markers

    def has_marker(self, marker: Marker) -> bool:
        return marker in self.markers

    @property
    def display_name(self) -> str:
        """The ``Named`` marker override, else the attribute name."""
        for marker in self.markers:
            if isinstance(marker, Named) and marker.name:
                return marker.name
        return self.name


def _markers_of(metadata: Iterable[Any]) -> tuple[Marker, ...]:
    return tuple(m for m in metadata if isinstance(m, Marker))


def _annotation_markers(annotation: Any) -> tuple[Marker, ...]:
    if typing.get_origin(annotation) is typing.Annotated:
        return _markers_of(annotation.__metadata__)
    return ()


def _describe(
    name: str, tp: Any, value: Any, markers: tuple[Marker, ...], required: bool
) -> PropertyDescription:
    if tp is None or tp is Any or isinstance(tp, str):
        tp = type(value)
    system = is_system_type(tp) or (value is not None and is_system_value(value))
    enumerable = not system and (
        is_enumerable_type(tp) or (value is not None and is_enumerable_value(value))
    )
    return PropertyDescription(
        name=name,
        type=tp,
        value=value,
        is_system_type=system,
        is_enumerable=enumerable,
        markers=markers,
        required=required,
    )


def _model_properties(obj: Any) -> list[PropertyDescription]:
    cls = obj if isinstance(obj, type) else type(obj)
    props: list[PropertyDescription] = []
    for name, info in cls.model_fields.items():
        value = None if isinstance(obj, type) else getattr(obj, name, None)
        props.append(
            _describe(
                name,
                info.annotation,
                value,
                _markers_of(info.metadata),
                info.is_required(),
            )
        )
    return props


def _dataclass_properties(obj: Any) -> list[PropertyDescription]:
    cls = obj if isinstance(obj, type) else type(obj)
    try:
        hints = typing.get_type_hints(cls, include_extras=True)
    except NameError:
        hints = {}
    props: list[PropertyDescription] = []
    for field in dataclasses.fields(cls):
        annotation = hints.get(field.name, field.type)
        value = None if isinstance(obj, type) else getattr(obj, field.name, None)
        required = (
            field.default is dataclasses.MISSING and field.default_factory is dataclasses.MISSING
        )
        props.append(
            _describe(
                field.name,
                _unwrap_optional(annotation),
                value,
                _annotation_markers(annotation),
                required,
            )
        )
    return props


def describe_properties(obj: Any) -> list[PropertyDescription]:
    """Describe the public properties of *obj* (an instance or a model class).

    Returns an empty list for scalars and objects without properties.
    """
    if obj is None or is_system_value(obj):
        return []
    if isinstance(obj, BaseModel) or (isinstance(obj, type) and issubclass(obj, BaseModel)):
        return _model_properties(obj)
    if dataclasses.is_dataclass(obj):
        return _dataclass_properties(obj)
    if isinstance(obj, Mapping):
        return [_describe(str(k), None, v, (), False) for k, v in obj.items()]
    if isinstance(obj, type):
        return []
    try:
        attrs = vars(obj)
    except TypeError:
        return []
    return [_describe(k, None, v, (), False) for k, v in attrs.items() if not k.startswith("_")]


def get_properties_with_marker(obj: Any, marker: Marker) -> dict[str, PropertyDescription]:
    return {p.name: p for p in describe_properties(obj) if marker in p.markers}


def get_pii_data_properties(obj: Any) -> dict[str, PropertyDescription]:
    return get_properties_with_marker(obj, PersonalData)


def get_sensitive_info_properties(obj: Any) -> dict[str, PropertyDescription]:
    return get_properties_with_marker(obj, SensitiveInfo)


def has_pii_data(obj: Any) -> bool:
    return bool(get_pii_data_properties(obj))


def has_sensitive_info(obj: Any) -> bool:
    return bool(get_sensitive_info_properties(obj))


def get_required_properties(obj: Any) -> dict[str, PropertyDescription]:
    return {p.name: p for p in describe_properties(obj) if p.has_required}


def is_required_property(prop: PropertyDescription) -> bool:
    return prop.has_required


def get_identity_field(obj: Any) -> Any:
    """Return the value of the property marked ``Identity``.

    Raises:
        LookupError: When no property carries the marker.
    """
    for prop in describe_properties(obj):
        if Identity in prop.markers:
            return prop.value
    raise LookupError(f"{type(obj).__name__} has no Identity property")
