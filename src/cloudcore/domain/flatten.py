"""Object graph flattener.

Walks an object (pydantic model, dataclass, mapping or plain object) and
produces one entry per scalar leaf, keyed by the delimiter-joined property
path.  Collections contribute ``key[index]`` entries::

    >>> as_flat_string_dictionary({"user": {"name": "Ann", "tags": ["a", "b"]}})
    {'user:name': 'Ann', 'user:tags[0]': 'a', 'user:tags[1]': 'b'}

There is no cycle detection; self-referencing graphs recurse until Python's
recursion limit is hit.
"""

from __future__ import annotations

import datetime as dt
from collections.abc import Iterator, Mapping
from enum import Enum
from typing import Any, NamedTuple

from cloudcore.domain.markers import MASKED_MARKERS
from cloudcore.domain.strings import StringCasing, with_casing
from cloudcore.domain.types import (
    describe_properties,
    is_enumerable_value,
    is_null_or_default,
    is_system_value,
)

MASK = "*****"
DEFAULT_DELIMITER = ":"


class Leaf(NamedTuple):
    """A flattened scalar; ``value`` is ``None`` for null or default values."""

    key: str
    value: Any
    sensitive: bool = False


def render_value(value: Any) -> str:
    """Render a scalar leaf as text."""
    if value is None:
        return ""
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, (dt.datetime, dt.date, dt.time)):
        return value.isoformat()
    if isinstance(value, bytes):
        return value.decode("utf-8", errors="replace")
    return str(value)


def _join(prefix: str, name: str, delimiter: str) -> str:
    return f"{prefix}{delimiter}{name}" if prefix else name


def _walk_item(item: Any, key: str, casing: StringCasing, delimiter: str) -> Iterator[Leaf]:
    if item is None or is_system_value(item):
        yield Leaf(key, item)
    elif is_enumerable_value(item):
        for index, child in enumerate(item):
            yield from _walk_item(child, f"{key}[{index}]", casing, delimiter)
    else:
        yield from _walk(item, key, casing, delimiter)


def _walk(obj: Any, prefix: str, casing: StringCasing, delimiter: str) -> Iterator[Leaf]:
    properties = describe_properties(obj)
    if not properties:
        # An empty mapping has no leaves; other propertyless objects are scalars.
        if not isinstance(obj, Mapping):
            yield Leaf(prefix, obj)
        return

    for prop in properties:
        key = with_casing(_join(prefix, prop.display_name, delimiter), casing)
        sensitive = any(marker in MASKED_MARKERS for marker in prop.markers)
        value = prop.value

        if is_null_or_default(value):
            yield Leaf(key, None, sensitive)
        elif prop.is_enumerable:
            for index, item in enumerate(value):
                yield from _walk_item(item, f"{key}[{index}]", casing, delimiter)
        elif prop.is_system_type:
            yield Leaf(key, value, sensitive)
        else:
            yield from _walk(value, key, casing, delimiter)


def iter_leaves(
    source: Any,
    key_casing: StringCasing = StringCasing.UNCHANGED,
    key_delimiter: str = DEFAULT_DELIMITER,
) -> Iterator[Leaf]:
    """Yield every scalar leaf of *source* in property declaration order."""
    if source is None:
        return
    yield from _walk(source, "", key_casing, key_delimiter)


def as_flat_string_dictionary(
    source: Any,
    key_casing: StringCasing = StringCasing.UNCHANGED,
    mask_sensitive: bool = False,
    key_delimiter: str = DEFAULT_DELIMITER,
) -> dict[str, str]:
    """Flatten *source* into ``{path: text}``.

    Null and default values render as ``""``.  With *mask_sensitive*, values
    of fields marked ``PersonalData`` or ``SensitiveInfo`` render as
    ``"*****"``.
    """
    result: dict[str, str] = {}
    for leaf in iter_leaves(source, key_casing, key_delimiter):
        if leaf.value is None:
            result[leaf.key] = ""
        elif mask_sensitive and leaf.sensitive:
            result[leaf.key] = MASK
        else:
            result[leaf.key] = render_value(leaf.value)
    return result
