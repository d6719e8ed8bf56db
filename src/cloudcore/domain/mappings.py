"""Dictionary helpers and object/dictionary conversion."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, MutableMapping
from typing import Any

from cloudcore.domain.flatten import DEFAULT_DELIMITER, MASK, iter_leaves
from cloudcore.domain.strings import StringCasing, with_casing
from cloudcore.domain.types import describe_properties


def add_range[K, V](
    target: MutableMapping[K, V],
    source: Mapping[K, V] | Iterable[tuple[K, V]],
) -> MutableMapping[K, V]:
    """Insert every pair from *source*.

    Raises:
        KeyError: When a key is already present in *target*.
    """
    pairs = source.items() if isinstance(source, Mapping) else source
    for key, value in pairs:
        if key in target:
            raise KeyError(f"An item with the same key has already been added: {key!r}")
        target[key] = value
    return target


_MISSING: Any = object()


def add_or_update[K, V](
    target: MutableMapping[K, V], key_or_pair: K | tuple[K, V], value: V = _MISSING
) -> MutableMapping[K, V]:
    """Set ``target[key] = value``; pass a ``(key, value)`` tuple to omit *value*."""
    if value is _MISSING:
        key, value = key_or_pair  # type: ignore[misc]
    else:
        key = key_or_pair  # type: ignore[assignment]
    target[key] = value
    return target


def release(mapping: MutableMapping[Any, Any]) -> None:
    """Close every value that supports ``close()``, then clear *mapping*."""
    for value in mapping.values():
        close = getattr(value, "close", None)
        if callable(close):
            close()
    mapping.clear()


def to_delimited_string(mapping: Mapping[Any, Any], delimiter: str = ";") -> str:
    """Render ``{"a": 1, "b": 2}`` as ``"a=1;b=2"``."""
    return delimiter.join(f"{key}={value}" for key, value in mapping.items())


def to_pairs[K, V](mapping: Mapping[K, V]) -> list[tuple[K, V]]:
    return list(mapping.items())


def to_object[T](mapping: Mapping[str, Any], cls: type[T]) -> T:
    """Create ``cls()`` and assign each key that names an existing attribute.

    Keys without a matching attribute are ignored.
    """
    instance = cls()
    fields = getattr(cls, "model_fields", None)
    for key, value in mapping.items():
        if (fields is not None and key in fields) or hasattr(instance, key):
            setattr(instance, key, value)
    return instance


def as_dictionary(
    obj: Any, key_casing: StringCasing = StringCasing.UNCHANGED
) -> dict[str, Any]:
    """Shallow ``{property: value}`` map of *obj*."""
    return {with_casing(p.display_name, key_casing): p.value for p in describe_properties(obj)}


def _masked(value: Any) -> Any:
    if isinstance(value, str):
        return MASK if value else value
    try:
        return type(value)()
    except TypeError:
        return None


def as_flat_dictionary(
    obj: Any,
    key_casing: StringCasing = StringCasing.UNCHANGED,
    mask_sensitive: bool = False,
    key_delimiter: str = DEFAULT_DELIMITER,
) -> dict[str, Any]:
    """Flatten *obj* like :func:`as_flat_string_dictionary` but keep raw values.

    Null and default values map to ``None``.  Masked strings become
    ``"*****"``; other masked values become their type's default.
    """
    result: dict[str, Any] = {}
    for leaf in iter_leaves(obj, key_casing, key_delimiter):
        if mask_sensitive and leaf.sensitive and leaf.value is not None:
            result[leaf.key] = _masked(leaf.value)
        else:
            result[leaf.key] = leaf.value
    return result
