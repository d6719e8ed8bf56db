"""Sequence, stream and comparison helpers."""

from __future__ import annotations

import base64
import functools
import re
from collections.abc import Iterable, Iterator, Sequence
from itertools import islice
from typing import BinaryIO

# --- Sequences ---


def contains_equivalent(items: Sequence[str] | None, item: str) -> bool:
    """Case-insensitive membership test.

    Raises:
        ValueError: When *items* is ``None`` or empty.
    """
    if not items:
        raise ValueError("items cannot be null or empty")
    target = item.casefold()
    return any(candidate.casefold() == target for candidate in items)


def batch[T](items: Iterable[T], size: int) -> Iterator[list[T]]:
    """Yield successive lists of at most *size* items.

    >>> list(batch([1, 2, 3, 4, 5], 2))
    [[1, 2], [3, 4], [5]]
    """
    if size < 1:
        raise ValueError("size must be at least 1")
    iterator = iter(items)
    while chunk := list(islice(iterator, size)):
        yield chunk


def sub_array[T](items: Sequence[T], index: int, length: int) -> list[T]:
    """Return *length* items starting at *index*.

    Raises:
        IndexError: When the requested window falls outside *items*.
    """
    if index < 0 or length < 0 or index + length > len(items):
        raise IndexError(f"Window [{index}:{index + length}] is out of range")
    return list(items[index : index + length])


# --- Streams ---


def copy_to_bytes(stream: BinaryIO) -> bytes:
    """Read *stream* into bytes, rewinding seekable streams first."""
    if stream.seekable():
        stream.seek(0)
    return stream.read()


def to_base64(stream: BinaryIO) -> str:
    return base64.b64encode(copy_to_bytes(stream)).decode("ascii")


# --- Semi-numeric ordering ---

_TRAILING_NUMBER_RE = re.compile(r"^(.*?)(\d+)$")


def _as_number(text: str) -> float | None:
    try:
        return float(text)
    except ValueError:
        return None


def semi_numeric_compare(a: str, b: str) -> int:
    """Compare strings so embedded numbers sort naturally.

    Numeric strings sort before text and compare by value.  Strings that
    share a prefix and end in digits compare by the trailing number
    (``item2`` < ``item10``).  Everything else compares case-insensitively.
    """
    num_a, num_b = _as_number(a), _as_number(b)
    if num_a is not None and num_b is not None:
        return (num_a > num_b) - (num_a < num_b)
    if num_a is not None:
        return -1
    if num_b is not None:
        return 1

    match_a, match_b = _TRAILING_NUMBER_RE.match(a), _TRAILING_NUMBER_RE.match(b)
    if match_a and match_b and match_a.group(1).casefold() == match_b.group(1).casefold():
        int_a, int_b = int(match_a.group(2)), int(match_b.group(2))
        return (int_a > int_b) - (int_a < int_b)

    fold_a, fold_b = a.casefold(), b.casefold()
    return (fold_a > fold_b) - (fold_a < fold_b)


semi_numeric_key = functools.cmp_to_key(semi_numeric_compare)
