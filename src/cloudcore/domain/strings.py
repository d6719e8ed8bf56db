"""String helpers — cleaning, replacement, parsing and delimiter search.

Every function is pure and operates on ``str``.  Functions documented as
raising do so with ``ValueError``; the ``to_*`` parsers that "never fail"
return a sentinel instead.
"""

from __future__ import annotations

import io
import os
import re
import uuid
from collections.abc import Mapping
from enum import StrEnum
from typing import BinaryIO

_NON_WORD_RE = re.compile(r"[\W]+")
_CAMEL_BOUNDARY_RE = re.compile(r"([a-z])([A-Z])")

EMPTY_UUID = uuid.UUID(int=0)


class StringCasing(StrEnum):
    """Casing applied to generated keys."""

    UNCHANGED = "unchanged"
    LOWERCASE = "lowercase"
    UPPERCASE = "uppercase"


def with_casing(text: str, casing: StringCasing) -> str:
    """Return *text* with *casing* applied."""
    if casing == StringCasing.LOWERCASE:
        return text.lower()
    if casing == StringCasing.UPPERCASE:
        return text.upper()
    return text


# --- Cleaning and replacement ---


def remove_non_alphanumeric(text: str) -> str:
    """Collapse every run of non-word characters into a single space.

    >>> remove_non_alphanumeric("a - b!!c")
    'a b c'
    """
    return _NON_WORD_RE.sub(" ", text)


def default_if_empty(value: str | None, default: str) -> str:
    """Return *default* when *value* is ``None`` or empty."""
    return default if not value else value


set_default_if_empty = default_if_empty


def remove_multiple(text: str, *find: str) -> str:
    """Remove every occurrence of each *find* string, then lowercase."""
    return replace_each(text, "", *find)


def replace_each(text: str, replacement: str, *find: str) -> str:
    """Replace every occurrence of each *find* with *replacement*, then lowercase."""
    for item in find:
        text = text.replace(item, replacement)
    return text.lower()


def replace_multiple(text: str, replacements: Mapping[str, str]) -> str:
    """Replace each key of *replacements* with its value, preserving case."""
    for old, new in replacements.items():
        text = text.replace(old, new)
    return text


def replace_all(text: str, chars: str, new_value: str) -> str:
    """Split on any character in *chars*, drop empty pieces, rejoin with *new_value*."""
    if not chars:
        return text
    pattern = "[" + re.escape(chars) + "]"
    return new_value.join(part for part in re.split(pattern, text) if part)


def multi_line(*lines: str) -> str:
    return os.linesep.join(lines)


def add_space_before_caps(text: str | None) -> str | None:
    """Insert a space between a lowercase letter and the capital following it."""
    if text is None:
        return None
    return _CAMEL_BOUNDARY_RE.sub(r"\1 \2", text)


# --- Predicates and guards ---


def is_null_or_empty(text: str | None) -> bool:
    return not text


def is_null_or_whitespace(text: str | None) -> bool:
    return text is None or not text.strip()


def throw_if_null(value: object, name: str = "value") -> object:
    """Raise ``ValueError`` when *value* is ``None``; otherwise return it."""
    if value is None:
        raise ValueError(f"{name} cannot be None")
    return value


def throw_if_null_or_whitespace(text: str | None, name: str = "value") -> str:
    """Raise ``ValueError`` when *text* is ``None``, empty or whitespace."""
    if text is None or not text.strip():
        raise ValueError(f"{name} cannot be null or whitespace")
    return text


def is_equivalent_to(text: str | None, other: str | None) -> bool:
    """Case-insensitive equality; two ``None`` values are equivalent."""
    if text is None or other is None:
        return text is other
    return text.casefold() == other.casefold()


def _require_pair(text: str | None, other: str | None) -> tuple[str, str]:
    if text is None:
        raise ValueError("source text cannot be None")
    if other is None:
        raise ValueError("comparison text cannot be None")
    return text.casefold(), other.casefold()


def contains_equivalent(text: str | None, other: str | None) -> bool:
    source, target = _require_pair(text, other)
    return target in source


def starts_with_equivalent(text: str | None, other: str | None) -> bool:
    source, target = _require_pair(text, other)
    return source.startswith(target)


def ends_with_equivalent(text: str | None, other: str | None) -> bool:
    source, target = _require_pair(text, other)
    return source.endswith(target)


# --- Parsing ---


def to_uuid(text: str | None) -> uuid.UUID:
    """Parse *text* as a UUID, returning the empty UUID when it cannot be parsed."""
    if is_null_or_whitespace(text):
        return EMPTY_UUID
    try:
        return uuid.UUID(text.strip())  # type: ignore[union-attr]
    except ValueError:
        return EMPTY_UUID


def to_int(text: str | None) -> int:
    """Parse *text* as an integer; blank input raises ``ValueError``."""
    throw_if_null_or_whitespace(text, "text")
    return int(text)  # type: ignore[arg-type]


def to_bool(text: str | None) -> bool:
    """Parse yes/true/1 style text.

    Blank input raises ``ValueError``.  Anything whose trimmed, lowercase
    form starts with ``y``, ``t`` or ``1`` is true; everything else is false.
    """
    throw_if_null_or_whitespace(text, "text")
    return text.strip().lower()[0] in ("y", "t", "1")  # type: ignore[union-attr]


# --- Bytes and streams ---


def size_in_bytes(text: str | None, encoding: str = "utf-8") -> int:
    if not text:
        return 0
    return len(text.encode(encoding))


def to_bytes(text: str, encoding: str = "utf-8") -> bytes:
    return text.encode(encoding)


def to_stream(text: str, encoding: str = "utf-8") -> io.BytesIO:
    """Wrap the encoded *text* in a rewound in-memory stream."""
    return io.BytesIO(text.encode(encoding))


def read_contents(stream: BinaryIO, encoding: str = "utf-8") -> str:
    """Read the whole of *stream* as text, rewinding first when possible."""
    if stream.seekable():
        stream.seek(0)
    return stream.read().decode(encoding)


# --- Delimiter search ---


def substring_between(text: str | None, start: str, end: str) -> str | None:
    """Return the stripped text between the first *start* and the next *end*.

    Returns ``None`` when either delimiter is missing.
    """
    if not text:
        return None
    begin = text.find(start)
    if begin < 0:
        return None
    begin += len(start)
    finish = text.find(end, begin)
    if finish < 0:
        return None
    return text[begin:finish].strip()


def find_between_delimiters(text: str, start: str, end: str) -> list[str]:
    """Return every value found between *start* and *end*, duplicates included.

    Matching is non-greedy and spans newlines; values are not stripped.
    """
    pattern = re.compile(re.escape(start) + r"(.*?)" + re.escape(end), re.DOTALL)
    return pattern.findall(text)
