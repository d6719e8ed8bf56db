"""JSON helpers built on pydantic's TypeAdapter."""

from __future__ import annotations

import json
from typing import Any

from pydantic import TypeAdapter, ValidationError


def try_deserialize[T](text: str | bytes | None, tp: type[T]) -> T | None:
    """Validate JSON *text* into *tp*; ``None`` when it is blank or invalid."""
    if not text or (isinstance(text, str) and not text.strip()):
        return None
    try:
        return TypeAdapter(tp).validate_json(text)
    except ValidationError:
        return None


def json_to_dict(text: str | bytes) -> dict[str, Any]:
    """Parse a JSON object into nested dicts and lists.

    Raises:
        ValueError: When *text* is not a JSON object.
    """
    data = json.loads(text)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")
    return data
