"""Placeholder substitution for text templates.

A template references model values with delimited keys such as
``{{Customer:Name}}``.  The model is flattened (see
:mod:`cloudcore.domain.flatten`) with lowercase keys, so placeholder lookups
are case-insensitive while the surrounding template text is left untouched.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from cloudcore.domain.flatten import as_flat_string_dictionary
from cloudcore.domain.jsonutil import json_to_dict
from cloudcore.domain.strings import StringCasing, find_between_delimiters

DEFAULT_START = "{{"
DEFAULT_END = "}}"


class SubstitutionResult(BaseModel):
    """Outcome of :func:`substitute_placeholders`.

    Attributes:
        placeholder_keys: Every key found in the template, duplicates included.
        model_key_values: The lowercase flattened model.
        substituted_content: The template with matched placeholders replaced.
        substituted_value_count: Number of placeholder occurrences matched.
    """

    model_config = {"frozen": True}

    placeholder_keys: list[str] = Field(default_factory=list)
    model_key_values: dict[str, str] = Field(default_factory=dict)
    substituted_content: str = ""
    substituted_value_count: int = 0

    @property
    def unmapped_keys(self) -> list[str]:
        return [k for k in self.placeholder_keys if k.lower() not in self.model_key_values]


def flatten_model(model: Any) -> dict[str, str]:
    """Flatten *model* with lowercase keys; JSON strings are parsed first."""
    if isinstance(model, (str, bytes)):
        model = json_to_dict(model)
    return as_flat_string_dictionary(model, key_casing=StringCasing.LOWERCASE)


def substitute_placeholders(
    content: str,
    model: Any,
    start: str = DEFAULT_START,
    end: str = DEFAULT_END,
) -> SubstitutionResult:
    """Replace ``start + key + end`` placeholders in *content* with model values.

    Placeholders with no matching model key are left verbatim.
    """
    model_values = flatten_model(model)
    keys = find_between_delimiters(content, start, end)

    substituted = content
    count = 0
    for key in keys:
        value = model_values.get(key.lower())
        if value is None:
            continue
        count += 1
        substituted = substituted.replace(f"{start}{key}{end}", value)

    return SubstitutionResult(
        placeholder_keys=keys,
        model_key_values=model_values,
        substituted_content=substituted,
        substituted_value_count=count,
    )
