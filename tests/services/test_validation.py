"""Tests for AttributeValidator."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated

import pytest
from pydantic import BaseModel, Field

from cloudcore.errors import ValidateError
from cloudcore.services.validation import AttributeValidator, ValidateResult, ValidationFailure


class Profile(AttributeValidator, BaseModel):
    name: str = Field(min_length=1)
    age: int = Field(default=0, ge=0)


@dataclass
class Line(AttributeValidator):
    sku: Annotated[str, Field(min_length=3)]
    quantity: Annotated[int, Field(gt=0)] = 1


class TestModelValidation:
    def test_valid(self) -> None:
        result = Profile(name="Ann").validate()
        assert result.is_valid
        assert result.errors == []

    def test_mutated_instance_collects_every_failure(self) -> None:
        profile = Profile(name="Ann", age=3)
        profile.name = ""
        profile.age = -1

        result = profile.validate()

        assert not result.is_valid
        assert [error.member_names for error in result.errors] == [["name"], ["age"]]

    def test_throw_if_invalid(self) -> None:
        profile = Profile.model_construct(name="", age=5)
        with pytest.raises(ValidateError) as exc_info:
            profile.throw_if_invalid()
        assert str(exc_info.value).startswith("Validation failed: name: ")
        assert len(exc_info.value.errors) == 1

    def test_throw_if_valid_is_silent(self) -> None:
        Profile(name="Ann").throw_if_invalid()


class TestDataclassValidation:
    def test_valid(self) -> None:
        assert Line(sku="ABC").validate().is_valid

    def test_invalid(self) -> None:
        result = Line(sku="A", quantity=0).validate()
        assert {tuple(error.member_names) for error in result.errors} == {("sku",), ("quantity",)}


class TestValidationFailure:
    def test_str_with_members(self) -> None:
        assert str(ValidationFailure(member_names=["a", "b"], message="bad")) == "a, b: bad"

    def test_str_without_members(self) -> None:
        assert str(ValidationFailure(message="bad")) == "bad"

    def test_empty_result_is_valid(self) -> None:
        assert ValidateResult().is_valid
