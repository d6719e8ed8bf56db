"""AttributeValidator — on-demand re-validation of models and dataclasses.

Pydantic validates on construction, but instances mutated afterwards (or
built with ``model_construct``) can drift out of their declared
constraints.  Mixing in :class:`AttributeValidator` lets callers re-check an
instance and collect every failure instead of stopping at the first.
"""

from __future__ import annotations

import dataclasses
from typing import Any

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from cloudcore.errors import ValidateError


class ValidationFailure(BaseModel):
    model_config = {"frozen": True}

    member_names: list[str] = Field(default_factory=list)
    message: str

    def __str__(self) -> str:
        members = ", ".join(self.member_names)
        return f"{members}: {self.message}" if members else self.message


class ValidateResult(BaseModel):
    model_config = {"frozen": True}

    errors: list[ValidationFailure] = Field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    @classmethod
    def from_validation_error(cls, exc: ValidationError) -> ValidateResult:
        return cls(
            errors=[
                ValidationFailure(
                    member_names=[".".join(str(part) for part in err["loc"])] if err["loc"] else [],
                    message=err["msg"],
                )
                for err in exc.errors()
            ]
        )


def _current_values(obj: Any) -> dict[str, Any]:
    if isinstance(obj, BaseModel):
        return obj.model_dump(by_alias=True, warnings=False)
    if dataclasses.is_dataclass(obj):
        return {f.name: getattr(obj, f.name) for f in dataclasses.fields(obj) if f.init}
    raise TypeError(f"{type(obj).__name__} is neither a pydantic model nor a dataclass")


class AttributeValidator:
    """Mixin adding ``validate()`` and ``throw_if_invalid()``.

    Works on pydantic models and dataclasses; constraints come from the
    field declarations (``Field(...)``, ``Annotated`` metadata).
    """

    def validate(self) -> ValidateResult:  # type: ignore[override]
        data = _current_values(self)
        try:
            if isinstance(self, BaseModel):
                type(self).model_validate(data)
            else:
                TypeAdapter(type(self)).validate_python(data)
        except ValidationError as exc:
            return ValidateResult.from_validation_error(exc)
        return ValidateResult()

    def throw_if_invalid(self) -> None:
        """Raise :class:`ValidateError` listing every failure."""
        result = self.validate()
        if not result.is_valid:
            raise ValidateError(result)
