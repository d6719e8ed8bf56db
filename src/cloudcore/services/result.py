"""OperationResult — what CLI operations hand to the output layer."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class OperationError(BaseModel):
    model_config = {"frozen": True}

    code: str
    message: str


class OperationResult(BaseModel):
    """Outcome of a user-facing operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"flatten"``).
        data: Operation-specific payload on success.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: OperationError | None = None

    @classmethod
    def success(cls, op: str, data: dict[str, Any], warnings: list[str] | None = None) -> OperationResult:
        return cls(ok=True, op=op, data=data, warnings=warnings or [])

    @classmethod
    def failure(cls, op: str, code: str, message: str) -> OperationResult:
        return cls(ok=False, op=op, error=OperationError(code=code, message=message))
