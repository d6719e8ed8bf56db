"""Tests for OperationResult and OperationError."""

import json

import pytest
from pydantic import ValidationError

from cloudcore.services.result import OperationError, OperationResult


class TestOperationResult:
    def test_success(self) -> None:
        result = OperationResult.success("flatten", {"count": 2}, warnings=["empty value"])
        assert result.ok is True
        assert result.op == "flatten"
        assert result.data == {"count": 2}
        assert result.warnings == ["empty value"]
        assert result.error is None

    def test_failure(self) -> None:
        result = OperationResult.failure("render", "INVALID_JSON", "Model is not JSON")
        assert result.ok is False
        assert result.data == {}
        assert result.error == OperationError(code="INVALID_JSON", message="Model is not JSON")

    def test_json_serialization(self) -> None:
        parsed = json.loads(OperationResult.success("size", {"bytes": 1024}).model_dump_json())
        assert parsed["ok"] is True
        assert parsed["data"]["bytes"] == 1024
        assert parsed["error"] is None

    def test_frozen(self) -> None:
        result = OperationResult.success("size", {})
        with pytest.raises(ValidationError):
            result.ok = False  # type: ignore[misc]
