"""Tests for OperationResult formatting."""

import json

from cloudcore.output.formatters import format_result
from cloudcore.services.result import OperationResult


class TestHumanOutput:
    def test_success_with_values(self) -> None:
        result = OperationResult.success("size", {"bytes": 1536, "size": "1.5 KB"})
        output = format_result(result)
        lines = output.splitlines()
        assert lines[0] == "OK: size"
        assert "  bytes: 1536" in lines
        assert "  size: 1.5 KB" in lines

    def test_entries_render_as_table(self) -> None:
        result = OperationResult.success(
            "flatten", {"count": 2, "entries": {"user:name": "Ann", "user:city": ""}}
        )
        output = format_result(result)
        assert "Key" in output
        assert "Value" in output
        assert "user:name" in output
        assert "Ann" in output
        assert "(empty)" in output
        assert "  count: 2" in output

    def test_markup_in_values_is_escaped(self) -> None:
        result = OperationResult.success("render", {"content": "[bold]x[/bold]"})
        assert "[bold]x[/bold]" in format_result(result)

    def test_nested_value_renders_as_json(self) -> None:
        result = OperationResult.success("render", {"keys": ["a", "b"]})
        assert '  keys: ["a","b"]' in format_result(result)

    def test_failure(self) -> None:
        result = OperationResult.failure("render", "TEMPLATE_MAPPING", "Template x not found")
        assert format_result(result) == "ERROR: render - Template x not found"


class TestJsonOutput:
    def test_round_trips(self) -> None:
        result = OperationResult.success("size", {"bytes": 10, "size": "10.0 bytes"})
        parsed = json.loads(format_result(result, json_output=True))
        assert parsed["ok"] is True
        assert parsed["op"] == "size"
        assert parsed["data"] == {"bytes": 10, "size": "10.0 bytes"}

    def test_failure(self) -> None:
        result = OperationResult.failure("flatten", "INVALID_JSON", "bad")
        parsed = json.loads(format_result(result, json_output=True))
        assert parsed["error"] == {"code": "INVALID_JSON", "message": "bad"}
