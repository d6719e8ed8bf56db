"""Tests for sequence, stream and ordering helpers."""

from __future__ import annotations

import io

import pytest

from cloudcore.domain.sequences import (
    batch,
    contains_equivalent,
    copy_to_bytes,
    semi_numeric_compare,
    semi_numeric_key,
    sub_array,
    to_base64,
)


class TestSequences:
    def test_contains_equivalent(self) -> None:
        assert contains_equivalent(["Alpha", "Beta"], "beta")
        assert not contains_equivalent(["Alpha"], "gamma")

    @pytest.mark.parametrize("items", [None, []])
    def test_contains_equivalent_requires_items(self, items: list[str] | None) -> None:
        with pytest.raises(ValueError):
            contains_equivalent(items, "a")

    def test_batch(self) -> None:
        assert list(batch(range(5), 2)) == [[0, 1], [2, 3], [4]]
        assert list(batch([], 3)) == []

    def test_batch_rejects_zero(self) -> None:
        with pytest.raises(ValueError):
            list(batch([1], 0))

    def test_sub_array(self) -> None:
        assert sub_array([1, 2, 3, 4], 1, 2) == [2, 3]
        assert sub_array("abc", 0, 3) == ["a", "b", "c"]

    def test_sub_array_out_of_range(self) -> None:
        with pytest.raises(IndexError):
            sub_array([1, 2], 1, 5)


class TestStreams:
    def test_copy_rewinds(self) -> None:
        stream = io.BytesIO(b"payload")
        stream.read()
        assert copy_to_bytes(stream) == b"payload"

    def test_to_base64(self) -> None:
        assert to_base64(io.BytesIO(b"hello")) == "aGVsbG8="


class TestSemiNumeric:
    def test_numbers_by_value(self) -> None:
        assert semi_numeric_compare("2", "10") < 0
        assert semi_numeric_compare("10", "10.0") == 0

    def test_numbers_before_text(self) -> None:
        assert semi_numeric_compare("5", "apple") < 0
        assert semi_numeric_compare("apple", "5") > 0

    def test_trailing_numbers(self) -> None:
        assert semi_numeric_compare("item2", "item10") < 0
        assert semi_numeric_compare("Item10", "item2") > 0

    def test_text_case_insensitive(self) -> None:
        assert semi_numeric_compare("Apple", "apple") == 0
        assert semi_numeric_compare("apple", "Banana") < 0

    def test_sort_key(self) -> None:
        values = ["item10", "b", "3", "item2", "A", "20"]
        assert sorted(values, key=semi_numeric_key) == ["3", "20", "A", "b", "item2", "item10"]
