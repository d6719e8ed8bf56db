"""Tests for string helpers."""

from __future__ import annotations

import io
import os
import uuid

import pytest

from cloudcore.domain.strings import (
    EMPTY_UUID,
    StringCasing,
    add_space_before_caps,
    contains_equivalent,
    default_if_empty,
    ends_with_equivalent,
    find_between_delimiters,
    is_equivalent_to,
    is_null_or_empty,
    is_null_or_whitespace,
    multi_line,
    read_contents,
    remove_multiple,
    remove_non_alphanumeric,
    replace_all,
    replace_each,
    replace_multiple,
    size_in_bytes,
    starts_with_equivalent,
    substring_between,
    throw_if_null,
    throw_if_null_or_whitespace,
    to_bool,
    to_bytes,
    to_int,
    to_stream,
    to_uuid,
    with_casing,
)

LOREM = (
    "Lorem ipsum dolor sit amet, consectetur adipiscing elit. Excepteur sint occaecat "
    "cupidatat non proident, sunt in culpa qui officia deserunt mollit anim id est laborum."
)


class TestCleaning:
    def test_remove_non_alphanumeric(self) -> None:
        source = f"This\n is  {os.linesep}   a   cleaned string ! - £$$%(*71 "
        assert remove_non_alphanumeric(source) == "This is a cleaned string 71 "

    def test_remove_multiple_lowercases(self) -> None:
        assert remove_multiple("my test string is here", "is", "test") == "my  string  here"

    def test_replace_each(self) -> None:
        result = replace_each("my test string is here", "text", "is", "test")
        assert result == "my text string text here"

    def test_replace_each_lowercases(self) -> None:
        assert replace_each("Hello World", "x", "zzz") == "hello world"

    def test_replace_multiple_preserves_case(self) -> None:
        result = replace_multiple("Hello World", {"Hello": "Goodbye", "World": "Moon"})
        assert result == "Goodbye Moon"

    def test_replace_all_drops_empty_parts(self) -> None:
        assert replace_all("a,,b;c", ",;", "-") == "a-b-c"

    def test_replace_all_without_chars(self) -> None:
        assert replace_all("abc", "", "-") == "abc"

    def test_multi_line(self) -> None:
        assert multi_line("lineone", "linetwo") == f"lineone{os.linesep}linetwo"

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("MyTestString", "My Test String"),
            ("already spaced", "already spaced"),
            ("ABC", "ABC"),
            (None, None),
        ],
    )
    def test_add_space_before_caps(self, text: str | None, expected: str | None) -> None:
        assert add_space_before_caps(text) == expected


class TestDefaults:
    def test_default_if_empty(self) -> None:
        assert default_if_empty("", "default") == "default"
        assert default_if_empty(None, "default") == "default"
        assert default_if_empty("value", "default") == "value"

    def test_null_predicates(self) -> None:
        assert is_null_or_empty(None)
        assert is_null_or_empty("")
        assert not is_null_or_empty(" ")
        assert is_null_or_whitespace(" \t")
        assert not is_null_or_whitespace("x")

    def test_throw_if_null(self) -> None:
        with pytest.raises(ValueError, match="thing"):
            throw_if_null(None, "thing")
        assert throw_if_null(0) == 0

    def test_throw_if_null_or_whitespace(self) -> None:
        with pytest.raises(ValueError):
            throw_if_null_or_whitespace("   ")
        assert throw_if_null_or_whitespace("ok") == "ok"


class TestComparison:
    def test_is_equivalent_to(self) -> None:
        assert is_equivalent_to("ABC", "abc")
        assert not is_equivalent_to("abc", "abd")
        assert is_equivalent_to(None, None)
        assert not is_equivalent_to("abc", None)

    def test_contains_starts_ends(self) -> None:
        assert contains_equivalent("Hello World", "O WO")
        assert starts_with_equivalent("Hello World", "hello")
        assert ends_with_equivalent("Hello World", "WORLD")
        assert not ends_with_equivalent("Hello World", "hello")

    def test_null_comparer_raises(self) -> None:
        with pytest.raises(ValueError):
            contains_equivalent("abc", None)
        with pytest.raises(ValueError):
            starts_with_equivalent(None, "a")


class TestParsing:
    def test_to_uuid(self) -> None:
        value = uuid.uuid4()
        assert to_uuid(str(value)) == value

    @pytest.mark.parametrize("text", [None, "", "not-a-guid"])
    def test_to_uuid_invalid_returns_empty(self, text: str | None) -> None:
        assert to_uuid(text) == EMPTY_UUID

    def test_to_int(self) -> None:
        assert to_int(" 42 ") == 42

    def test_to_int_rejects_blank_and_junk(self) -> None:
        with pytest.raises(ValueError):
            to_int("")
        with pytest.raises(ValueError):
            to_int("forty")

    @pytest.mark.parametrize(
        ("text", "expected"),
        [("yes", True), ("True", True), (" 1", True), ("no", False), ("false", False), ("0", False)],
    )
    def test_to_bool(self, text: str, expected: bool) -> None:
        assert to_bool(text) is expected

    def test_to_bool_blank_raises(self) -> None:
        with pytest.raises(ValueError):
            to_bool(" ")


class TestBytes:
    def test_size_in_bytes(self) -> None:
        assert size_in_bytes("") == 0
        assert size_in_bytes(None) == 0
        assert size_in_bytes("abc") == 3
        assert size_in_bytes("£") == 2
        assert size_in_bytes("abc", "utf-16-le") == 6

    def test_stream_round_trip(self) -> None:
        stream = to_stream("some text")
        assert isinstance(stream, io.BytesIO)
        stream.read()
        assert read_contents(stream) == "some text"

    def test_to_bytes(self) -> None:
        assert to_bytes("abc") == b"abc"


class TestDelimiters:
    def test_substring_between(self) -> None:
        assert substring_between("MyTest,String.IsThis", "MyTest,", ".IsThis") == "String"

    def test_substring_between_missing_delimiter(self) -> None:
        assert substring_between("MyTest,String", "MyTest,", ".IsThis") is None
        assert substring_between("abc", "x", "c") is None
        assert substring_between(None, "a", "b") is None

    def test_find_between_delimiters(self) -> None:
        assert find_between_delimiters(LOREM, "mollit", "est") == [" anim id "]

    def test_find_between_delimiters_keeps_duplicates(self) -> None:
        text = "{{a}} and {{B}} then {{a}}"
        assert find_between_delimiters(text, "{{", "}}") == ["a", "B", "a"]

    def test_find_between_delimiters_spans_lines(self) -> None:
        assert find_between_delimiters("[one\ntwo]", "[", "]") == ["one\ntwo"]

    def test_find_between_delimiters_none(self) -> None:
        assert find_between_delimiters("nothing here", "{{", "}}") == []


class TestCasing:
    @pytest.mark.parametrize(
        ("casing", "expected"),
        [
            (StringCasing.UNCHANGED, "MixedCase"),
            (StringCasing.LOWERCASE, "mixedcase"),
            (StringCasing.UPPERCASE, "MIXEDCASE"),
        ],
    )
    def test_with_casing(self, casing: StringCasing, expected: str) -> None:
        assert with_casing("MixedCase", casing) == expected
