"""Tests for str_len.oracle."""
from __future__ import annotations

import pytest

from str_len.errors import OracleFailure
from str_len.length_vector import LengthVector
from str_len.oracle import graphemes, measure, slice_by_byte

FAMILY = "\U0001F468\u200d\U0001F469\u200d\U0001F467\u200d\U0001F466"

SAMPLES = [
    "",
    "a",
    "one two",
    "óne two",
    "é",
    "\U0001F600",
    "\U0001F1FA\U0001F1F8",
    "\U0001F44D\U0001F3FD",
    FAMILY,
    FAMILY + "ne two",
    "日本語",
    "नमस्ते",
]


class TestMeasure:
    def test_family_emoji(self) -> None:
        assert measure(FAMILY) == LengthVector(byte=25, utf16=11, codepoint=7, grapheme=1)

    def test_ascii_is_uniform(self) -> None:
        assert measure("one two") == LengthVector.from_scalar(7)

    def test_empty(self) -> None:
        assert measure("") == LengthVector.zero()

    def test_precomposed_vs_combining(self) -> None:
        assert measure("é") == LengthVector(byte=2, utf16=1, codepoint=1, grapheme=1)
        assert measure("e\u0301") == LengthVector(byte=3, utf16=2, codepoint=2, grapheme=1)

    def test_astral_code_point_is_surrogate_pair(self) -> None:
        assert measure("\U0001F600") == LengthVector(byte=4, utf16=2, codepoint=1, grapheme=1)

    def test_flag_is_one_grapheme(self) -> None:
        assert measure("\U0001F1FA\U0001F1F8") == LengthVector(
            byte=8, utf16=4, codepoint=2, grapheme=1
        )

    @pytest.mark.parametrize("text", SAMPLES)
    def test_unit_ordering(self, text: str) -> None:
        length = measure(text)
        assert length.grapheme <= length.codepoint <= length.utf16 <= length.byte

    def test_non_string_rejected(self) -> None:
        with pytest.raises(OracleFailure):
            measure(b"abc")  # type: ignore[arg-type]

    def test_lone_surrogate_rejected(self) -> None:
        with pytest.raises(OracleFailure):
            measure("a\ud800b")


class TestGraphemes:
    def test_split(self) -> None:
        assert graphemes(FAMILY + "a" + "e\u0301") == [FAMILY, "a", "e\u0301"]


class TestSliceByByte:
    def test_ascii(self) -> None:
        assert slice_by_byte("one two", 4, 3) == "two"

    def test_after_multibyte(self) -> None:
        assert slice_by_byte("óne two", 5, 3) == "two"
        assert slice_by_byte(FAMILY + "ne two", 28, 3) == "two"

    def test_split_code_point_rejected(self) -> None:
        with pytest.raises(OracleFailure):
            slice_by_byte(FAMILY, 2, 3)

    def test_out_of_bounds_rejected(self) -> None:
        with pytest.raises(OracleFailure):
            slice_by_byte("abc", 2, 5)
