"""Tests for str_len.overlap."""
from __future__ import annotations

import itertools

import pytest

from str_len.codec import parse_range
from str_len.overlap import OVERLAP_KINDS, classify
from str_len.unit_range import UnitRange

_MIRROR = {
    "equal": "equal",
    "covers": "covered_by",
    "covered_by": "covers",
    "overlaps_start": "overlaps_end",
    "overlaps_end": "overlaps_start",
    "disjoint": "disjoint",
}


class TestClassify:
    @pytest.mark.parametrize(
        ("other", "expected"),
        [
            (UnitRange.new(11, 5), "disjoint"),
            (UnitRange.new(6, 3), "covers"),
            (UnitRange.new(3, 10), "covered_by"),
            (UnitRange.new(8, 10), "overlaps_start"),
            (UnitRange.new(3, 5), "overlaps_end"),
            (UnitRange.new(5, 5), "equal"),
        ],
    )
    def test_against_five_to_nine(self, other: UnitRange, expected: str) -> None:
        assert classify(UnitRange.new(5, 5), other) == expected

    def test_touching_edges_overlap(self) -> None:
        assert classify(UnitRange.new(5, 5), UnitRange.from_stop(9, 12)) == "overlaps_start"
        assert classify(UnitRange.new(5, 5), UnitRange.from_stop(1, 5)) == "overlaps_end"

    def test_range_vectors_use_byte_coordinate(self) -> None:
        a = parse_range("5:5|0:1")
        b = parse_range("6:3|40:1")
        assert classify(a, b) == "covers"

    def test_exhaustive_and_consistent(self) -> None:
        grid = [UnitRange.new(s, n) for s in range(0, 7) for n in range(1, 5)]
        for a, b in itertools.product(grid, repeat=2):
            kind = classify(a, b)
            assert kind in OVERLAP_KINDS
            assert classify(b, a) == _MIRROR[kind]
            shares_offset = bool(set(a) & set(b))
            assert (kind == "disjoint") is not shares_offset
