"""A span of one string expressed in all four measurement units.

Take "👨‍👩‍👧‍👦family👨‍👩‍👧‍👦". The second emoji sits at:

    byte       31:25
    utf16      17:11
    codepoint  13:7
    grapheme    7:1

Use the coordinate matching the platform doing the slicing. If unsure,
measure "👨‍👩‍👧‍👦" on that platform: 1 means grapheme, 7 codepoint,
11 utf16, 25 byte.

Chained ranges are contiguous per coordinate: every start follows its own
predecessor's stop, so adjacency in one unit says nothing about the offset
in another. The helpers here keep the four coordinates in lockstep.
"""

from __future__ import annotations

import functools
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Literal

from str_len.errors import InvalidRange
from str_len.length_vector import LengthVector
from str_len.oracle import slice_by_byte
from str_len.unit_range import UnitRange

Coordinate = Literal["byte", "utf16", "codepoint", "grapheme"]

COORDINATES: tuple[Coordinate, ...] = ("byte", "utf16", "codepoint", "grapheme")


@dataclass(frozen=True, slots=True)
class RangeVector:
    """Four UnitRanges describing one logical span."""

    byte: UnitRange
    utf16: UnitRange
    codepoint: UnitRange
    grapheme: UnitRange

    def __post_init__(self) -> None:
        empties = {getattr(self, c).is_empty for c in COORDINATES}
        if len(empties) > 1:
            raise InvalidRange(
                "coordinates must be all empty or all non-empty, got "
                + ", ".join(f"{c}={getattr(self, c)}" for c in COORDINATES)
            )

    @classmethod
    def zero(cls) -> RangeVector:
        return _ZERO

    @classmethod
    def uniform(cls, rng: UnitRange) -> RangeVector:
        """The same UnitRange in every coordinate."""
        return cls(byte=rng, utf16=rng, codepoint=rng, grapheme=rng)

    @property
    def is_empty(self) -> bool:
        return self.byte.is_empty

    def coordinate(self, name: Coordinate) -> UnitRange:
        if name not in COORDINATES:
            raise KeyError(name)
        return getattr(self, name)

    def length(self) -> LengthVector:
        return LengthVector.from_range(self)

    def __str__(self) -> str:
        return "|".join(str(getattr(self, c)) for c in COORDINATES)


_ZERO = RangeVector.uniform(UnitRange.empty())


def _per_coordinate(build: Callable[[Coordinate], UnitRange]) -> RangeVector:
    return RangeVector(**{c: build(c) for c in COORDINATES})


def _as_length(value: LengthVector | str) -> LengthVector:
    if isinstance(value, str):
        return LengthVector.from_string(value)
    return value


def _as_range(value: RangeVector | LengthVector | int) -> RangeVector:
    if isinstance(value, RangeVector):
        return value
    if isinstance(value, LengthVector):
        return range_from(_ZERO, value)
    # An empty range ending just before the point, so the next range starts there.
    return range_from_point(LengthVector.zero(), value)


# ---------------------------------------------------------------------------
# Derivation
# ---------------------------------------------------------------------------

def range_from(
    preceding: RangeVector | LengthVector | int,
    new_length: LengthVector | str,
) -> RangeVector:
    """Range of ``new_length`` placed right after ``preceding`` in every unit.

    ``preceding`` may be a RangeVector, a LengthVector (read as the
    zero-based range of that length) or an integer point.
    """
    prev = _as_range(preceding)
    length = _as_length(new_length)
    return _per_coordinate(
        lambda c: UnitRange.new(getattr(prev, c).stop + 1, getattr(length, c))
    )


def range_from_point(length: LengthVector | str, point: int) -> RangeVector:
    """Range of ``length`` with the same scalar start in every unit.

    Use when no per-unit offset is known, e.g. a position inside ASCII text.
    """
    length = _as_length(length)
    return _per_coordinate(lambda c: UnitRange.new(point, getattr(length, c)))


def range_from_length(
    offset: LengthVector,
    new_length: LengthVector | str,
) -> RangeVector:
    """Range of ``new_length`` starting at the counts of ``offset``."""
    length = _as_length(new_length)
    return _per_coordinate(
        lambda c: UnitRange.new(getattr(offset, c), getattr(length, c))
    )


def next_range(
    offset: LengthVector,
    value: LengthVector | str,
) -> tuple[RangeVector, LengthVector]:
    """Range for ``value`` after ``offset``, plus the length up to its end.

    >>> rng, total = next_range(LengthVector.from_string("1"), "two")
    >>> str(rng), total.byte
    ('1:3|1:3|1:3|1:3', 4)
    """
    length = _as_length(value)
    return range_from_length(offset, length), offset.add(length)


def ranges(
    strings: Iterable[str],
    after: RangeVector | LengthVector | int | None = None,
) -> list[RangeVector]:
    """Consecutive ranges for ``strings`` laid end to end."""
    prev = _ZERO if after is None else _as_range(after)
    out: list[RangeVector] = []
    for text in strings:
        prev = range_from(prev, text)
        out.append(prev)
    return out


# ---------------------------------------------------------------------------
# Repositioning
# ---------------------------------------------------------------------------

def shift(target: RangeVector, following: RangeVector | None = None) -> RangeVector:
    """Move ``target`` so it starts right after ``following``; lengths kept.

    ``following`` defaults to the zero range, i.e. the start of the string.
    """
    prev = _ZERO if following is None else following
    return _per_coordinate(
        lambda c: UnitRange.new(getattr(prev, c).stop + 1, getattr(target, c).length)
    )


def add(rng: RangeVector, length: LengthVector | str) -> RangeVector:
    """Extend every coordinate of ``rng`` by ``length``; starts are kept."""
    delta = _as_length(length)
    return _per_coordinate(lambda c: getattr(rng, c).extend(getattr(delta, c)))


def replace(rng: RangeVector, value: LengthVector | str) -> RangeVector:
    """Range left behind after replacing ``rng`` with ``value``."""
    length = _as_length(value)
    return _per_coordinate(
        lambda c: UnitRange.new(getattr(rng, c).start, getattr(length, c))
    )


def shift_to_zero(rng: RangeVector) -> RangeVector:
    """Same lengths, as if the span were at the start of the string."""
    return _per_coordinate(lambda c: UnitRange.new(0, getattr(rng, c).length))


def extend_to_zero(rng: RangeVector) -> RangeVector:
    """Prefix span: every coordinate runs from 0 to its current stop.

          |----|       =>  |----------|
    __________________ =>  __________________
    """
    return _per_coordinate(lambda c: UnitRange.from_stop(0, getattr(rng, c).stop))


# ---------------------------------------------------------------------------
# Combination and ordering
# ---------------------------------------------------------------------------

def combine(items: Sequence[RangeVector]) -> RangeVector:
    """Collapse several ranges into the single span they cover.

    Items are sorted by byte start, then each coordinate runs from the
    first item's start to the last item's stop. The ranges with the
    smallest and largest start are assumed to bound the whole span, and
    every coordinate is assumed to order the same way as ``byte``; neither
    is checked.
    """
    if not items:
        raise InvalidRange("cannot combine an empty list of ranges")
    if len(items) == 1:
        return items[0]
    ordered = sorted(items, key=lambda r: r.byte.start)
    first, last = ordered[0], ordered[-1]
    return _per_coordinate(
        lambda c: UnitRange.from_stop(getattr(first, c).start, getattr(last, c).stop)
    )


def merge(left: RangeVector | None, right: RangeVector | None) -> RangeVector | None:
    """Combine two ranges, passing the other through when one is None."""
    if left is None:
        return right
    if right is None:
        return left
    return combine([left, right])


def compare(left: RangeVector, right: RangeVector) -> int:
    """Order two ranges by byte start only: -1, 0 or 1.

    Ranges do not sort like integers (is 1..4 before or after 2..3?). This
    only looks at the start, which is enough for non-overlapping spans of
    one string. Overlapping spans need ``overlap.classify`` instead.
    """
    a, b = left.byte.start, right.byte.start
    return (a > b) - (a < b)


def sort_ranges(items: Iterable[RangeVector]) -> list[RangeVector]:
    return sorted(items, key=functools.cmp_to_key(compare))


# ---------------------------------------------------------------------------
# Slicing
# ---------------------------------------------------------------------------

def slice_text(text: str, rng: RangeVector) -> str:
    """Extract the span from ``text`` using the byte coordinate."""
    return slice_by_byte(text, rng.byte.start, rng.byte.length)
