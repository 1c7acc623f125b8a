"""Multi-unit string ranges: byte, UTF-16, code point and grapheme offsets.

An offset computed in one runtime is rarely valid in another. For
"👨‍👩‍👧‍👦ne two", Python's ``text[4:7]`` is "two"; the same numbers
slice UTF-8 bytes to part of the emoji and JavaScript's ``slice(4, 7)`` to
half a surrogate pair. This package measures a string in all four units at
once and carries ranges that stay valid in each::

    >>> measure("👨‍👩‍👧‍👦")
    LengthVector(byte=25, utf16=11, codepoint=7, grapheme=1)
    >>> [str(r) for r in ranges(["👨‍👩‍👧‍👦", "a", "👨‍👩‍👧‍👦"])]
    ['0:25|0:11|0:7|0:1', '25:1|11:1|7:1|1:1', '26:25|12:11|8:7|2:1']

If the text can be sent pre-sliced, do that instead; ranges are for when a
span must be referenced by number.
"""

from str_len.codec import (
    compact,
    dumps,
    expand,
    format_range,
    from_dict,
    loads,
    parse_range,
    parse_unit_range,
    to_dict,
)
from str_len.errors import InvalidRange, OracleFailure, StrLenError, UnparsableLiteral
from str_len.length_vector import LengthVector
from str_len.oracle import graphemes, measure, slice_by_byte
from str_len.overlap import OVERLAP_KINDS, OverlapKind, classify
from str_len.range_vector import (
    COORDINATES,
    Coordinate,
    RangeVector,
    add,
    combine,
    compare,
    extend_to_zero,
    merge,
    next_range,
    range_from,
    range_from_length,
    range_from_point,
    ranges,
    replace,
    shift,
    shift_to_zero,
    slice_text,
    sort_ranges,
)
from str_len.unit_range import UnitRange, most_similar, redistribute

__all__ = [
    "COORDINATES",
    "Coordinate",
    "InvalidRange",
    "LengthVector",
    "OVERLAP_KINDS",
    "OracleFailure",
    "OverlapKind",
    "RangeVector",
    "StrLenError",
    "UnitRange",
    "UnparsableLiteral",
    "add",
    "classify",
    "combine",
    "compact",
    "compare",
    "dumps",
    "expand",
    "extend_to_zero",
    "format_range",
    "from_dict",
    "graphemes",
    "loads",
    "measure",
    "merge",
    "most_similar",
    "next_range",
    "parse_range",
    "parse_unit_range",
    "range_from",
    "range_from_length",
    "range_from_point",
    "ranges",
    "redistribute",
    "replace",
    "shift",
    "shift_to_zero",
    "slice_by_byte",
    "slice_text",
    "sort_ranges",
    "to_dict",
]
