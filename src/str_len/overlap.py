"""Overlap classification between two spans.

Unlike ``range_vector.compare`` (an ordering by start), this describes how
two spans relate. Exactly one tag applies to any pair of non-empty ranges;
the checks run in priority order::

    equal           a == b
    covers          a contains b
    covered_by      b contains a
    overlaps_start  b begins inside a and runs past its stop
    overlaps_end    b begins before a and ends inside it
    disjoint        no shared offset
"""

from __future__ import annotations

from typing import Literal

from str_len.range_vector import RangeVector
from str_len.unit_range import UnitRange

OverlapKind = Literal[
    "equal", "covers", "covered_by", "overlaps_start", "overlaps_end", "disjoint",
]

OVERLAP_KINDS: tuple[OverlapKind, ...] = (
    "equal", "covers", "covered_by", "overlaps_start", "overlaps_end", "disjoint",
)


def classify(a: UnitRange | RangeVector, b: UnitRange | RangeVector) -> OverlapKind:
    """Classify ``b`` relative to ``a``. RangeVectors use the byte coordinate."""
    ra = a.byte if isinstance(a, RangeVector) else a
    rb = b.byte if isinstance(b, RangeVector) else b
    s1, e1 = ra.start, ra.stop
    s2, e2 = rb.start, rb.stop

    if s1 == s2 and e1 == e2:
        return "equal"
    if s1 <= s2 and e1 >= e2:
        return "covers"
    if s2 <= s1 and e1 <= e2:
        return "covered_by"
    if s1 <= s2 <= e1 and e2 >= e1:
        return "overlaps_start"
    if s2 <= s1 <= e2 and e2 <= e1:
        return "overlaps_end"
    return "disjoint"
