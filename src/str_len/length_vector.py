"""String length measured in four units at once.

For the family emoji "👨‍👩‍👧‍👦":

    byte       25  (UTF-8)
    utf16      11  (UTF-16 code units; JS, Java, NSString)
    codepoint   7  (Unicode scalar values; Python ``len``)
    grapheme    1  (extended grapheme clusters; what a reader calls a character)

Lengths only accumulate: two measured vectors add componentwise because
concatenation lengths add independently in each encoding. There is no
subtraction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from str_len.errors import InvalidRange

if TYPE_CHECKING:
    from str_len.range_vector import RangeVector


@dataclass(frozen=True, slots=True)
class LengthVector:
    """Sizes of one string in bytes, UTF-16 units, code points and graphemes."""

    byte: int = 0
    utf16: int = 0
    codepoint: int = 0
    grapheme: int = 0

    def __post_init__(self) -> None:
        for name in ("byte", "utf16", "codepoint", "grapheme"):
            value = getattr(self, name)
            if value < 0:
                raise InvalidRange(f"LengthVector.{name} must be >= 0, got {value}")

    @classmethod
    def zero(cls) -> LengthVector:
        return cls()

    @classmethod
    def from_scalar(cls, n: int) -> LengthVector:
        """Same count in every unit (ASCII text, or a known-uniform span)."""
        return cls(byte=n, utf16=n, codepoint=n, grapheme=n)

    @classmethod
    def from_string(cls, text: str) -> LengthVector:
        """Measure ``text`` with the length oracle."""
        from str_len.oracle import measure

        return measure(text)

    @classmethod
    def from_range(cls, rng: RangeVector) -> LengthVector:
        """Take the length portion of each coordinate of ``rng``."""
        return cls(
            byte=rng.byte.length,
            utf16=rng.utf16.length,
            codepoint=rng.codepoint.length,
            grapheme=rng.grapheme.length,
        )

    @property
    def is_ordered(self) -> bool:
        """True when ``grapheme <= codepoint <= utf16 <= byte``."""
        return self.grapheme <= self.codepoint <= self.utf16 <= self.byte

    def add(self, other: LengthVector | str) -> LengthVector:
        """Componentwise sum; a string is measured first."""
        if isinstance(other, str):
            other = LengthVector.from_string(other)
        return LengthVector(
            byte=self.byte + other.byte,
            utf16=self.utf16 + other.utf16,
            codepoint=self.codepoint + other.codepoint,
            grapheme=self.grapheme + other.grapheme,
        )

    def __add__(self, other: object) -> LengthVector:
        if not isinstance(other, LengthVector | str):
            return NotImplemented
        return self.add(other)
