"""Text, list and JSON forms of UnitRange and RangeVector.

Canonical text is four ``start:length`` fields in the fixed order
byte, utf16, codepoint, grapheme, joined by ``|``::

    "26:25|12:11|8:7|2:1"

Fewer fields are allowed; the last one is repeated into the missing
trailing coordinates, so ``"4:4"`` means ``4:4`` in every unit and
``"31:25|17:11"`` means codepoint and grapheme share ``17:11``. Inside a
field, ``10:15`` is start 10 length 15 and ``10-15`` is start 10 stop 15.
"""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from typing import Any

import orjson

from str_len.errors import StrLenError, UnparsableLiteral
from str_len.range_vector import COORDINATES, RangeVector
from str_len.unit_range import UnitRange

_FIELD_RE = re.compile(r"([0-9]+)([:-])([0-9]+)")

# Decimal forms are tried before hex, so "0030..0039" reads as 30..39;
# prefix with 0x to force hex.
_UNIT_RE = re.compile(
    r"""
    (?:
        (?P<start>[0-9]+):(?P<length>[0-9]+)
      | (?P<first>[0-9]+)-(?P<last>[0-9]+)
      | (?P<lo>[0-9]+)\.\.(?P<hi>[0-9]+)
      | (?P<point>[0-9]+)
      | (?:0[xX])?(?P<hex_lo>[0-9A-Fa-f]{4,6})\.\.(?:0[xX])?(?P<hex_hi>[0-9A-Fa-f]{4,6})
    )
    """,
    re.VERBOSE,
)

_ALIASES: dict[str, str] = {"code": "codepoint", "char": "grapheme"}


def _require_text(text: object) -> str:
    if not isinstance(text, str):
        raise UnparsableLiteral(text, "expected a string")
    return text.strip()


def _parse_field(field: str, original: str) -> UnitRange:
    m = _FIELD_RE.fullmatch(field.strip())
    if m is None:
        raise UnparsableLiteral(original, f"bad field {field!r}")
    a, sep, b = int(m.group(1)), m.group(2), int(m.group(3))
    if sep == ":":
        return UnitRange.new(a, b)
    return UnitRange.from_stop(a, b)


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------

def parse_unit_range(text: str) -> UnitRange:
    """Parse a bare UnitRange literal.

    Accepts ``start:length``, ``start-stop``, ``lo..hi`` (inclusive), a
    single ``n`` (the one-element range ``n..n``) and hex pairs such as
    ``0041..005A`` or ``0x1F600..0x1F64F``.
    """
    src = _require_text(text)
    m = _UNIT_RE.fullmatch(src)
    if m is None:
        raise UnparsableLiteral(text)
    if m.group("start") is not None:
        return UnitRange.new(int(m.group("start")), int(m.group("length")))
    if m.group("first") is not None:
        return UnitRange.from_stop(int(m.group("first")), int(m.group("last")))
    if m.group("lo") is not None:
        return UnitRange.from_stop(int(m.group("lo")), int(m.group("hi")))
    if m.group("point") is not None:
        point = int(m.group("point"))
        return UnitRange.from_stop(point, point)
    return UnitRange.from_stop(int(m.group("hex_lo"), 16), int(m.group("hex_hi"), 16))


def parse_range(text: str) -> RangeVector:
    """Parse 1-4 ``|``-separated fields into a RangeVector."""
    src = _require_text(text)
    fields = src.split("|")
    if not src or len(fields) > len(COORDINATES):
        raise UnparsableLiteral(text, "expected 1 to 4 fields")
    parsed = [_parse_field(f, src) for f in fields]
    parsed.extend([parsed[-1]] * (len(COORDINATES) - len(parsed)))
    return RangeVector(**dict(zip(COORDINATES, parsed, strict=True)))


def _format_field(rng: UnitRange) -> str:
    start, length = rng.as_pair()
    return f"{start}:{length}"


def format_range(rng: RangeVector, *, compact: bool = False) -> str:
    """Render ``rng`` as ``"b:l|u:l|c:l|g:l"``.

    With ``compact=True`` trailing fields equal to the one before them are
    dropped; ``parse_range`` restores them. The text form has no step, so
    a range with a non-unit step raises InvalidRange.
    """
    fields = [_format_field(getattr(rng, c)) for c in COORDINATES]
    if compact:
        while len(fields) > 1 and fields[-1] == fields[-2]:
            fields.pop()
    return "|".join(fields)


# ---------------------------------------------------------------------------
# Flat integer lists
# ---------------------------------------------------------------------------

def compact(rng: RangeVector) -> list[int]:
    """Flatten to 2, 4, 6 or 8 ints, collapsing trailing duplicate coordinates."""
    parts = [getattr(rng, c) for c in COORDINATES]
    while len(parts) > 1 and parts[-1] == parts[-2]:
        parts.pop()
    return [n for part in parts for n in part.as_pair()]


def expand(values: Sequence[int]) -> RangeVector:
    """Inverse of ``compact``."""
    if len(values) not in (2, 4, 6, 8):
        raise UnparsableLiteral(list(values), "expected 2, 4, 6 or 8 integers")
    parts = [UnitRange.new(values[i], values[i + 1]) for i in range(0, len(values), 2)]
    parts.extend([parts[-1]] * (len(COORDINATES) - len(parts)))
    return RangeVector(**dict(zip(COORDINATES, parts, strict=True)))


# ---------------------------------------------------------------------------
# Mapping / JSON
# ---------------------------------------------------------------------------

def _is_int(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _unit_from_value(value: Any) -> UnitRange:
    if isinstance(value, UnitRange):
        return value
    if isinstance(value, str):
        return parse_unit_range(value)
    if isinstance(value, Mapping):
        if not all(_is_int(value.get(k)) for k in ("start", "length")):
            raise UnparsableLiteral(dict(value), "start and length must be integers")
        return UnitRange.from_mapping(value)
    if isinstance(value, Sequence):
        if len(value) != 2 or not all(_is_int(v) for v in value):
            raise UnparsableLiteral(list(value), "expected [start, length] integers")
        return UnitRange.from_pair(value)
    raise UnparsableLiteral(value, "expected [start, length], a mapping or a string")


def to_dict(rng: RangeVector) -> dict[str, list[int]]:
    """``{"byte": [start, length], ...}`` in coordinate order."""
    return {c: getattr(rng, c).as_pair() for c in COORDINATES}


def from_dict(data: Mapping[str, Any]) -> RangeVector:
    """Build a RangeVector from ``to_dict`` output.

    ``code`` and ``char`` are accepted as aliases for ``codepoint`` and
    ``grapheme``.
    """
    if not isinstance(data, Mapping):
        raise UnparsableLiteral(data, "expected a mapping")
    normalized = {_ALIASES.get(k, k): v for k, v in data.items()}
    missing = [c for c in COORDINATES if c not in normalized]
    if missing:
        raise UnparsableLiteral(dict(data), f"missing coordinates {missing}")
    try:
        parts = {c: _unit_from_value(normalized[c]) for c in COORDINATES}
    except StrLenError:
        raise
    except (TypeError, ValueError) as exc:
        raise UnparsableLiteral(dict(data), str(exc)) from exc
    return RangeVector(**parts)


def dumps(rng: RangeVector) -> bytes:
    return orjson.dumps(to_dict(rng))


def loads(raw: bytes | str) -> RangeVector:
    """Decode JSON produced by ``dumps``; a JSON string is read as text form."""
    try:
        payload = orjson.loads(raw)
    except orjson.JSONDecodeError as exc:
        raise UnparsableLiteral(raw, f"invalid JSON: {exc}") from exc
    if isinstance(payload, str):
        return parse_range(payload)
    return from_dict(payload)
