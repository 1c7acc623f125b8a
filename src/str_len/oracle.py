"""Length oracle: measures strings in all four units and slices by byte.

Grapheme clusters follow the Unicode extended grapheme cluster rules as
implemented by the ``regex`` package (``\\X``), which covers emoji ZWJ
sequences, skin-tone modifiers and regional-indicator pairs. UTF-16 units
are counted from the ``utf-16-le`` encoding so astral code points count as
a surrogate pair.

Every function here is pure and synchronous; any change to the counting
rules changes all downstream range arithmetic.
"""

from __future__ import annotations

import logging

import regex

from str_len.errors import OracleFailure
from str_len.length_vector import LengthVector

log = logging.getLogger(__name__)

_GRAPHEME_RE = regex.compile(r"\X")


def _require_text(text: object) -> str:
    if not isinstance(text, str):
        raise OracleFailure(f"expected str, got {type(text).__name__}")
    return text


def _utf8(text: str) -> bytes:
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as exc:
        log.debug("cannot encode %r: %s", text, exc)
        raise OracleFailure(f"string is not valid Unicode: {exc.reason}") from exc


def graphemes(text: str) -> list[str]:
    """Split ``text`` into extended grapheme clusters."""
    return _GRAPHEME_RE.findall(_require_text(text))


def measure(text: str) -> LengthVector:
    """Measure ``text`` in bytes, UTF-16 units, code points and graphemes."""
    text = _require_text(text)
    encoded = _utf8(text)
    return LengthVector(
        byte=len(encoded),
        utf16=len(text.encode("utf-16-le")) // 2,
        codepoint=len(text),
        grapheme=len(_GRAPHEME_RE.findall(text)),
    )


def slice_by_byte(text: str, start: int, length: int) -> str:
    """Return the substring at UTF-8 byte offset ``start`` spanning ``length`` bytes.

    The slice must lie inside the string and on code point boundaries.
    """
    encoded = _utf8(_require_text(text))
    if start < 0 or length < 0 or start + length > len(encoded):
        raise OracleFailure(
            f"byte slice {start}:{length} is outside a {len(encoded)}-byte string"
        )
    part = encoded[start:start + length]
    try:
        return part.decode("utf-8")
    except UnicodeDecodeError as exc:
        log.debug("byte slice %d:%d splits a code point: %s", start, length, exc)
        raise OracleFailure(
            f"byte slice {start}:{length} does not fall on code point boundaries"
        ) from exc
