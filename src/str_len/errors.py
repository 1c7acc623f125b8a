"""Error types raised by the range model, the codec and the length oracle."""

from __future__ import annotations


class StrLenError(ValueError):
    """Base class for every error raised by str_len."""


class InvalidRange(StrLenError):
    """A range or length violates its construction invariants."""


class UnparsableLiteral(StrLenError):
    """Text matched none of the accepted range grammars."""

    def __init__(self, text: object, reason: str = "") -> None:
        self.text = text
        detail = f": {reason}" if reason else ""
        super().__init__(f"Unparsable range literal {text!r}{detail}")


class OracleFailure(StrLenError):
    """The length oracle could not measure or slice its input."""
