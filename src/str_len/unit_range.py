"""Single-coordinate range with start/length/stop kept in lockstep.

A UnitRange is one coordinate system's view of a span. ``stop`` is
inclusive, so ``start + length - 1 == stop`` always holds; an empty range
has ``length == 0`` and ``stop == start - 1``.

Construction goes through named factories (``new``, ``from_stop``,
``from_until``, ``from_pair``, ``from_mapping``, ``empty``), each of which
normalizes to the canonical triple. Invalid values raise ``InvalidRange``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from str_len.errors import InvalidRange


class _Bounds(Protocol):
    @property
    def start(self) -> int: ...

    @property
    def stop(self) -> int: ...


def _require_int(name: str, value: object) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidRange(f"{name} must be an int, got {value!r}")


def _normalize(start: int, length: int, step: int = 1) -> UnitRange:
    _require_int("start", start)
    _require_int("length", length)
    if start < 0:
        raise InvalidRange(f"start must be >= 0, got {start}")
    if length < 0:
        raise InvalidRange(f"length must be >= 0, got {length}")
    return UnitRange(start=start, length=length, stop=start + length - 1, step=step)


@dataclass(frozen=True, slots=True)
class UnitRange:
    """Inclusive range over one measurement unit."""

    start: int
    length: int
    stop: int
    step: int = 1

    def __post_init__(self) -> None:
        for name in ("start", "length", "stop", "step"):
            _require_int(name, getattr(self, name))
        if self.start < 0:
            raise InvalidRange(f"start must be >= 0, got {self.start}")
        if self.length < 0:
            raise InvalidRange(f"length must be >= 0, got {self.length}")
        if self.step < 1:
            raise InvalidRange(f"step must be >= 1, got {self.step}")
        if self.start + self.length - 1 != self.stop:
            raise InvalidRange(
                f"start ({self.start}) + length ({self.length}) - 1 "
                f"!= stop ({self.stop})"
            )

    # -- factories ---------------------------------------------------------

    @classmethod
    def new(cls, start: int, length: int) -> UnitRange:
        """Range from a start and a length."""
        return _normalize(start, length)

    @classmethod
    def from_stop(cls, start: int, stop: int, step: int = 1) -> UnitRange:
        """Range from a start and an inclusive stop."""
        return _normalize(start, stop - start + 1, step)

    @classmethod
    def from_until(cls, start: int, until: int) -> UnitRange:
        """Range from a start and an exclusive end."""
        return _normalize(start, until - start)

    @classmethod
    def from_pair(cls, pair: Sequence[int]) -> UnitRange:
        """Range from a ``[start, length]`` pair."""
        if len(pair) != 2:
            raise InvalidRange(f"expected [start, length], got {list(pair)!r}")
        start, length = pair
        return _normalize(start, length)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> UnitRange:
        """Range from a ``{"start": ..., "length": ...}`` mapping."""
        try:
            start = data["start"]
            length = data["length"]
        except KeyError as exc:
            raise InvalidRange(f"range mapping is missing {exc.args[0]!r}") from exc
        return _normalize(start, length)

    @classmethod
    def empty(cls, start: int = 0) -> UnitRange:
        return _normalize(start, 0)

    # -- views -------------------------------------------------------------

    @property
    def is_empty(self) -> bool:
        return self.length == 0

    @property
    def until(self) -> int:
        """Exclusive end offset."""
        return self.stop + 1

    def to_range(self) -> range:
        return range(self.start, self.stop + 1, self.step)

    def as_pair(self) -> list[int]:
        """``[start, length]``; only unit-step ranges have this form."""
        if self.step != 1:
            raise InvalidRange(f"step {self.step} cannot be expressed as [start, length]")
        return [self.start, self.length]

    def __iter__(self) -> Iterator[int]:
        return iter(self.to_range())

    def __contains__(self, point: object) -> bool:
        return point in self.to_range()

    def __str__(self) -> str:
        return f"{self.start}:{self.length}"

    # -- transforms --------------------------------------------------------

    def shift_start(self, delta: int) -> UnitRange:
        """Move the range by ``delta``; length is unchanged."""
        return _normalize(self.start + delta, self.length)

    def extend(self, delta: int) -> UnitRange:
        """Grow (or shrink) the range by ``delta``; start is unchanged."""
        return _normalize(self.start, self.length + delta)

    # -- relations ---------------------------------------------------------

    def contains(self, inner: UnitRange) -> bool:
        return inner.start >= self.start and inner.stop <= self.stop

    def distance(self, point: int) -> int:
        """Distance from ``point`` to the nearest edge; 0 when inside.

        4..5, 5 -> 0
        1..5, 10 -> 5
        5..10, 0 -> 5
        """
        if self.start <= point <= self.stop:
            return 0
        return min(abs(self.start - point), abs(self.stop - point))

    def match(self, other: UnitRange) -> int | None:
        """Score how closely ``other`` matches this range. Lower is better.

        Identical ranges score 0. With a shared start the score is the
        signed difference of the stops; with a shared stop, the signed
        difference of the starts. Disjoint ranges have no relation and
        return None. Otherwise the score is the part of ``other`` lying
        outside its intersection with this range.

        10:20 vs 10:20 -> 0
        10:20 vs 10:18 -> -2
        10:20 vs 10:22 -> 2
        10:20 vs 35:30 -> None
        """
        if self.start == other.start and self.stop == other.stop:
            return 0
        if self.start == other.start:
            return other.stop - self.stop
        if self.stop == other.stop:
            return self.start - other.start
        if other.start > self.stop or other.stop < self.start:
            return None
        overlap = min(self.stop, other.stop) - max(self.start, other.start)
        return (other.stop - other.start) - overlap

    def similarity(self, other: UnitRange) -> int:
        """``|Δstart| + 2 * |Δlength|``; a length mismatch counts double."""
        return abs(self.start - other.start) + 2 * abs(self.length - other.length)


def most_similar(
    candidates: Iterable[UnitRange],
    target: UnitRange,
) -> tuple[int, int] | None:
    """Find the candidate most similar to ``target`` by a greedy scan.

    Candidates are scored in order and the scan stops at the first one
    whose score does not beat the running best. This is not an exhaustive
    minimum: pre-sort the candidates when the global best is required.

    Returns:
        ``(index, score)`` of the best candidate seen, or None when
        ``candidates`` is empty.
    """
    best: tuple[int, int] | None = None
    for index, candidate in enumerate(candidates):
        score = target.similarity(candidate)
        if best is not None and score >= best[1]:
            break
        best = (index, score)
    return best


def redistribute(
    values: Sequence[float],
    dst: _Bounds,
    *,
    src: _Bounds | None = None,
) -> list[float]:
    """Linearly rescale ``values`` from ``src`` bounds onto ``dst`` bounds.

    Without ``src`` the source bounds are ``[min(values), max(values)]``.
    A zero-width source has no defined scale and raises InvalidRange.
    """
    if src is None:
        if not values:
            return []
        old_min, old_max = min(values), max(values)
    else:
        old_min, old_max = src.start, src.stop
    if old_max == old_min:
        raise InvalidRange(
            f"cannot redistribute from a zero-width source [{old_min}, {old_max}]"
        )
    scale = (dst.stop - dst.start) / (old_max - old_min)
    return [(v - old_min) * scale + dst.start for v in values]
