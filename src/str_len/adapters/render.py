"""Render-safe text for embedding ranges in generated markup.

A UnitRange renders as ``"start:stop"`` (inclusive stop), the form client
templates use in data attributes.
"""

from __future__ import annotations

import html

from str_len.range_vector import Coordinate, RangeVector
from str_len.unit_range import UnitRange


def render(rng: UnitRange) -> str:
    return html.escape(f"{rng.start}:{rng.stop}", quote=True)


def render_range(rng: RangeVector, coordinate: Coordinate = "byte") -> str:
    """Render one coordinate of a RangeVector (byte unless told otherwise)."""
    return render(rng.coordinate(coordinate))


def render_attribute(name: str, rng: UnitRange | RangeVector) -> str:
    """``name="start:stop"`` ready to drop into a tag."""
    value = render_range(rng) if isinstance(rng, RangeVector) else render(rng)
    return f'{html.escape(name, quote=True)}="{value}"'
