"""Pattern variants built on a base Hilbert curve.

Each function takes the base curve and an offset distance and returns
the point sequences to draw, in draw order.  Distances are in canvas
units; useful values are a fraction of the leaf-cell size.

    plain    the curve alone
    double   curve + small corner-bisector offset (near-parallel pair)
    wonky    curve + large corner-bisector offset (crosses itself)
    precise  curve + miter-corrected offset (true constant width)
    ribbon   precise offsets on both sides of the curve
"""

from __future__ import annotations

from typing import Callable, Sequence

from hilbert_plot.geometry.offset import offset, precise_offset
from hilbert_plot.geometry.vector import Vector2

Curve = tuple[Vector2, ...]
PatternFn = Callable[[Sequence[Vector2], float], list[Curve]]


def plain(curve: Sequence[Vector2], distance: float = 0.0) -> list[Curve]:
    """Just the curve.  *distance* is ignored."""
    return [tuple(curve)]


def double(curve: Sequence[Vector2], distance: float) -> list[Curve]:
    """Curve plus a near-parallel bisector offset."""
    return [tuple(curve), offset(curve, distance)]


def wonky(curve: Sequence[Vector2], distance: float) -> list[Curve]:
    """Curve plus a bisector offset large enough to cross over itself.

    Same algorithm as ``double``; only the configured distance differs.
    """
    return [tuple(curve), offset(curve, distance)]


def precise(curve: Sequence[Vector2], distance: float) -> list[Curve]:
    """Curve plus a constant-width perpendicular offset."""
    return [tuple(curve), precise_offset(curve, distance)]


def ribbon(curve: Sequence[Vector2], distance: float) -> list[Curve]:
    """The curve flanked by perpendicular offsets on both sides."""
    return [
        precise_offset(curve, distance),
        tuple(curve),
        precise_offset(curve, -distance),
    ]


PATTERN_MAP: dict[str, PatternFn] = {
    "plain": plain,
    "double": double,
    "wonky": wonky,
    "precise": precise,
    "ribbon": ribbon,
}


def get_pattern(name: str) -> PatternFn:
    """Look up a pattern by name or raise ``KeyError`` listing the options."""
    try:
        return PATTERN_MAP[name]
    except KeyError:
        raise KeyError(
            f"Unknown pattern '{name}'. Available: {list(PATTERN_MAP)}"
        ) from None
