"""Offset curves derived from a polyline.

Both algorithms slide a window ``(a, b, c)`` of three consecutive points
over the source and emit at most one point per interior vertex ``b``.
The first and last source points never appear in the output.

``offset``
    Pushes ``b`` along the interior-angle bisector by ``distance``.
    Cheap and approximate: at sharp corners the result is closer to the
    segments than ``distance``.  Large distances make the offset cross
    itself, which is the intended "wonky" look.  Straight (collinear)
    windows have no bisector and emit nothing.

``precise_offset``
    Pushes ``b`` along the bisector of the two segment normals, scaled by
    the miter correction ``1 / sqrt((1 + cos) / 2)`` so the point is
    exactly ``distance`` from both adjacent (infinite) segment lines.
    Straight windows degrade gracefully to a plain normal offset.

Zero-length segments (duplicate consecutive points) are rejected with
``DegenerateGeometryError`` rather than producing NaN.
"""

from __future__ import annotations

import logging
from typing import Iterator, Sequence

import numpy as np

from hilbert_plot.geometry.vector import Vector2

logger = logging.getLogger(__name__)

COLLINEAR_TOLERANCE = 1e-6
"""Bisector sums at or below this length count as collinear."""


class DegenerateGeometryError(ValueError):
    """Raised when input points do not define a usable corner."""

    pass


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _unit(v: Vector2, what: str) -> Vector2:
    length = v.length()
    if not np.isfinite(length) or length == 0.0:
        raise DegenerateGeometryError(
            f"Zero-length or non-finite segment {what}: {v!r}"
        )
    return v / length


def _windows(
    points: Sequence[Vector2],
) -> Iterator[tuple[int, Vector2, Vector2, Vector2]]:
    """Yield ``(index_of_b, a, b, c)`` for every interior point."""
    pts = tuple(points)
    for i in range(1, len(pts) - 1):
        yield i, pts[i - 1], pts[i], pts[i + 1]


# ---------------------------------------------------------------------------
# Corner direction
# ---------------------------------------------------------------------------


def corner_direction(
    a: Vector2,
    b: Vector2,
    c: Vector2,
    tolerance: float = COLLINEAR_TOLERANCE,
) -> Vector2 | None:
    """Unit vector bisecting the angle ``a-b-c`` at vertex *b*.

    Parameters
    ----------
    a, b, c : Vector2
        Consecutive points; *b* is the corner.
    tolerance : float
        Bisector sums shorter than this are treated as collinear.

    Returns
    -------
    Vector2 | None
        Bisector pointing toward the side of *a* and *c*, or ``None``
        when the three points lie on a straight line.

    Raises
    ------
    DegenerateGeometryError
        If *a* or *c* coincides with *b*.
    """
    ba = _unit(a - b, "b->a")
    bc = _unit(c - b, "b->c")
    total = ba + bc
    if total.length() <= tolerance:
        return None
    return total.normalize()


# ---------------------------------------------------------------------------
# Offset algorithms
# ---------------------------------------------------------------------------


def offset(points: Sequence[Vector2], distance: float) -> tuple[Vector2, ...]:
    """Corner-bisector offset of *points*.

    Parameters
    ----------
    points : Sequence[Vector2]
        Source polyline.
    distance : float
        Signed displacement along each corner bisector.  Positive moves
        toward the inside of the corner.

    Returns
    -------
    tuple[Vector2, ...]
        At most ``len(points) - 2`` points; collinear corners are skipped.
    """
    result: list[Vector2] = []
    skipped = 0
    for i, a, b, c in _windows(points):
        try:
            direction = corner_direction(a, b, c)
        except DegenerateGeometryError as exc:
            raise DegenerateGeometryError(f"Point {i}: {exc}") from exc
        if direction is None:
            skipped += 1
            continue
        result.append(b + direction * distance)

    if skipped:
        logger.debug("offset: skipped %d collinear corner(s)", skipped)
    return tuple(result)


def precise_offset(
    points: Sequence[Vector2], distance: float,
) -> tuple[Vector2, ...]:
    """Miter-corrected perpendicular offset of *points*.

    Parameters
    ----------
    points : Sequence[Vector2]
        Source polyline.
    distance : float
        Signed perpendicular distance.  Positive lies on the
        ``(dy, -dx)`` side of the direction of travel.

    Returns
    -------
    tuple[Vector2, ...]
        Exactly ``len(points) - 2`` points (empty for fewer than 3).

    Raises
    ------
    DegenerateGeometryError
        On a zero-length segment, or where the path turns back on itself
        (the two normals cancel and the miter is unbounded).
    """
    result: list[Vector2] = []
    for i, a, b, c in _windows(points):
        try:
            ab = _unit(b - a, "a->b")
            bc = _unit(c - b, "b->c")
        except DegenerateGeometryError as exc:
            raise DegenerateGeometryError(f"Point {i}: {exc}") from exc

        ab_perp = ab.perpendicular()
        bc_perp = bc.perpendicular()
        normal_sum = ab_perp + bc_perp
        half_cos = (np.float32(1.0) + ab_perp.dot(bc_perp)) / np.float32(2.0)
        if normal_sum.length() <= COLLINEAR_TOLERANCE or half_cos <= 0.0:
            raise DegenerateGeometryError(
                f"Point {i}: path reverses direction at {b!r}"
            )

        bisector = normal_sum.normalize()
        length = np.float32(distance) / np.sqrt(half_cos)
        result.append(b + bisector * length)

    return tuple(result)
