"""Hilbert curve point generation.

The curve is traced by classic quadrant recursion over a rectangle given
as ``(origin, x_edge, y_edge)``: each level splits the span into four
sub-rectangles, rotating / reflecting the axes so consecutive leaf cells
stay adjacent.  Each leaf emits its cell centre, so depth ``d`` yields
``4**d`` points.

Algorithm after https://www.fundza.com/algorithmic/space_filling/hilbert/basics/
"""

from __future__ import annotations

import logging

import numpy as np

from hilbert_plot.geometry.vector import Vector2, vec2

logger = logging.getLogger(__name__)

RECOMMENDED_MAX_DEPTH = 10
"""Depth 10 already produces ~1M points; deeper requests only warn."""


def _check_depth(depth: int) -> int:
    if isinstance(depth, bool) or not isinstance(depth, (int, np.integer)):
        raise ValueError(f"depth must be an integer, got {depth!r}")
    if depth < 0:
        raise ValueError(f"depth must be >= 0, got {depth}")
    return int(depth)


def point_count(depth: int) -> int:
    """Number of points emitted for *depth*."""
    return 4 ** _check_depth(depth)


def cell_size(x_edge: Vector2, y_edge: Vector2, depth: int) -> tuple[float, float]:
    """Leaf-cell width and height for a span traced at *depth*."""
    divisions = 2 ** _check_depth(depth)
    return float(x_edge.length()) / divisions, float(y_edge.length()) / divisions


def _trace(
    origin: Vector2,
    x_edge: Vector2,
    y_edge: Vector2,
    depth: int,
    out: list[Vector2],
) -> None:
    half_x = x_edge / 2.0
    half_y = y_edge / 2.0

    if depth == 0:
        out.append(origin + half_x + half_y)
        return

    # Order matters: it is what keeps consecutive cells adjacent.
    _trace(origin, half_y, half_x, depth - 1, out)
    _trace(origin + half_x, half_x, half_y, depth - 1, out)
    _trace(origin + half_x + half_y, half_x, half_y, depth - 1, out)
    _trace(origin + half_x + y_edge, -half_y, -half_x, depth - 1, out)


def generate_hilbert_curve(
    origin: Vector2,
    x_edge: Vector2,
    y_edge: Vector2,
    depth: int,
) -> tuple[Vector2, ...]:
    """Trace a Hilbert curve through the rectangle spanned by the edges.

    Parameters
    ----------
    origin : Vector2
        Corner of the rectangle.
    x_edge, y_edge : Vector2
        Edge vectors spanning the rectangle from *origin*.
    depth : int
        Recursion depth, ``>= 0``.

    Returns
    -------
    tuple[Vector2, ...]
        ``4**depth`` cell centres in draw order.

    Raises
    ------
    ValueError
        If *depth* is negative or not an integer.
    """
    depth = _check_depth(depth)
    if depth > RECOMMENDED_MAX_DEPTH:
        logger.warning(
            "Hilbert depth %d exceeds %d; generating %d points",
            depth, RECOMMENDED_MAX_DEPTH, 4 ** depth,
        )

    points: list[Vector2] = []
    _trace(origin, x_edge, y_edge, depth, points)
    logger.debug("Generated Hilbert curve: depth=%d points=%d", depth, len(points))
    return tuple(points)


def hilbert_curve_for_canvas(
    width: float, height: float, depth: int,
) -> tuple[Vector2, ...]:
    """Hilbert curve filling a ``width`` x ``height`` canvas at the origin."""
    return generate_hilbert_curve(
        vec2(0.0, 0.0), vec2(width, 0.0), vec2(0.0, height), depth,
    )
