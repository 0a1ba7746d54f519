"""Geometry core: vector primitive, Hilbert curve, offset curves."""

from hilbert_plot.geometry.hilbert import (
    RECOMMENDED_MAX_DEPTH,
    cell_size,
    generate_hilbert_curve,
    hilbert_curve_for_canvas,
    point_count,
)
from hilbert_plot.geometry.offset import (
    COLLINEAR_TOLERANCE,
    DegenerateGeometryError,
    corner_direction,
    offset,
    precise_offset,
)
from hilbert_plot.geometry.vector import ZERO, Vector2, points_to_array, vec2

__all__ = [
    "COLLINEAR_TOLERANCE",
    "DegenerateGeometryError",
    "RECOMMENDED_MAX_DEPTH",
    "Vector2",
    "ZERO",
    "cell_size",
    "corner_direction",
    "generate_hilbert_curve",
    "hilbert_curve_for_canvas",
    "offset",
    "point_count",
    "points_to_array",
    "precise_offset",
    "vec2",
]
