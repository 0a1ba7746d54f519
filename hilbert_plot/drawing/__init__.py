"""
Drawing module.

Immutable polyline / document IR plus SVG rendering.  All coordinates are
canvas units with a top-left origin.
"""

from hilbert_plot.drawing.document import (
    Drawing,
    Polyline,
    StrokeStyle,
    build_drawing,
    polyline_from_points,
)
from hilbert_plot.drawing.svg import (
    RenderError,
    build_svg,
    path_data,
    render_svg,
    save_svg,
)

__all__ = [
    "Drawing",
    "Polyline",
    "RenderError",
    "StrokeStyle",
    "build_drawing",
    "build_svg",
    "path_data",
    "polyline_from_points",
    "render_svg",
    "save_svg",
]
