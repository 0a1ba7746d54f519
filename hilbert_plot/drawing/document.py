"""Drawing IR -- the vocabulary between point sequences and SVG output.

Every element is an immutable, slotted dataclass.  Coordinates are in
canvas units with a top-left origin and +Y down (SVG convention); the
geometry core is frame-agnostic so no flip is applied.

A *Drawing* is a canvas size plus an ordered tuple of polylines.  Each
polyline is drawn as one continuous pen-down stroke.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Sequence

from hilbert_plot.geometry.vector import Vector2, points_to_array

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class StrokeStyle:
    """Stroke appearance.

    Parameters
    ----------
    color : str
        Any SVG paint value, e.g. ``"black"`` or ``"#d11"``.
    width : float
        Stroke width in canvas units, ``> 0``.
    """

    color: str = "black"
    width: float = 1.0

    def __post_init__(self) -> None:
        if not math.isfinite(self.width) or self.width <= 0:
            raise ValueError(f"Stroke width must be > 0, got {self.width}")


@dataclass(frozen=True, slots=True)
class Polyline:
    """Connected line segments drawn without lifting the pen.

    Parameters
    ----------
    points : tuple[tuple[float, float], ...]
        Ordered vertices.  Must contain >= 2 points.
    style : StrokeStyle
        Stroke appearance.
    """

    points: tuple[tuple[float, float], ...]
    style: StrokeStyle = field(default_factory=StrokeStyle)

    def __post_init__(self) -> None:
        if len(self.points) < 2:
            raise ValueError(
                f"Polyline requires >= 2 points, got {len(self.points)}"
            )


@dataclass(frozen=True, slots=True)
class Drawing:
    """A canvas and the polylines drawn on it, in draw order."""

    width: float
    height: float
    polylines: tuple[Polyline, ...] = ()

    def __post_init__(self) -> None:
        for name, value in (("width", self.width), ("height", self.height)):
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"Drawing {name} must be > 0, got {value}")

    @property
    def point_count(self) -> int:
        return sum(len(p.points) for p in self.polylines)


def polyline_from_points(
    points: Sequence[Vector2],
    style: StrokeStyle | None = None,
) -> Polyline:
    """Convert a ``Vector2`` sequence into a ``Polyline``."""
    coords = points_to_array(points)
    return Polyline(
        points=tuple((x, y) for x, y in coords.tolist()),
        style=style or StrokeStyle(),
    )


def build_drawing(
    width: float,
    height: float,
    curves: Sequence[Sequence[Vector2]],
    style: StrokeStyle | None = None,
) -> Drawing:
    """Compose one polyline per point sequence onto a canvas.

    Sequences with fewer than two points cannot be stroked and are
    skipped with a warning.
    """
    style = style or StrokeStyle()
    polylines: list[Polyline] = []
    for index, curve in enumerate(curves):
        if len(curve) < 2:
            logger.warning(
                "Skipping curve %d: %d point(s) cannot form a line",
                index, len(curve),
            )
            continue
        polylines.append(polyline_from_points(curve, style))
    return Drawing(width=width, height=height, polylines=tuple(polylines))
