"""SVG rendering -- Drawing IR to SVG documents.

Each polyline becomes one ``<path>`` (move-to the first vertex, line-to
every following one) with no fill, so plotter software sees a single
continuous stroke per curve.  The document's ``viewBox`` is the canvas,
``(0, 0, width, height)``.

Coordinates are written with the shortest float32 representation; the
geometry core computes in float32 so nothing is lost.
"""

from __future__ import annotations

import io
import logging
from pathlib import Path

import numpy as np
import svgwrite

from hilbert_plot.drawing.document import Drawing, Polyline
from hilbert_plot.utils.fs import atomic_write_text

logger = logging.getLogger(__name__)


class RenderError(Exception):
    """Raised when an SVG document cannot be produced or saved."""

    pass


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _num(value: float) -> str:
    return np.format_float_positional(np.float32(value), trim="-")


def path_data(polyline: Polyline) -> str:
    """SVG path ``d`` attribute for *polyline*.

    >>> path_data(Polyline(points=((25.0, 25.0), (75.0, 25.0))))
    'M25,25 L75,25'
    """
    commands = []
    for index, (x, y) in enumerate(polyline.points):
        op = "M" if index == 0 else "L"
        commands.append(f"{op}{_num(x)},{_num(y)}")
    return " ".join(commands)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def build_svg(drawing: Drawing) -> svgwrite.Drawing:
    """Build the svgwrite document for *drawing*."""
    dwg = svgwrite.Drawing(profile="full", debug=False)
    dwg.viewbox(0, 0, drawing.width, drawing.height)

    for polyline in drawing.polylines:
        dwg.add(
            dwg.path(
                d=path_data(polyline),
                fill="none",
                stroke=polyline.style.color,
                stroke_width=polyline.style.width,
            )
        )
    return dwg


def render_svg(drawing: Drawing, pretty: bool = True) -> str:
    """Serialise *drawing* to SVG text, XML declaration included."""
    buffer = io.StringIO()
    build_svg(drawing).write(buffer, pretty=pretty)
    return buffer.getvalue()


def save_svg(drawing: Drawing, path: str | Path) -> Path:
    """Render *drawing* and write it atomically to *path*.

    Parameters
    ----------
    drawing : Drawing
        Document to save.
    path : str | Path
        Target file; parent directories are created.

    Returns
    -------
    Path
        The written path.

    Raises
    ------
    RenderError
        If the file cannot be written.  The underlying error is chained.
    """
    path = Path(path)
    text = render_svg(drawing)
    try:
        atomic_write_text(path, text)
    except (OSError, RuntimeError) as exc:
        raise RenderError(f"Could not save as `{path}`: {exc}") from exc

    logger.info(
        "Saved %d polyline(s), %d point(s) to %s",
        len(drawing.polylines), drawing.point_count, path,
    )
    return path
