"""hilbert-plot: Hilbert curve line art for pen plotters.

Traces a recursive space-filling Hilbert curve over a rectangular canvas
and optionally derives offset curves parallel to it ("double line" and
"wonky" stroke effects), then writes the result as SVG.

Architecture layers (imports point downward only):
    scripts/   CLI; uses everything below
    configs/   -> patterns, utils/
    patterns   -> geometry/
    drawing/   -> geometry/, utils/
    geometry/  numpy only
    utils/     no package imports

Key invariants:
    - Geometry is computed in float32 and is pure / deterministic
    - Curve order is draw order; the Hilbert curve never self-intersects
    - Offset curves drop the first and last source points
    - YAML-only configs
"""

__version__ = "0.3.0"
