"""Tests for corner directions and offset curves.

Validates the bisector golden value, collinearity detection (exact and
near-collinear), symmetry, degenerate-input rejection, output lengths,
and the constant-distance guarantee of the miter-corrected offset.
"""

from __future__ import annotations

import math

import pytest

from hilbert_plot.geometry.hilbert import hilbert_curve_for_canvas
from hilbert_plot.geometry.offset import (
    DegenerateGeometryError,
    corner_direction,
    offset,
    precise_offset,
)
from hilbert_plot.geometry.vector import Vector2, vec2


def _line_distance(p: Vector2, a: Vector2, b: Vector2) -> float:
    """Perpendicular distance from *p* to the infinite line through a, b."""
    (px, py), (ax, ay), (bx, by) = p.as_tuple(), a.as_tuple(), b.as_tuple()
    dx, dy = bx - ax, by - ay
    return abs(dx * (py - ay) - dy * (px - ax)) / math.hypot(dx, dy)


@pytest.fixture()
def zigzag() -> tuple[Vector2, ...]:
    """Staircase with a turn at every interior point."""
    return (
        vec2(0.0, 0.0),
        vec2(10.0, 0.0),
        vec2(10.0, 10.0),
        vec2(20.0, 10.0),
        vec2(20.0, 20.0),
    )


@pytest.fixture()
def curve() -> tuple[Vector2, ...]:
    return hilbert_curve_for_canvas(100.0, 100.0, 3)


# ---------------------------------------------------------------------------
# Corner direction
# ---------------------------------------------------------------------------


class TestCornerDirection:
    def test_right_angle_golden(self) -> None:
        d = corner_direction(vec2(0.0, 0.0), vec2(10.0, 0.0), vec2(10.0, 5.0))
        assert d == vec2(-0.70710677, 0.70710677)

    def test_collinear_is_none(self) -> None:
        assert corner_direction(
            vec2(0.0, 0.0), vec2(10.0, 0.0), vec2(20.0, 0.0),
        ) is None

    def test_near_collinear_is_none(self) -> None:
        assert corner_direction(
            vec2(0.0, 0.0), vec2(10.0, 0.0), vec2(20.0, 1e-7),
        ) is None

    def test_slight_bend_has_direction(self) -> None:
        d = corner_direction(vec2(0.0, 0.0), vec2(10.0, 0.0), vec2(20.0, 0.01))
        assert d is not None
        assert d.y > 0.99

    @pytest.mark.parametrize(
        "a, b, c",
        [
            (vec2(0.0, 0.0), vec2(10.0, 0.0), vec2(10.0, 5.0)),
            (vec2(-3.0, 7.0), vec2(1.0, 1.0), vec2(4.0, 9.5)),
            (vec2(0.0, 0.0), vec2(5.0, 5.0), vec2(0.0, 10.0)),
        ],
    )
    def test_symmetric_under_swap(self, a: Vector2, b: Vector2, c: Vector2) -> None:
        assert corner_direction(a, b, c) == corner_direction(c, b, a)

    def test_unit_length(self) -> None:
        d = corner_direction(vec2(-3.0, 7.0), vec2(1.0, 1.0), vec2(4.0, 9.5))
        assert d is not None
        assert float(d.length()) == pytest.approx(1.0, abs=1e-6)

    def test_points_toward_neighbours(self) -> None:
        a, b, c = vec2(0.0, 0.0), vec2(5.0, 5.0), vec2(10.0, 0.0)
        d = corner_direction(a, b, c)
        assert d is not None
        assert d.isclose(vec2(0.0, -1.0))

    def test_acute_fold_back(self) -> None:
        d = corner_direction(vec2(0.0, 0.0), vec2(10.0, 0.0), vec2(0.0, 0.0))
        assert d == vec2(-1.0, 0.0)

    @pytest.mark.parametrize(
        "a, b, c",
        [
            (vec2(1.0, 1.0), vec2(1.0, 1.0), vec2(2.0, 1.0)),
            (vec2(0.0, 1.0), vec2(1.0, 1.0), vec2(1.0, 1.0)),
        ],
    )
    def test_zero_length_segment_rejected(
        self, a: Vector2, b: Vector2, c: Vector2,
    ) -> None:
        with pytest.raises(DegenerateGeometryError, match="Zero-length"):
            corner_direction(a, b, c)

    def test_degenerate_error_is_value_error(self) -> None:
        assert issubclass(DegenerateGeometryError, ValueError)


# ---------------------------------------------------------------------------
# Corner-bisector offset
# ---------------------------------------------------------------------------


class TestOffset:
    def test_length_equals_interior_points_without_collinear(
        self, zigzag: tuple[Vector2, ...],
    ) -> None:
        assert len(offset(zigzag, 1.0)) == len(zigzag) - 2

    def test_collinear_corner_skipped(self) -> None:
        pts = (vec2(0.0, 0.0), vec2(10.0, 0.0), vec2(20.0, 0.0), vec2(20.0, 10.0))
        out = offset(pts, 1.0)
        assert len(out) == 1
        assert out[0].isclose(vec2(20.0 - math.sqrt(0.5), math.sqrt(0.5)))

    def test_length_bound_on_hilbert(self, curve: tuple[Vector2, ...]) -> None:
        out = offset(curve, 1.0)
        assert 0 < len(out) <= len(curve) - 2
        assert all(p.is_finite() for p in out)

    def test_right_angle_value(self) -> None:
        pts = (vec2(0.0, 0.0), vec2(10.0, 0.0), vec2(10.0, 10.0))
        (p,) = offset(pts, 2.0)
        assert p.isclose(vec2(10.0 - math.sqrt(2.0), math.sqrt(2.0)))

    def test_negative_distance_mirrors(self) -> None:
        pts = (vec2(0.0, 0.0), vec2(10.0, 0.0), vec2(10.0, 10.0))
        (inner,) = offset(pts, 2.0)
        (outer,) = offset(pts, -2.0)
        assert (inner + outer).isclose(vec2(20.0, 0.0))

    def test_endpoints_dropped(self, zigzag: tuple[Vector2, ...]) -> None:
        out = offset(zigzag, 0.0)
        assert out == zigzag[1:-1]

    @pytest.mark.parametrize("n", [0, 1, 2])
    def test_short_input_is_empty(self, n: int) -> None:
        pts = tuple(vec2(float(i), 0.0) for i in range(n))
        assert offset(pts, 1.0) == ()

    def test_duplicate_point_reports_index(self) -> None:
        pts = (vec2(0.0, 0.0), vec2(5.0, 0.0), vec2(5.0, 0.0), vec2(5.0, 5.0))
        with pytest.raises(DegenerateGeometryError, match="Point 1"):
            offset(pts, 1.0)

    def test_accepts_list(self, zigzag: tuple[Vector2, ...]) -> None:
        assert offset(list(zigzag), 1.0) == offset(zigzag, 1.0)


# ---------------------------------------------------------------------------
# Perpendicular-bisector (miter-corrected) offset
# ---------------------------------------------------------------------------


class TestPreciseOffset:
    @pytest.mark.parametrize("distance", [0.5, 2.0, -3.0, 7.25])
    def test_straight_run_exact_distance(self, distance: float) -> None:
        pts = (vec2(0.0, 0.0), vec2(5.0, 0.0), vec2(10.0, 0.0), vec2(15.0, 0.0))
        assert precise_offset(pts, distance) == (
            vec2(5.0, -distance),
            vec2(10.0, -distance),
        )

    def test_diagonal_run_distance(self) -> None:
        pts = tuple(vec2(3.0 * i, 3.0 * i) for i in range(4))
        out = precise_offset(pts, 2.0)
        assert len(out) == 2
        for p in out:
            # Positive distance lies on the (dy, -dx) side: below y = x.
            assert p.x > p.y
            assert abs(float(p.x - p.y)) / math.sqrt(2.0) == pytest.approx(2.0, rel=1e-5)

    def test_right_angle_miter(self) -> None:
        a, b, c = vec2(0.0, 0.0), vec2(10.0, 0.0), vec2(10.0, 10.0)
        (p,) = precise_offset((a, b, c), 1.0)
        assert p.isclose(vec2(11.0, -1.0))
        assert _line_distance(p, a, b) == pytest.approx(1.0, abs=1e-5)
        assert _line_distance(p, b, c) == pytest.approx(1.0, abs=1e-5)

    def test_constant_distance_along_hilbert(
        self, curve: tuple[Vector2, ...],
    ) -> None:
        out = precise_offset(curve, 1.0)
        for i, p in enumerate(out):
            a, b, c = curve[i], curve[i + 1], curve[i + 2]
            assert _line_distance(p, a, b) == pytest.approx(1.0, abs=1e-3)
            assert _line_distance(p, b, c) == pytest.approx(1.0, abs=1e-3)

    def test_length_is_always_interior_count(
        self, curve: tuple[Vector2, ...],
    ) -> None:
        assert len(precise_offset(curve, 0.5)) == len(curve) - 2

    def test_zero_distance_is_identity_on_interior(
        self, zigzag: tuple[Vector2, ...],
    ) -> None:
        assert precise_offset(zigzag, 0.0) == zigzag[1:-1]

    def test_fold_back_rejected(self) -> None:
        pts = (vec2(0.0, 0.0), vec2(10.0, 0.0), vec2(0.0, 0.0))
        with pytest.raises(DegenerateGeometryError, match="reverses"):
            precise_offset(pts, 1.0)

    def test_zero_length_segment_rejected(self) -> None:
        pts = (vec2(0.0, 0.0), vec2(0.0, 0.0), vec2(1.0, 0.0))
        with pytest.raises(DegenerateGeometryError, match="Point 1"):
            precise_offset(pts, 1.0)

    @pytest.mark.parametrize("n", [0, 1, 2])
    def test_short_input_is_empty(self, n: int) -> None:
        pts = tuple(vec2(float(i), 0.0) for i in range(n))
        assert precise_offset(pts, 1.0) == ()

    def test_precise_differs_from_bisector_at_corners(self) -> None:
        pts = (vec2(0.0, 0.0), vec2(10.0, 0.0), vec2(10.0, 10.0))
        (approx_pt,) = offset(pts, -1.0)
        (exact_pt,) = precise_offset(pts, 1.0)
        # Same side of the corner, but the bisector point is only 1/sqrt(2)
        # from each segment line.
        assert _line_distance(approx_pt, pts[0], pts[1]) == pytest.approx(
            math.sqrt(0.5), abs=1e-5,
        )
        assert _line_distance(exact_pt, pts[0], pts[1]) == pytest.approx(1.0, abs=1e-5)
