"""Immutable 2-D vector primitive.

Components are stored as ``numpy.float32`` so every operation rounds
exactly like 32-bit float arithmetic.  Operators are component-wise
except scalar multiply / divide.

Division by zero follows IEEE semantics (``inf`` / ``nan`` components,
no exception).  ``normalize()`` on a zero vector therefore returns
non-finite components -- callers that care must check the input length
first (see ``geometry.offset``).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import numpy as np

_SCALAR_TYPES = (int, float, np.integer, np.floating)


def _fmt(value: np.float32) -> str:
    return np.format_float_positional(value, trim="-")


@dataclass(frozen=True, slots=True)
class Vector2:
    """2-D float32 vector value type.

    Parameters
    ----------
    x, y : float
        Components.  Anything float-convertible is accepted and cast to
        ``numpy.float32``.
    """

    x: np.float32
    y: np.float32

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", np.float32(self.x))
        object.__setattr__(self, "y", np.float32(self.y))

    def __repr__(self) -> str:
        return f"Vector2({_fmt(self.x)}, {_fmt(self.y)})"

    # -- Arithmetic ----------------------------------------------------------

    def __add__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        if not isinstance(other, Vector2):
            return NotImplemented
        return Vector2(self.x - other.x, self.y - other.y)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def __mul__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, _SCALAR_TYPES):
            return NotImplemented
        s = np.float32(scalar)
        return Vector2(self.x * s, self.y * s)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2:
        if not isinstance(scalar, _SCALAR_TYPES):
            return NotImplemented
        s = np.float32(scalar)
        with np.errstate(divide="ignore", invalid="ignore"):
            return Vector2(self.x / s, self.y / s)

    # -- Metrics -------------------------------------------------------------

    def length(self) -> np.float32:
        """Euclidean norm, computed in float32."""
        return np.sqrt(self.x * self.x + self.y * self.y)

    def normalize(self) -> Vector2:
        """Unit vector in the same direction.

        Non-finite for the zero vector.
        """
        return self / self.length()

    def dot(self, other: Vector2) -> np.float32:
        return self.x * other.x + self.y * other.y

    def perpendicular(self) -> Vector2:
        """Clockwise perpendicular ``(y, -x)`` in a +Y-up frame."""
        return Vector2(self.y, -self.x)

    # -- Helpers -------------------------------------------------------------

    def is_finite(self) -> bool:
        return bool(np.isfinite(self.x) and np.isfinite(self.y))

    def isclose(self, other: Vector2, abs_tol: float = 1e-5) -> bool:
        """Epsilon-tolerant comparison for generated geometry."""
        return bool(
            abs(self.x - other.x) <= abs_tol and abs(self.y - other.y) <= abs_tol
        )

    def as_tuple(self) -> tuple[float, float]:
        return float(self.x), float(self.y)


def vec2(x: float, y: float) -> Vector2:
    """Shorthand constructor."""
    return Vector2(x, y)


ZERO = vec2(0.0, 0.0)


def points_to_array(points: Iterable[Vector2]) -> np.ndarray:
    """Stack a point sequence into an ``(N, 2)`` float32 array."""
    coords = [(p.x, p.y) for p in points]
    if not coords:
        return np.empty((0, 2), dtype=np.float32)
    return np.asarray(coords, dtype=np.float32)
