"""
Geometric Primitives used to describe polygon outlines.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Sequence, TYPE_CHECKING
import math

import numpy as np

from shapecalc.errors import InvalidDimension
from shapecalc.utils import ensure_finite

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Point:
    """A point in the XY plane."""
    x: float
    y: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", ensure_finite("x", self.x))
        object.__setattr__(self, "y", ensure_finite("y", self.y))

    @classmethod
    def from_sequence(cls, coords: Sequence[float]) -> Point:
        """Build a point from an (x, y) pair, e.g. a JSON list."""
        if isinstance(coords, (str, bytes)) or not isinstance(coords, (Sequence, np.ndarray)) or len(coords) != 2:
            raise InvalidDimension(f"Expected an (x, y) pair, got {coords!r}.")
        return cls(coords[0], coords[1])

    def distance_to(self, other: Point) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y])

    def to_list(self) -> list[float]:
        return [self.x, self.y]


def shoelace_area(points: Sequence[Point]) -> float:
    """
    Unsigned area enclosed by a closed polyline (shoelace formula).

    The loop is closed implicitly: the last point connects back to the first.

    Args:
        points: Ordered outline vertices (CW or CCW).

    Returns:
        The enclosed area, always >= 0.
    """
    if len(points) < 3:
        return 0.0
    pts = np.array([p.to_array() for p in points])
    # Work on coordinates scaled into [-1, 1]; huge outlines then overflow to
    # inf in the final product instead of producing inf - inf = nan
    scale = float(np.max(np.abs(pts)))
    if scale == 0.0:
        return 0.0
    pts = pts / scale
    x, y = pts[:, 0], pts[:, 1]
    signed = np.dot(x, np.roll(y, -1)) - np.dot(y, np.roll(x, -1))
    return float(abs(signed) / 2.0) * scale * scale
