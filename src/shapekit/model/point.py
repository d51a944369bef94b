from __future__ import annotations

from collections.abc import Iterable
from typing import NamedTuple

import numpy as np


class Point(NamedTuple):
    """An immutable 2D point in a drawing's local coordinate space.

    Points compare by value and unpack like tuples, so
    ``np.array(points)`` turns a list of points into an ``(n, 2)``
    array.

    Attributes:
        x: Horizontal coordinate.
        y: Vertical coordinate (increasing downwards on a canvas).
    """

    x: float
    y: float

    def __add__(self, other: object) -> Point:  # type: ignore[override]
        ox, oy = as_point(other)  # type: ignore[arg-type]
        return Point(self.x + ox, self.y + oy)

    def __sub__(self, other: object) -> Point:
        ox, oy = as_point(other)  # type: ignore[arg-type]
        return Point(self.x - ox, self.y - oy)

    def distance(self, other: PointLike) -> float:
        """Euclidean distance to *other*."""
        ox, oy = as_point(other)
        return float(np.hypot(self.x - ox, self.y - oy))


#: Anything accepted where a point is expected: a :class:`Point`, an
#: ``(x, y)`` tuple or list, or a numpy array of shape ``(2,)``.
PointLike = Point | tuple[float, float] | list[float] | np.ndarray

#: The origin.
O = Point(0.0, 0.0)


def as_point(pt: PointLike) -> Point:
    """Coerce a point-like value to a :class:`Point`.

    Raises:
        ValueError: If *pt* does not hold exactly two real numbers.
    """
    if isinstance(pt, Point):
        return pt
    arr = np.asarray(pt, dtype=float)
    if arr.shape != (2,):
        raise ValueError(f"point must have shape (2,), got {arr.shape}")
    return Point(float(arr[0]), float(arr[1]))


def as_points(points: Iterable[PointLike]) -> list[Point]:
    """Coerce a sequence of point-like values to a list of points."""
    return [as_point(p) for p in points]


def _points_from_xy(xs: np.ndarray, ys: np.ndarray) -> list[Point]:
    """Zip coordinate arrays into a list of points."""
    return [Point(float(x), float(y)) for x, y in zip(xs, ys)]
