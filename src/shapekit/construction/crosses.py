"""Cross-shaped polygons with any number of splayed arms."""

from __future__ import annotations

import math

import numpy as np

from shapekit.canvas.base import Canvas
from shapekit.construction._common import _clamp, _require_canvas
from shapekit.model import (
    Action,
    Point,
    PointLike,
    PolycrossOptions,
    as_point,
    resolve_options,
)
from shapekit.model.point import _points_from_xy


def _arm_offsets(npoints: int, ratio: float, splay: float) -> tuple[float, float]:
    """Half-angle offsets of an arm's inner and outer edges.

    An arm of width ``w = 2 * radius * ratio * sin(pi / npoints)``
    leaves the inner circle (radius ``radius * ratio``) at half-angle
    ``asin(w / (2 * radius * ratio))`` and reaches the outer circle at
    half-angle ``asin(splay * w / radius)``.  The radius and ratio
    factors cancel, which keeps both offsets finite when either is
    zero.  Each sine is clamped to ``[-1, 1]``, so an infinite *splay*
    gives a quarter turn and a zero-width arm gives no splay at all.

    Returns:
        ``(d_inner, d_outer)`` in radians.
    """
    s = math.sin(math.pi / npoints)
    d_inner = math.asin(_clamp(s, -1.0, 1.0))
    width = ratio * s
    if width == 0.0:
        return d_inner, 0.0
    sine = np.clip(np.nan_to_num(2.0 * width * splay), -1.0, 1.0)
    return d_inner, math.asin(float(sine))


def _cross_vertices(
    c: Point,
    radius: float,
    npoints: int,
    ratio: float,
    orientation: float,
    splay: float,
) -> list[Point]:
    if npoints < 1:
        return []
    ratio = _clamp(ratio, 0.0, 1.0)

    start = np.pi / 2 + orientation
    base = np.linspace(start, start + 2 * np.pi, npoints + 1)[:-1]
    d_inner, d_outer = _arm_offsets(npoints, ratio, splay)

    # (npoints, 3): per arm, inner point then the two outer corners.
    angles = np.mod(
        base[:, np.newaxis] + np.array([-d_inner, -d_outer, d_outer]),
        2 * np.pi,
    ).ravel()
    radii = np.tile([radius * ratio, radius, radius], npoints)
    return _points_from_xy(
        c.x + radii * np.cos(angles),
        c.y + radii * np.sin(angles),
    )


def polycross(
    canvas: Canvas | None,
    center: PointLike,
    radius: float,
    npoints: int,
    ratio: float = 0.5,
    orientation: float = 0.0,
    action: Action | str = Action.NONE,
    *,
    options: PolycrossOptions | None = None,
    **option_kwargs: float | bool | None,
) -> list[Point]:
    """Build a cross with *npoints* arms that fits a circle of *radius*.

    Arms are spaced evenly, the first pointing along
    ``pi/2 + orientation``.  Each arm contributes three vertices: one
    on the inner circle (radius ``ratio * radius``) before the arm, and
    the two outer corners of the arm on the circle of *radius*.

    Example usage::

        polycross(canvas, (0, 0), 100, 4, 0.3, action="fill")
        polycross(canvas, (0, 0), 100, 6, 0.5, splay=0.2, action="stroke")

    Args:
        canvas: Canvas to draw into.  May be ``None`` when only the
            vertices are wanted.
        center: Centre of the cross.
        radius: Radius of the enclosing circle.
        npoints: Number of arms.
        ratio: Ratio of the two sides of each arm, clamped to
            ``[0, 1]``.
        orientation: Rotation in radians.
        action: What to do with the closed path.
        options: Base :class:`PolycrossOptions`; individual fields may
            be overridden by keyword (``splay=0.2``, ``vertices=True``,
            ``reversepath=True``).

    Returns:
        The ``3 * npoints`` vertices, fully reversed when
        ``reversepath`` is set.  Empty when *npoints* is less than 1.
    """
    opts = resolve_options(PolycrossOptions, options, **option_kwargs)
    pts = _cross_vertices(as_point(center), radius, npoints, ratio,
                          orientation, opts.splay)
    if opts.reversepath:
        pts = pts[::-1]
    if not opts.vertices:
        _require_canvas(canvas, "polycross").poly(pts, action, close=True)
    return pts
