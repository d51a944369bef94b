"""Stars with alternating outer and inner points."""

from __future__ import annotations

import numpy as np

from shapekit.canvas.base import Canvas
from shapekit.construction._common import _clamp, _require_canvas
from shapekit.model import Action, Point, PointLike, ShapeOptions, as_point, resolve_options
from shapekit.model.point import _points_from_xy


def _star_vertices(
    c: Point,
    radius: float,
    npoints: int,
    ratio: float,
    orientation: float,
) -> list[Point]:
    if npoints < 1:
        return []
    ratio = _clamp(ratio, 0.0, 1.0)

    k = np.arange(1, npoints + 1)
    step = 2 * np.pi / npoints
    outer = orientation + k * step
    inner = orientation + (k + 0.5) * step

    # Interleave column-wise: outer[0], inner[0], outer[1], inner[1], ...
    angles = np.column_stack([outer, inner]).ravel()
    radii = np.tile([radius, radius * ratio], npoints)
    return _points_from_xy(
        c.x + np.cos(angles) * radii,
        c.y + np.sin(angles) * radii,
    )


def star(
    canvas: Canvas | None,
    center: PointLike,
    radius: float,
    npoints: int = 5,
    ratio: float = 0.5,
    orientation: float = 0.0,
    action: Action | str = Action.NONE,
    *,
    options: ShapeOptions | None = None,
    **option_kwargs: bool | None,
) -> list[Point]:
    """Build a star centred at *center*.

    Outer point *k* (``k = 1 .. npoints``) lies at angle
    ``orientation + k * 2*pi / npoints`` and distance *radius*; inner
    point *k* lies half a step further round at distance
    ``radius * ratio``.  The vertices alternate outer, inner, outer, ...

    Args:
        canvas: Canvas to draw into.  May be ``None`` when only the
            vertices are wanted.
        center: Centre of the star.
        radius: Outer radius.
        npoints: Number of points.
        ratio: Inner radius as a fraction of *radius*, clamped to
            ``[0, 1]``.
        orientation: Rotation in radians.
        action: What to do with the closed path.
        options: Base :class:`ShapeOptions`; individual fields may be
            overridden by keyword.

    Returns:
        The ``2 * npoints`` vertices, fully reversed when
        ``reversepath`` is set.  Empty when *npoints* is less than 1.
    """
    opts = resolve_options(ShapeOptions, options, **option_kwargs)
    pts = _star_vertices(as_point(center), radius, npoints, ratio, orientation)
    if opts.reversepath:
        pts = pts[::-1]
    if not opts.vertices:
        _require_canvas(canvas, "star").poly(pts, action, close=True)
    return pts


def star_xy(
    canvas: Canvas | None,
    x: float,
    y: float,
    radius: float,
    npoints: int = 5,
    ratio: float = 0.5,
    orientation: float = 0.0,
    action: Action | str = Action.NONE,
    *,
    options: ShapeOptions | None = None,
    **option_kwargs: bool | None,
) -> list[Point]:
    """Like :func:`star`, with the centre given as separate coordinates."""
    return star(
        canvas, Point(x, y), radius, npoints, ratio, orientation, action,
        options=options, **option_kwargs,
    )
