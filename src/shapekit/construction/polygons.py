"""Regular polygons by circumradius or side length."""

from __future__ import annotations

import numpy as np

from shapekit.canvas.base import Canvas
from shapekit.construction._common import _require_canvas
from shapekit.model import Action, Point, PointLike, ShapeOptions, as_point, resolve_options
from shapekit.model.point import _points_from_xy


def _ngon_vertices(
    center: Point,
    radius: float,
    sides: int,
    orientation: float,
) -> list[Point]:
    """Vertices of a regular polygon, starting one step past *orientation*.

    Vertex *k* (for ``k = 1 .. sides``) sits at angle
    ``orientation + k * 2*pi / sides``.
    """
    theta = orientation + np.arange(1, sides + 1) * 2 * np.pi / sides
    return _points_from_xy(
        center.x + np.cos(theta) * radius,
        center.y + np.sin(theta) * radius,
    )


def ngon(
    canvas: Canvas | None,
    center: PointLike,
    radius: float,
    sides: int = 5,
    orientation: float = 0.0,
    action: Action | str = Action.NONE,
    *,
    options: ShapeOptions | None = None,
    **option_kwargs: bool | None,
) -> list[Point]:
    """Build a regular polygon centred at *center*.

    The polygon is constructed in the direction of increasing angle,
    with the first vertex one step (``2*pi / sides``) past
    *orientation*.  For example::

        >>> ngon(None, (0, 0), 4, 4, 0, vertices=True)  # doctest: +SKIP
        [Point(x=2.4e-16, y=4.0), Point(x=-4.0, y=4.9e-16),
         Point(x=-7.3e-16, y=-4.0), Point(x=4.0, y=-9.8e-16)]

    Args:
        canvas: Canvas to draw into.  May be ``None`` when only the
            vertices are wanted.
        center: Centre of the polygon.
        radius: Circumradius.
        sides: Number of sides.
        orientation: Rotation in radians.
        action: What to do with the closed path.
        options: Base :class:`ShapeOptions`; individual fields may be
            overridden by keyword (``vertices=True``,
            ``reversepath=True``).

    Returns:
        The polygon's vertices, reversed when ``reversepath`` is set.
    """
    opts = resolve_options(ShapeOptions, options, **option_kwargs)
    pts = _ngon_vertices(as_point(center), radius, sides, orientation)
    if opts.reversepath:
        pts = pts[::-1]
    if not opts.vertices:
        _require_canvas(canvas, "ngon").poly(pts, action, close=True)
    return pts


def ngon_xy(
    canvas: Canvas | None,
    x: float,
    y: float,
    radius: float,
    sides: int = 5,
    orientation: float = 0.0,
    action: Action | str = Action.NONE,
    *,
    options: ShapeOptions | None = None,
    **option_kwargs: bool | None,
) -> list[Point]:
    """Like :func:`ngon`, with the centre given as separate coordinates."""
    return ngon(
        canvas, Point(x, y), radius, sides, orientation, action,
        options=options, **option_kwargs,
    )


def ngonside(
    canvas: Canvas | None,
    center: PointLike,
    sidelength: float,
    sides: int = 5,
    orientation: float = 0.0,
    action: Action | str = Action.NONE,
    *,
    options: ShapeOptions | None = None,
    **option_kwargs: bool | None,
) -> list[Point]:
    """Build a regular polygon with *sides* sides of length *sidelength*.

    The circumradius is ``0.5 * sidelength * csc(pi / sides)``.  All
    other arguments are as for :func:`ngon`.  A *sides* of zero gives
    a NaN radius and no vertices.
    """
    with np.errstate(divide="ignore", invalid="ignore"):
        radius = 0.5 * sidelength / np.sin(np.divide(np.pi, sides))
    return ngon(
        canvas, center, float(radius), sides, orientation, action,
        options=options, **option_kwargs,
    )
