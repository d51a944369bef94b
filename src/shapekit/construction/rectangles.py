"""Rectangles, centred and two-corner boxes, and rounded boxes.

Corner vertices are always returned in the same order: bottom left,
top left, top right, bottom right (with *y* increasing downwards, the
bottom edge has the larger *y*).  Reversing the path keeps the first
corner and traverses the rest the other way round: bottom left,
bottom right, top right, top left.
"""

from __future__ import annotations

import math
import numbers
from collections.abc import Sequence

from shapekit.canvas.base import Canvas
from shapekit.construction._common import _require_canvas
from shapekit.model import (
    Action,
    Point,
    PointLike,
    ShapeOptions,
    as_point,
    resolve_options,
)

# Index order used when the path direction is reversed.
_REVERSED = (0, 3, 2, 1)


def _corners(xmin: float, ymin: float, xmax: float, ymax: float) -> list[Point]:
    return [
        Point(xmin, ymax),
        Point(xmin, ymin),
        Point(xmax, ymin),
        Point(xmax, ymax),
    ]


def _emit_corners(
    canvas: Canvas | None,
    pts: list[Point],
    action: Action | str,
    opts: ShapeOptions,
    builder: str,
) -> list[Point]:
    """Reorder *pts* for ``reversepath`` and draw them if asked to."""
    if opts.reversepath:
        pts = [pts[i] for i in _REVERSED]
    action = Action(action)
    if not opts.vertices and action is not Action.NONE:
        _require_canvas(canvas, builder).poly(pts, action, close=True)
    return pts


def rect(
    canvas: Canvas | None,
    corner: PointLike,
    w: float,
    h: float,
    action: Action | str = Action.NONE,
    *,
    options: ShapeOptions | None = None,
    **option_kwargs: bool | None,
) -> list[Point]:
    """Build a rectangle with one corner at *corner*.

    The rectangle spans *w* along *x* and *h* along *y* from *corner*.
    Nothing is drawn when *action* is ``"none"``.

    Returns:
        The four corner vertices.
    """
    opts = resolve_options(ShapeOptions, options, **option_kwargs)
    x, y = as_point(corner)
    pts = _corners(x, y, x + w, y + h)
    return _emit_corners(canvas, pts, action, opts, "rect")


def rect_xy(
    canvas: Canvas,
    xmin: float,
    ymin: float,
    w: float,
    h: float,
    action: Action | str = Action.NONE,
) -> list[Point]:
    """Add a rectangle path at ``(xmin, ymin)`` and perform *action*.

    Unlike :func:`rect` the path is always built: a fresh path is
    started unless *action* is ``"path"``, so ``"none"`` leaves the
    rectangle as the current path.
    """
    action = Action(action)
    pts = _corners(xmin, ymin, xmin + w, ymin + h)
    if action is not Action.PATH:
        canvas.new_path()
    # Traced from the corner itself, like a backend rectangle primitive.
    canvas.move_to(pts[1])
    canvas.line_to(pts[2])
    canvas.line_to(pts[3])
    canvas.line_to(pts[0])
    canvas.close_path()
    canvas.perform_action(action)
    return pts


def box(
    canvas: Canvas | None,
    center: PointLike,
    width: float,
    height: float,
    action: Action | str = Action.NONE,
    *,
    options: ShapeOptions | None = None,
    **option_kwargs: bool | None,
) -> list[Point]:
    """Build a box centred at *center*.

    Returns:
        The four corner vertices, whose centroid is *center*.
    """
    opts = resolve_options(ShapeOptions, options, **option_kwargs)
    x, y = as_point(center)
    pts = _corners(x - width / 2, y - height / 2, x + width / 2, y + height / 2)
    return _emit_corners(canvas, pts, action, opts, "box")


def box_corners(
    canvas: Canvas | None,
    corner1: PointLike,
    corner2: PointLike,
    action: Action | str = Action.NONE,
    *,
    options: ShapeOptions | None = None,
    **option_kwargs: bool | None,
) -> list[Point]:
    """Build a box between two opposite corners.

    The corners may be given in any order; they are normalised to
    ``(xmin, ymin)`` and ``(xmax, ymax)`` first, so the vertex order
    does not depend on which corner came first.
    """
    opts = resolve_options(ShapeOptions, options, **option_kwargs)
    c1, c2 = as_point(corner1), as_point(corner2)
    xmin, xmax = sorted((c1.x, c2.x))
    ymin, ymax = sorted((c1.y, c2.y))
    pts = _corners(xmin, ymin, xmax, ymax)
    return _emit_corners(canvas, pts, action, opts, "box_corners")


def box_points(
    canvas: Canvas | None,
    points: Sequence[PointLike],
    action: Action | str = Action.NONE,
    *,
    options: ShapeOptions | None = None,
    **option_kwargs: bool | None,
) -> list[Point]:
    """Build a box from the first two points of *points*.

    Handy for bounding boxes given as ``[top_left, bottom_right]``.

    Raises:
        ValueError: If *points* has fewer than two entries.
    """
    if len(points) < 2:
        raise ValueError(
            f"box_points() needs at least two points, got {len(points)}"
        )
    return box_corners(
        canvas, points[0], points[1], action, options=options, **option_kwargs,
    )


def box_xy(
    canvas: Canvas,
    x: float,
    y: float,
    width: float,
    height: float,
    action: Action | str = Action.NONE,
) -> list[Point]:
    """Add a box path centred at ``(x, y)`` and perform *action*.

    See :func:`rect_xy` for how the path is started.
    """
    return rect_xy(canvas, x - width / 2, y - height / 2, width, height, action)


def _corner_radii(cornerradii: float | Sequence[float]) -> list[float]:
    """Expand a scalar radius to four corners and check the count.

    Raises:
        ValueError: If a sequence of radii does not have four entries.
    """
    if isinstance(cornerradii, numbers.Real):
        return [float(cornerradii)] * 4
    radii = [float(r) for r in cornerradii]
    if len(radii) != 4:
        raise ValueError(
            "rounded_box() must have four values to specify rounded "
            f"corners, got {len(radii)}"
        )
    return radii


def rounded_box(
    canvas: Canvas,
    center: PointLike,
    width: float,
    height: float,
    cornerradii: float | Sequence[float],
    action: Action | str = Action.STROKE,
) -> None:
    """Draw a box centred at *center* with rounded corners.

    The path consists of straight lines and quarter-turn arcs.  It
    starts at the middle of the bottom edge and runs round the corners
    in the order bottom left, top left, top right, bottom right.  The
    path is built in a frame translated to *center*; the canvas state
    is restored before *action* is performed.

    Example usage::

        rounded_box(canvas, (0, 0), 120, 120, [0, 20, 40, 60], "fill")

    Args:
        canvas: Canvas to draw into.
        center: Centre of the box.
        width: Box width.
        height: Box height.
        cornerradii: One radius for every corner, or four radii for the
            bottom-left, top-left, top-right, and bottom-right corners.
        action: What to do with the closed path.

    Raises:
        ValueError: If *cornerradii* is a sequence whose length is not 4.
    """
    r1, r2, r3, r4 = _corner_radii(cornerradii)
    hw, hh = width / 2, height / 2
    pi = math.pi

    # (start, arc centre, radius, start angle, end angle, end) per corner
    corners = [
        # bottom left
        (Point(-hw + r1, hh), Point(-hw + r1, hh - r1),
         r1, pi / 2, pi, Point(-hw, hh - r1)),
        # top left
        (Point(-hw, -hh + r2), Point(-hw + r2, -hh + r2),
         r2, pi, 3 * pi / 2, Point(-hw + r2, -hh)),
        # top right
        (Point(hw - r3, -hh), Point(hw - r3, -hh + r3),
         r3, 3 * pi / 2, 0.0, Point(hw, -hh + r3)),
        # bottom right
        (Point(hw, hh - r4), Point(hw - r4, hh - r4),
         r4, 0.0, pi / 2, Point(hw - r4, hh)),
    ]

    with canvas.saved_state():
        canvas.translate(center)
        canvas.new_path()
        canvas.move_to(Point(0.0, hh))
        for start, arc_centre, r, a0, a1, end in corners:
            canvas.line_to(start)
            canvas.arc(arc_centre, r, a0, a1)
            canvas.line_to(end)
        canvas.close_path()
    canvas.perform_action(action)
