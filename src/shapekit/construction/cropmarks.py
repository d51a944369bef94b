"""Crop (trim) marks around a bounding box."""

from __future__ import annotations

from shapekit._constants import CROP_GAP, CROP_LENGTH, CROP_LINE_WIDTH
from shapekit.canvas.base import Canvas
from shapekit.model import Action, Point, PointLike, as_point


def _cropmark_segments(
    center: Point,
    width: float,
    height: float,
) -> list[tuple[Point, Point]]:
    """The eight crop-mark segments as ``(start, end)`` pairs.

    Four horizontal marks sit level with the top and bottom edges,
    outside the left and right edges; four vertical marks sit level
    with the left and right edges, outside the top and bottom edges.
    """
    cx, cy = center
    left, right = cx - width / 2, cx + width / 2
    top, bottom = cy - height / 2, cy + height / 2
    near, far = CROP_GAP, CROP_GAP + CROP_LENGTH
    return [
        # horizontal
        (Point(left - far, top), Point(left - near, top)),
        (Point(left - far, bottom), Point(left - near, bottom)),
        (Point(right + near, top), Point(right + far, top)),
        (Point(right + near, bottom), Point(right + far, bottom)),
        # vertical
        (Point(left, top - far), Point(left, top - near)),
        (Point(left, bottom + near), Point(left, bottom + far)),
        (Point(right, top - far), Point(right, top - near)),
        (Point(right, bottom + near), Point(right, bottom + far)),
    ]


def cropmarks(
    canvas: Canvas,
    center: PointLike,
    width: float,
    height: float,
) -> None:
    """Stroke crop marks around a *width* x *height* box at *center*.

    Marks are drawn with the canvas's current stroke colour at a line
    width of 0.5 and a solid dash.  The canvas's line width and dash
    are restored afterwards.
    """
    with canvas.saved_state():
        canvas.set_line_width(CROP_LINE_WIDTH)
        canvas.set_dash("solid")
        for start, end in _cropmark_segments(as_point(center), width, height):
            canvas.line(start, end, Action.STROKE)
