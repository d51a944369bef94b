"""shapekit: regular polygons, stars, crosses and boxes for vector drawing.

Each builder computes its vertices in closed form and, unless asked
only for vertices, emits a path into an explicit canvas.

Example usage::

    from shapekit import MplCanvas, ngon, star

    canvas = MplCanvas()
    star(canvas, (0, 0), 100, 6, 0.4, action="fill")
    pts = ngon(None, (0, 0), 50, 8, vertices=True)
    canvas.savefig("shapes.svg")
"""

from shapekit.canvas import (
    Canvas,
    GraphicsState,
    MplCanvas,
    PaintedPath,
    RecordingCanvas,
)
from shapekit.construction import (
    StyleSet,
    box,
    box_corners,
    box_points,
    box_xy,
    cropmarks,
    load_styles,
    ngon,
    ngon_xy,
    ngonside,
    polycross,
    rect,
    rect_xy,
    rounded_box,
    save_styles,
    star,
    star_xy,
)
from shapekit.model import (
    Action,
    Colour,
    DrawStyle,
    O,
    Point,
    PolycrossOptions,
    ShapeOptions,
    as_point,
    normalise_colour,
)

__all__ = [
    "Action",
    "Canvas",
    "Colour",
    "DrawStyle",
    "GraphicsState",
    "MplCanvas",
    "O",
    "PaintedPath",
    "Point",
    "PolycrossOptions",
    "RecordingCanvas",
    "ShapeOptions",
    "StyleSet",
    "as_point",
    "box",
    "box_corners",
    "box_points",
    "box_xy",
    "cropmarks",
    "load_styles",
    "ngon",
    "ngon_xy",
    "ngonside",
    "normalise_colour",
    "polycross",
    "rect",
    "rect_xy",
    "rounded_box",
    "save_styles",
    "star",
    "star_xy",
]
