"""Shape builders: vertex generation plus optional path emission."""

from shapekit.construction.cropmarks import cropmarks
from shapekit.construction.crosses import polycross
from shapekit.construction.polygons import ngon, ngon_xy, ngonside
from shapekit.construction.rectangles import (
    box,
    box_corners,
    box_points,
    box_xy,
    rect,
    rect_xy,
    rounded_box,
)
from shapekit.construction.stars import star, star_xy
from shapekit.construction.styles import StyleSet, load_styles, save_styles

__all__ = [
    "StyleSet",
    "box",
    "box_corners",
    "box_points",
    "box_xy",
    "cropmarks",
    "load_styles",
    "ngon",
    "ngon_xy",
    "ngonside",
    "polycross",
    "rect",
    "rect_xy",
    "rounded_box",
    "save_styles",
    "star",
    "star_xy",
]
