"""Value types and configuration for shapekit.

Everything is re-exported here so that ``from shapekit.model import
Point`` works.
"""

from shapekit.model.action import Action
from shapekit.model.colour import Colour, normalise_colour
from shapekit.model.draw_style import DrawStyle
from shapekit.model.options import (
    PolycrossOptions,
    ShapeOptions,
    options_from_dict,
    options_to_dict,
    resolve_options,
)
from shapekit.model.point import O, Point, PointLike, as_point, as_points

__all__ = [
    "Action",
    "Colour",
    "DrawStyle",
    "O",
    "Point",
    "PointLike",
    "PolycrossOptions",
    "ShapeOptions",
    "as_point",
    "as_points",
    "normalise_colour",
    "options_from_dict",
    "options_to_dict",
    "resolve_options",
]
