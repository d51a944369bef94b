from __future__ import annotations

from dataclasses import dataclass

from shapekit._constants import DEFAULT_ARC_RESOLUTION, VALID_LINESTYLES
from shapekit.model._util import _field_defaults
from shapekit.model.colour import Colour, normalise_colour

_COLOUR_FIELDS = frozenset({"stroke_colour", "fill_colour"})


@dataclass(frozen=True)
class DrawStyle:
    """Initial drawing state and backend settings for a canvas.

    A canvas starts from its :class:`DrawStyle`; line width and dash
    style may later be changed on the canvas itself and are restored
    by :meth:`~shapekit.canvas.base.Canvas.restore_state`.

    Attributes:
        stroke_colour: Colour used when stroking paths.
        fill_colour: Colour used when filling paths.
        alpha: Opacity applied to both stroke and fill (0 = transparent,
            1 = opaque).
        line_width: Initial stroke width in points.
        linestyle: Initial dash style: ``"solid"``, ``"dashed"``,
            ``"dotted"``, or ``"dashdot"``.
        arc_resolution: Number of straight segments used to flatten a
            full turn of an arc.  Partial arcs use a proportional
            number of segments (at least one).
    """

    stroke_colour: Colour = (0.0, 0.0, 0.0)
    fill_colour: Colour = (0.5, 0.5, 0.5)
    alpha: float = 1.0
    line_width: float = 1.0
    linestyle: str = "solid"
    arc_resolution: int = DEFAULT_ARC_RESOLUTION

    def __post_init__(self) -> None:
        normalise_colour(self.stroke_colour)
        normalise_colour(self.fill_colour)
        if not 0.0 <= self.alpha <= 1.0:
            raise ValueError(f"alpha must be in [0, 1], got {self.alpha}")
        if self.line_width < 0:
            raise ValueError(
                f"line_width must be non-negative, got {self.line_width}"
            )
        if self.linestyle not in VALID_LINESTYLES:
            raise ValueError(
                f"linestyle must be one of {sorted(VALID_LINESTYLES)}, "
                f"got {self.linestyle!r}"
            )
        if self.arc_resolution < 4:
            raise ValueError(
                f"arc_resolution must be at least 4, got {self.arc_resolution}"
            )

    def to_dict(self) -> dict:
        """Serialise to a JSON-compatible dictionary.

        Fields at their default values are omitted.  Colours are
        normalised to ``[r, g, b]`` lists.
        """
        defaults = _field_defaults(type(self))
        d: dict = {}
        for key, default in defaults.items():
            val = getattr(self, key)
            if key in _COLOUR_FIELDS:
                if normalise_colour(val) != normalise_colour(default):
                    d[key] = list(normalise_colour(val))
            elif val != default:
                d[key] = val
        return d

    @classmethod
    def from_dict(cls, d: dict) -> DrawStyle:
        """Deserialise from a dictionary.

        Raises:
            ValueError: If *d* contains unknown keys.
        """
        defaults = _field_defaults(cls)
        unknown = set(d) - set(defaults)
        if unknown:
            raise ValueError(f"unknown DrawStyle keys: {sorted(unknown)}")
        kwargs: dict = {}
        for key, val in d.items():
            if key in _COLOUR_FIELDS and isinstance(val, list):
                val = tuple(val)
            kwargs[key] = val
        return cls(**kwargs)
