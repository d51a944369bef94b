from __future__ import annotations

from enum import StrEnum


class Action(StrEnum):
    """What a canvas does with a path once it has been constructed.

    Attributes:
        NONE: Start a fresh path and leave it unrendered.
        PATH: Append to the current path and leave it open for
            further composition.
        STROKE: Outline the path with the current line style.
        FILL: Fill the path.
        FILLSTROKE: Fill the path, then outline it.
        CLIP: Use the path as the clipping region for subsequent
            drawing.
    """

    NONE = "none"
    PATH = "path"
    STROKE = "stroke"
    FILL = "fill"
    FILLSTROKE = "fillstroke"
    CLIP = "clip"

    @property
    def consumes_path(self) -> bool:
        """Whether performing this action renders and clears the path."""
        return self not in (Action.NONE, Action.PATH)
