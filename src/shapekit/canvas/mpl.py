"""Matplotlib canvas: paints paths into an Axes as PathPatch artists."""

from __future__ import annotations

import logging
from pathlib import Path as FilePath

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import PathPatch
from matplotlib.path import Path

from shapekit.canvas.base import Canvas, GraphicsState
from shapekit.model import Action, Colour, DrawStyle, normalise_colour

logger = logging.getLogger(__name__)


class MplCanvas(Canvas):
    """A canvas backed by a matplotlib :class:`~matplotlib.axes.Axes`.

    Coordinates follow the usual vector-drawing convention: *y*
    increases downwards, so the y axis of the axes is inverted.  The
    data limits grow to fit whatever has been painted.

    Example usage::

        canvas = MplCanvas(figsize=(4, 4))
        star(canvas, (0, 0), 100, 5, 0.4, action="fill")
        canvas.savefig("star.png")

    Args:
        ax: Optional axes to draw into.  When provided the caller keeps
            control of the parent figure (layout, saving, closing) and
            *figsize*, *dpi*, and *background* are ignored.
        style: Drawing style (colours, alpha, initial line style, arc
            resolution).
        figsize: Figure size in inches ``(width, height)``.
        dpi: Figure resolution.
        background: Figure background colour.

    Raises:
        ValueError: If *ax* is not attached to a Figure.
    """

    def __init__(
        self,
        ax: Axes | None = None,
        *,
        style: DrawStyle | None = None,
        figsize: tuple[float, float] = (5.0, 5.0),
        dpi: int = 150,
        background: Colour = "white",
    ) -> None:
        super().__init__(style)
        if ax is None:
            fig, ax = plt.subplots(1, 1, figsize=figsize, dpi=dpi)
            fig.set_facecolor(normalise_colour(background))
            ax.set_axis_off()
        else:
            fig = ax.get_figure()
            if not isinstance(fig, Figure):
                raise ValueError("ax is not attached to a Figure")
        ax.set_aspect("equal")
        if not ax.yaxis_inverted():
            ax.invert_yaxis()
        self.ax = ax
        self.figure = fig
        self.patches: list[PathPatch] = []

    def _paint(self, path: Path, action: Action, state: GraphicsState) -> None:
        stroke = action in (Action.STROKE, Action.FILLSTROKE)
        fill = action in (Action.FILL, Action.FILLSTROKE)
        patch = PathPatch(
            path,
            fill=fill,
            facecolor=normalise_colour(self.style.fill_colour) if fill else "none",
            edgecolor=normalise_colour(self.style.stroke_colour) if stroke else "none",
            linewidth=state.line_width if stroke else 0.0,
            linestyle=state.linestyle,
            alpha=self.style.alpha,
        )
        self.ax.add_patch(patch)
        if state.clip is not None:
            patch.set_clip_path(state.clip, self.ax.transData)
        self.patches.append(patch)
        self.ax.autoscale_view()

    def savefig(self, output: str | FilePath, **kwargs: object) -> None:
        """Save the parent figure to *output*.

        The format is inferred from the extension (e.g. ``.svg``,
        ``.pdf``, ``.png``).  Extra keyword arguments are passed to
        :meth:`matplotlib.figure.Figure.savefig`.
        """
        logger.debug("saving %d patches to %s", len(self.patches), output)
        self.figure.savefig(output, **kwargs)

    def close(self) -> None:
        """Close the parent figure."""
        plt.close(self.figure)
