"""Abstract drawing surface: graphics-state stack and path construction.

A :class:`Canvas` accumulates path commands in device coordinates (the
current translation is applied when each command is issued) and hands
the finished path to a backend-specific :meth:`Canvas._paint` hook when
an action consumes it.
"""

from __future__ import annotations

import logging
import math
from abc import ABC, abstractmethod
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, replace

import numpy as np
from matplotlib.path import Path

from shapekit._constants import VALID_LINESTYLES
from shapekit.model import Action, DrawStyle, O, Point, PointLike, as_point, as_points

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GraphicsState:
    """The saved/restored part of a canvas.

    Attributes:
        translation: Offset added to every user-space point.
        line_width: Current stroke width in points.
        linestyle: Current dash style name.
        clip: Clipping path in device coordinates, or ``None`` for no
            clipping.
    """

    translation: Point = O
    line_width: float = 1.0
    linestyle: str = "solid"
    clip: Path | None = None


class Canvas(ABC):
    """A drawing surface that accepts path commands and actions.

    Subclasses implement :meth:`_paint` to render a finished path.

    Args:
        style: Initial drawing style.  Defaults to :class:`DrawStyle`
            defaults.
    """

    def __init__(self, style: DrawStyle | None = None) -> None:
        self.style = style if style is not None else DrawStyle()
        self._state = GraphicsState(
            line_width=self.style.line_width,
            linestyle=self.style.linestyle,
        )
        self._stack: list[GraphicsState] = []
        self._vertices: list[tuple[float, float]] = []
        self._codes: list[int] = []
        self._current: Point | None = None
        self._subpath_start: Point | None = None

    # -- graphics state ------------------------------------------------

    @property
    def state(self) -> GraphicsState:
        """The current graphics state."""
        return self._state

    def save_state(self) -> None:
        """Push a copy of the current graphics state."""
        self._stack.append(self._state)

    def restore_state(self) -> None:
        """Pop the most recently saved graphics state.

        Raises:
            RuntimeError: If there is no saved state to restore.
        """
        if not self._stack:
            raise RuntimeError("restore_state() without matching save_state()")
        self._state = self._stack.pop()

    @contextmanager
    def saved_state(self) -> Iterator[Canvas]:
        """Context manager that saves the state and always restores it.

        Example usage::

            with canvas.saved_state():
                canvas.translate((100, 50))
                canvas.set_line_width(0.5)
                ...
        """
        self.save_state()
        try:
            yield self
        finally:
            self.restore_state()

    def translate(self, offset: PointLike) -> None:
        """Shift the origin of user space by *offset*."""
        dx, dy = as_point(offset)
        t = self._state.translation
        self._state = replace(
            self._state, translation=Point(t.x + dx, t.y + dy),
        )

    def set_line_width(self, width: float) -> None:
        """Set the stroke width for subsequent stroking.

        Raises:
            ValueError: If *width* is negative.
        """
        if width < 0:
            raise ValueError(f"line width must be non-negative, got {width}")
        self._state = replace(self._state, line_width=float(width))

    def set_dash(self, linestyle: str) -> None:
        """Set the dash style for subsequent stroking.

        Raises:
            ValueError: If *linestyle* is not a recognised dash style.
        """
        if linestyle not in VALID_LINESTYLES:
            raise ValueError(
                f"linestyle must be one of {sorted(VALID_LINESTYLES)}, "
                f"got {linestyle!r}"
            )
        self._state = replace(self._state, linestyle=linestyle)

    def to_device(self, pt: PointLike) -> Point:
        """Map a user-space point to device space."""
        x, y = as_point(pt)
        t = self._state.translation
        return Point(x + t.x, y + t.y)

    # -- path construction ---------------------------------------------

    @property
    def current_point(self) -> Point | None:
        """The current point in device coordinates, if any."""
        return self._current

    def new_path(self) -> None:
        """Discard the current path."""
        self._clear_path()

    def _clear_path(self) -> None:
        self._vertices.clear()
        self._codes.clear()
        self._current = None
        self._subpath_start = None

    def _append(self, p: Point, code: int) -> None:
        """Append a device-space vertex, starting a sub-path if needed."""
        if code == Path.LINETO and self._current is None:
            code = Path.MOVETO
        self._vertices.append(p)
        self._codes.append(code)
        self._current = p
        if code == Path.MOVETO:
            self._subpath_start = p

    def move_to(self, pt: PointLike) -> None:
        """Begin a new sub-path at *pt*."""
        self._append(self.to_device(pt), Path.MOVETO)

    def line_to(self, pt: PointLike) -> None:
        """Add a straight segment to *pt*.

        Without a current point this behaves like :meth:`move_to`.
        """
        self._append(self.to_device(pt), Path.LINETO)

    def arc(
        self,
        center: PointLike,
        radius: float,
        start_angle: float,
        end_angle: float,
    ) -> None:
        """Add a circular arc in the direction of increasing angle.

        If there is a current point, a straight segment joins it to the
        start of the arc.  When *end_angle* is less than *start_angle*
        it is advanced by whole turns until it is not.  The arc is
        flattened into ``style.arc_resolution`` segments per full turn.
        """
        cx, cy = as_point(center)
        if end_angle < start_angle:
            turns = math.ceil((start_angle - end_angle) / (2 * math.pi))
            end_angle += turns * 2 * math.pi
        sweep = end_angle - start_angle
        # An exact fraction of a turn must not round up to an extra segment.
        n = max(1, math.ceil(self.style.arc_resolution * sweep / (2 * math.pi) - 1e-9))
        angles = np.linspace(start_angle, end_angle, n + 1)
        xs = cx + radius * np.cos(angles)
        ys = cy + radius * np.sin(angles)
        for x, y in zip(xs, ys):
            self._append(self.to_device((float(x), float(y))), Path.LINETO)

    def close_path(self) -> None:
        """Close the current sub-path back to its starting point."""
        if self._subpath_start is None:
            return
        self._vertices.append(self._subpath_start)
        self._codes.append(Path.CLOSEPOLY)
        self._current = self._subpath_start

    def current_path(self) -> Path:
        """Return the current path as a :class:`matplotlib.path.Path`."""
        if not self._vertices:
            return Path(np.empty((0, 2)))
        return Path(np.array(self._vertices, dtype=float), list(self._codes))

    # -- composite commands --------------------------------------------

    def line(
        self,
        start: PointLike,
        end: PointLike,
        action: Action | str = Action.STROKE,
    ) -> None:
        """Draw a single straight segment and perform *action*."""
        action = Action(action)
        if action is not Action.PATH:
            self.new_path()
        self.move_to(start)
        self.line_to(end)
        self.perform_action(action)

    def poly(
        self,
        points: Sequence[PointLike],
        action: Action | str = Action.NONE,
        *,
        close: bool = False,
        reversepath: bool = False,
    ) -> list[Point]:
        """Draw a polyline through *points* and perform *action*.

        Args:
            points: Vertices in drawing order.
            action: What to do with the path once built.  Any action
                other than ``"path"`` starts a fresh path.
            close: Close the polyline back to its first point.
            reversepath: Traverse *points* in reverse order.

        Returns:
            The vertices in the order they were drawn.
        """
        action = Action(action)
        pts = as_points(points)
        if reversepath:
            pts = pts[::-1]
        if action is not Action.PATH:
            self.new_path()
        if pts:
            self.move_to(pts[0])
            for p in pts[1:]:
                self.line_to(p)
            if close:
                self.close_path()
        self.perform_action(action)
        return pts

    def perform_action(self, action: Action | str) -> None:
        """Render, clip with, or keep the current path.

        ``"none"`` and ``"path"`` leave the path in place.  ``"clip"``
        makes the path the clipping region of the current graphics
        state.  The remaining actions pass the path to the backend.
        Consuming actions clear the path.
        """
        action = Action(action)
        if not action.consumes_path:
            return
        path = self.current_path()
        if action is Action.CLIP:
            logger.debug("clip path set (%d vertices)", len(path.vertices))
            self._state = replace(self._state, clip=path)
        elif len(path.vertices) == 0:
            logger.debug("%s requested on an empty path; nothing drawn", action)
        else:
            logger.debug(
                "%s path with %d vertices (line width %g, %s)",
                action, len(path.vertices),
                self._state.line_width, self._state.linestyle,
            )
            self._paint(path, action, self._state)
        self._clear_path()

    @abstractmethod
    def _paint(self, path: Path, action: Action, state: GraphicsState) -> None:
        """Render *path* in device coordinates according to *action*.

        Only called for ``stroke``, ``fill`` and ``fillstroke``.
        """
