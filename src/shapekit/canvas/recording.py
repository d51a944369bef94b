"""In-memory canvas that records commands and painted paths."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

import numpy as np
from matplotlib.path import Path

from shapekit.canvas.base import Canvas, GraphicsState
from shapekit.model import Action, DrawStyle, PointLike, as_point


@dataclass(frozen=True)
class PaintedPath:
    """A path handed to the backend by a consuming action.

    Attributes:
        action: The action that consumed the path.
        path: The path in device coordinates.
        line_width: Stroke width in effect when the path was painted.
        linestyle: Dash style in effect when the path was painted.
        clip: Clipping path in effect, or ``None``.
    """

    action: Action
    path: Path
    line_width: float
    linestyle: str
    clip: Path | None = None

    @property
    def vertices(self) -> np.ndarray:
        """Device-space vertices, shape ``(n, 2)``."""
        return self.path.vertices


class RecordingCanvas(Canvas):
    """A canvas with no output device.

    Every public drawing command is appended to :attr:`commands` as a
    ``(name, *args)`` tuple with points in user coordinates, and every
    painted path is appended to :attr:`painted`.  Useful for tests and
    for inspecting exactly what a builder asks of its canvas.

    Example usage::

        canvas = RecordingCanvas()
        ngon(canvas, (0, 0), 10, 6, action="fill")
        canvas.painted[-1].vertices
    """

    def __init__(self, style: DrawStyle | None = None) -> None:
        super().__init__(style)
        self.commands: list[tuple[Any, ...]] = []
        self.painted: list[PaintedPath] = []

    def _record(self, name: str, *args: Any) -> None:
        self.commands.append((name, *args))

    def command_names(self) -> list[str]:
        """The names of the recorded commands, in order."""
        return [c[0] for c in self.commands]

    def iter_commands(self, name: str) -> Iterator[tuple[Any, ...]]:
        """Yield the arguments of every recorded command called *name*."""
        for c in self.commands:
            if c[0] == name:
                yield c[1:]

    def save_state(self) -> None:
        self._record("save_state")
        super().save_state()

    def restore_state(self) -> None:
        self._record("restore_state")
        super().restore_state()

    def translate(self, offset: PointLike) -> None:
        self._record("translate", as_point(offset))
        super().translate(offset)

    def set_line_width(self, width: float) -> None:
        self._record("set_line_width", width)
        super().set_line_width(width)

    def set_dash(self, linestyle: str) -> None:
        self._record("set_dash", linestyle)
        super().set_dash(linestyle)

    def new_path(self) -> None:
        self._record("new_path")
        super().new_path()

    def move_to(self, pt: PointLike) -> None:
        self._record("move_to", as_point(pt))
        super().move_to(pt)

    def line_to(self, pt: PointLike) -> None:
        self._record("line_to", as_point(pt))
        super().line_to(pt)

    def arc(
        self,
        center: PointLike,
        radius: float,
        start_angle: float,
        end_angle: float,
    ) -> None:
        self._record("arc", as_point(center), radius, start_angle, end_angle)
        super().arc(center, radius, start_angle, end_angle)

    def close_path(self) -> None:
        self._record("close_path")
        super().close_path()

    def perform_action(self, action: Action | str) -> None:
        self._record("perform_action", Action(action))
        super().perform_action(action)

    def _paint(self, path: Path, action: Action, state: GraphicsState) -> None:
        self.painted.append(PaintedPath(
            action=action,
            path=path,
            line_width=state.line_width,
            linestyle=state.linestyle,
            clip=state.clip,
        ))
