"""Drawing surfaces that shape builders emit paths into."""

from shapekit.canvas.base import Canvas, GraphicsState
from shapekit.canvas.mpl import MplCanvas
from shapekit.canvas.recording import PaintedPath, RecordingCanvas

__all__ = [
    "Canvas",
    "GraphicsState",
    "MplCanvas",
    "PaintedPath",
    "RecordingCanvas",
]
