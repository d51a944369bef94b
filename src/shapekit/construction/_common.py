"""Helpers shared by the shape builders."""

from __future__ import annotations

from shapekit.canvas.base import Canvas


def _require_canvas(canvas: Canvas | None, builder: str) -> Canvas:
    """Return *canvas*, or raise if a builder needs to draw without one.

    Raises:
        ValueError: If *canvas* is ``None``.
    """
    if canvas is None:
        raise ValueError(
            f"{builder}() needs a canvas to draw; pass vertices=True "
            "to compute vertices only"
        )
    return canvas


def _clamp(value: float, lo: float, hi: float) -> float:
    return min(max(value, lo), hi)
