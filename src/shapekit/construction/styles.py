"""Style set save/load for JSON files."""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from shapekit.model import (
    DrawStyle,
    PolycrossOptions,
    ShapeOptions,
    options_from_dict,
    options_to_dict,
)

_VALID_SECTIONS = frozenset({
    "draw_style", "shape_options", "polycross_options",
})


@dataclass
class StyleSet:
    """A collection of drawing settings loaded from or saved to a file.

    All fields are optional.  A ``StyleSet`` loaded from a file that
    only contains ``"draw_style"`` will have ``shape_options`` and
    ``polycross_options`` set to ``None``.

    Attributes:
        draw_style: Canvas colours, alpha, line style and arc
            resolution.
        shape_options: Default options for the shape builders.
        polycross_options: Default options for polycross.
    """

    draw_style: DrawStyle | None = None
    shape_options: ShapeOptions | None = None
    polycross_options: PolycrossOptions | None = None


def save_styles(
    path: str | Path,
    *,
    draw_style: DrawStyle | None = None,
    shape_options: ShapeOptions | None = None,
    polycross_options: PolycrossOptions | None = None,
) -> None:
    """Save drawing settings to a JSON file.

    Only sections that are not ``None`` are written.  The file is
    human-readable with two-space indentation.
    """
    data: dict = {}
    if draw_style is not None:
        data["draw_style"] = draw_style.to_dict()
    if shape_options is not None:
        data["shape_options"] = options_to_dict(shape_options)
    if polycross_options is not None:
        data["polycross_options"] = options_to_dict(polycross_options)

    Path(path).write_text(json.dumps(data, indent=2) + "\n")


def load_styles(path: str | Path) -> StyleSet:
    """Load drawing settings from a JSON file.

    All sections are optional.

    Raises:
        ValueError: If the file contains unknown top-level keys, or a
            section contains unknown or invalid fields.
    """
    data = json.loads(Path(path).read_text())

    unknown = set(data) - _VALID_SECTIONS
    if unknown:
        raise ValueError(
            f"unknown top-level keys in style file: {sorted(unknown)}"
        )

    draw_style = None
    if "draw_style" in data:
        draw_style = DrawStyle.from_dict(data["draw_style"])

    shape_options = None
    if "shape_options" in data:
        shape_options = options_from_dict(ShapeOptions, data["shape_options"])

    polycross_options = None
    if "polycross_options" in data:
        polycross_options = options_from_dict(
            PolycrossOptions, data["polycross_options"],
        )

    return StyleSet(
        draw_style=draw_style,
        shape_options=shape_options,
        polycross_options=polycross_options,
    )
