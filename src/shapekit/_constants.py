"""Shared constants used across the construction and canvas layers."""

CROP_GAP: float = 5.0
"""Distance between a crop mark and the edge of the bounding box."""

CROP_LENGTH: float = 15.0
"""Length of each crop mark."""

CROP_LINE_WIDTH: float = 0.5
"""Line width used when stroking crop marks."""

VALID_LINESTYLES: frozenset[str] = frozenset({
    "solid", "dashed", "dotted", "dashdot",
})
"""Dash styles understood by every canvas."""

DEFAULT_ARC_RESOLUTION: int = 72
"""Line segments per full turn when an arc is flattened."""
