"""Shared test fixtures for shapekit."""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt  # noqa: E402
import pytest  # noqa: E402

from shapekit.canvas import MplCanvas, RecordingCanvas  # noqa: E402


@pytest.fixture
def canvas():
    """Return a fresh recording canvas."""
    return RecordingCanvas()


@pytest.fixture
def mpl_canvas():
    """Return a matplotlib canvas, closing its figure afterwards."""
    c = MplCanvas(figsize=(2.0, 2.0), dpi=50)
    yield c
    plt.close(c.figure)
