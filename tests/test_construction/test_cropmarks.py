"""Tests for crop marks."""

import numpy as np

from shapekit.construction.cropmarks import _cropmark_segments, cropmarks
from shapekit.model import Action, Point


class TestCropmarkSegments:
    def test_eight_segments_of_fixed_length(self):
        segs = _cropmark_segments(Point(0.0, 0.0), 100, 50)
        assert len(segs) == 8
        for start, end in segs:
            assert start.distance(end) == 15.0

    def test_gap_from_box_edges(self):
        segs = _cropmark_segments(Point(0.0, 0.0), 100, 50)
        # Horizontal top-left mark ends 5 units left of the left edge.
        assert segs[0] == (Point(-70.0, -25.0), Point(-55.0, -25.0))
        # Vertical bottom-right mark starts 5 units below the bottom edge.
        assert segs[7] == (Point(50.0, 30.0), Point(50.0, 45.0))

    def test_offset_by_centre(self):
        at_origin = _cropmark_segments(Point(0.0, 0.0), 10, 10)
        shifted = _cropmark_segments(Point(3.0, 4.0), 10, 10)
        for (a0, a1), (b0, b1) in zip(at_origin, shifted):
            assert b0 - a0 == Point(3.0, 4.0)
            assert b1 - a1 == Point(3.0, 4.0)


class TestCropmarks:
    def test_strokes_eight_lines(self, canvas):
        cropmarks(canvas, (0, 0), 100, 50)
        assert len(canvas.painted) == 8
        for p in canvas.painted:
            assert p.action is Action.STROKE
            assert p.line_width == 0.5
            assert p.linestyle == "solid"
            assert p.vertices.shape == (2, 2)

    def test_restores_line_style(self, canvas):
        canvas.set_line_width(3.0)
        canvas.set_dash("dashed")
        cropmarks(canvas, (0, 0), 100, 50)
        assert canvas.state.line_width == 3.0
        assert canvas.state.linestyle == "dashed"

    def test_respects_translation(self, canvas):
        canvas.translate((10, 10))
        cropmarks(canvas, (0, 0), 100, 50)
        np.testing.assert_allclose(
            canvas.painted[0].vertices, [[-60, -15], [-45, -15]],
        )
