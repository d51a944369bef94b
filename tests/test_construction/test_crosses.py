"""Tests for polycross construction."""

import math

import numpy as np
import pytest

from shapekit.construction.crosses import _arm_offsets, polycross
from shapekit.model import Action, PolycrossOptions


def _dists(pts):
    return np.linalg.norm(np.array(pts), axis=1)


class TestArmOffsets:
    def test_inner_offset_is_half_arm_spacing(self):
        d_inner, _ = _arm_offsets(4, 0.5, 0.5)
        assert d_inner == pytest.approx(math.pi / 4)

    def test_outer_offset(self):
        _, d_outer = _arm_offsets(4, 0.5, 0.5)
        assert d_outer == pytest.approx(math.asin(0.5 * math.sin(math.pi / 4)))

    @pytest.mark.parametrize("splay", [5.0, -5.0, 100.0])
    def test_outer_offset_clamped(self, splay):
        _, d_outer = _arm_offsets(3, 1.0, splay)
        assert abs(d_outer) == pytest.approx(math.pi / 2)

    @pytest.mark.parametrize("splay, expected", [
        (math.inf, math.pi / 2), (-math.inf, -math.pi / 2), (math.nan, 0.0),
    ])
    def test_non_finite_splay(self, splay, expected):
        _, d_outer = _arm_offsets(4, 0.5, splay)
        assert d_outer == pytest.approx(expected)

    def test_huge_splay_with_zero_ratio(self):
        _, d_outer = _arm_offsets(4, 0.0, 1e308)
        assert d_outer == 0.0

    def test_zero_ratio_is_finite(self):
        d_inner, d_outer = _arm_offsets(5, 0.0, 0.5)
        assert math.isfinite(d_inner)
        assert d_outer == 0.0


class TestPolycrossVertices:
    @pytest.mark.parametrize("npoints", [3, 4, 6])
    def test_vertex_count_and_radii(self, npoints):
        pts = polycross(None, (0, 0), 10.0, npoints, 0.4, vertices=True)
        assert len(pts) == 3 * npoints
        d = _dists(pts).reshape(npoints, 3)
        np.testing.assert_allclose(d[:, 0], 4.0)
        np.testing.assert_allclose(d[:, 1:], 10.0)

    def test_first_arm_points_up_the_y_axis(self):
        pts = np.array(polycross(None, (0, 0), 10.0, 4, 0.5, vertices=True))
        # The two outer corners of the first arm straddle pi/2.
        mid = (pts[1] + pts[2]) / 2
        assert mid[0] == pytest.approx(0.0, abs=1e-12)
        assert mid[1] > 0

    @pytest.mark.parametrize("ratio, splay", [
        (-1.0, 0.5), (2.0, 0.5), (0.5, -3.0), (0.5, 7.0), (0.0, 0.0), (1.0, 1.0),
        (0.5, math.inf), (0.5, -math.inf), (0.0, 1e308), (0.0, math.inf),
    ])
    def test_out_of_range_inputs_stay_finite(self, ratio, splay):
        pts = polycross(None, (0, 0), 10.0, 5, ratio, splay=splay, vertices=True)
        assert len(pts) == 15
        assert np.all(np.isfinite(np.array(pts)))

    @pytest.mark.parametrize("npoints", [0, -2])
    def test_no_arms_gives_no_vertices(self, npoints):
        assert polycross(None, (0, 0), 10.0, npoints, vertices=True) == []

    def test_zero_radius_is_finite(self):
        pts = polycross(None, (1, 1), 0.0, 4, vertices=True)
        np.testing.assert_allclose(np.array(pts), 1.0)

    def test_splay_option_object(self):
        a = polycross(None, (0, 0), 10.0, 4, options=PolycrossOptions(vertices=True, splay=0.2))
        b = polycross(None, (0, 0), 10.0, 4, vertices=True, splay=0.2)
        assert a == b

    def test_reversepath_is_exact_reverse(self):
        fwd = polycross(None, (2, 3), 10.0, 6, 0.3, 0.4, vertices=True)
        rev = polycross(None, (2, 3), 10.0, 6, 0.3, 0.4, vertices=True, reversepath=True)
        assert rev == fwd[::-1]

    def test_unknown_option_raises(self):
        with pytest.raises(TypeError, match="spread"):
            polycross(None, (0, 0), 10.0, 4, spread=0.2)


class TestPolycrossDrawing:
    def test_draws_closed_path(self, canvas):
        pts = polycross(canvas, (0, 0), 10.0, 4, 0.5, 0.0, Action.STROKE)
        [painted] = canvas.painted
        np.testing.assert_allclose(painted.vertices[:-1], np.array(pts))
