"""Tests for Point and point coercion."""

import numpy as np
import pytest

from shapekit.model import O, Point, as_point, as_points


class TestPoint:
    def test_value_equality(self):
        assert Point(1.0, 2.0) == Point(1.0, 2.0)
        assert Point(1.0, 2.0) != Point(2.0, 1.0)

    def test_immutable(self):
        p = Point(1.0, 2.0)
        with pytest.raises(AttributeError):
            p.x = 3.0

    def test_unpacks(self):
        x, y = Point(3.0, 4.0)
        assert (x, y) == (3.0, 4.0)

    def test_add_and_subtract(self):
        assert Point(1.0, 2.0) + Point(3.0, 4.0) == Point(4.0, 6.0)
        assert Point(1.0, 2.0) - (1.0, 1.0) == Point(0.0, 1.0)

    def test_distance(self):
        assert Point(0.0, 0.0).distance((3.0, 4.0)) == pytest.approx(5.0)

    def test_list_of_points_to_array(self):
        arr = np.array([Point(0.0, 1.0), Point(2.0, 3.0)])
        assert arr.shape == (2, 2)

    def test_origin(self):
        assert O == Point(0.0, 0.0)


class TestAsPoint:
    def test_point_passthrough(self):
        p = Point(1.0, 2.0)
        assert as_point(p) is p

    @pytest.mark.parametrize("value", [(1, 2), [1.0, 2.0], np.array([1.0, 2.0])])
    def test_coerces_pairs(self, value):
        p = as_point(value)
        assert isinstance(p, Point)
        assert p == Point(1.0, 2.0)
        assert isinstance(p.x, float)

    @pytest.mark.parametrize("value", [(1.0,), (1.0, 2.0, 3.0), [[1.0, 2.0]]])
    def test_rejects_wrong_shape(self, value):
        with pytest.raises(ValueError, match="shape"):
            as_point(value)

    def test_as_points(self):
        pts = as_points([(0, 0), Point(1.0, 1.0)])
        assert pts == [Point(0.0, 0.0), Point(1.0, 1.0)]
