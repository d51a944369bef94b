"""Tests for the Action enum."""

import pytest

from shapekit.model import Action


class TestAction:
    def test_string_coercion(self):
        assert Action("fill") is Action.FILL
        assert Action("fillstroke") is Action.FILLSTROKE

    def test_unknown_name_raises(self):
        with pytest.raises(ValueError):
            Action("paint")

    @pytest.mark.parametrize("action", [Action.NONE, Action.PATH])
    def test_non_consuming(self, action):
        assert not action.consumes_path

    @pytest.mark.parametrize("action", [
        Action.STROKE, Action.FILL, Action.FILLSTROKE, Action.CLIP,
    ])
    def test_consuming(self, action):
        assert action.consumes_path
