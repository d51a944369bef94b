"""Tests for builder options and keyword-override resolution."""

import dataclasses
import math

import pytest

from shapekit.model import (
    PolycrossOptions,
    ShapeOptions,
    options_from_dict,
    options_to_dict,
    resolve_options,
)


class TestShapeOptions:
    def test_defaults(self):
        opts = ShapeOptions()
        assert opts.vertices is False
        assert opts.reversepath is False

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            ShapeOptions().vertices = True

    def test_polycross_default_splay(self):
        assert PolycrossOptions().splay == 0.5

    @pytest.mark.parametrize("splay", [math.inf, -math.inf, 1e308, -3.0])
    def test_polycross_accepts_any_real_splay(self, splay):
        assert PolycrossOptions(splay=splay).splay == splay

    @pytest.mark.parametrize("splay", ["wide", None, True])
    def test_polycross_rejects_non_numeric_splay(self, splay):
        with pytest.raises(ValueError, match="splay"):
            PolycrossOptions(splay=splay)

    @pytest.mark.parametrize("field", ["vertices", "reversepath"])
    def test_flags_must_be_bool(self, field):
        with pytest.raises(ValueError, match=field):
            ShapeOptions(**{field: "yes"})


class TestResolveOptions:
    def test_no_base_no_overrides(self):
        assert resolve_options(ShapeOptions) == ShapeOptions()

    def test_override_field(self):
        opts = resolve_options(ShapeOptions, vertices=True)
        assert opts.vertices is True
        assert opts.reversepath is False

    def test_override_applies_on_top_of_base(self):
        base = ShapeOptions(reversepath=True)
        opts = resolve_options(ShapeOptions, base, vertices=True)
        assert opts == ShapeOptions(vertices=True, reversepath=True)

    def test_none_keeps_base_value(self):
        base = ShapeOptions(reversepath=True)
        opts = resolve_options(ShapeOptions, base, reversepath=None)
        assert opts.reversepath is True

    def test_unknown_keyword_raises(self):
        with pytest.raises(TypeError, match="splay"):
            resolve_options(ShapeOptions, splay=0.3)

    def test_wrong_options_type_raises(self):
        with pytest.raises(TypeError, match="PolycrossOptions"):
            resolve_options(PolycrossOptions, ShapeOptions())

    def test_polycross_splay_override(self):
        opts = resolve_options(PolycrossOptions, splay=0.1)
        assert opts.splay == 0.1


class TestOptionsDict:
    def test_defaults_serialise_empty(self):
        assert options_to_dict(PolycrossOptions()) == {}

    def test_non_defaults_serialised(self):
        d = options_to_dict(PolycrossOptions(reversepath=True, splay=0.2))
        assert d == {"reversepath": True, "splay": 0.2}

    def test_from_dict(self):
        opts = options_from_dict(PolycrossOptions, {"splay": 0.9})
        assert opts == PolycrossOptions(splay=0.9)

    def test_from_dict_wrong_value_type(self):
        with pytest.raises(ValueError, match="vertices"):
            options_from_dict(ShapeOptions, {"vertices": "yes"})

    def test_from_dict_unknown_key(self):
        with pytest.raises(ValueError, match="unknown"):
            options_from_dict(ShapeOptions, {"splay": 0.9})
