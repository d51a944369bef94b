"""Per-builder options and keyword-override resolution."""

from __future__ import annotations

import numbers
from dataclasses import dataclass, fields, replace
from typing import Any, TypeVar

import numpy as np

from shapekit.model._util import _field_defaults

_O = TypeVar("_O", bound="ShapeOptions")


@dataclass(frozen=True)
class ShapeOptions:
    """Options shared by every shape builder.

    Attributes:
        vertices: Only compute and return the vertices; draw nothing.
        reversepath: Reverse the direction of the constructed path
            (and of the returned vertices).
    """

    vertices: bool = False
    reversepath: bool = False

    def __post_init__(self) -> None:
        for name in ("vertices", "reversepath"):
            value = getattr(self, name)
            if not isinstance(value, (bool, np.bool_)):
                raise ValueError(f"{name} must be a bool, got {value!r}")


@dataclass(frozen=True)
class PolycrossOptions(ShapeOptions):
    """Options for :func:`~shapekit.construction.crosses.polycross`.

    Attributes:
        splay: How far the outer edge of each arm fans out from the
            arm's base angle, relative to the arm width.  Any real
            value is accepted, including infinities; the resulting
            angular offset is clamped to a quarter turn.
    """

    splay: float = 0.5

    def __post_init__(self) -> None:
        super().__post_init__()
        if isinstance(self.splay, bool) or not isinstance(self.splay, numbers.Real):
            raise ValueError(f"splay must be a real number, got {self.splay!r}")


def resolve_options(
    cls: type[_O],
    options: _O | None = None,
    **kwargs: Any,
) -> _O:
    """Build an options object from an optional base plus overrides.

    Any kwarg whose name matches a field of *cls* replaces that
    field's value.  Passing ``None`` leaves the base value in place.

    Raises:
        TypeError: If a kwarg name does not match any field of *cls*,
            or *options* is not an instance of *cls*.
    """
    names = {f.name for f in fields(cls)}
    unknown = kwargs.keys() - names
    if unknown:
        raise TypeError(
            f"Unknown option keyword argument(s): {', '.join(sorted(unknown))}"
        )
    if options is None:
        options = cls()
    elif not isinstance(options, cls):
        raise TypeError(
            f"options must be a {cls.__name__}, got {type(options).__name__}"
        )
    overrides = {k: v for k, v in kwargs.items() if v is not None}
    if overrides:
        options = replace(options, **overrides)
    return options


def options_to_dict(options: ShapeOptions) -> dict:
    """Serialise options to a dictionary, omitting default-valued fields."""
    defaults = _field_defaults(type(options))
    return {
        key: getattr(options, key)
        for key, default in defaults.items()
        if getattr(options, key) != default
    }


def options_from_dict(cls: type[_O], d: dict) -> _O:
    """Deserialise options of type *cls* from a dictionary.

    Raises:
        ValueError: If *d* contains keys that are not fields of *cls*,
            or a value has the wrong type.
    """
    unknown = set(d) - set(_field_defaults(cls))
    if unknown:
        raise ValueError(f"unknown {cls.__name__} keys: {sorted(unknown)}")
    return cls(**d)
