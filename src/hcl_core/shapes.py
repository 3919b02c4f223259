"""Declared output shapes and the Slot output location."""

from __future__ import annotations

import collections.abc
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, get_args, get_origin


# ---------------------------------------------------------------------------
# ShapeKind / Shape
# ---------------------------------------------------------------------------

class ShapeKind(Enum):
    Int = auto()
    String = auto()
    Mapping = auto()
    Sequence = auto()
    Dynamic = auto()
    Unsupported = auto()


@dataclass(frozen=True, slots=True)
class Shape:
    kind: ShapeKind
    key: Shape | None = None    # Mapping only
    elem: Shape | None = None   # Mapping value / Sequence element
    declared: Any = None        # annotation the shape was resolved from

    def describe(self) -> str:
        if self.kind == ShapeKind.Mapping:
            return f"Mapping({_describe(self.key)} -> {_describe(self.elem)})"
        if self.kind == ShapeKind.Sequence:
            return f"Sequence({_describe(self.elem)})"
        if self.kind == ShapeKind.Unsupported:
            return f"Unsupported({_type_name(self.declared)})"
        return self.kind.name


INT = Shape(ShapeKind.Int, declared=int)
STRING = Shape(ShapeKind.String, declared=str)
DYNAMIC = Shape(ShapeKind.Dynamic, declared=Any)


def mapping_of(key: Shape, value: Shape) -> Shape:
    return Shape(ShapeKind.Mapping, key=key, elem=value)


def sequence_of(elem: Shape) -> Shape:
    return Shape(ShapeKind.Sequence, elem=elem)


# ---------------------------------------------------------------------------
# Annotation → Shape
# ---------------------------------------------------------------------------

_MAPPING_ORIGINS = (dict, collections.abc.Mapping, collections.abc.MutableMapping)
_SEQUENCE_ORIGINS = (list, collections.abc.Sequence, collections.abc.MutableSequence)


def shape_of(tp: Any) -> Shape:
    """Resolve a Python type annotation to a Shape.

    - ``int`` / ``str`` → Int / String (``bool`` is not an Int)
    - ``Any`` / ``object`` → Dynamic
    - ``dict[K, V]`` and the Mapping ABCs → Mapping
    - ``list[T]`` and the Sequence ABCs → Sequence (``str`` excluded)
    - bare ``dict`` / ``list`` take ``Any`` for their arguments
    - everything else → Unsupported
    """
    if isinstance(tp, Shape):
        return tp
    if tp is int:
        return INT
    if tp is str:
        return STRING
    if tp is Any or tp is object:
        return DYNAMIC

    origin = get_origin(tp) or tp
    args = get_args(tp)

    if origin in _MAPPING_ORIGINS:
        key, value = args if len(args) == 2 else (Any, Any)
        return Shape(
            ShapeKind.Mapping, key=shape_of(key), elem=shape_of(value), declared=tp
        )
    if origin in _SEQUENCE_ORIGINS:
        (elem,) = args if len(args) == 1 else (Any,)
        return Shape(ShapeKind.Sequence, elem=shape_of(elem), declared=tp)

    return Shape(ShapeKind.Unsupported, declared=tp)


def _describe(shape: Shape | None) -> str:
    return shape.describe() if shape is not None else "?"


def _type_name(tp: Any) -> str:
    if isinstance(tp, type) and not get_args(tp):
        return tp.__name__
    return repr(tp)


# ---------------------------------------------------------------------------
# Slot
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Slot:
    """Caller-owned output location, filled in place by a decode call."""

    shape: Shape
    value: Any = None

    @classmethod
    def of(cls, tp: Any, value: Any = None) -> Slot:
        return cls(shape_of(tp), value)
