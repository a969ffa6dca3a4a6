"""Value shapes accepted by ``ReprBuilder.append``.

A single ``append`` covers every kind of value; styles dispatch on the shape
returned by ``shape_of``. Python has one unbounded ``int``, one ``float`` and
no separate character type, so fixed-width numbers collapse into INTEGER and
FLOAT, and characters are TEXT. Typed arrays of any width are ``array.array``
or ``bytes``/``bytearray``, and are ARRAY like lists and tuples.
"""

from __future__ import annotations

from array import array
from collections.abc import Collection, Mapping
from enum import Enum, auto


class ValueShape(Enum):
    """Closed set of value shapes."""

    NULL = auto()
    BOOLEAN = auto()
    INTEGER = auto()
    FLOAT = auto()
    TEXT = auto()
    ARRAY = auto()
    COLLECTION = auto()
    MAPPING = auto()
    OBJECT = auto()


ARRAY_TYPES: tuple[type, ...] = (list, tuple, array, bytes, bytearray)

_SCALARS = frozenset({ValueShape.BOOLEAN, ValueShape.INTEGER, ValueShape.FLOAT, ValueShape.TEXT})


def shape_of(value: object) -> ValueShape:
    """Classify a value.

    Order matters: ``bool`` is an ``int`` subclass, and ``str``/``bytes``
    are collections.

    Example:
        >>> shape_of(True)
        <ValueShape.BOOLEAN: 2>
        >>> shape_of([1, 2])
        <ValueShape.ARRAY: 6>
    """
    if value is None:
        return ValueShape.NULL
    if isinstance(value, bool):
        return ValueShape.BOOLEAN
    if isinstance(value, int):
        return ValueShape.INTEGER
    if isinstance(value, float):
        return ValueShape.FLOAT
    if isinstance(value, str):
        return ValueShape.TEXT
    if isinstance(value, ARRAY_TYPES):
        return ValueShape.ARRAY
    if isinstance(value, Mapping):
        return ValueShape.MAPPING
    if isinstance(value, Collection):
        return ValueShape.COLLECTION
    return ValueShape.OBJECT


def is_scalar(value: object) -> bool:
    """True for booleans, numbers and text."""
    return shape_of(value) in _SCALARS
