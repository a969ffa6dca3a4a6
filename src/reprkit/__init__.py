"""
reprkit: fluent builders for readable object representations

Build ``__repr__``/``__str__`` output field by field, in a pluggable style.

Quick Start:
    >>> from reprkit import ReprBuilder, SHORT_PREFIX_STYLE
    >>> class Point:
    ...     def __init__(self, x, y):
    ...         self.x, self.y = x, y
    ...     def __repr__(self):
    ...         builder = ReprBuilder(self, SHORT_PREFIX_STYLE)
    ...         return builder.append("x", self.x).append("y", self.y).build()
    >>> Point(1, 2)
    Point[x=1,y=2]

Styles:
    >>> from reprkit import MULTI_LINE_STYLE, set_default_style
    >>> set_default_style(MULTI_LINE_STYLE)  # process-wide, set once at startup

    Custom styles are ``ToStringStyle(...)`` variants, or any object
    implementing the ``ReprStyle`` protocol.
"""

from reprkit.buffer import TextBuffer
from reprkit.builder import ReprBuilder
from reprkit.defaults import (
    default_style_context,
    get_default_style,
    reset_default_style,
    set_default_style,
)
from reprkit.errors import BuilderStateError, InvalidArgumentError, ReprKitError
from reprkit.styles import (
    DEFAULT_STYLE,
    MULTI_LINE_STYLE,
    NO_CLASS_NAME_STYLE,
    NO_FIELD_NAMES_STYLE,
    PRESETS,
    SHORT_PREFIX_STYLE,
    SIMPLE_STYLE,
    ReprStyle,
    ToStringStyle,
    get_preset,
)
from reprkit.utils.identity import identity_to_string
from reprkit.values import ValueShape, shape_of

__version__ = "0.1.0"


def to_string(
    target: object,
    *values: object,
    style: ReprStyle | None = None,
    **fields: object,
) -> str:
    """Render an object in one call.

    Positional values are appended unlabelled, then keyword fields in order.

    Example:
        >>> to_string(None)
        '<null>'
    """
    builder = ReprBuilder(target, style)
    for value in values:
        builder.append(value)
    for name, value in fields.items():
        builder.append(name, value)
    return builder.build()


__all__ = [
    "BuilderStateError",
    "DEFAULT_STYLE",
    "InvalidArgumentError",
    "MULTI_LINE_STYLE",
    "NO_CLASS_NAME_STYLE",
    "NO_FIELD_NAMES_STYLE",
    "PRESETS",
    "ReprBuilder",
    "ReprKitError",
    "ReprStyle",
    "SHORT_PREFIX_STYLE",
    "SIMPLE_STYLE",
    "TextBuffer",
    "ToStringStyle",
    "ValueShape",
    "__version__",
    "default_style_context",
    "get_default_style",
    "get_preset",
    "identity_to_string",
    "reset_default_style",
    "set_default_style",
    "shape_of",
    "to_string",
]
