"""ReprBuilder: fluent builder for ``__str__`` and ``__repr__`` output.

Usage:
    >>> from reprkit import ReprBuilder, SHORT_PREFIX_STYLE
    >>> class Point:
    ...     def __init__(self, x, y):
    ...         self.x, self.y = x, y
    ...     def __repr__(self):
    ...         return (
    ...             ReprBuilder(self, SHORT_PREFIX_STYLE)
    ...             .append("x", self.x)
    ...             .append("y", self.y)
    ...             .build()
    ...         )
    >>> Point(1, 2)
    Point[x=1,y=2]

Each append is handed straight to the style, which writes into the builder's
buffer. Construction writes the start marker; ``build()`` writes the end
marker (or the style's null text when the target is None) exactly once.

Thread Safety:
    A builder belongs to the thread that created it. Styles are shared.

"""

from __future__ import annotations

from typing import Any

from reprkit.buffer import TextBuffer
from reprkit.defaults import get_default_style
from reprkit.errors import BuilderStateError, InvalidArgumentError
from reprkit.styles.protocol import ReprStyle
from reprkit.utils.identity import identity_to_string

# Distinguishes append(value) from append(field_name, value)
_UNSET: Any = object()


class ReprBuilder:
    """Builds a string representation of one object.

    Args:
        target: Object being described, or None
        style: Style to render with (None = current default style)
        buffer: Buffer to write into (None = a new buffer). Passing a shared
            buffer lets several builders compose into one output.

    """

    __slots__ = ("_buffer", "_result", "_style", "_target")

    def __init__(
        self,
        target: object,
        style: ReprStyle | None = None,
        buffer: TextBuffer | None = None,
    ) -> None:
        if style is None:
            style = get_default_style()
        if buffer is None:
            buffer = TextBuffer()
        self._target = target
        self._style = style
        self._buffer = buffer
        self._result: str | None = None
        style.append_start(buffer, target)

    # =========================================================================
    # Appending
    # =========================================================================

    def append(
        self,
        field_name: Any,
        value: object = _UNSET,
        /,
        full_detail: bool | None = None,
    ) -> ReprBuilder:
        """Append a value, optionally labelled.

        ``append(value)`` appends an unlabelled value;
        ``append(name, value)`` labels it. Any value is accepted, including
        None and empty arrays.

        Args:
            field_name: Field name, or the value itself when called with one
                positional argument
            value: Value to append
            full_detail: True for full contents, False for a summary,
                None for the style's default

        Returns:
            self for method chaining

        Raises:
            BuilderStateError: If build() has already been called
        """
        if value is _UNSET:
            field_name, value = None, field_name
        self._check_open()
        self._style.append(self._buffer, field_name, value, full_detail)
        return self

    def append_super(self, super_text: str | None) -> ReprBuilder:
        """Append the rendering of a parent class.

        Typically ``append_super(super().__repr__())``. None is ignored.
        """
        self._check_open()
        if super_text is not None:
            self._style.append_super(self._buffer, super_text)
        return self

    def append_to_string(self, text: str | None) -> ReprBuilder:
        """Append the rendering of a delegate object. None is ignored."""
        self._check_open()
        if text is not None:
            self._style.append_to_string(self._buffer, text)
        return self

    def append_identity(self, obj: object) -> ReprBuilder:
        """Write ``obj``'s identity text, bypassing the style.

        Raises:
            InvalidArgumentError: If obj is None
        """
        self._check_open()
        if obj is None:
            raise InvalidArgumentError("obj")
        self._buffer.append(identity_to_string(obj))
        return self

    # =========================================================================
    # Finishing
    # =========================================================================

    def build(self) -> str:
        """Finish the rendering and return it.

        The end marker (or null text) is written on the first call only;
        later calls return the same string.
        """
        if self._result is None:
            if self._target is None:
                self._buffer.append(self._style.null_text)
            else:
                self._style.append_end(self._buffer, self._target)
            self._result = self._buffer.build()
        return self._result

    def _check_open(self) -> None:
        if self._result is not None:
            raise BuilderStateError("Cannot append to a builder after build()")

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def target(self) -> object:
        """The object being described."""
        return self._target

    @property
    def buffer(self) -> TextBuffer:
        """The underlying buffer (not a copy)."""
        return self._buffer

    @property
    def style(self) -> ReprStyle:
        """The style in use."""
        return self._style

    @property
    def finalized(self) -> bool:
        """True once build() has run."""
        return self._result is not None

    def __str__(self) -> str:
        return self.build()

    def __repr__(self) -> str:
        state = "finalized" if self.finalized else "open"
        target = type(self._target).__name__
        style = type(self._style).__name__
        return f"<ReprBuilder target={target} style={style} {state}>"
