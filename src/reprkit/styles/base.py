"""ToStringStyle: the built-in configurable style.

Renders objects as ``ClassName@hexid[field=value,field=value]`` by default.
Every marker and switch is a dataclass field, so variants are created with
``replace()`` or ``from_dict()`` rather than by subclassing:

    >>> from reprkit.styles.base import ToStringStyle
    >>> compact = ToStringStyle(use_identity_hash_code=False, use_short_class_name=True)
    >>> compact.content_start, compact.content_end
    ('[', ']')

Rendering rules:
    - None values render as ``null_text``.
    - Booleans, numbers and text render as ``str(value)``.
    - Arrays (list, tuple, array.array, bytes, bytearray) render their
      elements between ``array_start``/``array_end`` in full detail, or
      ``<size=N>`` in summary.
    - Other collections and mappings render ``str(value)`` in full detail, or
      the size marker in summary.
    - Other objects render ``str(value)`` in full detail, or ``<ClassName>``
      in summary.
    - A value is registered in ``reprkit.tracking`` while it renders. If it
      shows up again inside its own rendering (a cycle), the inner
      occurrence renders as its identity text.

Thread Safety:
    Instances are frozen. Per-rendering state lives in the buffer and in the
    context-local registry of ``reprkit.tracking``.

"""

from __future__ import annotations

import dataclasses
from collections.abc import Collection, Mapping, Sized
from dataclasses import dataclass
from typing import Any, cast

from reprkit import tracking
from reprkit.buffer import TextBuffer
from reprkit.utils.identity import (
    class_name,
    identity_hash,
    identity_to_string,
    short_class_name,
)
from reprkit.utils.logger import get_logger
from reprkit.values import ValueShape, is_scalar, shape_of

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class ToStringStyle:
    """Immutable, configurable formatting style.

    Attributes:
        use_class_name: Write the class name before the content
        use_short_class_name: Omit the module from the class name
        use_identity_hash_code: Write ``@hexid`` after the class name
        use_field_names: Write ``name=`` before labelled values
        content_start: Opens the field list
        content_end: Closes the field list
        field_name_value_separator: Between a field name and its value
        field_separator: Between fields
        field_separator_at_start: Also write a separator right after content_start
        field_separator_at_end: Keep the separator after the last field
        default_full_detail: Detail level when the caller passes None
        array_content_detail: Detail level for objects inside arrays
        array_start: Opens an array
        array_end: Closes an array
        array_separator: Between array elements
        null_text: Rendering of None
        size_start: Opens a summary size marker
        size_end: Closes a summary size marker
        summary_object_start: Opens a summary object marker
        summary_object_end: Closes a summary object marker

    """

    use_class_name: bool = True
    use_short_class_name: bool = False
    use_identity_hash_code: bool = True
    use_field_names: bool = True
    content_start: str = "["
    content_end: str = "]"
    field_name_value_separator: str = "="
    field_separator: str = ","
    field_separator_at_start: bool = False
    field_separator_at_end: bool = False
    default_full_detail: bool = True
    array_content_detail: bool = True
    array_start: str = "{"
    array_end: str = "}"
    array_separator: str = ","
    null_text: str = "<null>"
    size_start: str = "<size="
    size_end: str = ">"
    summary_object_start: str = "<"
    summary_object_end: str = ">"

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> ToStringStyle:
        """Create a style from a mapping.

        Only keys that are ToStringStyle fields are used; unknown keys are
        silently ignored.

        Example:
            >>> style = ToStringStyle.from_dict({"content_start": "(", "content_end": ")", "x": 1})
            >>> style.content_start
            '('

        """
        valid_fields = {f.name for f in dataclasses.fields(cls)}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        return cls(**filtered)

    def replace(self, **changes: Any) -> ToStringStyle:
        """Return a copy with some fields changed."""
        return dataclasses.replace(self, **changes)

    # =========================================================================
    # Markers
    # =========================================================================

    def append_start(self, buffer: TextBuffer, obj: object) -> None:
        """Write class name, identity and content start for ``obj``."""
        if obj is None:
            return
        if self.use_class_name:
            cls = type(obj)
            buffer.append(short_class_name(cls) if self.use_short_class_name else class_name(cls))
        if self.use_identity_hash_code:
            buffer.append("@").append(identity_hash(obj))
        buffer.append(self.content_start)
        if self.field_separator_at_start:
            buffer.append(self.field_separator)

    def append_end(self, buffer: TextBuffer, obj: object) -> None:
        """Close the content opened by append_start."""
        if not self.field_separator_at_end:
            buffer.remove_suffix(self.field_separator)
        buffer.append(self.content_end)

    # =========================================================================
    # Fields
    # =========================================================================

    def append(
        self,
        buffer: TextBuffer,
        field_name: str | None,
        value: object,
        full_detail: bool | None = None,
    ) -> None:
        """Write ``name=value`` followed by a field separator."""
        if self.use_field_names and field_name is not None:
            buffer.append(field_name).append(self.field_name_value_separator)
        if value is None:
            buffer.append(self.null_text)
        else:
            detail = self.default_full_detail if full_detail is None else full_detail
            self._append_value(buffer, value, detail)
        buffer.append(self.field_separator)

    def append_super(self, buffer: TextBuffer, text: str) -> None:
        """Splice the field list of a parent class's rendering."""
        self.append_to_string(buffer, text)

    def append_to_string(self, buffer: TextBuffer, text: str) -> None:
        """Splice the field list of another rendering made with this style.

        The content between the first ``content_start`` and the last
        ``content_end`` is copied; renderings with no fields add nothing.
        """
        start = text.find(self.content_start)
        begin = start + len(self.content_start)
        end = text.rfind(self.content_end)
        if start < 0 or end < begin:
            logger.debug("Content markers not found in %r, nothing spliced", text)
            return
        if end == begin:
            return
        if self.field_separator_at_start:
            buffer.remove_suffix(self.field_separator)
        buffer.append(text[begin:end])
        buffer.append(self.field_separator)

    # =========================================================================
    # Value rendering
    # =========================================================================

    def _append_value(self, buffer: TextBuffer, value: object, detail: bool) -> None:
        if is_scalar(value):
            buffer.append(str(value))
            return
        if tracking.is_registered(value):
            buffer.append(identity_to_string(value))
            return
        tracking.register(value)
        try:
            self._append_shape(buffer, value, shape_of(value), detail)
        finally:
            tracking.unregister(value)

    def _append_shape(
        self, buffer: TextBuffer, value: object, shape: ValueShape, detail: bool
    ) -> None:
        if shape is ValueShape.ARRAY:
            if detail:
                self._append_array(buffer, cast("Collection[Any]", value))
            else:
                self._append_size(buffer, cast("Sized", value))
        elif shape is ValueShape.COLLECTION or shape is ValueShape.MAPPING:
            if detail:
                buffer.append(str(value))
            else:
                self._append_size(buffer, cast("Sized", value))
        elif detail:
            buffer.append(str(value))
        else:
            buffer.append(self.summary_object_start)
            buffer.append(short_class_name(type(value)))
            buffer.append(self.summary_object_end)

    def _append_array(self, buffer: TextBuffer, items: Collection[Any]) -> None:
        buffer.append(self.array_start)
        for i, item in enumerate(items):
            if i:
                buffer.append(self.array_separator)
            if item is None:
                buffer.append(self.null_text)
            else:
                self._append_value(buffer, item, self.array_content_detail)
        buffer.append(self.array_end)

    def _append_size(self, buffer: TextBuffer, value: Sized) -> None:
        buffer.append(self.size_start).append(str(len(value))).append(self.size_end)
