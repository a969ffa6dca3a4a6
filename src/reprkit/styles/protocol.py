"""ReprStyle protocol: the contract a builder needs from a style.

Any object implementing these methods can be handed to ``ReprBuilder`` or
installed as the default style. The built-in ``ToStringStyle`` is the
reference implementation.

Example:
    from reprkit.buffer import TextBuffer

    class BracketStyle:
        null_text = "<null>"

        def append_start(self, buffer: TextBuffer, obj: object) -> None:
            buffer.append(type(obj).__name__).append("[")

        def append_end(self, buffer: TextBuffer, obj: object) -> None:
            buffer.remove_suffix(",")
            buffer.append("]")

        def append(self, buffer, field_name, value, full_detail=None) -> None:
            if field_name is not None:
                buffer.append(field_name).append("=")
            buffer.append(str(value)).append(",")

        def append_super(self, buffer: TextBuffer, text: str) -> None:
            self.append_to_string(buffer, text)

        def append_to_string(self, buffer: TextBuffer, text: str) -> None:
            buffer.append(text).append(",")

"""

from typing import Protocol

from reprkit.buffer import TextBuffer


class ReprStyle(Protocol):
    """Protocol for formatting styles.

    Styles are shared between builders and threads; implementations should
    not keep per-rendering state on the instance.

    Attributes:
        null_text: Text a builder emits instead of start/end markers when its
            target is None.

    """

    null_text: str

    def append_start(self, buffer: TextBuffer, obj: object) -> None:
        """Write the start marker for ``obj`` (which may be None)."""
        ...

    def append_end(self, buffer: TextBuffer, obj: object) -> None:
        """Write the end marker for ``obj``."""
        ...

    def append(
        self,
        buffer: TextBuffer,
        field_name: str | None,
        value: object,
        full_detail: bool | None = None,
    ) -> None:
        """Write one field.

        Args:
            buffer: Buffer to write into
            field_name: Label for the value, or None for a positional value
            value: Any value, including None and empty arrays
            full_detail: True for full contents, False for a summary,
                None for the style's default

        """
        ...

    def append_super(self, buffer: TextBuffer, text: str) -> None:
        """Splice a parent class's rendering into the buffer."""
        ...

    def append_to_string(self, buffer: TextBuffer, text: str) -> None:
        """Splice a delegate's rendering into the buffer."""
        ...
