"""TextBuffer: append-only text accumulator for builders.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation.

Styles occasionally need to look at (and strip) the tail of the output, for
example to drop a trailing field separator before closing the content. The
buffer supports that without joining everything it holds.

Thread Safety:
    TextBuffer instances belong to a single builder (or to the caller that
    composes several builders into one buffer). No shared mutable state.

"""

from __future__ import annotations


class TextBuffer:
    """Efficient text accumulator.

    Usage:
            >>> buf = TextBuffer()
            >>> _ = buf.append("Point[").append("x=1").append(",")
            >>> buf.remove_suffix(",")
            True
            >>> buf.append("]").build()
            'Point[x=1]'

    """

    __slots__ = ("_length", "_parts")

    def __init__(self, initial: str = "") -> None:
        """Initialize a buffer, optionally seeded with text."""
        self._parts: list[str] = []
        self._length = 0
        self.append(initial)

    def append(self, s: str) -> TextBuffer:
        """Append a string to the buffer.

        Args:
            s: String to append (empty strings are skipped)

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
            self._length += len(s)
        return self

    def extend(self, strings: list[str]) -> TextBuffer:
        """Append multiple strings at once.

        Args:
            strings: List of strings to append

        Returns:
            self for method chaining
        """
        for s in strings:
            self.append(s)
        return self

    def endswith(self, suffix: str) -> bool:
        """Return True if the accumulated text ends with ``suffix``."""
        if not suffix:
            return True
        if len(suffix) > self._length:
            return False
        return self._tail(len(suffix)).endswith(suffix)

    def remove_suffix(self, suffix: str) -> bool:
        """Drop ``suffix`` from the end of the text if it is there.

        Args:
            suffix: Text to remove

        Returns:
            True if the suffix was present and removed
        """
        if not suffix or not self.endswith(suffix):
            return False
        remaining = len(suffix)
        while remaining:
            part = self._parts.pop()
            if len(part) > remaining:
                self._parts.append(part[: len(part) - remaining])
                self._length -= remaining
                remaining = 0
            else:
                remaining -= len(part)
                self._length -= len(part)
        return True

    def build(self) -> str:
        """Join all parts into final string.

        Collapses the parts so repeated calls stay cheap.
        """
        if len(self._parts) > 1:
            self._parts[:] = ["".join(self._parts)]
        return self._parts[0] if self._parts else ""

    def _tail(self, size: int) -> str:
        pieces: list[str] = []
        total = 0
        for part in reversed(self._parts):
            pieces.append(part)
            total += len(part)
            if total >= size:
                break
        return "".join(reversed(pieces))

    def __len__(self) -> int:
        """Return number of characters accumulated."""
        return self._length

    def __str__(self) -> str:
        return self.build()

    def __repr__(self) -> str:
        return f"TextBuffer({self.build()!r})"
