"""Process-wide default style.

Builders constructed without an explicit style use the default style that is
current at construction time. It starts as ``DEFAULT_STYLE``.

Usage:
    from reprkit import set_default_style, SHORT_PREFIX_STYLE

    # Once, at application startup
    set_default_style(SHORT_PREFIX_STYLE)

    # Temporarily, e.g. in tests
    with default_style_context(MULTI_LINE_STYLE):
        text = str(thing)

Prefer passing a style to ``ReprBuilder`` at the call site that needs it; the
default is a fallback for code that does not care.

Thread Safety:
    set_default_style() should be called once at application startup. Writes
    are protected by a lock; reads are a single reference load, so a reader
    sees either the previous or the new style, never anything in between.
    default_style_context() swaps the process-wide value and is not isolated
    per thread.
"""

from __future__ import annotations

import threading
from collections.abc import Iterator
from contextlib import contextmanager

from reprkit.errors import InvalidArgumentError
from reprkit.styles.presets import DEFAULT_STYLE
from reprkit.styles.protocol import ReprStyle
from reprkit.utils.logger import get_logger

logger = get_logger(__name__)

_default_style: ReprStyle = DEFAULT_STYLE
_style_lock = threading.Lock()


def get_default_style() -> ReprStyle:
    """Return the current default style (never None).

    Thread Safety:
        Reads the reference without locking; the load is atomic.
    """
    return _default_style


def set_default_style(style: ReprStyle) -> None:
    """Publish a new default style.

    Builders already constructed keep the style they started with.

    Args:
        style: Style to use for builders constructed without one

    Raises:
        InvalidArgumentError: If style is None (the default is unchanged)
    """
    global _default_style
    if style is None:
        raise InvalidArgumentError("style")
    with _style_lock:
        _default_style = style
    logger.debug("Default style set to %s", type(style).__name__)


def reset_default_style() -> None:
    """Restore ``DEFAULT_STYLE`` as the default."""
    global _default_style
    with _style_lock:
        _default_style = DEFAULT_STYLE
    logger.debug("Default style reset")


@contextmanager
def default_style_context(style: ReprStyle) -> Iterator[ReprStyle]:
    """Context manager for temporary default style changes.

    Restores the previous default even if an exception is raised.

    Example:
        >>> from reprkit.styles import SIMPLE_STYLE
        >>> with default_style_context(SIMPLE_STYLE):
        ...     get_default_style() is SIMPLE_STYLE
        True

    Raises:
        InvalidArgumentError: If style is None
    """
    previous = get_default_style()
    set_default_style(style)
    try:
        yield style
    finally:
        set_default_style(previous)


__all__ = [
    "default_style_context",
    "get_default_style",
    "reset_default_style",
    "set_default_style",
]
