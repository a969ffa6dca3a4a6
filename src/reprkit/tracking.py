"""Registry of objects currently being rendered.

``ToStringStyle`` registers a non-scalar field value only while it renders
that value, and unregisters it in a ``finally`` block. If the same value turns
up again inside its own rendering, it renders as its identity text instead of
calling ``str()`` on it again, which would recurse forever for
self-referencing objects. Builder targets are never registered, so a builder
abandoned before ``build()`` leaves nothing behind.

Thread Safety:
    The registry lives in a ContextVar (PEP 567). Each thread and each
    asyncio task sees its own set of ids, so no locks are needed.

"""

from contextvars import ContextVar

_EMPTY: frozenset[int] = frozenset()

_rendering: ContextVar[frozenset[int]] = ContextVar("reprkit_rendering", default=_EMPTY)


def register(obj: object) -> None:
    """Mark an object as being rendered in the current context."""
    if obj is not None:
        _rendering.set(_rendering.get() | {id(obj)})


def unregister(obj: object) -> None:
    """Remove an object from the current context's registry."""
    if obj is None:
        return
    current = _rendering.get()
    if id(obj) in current:
        _rendering.set(current - {id(obj)})


def is_registered(obj: object) -> bool:
    """True if the object is being rendered further up the call stack."""
    return obj is not None and id(obj) in _rendering.get()


def registered_count() -> int:
    """Number of objects registered in the current context."""
    return len(_rendering.get())


__all__ = [
    "is_registered",
    "register",
    "registered_count",
    "unregister",
]
