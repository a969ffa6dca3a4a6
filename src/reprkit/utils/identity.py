"""Identity text and class-name helpers.

The identity text of an object is what a to-string falls back to when it
cannot (or must not) render the object's contents: the qualified class name
followed by ``@`` and the hexadecimal object id.

Example:
    >>> from reprkit.utils.identity import identity_to_string
    >>> identity_to_string(object())  # doctest: +ELLIPSIS
    'object@...'
"""

from __future__ import annotations

from reprkit.errors import InvalidArgumentError


def class_name(cls: type) -> str:
    """Return ``module.QualName`` for a class.

    The ``builtins`` module is omitted, so ``class_name(int) == "int"``.
    """
    module = cls.__module__
    if not module or module == "builtins":
        return cls.__qualname__
    return f"{module}.{cls.__qualname__}"


def short_class_name(cls: type) -> str:
    """Return the class name without its module.

    Nesting inside other classes is kept (``Outer.Inner``); the enclosing
    function of a local class is dropped (``make.<locals>.Pair`` -> ``Pair``).
    """
    return cls.__qualname__.rpartition("<locals>.")[2]


def identity_hash(obj: object) -> str:
    """Return the object's id as lowercase hex."""
    return format(id(obj), "x")


def identity_to_string(obj: object) -> str:
    """Render an object the way ``object.__repr__`` identifies it.

    Args:
        obj: Object to describe (must not be None)

    Returns:
        ``"<class name>@<hex id>"``

    Raises:
        InvalidArgumentError: If obj is None
    """
    if obj is None:
        raise InvalidArgumentError("obj")
    return f"{class_name(type(obj))}@{identity_hash(obj)}"
