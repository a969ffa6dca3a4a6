"""Exception classes for reprkit.

Provides standardized exceptions for error handling throughout reprkit.
"""

from __future__ import annotations


class ReprKitError(Exception):
    """Base exception for all reprkit errors.

    Subclass this for specific error categories.
    """

    pass


class InvalidArgumentError(ReprKitError, ValueError):
    """A required argument was None.

    Raised by ``ReprBuilder.append_identity``, ``identity_to_string`` and
    ``set_default_style``. Treat it as a programming error.
    """

    def __init__(self, argument: str, message: str | None = None) -> None:
        """Initialize invalid argument error.

        Args:
            argument: Name of the offending argument (e.g., "style")
            message: Optional description (defaults to "must not be None")
        """
        self.argument = argument
        super().__init__(f"{argument}: {message or 'must not be None'}")


class BuilderStateError(ReprKitError, RuntimeError):
    """Operation not allowed in the builder's current state.

    Raised when appending to a builder whose ``build()`` has already run.
    """

    pass
