"""Logger lookup for reprkit modules.

Every reprkit logger lives under the "reprkit" namespace, so applications can
enable library diagnostics (style changes, skipped content splices) with one
``logging.getLogger("reprkit").setLevel(logging.DEBUG)``.

Example:
    >>> from reprkit.utils.logger import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.debug("Default style set to %s", "ToStringStyle")
"""

from __future__ import annotations

import logging


def get_logger(name: str) -> logging.Logger:
    """Return the reprkit logger for ``name``.

    Names outside the package are nested under "reprkit."; names already in
    it are used as-is.

    Example:
        >>> get_logger("reprkit.defaults").name
        'reprkit.defaults'
        >>> get_logger("styles").name
        'reprkit.styles'
    """
    if not (name == "reprkit" or name.startswith("reprkit.")):
        name = f"reprkit.{name}"
    return logging.getLogger(name)
