"""Utility modules for reprkit.

Provides:
- identity: identity_to_string, class_name, short_class_name
- logger: get_logger for logging
"""

from reprkit.utils.identity import (
    class_name,
    identity_hash,
    identity_to_string,
    short_class_name,
)
from reprkit.utils.logger import get_logger

__all__ = [
    "class_name",
    "get_logger",
    "identity_hash",
    "identity_to_string",
    "short_class_name",
]
