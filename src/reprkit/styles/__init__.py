"""Formatting styles for reprkit.

Provides:
- protocol: ReprStyle, the contract builders depend on
- base: ToStringStyle, the built-in configurable style
- presets: DEFAULT_STYLE and the other named presets
"""

from reprkit.styles.base import ToStringStyle
from reprkit.styles.presets import (
    DEFAULT_STYLE,
    MULTI_LINE_STYLE,
    NO_CLASS_NAME_STYLE,
    NO_FIELD_NAMES_STYLE,
    PRESETS,
    SHORT_PREFIX_STYLE,
    SIMPLE_STYLE,
    get_preset,
)
from reprkit.styles.protocol import ReprStyle

__all__ = [
    "DEFAULT_STYLE",
    "MULTI_LINE_STYLE",
    "NO_CLASS_NAME_STYLE",
    "NO_FIELD_NAMES_STYLE",
    "PRESETS",
    "ReprStyle",
    "SHORT_PREFIX_STYLE",
    "SIMPLE_STYLE",
    "ToStringStyle",
    "get_preset",
]
