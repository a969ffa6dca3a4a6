"""Named preset styles.

Example output for ``Point(x=1, y=2)`` defined in module ``geo``:

    DEFAULT_STYLE          geo.Point@7f3a9c[x=1,y=2]
    MULTI_LINE_STYLE       geo.Point@7f3a9c[
                             x=1
                             y=2
                           ]
    NO_FIELD_NAMES_STYLE   geo.Point@7f3a9c[1,2]
    SHORT_PREFIX_STYLE     Point[x=1,y=2]
    SIMPLE_STYLE           1,2
    NO_CLASS_NAME_STYLE    [x=1,y=2]
"""

from __future__ import annotations

from types import MappingProxyType

from reprkit.styles.base import ToStringStyle

DEFAULT_STYLE = ToStringStyle()

MULTI_LINE_STYLE = ToStringStyle(
    content_start="[",
    field_separator="\n  ",
    field_separator_at_start=True,
    content_end="\n]",
)

NO_FIELD_NAMES_STYLE = ToStringStyle(use_field_names=False)

SHORT_PREFIX_STYLE = ToStringStyle(use_short_class_name=True, use_identity_hash_code=False)

SIMPLE_STYLE = ToStringStyle(
    use_class_name=False,
    use_identity_hash_code=False,
    use_field_names=False,
    content_start="",
    content_end="",
)

NO_CLASS_NAME_STYLE = ToStringStyle(use_class_name=False, use_identity_hash_code=False)

PRESETS = MappingProxyType(
    {
        "default": DEFAULT_STYLE,
        "multi_line": MULTI_LINE_STYLE,
        "no_field_names": NO_FIELD_NAMES_STYLE,
        "short_prefix": SHORT_PREFIX_STYLE,
        "simple": SIMPLE_STYLE,
        "no_class_name": NO_CLASS_NAME_STYLE,
    }
)


def get_preset(name: str) -> ToStringStyle:
    """Look up a preset by name.

    Names are case-insensitive and accept dashes for underscores
    (``"multi-line"`` == ``"multi_line"``).

    Raises:
        KeyError: If no preset has that name
    """
    key = name.strip().lower().replace("-", "_")
    if key not in PRESETS:
        available = ", ".join(sorted(PRESETS))
        raise KeyError(f"Unknown style preset: {name!r}. Available: {available}")
    return PRESETS[key]
