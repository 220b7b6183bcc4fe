"""UI themes and the theme selection rule.

Each theme is a self-contained namespace of the asset bundle. Selection
never fails: anything that is not a known theme falls back to a default.
"""

from collections.abc import Container
from enum import StrEnum


class Theme(StrEnum):
    """Visual variants of the documentation UI."""

    DEFAULT = "default"
    MINIMAL = "minimal"
    MODERN = "modern"


THEMES: tuple[str, ...] = tuple(theme.value for theme in Theme)


def resolve_theme(requested: str | None, valid: Container[str], default: str) -> str:
    """Return *requested* if it names a valid theme, otherwise *default*.

    Examples::

        resolve_theme("modern", THEMES, "default")  -> "modern"
        resolve_theme("neon", THEMES, "default")    -> "default"
        resolve_theme(None, THEMES, "minimal")      -> "minimal"
    """
    if requested and requested in valid:
        return requested
    return default
