"""Core data structures for styled text."""

from ansi_scrollback.core.color import Color
from ansi_scrollback.core.style import (
    DEFAULT_STYLE,
    DISABLED,
    Disabled,
    Enabled,
    Formatting,
    Style,
    as_formatting,
)
from ansi_scrollback.core.run import StyledRun

__all__ = [
    "Color",
    "Style",
    "DEFAULT_STYLE",
    "Formatting",
    "Disabled",
    "Enabled",
    "DISABLED",
    "as_formatting",
    "StyledRun",
]
