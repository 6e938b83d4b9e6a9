"""Style - immutable text attributes applied to a run of text."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Union

from ansi_scrollback.core.color import Color


# Decoration flags in presentation order
DECORATIONS = ("bold", "italic", "underline", "strike", "blink", "reverse")


@dataclass(frozen=True, slots=True)
class Style:
    """
    Colors and decoration flags in effect for a piece of text.

    Styles are values: every update returns a new Style, so a run can
    hold on to the style it was parsed with.
    """
    foreground: Color = Color.DEFAULT
    background: Color = Color.DEFAULT
    bold: bool = False
    italic: bool = False
    underline: bool = False
    strike: bool = False
    blink: bool = False
    reverse: bool = False

    def update(self, **changes) -> Style:
        """Return a copy with the given fields changed."""
        return replace(self, **changes)

    @property
    def decorations(self) -> tuple[str, ...]:
        """Names of the flags that are set."""
        return tuple(name for name in DECORATIONS if getattr(self, name))

    def is_default(self) -> bool:
        return self == DEFAULT_STYLE


DEFAULT_STYLE = Style()


@dataclass(frozen=True, slots=True)
class Disabled:
    """Formatting is off: SGR sequences are read but have no effect."""

    @property
    def style(self) -> None:
        return None

    @property
    def enabled(self) -> bool:
        return False


@dataclass(frozen=True, slots=True)
class Enabled:
    """Formatting is on and `style` is the current style."""
    style: Style = DEFAULT_STYLE

    @property
    def enabled(self) -> bool:
        return True


Formatting = Union[Disabled, Enabled]

DISABLED = Disabled()


def as_formatting(value: Formatting | Style | None) -> Formatting:
    """
    Normalize a formatting mode.

    Accepts a Formatting, a bare Style (enabled with that style) or
    None (disabled).
    """
    if value is None:
        return DISABLED
    if isinstance(value, Style):
        return Enabled(value)
    if isinstance(value, (Disabled, Enabled)):
        return value
    raise TypeError(f"Expected Formatting, Style or None, got {type(value).__name__}")
