"""Render styled runs to rich Text for terminal display."""

from typing import Iterable

from rich.style import Style as RichStyle
from rich.text import Text

from ansi_scrollback.core.color import Color
from ansi_scrollback.core.run import StyledRun
from ansi_scrollback.core.style import Style
from ansi_scrollback.render.presentation import to_presentation


def _rich_color(name: str) -> str:
    """Symbolic color name to rich's color name ("bright-red" -> "bright_red")."""
    return name.replace('-', '_')


def to_rich_style(style: Style) -> RichStyle:
    """
    Convert a Style, with reverse resolved by color swap.

    Swapping two default colors changes nothing, so in that case the
    terminal is asked for reverse video instead.
    """
    view = to_presentation(style)
    both_default = view.foreground == view.background == Color.DEFAULT.value
    return RichStyle(
        color=_rich_color(view.foreground),
        bgcolor=_rich_color(view.background),
        reverse=(style.reverse and both_default) or None,
        bold=style.bold or None,
        italic=style.italic or None,
        underline=style.underline or None,
        strike=style.strike or None,
        blink=style.blink or None,
    )


class RichRenderer:
    """Render runs to a rich Text, one span per run."""

    def render(self, runs: Iterable[StyledRun]) -> Text:
        text = Text()
        for run in runs:
            if run.style.is_default():
                text.append(run.text)
            else:
                text.append(run.text, style=to_rich_style(run.style))
        return text
