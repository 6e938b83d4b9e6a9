"""Render styled runs back to normalized SGR escape sequences."""

from typing import Iterable

from ansi_scrollback.codec.sgr import style_to_sgr
from ansi_scrollback.core.run import StyledRun
from ansi_scrollback.core.style import DEFAULT_STYLE


class AnsiRenderer:
    """
    Render runs to an ANSI string.

    Emits an SGR sequence only when the style changes between runs, each
    one selecting the full style from a reset.
    """

    def __init__(self, reset_at_end: bool = True):
        self.reset_at_end = reset_at_end

    def render(self, runs: Iterable[StyledRun]) -> str:
        parts: list[str] = []
        last = DEFAULT_STYLE

        for run in runs:
            if not run.text:
                continue
            if run.style != last:
                parts.append(style_to_sgr(run.style))
                last = run.style
            parts.append(run.text)

        if self.reset_at_end and last != DEFAULT_STYLE:
            parts.append('\x1b[0m')
        return ''.join(parts)
