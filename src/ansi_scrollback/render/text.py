"""Render styled runs to plain text (strip styling)."""

from typing import Iterable

from ansi_scrollback.core.run import StyledRun


class TextRenderer:
    """Render runs to plain text without any styling."""

    def __init__(self, strip_trailing: bool = False):
        self.strip_trailing = strip_trailing

    def render(self, runs: Iterable[StyledRun]) -> str:
        """Concatenate run text."""
        result = ''.join(run.text for run in runs)
        if self.strip_trailing:
            result = '\n'.join(line.rstrip() for line in result.split('\n'))
        return result
