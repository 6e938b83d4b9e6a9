"""ScrollbackLog - append-only log of styled runs fed by SGR-annotated text."""

from __future__ import annotations

import logging

from ansi_scrollback.codec.engine import Formatter
from ansi_scrollback.core.run import StyledRun
from ansi_scrollback.core.style import DEFAULT_STYLE, Formatting, Style
from ansi_scrollback.errors import ParseError
from ansi_scrollback.render.text import TextRenderer

logger = logging.getLogger(__name__)


class ScrollbackLog:
    """
    Scrollback of styled runs.

    Each receive() call parses one message with the formatting carried
    over from the previous message, so attributes persist across message
    boundaries. Messages must be received in delivery order.

    Messages with malformed escape sequences are appended verbatim as a
    single unstyled run, unless `strict` is set, in which case the
    ParseError propagates and the log is left unchanged.
    """

    def __init__(
        self,
        formatting: Formatting | Style | None = DEFAULT_STYLE,
        max_runs: int | None = None,
        strict: bool = False,
    ):
        if max_runs is not None and max_runs <= 0:
            raise ValueError(f"max_runs must be positive, got {max_runs}")
        self._formatter = Formatter(formatting)
        self.max_runs = max_runs
        self.strict = strict
        self._runs: list[StyledRun] = []

    @property
    def runs(self) -> tuple[StyledRun, ...]:
        return tuple(self._runs)

    @property
    def formatting(self) -> Formatting:
        """Formatting state the next message will be parsed with."""
        return self._formatter.formatting

    @property
    def formatting_enabled(self) -> bool:
        return self._formatter.enabled

    def __len__(self) -> int:
        return len(self._runs)

    def receive(self, text: str) -> list[StyledRun]:
        """Parse a message, append its runs and return them."""
        try:
            runs = self._formatter.feed(text)
        except ParseError as e:
            if self.strict:
                raise
            logger.warning("Showing message verbatim: %s", e)
            runs = [StyledRun(DEFAULT_STYLE, text)]

        self._runs.extend(runs)
        self._trim()
        return runs

    def plain_text(self) -> str:
        return TextRenderer().render(self._runs)

    def clear(self) -> None:
        """Drop all runs. The carried formatting is kept."""
        self._runs.clear()

    def reset_style(self) -> None:
        """Return the carried style to default. A disabled log stays disabled."""
        self._formatter.reset()

    def set_formatting_enabled(self, enabled: bool) -> None:
        """Switch formatting on or off. Turning it on starts from the default style."""
        if enabled:
            self._formatter.enable()
        else:
            self._formatter.disable()

    def _trim(self) -> None:
        if self.max_runs is not None and len(self._runs) > self.max_runs:
            dropped = len(self._runs) - self.max_runs
            del self._runs[:dropped]
            logger.debug("Dropped %d runs from scrollback", dropped)
