"""Format engine: fold tokens into styled runs, carrying style state."""

from __future__ import annotations

from typing import Iterable

from ansi_scrollback.codec.sgr import apply_sgr
from ansi_scrollback.codec.tokenizer import tokenize
from ansi_scrollback.codec.tokens import Content, Sgr, Token
from ansi_scrollback.core.run import StyledRun
from ansi_scrollback.core.style import (
    DEFAULT_STYLE,
    DISABLED,
    Disabled,
    Enabled,
    Formatting,
    Style,
    as_formatting,
)


def apply_tokens(
    tokens: Iterable[Token],
    initial: Formatting | Style | None = DEFAULT_STYLE,
) -> tuple[list[StyledRun], Formatting]:
    """
    Turn tokens into styled runs.

    Each Content token becomes one run tagged with the style active
    when it was read. Sgr tokens update the running style, unless
    formatting is disabled, in which case they are discarded and every
    run uses DEFAULT_STYLE.

    Returns the runs in order and the final formatting state, which the
    caller passes as `initial` to the next call over the same stream.
    """
    formatting = as_formatting(initial)
    runs: list[StyledRun] = []

    for token in tokens:
        if isinstance(token, Content):
            style = formatting.style if isinstance(formatting, Enabled) else DEFAULT_STYLE
            runs.append(StyledRun(style, token.text))
        elif isinstance(token, Sgr):
            if isinstance(formatting, Disabled):
                continue
            formatting = Enabled(apply_sgr(formatting.style, token.params))

    return runs, formatting


def parse(
    text: str,
    initial: Formatting | Style | None = DEFAULT_STYLE,
) -> tuple[list[StyledRun], Formatting]:
    """Tokenize text and apply the tokens. Raises ParseError."""
    return apply_tokens(tokenize(text), initial)


class Formatter:
    """
    Stateful wrapper around parse() for a single logical stream.

    Carries the formatting state from one feed() to the next, so an
    attribute set in one message still applies to the next.
    """

    def __init__(self, formatting: Formatting | Style | None = DEFAULT_STYLE):
        self.formatting: Formatting = as_formatting(formatting)

    @property
    def enabled(self) -> bool:
        return self.formatting.enabled

    @property
    def style(self) -> Style:
        """Style that the next content would be rendered with."""
        return self.formatting.style if isinstance(self.formatting, Enabled) else DEFAULT_STYLE

    def feed(self, text: str) -> list[StyledRun]:
        """
        Parse text and return its runs.

        On ParseError the carried state is left as it was.
        """
        runs, self.formatting = parse(text, self.formatting)
        return runs

    def reset(self) -> None:
        """Return to the default style. A disabled formatter stays disabled."""
        if self.enabled:
            self.formatting = Enabled(DEFAULT_STYLE)

    def disable(self) -> None:
        self.formatting = DISABLED

    def enable(self) -> None:
        """Turn formatting on, starting from the default style."""
        if not self.enabled:
            self.formatting = Enabled(DEFAULT_STYLE)
