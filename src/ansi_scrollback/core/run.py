"""StyledRun - a piece of text frozen with the style it was parsed under."""

from dataclasses import dataclass

from ansi_scrollback.core.style import DEFAULT_STYLE, Style


@dataclass(frozen=True, slots=True)
class StyledRun:
    """
    One contiguous piece of literal text and its style.

    Runs are emitted in parse order and are never split or merged
    after creation.
    """
    style: Style = DEFAULT_STYLE
    text: str = ""

    def __len__(self) -> int:
        return len(self.text)
