"""Tokens produced by the escape tokenizer."""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True, slots=True)
class Content:
    """A maximal run of literal text containing no ESC character."""
    text: str


@dataclass(frozen=True, slots=True)
class Sgr:
    """
    An SGR sequence (ESC [ params m).

    An empty parameter tuple is the bare ESC[m form and means reset.
    """
    params: tuple[int, ...] = ()

    def to_sequence(self) -> str:
        """Re-encode as an escape sequence."""
        return f"\x1b[{';'.join(str(p) for p in self.params)}m"


Token = Union[Content, Sgr]
