"""Key events for driving the input line."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, Optional


class Key(Enum):
    """Named key constants."""
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    ESCAPE = auto()
    TAB = auto()
    BACKSPACE = auto()
    HOME = auto()
    END = auto()
    DELETE = auto()


@dataclass(frozen=True)
class KeyEvent:
    """Represents a keyboard input event."""
    key: Optional[Key] = None  # Named key if recognized
    char: Optional[str] = None  # Character if printable
    raw: str = ""  # Raw input sequence

    @property
    def is_char(self) -> bool:
        """Check if this is a printable character."""
        return self.char is not None and self.key is None


class KeyDecoder:
    """
    Decode raw terminal input into key events.

    Input may arrive in pieces; an escape sequence split across two
    feed() calls is held back until it is complete.
    """

    # Escape sequence mappings (without the \x1b prefix)
    SEQUENCES: dict[str, Key] = {
        # Arrow keys (CSI)
        '[A': Key.UP,
        '[B': Key.DOWN,
        '[C': Key.RIGHT,
        '[D': Key.LEFT,
        # Arrow keys (SS3 - application mode)
        'OA': Key.UP,
        'OB': Key.DOWN,
        'OC': Key.RIGHT,
        'OD': Key.LEFT,
        # Navigation
        '[H': Key.HOME,
        '[F': Key.END,
        '[1~': Key.HOME,
        '[4~': Key.END,
        '[3~': Key.DELETE,
    }

    SIMPLE_KEYS: dict[str, Key] = {
        '\r': Key.ENTER,
        '\n': Key.ENTER,
        '\t': Key.TAB,
        '\x7f': Key.BACKSPACE,
        '\x08': Key.BACKSPACE,
    }

    def __init__(self) -> None:
        self._buffer = ""

    def feed(self, data: str) -> list[KeyEvent]:
        """
        Add input and return every complete key event in it.

        An incomplete escape sequence at the end stays buffered for the
        next call.
        """
        self._buffer += data
        return list(self._drain())

    def flush(self) -> list[KeyEvent]:
        """Return whatever is held back, treating a lone ESC as the Escape key."""
        return list(self._drain(final=True))

    def _drain(self, final: bool = False) -> Iterator[KeyEvent]:
        while self._buffer:
            if not final and self._buffer[0] == '\x1b' and not self._sequence_complete():
                return
            event = self._process_buffer()
            if event is not None:
                yield event

    def _sequence_complete(self) -> bool:
        """Check if the escape sequence at the head of the buffer is complete."""
        rest = self._buffer[1:]
        if not rest:
            return False
        if rest[0] not in '[O':
            return True
        for ch in rest[1:]:
            if ch.isalpha() or ch == '~' or ch == '\x1b':
                return True
        return False

    def _process_buffer(self) -> Optional[KeyEvent]:
        """Process buffered input and return next key event."""
        # Simple keys
        if self._buffer[0] in self.SIMPLE_KEYS:
            key = self.SIMPLE_KEYS[self._buffer[0]]
            raw = self._buffer[0]
            self._buffer = self._buffer[1:]
            return KeyEvent(key=key, raw=raw)

        # Escape sequence
        if self._buffer[0] == '\x1b':
            return self._parse_escape_sequence()

        # Printable character
        if self._buffer[0].isprintable():
            ch = self._buffer[0]
            self._buffer = self._buffer[1:]
            return KeyEvent(char=ch, raw=ch)

        # Unknown control character - skip it
        self._buffer = self._buffer[1:]
        return None

    def _parse_escape_sequence(self) -> KeyEvent:
        """Parse an escape sequence from the buffer."""
        rest = self._buffer[1:]
        if not rest or rest[0] not in '[O':
            self._buffer = rest
            return KeyEvent(key=Key.ESCAPE, raw='\x1b')

        # Find where this sequence ends
        end_idx = len(rest)
        for i, ch in enumerate(rest[1:], start=1):
            if ch == '\x1b':
                end_idx = i
                break
            if ch.isalpha() or ch == '~':
                end_idx = i + 1
                break

        seq = rest[:end_idx]
        self._buffer = rest[end_idx:]
        raw = '\x1b' + seq
        if seq in self.SEQUENCES:
            return KeyEvent(key=self.SEQUENCES[seq], raw=raw)

        # Unknown sequence
        return KeyEvent(raw=raw)
