"""InputLine - single-line editable text buffer with history."""

from __future__ import annotations

import logging
from typing import Iterable

from ansi_scrollback.log.keys import Key, KeyDecoder, KeyEvent

logger = logging.getLogger(__name__)


class InputLine:
    """
    Editable input line with a cursor and an in-memory history.

    Editing a recalled history entry turns it into the draft: the entry
    itself is left as it was.

    History lives only as long as the object; nothing is persisted.
    """

    def __init__(self, history_limit: int = 100):
        if history_limit < 0:
            raise ValueError(f"history_limit must be >= 0, got {history_limit}")
        self.history_limit = history_limit
        self._text = ""
        self._cursor = 0
        self._history: list[str] = []
        # Index into history while browsing; None when editing the draft
        self._history_pos: int | None = None
        self._draft = ""
        self._decoder = KeyDecoder()

    @property
    def text(self) -> str:
        return self._text

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def history(self) -> tuple[str, ...]:
        return tuple(self._history)

    # -------------------------------------------------------------------------
    # Editing
    # -------------------------------------------------------------------------

    def insert(self, text: str) -> None:
        """Insert text at the cursor. Control characters are dropped."""
        text = ''.join(ch for ch in text if ch.isprintable())
        if not text:
            return
        self._text = self._text[:self._cursor] + text + self._text[self._cursor:]
        self._cursor += len(text)
        self._history_pos = None

    def backspace(self) -> bool:
        """Delete the character before the cursor."""
        if self._cursor == 0:
            return False
        self._text = self._text[:self._cursor - 1] + self._text[self._cursor:]
        self._cursor -= 1
        self._history_pos = None
        return True

    def delete(self) -> bool:
        """Delete the character under the cursor."""
        if self._cursor >= len(self._text):
            return False
        self._text = self._text[:self._cursor] + self._text[self._cursor + 1:]
        self._history_pos = None
        return True

    def move_left(self) -> None:
        self._cursor = max(0, self._cursor - 1)

    def move_right(self) -> None:
        self._cursor = min(len(self._text), self._cursor + 1)

    def home(self) -> None:
        self._cursor = 0

    def end(self) -> None:
        self._cursor = len(self._text)

    def clear(self) -> None:
        """Empty the line and leave history browsing."""
        self._set_text("")
        self._history_pos = None
        self._draft = ""

    def submit(self) -> str:
        """
        Return the current text and clear the line.

        Non-empty text is added to history, skipping an immediate repeat
        of the newest entry.
        """
        text = self._text
        if text and self.history_limit and (not self._history or self._history[-1] != text):
            self._history.append(text)
            if len(self._history) > self.history_limit:
                del self._history[:len(self._history) - self.history_limit]
        self.clear()
        logger.debug("Submitted input line (%d chars)", len(text))
        return text

    # -------------------------------------------------------------------------
    # History
    # -------------------------------------------------------------------------

    def history_prev(self) -> bool:
        """Replace the line with the previous history entry."""
        if not self._history:
            return False
        if self._history_pos is None:
            self._draft = self._text
            self._history_pos = len(self._history) - 1
        elif self._history_pos > 0:
            self._history_pos -= 1
        else:
            return False
        self._set_text(self._history[self._history_pos])
        return True

    def history_next(self) -> bool:
        """Move toward newer entries; past the newest, restore the draft."""
        if self._history_pos is None:
            return False
        if self._history_pos < len(self._history) - 1:
            self._history_pos += 1
            self._set_text(self._history[self._history_pos])
        else:
            self._history_pos = None
            self._set_text(self._draft)
        return True

    # -------------------------------------------------------------------------
    # Key handling
    # -------------------------------------------------------------------------

    def handle_key(self, event: KeyEvent) -> str | None:
        """
        Apply a key event.

        Returns the submitted text when the event is Enter, else None.
        """
        if event.is_char:
            self.insert(event.char)
        elif event.key == Key.ENTER:
            return self.submit()
        elif event.key == Key.BACKSPACE:
            self.backspace()
        elif event.key == Key.DELETE:
            self.delete()
        elif event.key == Key.LEFT:
            self.move_left()
        elif event.key == Key.RIGHT:
            self.move_right()
        elif event.key == Key.HOME:
            self.home()
        elif event.key == Key.END:
            self.end()
        elif event.key == Key.UP:
            self.history_prev()
        elif event.key == Key.DOWN:
            self.history_next()
        elif event.key == Key.ESCAPE:
            self.clear()
        return None

    def handle_keys(self, events: Iterable[KeyEvent]) -> list[str]:
        """Apply several key events, returning every submitted line."""
        submitted: list[str] = []
        for event in events:
            result = self.handle_key(event)
            if result is not None:
                submitted.append(result)
        return submitted

    def feed(self, data: str) -> list[str]:
        """Decode raw terminal input and apply it."""
        return self.handle_keys(self._decoder.feed(data))

    def _set_text(self, text: str) -> None:
        self._text = text
        self._cursor = len(text)
