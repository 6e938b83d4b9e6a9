"""Scrollback log and input line."""

from ansi_scrollback.log.keys import Key, KeyDecoder, KeyEvent
from ansi_scrollback.log.input_line import InputLine
from ansi_scrollback.log.scrollback import ScrollbackLog

__all__ = ["Key", "KeyEvent", "KeyDecoder", "InputLine", "ScrollbackLog"]
