"""Split text into literal content and SGR escape sequences."""

import re
from typing import Iterator

from ansi_scrollback.codec.tokens import Content, Sgr, Token
from ansi_scrollback.errors import ParseError


ESC = '\x1b'

# Complete SGR sequence: ESC [ params m
SGR_PATTERN = re.compile(r'\x1b\[([0-9;]*)m')

# Longest well-formed parameter prefix after ESC [
PARAMS_PATTERN = re.compile(r'[0-9;]*')


def iter_tokens(text: str) -> Iterator[Token]:
    """
    Lazily tokenize text.

    Yields Content and Sgr tokens in source order. Raises ParseError
    when a malformed sequence is reached; tokens before it have
    already been yielded.
    """
    i = 0
    length = len(text)

    while i < length:
        esc = text.find(ESC, i)
        if esc == -1:
            yield Content(text[i:])
            return
        if esc > i:
            yield Content(text[i:esc])

        match = SGR_PATTERN.match(text, esc)
        if match is None:
            raise _describe_error(text, esc)

        yield Sgr(_parse_params(match.group(1)))
        i = match.end()


def tokenize(text: str) -> list[Token]:
    """
    Tokenize text into Content and Sgr tokens.

    The whole call fails with ParseError on any malformed escape
    sequence; there is no partial result.
    """
    return list(iter_tokens(text))


def _parse_params(params_str: str) -> tuple[int, ...]:
    """Parse a ';'-separated parameter list. Empty fields read as 0."""
    if not params_str:
        return ()
    return tuple(int(p) if p else 0 for p in params_str.split(';'))


def _describe_error(text: str, esc: int) -> ParseError:
    """Build a ParseError explaining why the sequence at esc is malformed."""
    after = esc + 1
    if after >= len(text):
        return ParseError(esc, after, "Escape character at end of input")
    if text[after] != '[':
        return ParseError(
            esc, after,
            f"Expected '[' after escape character, found {text[after]!r}",
        )

    end = PARAMS_PATTERN.match(text, after + 1).end()
    if end >= len(text):
        return ParseError(esc, end, "Unterminated escape sequence, expected 'm'")
    return ParseError(
        esc, end,
        f"Unsupported character {text[end]!r} in escape sequence, expected 'm'",
    )
