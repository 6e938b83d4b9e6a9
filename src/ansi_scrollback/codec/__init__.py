"""Tokenizing and formatting of SGR-annotated text."""

from ansi_scrollback.codec.tokens import Content, Sgr, Token
from ansi_scrollback.codec.tokenizer import iter_tokens, tokenize
from ansi_scrollback.codec.sgr import apply_code, apply_sgr, style_to_sgr
from ansi_scrollback.codec.engine import Formatter, apply_tokens, parse

__all__ = [
    "Content",
    "Sgr",
    "Token",
    "iter_tokens",
    "tokenize",
    "apply_code",
    "apply_sgr",
    "style_to_sgr",
    "apply_tokens",
    "parse",
    "Formatter",
]
