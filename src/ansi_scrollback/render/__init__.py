"""Renderers for styled runs."""

from ansi_scrollback.render.presentation import PresentationStyle, to_presentation
from ansi_scrollback.render.ansi import AnsiRenderer
from ansi_scrollback.render.html import HtmlRenderer
from ansi_scrollback.render.text import TextRenderer
from ansi_scrollback.render.json_format import JsonParser, JsonRenderer
from ansi_scrollback.render.rich_text import RichRenderer, to_rich_style

__all__ = [
    "PresentationStyle",
    "to_presentation",
    "AnsiRenderer",
    "HtmlRenderer",
    "TextRenderer",
    "JsonRenderer",
    "JsonParser",
    "RichRenderer",
    "to_rich_style",
]
