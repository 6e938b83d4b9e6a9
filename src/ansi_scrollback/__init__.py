"""
ansi-scrollback: styled scrollback for ANSI SGR text

Turn text annotated with ANSI SGR escape sequences into styled runs,
keep them in a scrollback log, and edit an input line.

Quick Start:
    >>> import ansi_scrollback as asb
    >>> log = asb.ScrollbackLog()
    >>> log.receive("\\x1b[1;31merror:\\x1b[0m disk full\\n")
    >>> log.receive("\\x1b[1mstill bold")
    >>> asb.HtmlRenderer().render(log.runs)

Features:
    - Tokenize SGR escape sequences, rejecting malformed ones
    - Immutable styles carried across messages
    - Formatting can be disabled per stream
    - Render to HTML, plain text, JSON, ANSI or rich Text
    - Editable input line with history
"""

__version__ = "0.1.0"

# Core types
from ansi_scrollback.core.color import Color
from ansi_scrollback.core.style import (
    DEFAULT_STYLE,
    DISABLED,
    Disabled,
    Enabled,
    Formatting,
    Style,
)
from ansi_scrollback.core.run import StyledRun
from ansi_scrollback.errors import ParseError

# Parsing
from ansi_scrollback.codec import (
    Content,
    Formatter,
    Sgr,
    apply_code,
    apply_tokens,
    parse,
    tokenize,
)

# Rendering
from ansi_scrollback.render import HtmlRenderer, TextRenderer, to_presentation

# Scrollback and input
from ansi_scrollback.log import InputLine, ScrollbackLog

__all__ = [
    # Version
    "__version__",
    # Core types
    "Color",
    "Style",
    "DEFAULT_STYLE",
    "Formatting",
    "Disabled",
    "Enabled",
    "DISABLED",
    "StyledRun",
    "ParseError",
    # Parsing
    "Content",
    "Sgr",
    "tokenize",
    "apply_code",
    "apply_tokens",
    "parse",
    "Formatter",
    # Rendering
    "HtmlRenderer",
    "TextRenderer",
    "to_presentation",
    # Scrollback and input
    "ScrollbackLog",
    "InputLine",
]
