"""SGR (Select Graphic Rendition) code handling."""

from typing import Iterable

from ansi_scrollback.core.color import Color
from ansi_scrollback.core.style import DEFAULT_STYLE, Style


# Single-code attribute changes
_FLAG_CODES: dict[int, tuple[str, bool]] = {
    1: ("bold", True),
    3: ("italic", True),
    4: ("underline", True),
    5: ("blink", True),
    6: ("blink", True),
    7: ("reverse", True),
    9: ("strike", True),
    21: ("bold", False),
    23: ("italic", False),
    24: ("underline", False),
    27: ("reverse", False),
    29: ("strike", False),
}


def apply_code(style: Style, code: int) -> Style:
    """
    Apply a single SGR code to a style.

    Returns a new Style. Codes outside the supported table, including
    the extended color introducers 38 and 48, leave the style unchanged.
    """
    if code == 0:
        return DEFAULT_STYLE
    elif code in _FLAG_CODES:
        name, value = _FLAG_CODES[code]
        if getattr(style, name) == value:
            return style
        return style.update(**{name: value})
    elif 30 <= code <= 37 or 90 <= code <= 97:
        return style.update(foreground=Color.from_sgr(code))
    elif code == 39:
        return style.update(foreground=Color.DEFAULT)
    elif 40 <= code <= 47 or 100 <= code <= 107:
        return style.update(background=Color.from_sgr(code))
    elif code == 49:
        return style.update(background=Color.DEFAULT)
    return style


def apply_sgr(style: Style, params: Iterable[int]) -> Style:
    """Apply SGR parameters left to right. No parameters means reset."""
    params = tuple(params)
    if not params:
        params = (0,)

    for code in params:
        style = apply_code(style, code)
    return style


def style_to_sgr(style: Style) -> str:
    """
    Return the escape sequence that selects style from a reset state.

    Only attributes that differ from the default are emitted.
    """
    parts: list[str] = ["0"]
    if style.bold:
        parts.append("1")
    if style.italic:
        parts.append("3")
    if style.underline:
        parts.append("4")
    if style.blink:
        parts.append("5")
    if style.reverse:
        parts.append("7")
    if style.strike:
        parts.append("9")
    if style.foreground is not Color.DEFAULT:
        parts.append(style.foreground.to_sgr_fg())
    if style.background is not Color.DEFAULT:
        parts.append(style.background.to_sgr_bg())
    return f"\x1b[{';'.join(parts)}m"
