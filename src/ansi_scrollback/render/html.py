"""Render styled runs to HTML."""

from typing import Iterable

from ansi_scrollback.core.color import Color
from ansi_scrollback.core.run import StyledRun
from ansi_scrollback.render.presentation import PresentationStyle, to_presentation


# Standard 16-color palette (CSS colors)
PALETTE_16 = [
    "#000000",  # 0 - Black
    "#aa0000",  # 1 - Red
    "#00aa00",  # 2 - Green
    "#aa5500",  # 3 - Yellow/Brown
    "#0000aa",  # 4 - Blue
    "#aa00aa",  # 5 - Magenta
    "#00aaaa",  # 6 - Cyan
    "#aaaaaa",  # 7 - White
    "#555555",  # 8 - Bright Black
    "#ff5555",  # 9 - Bright Red
    "#55ff55",  # 10 - Bright Green
    "#ffff55",  # 11 - Bright Yellow
    "#5555ff",  # 12 - Bright Blue
    "#ff55ff",  # 13 - Bright Magenta
    "#55ffff",  # 14 - Bright Cyan
    "#ffffff",  # 15 - Bright White
]

DEFAULT_FG_CSS = PALETTE_16[7]
DEFAULT_BG_CSS = PALETTE_16[0]

# Decoration name -> CSS declaration
FONT_CSS = {
    "bold": "font-weight: bold",
    "italic": "font-style: italic",
}

# Decoration name -> text-decoration line value
TEXT_DECORATION = {
    "underline": "underline",
    "strike": "line-through",
    "blink": "blink",
}


class HtmlRenderer:
    """Render runs to HTML with inline styles or CSS classes."""

    def __init__(
        self,
        css_class: str = "ansi-log",
        use_inline_styles: bool = True,
        font_family: str = "monospace",
        class_prefix: str = "ansi-",
    ):
        self.css_class = css_class
        self.use_inline_styles = use_inline_styles
        self.font_family = font_family
        self.class_prefix = class_prefix

    def render(self, runs: Iterable[StyledRun]) -> str:
        """Render runs to a complete <pre> block."""
        body = self.render_fragment(runs)
        return (
            f'<pre class="{self.css_class}" style="font-family: {self.font_family}; '
            f'color: {DEFAULT_FG_CSS}; background: {DEFAULT_BG_CSS}; padding: 1em;">'
            f'{body}</pre>'
        )

    def render_fragment(self, runs: Iterable[StyledRun]) -> str:
        """Render runs to a sequence of spans, one per run."""
        return ''.join(self.render_run(run) for run in runs)

    def render_run(self, run: StyledRun) -> str:
        """Render a single run. Unstyled runs are emitted as bare text."""
        text = self._escape_html(run.text)
        if run.style.is_default():
            return text
        return self._make_span(text, to_presentation(run.style))

    def stylesheet(self) -> str:
        """CSS rules for class mode."""
        p = self.class_prefix
        rules: list[str] = []
        for color in Color:
            if color is Color.DEFAULT:
                continue
            css = PALETTE_16[color.index]
            rules.append(f".{p}fg-{color.value} {{ color: {css}; }}")
            rules.append(f".{p}bg-{color.value} {{ background: {css}; }}")
        for name, declaration in FONT_CSS.items():
            rules.append(f".{p}{name} {{ {declaration}; }}")
        for name, line in TEXT_DECORATION.items():
            rules.append(f".{p}{name} {{ text-decoration: {line}; }}")
        rules.append(f".{p}fg-inverse {{ color: {DEFAULT_BG_CSS}; }}")
        rules.append(f".{p}bg-inverse {{ background: {DEFAULT_FG_CSS}; }}")
        return '\n'.join(rules)

    def _make_span(self, text: str, style: PresentationStyle) -> str:
        """Create an HTML span with styling."""
        if not self.use_inline_styles:
            classes = ' '.join(style.css_classes(self.class_prefix))
            return f'<span class="{classes}">{text}</span>'

        reverse = style.has("reverse")
        fg_css = self._color_to_css(style.foreground, is_fg=True, reverse=reverse)
        style_parts = [f"color: {fg_css}"]
        if style.background != Color.DEFAULT.value or reverse:
            bg_css = self._color_to_css(style.background, is_fg=False, reverse=reverse)
            style_parts.append(f"background: {bg_css}")

        lines: list[str] = []
        for name in style.decorations:
            if name in FONT_CSS:
                style_parts.append(FONT_CSS[name])
            elif name in TEXT_DECORATION:
                lines.append(TEXT_DECORATION[name])
        if lines:
            style_parts.append(f"text-decoration: {' '.join(lines)}")

        css = "; ".join(style_parts)
        return f'<span style="{css}">{text}</span>'

    def _color_to_css(self, name: str, is_fg: bool, reverse: bool = False) -> str:
        """Convert a symbolic color name to a CSS color."""
        color = Color.from_name(name)
        if color is Color.DEFAULT:
            # A swapped default keeps the color of the slot it came from
            return DEFAULT_FG_CSS if is_fg != reverse else DEFAULT_BG_CSS
        return PALETTE_16[color.index]

    def _escape_html(self, text: str) -> str:
        """Escape special HTML characters."""
        return (text
            .replace('&', '&amp;')
            .replace('<', '&lt;')
            .replace('>', '&gt;')
            .replace('"', '&quot;')
        )
