"""Tests for presentation mapping and renderers."""

import json

import pytest

from rich.text import Text

from ansi_scrollback.codec.engine import parse
from ansi_scrollback.core.color import Color
from ansi_scrollback.core.run import StyledRun
from ansi_scrollback.core.style import DEFAULT_STYLE, Style
from ansi_scrollback.render import (
    AnsiRenderer,
    HtmlRenderer,
    JsonParser,
    JsonRenderer,
    RichRenderer,
    TextRenderer,
    to_presentation,
    to_rich_style,
)


class TestPresentation:
    """Tests for the Style -> presentation mapping."""

    def test_plain(self) -> None:
        view = to_presentation(DEFAULT_STYLE)
        assert view.foreground == "default"
        assert view.background == "default"
        assert view.decorations == ()
        assert view.css_classes() == []

    def test_reverse_swaps_colors(self) -> None:
        view = to_presentation(Style(foreground=Color.RED, reverse=True))
        assert view.foreground == "default"
        assert view.background == "red"

    def test_reverse_does_not_change_style(self) -> None:
        style = Style(foreground=Color.RED, reverse=True)
        to_presentation(style)
        assert style.foreground is Color.RED

    def test_css_classes(self) -> None:
        style = Style(foreground=Color.BRIGHT_RED, background=Color.BLUE, bold=True, underline=True)
        assert to_presentation(style).css_classes("ansi-") == [
            "ansi-fg-bright-red",
            "ansi-bg-blue",
            "ansi-bold",
            "ansi-underline",
        ]

    def test_css_classes_reverse_default(self) -> None:
        classes = to_presentation(Style(foreground=Color.GREEN, reverse=True)).css_classes()
        assert classes == ["fg-inverse", "bg-green", "reverse"]


class TestHtmlRenderer:
    def test_escapes_text(self) -> None:
        html = HtmlRenderer().render_fragment([StyledRun(DEFAULT_STYLE, "<a & b>")])
        assert html == "&lt;a &amp; b&gt;"

    def test_inline_styles(self) -> None:
        runs, _ = parse("\x1b[1;31mError\x1b[0m done")
        html = HtmlRenderer().render_fragment(runs)
        assert html == '<span style="color: #aa0000; font-weight: bold">Error</span> done'

    def test_text_decorations_combined(self) -> None:
        html = HtmlRenderer().render_run(StyledRun(Style(underline=True, strike=True), "x"))
        assert "text-decoration: underline line-through" in html

    def test_reverse_inline(self) -> None:
        html = HtmlRenderer().render_run(StyledRun(Style(reverse=True), "x"))
        assert html == '<span style="color: #000000; background: #aaaaaa">x</span>'

    def test_class_mode(self) -> None:
        renderer = HtmlRenderer(use_inline_styles=False)
        html = renderer.render_run(StyledRun(Style(foreground=Color.BRIGHT_GREEN), "ok"))
        assert html == '<span class="ansi-fg-bright-green">ok</span>'
        assert ".ansi-fg-bright-green { color: #55ff55; }" in renderer.stylesheet()

    def test_render_wraps_in_pre(self) -> None:
        html = HtmlRenderer(css_class="log").render([StyledRun(DEFAULT_STYLE, "x")])
        assert html.startswith('<pre class="log"')
        assert html.endswith("x</pre>")


class TestTextRenderer:
    def test_concatenates(self) -> None:
        runs, _ = parse("\x1b[1mA\x1b[0mB\nC")
        assert TextRenderer().render(runs) == "AB\nC"

    def test_strip_trailing(self) -> None:
        runs = [StyledRun(DEFAULT_STYLE, "a  \nb ")]
        assert TextRenderer(strip_trailing=True).render(runs) == "a\nb"


class TestJson:
    def test_render(self) -> None:
        runs, _ = parse("\x1b[1;91mfail\x1b[0m ok")
        data = json.loads(JsonRenderer().render(runs))
        assert data == [
            {"text": "fail", "fg": "bright-red", "bold": True},
            {"text": " ok"},
        ]

    def test_include_defaults(self) -> None:
        data = JsonRenderer(include_defaults=True).to_list([StyledRun(DEFAULT_STYLE, "x")])
        assert data[0]["fg"] == "default"
        assert data[0]["reverse"] is False

    def test_parse_rejects_string_booleans(self) -> None:
        with pytest.raises(ValueError):
            JsonParser().parse('[{"text": "x", "bold": "false"}]')

    def test_parse_rejects_non_object_runs(self) -> None:
        with pytest.raises(ValueError):
            JsonParser().parse('["x"]')

    def test_parse_rejects_bad_color(self) -> None:
        with pytest.raises(ValueError):
            JsonParser().parse('[{"text": "x", "fg": 31}]')

    def test_parse_back(self) -> None:
        runs = [
            StyledRun(Style(foreground=Color.CYAN, reverse=True), "a"),
            StyledRun(DEFAULT_STYLE, "b"),
        ]
        assert JsonParser().parse(JsonRenderer().render(runs)) == runs


class TestAnsiRenderer:
    def test_emits_on_change_only(self) -> None:
        runs = [
            StyledRun(Style(bold=True), "a"),
            StyledRun(Style(bold=True), "b"),
            StyledRun(DEFAULT_STYLE, "c"),
        ]
        assert AnsiRenderer().render(runs) == "\x1b[0;1mab\x1b[0mc"

    def test_reset_at_end(self) -> None:
        runs = [StyledRun(Style(foreground=Color.RED), "x")]
        assert AnsiRenderer().render(runs) == "\x1b[0;31mx\x1b[0m"
        assert AnsiRenderer(reset_at_end=False).render(runs) == "\x1b[0;31mx"

    def test_reparse_gives_same_styles(self) -> None:
        source = "\x1b[1;31mA\x1b[4mB\x1b[0mC"
        runs, _ = parse(source)
        again, _ = parse(AnsiRenderer().render(runs))
        assert again == runs


class TestRichRenderer:
    def test_plain_text(self) -> None:
        runs, _ = parse("\x1b[32mgreen\x1b[0m plain")
        text = RichRenderer().render(runs)
        assert isinstance(text, Text)
        assert text.plain == "green plain"
        assert len(text.spans) == 1

    def test_style_mapping(self) -> None:
        rich_style = to_rich_style(Style(foreground=Color.BRIGHT_RED, bold=True))
        assert rich_style.color.name == "bright_red"
        assert rich_style.bold is True

    def test_reverse_swapped(self) -> None:
        rich_style = to_rich_style(Style(foreground=Color.BLUE, reverse=True))
        assert rich_style.bgcolor.name == "blue"
        assert rich_style.color.name == "default"
        assert not rich_style.reverse

    def test_reverse_on_default_colors(self) -> None:
        runs, _ = parse("\x1b[7mREV")
        rich_style = to_rich_style(runs[0].style)
        assert rich_style.reverse is True
        text = RichRenderer().render(runs)
        assert text.spans[0].style.reverse is True

    def test_reverse_with_color_not_doubled(self) -> None:
        rich_style = to_rich_style(Style(background=Color.GREEN, reverse=True))
        assert rich_style.color.name == "green"
        assert not rich_style.reverse
