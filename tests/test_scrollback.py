"""Tests for ScrollbackLog."""

import logging

import pytest

from ansi_scrollback.core.color import Color
from ansi_scrollback.core.run import StyledRun
from ansi_scrollback.core.style import DEFAULT_STYLE, DISABLED, Enabled, Style
from ansi_scrollback.errors import ParseError
from ansi_scrollback.log.scrollback import ScrollbackLog


class TestReceive:
    def test_appends_runs(self) -> None:
        log = ScrollbackLog()
        new = log.receive("\x1b[31mred\x1b[0m plain")
        assert new == [
            StyledRun(Style(foreground=Color.RED), "red"),
            StyledRun(DEFAULT_STYLE, " plain"),
        ]
        assert log.runs == tuple(new)
        assert len(log) == 2

    def test_style_carries_across_messages(self) -> None:
        log = ScrollbackLog()
        log.receive("\x1b[1mA")
        runs = log.receive("B")
        assert runs == [StyledRun(Style(bold=True), "B")]
        assert log.formatting == Enabled(Style(bold=True))

    def test_plain_text(self) -> None:
        log = ScrollbackLog()
        log.receive("\x1b[32mone\x1b[0m\n")
        log.receive("two\n")
        assert log.plain_text() == "one\ntwo\n"

    def test_empty_message(self) -> None:
        log = ScrollbackLog()
        assert log.receive("") == []
        assert len(log) == 0


class TestMalformed:
    def test_fallback_shows_verbatim(self, caplog: pytest.LogCaptureFixture) -> None:
        log = ScrollbackLog()
        log.receive("\x1b[1m")
        with caplog.at_level(logging.WARNING, logger="ansi_scrollback.log.scrollback"):
            runs = log.receive("\x1b[2Jbad")
        assert runs == [StyledRun(DEFAULT_STYLE, "\x1b[2Jbad")]
        assert "verbatim" in caplog.text
        # Carried formatting is untouched
        assert log.formatting == Enabled(Style(bold=True))

    def test_strict_raises(self) -> None:
        log = ScrollbackLog(strict=True)
        with pytest.raises(ParseError):
            log.receive("\x1b[31")
        assert len(log) == 0


class TestFormattingMode:
    def test_disabled(self) -> None:
        log = ScrollbackLog(None)
        assert log.formatting_enabled is False
        assert log.receive("\x1b[31mHi") == [StyledRun(DEFAULT_STYLE, "Hi")]
        assert log.formatting is DISABLED

    def test_toggle(self) -> None:
        log = ScrollbackLog(Style(bold=True))
        log.set_formatting_enabled(False)
        assert log.formatting_enabled is False
        log.set_formatting_enabled(True)
        assert log.formatting == Enabled(DEFAULT_STYLE)

    def test_reset_style(self) -> None:
        log = ScrollbackLog()
        log.receive("\x1b[7m")
        log.reset_style()
        assert log.formatting == Enabled(DEFAULT_STYLE)


class TestLimits:
    def test_max_runs(self) -> None:
        log = ScrollbackLog(max_runs=2)
        log.receive("a")
        log.receive("b")
        log.receive("c")
        assert [run.text for run in log.runs] == ["b", "c"]

    def test_invalid_max_runs(self) -> None:
        with pytest.raises(ValueError):
            ScrollbackLog(max_runs=0)

    def test_clear_keeps_formatting(self) -> None:
        log = ScrollbackLog()
        log.receive("\x1b[4mx")
        log.clear()
        assert len(log) == 0
        assert log.receive("y")[0].style.underline is True
