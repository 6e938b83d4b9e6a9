"""Shared pytest fixtures."""

from pathlib import Path

import pytest


SAMPLE_LOG = (
    "\x1b[1;32mok\x1b[0m  compile\n"
    "\x1b[1;31mFAIL\x1b[0m test_parse\n"
    "\x1b[33mwarning: \x1b[1mstill\n"
    "bold here\x1b[0m\n"
)


@pytest.fixture
def sample_log(tmp_path: Path) -> Path:
    """A small log file with SGR sequences, one message per line."""
    path = tmp_path / "build.log"
    path.write_text(SAMPLE_LOG, encoding="utf-8")
    return path


@pytest.fixture
def malformed_log(tmp_path: Path) -> Path:
    """A log file whose second line uses a cursor movement sequence."""
    path = tmp_path / "bad.log"
    path.write_text("fine\n\x1b[2Jcleared\n", encoding="utf-8")
    return path
