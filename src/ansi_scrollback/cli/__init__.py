"""Command line interface."""

from ansi_scrollback.cli.app import create_app
from ansi_scrollback.cli.main import main

__all__ = ["create_app", "main"]
