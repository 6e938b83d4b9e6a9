"""Typer CLI application."""

import json
import logging
from enum import Enum
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from ansi_scrollback.core.style import DEFAULT_STYLE
from ansi_scrollback.errors import ParseError


class OutputFormat(str, Enum):
    html = "html"
    text = "text"
    json = "json"
    ansi = "ansi"
    terminal = "terminal"


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(show_path=False)],
        )


def create_app() -> typer.Typer:
    """Create and configure the CLI application."""
    app = typer.Typer(
        name="ansi-scrollback",
        help="Render text with ANSI SGR escape sequences into styled output.",
        no_args_is_help=True,
        rich_markup_mode="rich",
    )
    console = Console()

    def read_source(path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except OSError as e:
            console.print(f"[red]Cannot read {path}: {e.strerror}[/]")
            raise typer.Exit(1)

    @app.command()
    def render(
        path: Annotated[Path, typer.Argument(help="UTF-8 text file with ANSI escapes")],
        format: Annotated[OutputFormat, typer.Option("--format", "-f", help="Output format")] = OutputFormat.terminal,
        output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Write to file instead of stdout")] = None,
        plain: Annotated[bool, typer.Option("--plain", help="Disable formatting (escape sequences are discarded)")] = False,
        lenient: Annotated[bool, typer.Option("--lenient", "-l", help="Show malformed lines verbatim instead of failing")] = False,
        css_classes: Annotated[bool, typer.Option("--css-classes", help="HTML: use CSS classes instead of inline styles")] = False,
        verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable debug logging")] = False,
    ) -> None:
        """Render a file, one message per line, carrying style across lines."""
        from ansi_scrollback.log.scrollback import ScrollbackLog
        from ansi_scrollback.render import (
            AnsiRenderer,
            HtmlRenderer,
            JsonRenderer,
            RichRenderer,
            TextRenderer,
        )

        _configure_logging(verbose)
        source = read_source(path)

        log = ScrollbackLog(None if plain else DEFAULT_STYLE, strict=not lenient)
        for lineno, line in enumerate(source.splitlines(keepends=True), start=1):
            try:
                log.receive(line)
            except ParseError as e:
                console.print(f"[red]{path.name}:{lineno}: {escape(e.description)}[/] (column {e.offset + 1})")
                raise typer.Exit(1)

        runs = log.runs
        if format == OutputFormat.terminal:
            if output is not None:
                console.print("[red]Terminal format cannot be written to a file, use --format ansi[/]")
                raise typer.Exit(1)
            console.print(RichRenderer().render(runs), end="")
            return

        if format == OutputFormat.html:
            renderer = HtmlRenderer(use_inline_styles=not css_classes)
            result = renderer.render(runs)
            if css_classes:
                result = f"<style>\n{renderer.stylesheet()}\n</style>\n{result}"
        elif format == OutputFormat.json:
            result = JsonRenderer().render(runs)
        elif format == OutputFormat.ansi:
            result = AnsiRenderer().render(runs)
        else:
            result = TextRenderer().render(runs)

        if output is None:
            print(result, end="" if result.endswith("\n") else "\n")
        else:
            output.write_text(result, encoding="utf-8")
            console.print(f"[green]Rendered {path.name} → {output}[/]")

    @app.command()
    def tokens(
        path: Annotated[Path, typer.Argument(help="UTF-8 text file with ANSI escapes")],
    ) -> None:
        """Print the token stream as JSON."""
        from ansi_scrollback.codec import Content, tokenize

        source = read_source(path)
        try:
            stream = tokenize(source)
        except ParseError as e:
            console.print(f"[red]{path.name}: {escape(str(e))}[/]")
            raise typer.Exit(1)

        data = [
            {"content": token.text} if isinstance(token, Content) else {"sgr": list(token.params)}
            for token in stream
        ]
        print(json.dumps(data, indent=2, ensure_ascii=False))

    @app.command()
    def strip(
        path: Annotated[Path, typer.Argument(help="UTF-8 text file with ANSI escapes")],
    ) -> None:
        """Print the text with all SGR sequences removed."""
        from ansi_scrollback.codec import parse
        from ansi_scrollback.render import TextRenderer

        source = read_source(path)
        try:
            runs, _ = parse(source, None)
        except ParseError as e:
            console.print(f"[red]{path.name}: {escape(str(e))}[/]")
            raise typer.Exit(1)
        print(TextRenderer().render(runs), end="")

    return app
