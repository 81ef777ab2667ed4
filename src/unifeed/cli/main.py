"""Unifeed CLI application.

This module provides the command-line interface for Unifeed,
built with Typer.
"""

import io
import sys
from pathlib import Path
from typing import IO, Annotated, Any, Optional

import typer
from rich.console import Console
from rich.table import Table

from unifeed._version import __version__
from unifeed.core.exceptions import FeedError
from unifeed.core.logging import setup_logging

app = typer.Typer(
    name="unifeed",
    help="Parse RSS, Atom and sitemap documents into one feed model",
    no_args_is_help=True,
)
console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"Unifeed v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
    log_level: Annotated[
        str,
        typer.Option("--log-level", help="Diagnostics written to stderr (DEBUG, INFO, WARNING, ERROR)"),
    ] = "WARNING",
    log_format: Annotated[
        Optional[str],
        typer.Option("--log-format", help="'structured' or 'plain'; defaults to UNIFEED_LOG_FORMAT"),
    ] = None,
) -> None:
    """Unifeed - one feed model for RSS, Atom and XML sitemaps.

    Detect. Extract. Translate.
    """
    setup_logging(level=log_level, format=log_format)


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def _open_source(source: str) -> IO[Any]:
    if source == "-":
        return io.BytesIO(sys.stdin.buffer.read())

    path = Path(source)
    if not path.exists():
        console.print(f"[red]Error: Path not found: {path}[/red]")
        raise typer.Exit(1)
    return io.BytesIO(path.read_bytes())


@app.command()
def parse(
    source: Annotated[str, typer.Argument(help="Feed URL, file path, or '-' for stdin")],
    as_json: Annotated[bool, typer.Option("--json", help="Print the feed as JSON")] = False,
    proxy: Annotated[Optional[str], typer.Option(help="Proxy as host:port")] = None,
    proxy_user: Annotated[Optional[str], typer.Option(help="Proxy user name")] = None,
    proxy_password: Annotated[Optional[str], typer.Option(help="Proxy password")] = None,
) -> None:
    """Parse a feed and show its items."""
    from unifeed.parser import FeedParser

    parser = FeedParser()
    try:
        if _is_url(source) and proxy:
            feed = parser.parse_url_with_proxy(source, proxy, proxy_user, proxy_password)
        elif _is_url(source):
            feed = parser.parse_url(source)
        else:
            feed = parser.parse(_open_source(source))
    except FeedError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)

    if as_json:
        typer.echo(feed.to_json())
        return

    console.print(f"[green]{feed.feed_type.value} {feed.version}[/green] {feed.title or ''}")
    if feed.language:
        console.print(f"  Language: {feed.language}")

    table = Table(title=f"{len(feed.items)} items")
    table.add_column("Title", style="cyan")
    table.add_column("Link", style="green")
    table.add_column("Published")

    for item in feed.items:
        published = item.pub_date_parsed.isoformat() if item.pub_date_parsed else item.pub_date
        table.add_row(item.title, item.link, published)

    console.print(table)


@app.command()
def detect(
    source: Annotated[str, typer.Argument(help="File path, or '-' for stdin")],
) -> None:
    """Print the dialect of a feed document."""
    from unifeed.detector import detect_feed_type

    feed_type = detect_feed_type(_open_source(source))
    console.print(feed_type.value)


if __name__ == "__main__":
    app()
