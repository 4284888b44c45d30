"""
Listing commands: fetch, parse and render programme schedules.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.text import Text

from zeeschedule.core.config import AppConfig, ConfigError, load_app_config
from zeeschedule.core.extract import ListingExtractor, ListingRecord
from zeeschedule.core.logging import setup_logging
from zeeschedule.core.output import to_table, to_text, to_xml
from zeeschedule.core.schedule import (
    InvalidArgument,
    ScheduleQuery,
    ScheduleSession,
    build_query,
    parse_sdate,
    to_url,
)
from zeeschedule.core.backends import Backend, FetchFailed, HttpBackend

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    help="Fetch and render programme listings",
    no_args_is_help=True,
)


class OutputFormat(str, Enum):
    """Rendering for listing output."""

    XML = "xml"
    TEXT = "text"
    TABLE = "table"


def _fail(message: str, detail: str | None = None) -> typer.Exit:
    err_console.print(Text(message, style="red"))
    if detail:
        err_console.print(Text(detail, style="dim"))
    return typer.Exit(1)


def _resolve_query(
    date: str | None,
    year: int | None,
    month: int | None,
    day: int | None,
) -> ScheduleQuery:
    """Turn CLI date options into a validated query."""
    try:
        if date is not None:
            if any(value is not None for value in (year, month, day)):
                raise InvalidArgument("Use either --date or --year/--month/--day, not both")
            return parse_sdate(date)
        return build_query(year, month, day)
    except InvalidArgument as e:
        raise _fail(f"Invalid date: {e}")


def _load_config(config_path: Path | None, verbose: bool) -> AppConfig:
    try:
        config = load_app_config(config_path)
    except ConfigError as e:
        raise _fail(f"Error loading config: {e}", e.details)

    setup_logging(
        level="DEBUG" if verbose else config.logging.level,
        log_file=config.logging.file,
        json_format=config.logging.json_format,
        rich_console=config.logging.rich_console,
    )
    return config


def _create_backend(config: AppConfig) -> Backend:
    return HttpBackend(
        timeout=config.source.timeout,
        user_agent=config.source.user_agent,
    )


def _render(records: list[ListingRecord], fmt: OutputFormat, escape: bool, output: Path | None, caption: str) -> None:
    if output is not None:
        output.parent.mkdir(parents=True, exist_ok=True)

    if fmt is OutputFormat.TABLE:
        table = to_table(records, title=caption)
        if output is None:
            console.print(table)
            if not records:
                console.print("[dim]No programmes found.[/dim]")
            return
        with open(output, "w", encoding="utf-8") as f:
            Console(file=f, width=120).print(table)
    else:
        rendered = to_xml(records, escape=escape) if fmt is OutputFormat.XML else to_text(records)
        if output is None:
            typer.echo(rendered, nl=fmt is OutputFormat.XML)
            return
        output.write_text(rendered, encoding="utf-8")

    err_console.print(f"[green]Wrote {len(records)} programme(s) to[/green] {output}", highlight=False)


# =============================================================================
# Commands
# =============================================================================


@app.command("show")
def show_listings(
    date: Optional[str] = typer.Option(
        None,
        "--date",
        "-d",
        help="Schedule date as YYYY-MM-DD (default: today)",
    ),
    year: Optional[int] = typer.Option(None, "--year", help="Four digit year (with --month and --day)"),
    month: Optional[int] = typer.Option(None, "--month", help="Month 1-12 (with --year and --day)"),
    day: Optional[int] = typer.Option(None, "--day", help="Day 1-31 (with --year and --month)"),
    fmt: OutputFormat = typer.Option(
        OutputFormat.TEXT,
        "--format",
        "-f",
        help="Output format",
        case_sensitive=False,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write to a file instead of stdout",
    ),
    escape: bool = typer.Option(
        False,
        "--escape",
        help="Escape &, < and > in XML values",
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to app.yaml (default: configs/app.yaml if present)",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log fetch and scan details"),
) -> None:
    """Fetch the schedule for a day and print its listings.

    Examples:
        zeeschedule listings show
        zeeschedule listings show --date 2011-04-25 --format xml
        zeeschedule listings show --year 2011 --month 4 --day 25 -f table
    """
    query = _resolve_query(date, year, month, day)
    config = _load_config(config_path, verbose)

    with _create_backend(config) as backend:
        session = ScheduleSession.from_query(
            query,
            base_url=config.source.base_url,
            backend=backend,
        )
        try:
            records = session.listings
        except FetchFailed as e:
            raise _fail(f"Fetch failed: {e}", f"URL: {e.url}")

    _render(records, fmt, escape, output, caption=f"ZEE TV - {query.sdate}")


@app.command("parse")
def parse_listings(
    html_file: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="Saved schedule page",
    ),
    fmt: OutputFormat = typer.Option(
        OutputFormat.TEXT,
        "--format",
        "-f",
        help="Output format",
        case_sensitive=False,
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Write to a file instead of stdout",
    ),
    escape: bool = typer.Option(
        False,
        "--escape",
        help="Escape &, < and > in XML values",
    ),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to app.yaml (default: configs/app.yaml if present)",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log scan details"),
) -> None:
    """Extract listings from a saved schedule page without fetching."""
    _load_config(config_path, verbose)

    html = html_file.read_text(encoding="utf-8", errors="replace")
    records = ListingExtractor().extract(html)

    _render(records, fmt, escape, output, caption=html_file.name)


@app.command("url")
def show_url(
    date: Optional[str] = typer.Option(
        None,
        "--date",
        "-d",
        help="Schedule date as YYYY-MM-DD (default: today)",
    ),
    year: Optional[int] = typer.Option(None, "--year", help="Four digit year (with --month and --day)"),
    month: Optional[int] = typer.Option(None, "--month", help="Month 1-12 (with --year and --day)"),
    day: Optional[int] = typer.Option(None, "--day", help="Day 1-31 (with --year and --month)"),
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to app.yaml (default: configs/app.yaml if present)",
    ),
) -> None:
    """Print the schedule page URL for a day without fetching it."""
    query = _resolve_query(date, year, month, day)
    try:
        config = load_app_config(config_path)
    except ConfigError as e:
        raise _fail(f"Error loading config: {e}", e.details)

    typer.echo(to_url(config.source.base_url, query))
