"""
zeeschedule CLI - Main entry point.

Fetch a day's ZEE TV programme schedule and print it as XML,
text or a table.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.panel import Panel

from zeeschedule import __app_name__, __version__

# Environment variables may feed ${VAR} references in configs/app.yaml
load_dotenv()

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(
    name=__app_name__,
    help="ZEE TV programme schedule scraper",
    rich_markup_mode="rich",
    no_args_is_help=True,
    pretty_exceptions_show_locals=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold cyan]{__app_name__}[/bold cyan] version [green]{__version__}[/green]")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """zeeschedule - ZEE TV programme schedule scraper."""
    pass


# =============================================================================
# Import and register subcommand modules
# =============================================================================

from .commands import listings  # noqa: E402

app.add_typer(listings.app, name="listings", help="Fetch and render programme listings")


# =============================================================================
# Init Command
# =============================================================================


DEFAULT_APP_CONFIG = """\
# zeeschedule configuration
# Values may reference environment variables: ${VAR} or ${VAR:-default}

# Schedule source
source:
  base_url: ${ZEESCHEDULE_BASE_URL:-http://www.zeetv.com/schedule/}
  timeout: 30
  # user_agent: "Mozilla/5.0 ..."

# Logging settings
logging:
  level: WARNING
  # file: logs/zeeschedule.log
  json_format: true
  rich_console: true
"""


@app.command()
def init(
    path: Path = typer.Option(
        Path("configs/app.yaml"),
        "--path",
        help="Where to write the configuration file",
    ),
    force: bool = typer.Option(
        False,
        "--force",
        "-f",
        help="Overwrite existing configuration",
    ),
) -> None:
    """Write a default configuration file."""
    if path.exists() and not force:
        err_console.print(f"[yellow]{path} already exists.[/yellow] Use --force to overwrite.")
        raise typer.Exit(1)

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(DEFAULT_APP_CONFIG, encoding="utf-8")

    console.print(Panel.fit(
        f"[bold green]OK - wrote [cyan]{path}[/cyan][/bold green]\n\n"
        "Next steps:\n"
        "  1. Show today's schedule: [yellow]zeeschedule listings show[/yellow]\n"
        "  2. Another day as XML: [yellow]zeeschedule listings show --date 2011-04-25 -f xml[/yellow]",
        title="[bold]Initialization Complete[/bold]",
        border_style="green",
    ))


# =============================================================================
# Entry Point
# =============================================================================


def run() -> None:
    """Run the CLI application."""
    app()


if __name__ == "__main__":
    run()
