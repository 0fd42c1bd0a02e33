"""CLI interface for crossparser."""

import json
import logging
from enum import Enum
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler

from crossparser import __version__
from crossparser.config import (
    add_root,
    expand_path,
    get_config_file,
    load_settings,
    remove_root,
)
from crossparser.display import (
    console,
    show_categories,
    show_roots,
    show_scan_result,
    show_scanning_progress,
    show_settings,
    show_warnings,
)
from crossparser.roots import get_scan_roots
from crossparser.scanner import scan_directory

# Create Typer app
app = typer.Typer(
    name="crossparser",
    help="Scan a folder and summarize its files by type and size",
    add_completion=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"crossparser version {__version__}")
        raise typer.Exit()


class LogLevel(str, Enum):
    """Accepted values for --log-level."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


def setup_logging(level: LogLevel) -> None:
    """Route log records through rich on stderr."""
    logging.basicConfig(
        level=level.value,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    log_level: LogLevel = typer.Option(
        LogLevel.ERROR,
        "--log-level",
        case_sensitive=False,
        help="Logging level.",
    ),
) -> None:
    """crossparser - folder statistics by file type."""
    setup_logging(log_level)

    # If no command specified, launch the TUI
    if ctx.invoked_subcommand is None:
        ctx.invoke(tui)


@app.command()
def scan(
    path: str = typer.Argument(..., help="Folder to scan"),
    as_json: bool = typer.Option(False, "--json", help="Print result as JSON"),
    warnings: Optional[bool] = typer.Option(
        None,
        "--warnings/--no-warnings",
        help="List paths that could not be read (default from config)",
    ),
    strict: bool = typer.Option(
        False, "--strict", help="Fail if PATH is not an existing folder"
    ),
) -> None:
    """Scan a folder and show file statistics."""
    root = expand_path(path)

    if strict and not root.is_dir():
        console.print(f"[red]Error: not a folder: {root}[/red]")
        raise typer.Exit(1)

    if as_json:
        result = scan_directory(root)
        data = result.model_dump(mode="json")
        data["size_human"] = result.size_human
        typer.echo(json.dumps(data, indent=2))
        return

    with show_scanning_progress() as progress:
        task = progress.add_task(f"Scanning {root.name or root}...", total=None)

        def update_progress(current: str, dirs_scanned: int):
            progress.update(task, completed=dirs_scanned)

        result = scan_directory(root, progress_callback=update_progress)

    show_scan_result(result, str(root))

    if warnings is None:
        warnings = load_settings().show_warnings
    if warnings:
        show_warnings(result)


@app.command()
def roots() -> None:
    """List folders available for scanning."""
    show_roots(get_scan_roots(load_settings()))


@app.command()
def categories() -> None:
    """List file categories and their extensions."""
    show_categories()


@app.command()
def config(
    add: Optional[str] = typer.Option(None, "--add-root", help="Add a folder to the scan roots"),
    remove: Optional[str] = typer.Option(
        None, "--remove-root", help="Remove a folder from the scan roots"
    ),
) -> None:
    """Show or change configuration."""
    if add and remove:
        console.print("[red]Error: use --add-root or --remove-root, not both[/red]")
        raise typer.Exit(1)

    if add or remove:
        outcome = add_root(add) if add else remove_root(remove)
        if not outcome["success"]:
            console.print(f"[red]{outcome['message']}[/red]")
            raise typer.Exit(1)
        console.print(f"[green]{outcome['message']}[/green]")
        return

    show_settings(load_settings(), str(get_config_file()))


@app.command()
def tui() -> None:
    """Launch interactive TUI interface."""
    try:
        from crossparser.tui import run_tui
    except ImportError:
        console.print("[red]TUI not available.[/red]")
        console.print("Install with: [bold]pip install crossparser[tui][/bold]")
        raise typer.Exit(1)

    run_tui()


if __name__ == "__main__":
    app()
