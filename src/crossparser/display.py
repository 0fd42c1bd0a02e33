"""Rich terminal display for crossparser."""

from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.table import Table

from crossparser.categories import get_all_categories, get_extensions
from crossparser.formatter import format_size
from crossparser.models import FileCategory, ScanResult, ScanRoot, Settings

console = Console()

CATEGORY_STYLES = {
    FileCategory.IMAGES: "magenta",
    FileCategory.VIDEO: "blue",
    FileCategory.AUDIO: "cyan",
    FileCategory.DOCUMENTS: "yellow",
    FileCategory.CODE: "green",
    FileCategory.OTHER: "white",
}


def category_label(category: FileCategory) -> str:
    """Get styled label for a category."""
    style = CATEGORY_STYLES.get(category, "white")
    return f"[{style}]{category.value}[/{style}]"


def show_scan_result(result: ScanResult, root: str) -> None:
    """Display the summary of a scan."""
    console.print(
        Panel(
            f"[bold]Files:[/bold] {result.total_files}\n"
            f"[bold]Total size:[/bold] {format_size(result.total_size)}",
            title=f"Scan Results: {root}",
            border_style="cyan",
        )
    )

    if not result.by_type:
        console.print("[dim]No files found[/dim]")
        return

    table = Table(title="By Type", show_header=True, header_style="bold")
    table.add_column("Category")
    table.add_column("Files", justify="right")
    table.add_column("Share", justify="right")

    for category, count in result.sorted_types:
        share = count / result.total_files * 100 if result.total_files else 0
        table.add_row(category_label(category), str(count), f"{share:.0f}%")

    console.print(table)


def show_warnings(result: ScanResult, limit: int = 20) -> None:
    """Display paths that could not be read."""
    if not result.warnings:
        return

    console.print(f"\n[yellow]! {len(result.warnings)} path(s) could not be read[/yellow]")
    for warning in result.warnings[:limit]:
        console.print(f"  [dim]{warning.path}[/dim]: {warning.error}")
    if len(result.warnings) > limit:
        console.print(f"  [dim]...and {len(result.warnings) - limit} more[/dim]")


def show_roots(roots: list[ScanRoot]) -> None:
    """Display candidate scan roots."""
    if not roots:
        console.print("[yellow]No scan roots found.[/yellow]")
        console.print("[dim]Add one with [bold]crossparser config --add-root PATH[/bold][/dim]")
        return

    console.print("[bold]Available Folders[/bold]\n")
    for root in roots:
        console.print(f"  • [bold]{root.name}[/bold] [dim]({root.path})[/dim]")


def show_categories() -> None:
    """Display the extension table."""
    table = Table(title="File Categories", show_header=True, header_style="bold")
    table.add_column("Category")
    table.add_column("Extensions")

    for category in get_all_categories():
        extensions = get_extensions(category)
        table.add_row(
            category_label(category),
            ", ".join(extensions) if extensions else "[dim]anything else[/dim]",
        )

    console.print(table)


def show_settings(settings: Settings, config_file: str) -> None:
    """Display current configuration."""
    console.print(f"[bold]Configuration[/bold] [dim]({config_file})[/dim]\n")
    console.print(f"  Storage root:  {settings.storage_root or '[dim]default[/dim]'}")
    console.print(f"  Show warnings: {'yes' if settings.show_warnings else 'no'}")
    console.print("  Extra roots:")
    if settings.extra_roots:
        for path in settings.extra_roots:
            console.print(f"    • {path}")
    else:
        console.print("    [dim]none[/dim]")


def show_scanning_progress() -> Progress:
    """Create spinner for a running scan."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        TextColumn("{task.completed} folders"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    )
