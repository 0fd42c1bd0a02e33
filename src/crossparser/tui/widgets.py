"""Custom widgets for crossparser TUI."""

from textual.widgets import Static

from crossparser.formatter import format_size
from crossparser.models import ScanResult


def result_markup(result: ScanResult) -> str:
    """Build the markup shown in the result card."""
    content_parts = [
        "[bold #00b7eb]Scan Results[/bold #00b7eb]",
        "",
        f"Files: {result.total_files}",
        f"Total size: {format_size(result.total_size)}",
        "",
        "[bold #aaaaaa]By type:[/bold #aaaaaa]",
    ]

    for category, count in result.sorted_types:
        content_parts.append(f"• {category.value}: {count}")

    if result.warnings:
        content_parts.append("")
        content_parts.append(f"[yellow]{len(result.warnings)} path(s) could not be read[/yellow]")

    return "\n".join(content_parts)


class ResultCard(Static):
    """Card showing the outcome of the last scan."""

    DEFAULT_CSS = """
    ResultCard {
        display: none;
    }
    """

    def __init__(self, *args, **kwargs):
        super().__init__("", *args, **kwargs)
        self.result: ScanResult | None = None

    def show_result(self, result: ScanResult) -> None:
        """Display a finished scan."""
        self.result = result
        self.update(result_markup(result))
        self.display = True

    def clear(self) -> None:
        """Hide the card until the next scan finishes."""
        self.result = None
        self.update("")
        self.display = False
