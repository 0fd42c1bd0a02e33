"""TUI screens for crossparser."""

from functools import partial

from rich.markup import escape
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Container, VerticalScroll
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, RadioButton, RadioSet, Static

from crossparser.models import ScanResult, ScanRoot
from crossparser.roots import get_scan_roots
from crossparser.scanner import scan_directory
from crossparser.tui.widgets import ResultCard

SCAN_LABEL = "Scan folder"
SCANNING_LABEL = "Scanning..."


class ParserScreen(Screen):
    """Folder picker with a scan button and the result card."""

    BINDINGS = [
        Binding("s", "scan", "Scan"),
        Binding("r", "reload_roots", "Reload"),
    ]

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.roots: list[ScanRoot] = []
        self.selected_path: str | None = None
        self.is_scanning = False

    def compose(self) -> ComposeResult:
        self.roots = get_scan_roots(self.app.settings)

        yield Header()

        with Container(id="parser-container"):
            yield Static("[bold]Choose a folder to scan[/bold]", id="picker-title")

            with VerticalScroll(id="root-scroll"):
                if self.roots:
                    yield RadioSet(
                        *(RadioButton(escape(f"{root.name} ({root.path})")) for root in self.roots),
                        id="root-list",
                    )
                else:
                    yield Static(
                        "[dim]No folders found. Add one with "
                        "crossparser config --add-root PATH[/dim]",
                        id="no-roots",
                    )

            yield Button(SCAN_LABEL, variant="success", id="btn-scan", disabled=True)
            yield ResultCard(id="result-card")

        yield Footer()

    def on_radio_set_changed(self, event: RadioSet.Changed) -> None:
        """Remember the chosen folder and hide the previous result."""
        if event.index < 0 or event.index >= len(self.roots):
            return

        self.selected_path = self.roots[event.index].path
        self.query_one("#result-card", ResultCard).clear()
        self._update_button()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn-scan":
            self.action_scan()

    def action_scan(self) -> None:
        """Start scanning the selected folder."""
        if self.selected_path is None or self.is_scanning:
            return

        self.is_scanning = True
        self._update_button()
        self.query_one("#result-card", ResultCard).clear()

        # Run the walk in a worker thread to not block UI
        self.run_worker(partial(self._run_scan, self.selected_path), thread=True)

    def _run_scan(self, path: str) -> None:
        """Scan in background."""
        result = scan_directory(path)

        # Update UI on main thread
        self.app.call_from_thread(self._show_result, result)

    def _show_result(self, result: ScanResult) -> None:
        self.is_scanning = False
        self._update_button()
        self.query_one("#result-card", ResultCard).show_result(result)
        self.notify("Scan complete!", timeout=2)

    def _update_button(self) -> None:
        button = self.query_one("#btn-scan", Button)
        button.label = SCANNING_LABEL if self.is_scanning else SCAN_LABEL
        button.disabled = self.is_scanning or self.selected_path is None

    async def action_reload_roots(self) -> None:
        """Re-read candidate folders."""
        if self.is_scanning:
            self.notify("Wait for the scan to finish", severity="warning")
            return

        self.selected_path = None
        await self.recompose()
