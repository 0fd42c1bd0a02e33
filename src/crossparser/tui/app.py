"""Main TUI application for crossparser."""

from textual.app import App
from textual.binding import Binding

from crossparser.config import load_settings
from crossparser.models import Settings
from crossparser.tui.screens import ParserScreen


class CrossParserApp(App):
    """Interactive folder statistics application."""

    TITLE = "crossparser"
    SUB_TITLE = "Folder statistics by file type"

    CSS_PATH = "styles.tcss"

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("?", "help", "Help"),
    ]

    SCREENS = {
        "parser": ParserScreen,
    }

    def __init__(self, settings: Settings | None = None):
        super().__init__()
        self.settings = settings or load_settings()

    def on_mount(self) -> None:
        """Called when the app is mounted."""
        self.push_screen("parser")

    def action_help(self) -> None:
        """Show help information."""
        self.notify(
            "Use arrow keys and Space to pick a folder, S to scan, R to reload folders",
            title="Help",
            timeout=5,
        )


def run_tui(settings: Settings | None = None) -> None:
    """Run the interactive TUI.

    Args:
        settings: Configuration to use; loaded from disk when omitted
    """
    app = CrossParserApp(settings=settings)
    app.run()
