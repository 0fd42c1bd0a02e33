"""Interactive TUI for crossparser."""

from crossparser.tui.app import run_tui

__all__ = ["run_tui"]
