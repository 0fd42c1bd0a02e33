"""Tests for the TUI."""

import asyncio
import threading
from unittest.mock import patch

import pytest

pytest.importorskip("textual")

from textual.widgets import Button, RadioButton, Static

from crossparser.models import FileCategory, ScanResult, ScanWarning, Settings
from crossparser.scanner import scan_directory
from crossparser.tui.app import CrossParserApp
from crossparser.tui.screens import SCAN_LABEL, SCANNING_LABEL
from crossparser.tui.widgets import ResultCard, result_markup


class TestResultMarkup:
    def test_totals_and_types(self):
        result = ScanResult(
            total_files=3,
            total_size=2048,
            by_type={FileCategory.VIDEO: 1, FileCategory.IMAGES: 2},
        )

        markup = result_markup(result)

        assert "Files: 3" in markup
        assert "Total size: 2.00 KB" in markup
        assert markup.index("Images: 2") < markup.index("Video: 1")

    def test_empty_result(self):
        markup = result_markup(ScanResult())
        assert "Files: 0" in markup
        assert "Total size: 0 B" in markup
        assert "could not be read" not in markup

    def test_warnings_summary(self):
        result = ScanResult(warnings=[ScanWarning(path="/a", error="denied")])
        assert "1 path(s) could not be read" in result_markup(result)


def _storage(tmp_path):
    storage = tmp_path / "storage"
    (storage / "DCIM").mkdir(parents=True)
    (storage / "DCIM" / "a.jpg").write_bytes(b"x" * 10)
    (storage / "Pictures").mkdir()
    return storage


def _make_app(storage):
    return CrossParserApp(settings=Settings(storage_root=str(storage)))


class TestParserScreen:
    def test_scan_button_disabled_until_folder_chosen(self, tmp_path):
        app = _make_app(_storage(tmp_path))

        async def run():
            async with app.run_test() as pilot:
                await pilot.pause()
                screen = app.screen
                button = screen.query_one("#btn-scan", Button)
                assert button.disabled
                assert screen.selected_path is None

                list(screen.query(RadioButton))[0].value = True
                await pilot.pause()

                assert screen.selected_path == str(tmp_path / "storage" / "DCIM")
                assert not button.disabled

        asyncio.run(run())

    def test_scan_runs_in_worker_thread(self, tmp_path):
        app = _make_app(_storage(tmp_path))
        release = threading.Event()
        scan_threads = []

        def slow_scan(path):
            scan_threads.append(threading.current_thread())
            release.wait(timeout=5)
            return scan_directory(path)

        async def run():
            async with app.run_test() as pilot:
                await pilot.pause()
                screen = app.screen
                button = screen.query_one("#btn-scan", Button)
                card = screen.query_one("#result-card", ResultCard)

                list(screen.query(RadioButton))[0].value = True
                await pilot.pause()

                await pilot.press("s")
                await pilot.pause()
                assert str(button.label) == SCANNING_LABEL
                assert button.disabled
                assert not card.display

                release.set()
                await app.workers.wait_for_complete()
                await pilot.pause()

                assert str(button.label) == SCAN_LABEL
                assert not button.disabled
                assert card.display
                assert card.result.total_files == 1
                assert card.result.total_size == 10

        with patch("crossparser.tui.screens.scan_directory", side_effect=slow_scan):
            asyncio.run(run())

        assert scan_threads
        assert scan_threads[0] is not threading.main_thread()

    def test_new_selection_hides_previous_result(self, tmp_path):
        app = _make_app(_storage(tmp_path))

        async def run():
            async with app.run_test() as pilot:
                await pilot.pause()
                screen = app.screen
                card = screen.query_one("#result-card", ResultCard)
                buttons = list(screen.query(RadioButton))

                buttons[0].value = True
                await pilot.pause()
                await pilot.press("s")
                await pilot.pause()
                await app.workers.wait_for_complete()
                await pilot.pause()
                assert card.display

                buttons[1].value = True
                await pilot.pause()

                assert screen.selected_path == str(tmp_path / "storage" / "Pictures")
                assert not card.display
                assert card.result is None

        asyncio.run(run())

    def test_no_roots_message(self, tmp_path):
        app = _make_app(tmp_path / "empty")

        async def run():
            async with app.run_test() as pilot:
                await pilot.pause()
                screen = app.screen
                assert screen.query_one("#no-roots", Static)
                assert screen.query_one("#btn-scan", Button).disabled

        asyncio.run(run())
