"""Tests for display module."""

from unittest.mock import patch

import pytest
from rich.console import Console

from crossparser.display import (
    category_label,
    show_categories,
    show_roots,
    show_scan_result,
    show_scanning_progress,
    show_settings,
    show_warnings,
)
from crossparser.models import FileCategory, ScanResult, ScanRoot, ScanWarning, Settings


@pytest.fixture
def captured():
    """Swap the module console for a recording one."""
    console = Console(record=True, width=120)
    with patch("crossparser.display.console", console):
        yield console


class TestCategoryLabel:
    def test_images_label(self):
        label = category_label(FileCategory.IMAGES)
        assert "Images" in label
        assert "magenta" in label

    def test_other_label(self):
        assert category_label(FileCategory.OTHER) == "[white]Other[/white]"


class TestShowScanResult:
    def test_shows_totals_and_types(self, captured):
        result = ScanResult(
            total_files=3,
            total_size=1536,
            by_type={FileCategory.IMAGES: 2, FileCategory.CODE: 1},
        )

        show_scan_result(result, "/sdcard/DCIM")

        output = captured.export_text()
        assert "/sdcard/DCIM" in output
        assert "Files: 3" in output
        assert "1.50 KB" in output
        assert "Images" in output
        assert "Code" in output
        assert "67%" in output

    def test_empty_result(self, captured):
        show_scan_result(ScanResult(), "/empty")

        output = captured.export_text()
        assert "Files: 0" in output
        assert "0 B" in output
        assert "No files found" in output


class TestShowWarnings:
    def test_no_warnings_prints_nothing(self, captured):
        show_warnings(ScanResult())
        assert captured.export_text() == ""

    def test_lists_warnings(self, captured):
        result = ScanResult(warnings=[ScanWarning(path="/locked", error="Permission denied")])

        show_warnings(result)

        output = captured.export_text()
        assert "1 path(s) could not be read" in output
        assert "/locked" in output
        assert "Permission denied" in output

    def test_limits_output(self, captured):
        warnings = [ScanWarning(path=f"/p{i}", error="x") for i in range(5)]

        show_warnings(ScanResult(warnings=warnings), limit=2)

        output = captured.export_text()
        assert "/p1" in output
        assert "/p2" not in output
        assert "and 3 more" in output


class TestShowRoots:
    def test_lists_roots(self, captured):
        show_roots([ScanRoot(name="DCIM", path="/sdcard/DCIM")])

        output = captured.export_text()
        assert "Available Folders" in output
        assert "DCIM" in output
        assert "/sdcard/DCIM" in output

    def test_no_roots(self, captured):
        show_roots([])
        assert "No scan roots found" in captured.export_text()


class TestShowCategories:
    def test_lists_extensions(self, captured):
        show_categories()

        output = captured.export_text()
        assert "jpg" in output
        assert "flac" in output
        assert "anything else" in output


class TestShowSettings:
    def test_shows_values(self, captured):
        show_settings(Settings(extra_roots=["/data"]), "/cfg/config.json")

        output = captured.export_text()
        assert "/cfg/config.json" in output
        assert "/data" in output
        assert "default" in output


class TestProgress:
    def test_scanning_progress(self):
        progress = show_scanning_progress()
        assert progress is not None
        assert progress.live.transient is True
