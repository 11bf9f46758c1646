"""
Unit tests for report viewer content.

These exercise the markup builders only; no Textual app is started.
"""

from frm_restore.analysis.analyzer import analyze
from frm_restore.core.settings import SectorMapColors
from frm_restore.tui.screens.report_screen import build_summary_text, report_filename
from frm_restore.tui.widgets.sector_map import build_sector_map_markup
from frm_restore.tui.widgets.vehicle_panel import VehiclePanel
from tests.fixtures import SAMPLE_VIN, create_erased_image, create_partial_image, create_vehicle_image


class TestSectorMapMarkup:
    """Test sector map markup."""

    def test_counts_line(self):
        markup = build_sector_map_markup(analyze(create_partial_image(4)).sector_map)
        assert "Data: 4" in markup
        assert "Blank: 28" in markup

    def test_uses_scheme_colours(self):
        colors = SectorMapColors(meaningful="magenta", blank_erased="blue", blank_zero="yellow")
        markup = build_sector_map_markup(analyze(create_partial_image(1)).sector_map, colors)

        assert "[magenta]█[/magenta]" in markup
        assert "[blue]·[/blue]" in markup

    def test_row_offsets(self):
        markup = build_sector_map_markup(analyze(create_erased_image()).sector_map)
        for offset in ("0x0000", "0x2000", "0x4000", "0x6000"):
            assert offset in markup


class TestPanels:
    """Test panel text."""

    def test_vehicle_text(self):
        panel = VehiclePanel(analyze(create_vehicle_image()))
        text = panel.vehicle_text()

        assert SAMPLE_VIN in text
        assert "no marker found" in text

    def test_missing_fields(self):
        panel = VehiclePanel(analyze(create_erased_image()))
        assert "not found" in panel.vehicle_text()

    def test_summary_status(self):
        assert "No data found" in build_summary_text(analyze(create_erased_image()))
        assert "All sectors hold data" in build_summary_text(analyze(create_partial_image(32)))

    def test_report_filename(self):
        assert report_filename("frm_dump.bin") == "frm_report_frm_dump.txt"
        assert report_filename("") == "frm_report_dump.txt"
