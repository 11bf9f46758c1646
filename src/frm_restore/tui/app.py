"""
Main Textual application for FRM Workbench.

This module contains the report viewer application class that manages the
report screen and key bindings.
"""

import logging

from textual.app import App
from textual.binding import Binding

from frm_restore.analysis.analyzer import AnalysisReport
from frm_restore.core.settings import Settings, Theme
from frm_restore.tui.screens import ReportScreen

logger = logging.getLogger(__name__)

DARK_THEME = "textual-dark"
LIGHT_THEME = "textual-light"


class FrmWorkbenchApp(App):
    """
    Textual report viewer for one analyzed D-Flash dump.
    """

    CSS = """
    .screen-title {
        padding: 1 0;
        text-align: center;
    }
    .button-row {
        height: auto;
        padding: 1 0;
    }
    .button-row Button {
        margin: 0 1;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("d", "toggle_dark", "Toggle Dark Mode", show=True),
    ]

    TITLE = "FRM Workbench"

    def __init__(self, report: AnalysisReport, source_name: str = ""):
        """
        Initialize the application.

        Args:
            report: Analysis to display
            source_name: Dump file name
        """
        super().__init__()
        self.report = report
        self.source_name = source_name
        self.display_settings = Settings.instance().display

    def on_mount(self) -> None:
        """Apply display settings and show the report."""
        if self.display_settings.get_theme() == Theme.LIGHT:
            self.theme = LIGHT_THEME
        else:
            self.theme = DARK_THEME

        logger.info("Report viewer opened for %s", self.source_name or "dump")
        self.push_screen(ReportScreen(
            self.report,
            source_name=self.source_name,
            colors=self.display_settings.get_sector_colors(),
        ))

    def action_toggle_dark(self) -> None:
        """Toggle dark mode (D key)."""
        self.theme = LIGHT_THEME if self.theme == DARK_THEME else DARK_THEME
