"""
Report viewing screen for FRM Workbench.

Displays the analysis of one D-Flash dump:
- Sector map and recoverability
- Recovered vehicle data and configuration
- Export of the plain-text report
"""

from pathlib import Path

from textual.app import ComposeResult
from textual.containers import Container, Horizontal, VerticalScroll
from textual.screen import Screen
from textual.widgets import Button, Footer, Header, Static

from frm_restore.analysis.analyzer import AnalysisReport
from frm_restore.analysis.reporter import generate_complete_report
from frm_restore.core.settings import SectorMapColors
from frm_restore.tui.widgets import SectorMapWidget, VehiclePanel


def report_filename(source_name: str) -> str:
    """File name used when saving the text report."""
    stem = Path(source_name).stem or "dump"
    return f"frm_report_{stem}.txt"


def build_summary_text(report: AnalysisReport) -> str:
    """Recoverability summary line with a status marker."""
    corruption = report.corruption
    if corruption.recoverable_sectors == 0:
        status = "[bold red]No data found[/bold red]"
    elif corruption.recoverable_sectors == corruption.total_sectors:
        status = "[bold green]All sectors hold data[/bold green]"
    else:
        status = "[yellow]Partially blank[/yellow]"
    return (
        f"Recoverable sectors: {corruption.recoverable_sectors}/{corruption.total_sectors} "
        f"({corruption.corruption_level}%)  {status}"
    )


class ReportScreen(Screen):
    """Analysis results screen."""

    def __init__(self, report: AnalysisReport, source_name: str = "",
                 colors: SectorMapColors = SectorMapColors()):
        """
        Initialize report screen.

        Args:
            report: Analysis to display
            source_name: Dump file name, used in the title and report file name
            colors: Sector map colour scheme
        """
        super().__init__()
        self.report = report
        self.source_name = source_name
        self.colors = colors

    def compose(self) -> ComposeResult:
        """Create report screen layout."""
        yield Header()
        yield Container(
            VerticalScroll(
                Static(
                    f"[bold]Analysis: {self.source_name or 'D-Flash dump'}[/bold]",
                    classes="screen-title"
                ),
                Static(self.summary_text(), id="summary"),
                SectorMapWidget(self.report.sector_map, self.colors, id="sector-map"),
                VehiclePanel(self.report, id="vehicle-panel"),
                Horizontal(
                    Button("Save Report", id="save-report"),
                    Button("Quit", id="quit", variant="primary"),
                    classes="button-row"
                ),
            ),
            id="report-container"
        )
        yield Footer()

    def summary_text(self) -> str:
        """Recoverability summary line."""
        return build_summary_text(self.report)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button presses."""
        button_id = event.button.id

        if button_id == "quit":
            self.app.exit()

        elif button_id == "save-report":
            filename = report_filename(self.source_name)
            try:
                with open(filename, "w", encoding="utf-8") as f:
                    f.write(generate_complete_report(self.report))
                self.notify(f"Report saved to {filename}", severity="information")
            except OSError as e:
                self.notify(f"Failed to save report: {e}", severity="error")
