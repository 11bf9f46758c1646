"""
Vehicle data panel widget for FRM Workbench.

Displays the fields recovered from the dump:
- Variant, VIN, model, year, mileage
- Configuration flags
"""

from textual.app import ComposeResult
from textual.containers import Vertical
from textual.widget import Widget
from textual.widgets import Static

from frm_restore.analysis.analyzer import AnalysisReport


def _value(value) -> str:
    return "[dim]not found[/dim]" if value is None else str(value)


def _flag(value: bool) -> str:
    return "[green]yes[/green]" if value else "[dim]no[/dim]"


class VehiclePanel(Widget):
    """Vehicle data and configuration display panel."""

    DEFAULT_CSS = """
    VehiclePanel {
        height: auto;
        border: heavy $accent;
        padding: 0 1;
    }
    """

    def __init__(self, report: AnalysisReport, **kwargs):
        super().__init__(**kwargs)
        self.report = report

    def compose(self) -> ComposeResult:
        """Create panel layout."""
        yield Vertical(
            Static("[bold]Vehicle Data[/bold]", classes="widget-title"),
            Static(self.vehicle_text(), id="vehicle-stats"),
            Static(self.config_text(), id="config-stats"),
        )

    def vehicle_text(self) -> str:
        vehicle = self.report.vehicle
        variant = self.report.variant
        if self.report.variant_is_fallback:
            variant += " [dim](no marker found)[/dim]"

        text = (
            f"  Variant: {variant}\n"
            f"  VIN: {_value(vehicle.identifier)}\n"
            f"  Model: {_value(vehicle.category)}\n"
            f"  Year: {_value(vehicle.production_year)}\n"
            f"  Mileage: {_value(vehicle.odometer)}"
        )
        if self.report.odometer_big_endian is not None:
            text += f"\n  Mileage (BE): {self.report.odometer_big_endian} [yellow](unverified)[/yellow]"
        return text

    def config_text(self) -> str:
        config = self.report.config
        return (
            f"[bold]Configuration:[/bold]\n"
            f"  Xenon headlights: {_flag(config.xenon_headlights)}\n"
            f"  Angel eyes: {_flag(config.angel_eyes)}\n"
            f"  Auto wipers: {_flag(config.auto_wipers)}\n"
            f"  Comfort access: {_flag(config.comfort_access)}\n"
            f"  Follow-me-home: {config.follow_me_home}"
        )
