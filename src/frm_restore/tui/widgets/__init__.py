"""
TUI widgets for FRM Workbench.

This module contains reusable widgets:
- SectorMapWidget: Colour-coded sector map
- VehiclePanel: Recovered vehicle data and configuration
"""

from frm_restore.tui.widgets.sector_map import SectorMapWidget, build_sector_map_markup
from frm_restore.tui.widgets.vehicle_panel import VehiclePanel

__all__ = [
    "SectorMapWidget",
    "VehiclePanel",
    "build_sector_map_markup",
]
