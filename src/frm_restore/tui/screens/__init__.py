"""
TUI screens for FRM Workbench.
"""

from frm_restore.tui.screens.report_screen import ReportScreen

__all__ = [
    "ReportScreen",
]
