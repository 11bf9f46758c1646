"""
TUI (Text User Interface) module for FRM Workbench.

This module provides the Textual-based report viewer.
"""

from frm_restore.tui.app import FrmWorkbenchApp

__all__ = [
    "FrmWorkbenchApp",
]
