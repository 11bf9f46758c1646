"""
Test suite for FRM Workbench.

This package contains:
- Unit tests for individual components
- Integration tests for complete workflows
- Synthetic D-Flash image fixtures
"""

__version__ = "0.1.0"
