"""
Utility functions for FRM Workbench.

This module provides logging setup and error handling helpers.
"""

from frm_restore.utils.error_handler import (
    handle_image_error,
    is_fatal_error,
    get_error_severity,
    get_exit_code,
)

from frm_restore.utils.logging import (
    setup_logging,
    log_system_info,
    log_operation,
    log_error,
    log_performance,
    log_image_info,
)

__all__ = [
    # Error handling
    "handle_image_error",
    "is_fatal_error",
    "get_error_severity",
    "get_exit_code",

    # Logging
    "setup_logging",
    "log_system_info",
    "log_operation",
    "log_error",
    "log_performance",
    "log_image_info",
]
