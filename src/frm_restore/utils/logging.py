"""
Logging configuration for FRM Workbench.

Provides structured logging with system information capture for debugging
and troubleshooting.
"""

import logging
import sys
import platform
from pathlib import Path
from typing import List


# Handlers installed by setup_logging(), replaced on the next call
_installed_handlers: List[logging.Handler] = []


def setup_logging(log_file: str = "frm_workbench.log", level: int = logging.DEBUG,
                  console_level: int = logging.INFO) -> None:
    """
    Configure structured logging for the application.

    Sets up file-based logging at the given level plus a console handler,
    and captures system information on startup. Calling it again replaces
    the handlers from the previous call, so the latest log file wins and
    console lines are never duplicated.

    Args:
        log_file: Path to log file (default: "frm_workbench.log")
        level: File logging level (default: logging.DEBUG)
        console_level: Console logging level (default: logging.INFO)

    Example:
        >>> setup_logging()
        >>> logging.info("Application started")
    """
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)

    root = logging.getLogger()
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root.removeHandler(handler)
        handler.close()

    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(
        '%(asctime)s - %(levelname)s - %(name)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    ))

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(logging.Formatter('%(levelname)s - %(message)s'))

    for handler in (file_handler, console_handler):
        root.addHandler(handler)
        _installed_handlers.append(handler)
    root.setLevel(min(level, console_level))

    log_system_info()


def log_system_info() -> None:
    """Log platform and interpreter information at DEBUG level."""
    from frm_restore import __version__

    logging.debug("=" * 60)
    logging.debug(f"FRM Workbench {__version__} - System Information")
    logging.debug("=" * 60)
    logging.debug(f"Platform: {platform.system()} {platform.release()}")
    logging.debug(f"Machine: {platform.machine()}")
    logging.debug(f"Python version: {sys.version}")
    logging.debug(f"Python executable: {sys.executable}")
    logging.debug("=" * 60)


def log_operation(operation: str, details: str, level: int = logging.INFO) -> None:
    """
    Log an operation with details.

    Args:
        operation: Name of the operation (e.g., "analyze", "convert")
        details: Additional details about the operation
        level: Logging level (default: logging.INFO)

    Example:
        >>> log_operation("convert", "frm.bin -> frm_repaired.bin")
    """
    logging.log(level, f"{operation}: {details}")


def log_error(operation: str, error_type: str, error_message: str,
              level: int = logging.ERROR) -> None:
    """
    Log an error with operation context.

    Args:
        operation: Name of the operation that failed
        error_type: Short error classification (e.g., "size_mismatch")
        error_message: Error message or description
        level: Logging level (default: logging.ERROR)

    Example:
        >>> log_error("convert", "size_mismatch", "expected 32768 bytes, got 4096")
    """
    logging.log(level, f"{operation} failed - {error_type}: {error_message}")


def log_performance(operation: str, duration: float, **metrics) -> None:
    """
    Log performance metrics for an operation.

    Args:
        operation: Name of the operation
        duration: Duration in seconds
        **metrics: Additional metrics (e.g., sectors=32)

    Example:
        >>> log_performance("analyze", 0.004, sectors=32)
    """
    metrics_str = ", ".join(f"{k}={v}" for k, v in metrics.items())
    logging.info(f"Performance - {operation}: {duration:.3f}s, {metrics_str}")


def log_image_info(path: str, size: int, kind: str = "Unknown") -> None:
    """
    Log information about a loaded image.

    Args:
        path: Image file path
        size: Image size in bytes
        kind: Detected image kind (e.g., "DFLASH")

    Example:
        >>> log_image_info("frm.bin", 32768, "DFLASH")
    """
    logging.info(f"Image: {path} ({kind})")
    logging.info(f"Size: {size} bytes ({size // 1024} KB)")
