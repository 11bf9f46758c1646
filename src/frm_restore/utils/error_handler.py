"""
Error handling utilities for FRM Workbench.

Maps image errors to actionable messages, severities and process exit
codes for the command line front end.
"""

from frm_restore.imaging.image_formats import (
    ImageError,
    ImageFileTypeError,
    ImageReadError,
    ImageSizeError,
    ImageWriteError,
)

# Process exit codes
EXIT_SUCCESS = 0
EXIT_FAILURE = 1
EXIT_INVALID_INPUT = 2


def handle_image_error(error: Exception, operation: str = "image operation") -> str:
    """
    Build a user-facing message for an error.

    Args:
        error: The exception raised
        operation: Description of the operation that failed

    Returns:
        Formatted error message with guidance

    Example:
        >>> handle_image_error(ImageSizeError("Invalid D-Flash size",
        ...     expected_size=32768, actual_size=4096), "convert")
        'convert failed: Invalid D-Flash size [Expected: 32768, Actual: 4096]. ...'
    """
    if isinstance(error, ImageSizeError):
        hint = "Dump the complete 32 KB D-Flash from the module and try again."
    elif isinstance(error, ImageFileTypeError):
        hint = "Rename or export the dump as .bin, .hex or .eep."
    elif isinstance(error, ImageReadError):
        hint = "Check that the file exists and is readable."
    elif isinstance(error, ImageWriteError):
        hint = "Check the output directory permissions and free space."
    else:
        hint = "See the log file for details."

    return f"{operation} failed: {error}. {hint}"


def is_fatal_error(error: Exception) -> bool:
    """
    Determine if an error means the input itself is unusable.

    Size and type errors are properties of the dump: running again with the
    same file gives the same result.
    """
    return isinstance(error, (ImageSizeError, ImageFileTypeError))


def get_error_severity(error: Exception) -> str:
    """
    Get the severity level of an error.

    Returns:
        Severity level: "critical" or "error"; errors outside the image
        taxonomy are unexpected and treated as critical
    """
    if isinstance(error, ImageError) and not is_fatal_error(error):
        return "error"
    return "critical"


def get_exit_code(error: Exception) -> int:
    """Map an error to a process exit code."""
    if is_fatal_error(error):
        return EXIT_INVALID_INPUT
    return EXIT_FAILURE
