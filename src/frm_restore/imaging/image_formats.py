"""
Image kind detection and error types for FRM images.

This module provides the exception hierarchy shared by the loaders, the
analyzer and the transcoder, plus size-based detection of the two image
kinds the workbench handles.

Supported Kinds:
    - DFLASH: 32 KiB D-Flash dump read from the module (source)
    - EEPROM: 4 KiB EEPROM image produced for reprogramming (target)
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Optional

from frm_restore.core.layout import DFLASH_LAYOUT, DFLASH_SIZE, EEPROM_LAYOUT, ImageLayout

logger = logging.getLogger(__name__)


# =============================================================================
# Custom Exceptions
# =============================================================================

class ImageError(Exception):
    """Base exception for image-related errors."""

    def __init__(self, message: str, filepath: Optional[str] = None):
        self.message = message
        self.filepath = filepath
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.filepath:
            return f"{self.message} [File: {self.filepath}]"
        return self.message


class ImageSizeError(ImageError):
    """Raised when an image buffer does not have the exact required size."""

    def __init__(self, message: str, filepath: Optional[str] = None,
                 expected_size: Optional[int] = None,
                 actual_size: Optional[int] = None):
        self.expected_size = expected_size
        self.actual_size = actual_size
        super().__init__(message, filepath)

    def _format_message(self) -> str:
        base = super()._format_message()
        if self.expected_size is not None and self.actual_size is not None:
            return f"{base} [Expected: {self.expected_size}, Actual: {self.actual_size}]"
        return base


class ImageFileTypeError(ImageError):
    """Raised when a file extension is not an accepted dump type."""

    def __init__(self, message: str, filepath: Optional[str] = None,
                 extension: Optional[str] = None):
        self.extension = extension
        super().__init__(message, filepath)

    def _format_message(self) -> str:
        base = super()._format_message()
        if self.extension:
            return f"{base} [Extension: {self.extension}]"
        return base


class ImageReadError(ImageError):
    """Raised when reading an image file fails."""
    pass


class ImageWriteError(ImageError):
    """Raised when writing an image file fails."""
    pass


# =============================================================================
# Enums and Constants
# =============================================================================

class ImageKind(Enum):
    """Image kinds recognised by size."""
    DFLASH = auto()   # 32 KiB D-Flash dump
    EEPROM = auto()   # 4 KiB EEPROM image
    UNKNOWN = auto()  # Anything else


# Extensions accepted for D-Flash dumps. The content is raw bytes in all cases.
ACCEPTED_EXTENSIONS = ('.bin', '.hex', '.eep')

KIND_LAYOUTS: Dict[ImageKind, ImageLayout] = {
    ImageKind.DFLASH: DFLASH_LAYOUT,
    ImageKind.EEPROM: EEPROM_LAYOUT,
}


@dataclass
class ImageMetadata:
    """
    Metadata for a loaded image buffer.

    Attributes:
        kind: Detected image kind
        size: Buffer size in bytes
        filename: Originating file name, if any
    """
    kind: ImageKind
    size: int
    filename: str = ""

    @property
    def is_source(self) -> bool:
        """True if the buffer can be analyzed and converted."""
        return self.kind == ImageKind.DFLASH


def detect_kind(data: bytes) -> ImageKind:
    """
    Detect the image kind from the buffer size.

    Args:
        data: Image buffer

    Returns:
        ImageKind for an exact size match, ImageKind.UNKNOWN otherwise
    """
    for kind, layout in KIND_LAYOUTS.items():
        if layout.matches(data):
            return kind
    return ImageKind.UNKNOWN


def read_metadata(data: bytes, filename: str = "") -> ImageMetadata:
    """Build ImageMetadata for a buffer."""
    return ImageMetadata(kind=detect_kind(data), size=len(data), filename=filename)


def validate_source_size(data: bytes, filepath: Optional[str] = None) -> None:
    """
    Reject a source buffer that is not exactly one D-Flash image.

    Args:
        data: Candidate D-Flash buffer
        filepath: Originating file, if any, for the error message

    Raises:
        ImageSizeError: If len(data) != DFLASH_SIZE
    """
    if not DFLASH_LAYOUT.matches(data):
        logger.warning(
            "Rejecting source image: expected %d bytes, got %d",
            DFLASH_SIZE, len(data)
        )
        raise ImageSizeError(
            "Invalid D-Flash size",
            filepath=filepath,
            expected_size=DFLASH_SIZE,
            actual_size=len(data),
        )
