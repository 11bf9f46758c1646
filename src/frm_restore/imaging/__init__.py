"""
Imaging module for FRM Workbench.

Provides EEPROM image construction, checksums, image errors and file I/O.
"""

from frm_restore.imaging.image_formats import (
    ImageError,
    ImageSizeError,
    ImageFileTypeError,
    ImageReadError,
    ImageWriteError,
    ImageKind,
    ImageMetadata,
    detect_kind,
    read_metadata,
    validate_source_size,
)

from frm_restore.imaging.checksum import (
    calculate_checksum,
    read_checksum,
    write_checksum,
    verify_checksum,
)

from frm_restore.imaging.transcoder import (
    ConversionResult,
    ImageTranscoder,
    convert,
)

from frm_restore.imaging.image_io import (
    load_source_image,
    save_target_image,
    repaired_filename,
    default_output_path,
)

__all__ = [
    # Errors and kinds
    "ImageError",
    "ImageSizeError",
    "ImageFileTypeError",
    "ImageReadError",
    "ImageWriteError",
    "ImageKind",
    "ImageMetadata",
    "detect_kind",
    "read_metadata",
    "validate_source_size",

    # Checksum
    "calculate_checksum",
    "read_checksum",
    "write_checksum",
    "verify_checksum",

    # Conversion
    "ConversionResult",
    "ImageTranscoder",
    "convert",

    # File I/O
    "load_source_image",
    "save_target_image",
    "repaired_filename",
    "default_output_path",
]
