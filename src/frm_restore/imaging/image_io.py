"""
Loading D-Flash dumps and saving EEPROM images.

Dumps arrive as .bin, .hex or .eep files; all three are read as raw bytes.
Intel HEX text is not decoded: a .hex file must already hold the binary
dump. Loading applies only the coarse upload checks (extension and a 64 KiB
cap); the exact 32 KiB requirement is enforced by analyze() and convert().
"""

import logging
import os
import re
from pathlib import Path
from typing import Union

from frm_restore.imaging.image_formats import (
    ACCEPTED_EXTENSIONS,
    ImageFileTypeError,
    ImageReadError,
    ImageSizeError,
    ImageWriteError,
)

logger = logging.getLogger(__name__)

# Upload cap; the exact D-Flash size is checked by analyze() and convert()
MAX_SOURCE_FILE_SIZE = 64 * 1024

REPAIRED_SUFFIX = "_repaired"
REPAIRED_EXTENSION = ".bin"

_DUMP_EXTENSION_RE = re.compile(r"\.(bin|hex|eep)$", re.IGNORECASE)

PathLike = Union[str, os.PathLike]


def is_accepted_extension(path: PathLike) -> bool:
    """Check whether a file name has an accepted dump extension."""
    return Path(path).suffix.lower() in ACCEPTED_EXTENSIONS


def load_source_image(path: PathLike) -> bytes:
    """
    Read a D-Flash dump from disk.

    Args:
        path: Dump file (.bin, .hex or .eep)

    Returns:
        File contents

    Raises:
        ImageFileTypeError: Extension not accepted
        ImageSizeError: File larger than MAX_SOURCE_FILE_SIZE
        ImageReadError: File missing or unreadable
    """
    path = Path(path)
    if not is_accepted_extension(path):
        raise ImageFileTypeError(
            "Invalid file type. Only .bin, .hex, and .eep files are allowed",
            filepath=str(path),
            extension=path.suffix or None,
        )

    try:
        size = path.stat().st_size
        if size > MAX_SOURCE_FILE_SIZE:
            raise ImageSizeError(
                "File exceeds upload limit",
                filepath=str(path),
                expected_size=MAX_SOURCE_FILE_SIZE,
                actual_size=size,
            )
        with open(path, 'rb') as f:
            data = f.read()
    except OSError as e:
        raise ImageReadError(f"Failed to read dump: {e}", filepath=str(path)) from e

    logger.debug("Loaded %s: %d bytes", path, len(data))
    return data


def repaired_filename(filename: str) -> str:
    """
    Derive the output file name for a repaired image.

    Example:
        >>> repaired_filename("frm_dump.EEP")
        'frm_dump_repaired.bin'
    """
    if _DUMP_EXTENSION_RE.search(filename):
        return _DUMP_EXTENSION_RE.sub(REPAIRED_SUFFIX + REPAIRED_EXTENSION, filename)
    return filename + REPAIRED_SUFFIX + REPAIRED_EXTENSION


def default_output_path(source: PathLike, output_dir: PathLike | None = None) -> Path:
    """Output path next to the source, or inside output_dir if given."""
    source = Path(source)
    directory = Path(output_dir) if output_dir else source.parent
    return directory / repaired_filename(source.name)


def save_target_image(path: PathLike, data: bytes) -> Path:
    """
    Write an EEPROM image atomically.

    The image is written to a temporary file next to the target and then
    renamed over it.

    Raises:
        ImageWriteError: If the file cannot be written
    """
    path = Path(path)
    temp_file = path.with_name(path.name + '.tmp')
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(temp_file, 'wb') as f:
            f.write(data)
        temp_file.replace(path)
    except OSError as e:
        raise ImageWriteError(f"Failed to write image: {e}", filepath=str(path)) from e

    logger.info("Saved %d-byte image to %s", len(data), path)
    return path
