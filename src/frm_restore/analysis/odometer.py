"""
Odometer extraction from D-Flash images.

The odometer is a 32-bit counter in the 0x2000-0x2FFF block. The canonical
reading is little-endian and is the only one ever written to an EEPROM
image. A big-endian reading is available for the analysis report but has
not been confirmed against real module dumps.
"""

import logging
from typing import Optional

from frm_restore.analysis.validators import is_plausible_odometer
from frm_restore.analysis.window_scanner import ByteWindowScanner

logger = logging.getLogger(__name__)


ODOMETER_SCANNER = ByteWindowScanner(start=0x2000, end=0x3000, stride=4, width=4)

LITTLE_ENDIAN = "little"
BIG_ENDIAN = "big"


def find_odometer(data: bytes, byteorder: str = LITTLE_ENDIAN) -> Optional[tuple[int, int]]:
    """
    Locate the first plausible odometer reading.

    Args:
        data: D-Flash image
        byteorder: "little" (canonical) or "big" (unverified)

    Returns:
        Tuple of (offset, miles), or None if no offset holds a value in
        (0, 1,000,000)
    """
    if byteorder not in (LITTLE_ENDIAN, BIG_ENDIAN):
        raise ValueError(f"byteorder must be 'little' or 'big', got {byteorder!r}")

    def decode(window: bytes) -> Optional[int]:
        value = int.from_bytes(window, byteorder)
        return value if is_plausible_odometer(value) else None

    hit = ODOMETER_SCANNER.first(data, decode)
    if hit is not None:
        logger.debug("Odometer (%s-endian) %d at 0x%04X", byteorder, hit[1], hit[0])
    return hit


def extract_odometer(data: bytes) -> Optional[int]:
    """Extract the canonical little-endian odometer reading, or None."""
    hit = find_odometer(data, LITTLE_ENDIAN)
    return hit[1] if hit else None


def extract_odometer_big_endian(data: bytes) -> Optional[int]:
    """Extract the unverified big-endian odometer reading, or None."""
    hit = find_odometer(data, BIG_ENDIAN)
    return hit[1] if hit else None
