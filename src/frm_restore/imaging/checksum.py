"""
Additive checksum for EEPROM images.

The checksum is the sum of every byte before the final four, modulo 2**32,
stored little-endian in the final four bytes. It catches gross corruption
(truncation, erased blocks) and nothing subtler: swapped bytes and offsetting
changes go unnoticed. Hardware programmers verify exactly this arithmetic.
"""

import logging
import struct

from frm_restore.core.layout import CHECKSUM_SIZE

logger = logging.getLogger(__name__)

CHECKSUM_MASK = 0xFFFFFFFF


def calculate_checksum(data: bytes) -> int:
    """
    Sum all bytes except the trailing checksum field, modulo 2**32.

    Args:
        data: Complete image including the checksum field

    Returns:
        Unsigned 32-bit checksum
    """
    return sum(data[:len(data) - CHECKSUM_SIZE]) & CHECKSUM_MASK


def read_checksum(data: bytes) -> int:
    """Read the stored little-endian checksum from the last four bytes."""
    if len(data) < CHECKSUM_SIZE:
        raise ValueError(f"Image too short for a checksum field: {len(data)} bytes")
    return struct.unpack_from("<I", data, len(data) - CHECKSUM_SIZE)[0]


def write_checksum(image: bytearray) -> int:
    """
    Compute the checksum and store it in the last four bytes.

    Args:
        image: Mutable image, modified in place

    Returns:
        The checksum written
    """
    if len(image) < CHECKSUM_SIZE:
        raise ValueError(f"Image too short for a checksum field: {len(image)} bytes")
    checksum = calculate_checksum(image)
    struct.pack_into("<I", image, len(image) - CHECKSUM_SIZE, checksum)
    logger.debug("Checksum 0x%08X written at 0x%04X", checksum, len(image) - CHECKSUM_SIZE)
    return checksum


def verify_checksum(data: bytes) -> bool:
    """Check that the stored checksum matches the image contents."""
    if len(data) < CHECKSUM_SIZE:
        return False
    return read_checksum(data) == calculate_checksum(data)
