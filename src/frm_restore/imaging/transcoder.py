"""
D-Flash to EEPROM transcoding.

This module builds the 4 KiB EEPROM image that is programmed back into an
FRM module from a 32 KiB D-Flash dump.

EEPROM layout (offsets are consumed verbatim by programmer tools):

    0x000  16 B   header: magic AA 55 FF 00, version 1, data offset 0x1000
    0x010  17 B   identifier code, ASCII, unpadded
    0x030   4 B   odometer, uint32 little-endian
    0x100  <=1 KiB configuration block (raw or JSON)
    0xFFC   4 B   additive checksum, uint32 little-endian

Every byte not written stays at the erased value 0xFF. Fields that could not
be recovered are simply not written; the only failure is a source image of
the wrong size, reported in the ConversionResult rather than raised.
"""

import logging
import struct
from dataclasses import dataclass
from typing import Optional

from frm_restore.analysis.vehicle_fields import VehicleData, extract_vehicle_data
from frm_restore.analysis.config_flags import ConfigBlockFormat, build_config_block
from frm_restore.analysis.signature import detect_variant_label
from frm_restore.core.layout import (
    CONFIG_MAX_SIZE,
    CONFIG_OFFSET,
    DFLASH_SIZE,
    EEPROM_HEADER,
    EEPROM_SIZE,
    FILL_BYTE,
    HEADER_OFFSET,
    IDENTIFIER_OFFSET,
    ODOMETER_OFFSET,
)
from frm_restore.imaging.checksum import write_checksum

logger = logging.getLogger(__name__)

ERROR_SIZE_MISMATCH = "size_mismatch"


# =============================================================================
# Data Classes
# =============================================================================

@dataclass(frozen=True)
class ConversionResult:
    """
    Outcome of a D-Flash to EEPROM conversion.

    Attributes:
        success: True if an EEPROM image was produced
        eeprom_data: The 4096-byte image (success only)
        vehicle_data: Fields written to the image (success only)
        variant: Detected variant label (success only)
        checksum: Checksum stored in the image (success only)
        error: Human-readable failure reason (failure only)
        error_code: Machine-readable failure reason (failure only)
        expected_size: Required source size (size failures only)
        actual_size: Size that was supplied (size failures only)
    """
    success: bool
    eeprom_data: Optional[bytes] = None
    vehicle_data: Optional[VehicleData] = None
    variant: Optional[str] = None
    checksum: Optional[int] = None
    error: Optional[str] = None
    error_code: Optional[str] = None
    expected_size: Optional[int] = None
    actual_size: Optional[int] = None

    @classmethod
    def ok(cls, eeprom_data: bytes, vehicle_data: VehicleData,
           variant: str, checksum: int) -> "ConversionResult":
        """Build a successful result."""
        return cls(
            success=True,
            eeprom_data=eeprom_data,
            vehicle_data=vehicle_data,
            variant=variant,
            checksum=checksum,
        )

    @classmethod
    def failure(cls, error: str, error_code: str,
                expected_size: Optional[int] = None,
                actual_size: Optional[int] = None) -> "ConversionResult":
        """Build a failed result."""
        return cls(
            success=False,
            error=error,
            error_code=error_code,
            expected_size=expected_size,
            actual_size=actual_size,
        )


# =============================================================================
# Transcoder
# =============================================================================

class ImageTranscoder:
    """
    Converts D-Flash images into EEPROM images.

    The transcoder holds only its configuration; each convert() call owns
    its output buffer, so one instance can serve concurrent callers.

    Example:
        >>> transcoder = ImageTranscoder(ConfigBlockFormat.RAW)
        >>> result = transcoder.convert(dflash)
        >>> if result.success:
        ...     Path("frm_repaired.bin").write_bytes(result.eeprom_data)
    """

    def __init__(self, config_format: ConfigBlockFormat = ConfigBlockFormat.RAW):
        """
        Initialize the transcoder.

        Args:
            config_format: Serialization of the configuration block
        """
        self.config_format = config_format

    def convert(self, dflash: bytes) -> ConversionResult:
        """
        Convert a D-Flash image.

        Args:
            dflash: D-Flash image, exactly 32768 bytes (any bytes-like object)

        Returns:
            ConversionResult; a wrong-size input yields a failure with
            error_code "size_mismatch" and nothing is built
        """
        if len(dflash) != DFLASH_SIZE:
            logger.warning(
                "Conversion rejected: expected %d bytes, got %d", DFLASH_SIZE, len(dflash)
            )
            return ConversionResult.failure(
                f"Invalid D-Flash size. Expected {DFLASH_SIZE} bytes, got {len(dflash)} bytes",
                ERROR_SIZE_MISMATCH,
                expected_size=DFLASH_SIZE,
                actual_size=len(dflash),
            )

        dflash = bytes(dflash)
        vehicle_data = extract_vehicle_data(dflash)
        variant = detect_variant_label(dflash)

        eeprom = bytearray([FILL_BYTE]) * EEPROM_SIZE
        self._write_header(eeprom)
        self._write_vehicle_data(eeprom, vehicle_data)
        self._write_configuration(eeprom, dflash)
        checksum = write_checksum(eeprom)

        logger.info(
            "Converted %s D-Flash image: identifier=%s, odometer=%s, checksum=0x%08X",
            variant, vehicle_data.identifier or "-",
            vehicle_data.odometer if vehicle_data.odometer is not None else "-",
            checksum
        )
        return ConversionResult.ok(bytes(eeprom), vehicle_data, variant, checksum)

    def _write_header(self, eeprom: bytearray) -> None:
        eeprom[HEADER_OFFSET:HEADER_OFFSET + len(EEPROM_HEADER)] = EEPROM_HEADER

    def _write_vehicle_data(self, eeprom: bytearray, vehicle_data: VehicleData) -> None:
        if vehicle_data.identifier is not None:
            encoded = vehicle_data.identifier.encode("ascii")
            eeprom[IDENTIFIER_OFFSET:IDENTIFIER_OFFSET + len(encoded)] = encoded

        if vehicle_data.odometer is not None:
            struct.pack_into("<I", eeprom, ODOMETER_OFFSET, vehicle_data.odometer)

    def _write_configuration(self, eeprom: bytearray, dflash: bytes) -> None:
        block = build_config_block(dflash, self.config_format)[:CONFIG_MAX_SIZE]
        eeprom[CONFIG_OFFSET:CONFIG_OFFSET + len(block)] = block


def convert(dflash: bytes,
            config_format: ConfigBlockFormat = ConfigBlockFormat.RAW) -> ConversionResult:
    """
    Convert a D-Flash image into an EEPROM image.

    See ImageTranscoder.convert().
    """
    return ImageTranscoder(config_format).convert(dflash)
