"""
Fixed image layouts for FRM D-Flash dumps and EEPROM images.

This module holds the layout constants shared by the analysis and imaging
packages. The D-Flash source is always 32 KiB and the EEPROM target is
always 4 KiB; neither size is negotiable.
"""

from dataclasses import dataclass


# Source (D-Flash) layout
DFLASH_SIZE = 32768
SECTOR_SIZE = 1024
TOTAL_SECTORS = DFLASH_SIZE // SECTOR_SIZE

# Target (EEPROM) layout
EEPROM_SIZE = 4096
FILL_BYTE = 0xFF
CHECKSUM_SIZE = 4

EEPROM_HEADER = bytes([
    0xAA, 0x55, 0xFF, 0x00,  # Magic
    0x01, 0x00, 0x00, 0x00,  # Version
    0x00, 0x10, 0x00, 0x00,  # Data offset
    0x00, 0x00, 0x00, 0x00,  # Reserved
])

HEADER_OFFSET = 0x00
IDENTIFIER_OFFSET = 0x10
ODOMETER_OFFSET = 0x30
CONFIG_OFFSET = 0x100
CONFIG_MAX_SIZE = 1024
CHECKSUM_OFFSET = EEPROM_SIZE - CHECKSUM_SIZE


# =============================================================================
# Image Layout Data Class
# =============================================================================


@dataclass(frozen=True)
class ImageLayout:
    """
    Size and partitioning of a fixed-layout image.

    Attributes:
        name: Short layout name ("D-Flash", "EEPROM")
        image_size: Exact image size in bytes
        sector_size: Partition unit used for sector classification

    Example:
        >>> DFLASH_LAYOUT.total_sectors
        32
        >>> DFLASH_LAYOUT.sector_bounds(3)
        (3072, 4096)
    """
    name: str
    image_size: int
    sector_size: int = SECTOR_SIZE

    @property
    def total_sectors(self) -> int:
        """Number of whole sectors in the image."""
        if self.sector_size <= 0:
            return 0
        return self.image_size // self.sector_size

    def sector_bounds(self, index: int) -> tuple[int, int]:
        """
        Get the half-open byte range of a sector.

        Args:
            index: Sector index (0-based)

        Returns:
            Tuple of (start, end) offsets

        Raises:
            IndexError: If index is outside the image
        """
        if not 0 <= index < self.total_sectors:
            raise IndexError(f"Sector {index} out of range 0..{self.total_sectors - 1}")
        start = index * self.sector_size
        return (start, start + self.sector_size)

    def matches(self, data: bytes) -> bool:
        """Check whether a buffer has exactly this layout's size."""
        return len(data) == self.image_size

    def __str__(self) -> str:
        return (
            f"{self.name} ({self.image_size} bytes, "
            f"{self.total_sectors}x{self.sector_size}B sectors)"
        )


DFLASH_LAYOUT = ImageLayout(name="D-Flash", image_size=DFLASH_SIZE)
EEPROM_LAYOUT = ImageLayout(name="EEPROM", image_size=EEPROM_SIZE)

