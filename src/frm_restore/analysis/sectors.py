"""
Sector classification and recoverability analysis for D-Flash images.

This module provides the sector-level view of a dump:
- Partitioning into fixed 1 KiB sectors
- Blank sector detection (zero-filled or erased)
- Aggregate recoverability report

The "corruption level" reported here is the share of sectors that still hold
data, i.e. a recoverability percentage.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List

import numpy as np

from frm_restore.core.layout import DFLASH_LAYOUT, ImageLayout

logger = logging.getLogger(__name__)


# =============================================================================
# Data Structures
# =============================================================================


class SectorClass(Enum):
    """Classification of a single sector."""
    BLANK_ZERO = "blank_00"       # Every byte 0x00
    BLANK_ERASED = "blank_ff"     # Every byte 0xFF (erased cells)
    MEANINGFUL = "meaningful"     # Anything else

    @property
    def is_blank(self) -> bool:
        """True for both blank variants."""
        return self is not SectorClass.MEANINGFUL


@dataclass(frozen=True)
class CorruptionReport:
    """
    Aggregate recoverability of an image.

    Attributes:
        corruption_level: round(100 * recoverable / total), 0-100
        recoverable_sectors: Number of meaningful sectors
        total_sectors: Number of sectors examined (32 for D-Flash)
    """
    corruption_level: int
    recoverable_sectors: int
    total_sectors: int

    @property
    def blank_sectors(self) -> int:
        """Number of blank sectors."""
        return self.total_sectors - self.recoverable_sectors


@dataclass
class SectorMap:
    """
    Per-sector classification of an image.

    Attributes:
        total_sectors: Number of sectors classified
        classifications: Mapping of sector index to SectorClass

    Example:
        >>> sector_map = classify_sectors(image)
        >>> sector_map.meaningful_sectors
        [0, 1, 4, 5]
    """
    total_sectors: int
    classifications: Dict[int, SectorClass] = field(default_factory=dict)

    @property
    def meaningful_sectors(self) -> List[int]:
        """Indices of sectors holding data."""
        return [i for i, c in sorted(self.classifications.items()) if not c.is_blank]

    @property
    def blank_sectors(self) -> List[int]:
        """Indices of blank sectors (either variant)."""
        return [i for i, c in sorted(self.classifications.items()) if c.is_blank]

    def get_class(self, sector: int) -> SectorClass:
        """Get the classification of one sector."""
        return self.classifications[sector]

    def count(self, sector_class: SectorClass) -> int:
        """Count sectors with a given classification."""
        return sum(1 for c in self.classifications.values() if c is sector_class)


# =============================================================================
# Classification
# =============================================================================


def classify_sector(sector: bytes) -> SectorClass:
    """
    Classify a single sector.

    Args:
        sector: Sector bytes

    Returns:
        BLANK_ZERO if every byte is 0x00, BLANK_ERASED if every byte is
        0xFF, MEANINGFUL otherwise
    """
    if not sector.strip(b"\x00"):
        return SectorClass.BLANK_ZERO
    if not sector.strip(b"\xff"):
        return SectorClass.BLANK_ERASED
    return SectorClass.MEANINGFUL


def classify_sectors(data: bytes, layout: ImageLayout = DFLASH_LAYOUT) -> SectorMap:
    """
    Classify every whole sector of an image.

    Args:
        data: Image bytes
        layout: Layout giving the sector size

    Returns:
        SectorMap covering len(data) // sector_size sectors
    """
    total = len(data) // layout.sector_size if layout.sector_size > 0 else 0
    sector_map = SectorMap(total_sectors=total)
    if total == 0:
        return sector_map

    cells = np.frombuffer(data, dtype=np.uint8, count=total * layout.sector_size)
    cells = cells.reshape(total, layout.sector_size)
    all_zero = np.all(cells == 0x00, axis=1)
    all_erased = np.all(cells == 0xFF, axis=1)

    for index in range(total):
        if all_zero[index]:
            sector_map.classifications[index] = SectorClass.BLANK_ZERO
        elif all_erased[index]:
            sector_map.classifications[index] = SectorClass.BLANK_ERASED
        else:
            sector_map.classifications[index] = SectorClass.MEANINGFUL

    return sector_map


def recoverability_percentage(recoverable: int, total: int) -> int:
    """
    Percentage of recoverable sectors, rounded half up.

    Returns 0 when there are no sectors.
    """
    if total <= 0:
        return 0
    return (200 * recoverable + total) // (2 * total)


def build_corruption_report(sector_map: SectorMap) -> CorruptionReport:
    """Aggregate a SectorMap into a CorruptionReport."""
    recoverable = len(sector_map.meaningful_sectors)
    return CorruptionReport(
        corruption_level=recoverability_percentage(recoverable, sector_map.total_sectors),
        recoverable_sectors=recoverable,
        total_sectors=sector_map.total_sectors,
    )


def analyze_corruption(data: bytes, layout: ImageLayout = DFLASH_LAYOUT) -> CorruptionReport:
    """
    Compute the recoverability report for an image.

    The caller is responsible for the size precondition; this function
    classifies whatever whole sectors the buffer holds.

    Args:
        data: D-Flash image
        layout: Layout giving the sector size

    Returns:
        CorruptionReport
    """
    report = build_corruption_report(classify_sectors(data, layout))
    logger.debug(
        "Sector analysis: %d/%d meaningful (%d%%)",
        report.recoverable_sectors, report.total_sectors, report.corruption_level
    )
    return report
