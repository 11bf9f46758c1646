"""
D-Flash image analysis.

analyze() is the read-only entry point used by the CLI, the report viewer
and any orchestration layer: it validates the size, classifies sectors and
runs every field extractor, returning one AnalysisReport. Nothing is cached
between calls; the same buffer always produces the same report.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional

from frm_restore.analysis.config_flags import ConfigFlags, extract_config_flags
from frm_restore.analysis.odometer import extract_odometer_big_endian
from frm_restore.analysis.sectors import (
    CorruptionReport,
    SectorMap,
    build_corruption_report,
    classify_sectors,
)
from frm_restore.analysis.signature import detect_variant
from frm_restore.analysis.vehicle_fields import VehicleData, extract_vehicle_data
from frm_restore.imaging.image_formats import validate_source_size

logger = logging.getLogger(__name__)


@dataclass
class AnalysisReport:
    """
    Complete read-only analysis of a D-Flash image.

    Attributes:
        corruption: Aggregate recoverability
        sector_map: Per-sector classification
        variant: Variant label (heuristic)
        variant_is_fallback: True when no marker was found
        vehicle: Recovered vehicle fields
        config: Decoded configuration flags
        odometer_big_endian: Big-endian odometer reading; not verified
            against real dumps and never written to an EEPROM image
    """
    corruption: CorruptionReport
    sector_map: SectorMap
    variant: str
    variant_is_fallback: bool
    vehicle: VehicleData
    config: ConfigFlags = field(default_factory=ConfigFlags)
    odometer_big_endian: Optional[int] = None

    @property
    def corruption_level(self) -> int:
        return self.corruption.corruption_level

    @property
    def recoverable_sectors(self) -> int:
        return self.corruption.recoverable_sectors

    @property
    def total_sectors(self) -> int:
        return self.corruption.total_sectors


def analyze(data: bytes, filepath: Optional[str] = None) -> AnalysisReport:
    """
    Analyze a D-Flash image.

    Args:
        data: D-Flash image, exactly 32768 bytes (any bytes-like object)
        filepath: Originating file, used only in error messages

    Returns:
        AnalysisReport

    Raises:
        ImageSizeError: If the image is not exactly 32768 bytes

    Example:
        >>> report = analyze(Path("frm.bin").read_bytes())
        >>> print(report.variant, report.vehicle.identifier)
        FRM3 Unknown WBA12345678901234
    """
    validate_source_size(data, filepath)
    data = bytes(data)

    sector_map = classify_sectors(data)
    detection = detect_variant(data)

    report = AnalysisReport(
        corruption=build_corruption_report(sector_map),
        sector_map=sector_map,
        variant=detection.label,
        variant_is_fallback=detection.is_heuristic_fallback,
        vehicle=extract_vehicle_data(data),
        config=extract_config_flags(data),
        odometer_big_endian=extract_odometer_big_endian(data),
    )

    logger.info(
        "Analyzed D-Flash image: variant=%s, %d/%d sectors meaningful, identifier=%s",
        report.variant, report.recoverable_sectors, report.total_sectors,
        report.vehicle.identifier or "-"
    )
    return report
