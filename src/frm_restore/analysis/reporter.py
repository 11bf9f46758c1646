"""
Plain-text reporting for D-Flash analysis and conversion.

This module provides:
- Hex dumps of individual sectors
- A sector map of the whole image
- Vehicle data and configuration summaries
- Complete analysis and conversion reports
"""

import string
from typing import Optional

from frm_restore.analysis.analyzer import AnalysisReport
from frm_restore.analysis.sectors import SectorClass, SectorMap, classify_sector
from frm_restore.core.layout import DFLASH_LAYOUT, SECTOR_SIZE
from frm_restore.imaging.transcoder import ConversionResult

SECTORS_PER_ROW = 8

SECTOR_SYMBOLS = {
    SectorClass.MEANINGFUL: "█",
    SectorClass.BLANK_ERASED: "·",
    SectorClass.BLANK_ZERO: "0",
}


# =============================================================================
# Hex Dump Generation
# =============================================================================


def generate_hex_dump(
    sector_data: bytes,
    sector_number: int,
    bytes_per_line: int = 16,
    base_offset: Optional[int] = None
) -> str:
    """
    Generate hexadecimal dump of sector data.

    Shows offset, hex bytes, and ASCII representation for each line.
    Highlights uniform fill patterns (all 0x00, all 0xFF, etc.).

    Args:
        sector_data: Raw sector data (usually 1024 bytes)
        sector_number: Sector number for display
        bytes_per_line: Bytes to show per line (default: 16)
        base_offset: Image offset of the first byte (default: sector start)

    Returns:
        Multi-line formatted hex dump

    Example:
        >>> print(generate_hex_dump(bytes([0xFF] * 1024), 0))
        Sector 0 Hex Dump:
        ======================================================================
        [Pattern detected: All 0xFF (erased)]
        ...
    """
    if base_offset is None:
        base_offset = sector_number * SECTOR_SIZE

    lines = []
    lines.append(f"Sector {sector_number} Hex Dump:")
    lines.append("=" * 70)

    pattern_type = _detect_pattern(sector_data)
    if pattern_type:
        lines.append(f"[Pattern detected: {pattern_type}]")
        lines.append("")

    printable = string.printable.encode('ascii')
    for offset in range(0, len(sector_data), bytes_per_line):
        chunk = sector_data[offset:offset + bytes_per_line]

        offset_str = f"{base_offset + offset:04X}:"

        hex_str = " ".join(f"{b:02X}" for b in chunk)
        hex_str = hex_str.ljust(bytes_per_line * 3 - 1)

        ascii_str = "".join(
            chr(b) if b in printable and b >= 32 else '.'
            for b in chunk
        )

        lines.append(f"{offset_str} {hex_str}  {ascii_str}")

    lines.append("=" * 70)
    return "\n".join(lines)


def _detect_pattern(data: bytes) -> Optional[str]:
    """
    Detect uniform fill patterns in sector data.

    Args:
        data: Sector data to analyze

    Returns:
        Pattern description or None if no pattern detected
    """
    if len(data) == 0:
        return "Empty sector"

    sector_class = classify_sector(data)
    if sector_class is SectorClass.BLANK_ZERO:
        return "All 0x00 (zero-filled)"
    if sector_class is SectorClass.BLANK_ERASED:
        return "All 0xFF (erased)"

    unique_bytes = set(data)
    if len(unique_bytes) == 1:
        return f"All 0x{data[0]:02X} (single byte pattern)"

    return None


def sector_hex_dump(image: bytes, sector_number: int) -> str:
    """Hex dump of one sector of a D-Flash image."""
    start, end = DFLASH_LAYOUT.sector_bounds(sector_number)
    return generate_hex_dump(image[start:end], sector_number, base_offset=start)


# =============================================================================
# Sector Map Visualization
# =============================================================================


def generate_sector_map(sector_map: SectorMap, sectors_per_row: int = SECTORS_PER_ROW) -> str:
    """
    Generate a text sector map.

    Example:
        >>> print(generate_sector_map(report.sector_map))
        Sector Map (█ = Data, · = Erased 0xFF, 0 = Zero-filled)

        0x0000: █ █ · · · · · ·
        0x2000: █ █ █ · · · · ·
        ...
    """
    lines = []
    lines.append("Sector Map (█ = Data, · = Erased 0xFF, 0 = Zero-filled)")
    lines.append("")

    for row_start in range(0, sector_map.total_sectors, sectors_per_row):
        row_end = min(row_start + sectors_per_row, sector_map.total_sectors)
        symbols = " ".join(
            SECTOR_SYMBOLS[sector_map.get_class(i)] for i in range(row_start, row_end)
        )
        lines.append(f"0x{row_start * SECTOR_SIZE:04X}: {symbols}")

    return "\n".join(lines)


# =============================================================================
# Summaries
# =============================================================================


def _or_dash(value) -> str:
    return "-" if value is None else str(value)


def generate_vehicle_summary(report: AnalysisReport) -> str:
    """Generate the vehicle data section of a report."""
    vehicle = report.vehicle
    variant = report.variant
    if report.variant_is_fallback:
        variant += " (no marker found)"

    lines = [
        "VEHICLE DATA",
        "-" * 60,
        f"  FRM variant:     {variant}",
        f"  VIN:             {_or_dash(vehicle.identifier)}",
        f"  Model:           {_or_dash(vehicle.category)}",
        f"  Year:            {_or_dash(vehicle.production_year)}",
        f"  Mileage:         {_or_dash(vehicle.odometer)}",
    ]
    if report.odometer_big_endian is not None and report.odometer_big_endian != vehicle.odometer:
        lines.append(f"  Mileage (BE):    {report.odometer_big_endian} (unverified)")
    return "\n".join(lines)


def generate_config_summary(report: AnalysisReport) -> str:
    """Generate the configuration section of a report."""
    config = report.config

    def flag(value: bool) -> str:
        return "Yes" if value else "No"

    return "\n".join([
        "CONFIGURATION",
        "-" * 60,
        f"  Xenon headlights: {flag(config.xenon_headlights)}",
        f"  Angel eyes:       {flag(config.angel_eyes)}",
        f"  Auto wipers:      {flag(config.auto_wipers)}",
        f"  Comfort access:   {flag(config.comfort_access)}",
        f"  Follow-me-home:   {config.follow_me_home}",
    ])


def generate_complete_report(report: AnalysisReport, title: str = "FRM D-Flash Analysis") -> str:
    """
    Generate a complete analysis report.

    Args:
        report: Analysis to render
        title: Report title

    Returns:
        Multi-line report text
    """
    corruption = report.corruption
    lines = [
        "=" * 60,
        title.center(60),
        "=" * 60,
        "",
        "SECTOR ANALYSIS",
        "-" * 60,
        f"  Recoverable sectors: {corruption.recoverable_sectors}/{corruption.total_sectors}",
        f"  Blank sectors:       {corruption.blank_sectors}"
        f" ({report.sector_map.count(SectorClass.BLANK_ERASED)} erased,"
        f" {report.sector_map.count(SectorClass.BLANK_ZERO)} zero-filled)",
        f"  Corruption level:    {corruption.corruption_level}%",
        "",
        generate_sector_map(report.sector_map),
        "",
        generate_vehicle_summary(report),
        "",
        generate_config_summary(report),
        "",
        "=" * 60,
    ]
    return "\n".join(lines)


def generate_conversion_report(result: ConversionResult, output_path: Optional[str] = None) -> str:
    """Generate a short report for a conversion result."""
    if not result.success:
        return f"Conversion failed: {result.error}"

    vehicle = result.vehicle_data
    lines = [
        "Conversion completed successfully",
        f"  FRM variant: {result.variant}",
        f"  EEPROM size: {len(result.eeprom_data)} bytes",
        f"  VIN written: {_or_dash(vehicle.identifier)}",
        f"  Mileage written: {_or_dash(vehicle.odometer)}",
        f"  Checksum: 0x{result.checksum:08X}",
    ]
    if output_path:
        lines.append(f"  Output: {output_path}")
    return "\n".join(lines)
