"""
Analysis module for FRM Workbench.

This module provides sector classification, variant detection, field
extraction and reporting for D-Flash dumps.

Submodules:
    window_scanner: Strided byte window scanning
    validators: Identifier and odometer validation
    signature: Variant marker detection
    identifier: Identifier code (VIN) extraction
    vehicle_fields: Category and year lookup
    odometer: Odometer extraction
    config_flags: Configuration flag decoding
    sectors: Sector classification and recoverability
    analyzer: Complete analysis
    schema: JSON export model
    reporter: Text reports
"""

from frm_restore.analysis.window_scanner import ByteWindowScanner

from frm_restore.analysis.validators import (
    is_valid_identifier,
    parse_identifier,
    is_plausible_odometer,
)

from frm_restore.analysis.signature import (
    VariantDetection,
    detect_variant,
    detect_variant_label,
)

from frm_restore.analysis.identifier import (
    find_identifier,
    extract_identifier,
)

from frm_restore.analysis.vehicle_fields import (
    DerivedFields,
    VehicleData,
    resolve_fields,
    extract_vehicle_data,
    MANUFACTURER_CATEGORIES,
    YEAR_CODES,
)

from frm_restore.analysis.odometer import (
    find_odometer,
    extract_odometer,
    extract_odometer_big_endian,
)

from frm_restore.analysis.config_flags import (
    ConfigBlockFormat,
    ConfigFlags,
    extract_config_flags,
    build_config_block,
)

from frm_restore.analysis.sectors import (
    SectorClass,
    SectorMap,
    CorruptionReport,
    classify_sector,
    classify_sectors,
    analyze_corruption,
)

from frm_restore.analysis.analyzer import (
    AnalysisReport,
    analyze,
)

from frm_restore.analysis.schema import (
    AnalysisModel,
    to_model,
    to_json,
)

from frm_restore.analysis.reporter import (
    generate_hex_dump,
    generate_sector_map,
    generate_complete_report,
    generate_conversion_report,
)

__all__ = [
    # Scanning and validation
    "ByteWindowScanner",
    "is_valid_identifier",
    "parse_identifier",
    "is_plausible_odometer",

    # Extractors
    "VariantDetection",
    "detect_variant",
    "detect_variant_label",
    "find_identifier",
    "extract_identifier",
    "DerivedFields",
    "resolve_fields",
    "MANUFACTURER_CATEGORIES",
    "YEAR_CODES",
    "find_odometer",
    "extract_odometer",
    "extract_odometer_big_endian",
    "ConfigBlockFormat",
    "ConfigFlags",
    "extract_config_flags",
    "build_config_block",

    # Sectors
    "SectorClass",
    "SectorMap",
    "CorruptionReport",
    "classify_sector",
    "classify_sectors",
    "analyze_corruption",

    # Analysis
    "AnalysisReport",
    "VehicleData",
    "analyze",
    "extract_vehicle_data",
    "AnalysisModel",
    "to_model",
    "to_json",

    # Reporter
    "generate_hex_dump",
    "generate_sector_map",
    "generate_complete_report",
    "generate_conversion_report",
]
