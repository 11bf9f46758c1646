"""
Export model for analysis reports.

The JSON shape matches the analysis payload consumed by existing FRM repair
front ends (camelCase keys, vehicle data nested under "vehicleData").
"""

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field

from frm_restore.analysis.analyzer import AnalysisReport


class VehicleDataModel(BaseModel):
    """Vehicle fields in the exported report."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    vin: Optional[str] = Field(default=None, pattern=r"^[A-HJ-NPR-Z0-9]{17}$")
    model: Optional[str] = None
    year: Optional[int] = None
    mileage: Optional[int] = Field(default=None, gt=0, lt=1_000_000)
    frm_type: str = Field(alias="frmType")


class AnalysisModel(BaseModel):
    """Exported analysis report."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    corruption_level: int = Field(alias="corruptionLevel", ge=0, le=100)
    recoverable_sectors: int = Field(alias="recoverableSectors", ge=0)
    total_sectors: int = Field(alias="totalSectors", ge=0)
    blank_sectors: List[int] = Field(default_factory=list, alias="blankSectors")
    vehicle_data: VehicleDataModel = Field(alias="vehicleData")
    configuration_data: Dict[str, Any] = Field(default_factory=dict, alias="configurationData")
    odometer_big_endian_unverified: Optional[int] = Field(
        default=None, alias="odometerBigEndianUnverified"
    )


def to_model(report: AnalysisReport) -> AnalysisModel:
    """Convert an AnalysisReport to its export model."""
    vehicle = report.vehicle
    return AnalysisModel(
        corruption_level=report.corruption_level,
        recoverable_sectors=report.recoverable_sectors,
        total_sectors=report.total_sectors,
        blank_sectors=report.sector_map.blank_sectors,
        vehicle_data=VehicleDataModel(
            vin=vehicle.identifier,
            model=vehicle.category,
            year=vehicle.production_year,
            mileage=vehicle.odometer,
            frm_type=report.variant,
        ),
        configuration_data=report.config.to_wire_dict(),
        odometer_big_endian_unverified=report.odometer_big_endian,
    )


def to_json(report: AnalysisReport, indent: Optional[int] = 2) -> str:
    """Serialize an AnalysisReport using the exported key names."""
    return to_model(report).model_dump_json(by_alias=True, indent=indent)
