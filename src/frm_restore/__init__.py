"""
FRM Workbench - BMW FRM D-Flash analysis and EEPROM rebuild tool.

Reads 32 KB D-Flash dumps taken from footwell modules (FRM), reports which
sectors still hold data, recovers the VIN, mileage and configuration, and
builds a 4 KB EEPROM image ready to be programmed back into the module.
"""

__version__ = "0.1.0"
__license__ = "MIT"

# Core operations
from frm_restore.analysis.analyzer import AnalysisReport, analyze
from frm_restore.analysis.vehicle_fields import VehicleData
from frm_restore.imaging.transcoder import ConversionResult, ImageTranscoder, convert
from frm_restore.imaging.image_formats import ImageError, ImageSizeError

# Re-export main entry point
from frm_restore.main import main

__all__ = [
    "main",
    "__version__",

    # Analysis
    "analyze",
    "AnalysisReport",
    "VehicleData",

    # Conversion
    "convert",
    "ConversionResult",
    "ImageTranscoder",

    # Errors
    "ImageError",
    "ImageSizeError",
]
