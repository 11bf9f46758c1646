"""
Core layout and settings for FRM Workbench.
"""

from frm_restore.core.layout import (
    DFLASH_SIZE,
    EEPROM_SIZE,
    SECTOR_SIZE,
    TOTAL_SECTORS,
    FILL_BYTE,
    EEPROM_HEADER,
    IDENTIFIER_OFFSET,
    ODOMETER_OFFSET,
    CONFIG_OFFSET,
    CHECKSUM_OFFSET,
    ImageLayout,
    DFLASH_LAYOUT,
    EEPROM_LAYOUT,
)

from frm_restore.core.settings import (
    Settings,
    ConversionSettings,
    ExportSettings,
    DisplaySettings,
    get_settings_dir,
    get_settings_file,
)

__all__ = [
    # Layout
    "DFLASH_SIZE",
    "EEPROM_SIZE",
    "SECTOR_SIZE",
    "TOTAL_SECTORS",
    "FILL_BYTE",
    "EEPROM_HEADER",
    "IDENTIFIER_OFFSET",
    "ODOMETER_OFFSET",
    "CONFIG_OFFSET",
    "CHECKSUM_OFFSET",
    "ImageLayout",
    "DFLASH_LAYOUT",
    "EEPROM_LAYOUT",

    # Settings
    "Settings",
    "ConversionSettings",
    "ExportSettings",
    "DisplaySettings",
    "get_settings_dir",
    "get_settings_file",
]
