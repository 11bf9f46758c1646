"""
Settings management module for FRM Workbench.

This module provides settings management with JSON-based persistence and a
singleton for global access.

Features:
    - Singleton pattern for global settings access
    - JSON-based configuration file persistence
    - Platform-specific settings paths
    - Migration support between versions
    - Edge case handling (file locked, disk full, invalid JSON)

Settings Categories:
    - Conversion: EEPROM configuration block format
    - Export: Output directory
    - Display: Theme and sector map colours
"""

import json
import logging
import os
import sys
from dataclasses import dataclass, asdict
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Dict, Any, Optional


# Module logger
logger = logging.getLogger(__name__)


# =============================================================================
# Settings File Paths
# =============================================================================

def get_settings_dir() -> Path:
    """
    Get the platform-specific settings directory.

    Returns:
        Path to settings directory

    Platform paths:
        - Linux: ~/.config/frm-workbench/
        - Windows: %APPDATA%/FrmWorkbench/
        - macOS: ~/Library/Application Support/FrmWorkbench/
    """
    if sys.platform == 'win32':
        base = Path(os.environ.get('APPDATA', Path.home() / 'AppData' / 'Roaming'))
        return base / 'FrmWorkbench'
    elif sys.platform == 'darwin':
        return Path.home() / 'Library' / 'Application Support' / 'FrmWorkbench'
    else:
        xdg_config = os.environ.get('XDG_CONFIG_HOME', Path.home() / '.config')
        return Path(xdg_config) / 'frm-workbench'


def get_settings_file() -> Path:
    """Get the settings file path."""
    return get_settings_dir() / 'settings.json'


# =============================================================================
# Enumerations
# =============================================================================

class ColorScheme(Enum):
    """Sector map colour schemes."""
    STANDARD = "standard"
    HIGH_CONTRAST = "high_contrast"
    MONOCHROME = "monochrome"


class Theme(Enum):
    """Application theme options."""
    DARK = "dark"
    LIGHT = "light"


@dataclass(frozen=True)
class SectorMapColors:
    """Rich colour names for sector map cells."""
    meaningful: str = "green"
    blank_erased: str = "grey50"
    blank_zero: str = "red"


COLOR_SCHEMES: Dict[ColorScheme, SectorMapColors] = {
    ColorScheme.STANDARD: SectorMapColors(),
    ColorScheme.HIGH_CONTRAST: SectorMapColors(
        meaningful="bright_green",
        blank_erased="bright_white",
        blank_zero="bright_red",
    ),
    ColorScheme.MONOCHROME: SectorMapColors(
        meaningful="white",
        blank_erased="grey35",
        blank_zero="grey62",
    ),
}


# =============================================================================
# Settings Dataclasses
# =============================================================================

@dataclass
class ConversionSettings:
    """Conversion settings."""
    config_block_format: str = "raw"         # "raw" or "json"


@dataclass
class ExportSettings:
    """Export and file settings."""
    default_output_directory: str = ""       # Empty = next to the source dump

    def get_output_directory(self) -> Optional[Path]:
        """Get the configured output directory, if it exists."""
        if self.default_output_directory:
            path = Path(self.default_output_directory)
            if path.is_dir():
                return path
        return None


@dataclass
class DisplaySettings:
    """Display settings for the report viewer."""
    theme: str = Theme.DARK.value
    color_scheme: str = ColorScheme.STANDARD.value

    def get_theme(self) -> Theme:
        """Get theme as enum."""
        try:
            return Theme(self.theme)
        except ValueError:
            return Theme.DARK

    def get_color_scheme(self) -> ColorScheme:
        """Get color scheme as enum."""
        try:
            return ColorScheme(self.color_scheme)
        except ValueError:
            return ColorScheme.STANDARD

    def get_sector_colors(self) -> SectorMapColors:
        """Get sector map colors for current scheme."""
        return COLOR_SCHEMES[self.get_color_scheme()]


# =============================================================================
# Settings Manager (Singleton)
# =============================================================================

class Settings:
    """
    Singleton settings manager for FRM Workbench.

    Usage:
        settings = Settings.instance()
        settings.conversion.config_block_format = "json"
        settings.save()
    """

    _instance: Optional["Settings"] = None
    _initialized: bool = False

    # Settings version for migration
    SETTINGS_VERSION = 1

    def __new__(cls) -> "Settings":
        """Ensure singleton pattern."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self):
        """Initialize settings (only runs once due to singleton)."""
        if self._initialized:
            return

        self._initialized = True

        self.conversion = ConversionSettings()
        self.export = ExportSettings()
        self.display = DisplaySettings()

        self.load()

        logger.info("Settings initialized")

    @classmethod
    def instance(cls) -> "Settings":
        """Get the singleton settings instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Reset the singleton instance (for testing)."""
        cls._instance = None
        cls._initialized = False

    # =========================================================================
    # Persistence
    # =========================================================================

    def load(self) -> bool:
        """
        Load settings from file.

        Returns:
            True if settings were loaded successfully
        """
        settings_file = get_settings_file()

        if not settings_file.exists():
            logger.info(f"Settings file not found: {settings_file}")
            return False

        try:
            with open(settings_file, 'r', encoding='utf-8') as f:
                data = json.load(f)

            version = data.get('version', 0)
            if version < self.SETTINGS_VERSION:
                data = self._migrate_settings(data, version)

            if 'conversion' in data:
                self._load_dataclass(self.conversion, data['conversion'])
            if 'export' in data:
                self._load_dataclass(self.export, data['export'])
            if 'display' in data:
                self._load_dataclass(self.display, data['display'])

            logger.info(f"Settings loaded from {settings_file}")
            return True

        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in settings file: {e}")
            self._backup_corrupted_file(settings_file)
            return False
        except OSError as e:
            logger.error(f"Error reading settings: {e}")
            return False

    def save(self) -> bool:
        """
        Save settings to file.

        Returns:
            True if settings were saved successfully
        """
        settings_dir = get_settings_dir()
        settings_file = get_settings_file()

        try:
            settings_dir.mkdir(parents=True, exist_ok=True)

            data = {
                'version': self.SETTINGS_VERSION,
                'saved_at': datetime.now().isoformat(),
                'conversion': asdict(self.conversion),
                'export': asdict(self.export),
                'display': asdict(self.display),
            }

            # Write to temp file first, then rename (atomic)
            temp_file = settings_file.with_suffix('.tmp')
            with open(temp_file, 'w', encoding='utf-8') as f:
                json.dump(data, f, indent=2)
            temp_file.replace(settings_file)

            logger.info(f"Settings saved to {settings_file}")
            return True

        except PermissionError as e:
            logger.error(f"Permission denied saving settings: {e}")
            return False
        except OSError as e:
            if e.errno == 28:
                logger.error("Disk full - cannot save settings")
            else:
                logger.error(f"OS error saving settings: {e}")
            return False

    def _load_dataclass(self, target: Any, data: Dict[str, Any]) -> None:
        """Load data into a dataclass, ignoring unknown fields."""
        for key, value in data.items():
            if hasattr(target, key):
                setattr(target, key, value)
            else:
                logger.warning(f"Ignoring unknown setting: {key}")

    def _migrate_settings(self, data: Dict[str, Any], from_version: int) -> Dict[str, Any]:
        """
        Migrate settings from older versions.

        Args:
            data: Settings data dictionary
            from_version: Version of the loaded settings

        Returns:
            Migrated settings data
        """
        logger.info(f"Migrating settings from version {from_version} to {self.SETTINGS_VERSION}")
        data['version'] = self.SETTINGS_VERSION
        return data

    def _backup_corrupted_file(self, file_path: Path) -> None:
        """Backup a corrupted settings file."""
        try:
            backup_path = file_path.with_suffix('.backup')
            file_path.rename(backup_path)
            logger.info(f"Corrupted settings backed up to {backup_path}")
        except OSError as e:
            logger.error(f"Could not backup corrupted file: {e}")
