"""
Lighting and comfort configuration stored in the D-Flash image.

Two configuration bytes carry feature bits and a third byte holds the
follow-me-home timer:

    0x500  bit 0  xenon headlights
           bit 1  angel eyes
    0x501  bit 0  automatic wipers
           bit 1  comfort access
    0x502         follow-me-home timer (raw)
    0x503         comfort access settings (raw, EEPROM block only)

The EEPROM configuration block is written either as the raw bytes the
module expects (the default) or as a JSON record.
"""

import json
import logging
from dataclasses import dataclass
from enum import Enum

from frm_restore.core.layout import CONFIG_MAX_SIZE

logger = logging.getLogger(__name__)


LIGHT_CONFIG_1_OFFSET = 0x500
LIGHT_CONFIG_2_OFFSET = 0x501
FOLLOW_ME_HOME_OFFSET = 0x502
COMFORT_ACCESS_OFFSET = 0x503

# Factory follow-me-home timer (seconds), used when the dump holds zero
FOLLOW_ME_HOME_DEFAULT = 0x1E

BIT_XENON_HEADLIGHTS = 0x01
BIT_ANGEL_EYES = 0x02
BIT_AUTO_WIPERS = 0x01
BIT_COMFORT_ACCESS = 0x02


class ConfigBlockFormat(Enum):
    """Serialization of the EEPROM configuration block."""
    RAW = "raw"      # Raw configuration bytes
    JSON = "json"    # Compact JSON of ConfigFlags


@dataclass(frozen=True)
class ConfigFlags:
    """
    Decoded configuration flags.

    Attributes:
        xenon_headlights: Xenon headlights coded
        angel_eyes: Angel eyes (corona rings) coded
        auto_wipers: Rain-sensing wipers coded
        comfort_access: Comfort access coded
        follow_me_home: Raw follow-me-home timer byte
    """
    xenon_headlights: bool = False
    angel_eyes: bool = False
    auto_wipers: bool = False
    comfort_access: bool = False
    follow_me_home: int = 0

    def to_wire_dict(self) -> dict:
        """Key names used by the JSON configuration block and reports."""
        return {
            "xenonHeadlights": self.xenon_headlights,
            "angelEyes": self.angel_eyes,
            "autoWipers": self.auto_wipers,
            "comfortAccess": self.comfort_access,
            "followMeHome": self.follow_me_home,
        }


def _byte_at(data: bytes, offset: int, default: int = 0x00) -> int:
    """Read one byte, or return the default past the end of the buffer."""
    if 0 <= offset < len(data):
        return data[offset]
    return default


def extract_config_flags(data: bytes) -> ConfigFlags:
    """
    Decode the configuration flags from a D-Flash image.

    Missing bytes read as 0x00, so the record is always complete.
    """
    config_1 = _byte_at(data, LIGHT_CONFIG_1_OFFSET)
    config_2 = _byte_at(data, LIGHT_CONFIG_2_OFFSET)
    return ConfigFlags(
        xenon_headlights=bool(config_1 & BIT_XENON_HEADLIGHTS),
        angel_eyes=bool(config_1 & BIT_ANGEL_EYES),
        auto_wipers=bool(config_2 & BIT_AUTO_WIPERS),
        comfort_access=bool(config_2 & BIT_COMFORT_ACCESS),
        follow_me_home=_byte_at(data, FOLLOW_ME_HOME_OFFSET),
    )


def build_raw_config_block(data: bytes) -> bytes:
    """Raw configuration bytes for the EEPROM block."""
    timer = _byte_at(data, FOLLOW_ME_HOME_OFFSET) or FOLLOW_ME_HOME_DEFAULT
    return bytes([
        _byte_at(data, LIGHT_CONFIG_1_OFFSET),
        _byte_at(data, LIGHT_CONFIG_2_OFFSET),
        timer,
        _byte_at(data, COMFORT_ACCESS_OFFSET),
    ])


def build_json_config_block(flags: ConfigFlags) -> bytes:
    """Compact JSON configuration record, capped at the block size."""
    encoded = json.dumps(flags.to_wire_dict(), separators=(",", ":")).encode("ascii")
    return encoded[:CONFIG_MAX_SIZE]


def build_config_block(data: bytes, block_format: ConfigBlockFormat = ConfigBlockFormat.RAW) -> bytes:
    """
    Build the EEPROM configuration block for a D-Flash image.

    Args:
        data: D-Flash image
        block_format: Serialization to use

    Returns:
        Block bytes, at most CONFIG_MAX_SIZE long
    """
    if block_format == ConfigBlockFormat.JSON:
        block = build_json_config_block(extract_config_flags(data))
    else:
        block = build_raw_config_block(data)
    logger.debug("Config block (%s): %d bytes", block_format.value, len(block))
    return block
