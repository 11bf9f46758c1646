"""
Identifier code (VIN) extraction from D-Flash images.
"""

import logging
from typing import Optional

from frm_restore.analysis.validators import IDENTIFIER_LENGTH, parse_identifier
from frm_restore.analysis.window_scanner import ByteWindowScanner

logger = logging.getLogger(__name__)


# Identifier records sit on 16-byte boundaries in the 0x1000-0x1FFF block
IDENTIFIER_SCANNER = ByteWindowScanner(
    start=0x1000,
    end=0x2000,
    stride=16,
    width=IDENTIFIER_LENGTH,
)


def find_identifier(data: bytes) -> Optional[tuple[int, str]]:
    """
    Locate the first identifier code in the scan range.

    Args:
        data: D-Flash image

    Returns:
        Tuple of (offset, identifier), or None if no window validates
    """
    hit = IDENTIFIER_SCANNER.first(data, parse_identifier)
    if hit is None:
        logger.debug("No identifier found in 0x%04X-0x%04X",
                     IDENTIFIER_SCANNER.start, IDENTIFIER_SCANNER.end)
    else:
        logger.debug("Identifier %s at 0x%04X", hit[1], hit[0])
    return hit


def extract_identifier(data: bytes) -> Optional[str]:
    """
    Extract the identifier code from a D-Flash image.

    Returns:
        The 17-character identifier, or None if absent
    """
    hit = find_identifier(data)
    return hit[1] if hit else None
