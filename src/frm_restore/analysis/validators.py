"""
Field validators for values recovered from D-Flash dumps.

All checks here are syntactic or range based. A value that passes is
plausible, not verified: identifier codes are not checksum-tested and
odometer readings are only range-checked.
"""

import re
from typing import Optional

# 17 characters, A-Z and 0-9 without I, O and Q
IDENTIFIER_LENGTH = 17
IDENTIFIER_PATTERN = re.compile(r"[A-HJ-NPR-Z0-9]{17}")

# Odometer readings are miles; both bounds are exclusive
ODOMETER_MIN = 0
ODOMETER_MAX = 1_000_000


def decode_ascii(window: bytes) -> str:
    """
    Decode a byte window as ASCII without ever raising.

    Bytes outside 0x00-0x7F become U+FFFD, which no validator accepts.
    """
    return window.decode("ascii", errors="replace")


def is_valid_identifier(text: str) -> bool:
    """
    Check that a string is exactly one identifier code.

    Case-sensitive; any character outside the alphabet, or any length
    other than 17, fails.

    Example:
        >>> is_valid_identifier("WBA12345678901234")
        True
        >>> is_valid_identifier("WBA1234567890123O")
        False
    """
    return IDENTIFIER_PATTERN.fullmatch(text) is not None


def parse_identifier(window: bytes) -> Optional[str]:
    """
    Decode a 17-byte window into an identifier code.

    Args:
        window: Raw bytes from the image

    Returns:
        The identifier string, or None if the window is not one
    """
    if len(window) != IDENTIFIER_LENGTH:
        return None
    text = decode_ascii(window)
    if is_valid_identifier(text):
        return text
    return None


def is_plausible_odometer(value: int) -> bool:
    """Check that an odometer reading lies strictly inside (0, 1,000,000)."""
    return ODOMETER_MIN < value < ODOMETER_MAX
