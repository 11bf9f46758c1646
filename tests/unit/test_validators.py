"""
Unit tests for identifier and odometer validation.
"""

import pytest

from frm_restore.analysis.validators import (
    decode_ascii,
    is_plausible_odometer,
    is_valid_identifier,
    parse_identifier,
)


class TestIdentifierValidation:
    """Test the 17-character identifier alphabet."""

    def test_valid_identifier(self):
        assert is_valid_identifier("WBA12345678901234")

    @pytest.mark.parametrize("letter", ["I", "O", "Q"])
    def test_excluded_letters_rejected(self, letter):
        assert not is_valid_identifier("WBA1234567890123" + letter)

    def test_lowercase_rejected(self):
        assert not is_valid_identifier("wba12345678901234")

    @pytest.mark.parametrize("text", ["WBA1234567890123", "WBA123456789012345", ""])
    def test_wrong_length_rejected(self, text):
        assert not is_valid_identifier(text)

    def test_trailing_newline_rejected(self):
        assert not is_valid_identifier("WBA1234567890123\n")


class TestParseIdentifier:
    """Test decoding raw windows."""

    def test_parse_valid_window(self):
        assert parse_identifier(b"WBA12345678901234") == "WBA12345678901234"

    def test_parse_non_ascii_window(self):
        """Bytes above 0x7F decode to a replacement character and fail."""
        window = b"WBA1234567890123" + b"\xC9"
        assert parse_identifier(window) is None

    def test_parse_erased_window(self):
        assert parse_identifier(b"\xFF" * 17) is None

    def test_parse_short_window(self):
        assert parse_identifier(b"WBA123") is None

    def test_decode_never_raises(self):
        assert decode_ascii(b"\xFF\x41") == "�A"


class TestOdometerRange:
    """Test the exclusive odometer bounds."""

    @pytest.mark.parametrize("value", [1, 123456, 999_999])
    def test_plausible(self, value):
        assert is_plausible_odometer(value)

    @pytest.mark.parametrize("value", [0, 1_000_000, 0xFFFFFFFF])
    def test_implausible(self, value):
        assert not is_plausible_odometer(value)
