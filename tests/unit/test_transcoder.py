"""
Unit tests for D-Flash to EEPROM transcoding.
"""

import json
import struct

import pytest

from frm_restore.analysis.config_flags import ConfigBlockFormat
from frm_restore.core.layout import EEPROM_HEADER, EEPROM_SIZE
from frm_restore.imaging.checksum import calculate_checksum, read_checksum, verify_checksum
from frm_restore.imaging.transcoder import ERROR_SIZE_MISMATCH, ImageTranscoder, convert
from tests.fixtures import (
    SAMPLE_MILEAGE,
    SAMPLE_VIN,
    MockDFlashImage,
    create_erased_image,
    create_vehicle_image,
)


class TestSizeValidation:
    """Test rejection of wrong-size sources."""

    @pytest.mark.parametrize("size", [0, 4096, 32767, 32769, 65536])
    def test_wrong_size_fails(self, size):
        result = convert(bytes(size))

        assert not result.success
        assert result.error_code == ERROR_SIZE_MISMATCH
        assert result.expected_size == 32768
        assert result.actual_size == size
        assert result.eeprom_data is None
        assert result.checksum is None

    def test_error_message(self):
        result = convert(bytes(100))
        assert result.error == "Invalid D-Flash size. Expected 32768 bytes, got 100 bytes"


class TestEepromLayout:
    """Test field placement in the EEPROM image."""

    @pytest.fixture
    def result(self):
        return convert(create_vehicle_image())

    def test_size_and_header(self, result):
        assert result.success
        assert len(result.eeprom_data) == EEPROM_SIZE
        assert result.eeprom_data[0:16] == EEPROM_HEADER
        assert result.eeprom_data[0:4] == b"\xAA\x55\xFF\x00"

    def test_identifier_written(self, result):
        assert result.eeprom_data[0x10:0x21] == SAMPLE_VIN.encode("ascii")
        assert result.eeprom_data[0x21] == 0xFF

    def test_odometer_written_little_endian(self, result):
        assert result.eeprom_data[0x30:0x34] == struct.pack("<I", SAMPLE_MILEAGE)
        assert result.eeprom_data[0x30:0x34] == b"\x40\xE2\x01\x00"

    def test_checksum_round_trip(self, result):
        assert read_checksum(result.eeprom_data) == calculate_checksum(result.eeprom_data)
        assert read_checksum(result.eeprom_data) == result.checksum
        assert verify_checksum(result.eeprom_data)

    def test_result_metadata(self, result):
        assert result.variant == "FRM3 Unknown"
        assert result.vehicle_data.identifier == SAMPLE_VIN
        assert result.vehicle_data.odometer == SAMPLE_MILEAGE
        assert result.error is None

    def test_unwritten_bytes_stay_erased(self, result):
        data = result.eeprom_data
        assert set(data[0x21:0x30]) == {0xFF}
        assert set(data[0x34:0x100]) == {0xFF}
        assert set(data[0x104:0xFFC]) == {0xFF}


class TestMissingFields:
    """Test conversion of dumps without recoverable fields."""

    def test_erased_dump(self):
        result = convert(create_erased_image())
        data = result.eeprom_data

        assert result.success
        assert result.vehicle_data.identifier is None
        assert set(data[0x10:0x21]) == {0xFF}
        assert set(data[0x30:0x34]) == {0xFF}
        assert verify_checksum(data)

    def test_zeroed_dump_uses_default_timer(self):
        result = convert(bytes(32768))
        assert result.eeprom_data[0x100:0x104] == bytes([0x00, 0x00, 0x1E, 0x00])


class TestConfigurationBlock:
    """Test the configuration block variants."""

    def test_raw_block(self):
        image = MockDFlashImage().with_config(0x03, 0x01, 0x28, 0x05).build()
        result = convert(image)
        assert result.eeprom_data[0x100:0x104] == bytes([0x03, 0x01, 0x28, 0x05])

    def test_json_block(self):
        image = MockDFlashImage().with_config(0x01, 0x00, 0x1E).build()
        result = ImageTranscoder(ConfigBlockFormat.JSON).convert(image)

        block = result.eeprom_data[0x100:0x500].rstrip(b"\xFF")
        assert json.loads(block)["xenonHeadlights"] is True
        assert json.loads(block)["followMeHome"] == 30
        assert verify_checksum(result.eeprom_data)


class TestDeterminism:
    """Test that conversion is a pure function of its input."""

    def test_repeated_conversion_identical(self):
        image = create_vehicle_image(marker=b"XET512")
        transcoder = ImageTranscoder()

        first = transcoder.convert(image)
        second = transcoder.convert(image)

        assert first.eeprom_data == second.eeprom_data
        assert first.variant == "FRM3 XET512"

    def test_input_not_modified(self):
        image = bytearray(create_vehicle_image())
        snapshot = bytes(image)
        convert(bytes(image))
        assert bytes(image) == snapshot


class TestBufferTypes:
    """Test that any bytes-like source is accepted."""

    @pytest.mark.parametrize("wrap", [bytes, bytearray, memoryview])
    def test_buffer_types_convert_identically(self, wrap):
        image = create_vehicle_image(marker=b"XEQ384")

        result = convert(wrap(image))

        assert result.success
        assert result.variant == "FRM3 XEQ384"
        assert result.eeprom_data == convert(image).eeprom_data

    def test_memoryview_of_wrong_size(self):
        result = convert(memoryview(bytes(100)))
        assert result.error_code == ERROR_SIZE_MISMATCH
