"""
Unit tests for dump loading and image saving.
"""

import pytest

from frm_restore.imaging.image_formats import (
    ImageFileTypeError,
    ImageKind,
    ImageReadError,
    ImageSizeError,
    ImageWriteError,
    detect_kind,
    read_metadata,
    validate_source_size,
)
from frm_restore.imaging.image_io import (
    MAX_SOURCE_FILE_SIZE,
    default_output_path,
    load_source_image,
    repaired_filename,
    save_target_image,
)
from tests.fixtures import create_erased_image


class TestLoadSourceImage:
    """Test reading dumps from disk."""

    @pytest.mark.parametrize("name", ["frm.bin", "frm.hex", "frm.eep", "FRM.BIN"])
    def test_accepted_extensions(self, tmp_path, name):
        path = tmp_path / name
        path.write_bytes(create_erased_image())
        assert len(load_source_image(path)) == 32768

    def test_rejected_extension(self, tmp_path):
        path = tmp_path / "frm.txt"
        path.write_bytes(b"data")

        with pytest.raises(ImageFileTypeError) as exc_info:
            load_source_image(path)

        assert exc_info.value.extension == ".txt"

    def test_upload_cap(self, tmp_path):
        path = tmp_path / "huge.bin"
        path.write_bytes(bytes(MAX_SOURCE_FILE_SIZE + 1))

        with pytest.raises(ImageSizeError):
            load_source_image(path)

    def test_wrong_but_small_size_loads(self, tmp_path):
        """Exact size is checked by analyze() and convert(), not the loader."""
        path = tmp_path / "small.bin"
        path.write_bytes(bytes(4096))
        assert len(load_source_image(path)) == 4096

    def test_missing_file(self, tmp_path):
        with pytest.raises(ImageReadError):
            load_source_image(tmp_path / "missing.bin")


class TestOutputNaming:
    """Test repaired file naming."""

    @pytest.mark.parametrize("source,expected", [
        ("frm.bin", "frm_repaired.bin"),
        ("frm_dump.EEP", "frm_dump_repaired.bin"),
        ("dflash.hex", "dflash_repaired.bin"),
        ("dump", "dump_repaired.bin"),
    ])
    def test_repaired_filename(self, source, expected):
        assert repaired_filename(source) == expected

    def test_default_output_next_to_source(self, tmp_path):
        source = tmp_path / "frm.bin"
        assert default_output_path(source) == tmp_path / "frm_repaired.bin"

    def test_default_output_in_directory(self, tmp_path):
        out_dir = tmp_path / "out"
        assert default_output_path("dumps/frm.bin", out_dir) == out_dir / "frm_repaired.bin"


class TestSaveTargetImage:
    """Test writing EEPROM images."""

    def test_save_creates_parents(self, tmp_path):
        path = tmp_path / "nested" / "frm_repaired.bin"

        save_target_image(path, b"\xAA" * 4096)

        assert path.read_bytes() == b"\xAA" * 4096
        assert not (path.parent / "frm_repaired.bin.tmp").exists()

    def test_save_into_file_path_fails(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_bytes(b"")

        with pytest.raises(ImageWriteError):
            save_target_image(blocker / "out.bin", b"\x00")


class TestImageKinds:
    """Test size-based kind detection and validation."""

    def test_detect_kind(self):
        assert detect_kind(bytes(32768)) == ImageKind.DFLASH
        assert detect_kind(bytes(4096)) == ImageKind.EEPROM
        assert detect_kind(bytes(100)) == ImageKind.UNKNOWN

    def test_metadata(self):
        metadata = read_metadata(bytes(32768), "frm.bin")
        assert metadata.is_source
        assert metadata.filename == "frm.bin"

    def test_validate_source_size(self):
        validate_source_size(bytes(32768))
        with pytest.raises(ImageSizeError) as exc_info:
            validate_source_size(bytes(10))
        assert str(exc_info.value) == "Invalid D-Flash size [Expected: 32768, Actual: 10]"


class TestHexExtension:
    """Test that .hex dumps are taken as raw bytes."""

    def test_intel_hex_text_not_decoded(self, tmp_path):
        record = b":10000000FFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFF00\n"
        path = tmp_path / "dump.hex"
        path.write_bytes(record)

        assert load_source_image(path) == record
