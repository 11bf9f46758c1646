"""
Integration tests for the command line workflows.

Runs main() end to end against dumps written to a temporary directory.
"""

import json
import logging

import pytest

from frm_restore.core.settings import Settings
from frm_restore.imaging.checksum import verify_checksum
from frm_restore.main import main
from frm_restore.utils.error_handler import EXIT_FAILURE, EXIT_INVALID_INPUT, EXIT_SUCCESS
from tests.fixtures import SAMPLE_MILEAGE, SAMPLE_VIN, create_erased_image, create_vehicle_image


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """Temporary directory with isolated settings."""
    monkeypatch.setattr("sys.platform", "linux")
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    Settings.reset_instance()
    yield tmp_path
    Settings.reset_instance()


def run(workspace, *args):
    """Run the CLI with the log file kept inside the workspace."""
    return main(["--log-file", str(workspace / "frm.log"), *args])


class TestConvertFlow:
    """Test `frm-workbench convert`."""

    def test_convert_writes_repaired_image(self, workspace):
        dump = workspace / "frm.bin"
        dump.write_bytes(create_vehicle_image(marker=b"XEQ384"))

        assert run(workspace, "convert", str(dump)) == EXIT_SUCCESS

        output = workspace / "frm_repaired.bin"
        data = output.read_bytes()
        assert len(data) == 4096
        assert data[0x10:0x21] == SAMPLE_VIN.encode("ascii")
        assert int.from_bytes(data[0x30:0x34], "little") == SAMPLE_MILEAGE
        assert verify_checksum(data)

    def test_convert_explicit_output_and_json_block(self, workspace):
        dump = workspace / "dump.eep"
        dump.write_bytes(create_erased_image())
        output = workspace / "out" / "eeprom.bin"

        code = run(workspace, "convert", str(dump), "-o", str(output), "--config-format", "json")

        assert code == EXIT_SUCCESS
        block = output.read_bytes()[0x100:0x500].rstrip(b"\xFF")
        assert json.loads(block)["followMeHome"] == 0xFF

    def test_convert_uses_settings_format(self, workspace):
        settings = Settings.instance()
        settings.conversion.config_block_format = "json"
        dump = workspace / "frm.bin"
        dump.write_bytes(create_erased_image())

        assert run(workspace, "convert", str(dump)) == EXIT_SUCCESS
        assert (workspace / "frm_repaired.bin").read_bytes()[0x100:0x101] == b"{"

    def test_wrong_size_writes_nothing(self, workspace):
        dump = workspace / "short.bin"
        dump.write_bytes(bytes(4096))

        assert run(workspace, "convert", str(dump)) == EXIT_INVALID_INPUT
        assert not (workspace / "short_repaired.bin").exists()

    def test_wrong_extension(self, workspace):
        dump = workspace / "frm.txt"
        dump.write_bytes(create_erased_image())

        assert run(workspace, "convert", str(dump)) == EXIT_INVALID_INPUT

    def test_missing_file(self, workspace):
        assert run(workspace, "convert", str(workspace / "missing.bin")) == EXIT_FAILURE


class TestAnalyzeFlow:
    """Test `frm-workbench analyze` and `report`."""

    def test_analyze_json(self, workspace, capsys):
        dump = workspace / "frm.bin"
        dump.write_bytes(create_vehicle_image())

        assert run(workspace, "analyze", str(dump), "--json") == EXIT_SUCCESS

        payload = json.loads(capsys.readouterr().out)
        assert payload["vehicleData"]["vin"] == SAMPLE_VIN
        assert payload["totalSectors"] == 32

    def test_analyze_table(self, workspace, capsys):
        dump = workspace / "frm.bin"
        dump.write_bytes(create_vehicle_image())

        assert run(workspace, "analyze", str(dump)) == EXIT_SUCCESS
        assert SAMPLE_VIN in capsys.readouterr().out

    def test_analyze_wrong_size(self, workspace):
        dump = workspace / "frm.bin"
        dump.write_bytes(bytes(1000))

        assert run(workspace, "analyze", str(dump)) == EXIT_INVALID_INPUT

    def test_report_with_hex_sector(self, workspace, capsys):
        dump = workspace / "frm.bin"
        dump.write_bytes(create_vehicle_image())

        assert run(workspace, "report", str(dump), "--hex-sector", "4") == EXIT_SUCCESS

        out = capsys.readouterr().out
        assert "VEHICLE DATA" in out
        assert "Sector 4 Hex Dump:" in out

    def test_report_sector_out_of_range(self, workspace):
        dump = workspace / "frm.bin"
        dump.write_bytes(create_vehicle_image())

        assert run(workspace, "report", str(dump), "--hex-sector", "32") == EXIT_INVALID_INPUT


class TestLoggingFlow:
    """Test logging across repeated CLI runs."""

    def test_repeated_runs_keep_one_console_handler(self, workspace):
        dump = workspace / "frm.bin"
        dump.write_bytes(create_erased_image())
        root = logging.getLogger()

        run(workspace, "analyze", str(dump))
        handlers_after_first = len(root.handlers)
        run(workspace, "analyze", str(dump))
        run(workspace, "analyze", str(dump))

        assert len(root.handlers) == handlers_after_first

    def test_input_errors_logged_as_critical(self, workspace, caplog):
        dump = workspace / "frm.bin"
        dump.write_bytes(bytes(1000))

        with caplog.at_level(logging.DEBUG):
            assert run(workspace, "analyze", str(dump)) == EXIT_INVALID_INPUT

        assert any("not a D-Flash dump" in r.getMessage() for r in caplog.records)
        failures = [r for r in caplog.records if "analyze failed" in r.getMessage()]
        assert failures[-1].levelno == logging.CRITICAL

    def test_read_errors_logged_as_error(self, workspace, caplog):
        with caplog.at_level(logging.DEBUG):
            assert run(workspace, "analyze", str(workspace / "missing.bin")) == EXIT_FAILURE

        failures = [r for r in caplog.records if "analyze failed" in r.getMessage()]
        assert failures[-1].levelno == logging.ERROR
