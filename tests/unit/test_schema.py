"""
Unit tests for the analysis export model.
"""

import json

import pytest
from pydantic import ValidationError

from frm_restore.analysis.analyzer import analyze
from frm_restore.analysis.schema import AnalysisModel, VehicleDataModel, to_json, to_model
from tests.fixtures import SAMPLE_MILEAGE, SAMPLE_VIN, create_erased_image, create_vehicle_image


class TestToJson:
    """Test the exported JSON shape."""

    def test_camel_case_keys(self):
        payload = json.loads(to_json(analyze(create_vehicle_image())))

        assert payload["corruptionLevel"] == 6
        assert payload["recoverableSectors"] == 2
        assert payload["totalSectors"] == 32
        assert payload["blankSectors"] == [i for i in range(32) if i not in (4, 8)]
        assert payload["vehicleData"] == {
            "vin": SAMPLE_VIN,
            "model": "BMW 3 Series",
            "year": 2007,
            "mileage": SAMPLE_MILEAGE,
            "frmType": "FRM3 Unknown",
        }
        assert set(payload["configurationData"]) == {
            "xenonHeadlights", "angelEyes", "autoWipers", "comfortAccess", "followMeHome"
        }

    def test_absent_fields_are_null(self):
        payload = json.loads(to_json(analyze(create_erased_image())))

        assert payload["vehicleData"]["vin"] is None
        assert payload["vehicleData"]["mileage"] is None
        assert payload["odometerBigEndianUnverified"] is None

    def test_model_round_trip(self):
        model = to_model(analyze(create_vehicle_image()))
        restored = AnalysisModel.model_validate_json(model.model_dump_json(by_alias=True))
        assert restored == model


class TestValidation:
    """Test model constraints."""

    def test_invalid_vin_rejected(self):
        with pytest.raises(ValidationError):
            VehicleDataModel(vin="WBA1234567890123O", frm_type="FRM2")

    def test_mileage_bounds(self):
        with pytest.raises(ValidationError):
            VehicleDataModel(mileage=0, frm_type="FRM2")
        with pytest.raises(ValidationError):
            VehicleDataModel(mileage=1_000_000, frm_type="FRM2")

    def test_alias_accepted(self):
        assert VehicleDataModel(frmType="FRM2").frm_type == "FRM2"
