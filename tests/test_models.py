# ==============================================
# Tests for AnalysisResult
# ==============================================

import pytest

from photo_normalizer.consensus import CorrectionField
from photo_normalizer.models import AnalysisResult


class TestFromDict:
    def test_snake_case(self):
        result = AnalysisResult.from_dict({
            "file_name": "p1.jpg",
            "station": "No.1",
            "work_type": "舗装工",
            "detail": "表層",
        })
        assert result.file_name == "p1.jpg"
        assert result.work_type == "舗装工"
        assert result.detail == "表層"
        assert result.remarks == ""

    def test_camel_case_and_aliases(self):
        result = AnalysisResult.from_dict({
            "fileName": "p1.jpg",
            "workType": "舗装工",
            "subphase": "表層",
            "detectedText": "温度 160.4℃",
            "hasBoard": True,
        })
        assert result.work_type == "舗装工"
        assert result.detail == "表層"
        assert result.detected_text == "温度 160.4℃"
        assert result.has_board is True

    @pytest.mark.parametrize("value, expected", [
        ("false", False),
        ("No", False),
        ("0", False),
        ("true", True),
        ("yes", True),
        ("maybe", False),
        (1, True),
        (0, False),
    ])
    def test_has_board_from_text(self, value, expected):
        result = AnalysisResult.from_dict({"file_name": "p1.jpg", "hasBoard": value})
        assert result.has_board is expected

    def test_unknown_and_null_keys_ignored(self):
        result = AnalysisResult.from_dict({
            "file_name": "p1.jpg",
            "confidence": 0.9,
            "station": None,
        })
        assert result.station == ""

    def test_missing_file_name(self):
        with pytest.raises(ValueError):
            AnalysisResult.from_dict({"station": "No.1"})

    def test_not_a_dict(self):
        with pytest.raises(ValueError):
            AnalysisResult.from_dict(["p1.jpg"])

    def test_round_trip(self):
        original = AnalysisResult("p1.jpg", station="No.1", remarks="備考")
        assert AnalysisResult.from_dict(original.to_dict()) == original


class TestFieldAccess:
    @pytest.mark.parametrize("field", list(CorrectionField))
    def test_every_correction_field_exists(self, field):
        result = AnalysisResult("p1.jpg")
        result.set_field(field, "value")
        assert result.get_field(field) == "value"
