# ==============================================
# Tests for Detection Module
# ==============================================

import pytest

from photo_normalizer.detection import (
    Density,
    Dimension,
    Temperature,
    TemperatureType,
    contains_measurement,
    extract_dimension_mm,
    extract_measurements,
    extract_temperature,
    is_temperature_photo,
    is_valid_temperature,
    validate_temperature,
)


class TestContainsMeasurement:
    @pytest.mark.parametrize("text", ["出荷時156℃", "到着温度 160.4度", "温度：158℃"])
    def test_temperature(self, text):
        assert contains_measurement(text)

    @pytest.mark.parametrize("text", ["t=50mm", "厚さ 5cm", "幅 2.5m"])
    def test_dimension(self, text):
        assert contains_measurement(text)

    @pytest.mark.parametrize("text", ["締固め度 98.5%", "密度 96%"])
    def test_density(self, text):
        assert contains_measurement(text)

    @pytest.mark.parametrize("text", ["20kg", "3L", "10kN", "24MPa"])
    def test_general_units(self, text):
        assert contains_measurement(text)

    @pytest.mark.parametrize("text", ["", "舗設状況", "No.10+50"])
    def test_no_measurement(self, text):
        assert not contains_measurement(text)


class TestExtractMeasurements:
    def test_mixed_text_groups_by_kind(self):
        measurements = extract_measurements("出荷時156℃、t=50mm")
        assert measurements == [Temperature(156.0), Dimension(50.0, "mm")]

    def test_kind_order_not_text_order(self):
        measurements = extract_measurements("98.5% 5cm 160℃")
        assert measurements == [Temperature(160.0), Dimension(5.0, "cm"), Density(98.5)]

    def test_multiple_temperatures(self):
        assert extract_measurements("到着 160℃ 敷均し 150度") == [
            Temperature(160.0),
            Temperature(150.0),
        ]

    def test_general_unit_is_detected_but_not_extracted(self):
        assert contains_measurement("5kg")
        assert extract_measurements("5kg") == []

    @pytest.mark.parametrize("text", ["", "舗設状況", "No.10+50", "工種 舗装工"])
    def test_no_detection_means_no_extraction(self, text):
        assert not contains_measurement(text)
        assert extract_measurements(text) == []


class TestSingleValueExtraction:
    def test_extract_temperature(self):
        assert extract_temperature("出荷時156℃") == 156.0
        assert extract_temperature("温度 160.4度") == 160.4
        assert extract_temperature("測定なし") is None

    def test_extract_dimension_mm(self):
        assert extract_dimension_mm("t=50mm") == 50.0
        assert extract_dimension_mm("厚さ 5cm") == 50.0
        assert extract_dimension_mm("幅 2.5m") == 2500.0
        assert extract_dimension_mm("舗設状況") is None

    def test_is_temperature_photo(self):
        assert is_temperature_photo("到着温度")
        assert is_temperature_photo("敷均し温度測定")
        assert is_temperature_photo("出荷時 156℃")
        assert not is_temperature_photo("舗設状況")
        assert not is_temperature_photo("")


class TestTemperatureType:
    @pytest.mark.parametrize("text, expected", [
        ("到着温度", TemperatureType.ARRIVAL),
        ("出荷時温度", TemperatureType.ARRIVAL),
        ("敷均し温度", TemperatureType.SPREADING),
        ("初期締固め前温度", TemperatureType.INITIAL_COMPACTION),
        ("交通開放温度", TemperatureType.OPENING),
        ("Arrival temperature", TemperatureType.ARRIVAL),
        ("舗設状況", TemperatureType.SPREADING),
        ("温度管理", TemperatureType.UNKNOWN),
        ("", TemperatureType.UNKNOWN),
    ])
    def test_from_text(self, text, expected):
        assert TemperatureType.from_text(text) is expected

    def test_first_keyword_kind_wins(self):
        # Both arrival and opening keywords present
        assert TemperatureType.from_text("到着 開放") is TemperatureType.ARRIVAL

    def test_unknown_range_covers_all_kinds(self):
        low, high = TemperatureType.UNKNOWN.valid_range
        for kind in TemperatureType:
            kind_low, kind_high = kind.valid_range
            assert low <= kind_low and kind_high <= high


class TestTemperatureValidation:
    def test_is_valid_temperature(self):
        assert is_valid_temperature(TemperatureType.ARRIVAL, 160.0)
        assert not is_valid_temperature(TemperatureType.ARRIVAL, 50.0)
        assert not is_valid_temperature(TemperatureType.OPENING, 126.0)

    def test_range_is_inclusive(self):
        assert is_valid_temperature(TemperatureType.OPENING, 30.0)
        assert is_valid_temperature(TemperatureType.OPENING, 70.0)
        assert not is_valid_temperature(TemperatureType.OPENING, 70.1)

    def test_valid_reading_needs_no_correction(self):
        assert validate_temperature("到着温度 160℃", TemperatureType.ARRIVAL) is None

    def test_no_reading(self):
        assert validate_temperature("開放温度", TemperatureType.OPENING) is None

    def test_opening_missing_decimal_point(self):
        assert validate_temperature("開放温度 456℃", TemperatureType.OPENING) == "45.6℃"

    def test_keeps_degree_suffix(self):
        assert validate_temperature("452度", TemperatureType.OPENING) == "45.2度"

    def test_fractional_reading_keeps_its_digits(self):
        # 4.565 is below the opening range, 45.65 is inside it
        assert validate_temperature("開放温度 456.5℃", TemperatureType.OPENING) == "45.65℃"

    def test_fractional_reading_without_candidate(self):
        # 7.125 and 71.25 both fall outside 30..70
        assert validate_temperature("開放温度 712.5℃", TemperatureType.OPENING) is None

    def test_126_opening_is_self_consistent(self):
        corrected = validate_temperature("126℃", TemperatureType.OPENING)
        if corrected is not None:
            assert is_valid_temperature(
                TemperatureType.OPENING, extract_temperature(corrected)
            )

    def test_no_candidate_in_range(self):
        # 9.99 and 99.9 are both outside the opening range
        assert validate_temperature("999℃", TemperatureType.OPENING) is None

    def test_only_opening_is_repaired(self):
        assert validate_temperature("50℃", TemperatureType.ARRIVAL) is None
        assert validate_temperature("456℃", TemperatureType.UNKNOWN) is None

    def test_four_digit_reading_not_repaired(self):
        assert validate_temperature("4560℃", TemperatureType.OPENING) is None
