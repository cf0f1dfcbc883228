# ==============================================
# TOPIC 1: DETECTION
# ==============================================
#
# This package finds numeric readings in free text and checks
# temperature readings for plausibility.
#
# Modules:
# --------
# - measurement_detector.py → Temperature / dimension / density detection
# - temperature.py          → Temperature kinds, valid ranges, OCR repair
#
# ==============================================

from .measurement_detector import (
    Density,
    Dimension,
    Measurement,
    Temperature,
    contains_measurement,
    extract_dimension_mm,
    extract_measurements,
    extract_temperature,
    is_temperature_photo,
)
from .temperature import TemperatureType, is_valid_temperature, validate_temperature

__all__ = [
    "Density",
    "Dimension",
    "Measurement",
    "Temperature",
    "TemperatureType",
    "contains_measurement",
    "extract_dimension_mm",
    "extract_measurements",
    "extract_temperature",
    "is_temperature_photo",
    "is_valid_temperature",
    "validate_temperature",
]
