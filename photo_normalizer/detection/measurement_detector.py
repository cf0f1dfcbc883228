# ==============================================
# Measurement Detector
# ==============================================
#
# PURPOSE:
#   Find numeric readings (temperature, dimension, density and
#   general unit readings) in free text.
#
#   A record whose remarks/measurements carry such a reading is
#   "protected": its values are record-specific ground truth, so
#   the consensus engine never rewrites it.
#
# FUNCTIONS:
# ----------
# - contains_measurement(text) -> bool
#     True iff any of the four pattern families matches.
#
# - extract_measurements(text) -> list[Measurement]
#     Typed readings: all temperatures, then all dimensions,
#     then all densities. General unit readings are detected
#     but never extracted.
#
# - extract_temperature(text) -> float | None
# - extract_dimension_mm(text) -> float | None
# - is_temperature_photo(text) -> bool
#
# PATTERNS:
# ---------
#   temperature : 156℃, 160.4度
#   dimension   : t=50mm, 5cm, 2.5m
#   density     : 98.5%
#   general     : 20kg, 3L, 10kN, 24MPa
#
# ==============================================

import re
from dataclasses import dataclass
from typing import List, Optional, Union


TEMPERATURE_PATTERN = re.compile(r"(\d+\.?\d*)\s*([℃度])")
DIMENSION_PATTERN = re.compile(r"[t=]?\s*(\d+\.?\d*)\s*(mm|cm|m)\b")
DENSITY_PATTERN = re.compile(r"(\d+\.?\d*)\s*%")
GENERAL_PATTERN = re.compile(r"\d+\.?\d*\s*(kg|g|L|kN|MPa)")

TEMPERATURE_KEYWORDS = re.compile(
    r"(到着温度|敷均し温度|初期締固め|温度測定|温度計|出荷時|舗設温度)",
    re.IGNORECASE,
)

# Conversion factors to millimetres
MM_PER_UNIT = {"mm": 1.0, "cm": 10.0, "m": 1000.0}


@dataclass(frozen=True)
class Temperature:
    """Temperature reading in °C."""
    value: float


@dataclass(frozen=True)
class Dimension:
    """Length reading with its unit as written (mm, cm or m)."""
    value: float
    unit: str


@dataclass(frozen=True)
class Density:
    """Density / compaction ratio reading in %."""
    value: float


Measurement = Union[Temperature, Dimension, Density]


def _parse_float(raw: str) -> Optional[float]:
    try:
        return float(raw)
    except ValueError:
        return None


def contains_measurement(text: str) -> bool:
    """
    Check whether text carries any numeric reading with a unit.

    Args:
        text: Free text (remarks, measurements, OCR output)

    Returns:
        True if a temperature, dimension, density or general
        unit reading is present
    """
    if not text:
        return False

    return bool(
        TEMPERATURE_PATTERN.search(text)
        or DIMENSION_PATTERN.search(text)
        or DENSITY_PATTERN.search(text)
        or GENERAL_PATTERN.search(text)
    )


def extract_measurements(text: str) -> List[Measurement]:
    """
    Extract typed readings from text.

    Readings are grouped by kind (temperatures, dimensions,
    densities), each group in order of occurrence. A capture
    that does not parse as a number is skipped.

    Args:
        text: Free text to scan

    Returns:
        List of Temperature / Dimension / Density readings
    """
    measurements: List[Measurement] = []
    if not text:
        return measurements

    for match in TEMPERATURE_PATTERN.finditer(text):
        value = _parse_float(match.group(1))
        if value is not None:
            measurements.append(Temperature(value))

    for match in DIMENSION_PATTERN.finditer(text):
        value = _parse_float(match.group(1))
        if value is not None:
            measurements.append(Dimension(value, match.group(2)))

    for match in DENSITY_PATTERN.finditer(text):
        value = _parse_float(match.group(1))
        if value is not None:
            measurements.append(Density(value))

    return measurements


def extract_temperature(text: str) -> Optional[float]:
    """Return the first temperature reading in text, if any."""
    match = TEMPERATURE_PATTERN.search(text or "")
    if not match:
        return None
    return _parse_float(match.group(1))


def extract_dimension_mm(text: str) -> Optional[float]:
    """
    Return the first dimension reading converted to millimetres.

    Examples:
        "t=50mm" → 50.0
        "厚さ 5cm" → 50.0
        "幅 2.5m" → 2500.0
    """
    match = DIMENSION_PATTERN.search(text or "")
    if not match:
        return None
    value = _parse_float(match.group(1))
    if value is None:
        return None
    return value * MM_PER_UNIT[match.group(2)]


def is_temperature_photo(text: str) -> bool:
    """True if text names a temperature check or carries a temperature reading."""
    if not text:
        return False
    return bool(TEMPERATURE_KEYWORDS.search(text)) or extract_temperature(text) is not None
