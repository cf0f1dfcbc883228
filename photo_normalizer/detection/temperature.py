# ==============================================
# Temperature Classifier & Validator
# ==============================================
#
# PURPOSE:
#   Asphalt temperature photos come in four kinds, each with its
#   own plausible range. OCR frequently drops the decimal point of
#   low readings ("45.6℃" read as "456℃"), so an out-of-range
#   opening temperature may be repairable.
#
# ENUM: TemperatureType
# ---------------------
#   ARRIVAL             → 到着 / 出荷     [140, 185] °C
#   SPREADING           → 敷均し / 舗設   [130, 175] °C
#   INITIAL_COMPACTION  → 初期締固め      [120, 165] °C
#   OPENING             → 交通開放        [30, 70]  °C
#   UNKNOWN             → no keyword     [30, 185] °C
#
#   - from_text(text) -> TemperatureType  (classmethod)
#       Ordered keyword lookup, first match wins.
#   - valid_range -> (low, high)
#
# FUNCTIONS:
# ----------
# - is_valid_temperature(kind, value) -> bool
# - validate_temperature(text, kind) -> str | None
#     Proposed replacement reading (e.g. "45.6℃") or None when
#     the reading is fine or no safe repair exists.
#
# ==============================================

from enum import Enum
from typing import Optional, Tuple

from .measurement_detector import TEMPERATURE_PATTERN


class TemperatureType(Enum):
    """Kind of temperature measurement shown in a photo."""
    ARRIVAL = "arrival"
    SPREADING = "spreading"
    INITIAL_COMPACTION = "initial_compaction"
    OPENING = "opening"
    UNKNOWN = "unknown"

    @classmethod
    def from_text(cls, text: str) -> "TemperatureType":
        """
        Classify text by keyword.

        Keywords are checked in the order of KEYWORD_TABLE; the first
        kind with a matching keyword wins.

        Args:
            text: Remarks, detail or OCR text of the photo

        Returns:
            The matching TemperatureType, or UNKNOWN
        """
        if not text:
            return cls.UNKNOWN
        lowered = text.lower()
        for kind, keywords in KEYWORD_TABLE:
            if any(keyword in lowered for keyword in keywords):
                return kind
        return cls.UNKNOWN

    @property
    def valid_range(self) -> Tuple[float, float]:
        return VALID_RANGES[self]


KEYWORD_TABLE = (
    (TemperatureType.ARRIVAL, ("到着", "出荷", "arrival", "shipping")),
    (TemperatureType.SPREADING, ("敷均し", "敷き均し", "舗設", "spreading")),
    (TemperatureType.INITIAL_COMPACTION, ("初期締固め", "初転圧", "締固め", "compaction")),
    (TemperatureType.OPENING, ("開放", "opening")),
)

VALID_RANGES = {
    TemperatureType.ARRIVAL: (140.0, 185.0),
    TemperatureType.SPREADING: (130.0, 175.0),
    TemperatureType.INITIAL_COMPACTION: (120.0, 165.0),
    TemperatureType.OPENING: (30.0, 70.0),
    TemperatureType.UNKNOWN: (30.0, 185.0),
}


def is_valid_temperature(kind: TemperatureType, value: float) -> bool:
    low, high = kind.valid_range
    return low <= value <= high


def validate_temperature(text: str, kind: TemperatureType) -> Optional[str]:
    """
    Check the first temperature reading in text against its kind.

    Only a three-digit opening temperature is repaired: a decimal
    point is tried after the first digit, then after the second,
    and the first candidate inside the opening range is returned
    with the original degree suffix.

    Args:
        text: Text holding the reading, e.g. "開放温度 456℃"
        kind: Kind of measurement the reading belongs to

    Returns:
        Corrected reading such as "45.6℃", or None
    """
    match = TEMPERATURE_PATTERN.search(text or "")
    if not match:
        return None

    raw, suffix = match.group(1), match.group(2)
    try:
        value = float(raw)
    except ValueError:
        return None

    if is_valid_temperature(kind, value):
        return None

    if kind is not TemperatureType.OPENING:
        return None

    integer_part, _, fraction = raw.partition(".")
    if len(integer_part) != 3 or not 100 <= value < 1000:
        return None

    digits = integer_part + fraction
    for split in (1, 2):
        candidate = f"{digits[:split]}.{digits[split:]}"
        if is_valid_temperature(kind, float(candidate)):
            return f"{candidate}{suffix}"

    return None
