# ==============================================
# TOPIC 3: CONSENSUS
# ==============================================
#
# This package votes on field values across a batch of photo
# records and proposes corrections towards the majority.
#
# Two-step process:
#   Step 1 (Vote):     Count values → dominant value + agreement ratio
#   Step 2 (Propose):  Ratio >= threshold → correction per minority record
#
# Modules:
# --------
# - frequency.py         → Majority vote with agreement ratio
# - correction.py        → CorrectionField, NormalizationCorrection, stats, result
# - station_consensus.py → Station vote on canonical keys
# - field_consensus.py   → Exact vote on work type / variety / detail
#
# ==============================================

from .correction import (
    CorrectionField,
    NormalizationCorrection,
    NormalizationResult,
    NormalizationStats,
)
from .field_consensus import normalize_field, normalize_work_types
from .frequency import find_most_frequent, find_most_frequent_with_ratio
from .station_consensus import normalize_stations

__all__ = [
    "CorrectionField",
    "NormalizationCorrection",
    "NormalizationResult",
    "NormalizationStats",
    "find_most_frequent",
    "find_most_frequent_with_ratio",
    "normalize_field",
    "normalize_stations",
    "normalize_work_types",
]
