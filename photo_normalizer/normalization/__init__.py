# ==============================================
# TOPIC 2: NORMALIZATION
# ==============================================
#
# This package canonicalizes field text so that spelling variants
# can be compared. Nothing here decides on a correction; that is
# Topic 3 (consensus).
#
# Modules:
# --------
# - station_normalizer.py   → Station comparison key, OCR repair, notation detection
# - work_type_normalizer.py → Work type whitespace cleanup, fuzzy similarity
#
# ==============================================

from .station_normalizer import (
    StationPattern,
    StationPatternKind,
    detect_station_pattern,
    fix_ocr_errors,
    normalize_station_format,
)
from .work_type_normalizer import (
    are_similar,
    levenshtein_distance,
    normalize_work_type_name,
    similarity,
)

__all__ = [
    "StationPattern",
    "StationPatternKind",
    "are_similar",
    "detect_station_pattern",
    "fix_ocr_errors",
    "levenshtein_distance",
    "normalize_station_format",
    "normalize_work_type_name",
    "similarity",
]
