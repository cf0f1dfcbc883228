# ==============================================
# Station Format Normalizer
# ==============================================
#
# PURPOSE:
#   Turn survey station text (測点) into a comparison key so that
#   spelling variants of the same station vote together:
#     "No.10+50", "ＮＯ．１０＋５０", "no.10-50", "NO.10.50" → "no.10+50"
#
#   The key is never displayed. The consensus engine always writes
#   back one of the original strings from the batch.
#
# FUNCTIONS:
# ----------
# - normalize_station_format(text) -> str
#     Steps (fixed order):
#       1. Full-width → half-width (digits, Latin letters, ＋．－ and 　)
#       2. Lowercase
#       3. OCR repair: o/O → 0 and l/I → 1 next to a digit
#          (repeated until nothing changes)
#       4. Separator unification: no.X.YY / no.X-YY → no.X+YY
#
# - fix_ocr_errors(text) -> str
#     Step 3, single pass.
#
# - detect_station_pattern(text) -> StationPattern | None
#     PLUS (No.X+YY) > DOT (No.X.YY) > DASH (No.X-YY) > INTEGER (No.X)
#
# ==============================================

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional


FULL_WIDTH_TABLE = str.maketrans(
    {
        **{chr(ord("０") + i): chr(ord("0") + i) for i in range(10)},
        **{chr(ord("Ａ") + i): chr(ord("A") + i) for i in range(26)},
        **{chr(ord("ａ") + i): chr(ord("a") + i) for i in range(26)},
        "＋": "+",
        "．": ".",
        "－": "-",
        "　": " ",
    }
)

OCR_DIGIT_LOOKALIKES = {"o": "0", "O": "0", "l": "1", "I": "1"}

SEPARATOR_PATTERN = re.compile(r"no\.(\d+)[.\-](\d+)")

ASCII_DIGITS = frozenset("0123456789")


class StationPatternKind(Enum):
    PLUS = "plus"        # No.X+YY
    DOT = "dot"          # No.X.YY
    DASH = "dash"        # No.X-YY
    INTEGER = "integer"  # No.X


@dataclass(frozen=True)
class StationPattern:
    """Parsed station notation."""
    kind: StationPatternKind
    major: int
    minor: Optional[int] = None


# Checked in order; first match wins.
STATION_PATTERNS = (
    (StationPatternKind.PLUS, re.compile(r"no\.?\s*(\d+)\+(\d+)", re.IGNORECASE)),
    (StationPatternKind.DOT, re.compile(r"no\.?\s*(\d+)\.(\d+)", re.IGNORECASE)),
    (StationPatternKind.DASH, re.compile(r"no\.?\s*(\d+)-(\d+)", re.IGNORECASE)),
    (StationPatternKind.INTEGER, re.compile(r"no\.?\s*(\d+)$", re.IGNORECASE)),
)


def normalize_station_format(text: str) -> str:
    """
    Build the comparison key for a station string.

    Args:
        text: Station as written by the AI / OCR / user

    Returns:
        Canonical key, e.g. "no.10+50"
    """
    result = text.translate(FULL_WIDTH_TABLE)
    result = result.lower()

    # A repaired character can put another lookalike next to a digit
    previous = None
    while previous != result:
        previous = result
        result = fix_ocr_errors(result)

    return SEPARATOR_PATTERN.sub(r"no.\1+\2", result)


def fix_ocr_errors(text: str) -> str:
    """
    Replace digit lookalikes that sit next to an ASCII digit.

    Neighbours are judged on the input text, so "no.1O+5O" becomes
    "no.10+50" while the "o" of "no" is left alone.
    """
    chars = list(text)
    fixed = []
    for i, char in enumerate(chars):
        replacement = OCR_DIGIT_LOOKALIKES.get(char)
        if replacement is None:
            fixed.append(char)
            continue
        prev_is_digit = i > 0 and chars[i - 1] in ASCII_DIGITS
        next_is_digit = i + 1 < len(chars) and chars[i + 1] in ASCII_DIGITS
        fixed.append(replacement if prev_is_digit or next_is_digit else char)
    return "".join(fixed)


def detect_station_pattern(text: str) -> Optional[StationPattern]:
    """
    Recognise the notation used by a station string.

    Args:
        text: Station text, any case

    Returns:
        StationPattern with the parsed numbers, or None
    """
    for kind, pattern in STATION_PATTERNS:
        match = pattern.search(text)
        if not match:
            continue
        if kind is StationPatternKind.INTEGER:
            return StationPattern(kind, int(match.group(1)))
        return StationPattern(kind, int(match.group(1)), int(match.group(2)))
    return None
