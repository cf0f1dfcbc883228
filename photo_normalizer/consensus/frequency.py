# ==============================================
# Frequency (Majority Vote)
# ==============================================
#
# PURPOSE:
#   Find the dominant value of a field across a batch and how
#   strongly the batch agrees on it.
#
# FUNCTIONS:
# ----------
# - find_most_frequent(values) -> str | None
# - find_most_frequent_with_ratio(values) -> (str, float) | None
#     ratio = count(mode) / number of values
#
# TIE-BREAK:
# ----------
#   When several values share the highest count, the value seen
#   first in iteration order wins. Counting uses an insertion
#   ordered Counter and max() keeps the first maximum it meets.
#
# ==============================================

from collections import Counter
from typing import Iterable, Optional, Tuple


def find_most_frequent_with_ratio(values: Iterable[str]) -> Optional[Tuple[str, float]]:
    """
    Return the most frequent value and its share of all values.

    Args:
        values: Values to vote over (callers drop empty values first)

    Returns:
        (value, ratio) or None for an empty input
    """
    counts = Counter(values)
    total = sum(counts.values())
    if total == 0:
        return None

    most_frequent = max(counts, key=counts.get)
    return most_frequent, counts[most_frequent] / total


def find_most_frequent(values: Iterable[str]) -> Optional[str]:
    result = find_most_frequent_with_ratio(values)
    return result[0] if result else None
