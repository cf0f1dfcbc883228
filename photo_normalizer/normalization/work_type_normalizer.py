# ==============================================
# Work Type Name Normalizer & Similarity
# ==============================================
#
# PURPOSE:
#   Text helpers for the categorical classification fields
#   (工種 / 種別 / 細別):
#     - whitespace canonicalisation of a name
#     - edit-distance similarity between two names
#
#   The consensus vote compares values exactly; these helpers are
#   not part of the automatic correction path. They exist so that
#   near-duplicates like "舗装打換え工" / "舗装打替え工" can be
#   spotted and reported.
#
# FUNCTIONS:
# ----------
# - normalize_work_type_name(name) -> str
#     "　舗装  工　" → "舗装 工"
#
# - levenshtein_distance(a, b) -> int
#     Counted in code points, so one kanji is one edit.
#
# - similarity(a, b) -> float
#     1.0 for identical strings, 0.0 if exactly one is empty,
#     otherwise 1 - distance / max(len(a), len(b)).
#
# - are_similar(a, b, min_similarity=0.8) -> bool
#
# ==============================================

import re

from rapidfuzz.distance import Levenshtein


WHITESPACE_RUN = re.compile(r" {2,}")


def normalize_work_type_name(name: str) -> str:
    result = name.replace("　", " ").strip()
    return WHITESPACE_RUN.sub(" ", result)


def levenshtein_distance(a: str, b: str) -> int:
    """
    Classic edit distance (insert / delete / substitute, all cost 1).

    Args:
        a: First string
        b: Second string

    Returns:
        Minimum number of single-character edits
    """
    return Levenshtein.distance(a, b)


def similarity(a: str, b: str) -> float:
    """
    Edit-distance similarity in the range 0.0..1.0.

    Args:
        a: First string
        b: Second string

    Returns:
        1.0 for identical strings, 0.0 when only one is empty
    """
    if a == b:
        return 1.0
    if not a or not b:
        return 0.0

    return Levenshtein.normalized_similarity(a, b)


def are_similar(a: str, b: str, min_similarity: float = 0.8) -> bool:
    """True if the whitespace-normalized names are at least min_similarity alike."""
    return similarity(
        normalize_work_type_name(a), normalize_work_type_name(b)
    ) >= min_similarity
