# ==============================================
# Categorical Field Consensus
# ==============================================
#
# PURPOSE:
#   Align work type (工種), variety (種別) and detail (細別) values to
#   the batch's majority value, one field at a time.
#
# FUNCTIONS:
# ----------
# - normalize_field(results, threshold, protected_files, field)
#     1. Collect the non-empty values of `field`.
#     2. Vote. Skip the field if nothing voted or ratio < threshold.
#     3. Propose value → majority for every non-empty, non-protected
#        record whose value is not exactly the majority value.
#
# - normalize_work_types(results, threshold, protected_files)
#     normalize_field for WORK_TYPE, then VARIETY, then DETAIL.
#
# NOTE:
#   Comparison is exact. "舗装打換え工" and "舗装打替え工" are
#   separate candidates in the vote.
#
# ==============================================

import logging
from typing import List, Sequence, Set

from ..models import AnalysisResult
from .correction import CATEGORICAL_FIELDS, CorrectionField, NormalizationCorrection
from .frequency import find_most_frequent_with_ratio


logger = logging.getLogger(__name__)


def normalize_field(
    results: Sequence[AnalysisResult],
    threshold: float,
    protected_files: Set[str],
    field: CorrectionField,
) -> List[NormalizationCorrection]:
    """
    Propose corrections for one categorical field.

    Args:
        results: Batch of analysis records
        threshold: Minimum agreement ratio required to correct anything
        protected_files: File names that must never be corrected
        field: Which attribute to vote on

    Returns:
        Corrections in batch order (possibly empty)
    """
    values = [value for value in (r.get_field(field) for r in results) if value]

    vote = find_most_frequent_with_ratio(values)
    if vote is None:
        return []
    most_frequent, ratio = vote

    if ratio < threshold:
        logger.debug(
            "%s agreement %.2f below threshold %.2f, no correction",
            field.attribute, ratio, threshold,
        )
        return []

    corrections = []
    for result in results:
        value = result.get_field(field)
        if not value or result.file_name in protected_files:
            continue
        if value != most_frequent:
            corrections.append(NormalizationCorrection(
                file_name=result.file_name,
                field=field,
                original=value,
                corrected=most_frequent,
                reason=f"最頻出の{field.label}「{most_frequent}」に統一（元: {value}）",
            ))

    return corrections


def normalize_work_types(
    results: Sequence[AnalysisResult],
    threshold: float,
    protected_files: Set[str],
) -> List[NormalizationCorrection]:
    corrections: List[NormalizationCorrection] = []
    for field in CATEGORICAL_FIELDS:
        corrections.extend(normalize_field(results, threshold, protected_files, field))
    return corrections
