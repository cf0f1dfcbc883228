# ==============================================
# Station Consensus
# ==============================================
#
# PURPOSE:
#   Align minority station spellings to the batch's dominant station.
#
# ALGORITHM: normalize_stations(results, threshold, protected_files)
# ------------------------------------------------------------------
#   1. Keep records with a non-empty station.
#   2. Key each one with normalize_station_format().
#   3. Vote on the keys. Stop if the winning ratio < threshold.
#   4. Target = first original station (batch order) whose key won.
#   5. For each record with a station, skip protected files, and
#      propose original → target when the two differ ignoring case.
#
#   "No.10.50" voting with two "No.10+50" is corrected to "No.10+50";
#   "no.10+50" is left alone (same text ignoring case).
#
# ==============================================

import logging
from typing import List, Sequence, Set

from ..models import AnalysisResult
from ..normalization.station_normalizer import normalize_station_format
from .correction import CorrectionField, NormalizationCorrection
from .frequency import find_most_frequent_with_ratio


logger = logging.getLogger(__name__)


def normalize_stations(
    results: Sequence[AnalysisResult],
    threshold: float,
    protected_files: Set[str],
) -> List[NormalizationCorrection]:
    """
    Propose station corrections towards the majority station.

    Args:
        results: Batch of analysis records
        threshold: Minimum agreement ratio required to correct anything
        protected_files: File names that must never be corrected

    Returns:
        Corrections in batch order (possibly empty)
    """
    keyed = [
        (result, normalize_station_format(result.station))
        for result in results
        if result.station
    ]
    if not keyed:
        return []

    vote = find_most_frequent_with_ratio(key for _, key in keyed)
    if vote is None:
        return []
    majority_key, ratio = vote

    if ratio < threshold:
        logger.debug(
            "Station agreement %.2f below threshold %.2f, no correction", ratio, threshold
        )
        return []

    target = next(result.station for result, key in keyed if key == majority_key)
    target_folded = target.lower()

    corrections = []
    for result, _ in keyed:
        if result.file_name in protected_files:
            continue
        if result.station.lower() == target_folded:
            continue
        corrections.append(NormalizationCorrection(
            file_name=result.file_name,
            field=CorrectionField.STATION,
            original=result.station,
            corrected=target,
            reason=f"最頻出測点「{target}」に統一（元: {result.station}）",
        ))

    return corrections
