# ==============================================
# ResultNormalizer (Orchestrator)
# ==============================================
#
# PURPOSE:
#   Run the whole normalization pass over a batch of analysis
#   results and, when asked, write approved corrections back.
#
# FLOW:
# -----
#   batch
#     → Topic 1: find_protected_files()   (remarks / measurements carry a reading)
#     → Topic 3: normalize_stations()      (if options.normalize_station)
#     → Topic 3: normalize_work_types()    (if options.normalize_work_type)
#     → NormalizationResult (corrections + stats)
#     → caller reviews → apply_corrections()
#
# FUNCTIONS:
# ----------
# - find_protected_files(results) -> set[str]
# - normalize_results(results, options=None) -> NormalizationResult
# - apply_corrections(results, corrections) -> int
#     Overwrites one field per correction on the first record with
#     the same file name. Unknown file names are ignored.
#     Returns how many corrections were applied.
#
# CLASS: ResultNormalizer
# -----------------------
#   Holds NormalizationOptions (defaults from get_config()).
#   - normalize(results) -> NormalizationResult
#   - apply(results, corrections) -> int
#   - normalize_and_apply(results) -> NormalizationResult
#
# ==============================================

import logging
from typing import List, Optional, Sequence, Set

from .config import NormalizationOptions, get_config
from .consensus.correction import (
    CorrectionField,
    NormalizationCorrection,
    NormalizationResult,
    NormalizationStats,
)
from .consensus.field_consensus import normalize_work_types
from .consensus.station_consensus import normalize_stations
from .detection.measurement_detector import contains_measurement
from .models import AnalysisResult


logger = logging.getLogger(__name__)


def find_protected_files(results: Sequence[AnalysisResult]) -> Set[str]:
    """
    Collect file names whose remarks or measurements carry a reading.

    Args:
        results: Batch of analysis records

    Returns:
        Set of protected file names
    """
    return {
        result.file_name
        for result in results
        if contains_measurement(result.remarks) or contains_measurement(result.measurements)
    }


def normalize_results(
    results: Sequence[AnalysisResult],
    options: Optional[NormalizationOptions] = None,
) -> NormalizationResult:
    """
    Propose corrections for a batch without changing it.

    Args:
        results: Batch of analysis records
        options: Switches and threshold. Defaults to NormalizationOptions().

    Returns:
        NormalizationResult with corrections ordered station, work type,
        variety, detail (batch order within each)
    """
    options = options or NormalizationOptions()

    protected: Set[str] = set()
    if options.protect_measurements:
        protected = find_protected_files(results)

    station_corrections: List[NormalizationCorrection] = []
    if options.normalize_station:
        station_corrections = normalize_stations(results, options.threshold, protected)

    work_type_corrections: List[NormalizationCorrection] = []
    if options.normalize_work_type:
        work_type_corrections = normalize_work_types(results, options.threshold, protected)

    corrections = station_corrections + work_type_corrections

    stats = NormalizationStats(
        total_records=len(results),
        corrected_records=len({c.file_name for c in corrections}),
        station_corrections=len(station_corrections),
        work_type_corrections=len(work_type_corrections),
        skipped_due_to_measurements=len(protected),
    )

    logger.info(
        "Normalized %d records: %d corrections on %d records (%d protected)",
        stats.total_records, len(corrections), stats.corrected_records,
        stats.skipped_due_to_measurements,
    )
    for correction in corrections:
        logger.debug(
            "%s [%s] %r -> %r",
            correction.file_name, correction.field.attribute,
            correction.original, correction.corrected,
        )

    return NormalizationResult(corrections=corrections, stats=stats)


def apply_corrections(
    results: Sequence[AnalysisResult],
    corrections: Sequence[NormalizationCorrection],
) -> int:
    """
    Write corrections back onto the batch in place.

    Args:
        results: Batch to modify
        corrections: Approved corrections

    Returns:
        Number of corrections that found their record
    """
    applied = 0
    for correction in corrections:
        target = next((r for r in results if r.file_name == correction.file_name), None)
        if target is None:
            logger.debug("No record named %s, correction skipped", correction.file_name)
            continue
        target.set_field(correction.field, correction.corrected)
        applied += 1
    return applied


class ResultNormalizer:
    """
    Convenience wrapper that keeps the options for repeated runs.
    """

    def __init__(self, options: Optional[NormalizationOptions] = None):
        """
        Args:
            options: Normalization options. If None, loads from environment.
        """
        self.options = options or get_config().options

    def normalize(self, results: Sequence[AnalysisResult]) -> NormalizationResult:
        return normalize_results(results, self.options)

    def apply(
        self,
        results: Sequence[AnalysisResult],
        corrections: Sequence[NormalizationCorrection],
    ) -> int:
        return apply_corrections(results, corrections)

    def normalize_and_apply(self, results: Sequence[AnalysisResult]) -> NormalizationResult:
        """Propose corrections and apply all of them immediately."""
        result = self.normalize(results)
        self.apply(results, result.corrections)
        return result

    @staticmethod
    def corrections_for(
        result: NormalizationResult,
        field: CorrectionField,
    ) -> List[NormalizationCorrection]:
        return [c for c in result.corrections if c.field is field]
