# ==============================================
# Correction (Data Classes)
# ==============================================
#
# PURPOSE:
#   Data classes that represent the OUTPUT of normalization:
#   proposed corrections and the statistics of a run.
#   A correction is a proposal, not a mutation; the caller
#   decides whether to apply it.
#
# ENUMS:
# ------
# - CorrectionField(Enum): STATION, WORK_TYPE, VARIETY, DETAIL, REMARKS
#     Which AnalysisResult attribute a correction targets.
#     Each member carries `attribute` (python attribute name) and
#     `label` (display label used in reasons).
#
# CLASSES:
# --------
# - NormalizationCorrection (frozen dataclass)
#     file_name, field, original, corrected, reason
#
# - NormalizationStats (dataclass)
#     total_records               → Records in the batch
#     corrected_records           → Distinct file names with a correction
#     station_corrections         → Corrections on station
#     work_type_corrections       → Corrections on work type / variety / detail
#     skipped_due_to_measurements → Records protected by a measurement
#
# - NormalizationResult (dataclass)
#     corrections + stats, with summary() for reporting
#
# ==============================================

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class CorrectionField(Enum):
    """
    Target field of a correction.

    - STATION:   測点
    - WORK_TYPE: 工種
    - VARIETY:   種別
    - DETAIL:    細別
    - REMARKS:   備考
    """
    STATION = ("station", "測点")
    WORK_TYPE = ("work_type", "工種")
    VARIETY = ("variety", "種別")
    DETAIL = ("detail", "細別")
    REMARKS = ("remarks", "備考")

    def __init__(self, attribute: str, label: str):
        self.attribute = attribute
        self.label = label

    def __str__(self) -> str:
        return self.label

    @classmethod
    def from_attribute(cls, attribute: str) -> "CorrectionField":
        """
        Look a member up by its attribute name.

        Raises:
            ValueError: If no member targets that attribute
        """
        for member in cls:
            if member.attribute == attribute:
                return member
        raise ValueError(f"Unknown correction field: {attribute!r}")


CATEGORICAL_FIELDS = (
    CorrectionField.WORK_TYPE,
    CorrectionField.VARIETY,
    CorrectionField.DETAIL,
)


@dataclass(frozen=True)
class NormalizationCorrection:
    """A proposed single-field change to one record."""

    file_name: str  # Which record
    field: CorrectionField  # Which attribute of that record
    original: str  # Value before the correction
    corrected: str  # Value after the correction
    reason: str = ""  # Human-readable explanation

    def to_dict(self) -> Dict[str, Any]:
        return {
            "file_name": self.file_name,
            "field": self.field.attribute,
            "original": self.original,
            "corrected": self.corrected,
            "reason": self.reason,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "NormalizationCorrection":
        return cls(
            file_name=data["file_name"],
            field=CorrectionField.from_attribute(data["field"]),
            original=data.get("original", ""),
            corrected=data.get("corrected", ""),
            reason=data.get("reason", ""),
        )


@dataclass
class NormalizationStats:
    """Counters for one normalization run."""
    total_records: int = 0
    corrected_records: int = 0
    station_corrections: int = 0
    work_type_corrections: int = 0
    skipped_due_to_measurements: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "total_records": self.total_records,
            "corrected_records": self.corrected_records,
            "station_corrections": self.station_corrections,
            "work_type_corrections": self.work_type_corrections,
            "skipped_due_to_measurements": self.skipped_due_to_measurements,
        }


@dataclass
class NormalizationResult:
    """Corrections proposed for a batch plus run statistics."""
    corrections: List[NormalizationCorrection] = field(default_factory=list)
    stats: NormalizationStats = field(default_factory=NormalizationStats)

    @property
    def has_corrections(self) -> bool:
        return bool(self.corrections)

    def summary(self) -> Dict[str, Any]:
        """
        Group corrections by field label for display.

        Returns:
            {"stats": {...}, "by_field": {"測点": [{"file_name": ..., ...}]}}
        """
        by_field: Dict[str, List[Dict[str, str]]] = {}
        for correction in self.corrections:
            by_field.setdefault(correction.field.label, []).append({
                "file_name": correction.file_name,
                "original": correction.original,
                "corrected": correction.corrected,
            })
        return {"stats": self.stats.to_dict(), "by_field": by_field}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "corrections": [c.to_dict() for c in self.corrections],
            "stats": self.stats.to_dict(),
        }
