# ==============================================
# AnalysisResult
# ==============================================
#
# PURPOSE:
#   One record per photograph, as produced by the upstream AI
#   response parser. The normalizer reads these to build
#   corrections and, on request, overwrites single fields.
#
# CLASS: AnalysisResult (dataclass)
# ---------------------------------
#   Fields used by normalization:
#   - file_name     → Unique key within a batch
#   - station       → Survey marker text (測点), e.g. "No.10+50"
#   - work_type     → 工種
#   - variety       → 種別
#   - detail        → 細別 (accepted as "subphase" on input)
#   - remarks       → 備考
#   - measurements  → Free text carrying numeric readings
#
#   Pass-through fields (kept so a round trip through the CLI
#   does not lose upstream data):
#   - file_path, date, description, detected_text,
#     photo_category, reasoning, has_board
#
#   Methods:
#   --------
#   - from_dict(data: dict) -> AnalysisResult  (classmethod)
#   - to_dict() -> dict
#   - get_field(field) / set_field(field, value)
#       Access the attribute named by a CorrectionField tag.
#
# ==============================================

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict

from .config import parse_bool


# Upstream JSON uses camelCase for some keys; map them to attribute names.
KEY_ALIASES = {
    "fileName": "file_name",
    "filePath": "file_path",
    "workType": "work_type",
    "subphase": "detail",
    "detectedText": "detected_text",
    "photoCategory": "photo_category",
    "hasBoard": "has_board",
}


@dataclass
class AnalysisResult:
    """Analysis output for a single photograph."""

    file_name: str
    station: str = ""
    work_type: str = ""
    variety: str = ""
    detail: str = ""
    remarks: str = ""
    measurements: str = ""

    file_path: str = ""
    date: str = ""
    description: str = ""
    detected_text: str = ""
    photo_category: str = ""
    reasoning: str = ""
    has_board: bool = False

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AnalysisResult":
        """
        Build a record from an upstream JSON object.

        Args:
            data: Parsed JSON object for one photograph

        Returns:
            An AnalysisResult instance

        Raises:
            ValueError: If data is not a dict or has no file name
        """
        if not isinstance(data, dict):
            raise ValueError("Record must be a dictionary")

        known = {f.name for f in fields(cls)}
        kwargs: Dict[str, Any] = {}
        for key, value in data.items():
            name = KEY_ALIASES.get(key, key)
            if name not in known or value is None:
                continue
            if name == "has_board":
                # "false" / "no" arrive as text from some exporters
                kwargs[name] = parse_bool(value, False) if isinstance(value, str) else bool(value)
            else:
                kwargs[name] = str(value)

        if not kwargs.get("file_name"):
            raise ValueError("Required field 'file_name' is missing or empty")

        return cls(**kwargs)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def get_field(self, field) -> str:
        return getattr(self, field.attribute)

    def set_field(self, field, value: str) -> None:
        setattr(self, field.attribute, value)
