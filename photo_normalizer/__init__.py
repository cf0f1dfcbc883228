# ==============================================
# Construction Photo Consensus Normalizer
# ==============================================
#
# Package Structure (3 Topics + Orchestrator):
#
# photo_normalizer/
# ├── detection/           # Topic 1: Detect measurements, check temperatures
# ├── normalization/       # Topic 2: Canonicalize station / work type text
# ├── consensus/           # Topic 3: Majority vote → correction proposals
# ├── models.py            # AnalysisResult record
# ├── config.py            # Configuration management
# ├── result_normalizer.py # Final orchestrator (normalize + apply)
# └── cli.py               # Command line entry point
#
# ==============================================

from .config import NormalizationOptions
from .models import AnalysisResult
from .consensus.correction import (
    CorrectionField,
    NormalizationCorrection,
    NormalizationResult,
    NormalizationStats,
)
from .result_normalizer import ResultNormalizer, apply_corrections, normalize_results

__version__ = "0.1.0"

__all__ = [
    "AnalysisResult",
    "CorrectionField",
    "NormalizationCorrection",
    "NormalizationOptions",
    "NormalizationResult",
    "NormalizationStats",
    "ResultNormalizer",
    "apply_corrections",
    "normalize_results",
]
