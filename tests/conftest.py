# ==============================================
# Pytest Configuration and Fixtures
# ==============================================
#
# Shared fixtures for all tests.
#
# FIXTURES:
# ---------
# - clean_config (autouse)  → Fresh get_config() singleton, no NORMALIZE_* env
# - make_result             → Factory for AnalysisResult records
# - station_batch           → Three photos, one station spelled differently
# - work_type_batch         → Three photos, one variety spelled differently
# ==============================================

import pytest

from photo_normalizer.config import reset_config
from photo_normalizer.models import AnalysisResult


ENV_VARS = (
    "NORMALIZE_THRESHOLD",
    "NORMALIZE_STATION",
    "NORMALIZE_WORK_TYPE",
    "PROTECT_MEASUREMENTS",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_config(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def make_result():
    """Return a factory: make_result("photo1.jpg", station="No.1")."""
    def _make(file_name, **kwargs):
        return AnalysisResult(file_name=file_name, **kwargs)
    return _make


@pytest.fixture
def station_batch(make_result):
    return [
        make_result("photo1.jpg", station="No.10+50"),
        make_result("photo2.jpg", station="No.10+50"),
        make_result("photo3.jpg", station="No.10.50"),
    ]


@pytest.fixture
def work_type_batch(make_result):
    return [
        make_result("photo1.jpg", work_type="舗装工", variety="舗装打換え工"),
        make_result("photo2.jpg", work_type="舗装工", variety="舗装打換え工"),
        make_result("photo3.jpg", work_type="舗装工", variety="舗装打替え工"),
    ]
