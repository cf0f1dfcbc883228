# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load and validate normalization settings from environment
#   variables / .env file. Provides typed config objects to the
#   CLI and to any caller that wants environment-driven defaults.
#
# CLASSES:
# --------
# - NormalizationOptions (dataclass)
#     normalize_station: bool      (default True)
#     normalize_work_type: bool    (default True)
#     threshold: float             (default 0.6, must be within 0.0..1.0)
#     protect_measurements: bool   (default True)
#
# - AppConfig (dataclass)
#     options: NormalizationOptions
#     log_level: str               (default "WARNING")
#
# FUNCTIONS:
# ----------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# - reset_config() -> None
#     Drop the cached singleton (tests, long-running shells).
#
# ENVIRONMENT:
# ------------
#   NORMALIZE_THRESHOLD    → options.threshold
#   NORMALIZE_STATION      → options.normalize_station
#   NORMALIZE_WORK_TYPE    → options.normalize_work_type
#   PROTECT_MEASUREMENTS   → options.protect_measurements
#   LOG_LEVEL              → log_level
#
# USAGE:
# ------
#   from photo_normalizer.config import get_config
#   config = get_config()
#   print(config.options.threshold)
#
# ==============================================

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


TRUE_VARIANTS = {"1", "true", "yes", "on"}
FALSE_VARIANTS = {"0", "false", "no", "off"}
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass
class NormalizationOptions:
    """Switches and threshold for a normalization run."""
    normalize_station: bool = True
    normalize_work_type: bool = True
    threshold: float = 0.6
    protect_measurements: bool = True

    def __post_init__(self):
        if not 0.0 <= self.threshold <= 1.0:
            raise ValueError(
                f"threshold must be between 0.0 and 1.0, got {self.threshold}"
            )


@dataclass
class AppConfig:
    """Main application configuration."""
    options: NormalizationOptions = field(default_factory=NormalizationOptions)
    log_level: str = "WARNING"


# Singleton instance
_config_instance: Optional[AppConfig] = None


def parse_bool(raw: str, default: bool) -> bool:
    """Read yes/no style text; unrecognised text gives default."""
    value = raw.strip().lower()
    if value in TRUE_VARIANTS:
        return True
    if value in FALSE_VARIANTS:
        return False
    return default


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return parse_bool(raw, default)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Application configuration

    Raises:
        ValueError: If NORMALIZE_THRESHOLD is not a number in 0.0..1.0
            or LOG_LEVEL is not a logging level name
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    options = NormalizationOptions(
        normalize_station=_env_bool("NORMALIZE_STATION", True),
        normalize_work_type=_env_bool("NORMALIZE_WORK_TYPE", True),
        threshold=_env_float("NORMALIZE_THRESHOLD", 0.6),
        protect_measurements=_env_bool("PROTECT_MEASUREMENTS", True),
    )

    log_level = os.getenv("LOG_LEVEL", "WARNING").strip().upper()
    if log_level not in LOG_LEVELS:
        raise ValueError(f"LOG_LEVEL must be one of {sorted(LOG_LEVELS)}, got {log_level!r}")

    _config_instance = AppConfig(options=options, log_level=log_level)

    return _config_instance


def reset_config() -> None:
    """Forget the cached configuration so the next get_config() reloads it."""
    global _config_instance
    _config_instance = None
