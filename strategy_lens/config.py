"""
Centralized configuration for Strategy Lens.
Analysis constants and environment-driven server settings in one place.
"""

import os
from dataclasses import dataclass
from typing import Tuple

from dotenv import load_dotenv

from strategy_lens.logger import logger

load_dotenv()


# --- ANALYSIS SETTINGS ---
@dataclass(frozen=True)
class AnalysisSettings:
    """Defaults shared by the metric classifiers."""
    rate_unit: str = "percent"         # win rate / Kelly: 0-100
    duration_unit: str = "hours"
    fallback_color: str = "text-gray-400"
    # Order of cards on the strategy detail page
    report_order: Tuple[str, ...] = (
        "sharpeRatio",
        "winRate",
        "maxDrawdown",
        "profitFactor",
        "avgTradeDuration",
        "kellyPercent",
    )


ANALYSIS = AnalysisSettings()


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


class Config:
    """Runtime configuration with environment variables."""

    # --- HTTP SURFACE ---
    API_HOST = os.getenv("API_HOST", "0.0.0.0")
    API_PORT = int(os.getenv("API_PORT", "8000"))
    API_KEY = os.getenv("API_KEY")

    # --- LOGGING ---
    LOG_JSON = _env_bool("LOG_JSON", True)
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    @classmethod
    def validate(cls):
        """Sanity check. Called via Server Lifespan."""
        if not 0 < cls.API_PORT < 65536:
            raise ValueError(f"API_PORT out of range: {cls.API_PORT}")
        if not cls.API_KEY:
            logger.warning("api_key_missing", detail="X-API-KEY check disabled")
