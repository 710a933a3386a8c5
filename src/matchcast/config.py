"""
Global configuration for the MatchCast project.

This module centralizes paths and the constants behind the prediction engine
(form window, heuristic weights, normalizer tolerance, provider defaults),
so you can tweak them in one place.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, TypeVar

from matchcast.utils.logging_utils import get_logger

logger = get_logger(__name__)

_Number = TypeVar("_Number", int, float)

# Project root = folder that contains "src", "data", etc.
PROJECT_ROOT: Path = Path(__file__).resolve().parents[2]

# Data directories
DATA_DIR: Path = PROJECT_ROOT / "data"
RAW_DATA_DIR: Path = DATA_DIR / "raw"

# Default match-history dataset (overridable with MATCHCAST_HISTORY_PATH)
HISTORY_FILENAME: str = "sample_matches.csv"

# Form summary parameters
RECENT_FORM_WINDOW: int = 5  # number of previous matches to consider for form
WIN_POINTS: int = 20
DRAW_POINTS: int = 10
MAX_FORM_SCORE: float = 100.0
NEUTRAL_FORM_SCORE: float = 50.0

# Heuristic predictor weights
HOME_ADVANTAGE: float = 10.0
WIN_STREAK_THRESHOLD: int = 3
WIN_STREAK_BONUS: float = 8.0
DRAW_BASELINE: float = 35.0  # reserved draw mass in the strength total
RANDOM_FACTOR_SPREAD: float = 5.0
HOME_WIN_BOUNDS = (15, 70)
AWAY_WIN_BOUNDS = (10, 60)
HOME_GOALS_MULTIPLIER: float = 3.0
AWAY_GOALS_MULTIPLIER: float = 2.5
HEURISTIC_CONFIDENCE: int = 55

# Output bounds enforced by the normalizer
MAX_HOME_GOALS: int = 5
MAX_AWAY_GOALS: int = 4
CONFIDENCE_BOUNDS = (55, 85)
SUM_TOLERANCE: int = 5
NEUTRAL_SPLIT = (40, 30, 30)  # used only when a candidate has no mass at all
MIN_KEY_FACTORS: int = 3
MAX_KEY_FACTORS: int = 4
DEFAULT_KEY_FACTORS = ["Home advantage", "Recent form", "League position", "Momentum"]

# Reasoning provider defaults
DEFAULT_LLM_BASE_URL: str = "https://api.openai.com/v1"
DEFAULT_LLM_MODEL: str = "gpt-4o-mini"
DEFAULT_LLM_TIMEOUT: float = 30.0
DEFAULT_LLM_TEMPERATURE: float = 0.7
DEFAULT_LLM_MAX_TOKENS: int = 500


def _env_number(name: str, default: _Number, cast: Callable[[str], _Number]) -> _Number:
    """Read a numeric env var, keeping ``default`` when it is unset or malformed."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return cast(raw.strip())
    except ValueError:
        logger.warning("Ignoring invalid %s=%r; using %s.", name, raw, default)
        return default


@dataclass
class ProviderSettings:
    """Connection settings for the chat-completion provider."""

    api_key: str = ""
    base_url: str = DEFAULT_LLM_BASE_URL
    model: str = DEFAULT_LLM_MODEL
    timeout: float = DEFAULT_LLM_TIMEOUT
    temperature: float = DEFAULT_LLM_TEMPERATURE
    max_tokens: int = DEFAULT_LLM_MAX_TOKENS

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    @classmethod
    def from_env(cls) -> "ProviderSettings":
        """Read provider settings from the environment at call time."""
        api_key = (
            os.getenv("MATCHCAST_LLM_API_KEY") or os.getenv("OPENAI_API_KEY") or ""
        ).strip()
        return cls(
            api_key=api_key,
            base_url=(os.getenv("MATCHCAST_LLM_BASE_URL") or DEFAULT_LLM_BASE_URL)
            .strip()
            .rstrip("/"),
            model=(os.getenv("MATCHCAST_LLM_MODEL") or DEFAULT_LLM_MODEL).strip(),
            timeout=_env_number("MATCHCAST_LLM_TIMEOUT", DEFAULT_LLM_TIMEOUT, float),
            temperature=_env_number(
                "MATCHCAST_LLM_TEMPERATURE", DEFAULT_LLM_TEMPERATURE, float
            ),
            max_tokens=_env_number(
                "MATCHCAST_LLM_MAX_TOKENS", DEFAULT_LLM_MAX_TOKENS, int
            ),
        )
