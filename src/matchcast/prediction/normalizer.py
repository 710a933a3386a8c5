# path: src/matchcast/prediction/normalizer.py
"""
Result normalizer for MatchCast.

Every prediction passes through ``normalize_result`` before it is returned,
whichever predictor produced it. It never rejects a candidate:

- Percentages drifting more than ``tolerance`` from 100 are rescaled
  (home and draw proportionally, rounded half-up).
- ``away_win`` is always recomputed as ``100 - home_win - draw`` so the three
  values sum to exactly 100; it absorbs all rounding error.
- A candidate with no mass, or one whose total overflows, gets the neutral
  split.
- Confidence and predicted goals are clamped to their ranges.
- Key factors are trimmed or padded to 3-4 entries; an empty analysis gets a
  templated sentence.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Tuple

from matchcast.config import (
    CONFIDENCE_BOUNDS,
    DEFAULT_KEY_FACTORS,
    MAX_AWAY_GOALS,
    MAX_HOME_GOALS,
    MAX_KEY_FACTORS,
    MIN_KEY_FACTORS,
    NEUTRAL_SPLIT,
    SUM_TOLERANCE,
)
from matchcast.prediction.types import PredictedScore, PredictionResult
from matchcast.utils.logging_utils import get_logger
from matchcast.utils.numeric import clamp, round_half_up

logger = get_logger(__name__)

DEFAULT_ANALYSIS = "Prediction based on recent form and home advantage."


@dataclass
class NormalizerConfig:
    """Tolerance and bounds enforced on every returned prediction."""

    tolerance: int = SUM_TOLERANCE
    target_total: int = 100
    confidence_bounds: Tuple[int, int] = CONFIDENCE_BOUNDS
    max_home_goals: int = MAX_HOME_GOALS
    max_away_goals: int = MAX_AWAY_GOALS
    min_key_factors: int = MIN_KEY_FACTORS
    max_key_factors: int = MAX_KEY_FACTORS
    default_key_factors: List[str] = field(
        default_factory=lambda: list(DEFAULT_KEY_FACTORS)
    )
    neutral_split: Tuple[int, int, int] = NEUTRAL_SPLIT


def normalize_percentages(
    home_win: float,
    draw: float,
    away_win: float,
    config: NormalizerConfig | None = None,
) -> Tuple[int, int, int]:
    """
    Return (home_win, draw, away_win) as integers summing to the target.

    Parameters
    ----------
    home_win, draw, away_win : float
        Candidate percentages, possibly negative or far from summing to 100.
    config : NormalizerConfig | None
        Tolerance and neutral split. Defaults to NormalizerConfig().

    Returns
    -------
    Tuple[int, int, int]
    """
    cfg = config if config is not None else NormalizerConfig()
    target = cfg.target_total

    home_win = max(0.0, float(home_win))
    draw = max(0.0, float(draw))
    away_win = max(0.0, float(away_win))
    total = home_win + draw + away_win

    if total <= 0:
        logger.warning("Candidate has no probability mass; using neutral split.")
        return cfg.neutral_split
    if not math.isfinite(total):
        logger.warning("Candidate percentages overflow; using neutral split.")
        return cfg.neutral_split

    if abs(total - target) > cfg.tolerance:
        logger.info(
            "Rescaling percentages %.1f/%.1f/%.1f (total %.1f).",
            home_win,
            draw,
            away_win,
            total,
        )
        home = round_half_up(home_win * target / total)
        drw = round_half_up(draw * target / total)
    else:
        home = round_half_up(home_win)
        drw = round_half_up(draw)

    # home + draw can overshoot by rounding, or by in-tolerance drift
    home = min(home, target)
    drw = min(drw, target - home)
    away = target - home - drw
    return home, drw, away


def _normalize_key_factors(factors: List[str], cfg: NormalizerConfig) -> List[str]:
    cleaned: List[str] = []
    for factor in factors:
        text = str(factor).strip()
        if text and text not in cleaned:
            cleaned.append(text)
    cleaned = cleaned[: cfg.max_key_factors]

    for default in cfg.default_key_factors:
        if len(cleaned) >= cfg.min_key_factors:
            break
        if default not in cleaned:
            cleaned.append(default)
    return cleaned


def normalize_result(
    candidate: PredictionResult,
    config: NormalizerConfig | None = None,
) -> PredictionResult:
    """
    Enforce the output invariants on a candidate prediction.

    Applying it to an already-valid result returns an equal result.
    """
    cfg = config if config is not None else NormalizerConfig()

    home_win, draw, away_win = normalize_percentages(
        candidate.home_win, candidate.draw, candidate.away_win, cfg
    )
    score = PredictedScore(
        home=int(clamp(candidate.predicted_score.home, 0, cfg.max_home_goals)),
        away=int(clamp(candidate.predicted_score.away, 0, cfg.max_away_goals)),
    )
    confidence = int(clamp(candidate.confidence, *cfg.confidence_bounds))
    analysis = candidate.analysis.strip() or DEFAULT_ANALYSIS

    return PredictionResult(
        home_win=home_win,
        draw=draw,
        away_win=away_win,
        predicted_score=score,
        confidence=confidence,
        analysis=analysis,
        key_factors=_normalize_key_factors(candidate.key_factors, cfg),
    )
