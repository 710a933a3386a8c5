# path: src/matchcast/prediction/heuristic.py
"""
Heuristic match predictor.

Turns two form summaries into a bounded home/draw/away split, a predicted
score and a fixed confidence, without calling any external service. It is
both the fast path and the recovery path for the AI-assisted predictor.

One random perturbation is drawn per call, so identical inputs do not give
identical distributions. Pass ``rng`` (anything with ``uniform(low, high)``)
to pin it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Tuple

import numpy as np

from matchcast.config import (
    AWAY_GOALS_MULTIPLIER,
    AWAY_WIN_BOUNDS,
    DEFAULT_KEY_FACTORS,
    DRAW_BASELINE,
    HEURISTIC_CONFIDENCE,
    HOME_ADVANTAGE,
    HOME_GOALS_MULTIPLIER,
    HOME_WIN_BOUNDS,
    MAX_AWAY_GOALS,
    MAX_HOME_GOALS,
    RANDOM_FACTOR_SPREAD,
    WIN_STREAK_BONUS,
    WIN_STREAK_THRESHOLD,
)
from matchcast.features.form_summary import neutral_form
from matchcast.prediction.types import (
    FormSummary,
    PredictedScore,
    PredictionRequest,
    PredictionResult,
)
from matchcast.utils.logging_utils import get_logger
from matchcast.utils.numeric import clamp, round_half_up

logger = get_logger(__name__)


class RandomSource(Protocol):
    def uniform(self, low: float, high: float) -> float: ...


@dataclass
class HeuristicConfig:
    """Weights and bounds for the heuristic model."""

    home_advantage: float = HOME_ADVANTAGE
    win_streak_threshold: int = WIN_STREAK_THRESHOLD
    win_streak_bonus: float = WIN_STREAK_BONUS
    draw_baseline: float = DRAW_BASELINE
    random_factor_spread: float = RANDOM_FACTOR_SPREAD
    home_win_bounds: Tuple[int, int] = HOME_WIN_BOUNDS
    away_win_bounds: Tuple[int, int] = AWAY_WIN_BOUNDS
    home_goals_multiplier: float = HOME_GOALS_MULTIPLIER
    away_goals_multiplier: float = AWAY_GOALS_MULTIPLIER
    max_home_goals: int = MAX_HOME_GOALS
    max_away_goals: int = MAX_AWAY_GOALS
    confidence: int = HEURISTIC_CONFIDENCE
    key_factors: List[str] = field(default_factory=lambda: list(DEFAULT_KEY_FACTORS))


class HeuristicPredictor:
    """Form-driven predictor with a single randomized term."""

    def __init__(self, config: HeuristicConfig | None = None) -> None:
        self.config = config if config is not None else HeuristicConfig()

    def strengths(
        self, home_form: FormSummary, away_form: FormSummary
    ) -> Tuple[float, float]:
        """Home and away strength before the random perturbation."""
        cfg = self.config
        home_strength = home_form.form_score + cfg.home_advantage
        away_strength = away_form.form_score

        # Flat bonus, not compounding with longer streaks
        if home_form.win_streak >= cfg.win_streak_threshold:
            home_strength += cfg.win_streak_bonus
        if away_form.win_streak >= cfg.win_streak_threshold:
            away_strength += cfg.win_streak_bonus

        return home_strength, away_strength

    def predict(
        self,
        request: PredictionRequest,
        rng: Optional[RandomSource] = None,
    ) -> PredictionResult:
        """
        Produce a candidate prediction for ``request``.

        The returned ``draw`` can be negative for extreme inputs; run the
        result through ``normalize_result`` before handing it out.
        """
        cfg = self.config
        if rng is None:
            rng = np.random.default_rng()

        home_form = request.home_form or neutral_form()
        away_form = request.away_form or neutral_form()

        home_strength, away_strength = self.strengths(home_form, away_form)
        spread = cfg.random_factor_spread
        random_factor = float(rng.uniform(-spread, spread))
        total = home_strength + away_strength + cfg.draw_baseline

        home_win = int(
            clamp(
                round_half_up((home_strength + random_factor) / total * 100),
                *cfg.home_win_bounds,
            )
        )
        away_win = int(
            clamp(
                round_half_up((away_strength - random_factor) / total * 100),
                *cfg.away_win_bounds,
            )
        )
        draw = 100 - home_win - away_win

        home_goals = int(
            clamp(
                round_half_up(
                    home_win / 100 * cfg.home_goals_multiplier
                    + float(rng.uniform(0, 1))
                ),
                0,
                cfg.max_home_goals,
            )
        )
        away_goals = int(
            clamp(
                round_half_up(
                    away_win / 100 * cfg.away_goals_multiplier
                    + float(rng.uniform(0, 1))
                ),
                0,
                cfg.max_away_goals,
            )
        )

        logger.debug(
            "Heuristic %s vs %s: strengths=(%.1f, %.1f) factor=%.2f -> %d/%d/%d",
            request.home_team,
            request.away_team,
            home_strength,
            away_strength,
            random_factor,
            home_win,
            draw,
            away_win,
        )

        return PredictionResult(
            home_win=home_win,
            draw=draw,
            away_win=away_win,
            predicted_score=PredictedScore(home=home_goals, away=away_goals),
            confidence=cfg.confidence,
            analysis=build_analysis(request.home_team, request.away_team),
            key_factors=list(cfg.key_factors),
        )


def build_analysis(home_team: str, away_team: str) -> str:
    """Templated rationale naming both teams."""
    return (
        f"{home_team} hold the edge playing at home against {away_team}, "
        f"with recent form and momentum deciding how large it is."
    )
