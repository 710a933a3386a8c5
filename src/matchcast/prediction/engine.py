# path: src/matchcast/prediction/engine.py
"""
Entry point of the prediction engine.

``predict_match`` routes a request to the AI-assisted predictor when a
reasoning provider is available and to the heuristic predictor otherwise.
Its result always goes through the normalizer. Nothing is cached between
calls.
"""

from __future__ import annotations

from typing import Optional

import pandas as pd

from matchcast.config import RECENT_FORM_WINDOW
from matchcast.features.form_summary import form_from_history
from matchcast.prediction.ai_predictor import SOURCE_HEURISTIC, AIPredictor
from matchcast.prediction.heuristic import HeuristicConfig, HeuristicPredictor, RandomSource
from matchcast.prediction.normalizer import NormalizerConfig, normalize_result
from matchcast.prediction.provider import ReasoningProvider
from matchcast.prediction.types import Fixture, PredictionRequest, PredictionResult
from matchcast.utils.logging_utils import get_logger

logger = get_logger(__name__)


def predict_match(
    request: PredictionRequest,
    provider: Optional[ReasoningProvider] = None,
    rng: Optional[RandomSource] = None,
    normalizer_config: NormalizerConfig | None = None,
    heuristic_config: HeuristicConfig | None = None,
) -> PredictionResult:
    """
    Predict the outcome of a fixture.

    Parameters
    ----------
    request : PredictionRequest
        Fixture and optional form/standings context.
    provider : ReasoningProvider | None
        Reasoning provider to consult. None means heuristic only.
    rng : RandomSource | None
        Random source for the heuristic; a fresh generator per call if None.
    normalizer_config : NormalizerConfig | None
        Overrides for the output normalizer.
    heuristic_config : HeuristicConfig | None
        Overrides for the heuristic weights.

    Returns
    -------
    PredictionResult
        Always satisfies the output invariants.
    """
    heuristic = HeuristicPredictor(heuristic_config)

    if provider is None:
        candidate = heuristic.predict(request, rng=rng)
        source = SOURCE_HEURISTIC
    else:
        predictor = AIPredictor(provider, heuristic=heuristic)
        candidate, source = predictor.predict_candidate(request, rng=rng)

    result = normalize_result(candidate, normalizer_config)
    logger.info(
        "Prediction %s vs %s from %s: %d/%d/%d, score %d-%d, confidence %d",
        request.home_team,
        request.away_team,
        source,
        result.home_win,
        result.draw,
        result.away_win,
        result.predicted_score.home,
        result.predicted_score.away,
        result.confidence,
    )
    return result


def request_from_history(
    fixture: Fixture,
    matches_df: pd.DataFrame,
    window: int = RECENT_FORM_WINDOW,
) -> PredictionRequest:
    """
    Attach form summaries built from match history to a fixture.

    A team without history keeps ``None`` form, which the predictors treat as
    neutral.
    """
    return PredictionRequest(
        **fixture.model_dump(include=set(Fixture.model_fields)),
        home_form=form_from_history(matches_df, fixture.home_team, window=window),
        away_form=form_from_history(matches_df, fixture.away_team, window=window),
    )
