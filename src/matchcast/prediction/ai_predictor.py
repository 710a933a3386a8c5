# path: src/matchcast/prediction/ai_predictor.py
"""
AI-assisted match predictor.

Builds a two-message prompt, asks the reasoning provider once, and parses its
reply into a prediction candidate. Any failure before a usable candidate
exists (no provider, transport error, empty or malformed reply) is replaced
wholesale by the heuristic predictor. A parsed but out-of-bounds candidate is
kept and left to the normalizer.
"""

from __future__ import annotations

from typing import Optional, Tuple

from matchcast.config import DEFAULT_LLM_MAX_TOKENS, DEFAULT_LLM_TEMPERATURE
from matchcast.exceptions import ReplyParseError
from matchcast.prediction.heuristic import HeuristicPredictor, RandomSource
from matchcast.prediction.parsing import parse_prediction_reply
from matchcast.prediction.prompts import build_messages
from matchcast.prediction.provider import ReasoningProvider
from matchcast.prediction.types import PredictionRequest, PredictionResult
from matchcast.utils.logging_utils import get_logger

logger = get_logger(__name__)

SOURCE_AI = "ai"
SOURCE_HEURISTIC = "heuristic"


class AIPredictor:
    """Provider-backed predictor with the heuristic model as its failure path."""

    def __init__(
        self,
        provider: Optional[ReasoningProvider],
        heuristic: HeuristicPredictor | None = None,
        temperature: float = DEFAULT_LLM_TEMPERATURE,
        max_tokens: int = DEFAULT_LLM_MAX_TOKENS,
    ) -> None:
        self.provider = provider
        self.heuristic = heuristic if heuristic is not None else HeuristicPredictor()
        self.temperature = temperature
        self.max_tokens = max_tokens

    def _fallback(
        self, request: PredictionRequest, rng: Optional[RandomSource]
    ) -> Tuple[PredictionResult, str]:
        return self.heuristic.predict(request, rng=rng), SOURCE_HEURISTIC

    def predict_candidate(
        self,
        request: PredictionRequest,
        rng: Optional[RandomSource] = None,
    ) -> Tuple[PredictionResult, str]:
        """
        Return the un-normalized candidate and where it came from
        (SOURCE_AI or SOURCE_HEURISTIC).
        """
        if self.provider is None:
            logger.info("No reasoning provider available; using heuristic.")
            return self._fallback(request, rng)

        try:
            messages = build_messages(request)
            reply = self.provider.complete(
                messages,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
        except Exception as exc:  # noqa: BLE001
            logger.warning(
                "Reasoning provider failed for %s vs %s (%s); using heuristic.",
                request.home_team,
                request.away_team,
                exc,
            )
            return self._fallback(request, rng)

        try:
            candidate = parse_prediction_reply(reply)
        except ReplyParseError as exc:
            logger.warning(
                "Could not parse provider reply (%s); using heuristic. Reply: %.200s",
                exc,
                reply,
            )
            return self._fallback(request, rng)

        return candidate, SOURCE_AI
