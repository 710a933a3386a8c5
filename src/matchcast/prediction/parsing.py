# path: src/matchcast/prediction/parsing.py
"""
Parsing of reasoning-provider replies into prediction candidates.

Replies are supposed to be a bare JSON object, but models often wrap it in
prose or markdown fences. We strip fences, try the whole text, and otherwise
take the first well-formed JSON object found in it.
"""

from __future__ import annotations

import json
import re
from typing import Any, Dict, List

from pydantic import ConfigDict, ValidationError

from matchcast.exceptions import ReplyParseError
from matchcast.prediction.types import CamelModel, PredictedScore, PredictionResult
from matchcast.utils.numeric import round_half_up

_FENCE_RE = re.compile(r"```(?:json)?\s*(.*?)\s*```", flags=re.DOTALL | re.IGNORECASE)


class ReplyScore(CamelModel):
    home: float
    away: float


class ProviderReply(CamelModel):
    """Shape the provider is asked to answer with. Numbers may be floats."""

    model_config = ConfigDict(allow_inf_nan=False)

    home_win: float
    draw: float
    away_win: float
    predicted_score: ReplyScore
    confidence: float
    analysis: str
    key_factors: List[str]

    def to_result(self) -> PredictionResult:
        return PredictionResult(
            home_win=round_half_up(self.home_win),
            draw=round_half_up(self.draw),
            away_win=round_half_up(self.away_win),
            predicted_score=PredictedScore(
                home=round_half_up(self.predicted_score.home),
                away=round_half_up(self.predicted_score.away),
            ),
            confidence=round_half_up(self.confidence),
            analysis=self.analysis,
            key_factors=list(self.key_factors),
        )


def _strip_fences(text: str) -> str:
    match = _FENCE_RE.search(text)
    if match:
        return match.group(1).strip()
    return text


def extract_json_object(text: str) -> Dict[str, Any]:
    """
    Return the first JSON object contained in ``text``.

    Raises
    ------
    ReplyParseError
        If the text is empty or contains no well-formed JSON object.
    """
    cleaned = (text or "").strip()
    if not cleaned:
        raise ReplyParseError("Provider reply was empty.")

    cleaned = _strip_fences(cleaned)

    try:
        data = json.loads(cleaned)
    except json.JSONDecodeError:
        data = None
    if isinstance(data, dict):
        return data

    decoder = json.JSONDecoder()
    for match in re.finditer(r"\{", cleaned):
        try:
            candidate, _ = decoder.raw_decode(cleaned, match.start())
        except json.JSONDecodeError:
            continue
        if isinstance(candidate, dict):
            return candidate

    raise ReplyParseError("Provider reply contains no well-formed JSON object.")


def parse_prediction_reply(text: str) -> PredictionResult:
    """
    Parse a provider reply into a (not yet normalized) PredictionResult.

    Raises
    ------
    ReplyParseError
        If no JSON object is found or it lacks the expected fields.
    """
    data = extract_json_object(text)
    try:
        reply = ProviderReply.model_validate(data)
    except ValidationError as exc:
        raise ReplyParseError(
            f"Provider reply has an unexpected shape: {exc.error_count()} error(s)."
        ) from exc
    return reply.to_result()
