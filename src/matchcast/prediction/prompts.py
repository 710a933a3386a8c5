# path: src/matchcast/prediction/prompts.py
"""
Prompt construction for the AI-assisted predictor.
"""

from __future__ import annotations

from typing import List, Optional

from matchcast.prediction.provider import Message
from matchcast.prediction.types import FormSummary, PredictionRequest

SYSTEM_PROMPT = (
    "You are an expert football analyst AI. Your task is to predict match "
    "outcomes based on team form, standings, and other factors. Always respond "
    "with valid JSON only, no markdown or explanation outside the JSON."
)

REPLY_FORMAT = """Respond with ONLY a JSON object in this exact format:
{
  "homeWin": <number 0-100>,
  "draw": <number 0-100>,
  "awayWin": <number 0-100>,
  "predictedScore": { "home": <number>, "away": <number> },
  "confidence": <number 55-85>,
  "analysis": "<2-3 sentence analysis of the match>",
  "keyFactors": ["<factor 1>", "<factor 2>", "<factor 3>"]
}

The three percentages MUST sum to exactly 100."""

CONSIDERATIONS = """Consider:
1. Home advantage (typically worth 10-15% in football)
2. Recent form and momentum
3. Goal scoring and defensive record
4. League position and motivation
5. Any notable streaks"""


def format_results(form: FormSummary) -> str:
    """Render results as a short marker string, e.g. 'W, D, L, W, W'."""
    return ", ".join(result.outcome.value for result in form.last_results)


def format_form(team: str, form: Optional[FormSummary]) -> str:
    """Describe one side's form as a bullet block."""
    lines = [f"{team}:"]
    if form is None:
        lines.append("- Form data not available")
        return "\n".join(lines)

    lines.append(f"- Form Score: {form.form_score:.0f}%")
    if form.last_results:
        count = len(form.last_results)
        scored = sum(result.goals_for for result in form.last_results)
        conceded = sum(result.goals_against for result in form.last_results)
        lines.append(f"- Last {count} matches: {format_results(form)}")
        lines.append(f"- Goals scored in last {count}: {scored}")
        lines.append(f"- Goals conceded in last {count}: {conceded}")
    if form.win_streak:
        lines.append(f"- Current win streak: {form.win_streak} matches")
    if form.unbeaten_streak:
        lines.append(f"- Unbeaten in: {form.unbeaten_streak} matches")
    return "\n".join(lines)


def build_user_prompt(request: PredictionRequest) -> str:
    sections: List[str] = [
        "Analyze this upcoming football match and provide a prediction:",
        f"Match: {request.home_team} vs {request.away_team}",
    ]
    if request.competition:
        sections.append(f"Competition: {request.competition}")

    sections.append(format_form(f"Home Team ({request.home_team})", request.home_form))
    sections.append(format_form(f"Away Team ({request.away_team})", request.away_form))

    if request.home_rank is not None or request.away_rank is not None:
        home_rank = request.home_rank if request.home_rank is not None else "unknown"
        away_rank = request.away_rank if request.away_rank is not None else "unknown"
        sections.append(
            "League Standings:\n"
            f"- {request.home_team}: rank {home_rank}\n"
            f"- {request.away_team}: rank {away_rank}"
        )

    sections.append(CONSIDERATIONS)
    sections.append(REPLY_FORMAT)
    return "\n\n".join(sections)


def build_messages(request: PredictionRequest) -> List[Message]:
    """The two-message exchange sent to the reasoning provider."""
    return [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": build_user_prompt(request)},
    ]
