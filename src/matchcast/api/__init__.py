"""
FastAPI prediction service for MatchCast.

Exposes endpoints to:
- Predict a fixture from caller-supplied or history-derived team form.
- Inspect a team's recent form summary.
"""
