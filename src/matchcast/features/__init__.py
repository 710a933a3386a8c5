"""
Team form features for MatchCast.

- `form_summary` turns recent results into form scores and streak counters.
"""
