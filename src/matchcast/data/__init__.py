"""
Data layer for MatchCast.

Includes:
- Match-history schema and validation (`schema`)
- Loading utilities (`data_loader`)
"""
