"""
Match-outcome prediction for MatchCast.

- `types` defines the request/result wire models.
- `heuristic` is the form-driven fallback model.
- `ai_predictor` consults a reasoning provider and falls back to the heuristic.
- `normalizer` enforces the output invariants on every result.
- `engine` wires everything together behind `predict_match`.
"""
