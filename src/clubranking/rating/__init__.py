from clubranking.rating.ttr import (
    accumulate_deltas,
    expected_score,
    match_delta,
    round_half_away_from_zero,
)

__all__ = [
    "accumulate_deltas",
    "expected_score",
    "match_delta",
    "round_half_away_from_zero",
]
