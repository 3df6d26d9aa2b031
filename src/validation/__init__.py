"""
Validation module - legal single-dart, round and remaining-score checks.
"""
from .scores import (
    VALID_SINGLE_SCORES,
    VALID_ROUND_SCORES,
    valid_single_scores,
    is_valid_single_throw_score,
    is_valid_round_score,
    is_valid_remaining_score_transition,
)

__all__ = [
    "VALID_SINGLE_SCORES",
    "VALID_ROUND_SCORES",
    "valid_single_scores",
    "is_valid_single_throw_score",
    "is_valid_round_score",
    "is_valid_remaining_score_transition",
]
