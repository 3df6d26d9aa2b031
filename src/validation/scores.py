"""
Membership checks for scores a player can type in.

Used for real-time input feedback; none of these raise.
"""
from itertools import product
from typing import FrozenSet

from src.core.checks import is_integral


def _generate_valid_scores() -> FrozenSet[int]:
    scores = {0, 25, 50}  # Miss, outer bull, inner bull
    for number in range(1, 21):
        scores.update((number, number * 2, number * 3))
    return frozenset(scores)


# Built once at import
VALID_SINGLE_SCORES = _generate_valid_scores()
VALID_ROUND_SCORES = frozenset(sum(darts) for darts in product(VALID_SINGLE_SCORES, repeat=3))


def valid_single_scores() -> FrozenSet[int]:
    """All 44 scores a single dart can make."""
    return frozenset(VALID_SINGLE_SCORES)


def is_valid_single_throw_score(score) -> bool:
    """
    Whether one dart can score this.

    Valid: 0, 1-20, even 2-40, multiples of 3 up to 60, 25 and 50.
    Non-integers, NaN and infinities are invalid.
    """
    return is_integral(score) and int(score) in VALID_SINGLE_SCORES


def is_valid_round_score(score) -> bool:
    """
    Whether three darts can total this.

    Some totals in 0-180 are unreachable (163, 166, 169, 172, 173, 175,
    176, 178, 179).
    """
    return is_integral(score) and int(score) in VALID_ROUND_SCORES


def is_valid_remaining_score_transition(remaining, current) -> bool:
    """
    Whether scoring ``current`` from ``remaining`` keeps a double-out leg alive.

    False when either value is non-finite, fractional or negative, when the
    score overshoots, or when it leaves exactly 1. Leaving 0 is valid.
    """
    if not is_integral(remaining) or not is_integral(current):
        return False

    if remaining < 0 or current < 0:
        return False

    new_remaining = int(remaining) - int(current)
    return new_remaining >= 0 and new_remaining != 1
