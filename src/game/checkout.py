"""
Checkout strategy: which target to aim at for a given remaining score.

The preferences follow the usual PDC checkout chart. The table is fixed data
built once at import time and exposed read-only.
"""
from types import MappingProxyType
from typing import Dict, Optional
import logging

from src.core import DEFAULT_TARGET, Target, TargetType
from src.core.checks import require_integral

logger = logging.getLogger(__name__)

CHECKOUT_MIN_SCORE = 2
CHECKOUT_MAX_SCORE = 170
CHECKOUT_MAX_SINGLE_DART_SCORE = 40
INNER_BULL_SCORE = 50


def _single(number: int) -> Target:
    return Target(TargetType.SINGLE, number, f"S{number}")


def _double(number: int) -> Target:
    return Target(TargetType.DOUBLE, number, f"D{number}")


def _triple(number: int) -> Target:
    return Target(TargetType.TRIPLE, number, f"T{number}")


BULL_TARGET = Target(TargetType.BULL, None, "BULL")

# Odd scores below 50: a single that sets up a favourite double (D1, D2, D4, D8, D16)
_SETUP_SINGLES = {
    3: 1, 5: 1, 7: 3, 9: 1, 11: 3, 13: 5, 15: 7, 17: 9,
    19: 3, 21: 5, 23: 7, 25: 9, 27: 11, 29: 13, 31: 15,
    33: 1, 35: 3, 37: 5, 39: 7, 41: 9, 43: 11, 45: 13, 47: 15, 49: 17,
}

# 60-110: the treble that leaves the best double (or the bull)
_SETUP_TREBLES = {
    60: 20, 61: 11, 62: 10, 63: 13, 64: 14, 65: 11, 66: 10, 67: 13, 68: 18, 69: 19,
    70: 18, 71: 13, 72: 16, 73: 19, 74: 14, 75: 17, 76: 20, 77: 19, 78: 18, 79: 13,
    80: 20, 81: 19, 82: 14, 83: 17, 84: 20, 85: 15, 86: 18, 87: 17, 88: 20, 89: 19,
    90: 18, 91: 17, 92: 20, 93: 19, 94: 18, 95: 19, 96: 20, 97: 19, 98: 20, 99: 19,
    100: 20, 101: 17, 102: 20, 103: 17, 104: 18, 105: 19, 106: 20, 107: 19, 108: 20,
    109: 19, 110: 20,
}


def _build_checkout_table() -> Dict[int, Target]:
    table: Dict[int, Target] = {}

    # 2-40 even: straight double
    for score in range(CHECKOUT_MIN_SCORE, CHECKOUT_MAX_SINGLE_DART_SCORE + 1, 2):
        table[score] = _double(score // 2)

    for score, number in _SETUP_SINGLES.items():
        table[score] = _single(number)

    table[INNER_BULL_SCORE] = BULL_TARGET

    # 51-59: single leaving D20
    for score in range(51, 60):
        table[score] = _single(score - 40)

    for score, number in _SETUP_TREBLES.items():
        table[score] = _triple(number)

    # 111-120: T19 on odd, T20 on even
    for score in range(111, 121):
        table[score] = _triple(19 if score % 2 else 20)

    for score in range(121, CHECKOUT_MAX_SCORE + 1):
        table[score] = _triple(20)

    # 42, 44, 46 and 48 are left out and fall back to DEFAULT_TARGET
    return table


CHECKOUT_TABLE = MappingProxyType(_build_checkout_table())

ONE_DART_FINISHABLE = frozenset(
    list(range(CHECKOUT_MIN_SCORE, CHECKOUT_MAX_SINGLE_DART_SCORE + 1, 2)) + [INNER_BULL_SCORE]
)


def optimal_target(remaining_score: int, throws_remaining: int) -> Optional[Target]:
    """
    Preferred target for a remaining score with a number of darts left.

    Args:
        remaining_score: Points still needed
        throws_remaining: Darts left in the visit

    Returns:
        Target to aim at, or None when there is nothing to plan (no darts,
        game already over, 1 left, or no one-dart finish with the last dart)

    Raises:
        InvalidInputError: If either argument is not an integer
    """
    remaining_score = require_integral(remaining_score, "remaining_score")
    throws_remaining = require_integral(throws_remaining, "throws_remaining")

    if throws_remaining <= 0:
        return None

    if remaining_score <= 0 or remaining_score == 1:
        return None

    if throws_remaining == 1:
        if remaining_score in ONE_DART_FINISHABLE:
            return CHECKOUT_TABLE[remaining_score]
        return None

    target = CHECKOUT_TABLE.get(remaining_score, DEFAULT_TARGET)
    logger.debug(f"Optimal target for {remaining_score} with {throws_remaining} darts: {target.label}")
    return target
