"""
"01" game rules with double-out: bust detection and finish checks.

Rules:
- Subtract each dart from the remaining score
- Must finish exactly on 0, with a double or the inner bull
- Bust if: score goes below 0, leaves 1, or reaches 0 on a non-double
"""
from typing import Iterable, Optional
import logging

from src.core import BustInfo, BustReason, InvalidInputError, RingType, ThrowResult
from src.core.checks import require_integral

logger = logging.getLogger(__name__)

MAX_SINGLE_DART_SCORE = 60
IMPOSSIBLE_FINISH_SCORE = 1


def is_double_ring(ring: Optional[RingType]) -> bool:
    """True for rings that can finish a double-out leg (doubles and inner bull)."""
    return ring in (RingType.DOUBLE, RingType.INNER_BULL)


def check_bust(remaining_score: int, throw_score: int, is_double: bool) -> BustInfo:
    """
    Judge one dart (or visit total) against the remaining score.

    Checks run in order: over, left on 1, finished without a double.

    Args:
        remaining_score: Points needed before the dart (positive)
        throw_score: Points scored (0-60)
        is_double: Whether the dart landed in a double or the inner bull

    Raises:
        InvalidInputError: If remaining_score is not a positive integer, or
            throw_score is not an integer in 0-60
    """
    remaining_score = require_integral(remaining_score, "remaining_score")
    if remaining_score <= 0:
        raise InvalidInputError(f"remaining_score must be positive, got {remaining_score}")

    throw_score = require_integral(throw_score, "throw_score")
    if not 0 <= throw_score <= MAX_SINGLE_DART_SCORE:
        raise InvalidInputError(f"throw_score must be between 0 and 60, got {throw_score}")

    new_score = remaining_score - throw_score

    if new_score < 0:
        return BustInfo(True, BustReason.OVER)

    if new_score == IMPOSSIBLE_FINISH_SCORE:
        return BustInfo(True, BustReason.FINISH_IMPOSSIBLE)

    if new_score == 0 and not is_double:
        return BustInfo(True, BustReason.DOUBLE_OUT_REQUIRED)

    return BustInfo(False, None)


def check_bust_from_throws(
        throws: Iterable[ThrowResult],
        initial_remaining_score: int
) -> Optional[BustInfo]:
    """
    Walk a visit dart by dart and report the first bust.

    Darts after a finish or a bust are not judged.

    Returns:
        BustInfo of the first busting dart, or None if the visit is clean
    """
    current_remaining = initial_remaining_score

    for index, throw in enumerate(throws):
        if current_remaining == 0:
            break

        result = check_bust(current_remaining, throw.score, is_double_ring(throw.ring))
        if result.is_bust:
            logger.debug(f"Bust on dart {index + 1}: {result.reason.value}")
            return result

        current_remaining -= throw.score

    return None


def can_finish_with_double(remaining_score: int) -> bool:
    """
    Whether one dart can finish: even 2-40 (D1-D20) or 50 (inner bull).

    Raises:
        InvalidInputError: If remaining_score is not an integer
    """
    remaining_score = require_integral(remaining_score, "remaining_score")

    if remaining_score <= 0 or remaining_score % 2 != 0:
        return False

    return remaining_score == 50 or 2 <= remaining_score <= 40


def is_game_finished(remaining_score: int) -> bool:
    """
    Whether a leg is over.

    Raises:
        InvalidInputError: If remaining_score is negative or not an integer
    """
    remaining_score = require_integral(remaining_score, "remaining_score")
    if remaining_score < 0:
        raise InvalidInputError(f"remaining_score cannot be negative, got {remaining_score}")
    return remaining_score == 0
