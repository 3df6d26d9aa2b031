"""
Unit tests for "01" rules and leg tracking.
"""
import pytest

from src.core import BustInfo, BustReason, InvalidInputError, Point, RingType, Target, TargetType, ThrowResult
from src.game import (
    X01Leg, can_finish_with_double, check_bust, check_bust_from_throws,
    is_double_ring, is_game_finished
)


def dart(score, ring=RingType.INNER_SINGLE, number=None):
    """Build a thrown dart with the given outcome."""
    return ThrowResult(
        target=Target(TargetType.TRIPLE, 20, "T20"),
        landing_point=Point(0.0, 0.0),
        score=score,
        ring=ring,
        segment_number=number,
    )


def test_check_bust():
    """Test bust outcomes."""
    assert check_bust(20, 30, False) == BustInfo(True, BustReason.OVER)
    assert check_bust(20, 19, False) == BustInfo(True, BustReason.FINISH_IMPOSSIBLE)
    assert check_bust(20, 20, False) == BustInfo(True, BustReason.DOUBLE_OUT_REQUIRED)
    assert check_bust(20, 20, True) == BustInfo(False, None)
    assert check_bust(40, 21, False) == BustInfo(False, None)


def test_check_bust_priority():
    """Overshoot wins over everything, leaving 1 wins over the double rule."""
    assert check_bust(2, 3, True).reason == BustReason.OVER
    assert check_bust(3, 2, True).reason == BustReason.FINISH_IMPOSSIBLE


def test_check_bust_invalid_input():
    with pytest.raises(InvalidInputError):
        check_bust(0, 5, True)
    with pytest.raises(InvalidInputError):
        check_bust(-1, 5, True)
    with pytest.raises(InvalidInputError):
        check_bust(10, 61, False)
    with pytest.raises(InvalidInputError):
        check_bust(10, -1, False)
    with pytest.raises(InvalidInputError):
        check_bust(10, 2.5, False)


def test_is_double_ring():
    assert is_double_ring(RingType.DOUBLE)
    assert is_double_ring(RingType.INNER_BULL)
    assert not is_double_ring(RingType.OUTER_BULL)
    assert not is_double_ring(RingType.TRIPLE)
    assert not is_double_ring(None)


def test_check_bust_from_throws():
    """The first busting dart decides."""
    visit = [dart(60, RingType.TRIPLE), dart(20), dart(20)]

    assert check_bust_from_throws(visit, 501) is None
    assert check_bust_from_throws(visit, 100) == BustInfo(True, BustReason.DOUBLE_OUT_REQUIRED)
    assert check_bust_from_throws(visit, 50) == BustInfo(True, BustReason.OVER)
    assert check_bust_from_throws(visit, 81) == BustInfo(True, BustReason.FINISH_IMPOSSIBLE)


def test_darts_after_finish_are_not_judged():
    visit = [dart(40, RingType.DOUBLE, 20), dart(60, RingType.TRIPLE)]
    assert check_bust_from_throws(visit, 40) is None


def test_can_finish_with_double():
    assert can_finish_with_double(40)
    assert can_finish_with_double(2)
    assert can_finish_with_double(50)
    assert not can_finish_with_double(42)
    assert not can_finish_with_double(3)
    assert not can_finish_with_double(0)
    assert not can_finish_with_double(-2)


def test_is_game_finished():
    assert is_game_finished(0)
    assert not is_game_finished(5)

    with pytest.raises(InvalidInputError):
        is_game_finished(-1)
    with pytest.raises(InvalidInputError):
        is_game_finished(1.5)


def test_leg_scoring():
    """Test a normal visit."""
    leg = X01Leg(501)
    is_valid, message = leg.apply_visit([dart(60, RingType.TRIPLE)] * 3)

    assert is_valid
    assert message is None
    assert leg.remaining_score == 321
    assert leg.highest_visit == 180
    assert leg.darts_thrown == 3
    assert leg.average_per_dart == pytest.approx(60.0)


def test_leg_checkout_range():
    leg = X01Leg(301)
    _, message = leg.apply_visit([dart(60, RingType.TRIPLE), dart(60, RingType.TRIPLE), dart(20)])
    assert leg.remaining_score == 161
    assert message == "In checkout range!"


def test_leg_bust_reverts():
    """A bust leaves the remaining score where the visit started."""
    leg = X01Leg(40)
    is_valid, message = leg.apply_visit([dart(20), dart(19)])

    assert not is_valid
    assert message == "BUST! (Cannot checkout on 1)"
    assert leg.remaining_score == 40
    assert leg.busts == 1
    assert leg.total_score == 0
    assert leg.darts_thrown == 2


def test_leg_checkout_and_reset():
    leg = X01Leg(32)
    is_valid, message = leg.apply_visit([dart(32, RingType.DOUBLE, 16), dart(20)])

    assert is_valid
    assert message == "CHECKOUT!"
    assert leg.is_finished
    assert leg.total_score == 32  # Dart after the double is ignored

    with pytest.raises(InvalidInputError):
        leg.apply_visit([dart(20)])

    leg.reset()
    assert leg.remaining_score == 32
    assert leg.darts_thrown == 0
    assert leg.visits == []
    assert not leg.is_finished


def test_leg_invalid():
    with pytest.raises(InvalidInputError):
        X01Leg(1)
    with pytest.raises(InvalidInputError):
        X01Leg(501).apply_visit([])


if __name__ == "__main__":
    print("Running rules tests...")
    test_check_bust()
    print("✓ Bust tests passed")
    test_check_bust_from_throws()
    print("✓ Visit bust tests passed")
    test_leg_bust_reverts()
    print("✓ Leg tests passed")
    print("\n✓ All tests passed!")
