"""
Game module - "01" rules, checkout strategy, and leg tracking.
"""
from .checkout import (
    CHECKOUT_TABLE,
    ONE_DART_FINISHABLE,
    BULL_TARGET,
    optimal_target,
)
from .rules import (
    is_double_ring,
    check_bust,
    check_bust_from_throws,
    can_finish_with_double,
    is_game_finished,
)
from .leg import X01Leg

__all__ = [
    "CHECKOUT_TABLE",
    "ONE_DART_FINISHABLE",
    "BULL_TARGET",
    "optimal_target",
    "is_double_ring",
    "check_bust",
    "check_bust_from_throws",
    "can_finish_with_double",
    "is_game_finished",
    "X01Leg",
]
