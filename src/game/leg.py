"""
Running score of a single "01" leg.
"""
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple
import logging

from src.core import BustReason, InvalidInputError, ThrowResult
from .checkout import CHECKOUT_MAX_SCORE
from .rules import check_bust_from_throws, is_game_finished

logger = logging.getLogger(__name__)

BUST_MESSAGES = {
    BustReason.OVER: "BUST! (Score below 0)",
    BustReason.FINISH_IMPOSSIBLE: "BUST! (Cannot checkout on 1)",
    BustReason.DOUBLE_OUT_REQUIRED: "BUST! (Must finish on double)",
}


@dataclass
class X01Leg:
    """Tracks the remaining score of one leg, reverting busted visits."""
    starting_score: int = 501

    remaining_score: int = field(init=False)
    darts_thrown: int = 0
    visits: List[Tuple[ThrowResult, ...]] = field(default_factory=list)

    # Statistics
    total_score: int = 0
    highest_visit: int = 0
    busts: int = 0

    def __post_init__(self):
        if self.starting_score <= 1:
            raise InvalidInputError(f"starting_score must be at least 2, got {self.starting_score}")
        self.remaining_score = self.starting_score

    def apply_visit(self, throws: Sequence[ThrowResult]) -> Tuple[bool, Optional[str]]:
        """
        Score a visit.

        Args:
            throws: Darts of the visit in order

        Returns:
            (is_valid, message) where is_valid is False on a bust and the
            message is e.g. "BUST! ..." or "CHECKOUT!"
        """
        if not throws:
            raise InvalidInputError("A visit needs at least one dart")
        if self.is_finished:
            raise InvalidInputError("Leg is already finished")

        throws = tuple(throws)
        self.visits.append(throws)
        self.darts_thrown += len(throws)

        bust = check_bust_from_throws(throws, self.remaining_score)
        if bust is not None:
            # Score reverts to the start of the visit
            self.busts += 1
            logger.info(f"Bust at {self.remaining_score}: {bust.reason.value}")
            return False, BUST_MESSAGES[bust.reason]

        # Darts after the finishing double do not count
        visit_score = 0
        remaining = self.remaining_score
        for throw in throws:
            if remaining == 0:
                break
            visit_score += throw.score
            remaining -= throw.score

        self.remaining_score = remaining
        self.total_score += visit_score
        self.highest_visit = max(self.highest_visit, visit_score)

        if self.is_finished:
            logger.info(f"Checkout after {self.darts_thrown} darts")
            return True, "CHECKOUT!"

        if 1 < self.remaining_score <= CHECKOUT_MAX_SCORE:
            return True, "In checkout range!"

        return True, None

    @property
    def is_finished(self) -> bool:
        return is_game_finished(self.remaining_score)

    def reset(self) -> None:
        """Start the leg again from the starting score."""
        self.remaining_score = self.starting_score
        self.darts_thrown = 0
        self.visits.clear()
        self.total_score = 0
        self.highest_visit = 0
        self.busts = 0

    @property
    def average_per_dart(self) -> float:
        """Average points per dart thrown, busted darts included."""
        if self.darts_thrown == 0:
            return 0.0
        return self.total_score / self.darts_thrown
