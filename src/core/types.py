"""
Core data types for the dart score trainer.
Defines contracts between modules to ensure stable interfaces.
"""
import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class InvalidInputError(ValueError):
    """Raised when a function is called with arguments outside its contract."""


class RingType(Enum):
    """Scoring zones, innermost first."""
    INNER_BULL = "INNER_BULL"  # 50 points
    OUTER_BULL = "OUTER_BULL"  # 25 points
    INNER_SINGLE = "INNER_SINGLE"
    TRIPLE = "TRIPLE"
    OUTER_SINGLE = "OUTER_SINGLE"
    DOUBLE = "DOUBLE"
    OUT = "OUT"  # Beyond the board edge


class TargetType(Enum):
    """What a player can aim at."""
    SINGLE = "SINGLE"
    DOUBLE = "DOUBLE"
    TRIPLE = "TRIPLE"
    BULL = "BULL"


class QuestionType(Enum):
    """What a quiz question asks for."""
    SCORE = "score"
    REMAINING = "remaining"
    BOTH = "both"

    @property
    def tracks_remaining(self) -> bool:
        return self in (QuestionType.REMAINING, QuestionType.BOTH)


class JudgmentTiming(Enum):
    """Whether multi-throw answers are judged per dart or as a running total."""
    INDEPENDENT = "independent"
    CUMULATIVE = "cumulative"


class BustReason(Enum):
    """Why a "01" visit ended early."""
    OVER = "over"  # Scored more than remaining
    FINISH_IMPOSSIBLE = "finish_impossible"  # Left exactly 1
    DOUBLE_OUT_REQUIRED = "double_out_required"  # Reached 0 without a double


@dataclass(frozen=True)
class BoardGeometry:
    """
    Dartboard geometric parameters (13.2 inch board).
    All measurements in millimeters unless specified.
    """
    # Radii (from center)
    inner_bull_radius: float = 6.35  # Double bull (50 points)
    outer_bull_radius: float = 16.0  # Single bull (25 points)
    triple_inner_radius: float = 99.0  # Inner edge of triple ring
    triple_outer_radius: float = 107.0  # Outer edge of triple ring
    double_inner_radius: float = 162.0  # Inner edge of double ring
    double_outer_radius: float = 170.0  # Outer edge of double ring
    board_edge_radius: float = 225.0  # Limit of the scoring surface

    # Canonical aim radii per target type
    single_aim_radius: float = 57.5  # (16 + 99) / 2
    outer_single_aim_radius: float = 134.5  # (107 + 162) / 2
    triple_aim_radius: float = 103.0  # (99 + 107) / 2
    double_aim_radius: float = 166.0  # (162 + 170) / 2
    outer_bull_aim_radius: float = 11.175  # (6.35 + 16) / 2

    # Sector configuration
    num_sectors: int = 20
    sector_sequence: Tuple[int, ...] = (20, 1, 18, 4, 13, 6, 10, 15, 2, 17,
                                        3, 19, 7, 16, 8, 11, 14, 9, 12, 5)

    @property
    def sector_angle(self) -> float:
        """Angular width of one sector in radians."""
        return 2 * math.pi / self.num_sectors


@dataclass(frozen=True)
class Point:
    """Physical board position in mm. Origin at the center, +y points down."""
    x: float
    y: float


@dataclass(frozen=True)
class Target:
    """
    An aimable area. number is None exactly when type is BULL.
    """
    type: TargetType
    number: Optional[int] = None  # Segment 1-20
    label: Optional[str] = None  # "T20", "D16", "BULL"


DEFAULT_TARGET = Target(TargetType.TRIPLE, 20, "T20")


@dataclass(frozen=True)
class ThrowResult:
    """
    One simulated dart: where it was aimed, where it landed and what it scored.
    """
    target: Target
    landing_point: Point
    score: int

    # Diagnostics
    ring: Optional[RingType] = None
    segment_number: Optional[int] = None


@dataclass(frozen=True)
class BustInfo:
    """Bust outcome of a "01" visit."""
    is_bust: bool
    reason: Optional[BustReason] = None

    def __post_init__(self):
        if self.is_bust != (self.reason is not None):
            raise InvalidInputError("BustInfo reason must be set exactly when is_bust is True")


@dataclass(frozen=True)
class PracticeConfig:
    """
    Question-generation recipe.
    """
    throw_unit: int = 1  # 1 or 3 darts per question
    question_type: QuestionType = QuestionType.SCORE
    judgment_timing: JudgmentTiming = JudgmentTiming.INDEPENDENT
    starting_score: Optional[int] = None  # 501, 301, ... (None for score-only practice)
    target: Optional[Target] = None  # None = DEFAULT_TARGET
    std_dev_mm: float = 15.0  # Throw spread
    randomize_target: bool = False  # Ask about exact board targets instead of simulating

    # Identification
    config_id: str = "custom"
    config_name: str = "Custom"
    description: Optional[str] = None

    @property
    def resolved_target(self) -> Target:
        return self.target if self.target is not None else DEFAULT_TARGET


@dataclass(frozen=True)
class Question:
    """
    A single quiz question with its verifiable answer.
    """
    mode: QuestionType
    throws: Tuple[ThrowResult, ...]
    correct_answer: int
    question_text: str
    starting_score: Optional[int] = None  # Set only when remaining is tracked
    bust_info: Optional[BustInfo] = None

    @property
    def total_score(self) -> int:
        return sum(t.score for t in self.throws)
