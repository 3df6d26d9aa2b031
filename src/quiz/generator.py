"""
Quiz question generation.

Turns a PracticeConfig into a Question: simulated throws, question text and
the correct answer. The caller owns the running remaining score between
questions.
"""
from typing import Optional, Sequence
import logging

from src.core import (
    BustInfo,
    InvalidInputError,
    JudgmentTiming,
    PracticeConfig,
    Question,
    QuestionType,
    RingType,
    Target,
    TargetType,
    ThrowResult,
)
from src.core.checks import is_finite_number, require_integral
from src.board import ExpandedTarget, basic_practice_targets, point_to_score_detail, target_to_point
from src.game import check_bust_from_throws
from src.simulation import UniformSource, resolve_rng, throw_at_point

logger = logging.getLogger(__name__)

FIRST_THROW_INDEX = 0
VALID_THROW_UNITS = (1, 3)

_SINGLE_THROW_TEXT = {
    QuestionType.SCORE: "What did this throw score?",
    QuestionType.REMAINING: "What is the remaining score after this throw?",
    QuestionType.BOTH: "What did this throw score, and what is left?",
}


def _validate_config(config: PracticeConfig) -> None:
    if isinstance(config.throw_unit, bool) or config.throw_unit not in VALID_THROW_UNITS:
        raise InvalidInputError(f"throw_unit must be 1 or 3, got {config.throw_unit!r}")
    if not isinstance(config.question_type, QuestionType):
        raise InvalidInputError(f"Invalid question type: {config.question_type!r}")
    if not isinstance(config.judgment_timing, JudgmentTiming):
        raise InvalidInputError(f"Invalid judgment timing: {config.judgment_timing!r}")
    if not is_finite_number(config.std_dev_mm):
        raise InvalidInputError(f"std_dev_mm must be a finite number, got {config.std_dev_mm!r}")
    if config.std_dev_mm < 0:
        raise InvalidInputError(f"std_dev_mm must be non-negative, got {config.std_dev_mm}")


def generate_question(
        config: PracticeConfig,
        remaining_score: Optional[int],
        rng: Optional[UniformSource] = None
) -> Question:
    """
    Generate one quiz question.

    Args:
        config: Practice recipe
        remaining_score: Current remaining score; required when the question
            type tracks remaining, ignored otherwise
        rng: Uniform source for the throw spread

    Returns:
        Question about the first throw. For remaining and both modes the
        question carries the starting score and the bust outcome of the
        simulated visit.

    Raises:
        InvalidInputError: If the config or remaining score is invalid
    """
    _validate_config(config)

    tracks_remaining = config.question_type.tracks_remaining
    if tracks_remaining:
        if config.starting_score is None:
            raise InvalidInputError("starting_score is required for remaining or both mode")
        if remaining_score is None:
            raise InvalidInputError("remaining_score is required for remaining or both mode")
        remaining_score = require_integral(remaining_score, "remaining_score")
        if remaining_score < 0:
            raise InvalidInputError(f"remaining_score cannot be negative, got {remaining_score}")

    if config.randomize_target:
        return generate_random_target_question(rng)

    # Aim is resolved once; darts within a question do not adapt
    target = config.resolved_target
    aim = target_to_point(target)

    throws = tuple(
        throw_at_point(target, aim, config.std_dev_mm, rng)
        for _ in range(config.throw_unit)
    )

    is_cumulative = config.judgment_timing is JudgmentTiming.CUMULATIVE
    question_text = generate_question_text(config, FIRST_THROW_INDEX, is_cumulative)
    correct_answer = calculate_correct_answer(throws, config, FIRST_THROW_INDEX, remaining_score)

    starting_score = None
    bust_info = None
    if tracks_remaining:
        starting_score = config.starting_score
        bust_info = check_bust_from_throws(throws, remaining_score) or BustInfo(False, None)

    logger.debug(
        f"Question [{config.question_type.value}] scores={[t.score for t in throws]} "
        f"answer={correct_answer}"
    )

    return Question(
        mode=config.question_type,
        throws=throws,
        correct_answer=correct_answer,
        question_text=question_text,
        starting_score=starting_score,
        bust_info=bust_info,
    )


def generate_question_text(config: PracticeConfig, throw_index: int, is_cumulative: bool) -> str:
    """
    Build the question text for a throw.

    Raises:
        InvalidInputError: If throw_index is not an integer in [0, throw_unit)
    """
    throw_index = require_integral(throw_index, "throw_index")
    if throw_index < 0:
        raise InvalidInputError(f"throw_index must be non-negative, got {throw_index}")
    if throw_index >= config.throw_unit:
        raise InvalidInputError(f"throw_index must be less than throw_unit ({config.throw_unit})")

    question_type = config.question_type
    if question_type not in _SINGLE_THROW_TEXT:
        raise InvalidInputError(f"Invalid question type: {question_type!r}")

    if config.throw_unit == 1:
        return _SINGLE_THROW_TEXT[question_type]

    n = throw_index + 1
    if question_type is QuestionType.REMAINING:
        return f"What is the remaining score after throw {n}?"
    if question_type is QuestionType.SCORE:
        return f"What is the total score through throw {n}?" if is_cumulative else f"What did throw {n} score?"
    if is_cumulative:
        return f"What is the total through throw {n}, and what is left?"
    return f"What did throw {n} score, and what is left?"


def _cumulative_score(throws: Sequence[ThrowResult], throw_index: int) -> int:
    return sum(t.score for t in throws[:throw_index + 1])


def calculate_correct_answer(
        throws: Sequence[ThrowResult],
        config: PracticeConfig,
        throw_index: int,
        previous_remaining: Optional[int]
) -> int:
    """
    Correct answer for a throw index.

    score: the throw's score, or the running total when judged cumulatively.
    remaining: previous_remaining minus that score or total.
    both: the score-mode answer (remaining follows from the starting score).

    Raises:
        InvalidInputError: On empty throws, a bad index, or a remaining-mode
            call without previous_remaining
    """
    if not throws:
        raise InvalidInputError("throws must be a non-empty sequence")

    throw_index = require_integral(throw_index, "throw_index")
    if not 0 <= throw_index < len(throws):
        raise InvalidInputError(f"throw_index must be between 0 and {len(throws) - 1}")

    if config.question_type.tracks_remaining and previous_remaining is None:
        raise InvalidInputError("previous_remaining is required for remaining or both mode")

    if config.judgment_timing is JudgmentTiming.CUMULATIVE:
        score = _cumulative_score(throws, throw_index)
    else:
        score = throws[throw_index].score

    if config.question_type is QuestionType.REMAINING:
        return previous_remaining - score
    return score


_RING_TARGET_TYPES = {
    RingType.OUTER_SINGLE: TargetType.SINGLE,
    RingType.DOUBLE: TargetType.DOUBLE,
    RingType.TRIPLE: TargetType.TRIPLE,
}


def _as_target(expanded: ExpandedTarget) -> Target:
    if expanded.ring in _RING_TARGET_TYPES:
        return Target(_RING_TARGET_TYPES[expanded.ring], expanded.number, expanded.label)
    return Target(TargetType.BULL, None, expanded.label)


def generate_random_target_question(rng: Optional[UniformSource] = None) -> Question:
    """
    Ask for the score of a randomly chosen board position.

    One of the 62 practice positions is picked uniformly and the dart is
    placed exactly on it; no spread is simulated.
    """
    rng = resolve_rng(rng)
    targets = basic_practice_targets()
    expanded = targets[min(int(rng.random() * len(targets)), len(targets) - 1)]

    detail = point_to_score_detail(expanded.point)
    throw = ThrowResult(
        target=_as_target(expanded),
        landing_point=expanded.point,
        score=detail.score,
        ring=detail.ring,
        segment_number=detail.segment_number,
    )

    logger.debug(f"Random target question: {expanded.label} = {detail.score}")

    return Question(
        mode=QuestionType.SCORE,
        throws=(throw,),
        correct_answer=detail.score,
        question_text=_SINGLE_THROW_TEXT[QuestionType.SCORE],
    )
