"""
Unit tests for quiz question generation.
"""
import pytest

from src.core import (
    BustInfo, BustReason, InvalidInputError, JudgmentTiming, Point, PracticeConfig,
    QuestionType, RingType, Target, TargetType, ThrowResult
)
from src.board import basic_practice_targets
from src.simulation import make_rng
from src.validation import is_valid_single_throw_score
from src.quiz import (
    PRACTICE_PRESETS, calculate_correct_answer, generate_question,
    generate_question_text, generate_random_target_question, get_preset
)


class ExplodingRng:
    def random(self):
        raise AssertionError("randomness consumed")


class ConstantRng:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def dart(score):
    return ThrowResult(
        target=Target(TargetType.TRIPLE, 20, "T20"),
        landing_point=Point(0.0, 0.0),
        score=score,
        ring=RingType.INNER_SINGLE,
    )


THROWS = (dart(60), dart(20), dart(5))


def test_remaining_round_trip():
    """One dart at T20 without spread from 501 leaves 441."""
    config = PracticeConfig(
        throw_unit=1,
        question_type=QuestionType.REMAINING,
        starting_score=501,
        std_dev_mm=0.0,
    )
    question = generate_question(config, 501, ExplodingRng())

    assert question.mode == QuestionType.REMAINING
    assert len(question.throws) == 1
    assert question.throws[0].score == 60
    assert question.correct_answer == 441
    assert question.starting_score == 501
    assert question.bust_info == BustInfo(False, None)
    assert question.question_text == "What is the remaining score after this throw?"


def test_score_question():
    """Score questions carry no remaining information."""
    config = PracticeConfig(throw_unit=3, std_dev_mm=0.0)
    question = generate_question(config, None)

    assert len(question.throws) == 3
    assert question.total_score == 180
    assert question.correct_answer == 60
    assert question.starting_score is None
    assert question.bust_info is None
    assert question.question_text == "What did throw 1 score?"


def test_custom_target():
    config = PracticeConfig(target=Target(TargetType.DOUBLE, 16, "D16"), std_dev_mm=0.0)
    question = generate_question(config, None)

    assert question.correct_answer == 32
    assert question.throws[0].target.label == "D16"


def test_bust_wiring():
    """A visit that overshoots is reported as a bust."""
    config = PracticeConfig(
        throw_unit=3,
        question_type=QuestionType.REMAINING,
        judgment_timing=JudgmentTiming.CUMULATIVE,
        starting_score=501,
        std_dev_mm=0.0,
    )
    question = generate_question(config, 100)

    assert question.bust_info == BustInfo(True, BustReason.OVER)
    assert question.correct_answer == 40


def test_both_mode_answers_score():
    config = PracticeConfig(
        throw_unit=3,
        question_type=QuestionType.BOTH,
        judgment_timing=JudgmentTiming.CUMULATIVE,
        starting_score=501,
        std_dev_mm=0.0,
    )
    question = generate_question(config, 301)

    assert question.correct_answer == 60
    assert question.starting_score == 501
    assert question.bust_info == BustInfo(False, None)
    assert question.question_text == "What is the total through throw 1, and what is left?"


def test_spread_throws_are_seeded():
    config = PracticeConfig(throw_unit=3, std_dev_mm=30.0)
    first = generate_question(config, None, make_rng(11))
    second = generate_question(config, None, make_rng(11))

    assert first == second
    for throw in first.throws:
        assert is_valid_single_throw_score(throw.score)


def test_generate_question_invalid_config():
    """Invalid configs fail before any randomness is used."""
    rng = ExplodingRng()
    remaining = PracticeConfig(question_type=QuestionType.REMAINING, starting_score=501)

    with pytest.raises(InvalidInputError):
        generate_question(PracticeConfig(throw_unit=2), None, rng)
    with pytest.raises(InvalidInputError):
        generate_question(PracticeConfig(throw_unit=True), None, rng)
    with pytest.raises(InvalidInputError):
        generate_question(PracticeConfig(std_dev_mm=-1.0), None, rng)
    with pytest.raises(InvalidInputError):
        generate_question(PracticeConfig(std_dev_mm=float("nan")), None, rng)
    with pytest.raises(InvalidInputError):
        generate_question(PracticeConfig(question_type=QuestionType.REMAINING), 501, rng)
    with pytest.raises(InvalidInputError):
        generate_question(remaining, None, rng)
    with pytest.raises(InvalidInputError):
        generate_question(remaining, 100.5, rng)
    with pytest.raises(InvalidInputError):
        generate_question(remaining, -1, rng)


def test_question_texts():
    """Test question text for every mode."""
    def text(throw_unit, question_type, index, cumulative):
        config = PracticeConfig(throw_unit=throw_unit, question_type=question_type)
        return generate_question_text(config, index, cumulative)

    assert text(1, QuestionType.SCORE, 0, False) == "What did this throw score?"
    assert text(1, QuestionType.BOTH, 0, True) == "What did this throw score, and what is left?"

    assert text(3, QuestionType.SCORE, 1, False) == "What did throw 2 score?"
    assert text(3, QuestionType.SCORE, 2, True) == "What is the total score through throw 3?"
    assert text(3, QuestionType.REMAINING, 1, False) == "What is the remaining score after throw 2?"
    assert text(3, QuestionType.REMAINING, 1, True) == "What is the remaining score after throw 2?"
    assert text(3, QuestionType.BOTH, 2, False) == "What did throw 3 score, and what is left?"


def test_question_text_invalid_index():
    config = PracticeConfig(throw_unit=3)
    for index in (-1, 3, 0.5):
        with pytest.raises(InvalidInputError):
            generate_question_text(config, index, False)


def test_calculate_correct_answer():
    """Test answers for every judgment mode."""
    score_independent = PracticeConfig(throw_unit=3)
    score_cumulative = PracticeConfig(throw_unit=3, judgment_timing=JudgmentTiming.CUMULATIVE)
    remaining_independent = PracticeConfig(
        throw_unit=3, question_type=QuestionType.REMAINING, starting_score=501
    )
    remaining_cumulative = PracticeConfig(
        throw_unit=3, question_type=QuestionType.REMAINING,
        judgment_timing=JudgmentTiming.CUMULATIVE, starting_score=501
    )

    assert calculate_correct_answer(THROWS, score_independent, 2, None) == 5
    assert calculate_correct_answer(THROWS, score_cumulative, 2, None) == 85
    assert calculate_correct_answer(THROWS, remaining_independent, 1, 441) == 421
    assert calculate_correct_answer(THROWS, remaining_cumulative, 2, 501) == 416


def test_calculate_correct_answer_invalid():
    config = PracticeConfig(throw_unit=3)
    remaining = PracticeConfig(throw_unit=3, question_type=QuestionType.REMAINING, starting_score=501)

    with pytest.raises(InvalidInputError):
        calculate_correct_answer((), config, 0, None)
    with pytest.raises(InvalidInputError):
        calculate_correct_answer(THROWS, config, 3, None)
    with pytest.raises(InvalidInputError):
        calculate_correct_answer(THROWS, config, 1.5, None)
    with pytest.raises(InvalidInputError):
        calculate_correct_answer(THROWS, remaining, 0, None)


def test_random_target_question():
    """Random-target questions place the dart exactly on a practice position."""
    positions = {t.point: t.score for t in basic_practice_targets()}

    rng = make_rng(5)
    for _ in range(20):
        question = generate_random_target_question(rng)
        throw = question.throws[0]

        assert question.mode == QuestionType.SCORE
        assert len(question.throws) == 1
        assert question.correct_answer == throw.score
        assert positions[throw.landing_point] == throw.score
        assert question.bust_info is None


def test_random_target_bounds():
    """Uniform draws at both ends pick the first and last position."""
    first = generate_random_target_question(ConstantRng(0.0))
    last = generate_random_target_question(ConstantRng(0.9999999))

    assert first.throws[0].target == Target(TargetType.SINGLE, 1, "OS1")
    assert first.correct_answer == 1
    assert last.throws[0].target == Target(TargetType.BULL, None, "25")
    assert last.correct_answer == 25


def test_randomize_target_config_dispatch():
    question = generate_question(get_preset("preset-basic"), None, make_rng(3))
    assert question.mode == QuestionType.SCORE
    assert question.question_text == "What did this throw score?"


def test_every_preset_generates():
    for preset in PRACTICE_PRESETS.values():
        question = generate_question(preset, 501, make_rng(1))
        assert len(question.throws) == preset.throw_unit


if __name__ == "__main__":
    print("Running quiz tests...")
    test_remaining_round_trip()
    print("✓ Round trip test passed")
    test_bust_wiring()
    print("✓ Bust wiring test passed")
    test_calculate_correct_answer()
    print("✓ Answer tests passed")
    test_random_target_question()
    print("✓ Random target tests passed")
    print("\n✓ All tests passed!")
