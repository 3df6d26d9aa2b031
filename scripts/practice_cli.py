"""
Terminal practice loop for score and remaining-score calling.

Simulated darts are shown by the bed they landed in; type the answer.

Usage:
    python scripts/practice_cli.py
    python scripts/practice_cli.py --preset preset-caller-cumulative
    python scripts/practice_cli.py --practice my_drill.yaml --seed 7
"""
import sys
import time
import argparse
from dataclasses import replace
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from src.core import Config, DEFAULT_CONFIG_PATH, InvalidInputError, JudgmentTiming, QuestionType, TargetType
from src.board import score_label, target_to_point
from src.game import X01Leg, optimal_target
from src.simulation import AreaType, hit_probability, make_rng
from src.validation import (
    is_valid_remaining_score_transition,
    is_valid_round_score,
    is_valid_single_throw_score,
)
from src.quiz import (
    DIFFICULTY_PRESETS,
    PRACTICE_PRESETS,
    calculate_correct_answer,
    difficulty_std_dev,
    generate_question,
    generate_question_text,
    get_preset,
    load_practice_config,
    save_practice_config,
)
import logging

# Setup logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

DARTS_PER_VISIT = 3

_AREA_FOR_TARGET = {
    TargetType.SINGLE: AreaType.SINGLE,
    TargetType.DOUBLE: AreaType.DOUBLE,
    TargetType.TRIPLE: AreaType.TRIPLE,
    TargetType.BULL: AreaType.INNER_BULL,
}


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Darts score calling practice",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python scripts/practice_cli.py                                  # Default preset
  python scripts/practice_cli.py --preset preset-comprehensive   # Score and remaining
  python scripts/practice_cli.py --difficulty expert --seed 1     # Tight, repeatable darts
        """
    )

    parser.add_argument(
        "-p", "--preset",
        choices=sorted(PRACTICE_PRESETS),
        default=None,
        help="Practice preset (default: from config)"
    )

    parser.add_argument(
        "--config",
        type=str,
        default=str(DEFAULT_CONFIG_PATH),
        help=f"Application config file (default: {DEFAULT_CONFIG_PATH})"
    )

    parser.add_argument(
        "--practice",
        type=str,
        default=None,
        help="Custom practice config YAML (overrides --preset)"
    )

    parser.add_argument(
        "-n", "--questions",
        type=int,
        default=None,
        help="Number of questions (default: from config)"
    )

    parser.add_argument(
        "-d", "--difficulty",
        choices=list(DIFFICULTY_PRESETS),
        default=None,
        help="Throw spread level (default: from config)"
    )

    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for repeatable throws"
    )

    parser.add_argument(
        "--save",
        type=str,
        default=None,
        help="Save the resolved practice config to this file"
    )

    return parser.parse_args()


def resolve_practice_config(args, config: Config):
    """Build the practice config from the preset, files and command line."""
    if args.practice:
        practice = load_practice_config(Path(args.practice))
    else:
        practice = get_preset(args.preset or config.get("practice", "preset"))

    # A custom practice file keeps its own spread unless overridden
    difficulty = args.difficulty
    if difficulty is None and not args.practice:
        difficulty = config.get("practice", "difficulty")
    if difficulty:
        practice = replace(practice, std_dev_mm=difficulty_std_dev(difficulty))

    if practice.randomize_target:
        # Random-target questions are always one-dart score questions
        return replace(practice, throw_unit=1, question_type=QuestionType.SCORE)

    starting_score = config.get("practice", "starting_score")
    if practice.question_type.tracks_remaining and practice.starting_score is None:
        practice = replace(practice, starting_score=starting_score)

    return practice


def read_int(prompt: str):
    """Read an integer answer. Returns None when the player quits."""
    while True:
        try:
            text = input(prompt).strip()
        except EOFError:
            return None

        if text.lower() in ("q", "quit", "exit"):
            return None
        try:
            return int(text)
        except ValueError:
            print("  Please type a whole number (or q to quit)")


def describe_throws(throws):
    """Beds the darts landed in, e.g. 'T20, S5, D1'."""
    return ", ".join(score_label(t.ring, t.segment_number) for t in throws)


def show_hit_chance(practice, config: Config):
    """Print the chance of hitting the configured target."""
    if practice.randomize_target or practice.std_dev_mm <= 0:
        return

    target = practice.resolved_target
    aim = target_to_point(target)

    chance = hit_probability(
        aim.x, aim.y, practice.std_dev_mm,
        _AREA_FOR_TARGET[target.type],
        target.number,
        radial_steps=config.get("simulation", "probability_radial_steps"),
        angular_steps=config.get("simulation", "probability_angular_steps"),
    )
    print(f"Aiming at {target.label} with {practice.std_dev_mm:.0f} mm spread: "
          f"{chance:.0%} of darts hit it")


def check_score_input(answer: int, throw_count: int) -> None:
    """Warn about scores no dart (or visit) can make."""
    if throw_count == 1 and not is_valid_single_throw_score(answer):
        print("  (No single dart scores that)")
    elif throw_count > 1 and not is_valid_round_score(answer):
        print("  (No set of darts totals that)")


def ask_visit(question, practice, visit_start) -> tuple:
    """
    Ask every question of one visit.

    Returns:
        (correct, asked) answer counts, or None when the player quits
    """
    is_cumulative = practice.judgment_timing is JudgmentTiming.CUMULATIVE
    tracks_remaining = question.mode.tracks_remaining
    throws = question.throws

    correct = asked = 0
    running_remaining = visit_start

    for index in range(len(throws)):
        text = generate_question_text(practice, index, is_cumulative)
        previous = visit_start if is_cumulative else running_remaining
        expected = calculate_correct_answer(throws, practice, index, previous)

        print(f"Darts: {describe_throws(throws[:index + 1])}")
        print(text)

        if question.mode is QuestionType.BOTH:
            score_answer = read_int("  Score: ")
            if score_answer is None:
                return None
            check_score_input(score_answer, index + 1 if is_cumulative else 1)
            remaining_answer = read_int("  Left: ")
            if remaining_answer is None:
                return None
            expected_remaining = previous - expected
            is_right = score_answer == expected and remaining_answer == expected_remaining
            solution = f"{expected}, {expected_remaining} left"
        else:
            answer = read_int("  > ")
            if answer is None:
                return None
            if tracks_remaining:
                if not is_valid_remaining_score_transition(previous, previous - answer):
                    print("  (That would be a bust)")
            else:
                check_score_input(answer, index + 1 if is_cumulative else 1)
            is_right = answer == expected
            solution = str(expected)

        asked += 1
        if is_right:
            correct += 1
            print("  Correct!")
        else:
            print(f"  Wrong, the answer is {solution}")

        if tracks_remaining:
            running_remaining -= throws[index].score

    return correct, asked


def run_session(practice, config: Config, question_count: int, rng) -> None:
    """Run the practice loop until the question count or time limit is reached."""
    time_limit_min = config.get("session", "time_limit_min")
    deadline = time.monotonic() + time_limit_min * 60 if time_limit_min else None

    leg = X01Leg(practice.starting_score) if practice.question_type.tracks_remaining else None
    total_correct = total_asked = 0

    print(f"\n{practice.config_name}: {practice.description or ''}")
    show_hit_chance(practice, config)

    for number in range(1, question_count + 1):
        if deadline is not None and time.monotonic() >= deadline:
            print("\nTime is up!")
            break

        print(f"\n--- Question {number}/{question_count} ---")

        visit_config = practice
        remaining = None
        if leg is not None:
            remaining = leg.remaining_score
            print(f"Remaining: {remaining}")
            checkout = optimal_target(remaining, practice.throw_unit)
            if checkout is not None:
                # Aim at the checkout once in range
                visit_config = replace(practice, target=checkout)
                print(f"Going for {checkout.label}")

        question = generate_question(visit_config, remaining, rng)

        result = ask_visit(question, visit_config, remaining)
        if result is None:
            break
        total_correct += result[0]
        total_asked += result[1]

        if leg is not None:
            # One-dart questions count as a one-dart visit
            _, message = leg.apply_visit(question.throws)
            if message:
                print(message)
            if leg.is_finished:
                print(f"Leg won in {leg.darts_thrown} darts "
                      f"({leg.average_per_dart * DARTS_PER_VISIT:.1f} average). New leg!")
                leg.reset()

    print(f"\nSession over: {total_correct}/{total_asked} correct")
    logger.info(f"Session finished: {total_correct}/{total_asked}")


def main():
    """Run the practice session."""
    args = parse_args()

    config = Config(Path(args.config))

    try:
        practice = resolve_practice_config(args, config)
    except (FileNotFoundError, InvalidInputError) as e:
        logger.error(f"Invalid practice config: {e}")
        return

    if args.save:
        save_practice_config(Path(args.save), practice)

    question_count = args.questions or config.get("session", "question_count")
    seed = args.seed if args.seed is not None else config.get("simulation", "seed")
    rng = make_rng(seed)

    try:
        run_session(practice, config, question_count, rng)
    except KeyboardInterrupt:
        print("\nBye!")


if __name__ == "__main__":
    main()
