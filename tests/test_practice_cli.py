"""
Tests for the terminal practice loop (scripts/practice_cli.py).
"""
import argparse
import importlib.util
from dataclasses import replace
from pathlib import Path

from src.core import Config, QuestionType
from src.quiz import generate_random_target_question, get_preset
from src.simulation import make_rng

SCRIPT_PATH = Path(__file__).parent.parent / "scripts" / "practice_cli.py"


def load_cli():
    """Import the script as a module."""
    spec = importlib.util.spec_from_file_location("practice_cli", SCRIPT_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


cli = load_cli()


class ConstantRng:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def type_answers(monkeypatch, *answers):
    """Feed answers to input() in order; EOF once they run out."""
    pending = [str(a) for a in answers]

    def fake_input(prompt=""):
        if not pending:
            raise EOFError
        return pending.pop(0)

    monkeypatch.setattr("builtins.input", fake_input)


def exact_preset(preset_id, **overrides):
    """Preset with zero spread: every dart aimed at T20 scores 60."""
    return replace(get_preset(preset_id), std_dev_mm=0.0, **overrides)


def test_score_preset_session(monkeypatch, capsys):
    """Per-dart scores in a three-dart visit, one answer wrong."""
    type_answers(monkeypatch, 60, 24, 60)

    cli.run_session(exact_preset("preset-player"), Config(), 1, make_rng(1))

    out = capsys.readouterr().out
    assert "Wrong, the answer is 60" in out
    assert "Session over: 2/3 correct" in out


def test_random_target_session(monkeypatch, capsys):
    """The default preset asks one dart on a random board position per question."""
    practice = cli.resolve_practice_config(
        argparse.Namespace(practice=None, preset=None, difficulty=None), Config()
    )
    expected = generate_random_target_question(ConstantRng(0.0)).correct_answer
    type_answers(monkeypatch, expected, expected)

    cli.run_session(practice, Config(), 2, ConstantRng(0.0))

    assert "Session over: 2/2 correct" in capsys.readouterr().out


def test_caller_basic_session(monkeypatch, capsys):
    """Remaining after each dart counts down from the previous dart."""
    type_answers(monkeypatch, 441, 381, 321)

    cli.run_session(exact_preset("preset-caller-basic"), Config(), 1, make_rng(1))

    out = capsys.readouterr().out
    assert "Remaining: 501" in out
    assert "Session over: 3/3 correct" in out


def test_caller_cumulative_session(monkeypatch, capsys):
    """Remaining is judged against the visit start plus the running total."""
    type_answers(monkeypatch, 441, 381, 320)

    cli.run_session(exact_preset("preset-caller-cumulative"), Config(), 1, make_rng(1))

    out = capsys.readouterr().out
    assert "Wrong, the answer is 321" in out
    assert "Session over: 2/3 correct" in out


def test_comprehensive_session(monkeypatch, capsys):
    """Both the running total and what is left must be right."""
    type_answers(monkeypatch, 60, 441, 120, 381, 180, 321,
                 60, 261, 120, 201, 180, 140)

    cli.run_session(exact_preset("preset-comprehensive"), Config(), 2, make_rng(1))

    out = capsys.readouterr().out
    # Second visit starts from 321
    assert "Remaining: 321" in out
    assert "Session over: 5/6 correct" in out


def test_bust_reverts_remaining(monkeypatch, capsys):
    """A busted visit leaves the next visit at the same remaining score."""
    practice = exact_preset("preset-caller-basic", starting_score=100)
    type_answers(monkeypatch, 40, -20, -80, 40, -20, -80)

    cli.run_session(practice, Config(), 2, make_rng(1))

    out = capsys.readouterr().out
    assert "Going for T20" in out
    assert "BUST! (Score below 0)" in out
    assert out.count("Remaining: 100") == 2
    assert "Session over: 6/6 correct" in out


def test_quit_ends_session(monkeypatch, capsys):
    """Typing q stops the session and keeps the answers so far."""
    type_answers(monkeypatch, 60, "q")

    cli.run_session(exact_preset("preset-player"), Config(), 5, make_rng(1))

    out = capsys.readouterr().out
    assert "Question 2/5" not in out
    assert "Session over: 0/0 correct" in out


def test_read_int_retries_on_text(monkeypatch, capsys):
    type_answers(monkeypatch, "sixty", " 60 ")
    assert cli.read_int("> ") == 60
    assert "whole number" in capsys.readouterr().out


def test_resolve_random_target_preset():
    """Random-target presets always become one-dart score questions."""
    args = argparse.Namespace(practice=None, preset="preset-basic", difficulty=None)
    practice = cli.resolve_practice_config(args, Config())

    assert practice.randomize_target
    assert practice.throw_unit == 1
    assert practice.question_type is QuestionType.SCORE
    assert practice.std_dev_mm == 15.0  # "advanced" from the default config


def test_resolve_difficulty_override():
    args = argparse.Namespace(practice=None, preset="preset-caller-basic", difficulty="expert")
    practice = cli.resolve_practice_config(args, Config())

    assert practice.std_dev_mm == 8.0
    assert practice.starting_score == 501
    assert practice.question_type is QuestionType.REMAINING


if __name__ == "__main__":
    print("Running practice CLI tests...")
    test_resolve_random_target_preset()
    test_resolve_difficulty_override()
    print("✓ Practice config resolution tests passed")
    print("\n✓ All tests passed!")
