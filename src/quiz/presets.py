"""
Practice presets and loading of practice configs from YAML.

A practice config file looks like:

    config_name: Caller drills
    throw_unit: 3
    question_type: remaining
    judgment_timing: cumulative
    starting_score: 501
    target: T19
    difficulty: advanced      # or std_dev_mm: 12.5
"""
from dataclasses import replace
from pathlib import Path
from typing import Any, Dict
import logging

from src.core import (
    InvalidInputError,
    JudgmentTiming,
    PracticeConfig,
    QuestionType,
    atomic_write_yaml,
    load_yaml,
)
from src.core.checks import require_finite, require_integral
from src.board import parse_target_label

logger = logging.getLogger(__name__)

# Throw spread per skill level (mm). Smaller is more accurate.
DIFFICULTY_PRESETS = {
    "beginner": 50.0,
    "intermediate": 30.0,
    "advanced": 15.0,
    "expert": 8.0,
}

DEFAULT_PRESET_ID = "preset-basic"

PRACTICE_PRESETS = {
    DEFAULT_PRESET_ID: PracticeConfig(
        config_id=DEFAULT_PRESET_ID,
        config_name="Basic",
        description="Score of a single dart, asked on random board positions",
        throw_unit=1,
        question_type=QuestionType.SCORE,
        judgment_timing=JudgmentTiming.INDEPENDENT,
        starting_score=501,
        std_dev_mm=15.0,
        randomize_target=True,
    ),
    "preset-player": PracticeConfig(
        config_id="preset-player",
        config_name="Player",
        description="Score of each dart in a three-dart visit",
        throw_unit=3,
        question_type=QuestionType.SCORE,
        judgment_timing=JudgmentTiming.INDEPENDENT,
        starting_score=501,
        std_dev_mm=15.0,
    ),
    "preset-caller-basic": PracticeConfig(
        config_id="preset-caller-basic",
        config_name="Caller basic",
        description="Remaining score after each dart",
        throw_unit=3,
        question_type=QuestionType.REMAINING,
        judgment_timing=JudgmentTiming.INDEPENDENT,
        starting_score=501,
        std_dev_mm=15.0,
    ),
    "preset-caller-cumulative": PracticeConfig(
        config_id="preset-caller-cumulative",
        config_name="Caller cumulative",
        description="Remaining score over a running visit total",
        throw_unit=3,
        question_type=QuestionType.REMAINING,
        judgment_timing=JudgmentTiming.CUMULATIVE,
        starting_score=501,
        std_dev_mm=15.0,
    ),
    "preset-comprehensive": PracticeConfig(
        config_id="preset-comprehensive",
        config_name="Comprehensive",
        description="Both the visit total and the remaining score",
        throw_unit=3,
        question_type=QuestionType.BOTH,
        judgment_timing=JudgmentTiming.CUMULATIVE,
        starting_score=501,
        std_dev_mm=15.0,
    ),
}


def get_default_config() -> PracticeConfig:
    return PRACTICE_PRESETS[DEFAULT_PRESET_ID]


def get_preset(config_id: str) -> PracticeConfig:
    """
    Look up a preset by id.

    Raises:
        InvalidInputError: If no preset has that id
    """
    if config_id not in PRACTICE_PRESETS:
        raise InvalidInputError(
            f"Unknown preset: {config_id!r}. Available: {', '.join(PRACTICE_PRESETS)}"
        )
    return PRACTICE_PRESETS[config_id]


def difficulty_std_dev(name: str) -> float:
    """Spread in mm for a named skill level."""
    if name not in DIFFICULTY_PRESETS:
        raise InvalidInputError(
            f"Unknown difficulty: {name!r}. Available: {', '.join(DIFFICULTY_PRESETS)}"
        )
    return DIFFICULTY_PRESETS[name]


def _parse_enum(enum_cls, value, field_name: str):
    try:
        return enum_cls(value)
    except ValueError:
        allowed = ", ".join(member.value for member in enum_cls)
        raise InvalidInputError(f"Invalid {field_name}: {value!r}. Must be one of: {allowed}") from None


def practice_config_from_dict(data: Dict[str, Any], base: PracticeConfig = None) -> PracticeConfig:
    """
    Build a PracticeConfig from plain values, starting from ``base``.

    Unknown keys are ignored. ``difficulty`` is an alternative to
    ``std_dev_mm``; when both are given ``std_dev_mm`` wins.

    Raises:
        InvalidInputError: On a value of the wrong kind
    """
    config = base or PracticeConfig()
    overrides: Dict[str, Any] = {}

    for key, value in data.items():
        if key == "throw_unit":
            overrides[key] = require_integral(value, key)
        elif key == "question_type":
            overrides[key] = _parse_enum(QuestionType, value, key)
        elif key == "judgment_timing":
            overrides[key] = _parse_enum(JudgmentTiming, value, key)
        elif key == "starting_score":
            overrides[key] = None if value is None else require_integral(value, key)
        elif key == "target":
            overrides[key] = None if value is None else parse_target_label(value)
        elif key == "difficulty":
            overrides.setdefault("std_dev_mm", difficulty_std_dev(value))
        elif key == "std_dev_mm":
            overrides[key] = require_finite(value, key)
        elif key == "randomize_target":
            if not isinstance(value, bool):
                raise InvalidInputError(f"randomize_target must be true or false, got {value!r}")
            overrides[key] = value
        elif key in ("config_id", "config_name", "description"):
            overrides[key] = value
        else:
            logger.debug("Ignoring unknown practice config key: %s", key)

    return replace(config, **overrides)


def practice_config_to_dict(config: PracticeConfig) -> Dict[str, Any]:
    """Plain-value form of a PracticeConfig, readable by practice_config_from_dict()."""
    return {
        "config_id": config.config_id,
        "config_name": config.config_name,
        "description": config.description,
        "throw_unit": config.throw_unit,
        "question_type": config.question_type.value,
        "judgment_timing": config.judgment_timing.value,
        "starting_score": config.starting_score,
        "target": config.target.label if config.target is not None else None,
        "std_dev_mm": config.std_dev_mm,
        "randomize_target": config.randomize_target,
    }


def load_practice_config(config_path: Path) -> PracticeConfig:
    """
    Load a practice config file.

    A ``preset`` key selects the preset the file's values are applied to.

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidInputError: If the file is not a mapping or holds bad values
    """
    data = load_yaml(config_path)
    if not isinstance(data, dict):
        raise InvalidInputError(f"Practice config must be a mapping: {config_path}")

    base = get_preset(data.pop("preset")) if "preset" in data else None
    config = practice_config_from_dict(data, base)
    logger.info(f"Practice config '{config.config_name}' loaded from {config_path}")
    return config


def save_practice_config(config_path: Path, config: PracticeConfig) -> None:
    """Save a custom practice config."""
    atomic_write_yaml(config_path, practice_config_to_dict(config))
    logger.info(f"Practice config '{config.config_name}' saved to {config_path}")
