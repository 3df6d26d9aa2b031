"""
Quiz module - question generation and practice presets.
"""
from .generator import (
    generate_question,
    generate_question_text,
    calculate_correct_answer,
    generate_random_target_question,
)
from .presets import (
    DIFFICULTY_PRESETS,
    PRACTICE_PRESETS,
    DEFAULT_PRESET_ID,
    get_default_config,
    get_preset,
    difficulty_std_dev,
    practice_config_from_dict,
    practice_config_to_dict,
    load_practice_config,
    save_practice_config,
)

__all__ = [
    "generate_question",
    "generate_question_text",
    "calculate_correct_answer",
    "generate_random_target_question",
    "DIFFICULTY_PRESETS",
    "PRACTICE_PRESETS",
    "DEFAULT_PRESET_ID",
    "get_default_config",
    "get_preset",
    "difficulty_std_dev",
    "practice_config_from_dict",
    "practice_config_to_dict",
    "load_practice_config",
    "save_practice_config",
]
