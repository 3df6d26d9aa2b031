"""
Core module - shared data types, utilities, and configuration.
"""
from .types import (
    InvalidInputError,
    RingType,
    TargetType,
    QuestionType,
    JudgmentTiming,
    BustReason,
    BoardGeometry,
    Point,
    Target,
    DEFAULT_TARGET,
    ThrowResult,
    BustInfo,
    PracticeConfig,
    Question,
)
from .io_utils import (
    atomic_write_yaml,
    load_yaml,
)
from .config_loader import Config, DEFAULT_CONFIG_PATH

__all__ = [
    # Types
    "InvalidInputError",
    "RingType",
    "TargetType",
    "QuestionType",
    "JudgmentTiming",
    "BustReason",
    "BoardGeometry",
    "Point",
    "Target",
    "DEFAULT_TARGET",
    "ThrowResult",
    "BustInfo",
    "PracticeConfig",
    "Question",
    # I/O
    "atomic_write_yaml",
    "load_yaml",
    # Config
    "Config",
    "DEFAULT_CONFIG_PATH",
]
