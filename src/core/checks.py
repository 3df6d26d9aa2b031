"""
Argument checks shared by the scoring engine.

Integral floats (e.g. 40.0) count as integers; bools never count as numbers.
"""
import math
import numbers

from .types import InvalidInputError


def is_finite_number(value) -> bool:
    """True for real, non-bool, finite numbers."""
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return False
    return math.isfinite(value)


def is_integral(value) -> bool:
    """True for finite numbers without a fractional part."""
    return is_finite_number(value) and float(value).is_integer()


def require_finite(value, name: str) -> float:
    """Return value as float or raise InvalidInputError."""
    if not is_finite_number(value):
        raise InvalidInputError(f"{name} must be a finite number, got {value!r}")
    return float(value)


def require_integral(value, name: str) -> int:
    """Return value as int or raise InvalidInputError."""
    if not is_integral(value):
        raise InvalidInputError(f"{name} must be an integer, got {value!r}")
    return int(value)


def require_segment_number(value, name: str = "segment number") -> int:
    """Return a segment number in 1-20 or raise InvalidInputError."""
    number = require_integral(value, name)
    if not 1 <= number <= 20:
        raise InvalidInputError(f"{name} must be between 1 and 20, got {number}")
    return number
