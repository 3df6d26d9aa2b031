"""
Throw simulation with an isotropic 2-D Gaussian spread.

A player's accuracy is a single standard deviation in mm. Randomness comes
from an injected uniform source: anything with a ``random()`` method returning
floats in [0, 1), such as ``numpy.random.Generator`` or ``random.Random``.
"""
import math
from typing import Optional, Protocol, Tuple
import logging

import numpy as np

from src.core import InvalidInputError, Point, Target, ThrowResult
from src.core.checks import require_finite
from src.board import point_to_score_detail, target_to_point

logger = logging.getLogger(__name__)


class UniformSource(Protocol):
    """Source of uniform floats in [0, 1)."""

    def random(self) -> float:
        ...


_default_rng = np.random.default_rng()


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create a uniform source; a seed makes the throws reproducible."""
    return np.random.default_rng(seed)


def resolve_rng(rng: Optional[UniformSource] = None) -> UniformSource:
    """Return rng, or the process-wide generator when None."""
    return rng if rng is not None else _default_rng


def _check_std_dev(std_dev: float, name: str) -> float:
    std_dev = require_finite(std_dev, name)
    if std_dev < 0:
        raise InvalidInputError(f"{name} must be non-negative, got {std_dev}")
    return std_dev


def sample_gaussian_2d(
        mean: float,
        std_dev: float,
        rng: Optional[UniformSource] = None
) -> Tuple[float, float]:
    """
    Draw two independent N(mean, std_dev^2) samples with the Box-Muller transform.

    Args:
        mean: Mean of both samples (mm)
        std_dev: Standard deviation (mm); 0 returns (mean, mean) without
            consuming randomness
        rng: Uniform source (default: process-wide generator)

    Returns:
        (x, y) sample pair

    Raises:
        InvalidInputError: If mean or std_dev is not finite, or std_dev < 0
    """
    mean = require_finite(mean, "mean")
    std_dev = _check_std_dev(std_dev, "std_dev")

    if std_dev == 0:
        return mean, mean

    rng = resolve_rng(rng)

    # u1 in (0, 1] keeps log() finite
    u1 = 1.0 - rng.random()
    u2 = rng.random()

    r = math.sqrt(-2.0 * math.log(u1))
    theta = 2.0 * math.pi * u2

    return mean + r * math.cos(theta) * std_dev, mean + r * math.sin(theta) * std_dev


def simulate_throw(
        target_x: float,
        target_y: float,
        std_dev_mm: float,
        rng: Optional[UniformSource] = None
) -> Point:
    """
    Simulate where a dart aimed at (target_x, target_y) lands.

    Skill reference points: beginner 50 mm, intermediate 30 mm,
    advanced 15 mm, expert 8 mm.

    Raises:
        InvalidInputError: If any argument is not finite, or std_dev_mm < 0
    """
    target_x = require_finite(target_x, "target_x")
    target_y = require_finite(target_y, "target_y")
    std_dev_mm = _check_std_dev(std_dev_mm, "std_dev_mm")

    if std_dev_mm == 0:
        return Point(target_x, target_y)

    offset_x, offset_y = sample_gaussian_2d(0.0, std_dev_mm, rng)
    return Point(target_x + offset_x, target_y + offset_y)


def execute_throw(
        target: Target,
        std_dev_mm: float,
        rng: Optional[UniformSource] = None
) -> ThrowResult:
    """
    Aim at a target, simulate the landing point and score it.

    Returns:
        ThrowResult with ring and sector diagnostics
    """
    aim = target_to_point(target)
    return throw_at_point(target, aim, std_dev_mm, rng)


def throw_at_point(
        target: Target,
        aim: Point,
        std_dev_mm: float,
        rng: Optional[UniformSource] = None
) -> ThrowResult:
    """Simulate a throw at an already resolved aim point."""
    landing_point = simulate_throw(aim.x, aim.y, std_dev_mm, rng)
    detail = point_to_score_detail(landing_point)

    logger.debug(
        f"Throw at {target.label or target.type.value}: landed "
        f"({landing_point.x:.1f}, {landing_point.y:.1f}) for {detail.score}"
    )

    return ThrowResult(
        target=target,
        landing_point=landing_point,
        score=detail.score,
        ring=detail.ring,
        segment_number=detail.segment_number,
    )
