"""
Probability that a throw lands in a given board area.

The isotropic Gaussian density around the aim point is integrated over the
area in polar coordinates with the midpoint rule, so the estimate is
deterministic. A Monte Carlo estimator is kept for cross-checking.
"""
import math
from enum import Enum
from typing import List, Optional, Tuple, Union
import logging

import numpy as np

from src.core import InvalidInputError
from src.core.checks import require_finite, require_integral, require_segment_number
from src.board import DEFAULT_MAPPER, point_to_polar
from .throw_simulator import UniformSource, simulate_throw

logger = logging.getLogger(__name__)

DEFAULT_RADIAL_STEPS = 200
DEFAULT_ANGULAR_STEPS = 200
MONTE_CARLO_SAMPLES = 10000

# (r_inner, r_outer, angle_lo, angle_hi); angles None = full circle
Region = Tuple[float, float, Optional[float], Optional[float]]


class AreaType(Enum):
    """Areas a hit probability can be asked for."""
    INNER_BULL = "INNER_BULL"
    OUTER_BULL = "OUTER_BULL"
    TRIPLE = "TRIPLE"
    DOUBLE = "DOUBLE"
    SINGLE = "SINGLE"  # Inner and outer single beds of one sector

    @property
    def is_bull(self) -> bool:
        return self in (AreaType.INNER_BULL, AreaType.OUTER_BULL)


def _parse_area(area_type: Union[AreaType, str]) -> AreaType:
    if isinstance(area_type, AreaType):
        return area_type
    try:
        return AreaType(area_type)
    except ValueError:
        raise InvalidInputError(
            f"Invalid area type: {area_type!r}. "
            f"Must be one of: {', '.join(a.value for a in AreaType)}"
        ) from None


def _radial_bands(area: AreaType) -> List[Tuple[float, float]]:
    g = DEFAULT_MAPPER.geometry
    if area is AreaType.INNER_BULL:
        return [(0.0, g.inner_bull_radius)]
    if area is AreaType.OUTER_BULL:
        return [(g.inner_bull_radius, g.outer_bull_radius)]
    if area is AreaType.TRIPLE:
        return [(g.triple_inner_radius, g.triple_outer_radius)]
    if area is AreaType.DOUBLE:
        return [(g.double_inner_radius, g.double_outer_radius)]
    return [
        (g.outer_bull_radius, g.triple_inner_radius),
        (g.triple_outer_radius, g.double_inner_radius),
    ]


def area_regions(area_type: Union[AreaType, str], segment_number: Optional[int] = None) -> List[Region]:
    """
    Describe an area as polar regions.

    Raises:
        InvalidInputError: On an unknown area, or a segment number that is
            missing for TRIPLE/DOUBLE/SINGLE, set for a bull, or out of range
    """
    area = _parse_area(area_type)

    if area.is_bull:
        if segment_number is not None:
            raise InvalidInputError(f"Area {area.value} does not accept a segment number")
        return [(r_in, r_out, None, None) for r_in, r_out in _radial_bands(area)]

    if segment_number is None:
        raise InvalidInputError(f"Area {area.value} requires a segment number")
    center = DEFAULT_MAPPER.segment_center_angle(require_segment_number(segment_number))
    half = DEFAULT_MAPPER.geometry.sector_angle / 2

    return [(r_in, r_out, center - half, center + half) for r_in, r_out in _radial_bands(area)]


def region_probability(
        aim_x: float,
        aim_y: float,
        std_dev_mm: float,
        region: Region,
        radial_steps: int = DEFAULT_RADIAL_STEPS,
        angular_steps: int = DEFAULT_ANGULAR_STEPS
) -> float:
    """
    Integrate the throw density over one polar region.

    Args:
        aim_x, aim_y: Aim point (mm)
        std_dev_mm: Throw spread (mm, > 0)
        region: (r_inner, r_outer, angle_lo, angle_hi)
        radial_steps, angular_steps: Midpoint-rule resolution

    Returns:
        Probability mass inside the region
    """
    radial_steps = _require_count(radial_steps, "radial_steps")
    angular_steps = _require_count(angular_steps, "angular_steps")
    r_inner, r_outer, angle_lo, angle_hi = region
    if angle_lo is None or angle_hi is None:
        angle_lo, angle_hi = 0.0, 2 * math.pi

    dr = (r_outer - r_inner) / radial_steps
    dt = (angle_hi - angle_lo) / angular_steps
    radii = r_inner + (np.arange(radial_steps) + 0.5) * dr
    angles = angle_lo + (np.arange(angular_steps) + 0.5) * dt

    r_grid, t_grid = np.meshgrid(radii, angles, indexing="ij")
    # Dartboard polar convention: x = r sin(theta), y = -r cos(theta)
    x = r_grid * np.sin(t_grid)
    y = -r_grid * np.cos(t_grid)

    variance = std_dev_mm ** 2
    density = np.exp(-((x - aim_x) ** 2 + (y - aim_y) ** 2) / (2 * variance)) / (2 * math.pi * variance)

    return float(np.sum(density * r_grid) * dr * dt)


def _require_count(value, name: str) -> int:
    count = require_integral(value, name)
    if count <= 0:
        raise InvalidInputError(f"{name} must be positive, got {value}")
    return count


def _validate_spread(aim_x: float, aim_y: float, std_dev_mm: float) -> Tuple[float, float, float]:
    aim_x = require_finite(aim_x, "aim_x")
    aim_y = require_finite(aim_y, "aim_y")
    std_dev_mm = require_finite(std_dev_mm, "std_dev_mm")
    if std_dev_mm <= 0:
        raise InvalidInputError(f"std_dev_mm must be positive, got {std_dev_mm}")
    return aim_x, aim_y, std_dev_mm


def hit_probability(
        aim_x: float,
        aim_y: float,
        std_dev_mm: float,
        area_type: Union[AreaType, str],
        segment_number: Optional[int] = None,
        radial_steps: int = DEFAULT_RADIAL_STEPS,
        angular_steps: int = DEFAULT_ANGULAR_STEPS
) -> float:
    """
    Probability that a throw aimed at (aim_x, aim_y) lands in an area.

    Args:
        aim_x, aim_y: Aim point (mm)
        std_dev_mm: Player spread (mm, finite and > 0)
        area_type: INNER_BULL, OUTER_BULL, TRIPLE, DOUBLE or SINGLE
        segment_number: Sector 1-20, required for TRIPLE/DOUBLE/SINGLE and
            forbidden for bulls

    Returns:
        Probability in [0, 1]

    Raises:
        InvalidInputError: On any invalid argument
    """
    aim_x, aim_y, std_dev_mm = _validate_spread(aim_x, aim_y, std_dev_mm)
    radial_steps = _require_count(radial_steps, "radial_steps")
    angular_steps = _require_count(angular_steps, "angular_steps")
    regions = area_regions(area_type, segment_number)

    total = sum(
        region_probability(aim_x, aim_y, std_dev_mm, region, radial_steps, angular_steps)
        for region in regions
    )
    probability = min(max(total, 0.0), 1.0)

    logger.debug(
        f"P({_parse_area(area_type).value} {segment_number or ''}) at "
        f"({aim_x:.1f}, {aim_y:.1f}), sigma={std_dev_mm}mm = {probability:.4f}"
    )
    return probability


def _in_region(distance: float, angle: float, region: Region) -> bool:
    r_inner, r_outer, angle_lo, angle_hi = region
    if not r_inner <= distance < r_outer:
        return False
    if angle_lo is None or angle_hi is None:
        return True
    # Shift into [angle_lo, angle_lo + 2*pi) before comparing
    offset = (angle - angle_lo) % (2 * math.pi)
    return offset < angle_hi - angle_lo


def estimate_hit_probability(
        aim_x: float,
        aim_y: float,
        std_dev_mm: float,
        area_type: Union[AreaType, str],
        segment_number: Optional[int] = None,
        samples: int = MONTE_CARLO_SAMPLES,
        rng: Optional[UniformSource] = None
) -> float:
    """
    Monte Carlo estimate of hit_probability() from simulated throws.
    """
    aim_x, aim_y, std_dev_mm = _validate_spread(aim_x, aim_y, std_dev_mm)
    samples = _require_count(samples, "samples")
    regions = area_regions(area_type, segment_number)

    hits = 0
    for _ in range(samples):
        landed = simulate_throw(aim_x, aim_y, std_dev_mm, rng)
        distance, angle = point_to_polar(landed)
        if any(_in_region(distance, angle, region) for region in regions):
            hits += 1

    return hits / samples
