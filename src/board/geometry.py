"""
Dartboard geometry calculations and sector mapping.

All coordinates are physical millimetres with the origin at the board center
and +y pointing down. Angles are radians, 0 = straight up, clockwise positive.
"""
import math
from typing import Dict, Optional, Tuple
import logging

import numpy as np

from src.core import BoardGeometry, InvalidInputError, Point, RingType, Target, TargetType
from src.core.checks import require_finite, require_segment_number

logger = logging.getLogger(__name__)

TWO_PI = 2 * math.pi


class DartboardMapper:
    """
    Maps physical board positions to rings and sectors, and targets to
    their canonical aim points.
    """

    def __init__(self, board_geometry: Optional[BoardGeometry] = None):
        """
        Initialize dartboard mapper.

        Args:
            board_geometry: Board dimensions (default: BoardGeometry())
        """
        self.geometry = board_geometry or BoardGeometry()

        # Outer boundary of each ring, innermost first. Intervals are [inner, outer).
        g = self.geometry
        self._ring_bounds = (
            (g.inner_bull_radius, RingType.INNER_BULL),
            (g.outer_bull_radius, RingType.OUTER_BULL),
            (g.triple_inner_radius, RingType.INNER_SINGLE),
            (g.triple_outer_radius, RingType.TRIPLE),
            (g.double_inner_radius, RingType.OUTER_SINGLE),
            (g.double_outer_radius, RingType.DOUBLE),
            (g.board_edge_radius, RingType.OUTER_SINGLE),
        )
        self._aim_radii = {
            TargetType.SINGLE: g.single_aim_radius,
            TargetType.TRIPLE: g.triple_aim_radius,
            TargetType.DOUBLE: g.double_aim_radius,
        }

    def point_to_polar(self, x: float, y: float) -> Tuple[float, float]:
        """
        Convert board coordinates to polar coordinates.

        Returns:
            (distance, angle) with angle in radians (0 = top, clockwise)
        """
        distance = float(np.hypot(x, y))
        # Dartboard convention: rotate so -y is 0 and flip to clockwise
        angle = float(np.arctan2(x, -y))
        return distance, angle

    def ring_for_distance(self, distance: float) -> RingType:
        """
        Convert distance from center to ring type.

        Raises:
            InvalidInputError: If distance is negative or not finite
        """
        distance = require_finite(distance, "distance")
        if distance < 0:
            raise InvalidInputError(f"distance cannot be negative, got {distance}")

        for outer, ring in self._ring_bounds:
            if distance < outer:
                return ring
        return RingType.OUT

    def segment_for_angle(self, angle: float) -> int:
        """
        Convert an angle to its sector number (1-20).

        Sector 20 is centered at 0 and spans [-step/2, step/2). Any finite
        angle is accepted and wrapped into [0, 2*pi).
        """
        angle = require_finite(angle, "angle")
        step = self.geometry.sector_angle

        adjusted = (angle + step / 2) % TWO_PI
        sector_idx = int(adjusted // step) % self.geometry.num_sectors

        return self.geometry.sector_sequence[sector_idx]

    def segment_center_angle(self, number: int) -> float:
        """
        Get the center angle of a sector.

        Raises:
            InvalidInputError: If number is not an integer in 1-20
        """
        number = require_segment_number(number)
        return self.geometry.sector_sequence.index(number) * self.geometry.sector_angle

    def polar_to_point(self, radius: float, angle: float) -> Point:
        """Convert (radius, dartboard angle) back to board coordinates."""
        return Point(radius * math.sin(angle), -radius * math.cos(angle))

    def target_to_point(self, target: Target) -> Point:
        """
        Resolve a target to its canonical aim point.

        BULL aims at the origin; SINGLE, TRIPLE and DOUBLE aim at the middle
        of their band on the sector's center line.

        Raises:
            InvalidInputError: If the segment number is missing, out of range,
                or set on a BULL target
        """
        if target.type is TargetType.BULL:
            if target.number is not None:
                raise InvalidInputError("BULL target must have number=None")
            return Point(0.0, 0.0)

        if target.type not in self._aim_radii:
            raise InvalidInputError(f"Invalid target type: {target.type!r}")
        if target.number is None:
            raise InvalidInputError(f"{target.type.value} target requires a segment number (1-20)")

        angle = self.segment_center_angle(target.number)
        point = self.polar_to_point(self._aim_radii[target.type], angle)

        logger.debug(f"Target {target.label or target.type.value}: aim at ({point.x:.2f}, {point.y:.2f})")
        return point

    def is_on_board(self, x: float, y: float) -> bool:
        """Check if coordinates are inside the scoring surface."""
        distance, _ = self.point_to_polar(x, y)
        return distance < self.geometry.board_edge_radius

    def get_ring_boundaries(self) -> Dict[str, float]:
        """
        Get all wire radii in mm.

        Returns:
            Dictionary with ring names and radii
        """
        g = self.geometry
        return {
            "inner_bull": g.inner_bull_radius,
            "outer_bull": g.outer_bull_radius,
            "triple_inner": g.triple_inner_radius,
            "triple_outer": g.triple_outer_radius,
            "double_inner": g.double_inner_radius,
            "double_outer": g.double_outer_radius,
        }


DEFAULT_MAPPER = DartboardMapper()


def ring_for_distance(distance: float) -> RingType:
    return DEFAULT_MAPPER.ring_for_distance(distance)


def segment_for_angle(angle: float) -> int:
    return DEFAULT_MAPPER.segment_for_angle(angle)


def segment_center_angle(number: int) -> float:
    return DEFAULT_MAPPER.segment_center_angle(number)


def point_to_polar(point: Point) -> Tuple[float, float]:
    return DEFAULT_MAPPER.point_to_polar(point.x, point.y)


def target_to_point(target: Target) -> Point:
    return DEFAULT_MAPPER.target_to_point(target)
