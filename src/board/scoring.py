"""
Score calculation from rings, sectors and board coordinates.
"""
import math
from dataclasses import dataclass
from typing import Tuple
import logging

from src.core import InvalidInputError, Point, RingType
from .geometry import DEFAULT_MAPPER, DartboardMapper

logger = logging.getLogger(__name__)

# Ring -> multiplier for sector-scored rings
RING_MULTIPLIERS = {
    RingType.INNER_SINGLE: 1,
    RingType.OUTER_SINGLE: 1,
    RingType.TRIPLE: 3,
    RingType.DOUBLE: 2,
}

# Rings whose score ignores the sector
FIXED_RING_SCORES = {
    RingType.INNER_BULL: 50,
    RingType.OUTER_BULL: 25,
    RingType.OUT: 0,
}

SPIDER_TOLERANCE = 0.001  # Distance (mm) or angle (rad) counted as "on the wire"
SPIDER_ADJUSTMENT_MM = 1.0
SPIDER_ADJUSTMENT_RAD = 0.01


@dataclass(frozen=True)
class ScoreDetail:
    """Score of a board position together with how it was derived."""
    score: int
    ring: RingType
    segment_number: int


def _check_segment(segment_number: int) -> None:
    if not 1 <= segment_number <= 20:
        raise InvalidInputError(f"Segment number must be between 1 and 20, got {segment_number}")


def score_for(ring: RingType, segment_number: int) -> int:
    """
    Combine ring and sector into a point value.

    The sector is ignored for bulls and misses.

    Raises:
        InvalidInputError: If a sector-scored ring gets a sector outside 1-20
    """
    if ring in FIXED_RING_SCORES:
        return FIXED_RING_SCORES[ring]
    if ring not in RING_MULTIPLIERS:
        raise InvalidInputError(f"Unknown ring: {ring!r}")

    _check_segment(segment_number)
    return segment_number * RING_MULTIPLIERS[ring]


def point_to_score_detail(point: Point, mapper: DartboardMapper = DEFAULT_MAPPER) -> ScoreDetail:
    """
    Resolve a landing point to ring, sector and score.

    Args:
        point: Board position in mm
        mapper: Mapper to use (default board geometry)

    Returns:
        ScoreDetail with score, ring and sector
    """
    distance, angle = mapper.point_to_polar(point.x, point.y)
    ring = mapper.ring_for_distance(distance)
    segment_number = mapper.segment_for_angle(angle)
    score = score_for(ring, segment_number)

    logger.debug(
        f"Score: ({point.x:.1f}, {point.y:.1f}) -> r={distance:.1f}mm, "
        f"theta={math.degrees(angle):.1f}deg -> {ring.value} {segment_number} = {score}"
    )
    return ScoreDetail(score=score, ring=ring, segment_number=segment_number)


def point_to_score(point: Point, mapper: DartboardMapper = DEFAULT_MAPPER) -> int:
    """Score of a landing point."""
    return point_to_score_detail(point, mapper).score


def score_label(ring: RingType, segment_number: int) -> str:
    """
    Display label for a hit: "T20", "D16", "BULL", "25", "18" or "OUT".

    Anything that is not a known ring is labelled "OUT".
    """
    if ring is RingType.INNER_BULL:
        return "BULL"
    if ring is RingType.OUTER_BULL:
        return "25"
    if ring not in RING_MULTIPLIERS:
        return "OUT"

    _check_segment(segment_number)
    if ring is RingType.TRIPLE:
        return f"T{segment_number}"
    if ring is RingType.DOUBLE:
        return f"D{segment_number}"
    return str(segment_number)


def adjust_for_spider(
        distance: float,
        angle: float,
        mapper: DartboardMapper = DEFAULT_MAPPER
) -> Tuple[float, float]:
    """
    Move a position that sits exactly on a wire into a neighbouring bed.

    Ring wires push the dart 1 mm inward; sector wires nudge the angle
    0.01 rad away from the wire. Angle 0 is the center of sector 20,
    not a wire.

    Returns:
        (distance, angle) after adjustment
    """
    adjusted_distance = distance
    adjusted_angle = angle

    for boundary in mapper.get_ring_boundaries().values():
        if abs(distance - boundary) < SPIDER_TOLERANCE:
            adjusted_distance = boundary - SPIDER_ADJUSTMENT_MM
            break

    # Sector wires sit at odd multiples of step/2
    step = mapper.geometry.sector_angle
    normalized = angle % (2 * math.pi)
    offset = (normalized + step / 2) % step

    on_wire = offset < SPIDER_TOLERANCE or offset > step - SPIDER_TOLERANCE
    if on_wire:
        shift = SPIDER_ADJUSTMENT_RAD if offset < step / 2 else -SPIDER_ADJUSTMENT_RAD
        adjusted_angle = angle + shift

    return adjusted_distance, adjusted_angle
