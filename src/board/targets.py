"""
Catalogue of aimable targets and of the fixed practice positions.
"""
from dataclasses import dataclass
from typing import List

from src.core import InvalidInputError, Point, RingType, Target, TargetType
from .geometry import DEFAULT_MAPPER
from .scoring import score_for, score_label


@dataclass(frozen=True)
class ExpandedTarget:
    """A board bed with its representative position, label and score."""
    ring: RingType
    number: int  # 1-20, 0 for bulls
    point: Point
    label: str
    score: int


def all_targets() -> List[Target]:
    """
    All 61 aimable targets: S/D/T for every sector, then BULL.
    """
    targets = []
    for number in range(1, 21):
        targets.append(Target(TargetType.SINGLE, number, f"S{number}"))
        targets.append(Target(TargetType.DOUBLE, number, f"D{number}"))
        targets.append(Target(TargetType.TRIPLE, number, f"T{number}"))
    targets.append(Target(TargetType.BULL, None, "BULL"))
    return targets


def basic_practice_targets() -> List[ExpandedTarget]:
    """
    The 62 positions used by random-target practice.

    Outer single, double and triple for every sector at the middle of their
    band, inner bull at the origin and outer bull straight up.
    """
    geometry = DEFAULT_MAPPER.geometry
    bands = (
        (RingType.OUTER_SINGLE, geometry.outer_single_aim_radius, "OS"),
        (RingType.DOUBLE, geometry.double_aim_radius, "D"),
        (RingType.TRIPLE, geometry.triple_aim_radius, "T"),
    )

    targets = []
    for ring, radius, prefix in bands:
        for number in range(1, 21):
            angle = DEFAULT_MAPPER.segment_center_angle(number)
            targets.append(ExpandedTarget(
                ring=ring,
                number=number,
                point=DEFAULT_MAPPER.polar_to_point(radius, angle),
                label=f"{prefix}{number}",
                score=score_for(ring, number),
            ))

    targets.append(ExpandedTarget(
        ring=RingType.INNER_BULL,
        number=0,
        point=Point(0.0, 0.0),
        label=score_label(RingType.INNER_BULL, 0),
        score=50,
    ))
    targets.append(ExpandedTarget(
        ring=RingType.OUTER_BULL,
        number=0,
        point=Point(0.0, -geometry.outer_bull_aim_radius),
        label=score_label(RingType.OUTER_BULL, 0),
        score=25,
    ))
    return targets


_LABEL_PREFIXES = {
    "S": TargetType.SINGLE,
    "D": TargetType.DOUBLE,
    "T": TargetType.TRIPLE,
}


def parse_target_label(label: str) -> Target:
    """
    Parse "T20", "D16", "S5" or "BULL" into a Target.

    Raises:
        InvalidInputError: If the label is not a known target
    """
    text = str(label).strip().upper()
    if text == "BULL":
        return Target(TargetType.BULL, None, "BULL")

    prefix, digits = text[:1], text[1:]
    if prefix not in _LABEL_PREFIXES or not digits.isdigit() or not 1 <= int(digits) <= 20:
        raise InvalidInputError(f"Unknown target label: {label!r}")

    number = int(digits)
    return Target(_LABEL_PREFIXES[prefix], number, f"{prefix}{number}")
