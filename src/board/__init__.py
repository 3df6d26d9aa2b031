"""
Board module - dartboard geometry, scoring, and target catalogue.
"""
from .geometry import (
    DartboardMapper,
    DEFAULT_MAPPER,
    ring_for_distance,
    segment_for_angle,
    segment_center_angle,
    point_to_polar,
    target_to_point,
)
from .scoring import (
    ScoreDetail,
    score_for,
    point_to_score,
    point_to_score_detail,
    score_label,
    adjust_for_spider,
)
from .targets import ExpandedTarget, all_targets, basic_practice_targets, parse_target_label

__all__ = [
    "DartboardMapper",
    "DEFAULT_MAPPER",
    "ring_for_distance",
    "segment_for_angle",
    "segment_center_angle",
    "point_to_polar",
    "target_to_point",
    "ScoreDetail",
    "score_for",
    "point_to_score",
    "point_to_score_detail",
    "score_label",
    "adjust_for_spider",
    "ExpandedTarget",
    "all_targets",
    "basic_practice_targets",
    "parse_target_label",
]
