"""Utility modules for skinset_finder."""

from skinset_finder.utils.lane_normalizer import (
    LANE_ALIASES,
    normalize_lane,
    normalize_lane_strict,
    is_valid_lane,
    sort_lanes,
)

__all__ = [
    "LANE_ALIASES",
    "normalize_lane",
    "normalize_lane_strict",
    "is_valid_lane",
    "sort_lanes",
]
