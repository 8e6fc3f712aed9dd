"""Tests for lane normalization."""
import pytest

from skinset_finder.errors import InvalidInputError
from skinset_finder.models.lanes import Lane
from skinset_finder.utils.lane_normalizer import (
    is_valid_lane,
    normalize_lane,
    normalize_lane_strict,
    sort_lanes,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("TOP", Lane.TOP),
        ("top", Lane.TOP),
        ("JNG", Lane.JUNGLE),
        ("Jungle", Lane.JUNGLE),
        ("jg", Lane.JUNGLE),
        ("MIDDLE", Lane.MID),
        ("ADC", Lane.BOT),
        ("Bottom", Lane.BOT),
        ("SUP", Lane.SUPPORT),
        ("utility", Lane.SUPPORT),
        ("  mid  ", Lane.MID),
    ],
)
def test_normalize_lane(raw, expected):
    assert normalize_lane(raw) == expected


def test_normalize_lane_accepts_enum():
    assert normalize_lane(Lane.SUPPORT) is Lane.SUPPORT


def test_normalize_lane_unknown():
    assert normalize_lane("river") is None
    assert normalize_lane(None) is None
    assert not is_valid_lane("river")
    assert is_valid_lane("ADC")


def test_normalize_lane_strict_raises():
    with pytest.raises(InvalidInputError, match="Unknown lane: river"):
        normalize_lane_strict("river")


def test_sort_lanes_uses_standard_order():
    lanes = {Lane.SUPPORT, Lane.TOP, Lane.BOT, Lane.MID}
    assert sort_lanes(lanes) == [Lane.TOP, Lane.MID, Lane.BOT, Lane.SUPPORT]


def test_lane_display_names():
    assert Lane.BOT.display_name == "Bottom"
    assert Lane.JUNGLE.display_name == "Jungle"
