"""Centralized lane normalization utility.

Reference data and API callers spell lanes in many ways ("JNG", "ADC",
"bottom", ...). Everything is normalized to the `Lane` enum here so the rest
of the codebase only ever compares enum members.
"""

from typing import Iterable, Optional

from skinset_finder.errors import InvalidInputError
from skinset_finder.models.lanes import LANE_ORDER, Lane

# Mapping from known lane spellings (lowercased) to canonical lanes
LANE_ALIASES: dict[str, Lane] = {
    # Top lane variations
    "top": Lane.TOP,
    "top laner": Lane.TOP,
    "toplane": Lane.TOP,
    "topside": Lane.TOP,

    # Jungle variations
    "jungle": Lane.JUNGLE,
    "jungler": Lane.JUNGLE,
    "jng": Lane.JUNGLE,
    "jg": Lane.JUNGLE,

    # Mid lane variations
    "mid": Lane.MID,
    "middle": Lane.MID,
    "mid laner": Lane.MID,
    "midlane": Lane.MID,

    # Bot/ADC variations - all normalize to bot
    "bot": Lane.BOT,
    "bottom": Lane.BOT,
    "adc": Lane.BOT,
    "bot laner": Lane.BOT,
    "ad carry": Lane.BOT,
    "marksman": Lane.BOT,

    # Support variations
    "support": Lane.SUPPORT,
    "sup": Lane.SUPPORT,
    "supp": Lane.SUPPORT,
    "utility": Lane.SUPPORT,
}


def normalize_lane(lane: Optional[str]) -> Optional[Lane]:
    """Normalize a lane string to a `Lane`.

    Args:
        lane: Lane string in any known format (e.g., "JNG", "Jungle", "ADC")

    Returns:
        The matching Lane, or None if the value is None or unrecognized

    Examples:
        >>> normalize_lane("JNG")
        <Lane.JUNGLE: 'jungle'>
        >>> normalize_lane("Bottom")
        <Lane.BOT: 'bot'>
        >>> normalize_lane(None)
    """
    if lane is None:
        return None
    if isinstance(lane, Lane):
        return lane

    return LANE_ALIASES.get(lane.strip().lower())


def normalize_lane_strict(lane: str) -> Lane:
    """Normalize a lane string, raising InvalidInputError if unknown."""
    normalized = normalize_lane(lane)
    if normalized is None:
        raise InvalidInputError(f"Unknown lane: {lane}")
    return normalized


def is_valid_lane(lane: Optional[str]) -> bool:
    """Check if a lane string can be normalized."""
    return normalize_lane(lane) is not None


def sort_lanes(lanes: Iterable[Lane]) -> list[Lane]:
    """Sort lanes in standard order (top, jungle, mid, bot, support)."""
    return sorted(set(lanes), key=LANE_ORDER.index)
