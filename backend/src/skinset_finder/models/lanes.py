"""Lane enumeration."""

from enum import Enum


class Lane(str, Enum):
    """Positional roles a champion can be played in.

    Declaration order is the enumeration order used everywhere lanes are
    iterated, so it also fixes the order of enumerated assignments.
    """

    TOP = "top"
    JUNGLE = "jungle"
    MID = "mid"
    BOT = "bot"
    SUPPORT = "support"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    Lane.TOP: "Top",
    Lane.JUNGLE: "Jungle",
    Lane.MID: "Mid",
    Lane.BOT: "Bottom",
    Lane.SUPPORT: "Support",
}

# Lane ordering for consistent iteration/display
LANE_ORDER: list[Lane] = list(Lane)
