"""Roster models: what each player is willing to play."""

from dataclasses import dataclass, field
from typing import Iterable, Optional, Sequence

from skinset_finder.models.lanes import LANE_ORDER, Lane


@dataclass(frozen=True)
class ChampionCandidate:
    """A champion a player will play, and the lanes they will play it in."""

    champion: str
    lanes: frozenset[Lane] = frozenset()

    @property
    def ordered_lanes(self) -> list[Lane]:
        """Lanes in enumeration order (top, jungle, mid, bot, support)."""
        return [lane for lane in LANE_ORDER if lane in self.lanes]


@dataclass(frozen=True)
class PlayerCandidates:
    """Immutable snapshot of one player's champion pool for a single query."""

    candidates: tuple[ChampionCandidate, ...] = ()
    name: Optional[str] = None

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[tuple[str, Iterable[Lane]]],
        name: Optional[str] = None,
    ) -> "PlayerCandidates":
        """Build from (champion, lanes) pairs, keeping their order."""
        return cls(
            candidates=tuple(
                ChampionCandidate(champion=champion, lanes=frozenset(lanes))
                for champion, lanes in pairs
            ),
            name=name,
        )


Roster = Sequence[PlayerCandidates]


@dataclass(frozen=True)
class Pick:
    """One player's slot in an assignment."""

    champion: str
    lane: Lane


# One Pick per player, in roster order
Assignment = tuple[Pick, ...]


@dataclass(frozen=True)
class ResultEntry:
    """An assignment together with the skinsets every champion in it shares."""

    assignment: Assignment
    skinsets: frozenset[str] = field(default_factory=frozenset)

    @property
    def sorted_skinsets(self) -> list[str]:
        """Skinsets in alphabetical order for stable display."""
        return sorted(self.skinsets)

    @property
    def champions(self) -> list[str]:
        return [pick.champion for pick in self.assignment]
