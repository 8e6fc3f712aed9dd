"""Business logic services."""

from skinset_finder.services.assignment_enumerator import (
    enumerate_assignments,
    validate_roster,
)
from skinset_finder.services.champion_lanes import ChampionLaneLookup
from skinset_finder.services.comp_finder import resolve_playable_comps
from skinset_finder.services.overlap_resolver import overlap
from skinset_finder.services.skinset_index import SkinsetIndex

__all__ = [
    "enumerate_assignments",
    "validate_roster",
    "ChampionLaneLookup",
    "resolve_playable_comps",
    "overlap",
    "SkinsetIndex",
]
