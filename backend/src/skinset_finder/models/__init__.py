"""Data models for the League skinset finder."""

from skinset_finder.models.lanes import LANE_ORDER, Lane
from skinset_finder.models.roster import (
    Assignment,
    ChampionCandidate,
    Pick,
    PlayerCandidates,
    ResultEntry,
    Roster,
)

__all__ = [
    "LANE_ORDER",
    "Lane",
    "Assignment",
    "ChampionCandidate",
    "Pick",
    "PlayerCandidates",
    "ResultEntry",
    "Roster",
]
