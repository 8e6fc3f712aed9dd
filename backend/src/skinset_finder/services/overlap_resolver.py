"""Resolve the skinsets shared by every champion in an assignment."""
import logging
from typing import AbstractSet

from skinset_finder.models.roster import Assignment
from skinset_finder.services.skinset_index import SkinsetIndex

logger = logging.getLogger(__name__)


def overlap(
    assignment: Assignment,
    index: SkinsetIndex,
    excluded: AbstractSet[str] = frozenset(),
) -> frozenset[str]:
    """Skinsets common to every champion in the assignment, minus exclusions.

    A champion missing from the index has no skinsets, so any assignment
    containing it resolves to the empty set.
    """
    shared: frozenset[str] | None = None

    for pick in assignment:
        if pick.champion not in index:
            logger.debug(f"No skinset data for {pick.champion}")
            return frozenset()

        skinsets = index.skinsets_for(pick.champion)
        shared = skinsets if shared is None else shared & skinsets
        if not shared:
            return frozenset()

    if shared is None:
        return frozenset()
    return shared - excluded
