"""Find team comps whose champions share at least one skinset."""
import logging
import time
from typing import AbstractSet, Optional

from skinset_finder.models.roster import ResultEntry, Roster
from skinset_finder.services.assignment_enumerator import enumerate_assignments
from skinset_finder.services.overlap_resolver import overlap
from skinset_finder.services.skinset_index import SkinsetIndex

logger = logging.getLogger(__name__)


def resolve_playable_comps(
    roster: Roster,
    index: SkinsetIndex,
    excluded: AbstractSet[str] = frozenset(),
    max_players: Optional[int] = None,
) -> list[ResultEntry]:
    """Every assignment with at least one shared, non-excluded skinset.

    Results keep the enumeration order of `enumerate_assignments`.

    Raises:
        InvalidInputError: If the roster is malformed (see validate_roster).
    """
    start = time.perf_counter()
    assignments = enumerate_assignments(roster, max_players=max_players)
    logger.info(
        f"Resolved {len(assignments)} champion combos in "
        f"{(time.perf_counter() - start) * 1000:.1f}ms"
    )

    results = []
    for assignment in assignments:
        skinsets = overlap(assignment, index, excluded)
        if skinsets:
            results.append(ResultEntry(assignment=assignment, skinsets=skinsets))

    logger.info(f"{len(results)} of {len(assignments)} combos share a skinset")
    return results
