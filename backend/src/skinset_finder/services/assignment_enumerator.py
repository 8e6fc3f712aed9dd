"""Enumerate every collision-free (champion, lane) assignment for a roster.

Each player ends up with exactly one champion in one lane, and no champion
or lane is used twice across the team. Enumeration is suffix-first: the
solutions for players[1:] are computed once, then every choice for the first
player is prepended to each tail solution it does not collide with. The
collision check scans the tail itself, so no used-set is threaded through
the recursion and every call is a pure function of its input.
"""

from typing import Optional, Sequence

from skinset_finder.errors import InvalidInputError, RosterTooLargeError
from skinset_finder.models.roster import Assignment, Pick, PlayerCandidates, Roster


def validate_roster(roster: Roster, max_players: Optional[int] = None) -> None:
    """Reject rosters the enumerator cannot give a meaningful answer for.

    Raises:
        InvalidInputError: If the roster is empty, or a player lists the
            same champion twice.
        RosterTooLargeError: If max_players is set and the roster exceeds it.
    """
    if len(roster) == 0:
        raise InvalidInputError("Roster must contain at least one player")

    if max_players is not None and len(roster) > max_players:
        raise RosterTooLargeError(len(roster), max_players)

    for position, player in enumerate(roster, start=1):
        seen: set[str] = set()
        for candidate in player.candidates:
            if candidate.champion in seen:
                raise InvalidInputError(
                    f"Player {position} lists {candidate.champion} more than once"
                )
            seen.add(candidate.champion)


def _single_player_assignments(player: PlayerCandidates) -> list[Assignment]:
    return [
        (Pick(candidate.champion, lane),)
        for candidate in player.candidates
        for lane in candidate.ordered_lanes
    ]


def _solve(players: Sequence[PlayerCandidates]) -> list[Assignment]:
    if len(players) == 1:
        return _single_player_assignments(players[0])

    tail_solutions = _solve(players[1:])
    result: list[Assignment] = []

    for candidate in players[0].candidates:
        for lane in candidate.ordered_lanes:
            for tail in tail_solutions:
                # Skip if this champion or lane is already taken later in the team
                if any(p.champion == candidate.champion or p.lane == lane for p in tail):
                    continue
                result.append((Pick(candidate.champion, lane),) + tail)

    return result


def enumerate_assignments(
    roster: Roster,
    max_players: Optional[int] = None,
) -> list[Assignment]:
    """Get every valid assignment for the roster, in deterministic order.

    Order follows the first player's candidates in input order, then lanes
    in enumeration order, then the tail solutions in the order they were
    produced. Player order is preserved: entry i always belongs to player i.

    Args:
        roster: Ordered player candidate sets (at least one)
        max_players: Optional ceiling on roster size; exceeding it raises
            instead of truncating the search

    Returns:
        List of assignments; empty if no collision-free assignment exists
    """
    validate_roster(roster, max_players)
    return _solve(list(roster))
