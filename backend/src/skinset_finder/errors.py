"""Exceptions raised by the skinset finder core."""


class SkinsetFinderError(Exception):
    """Base class for all skinset finder errors."""


class InvalidInputError(SkinsetFinderError, ValueError):
    """The caller supplied a malformed roster or lane name.

    Raised before any enumeration happens so callers can tell "no comp
    exists" (an empty result) apart from "the request made no sense".
    """


class RosterTooLargeError(InvalidInputError):
    """The roster has more players than the configured ceiling allows."""

    def __init__(self, player_count: int, max_players: int):
        super().__init__(
            f"Roster has {player_count} players but at most {max_players} are supported"
        )
        self.player_count = player_count
        self.max_players = max_players


class ReferenceDataError(SkinsetFinderError):
    """A reference data file exists but has the wrong shape."""
