"""REST endpoints for finding skinset-sharing team comps."""

from fastapi import APIRouter, HTTPException, Request
from pydantic import BaseModel, Field

from skinset_finder.config import get_settings
from skinset_finder.errors import InvalidInputError
from skinset_finder.models.roster import ChampionCandidate, PlayerCandidates, ResultEntry
from skinset_finder.services.champion_lanes import ChampionLaneLookup
from skinset_finder.services.comp_finder import resolve_playable_comps
from skinset_finder.services.skinset_index import SkinsetIndex
from skinset_finder.utils.lane_normalizer import normalize_lane_strict, sort_lanes

router = APIRouter(prefix="/api", tags=["comps"])


class ChampionEntry(BaseModel):
    """A champion in a player's pool."""

    champion: str
    # None -> use the champion's usual lanes from reference data
    lanes: list[str] | None = None


class PlayerEntry(BaseModel):
    """One player's champion pool."""

    name: str | None = None
    exclude: bool = False  # Hidden from the results and the calculation
    champions: list[ChampionEntry] = Field(default_factory=list)


class FindCompsRequest(BaseModel):
    """Request body for finding comps."""

    players: list[PlayerEntry]
    excluded_skinsets: list[str] = Field(default_factory=list)


class PickInfo(BaseModel):
    champion: str
    lane: str


class CompInfo(BaseModel):
    """A comp and the skinsets every champion in it shares."""

    picks: list[PickInfo]
    skinsets: list[str]


class FindCompsResponse(BaseModel):
    """Comps in enumeration order, with player display names in column order."""

    players: list[str]
    comps: list[CompInfo]
    total: int


class ChampionInfo(BaseModel):
    name: str
    lanes: list[str]
    skinsets: list[str] = Field(default_factory=list)


class SkinsetListResponse(BaseModel):
    skinsets: list[str]


class ChampionListResponse(BaseModel):
    champions: list[ChampionInfo]


def _get_reference_data(request: Request) -> tuple[SkinsetIndex, ChampionLaneLookup]:
    return request.app.state.skinset_index, request.app.state.lane_lookup


def build_roster(
    players: list[PlayerEntry],
    lane_lookup: ChampionLaneLookup,
) -> tuple[list[str], list[PlayerCandidates]]:
    """Snapshot the request's players into an immutable roster.

    Excluded players are dropped; display names default to "Player N" using
    the player's position in the request.

    Raises:
        InvalidInputError: If a lane name is not recognized.
    """
    names: list[str] = []
    roster: list[PlayerCandidates] = []

    for position, player in enumerate(players, start=1):
        if player.exclude:
            continue

        name = player.name.strip() if player.name and player.name.strip() else f"Player {position}"
        candidates = []
        for entry in player.champions:
            if entry.lanes is None:
                lanes = lane_lookup.get_lanes(entry.champion)
            else:
                lanes = frozenset(normalize_lane_strict(lane) for lane in entry.lanes)
            candidates.append(ChampionCandidate(champion=entry.champion, lanes=lanes))

        names.append(name)
        roster.append(PlayerCandidates(candidates=tuple(candidates), name=name))

    return names, roster


def _comp_info(entry: ResultEntry) -> CompInfo:
    return CompInfo(
        picks=[PickInfo(champion=p.champion, lane=p.lane.value) for p in entry.assignment],
        skinsets=entry.sorted_skinsets,
    )


@router.get("/skinsets", response_model=SkinsetListResponse)
async def list_skinsets(request: Request):
    """List every known skinset (for building the exclusion list)."""
    index, _ = _get_reference_data(request)
    return SkinsetListResponse(skinsets=index.skinsets)


@router.get("/champions", response_model=ChampionListResponse)
async def list_champions(request: Request):
    """List every known champion with its usual lanes."""
    index, lane_lookup = _get_reference_data(request)
    names = sorted(set(lane_lookup.champions) | set(index.champions))
    return ChampionListResponse(
        champions=[
            ChampionInfo(
                name=name,
                lanes=[lane.value for lane in sort_lanes(lane_lookup.get_lanes(name))],
                skinsets=sorted(index.skinsets_for(name)),
            )
            for name in names
        ]
    )


@router.get("/champions/{name}", response_model=ChampionInfo)
async def get_champion(request: Request, name: str):
    """Get one champion's lanes and skinsets."""
    index, lane_lookup = _get_reference_data(request)
    if name not in index and not lane_lookup.has_champion(name):
        raise HTTPException(status_code=404, detail=f"Unknown champion: {name}")

    return ChampionInfo(
        name=name,
        lanes=[lane.value for lane in sort_lanes(lane_lookup.get_lanes(name))],
        skinsets=sorted(index.skinsets_for(name)),
    )


@router.post("/comps", response_model=FindCompsResponse)
def find_comps(request: Request, body: FindCompsRequest):
    """Find every comp whose champions share a non-excluded skinset.

    Declared sync so FastAPI runs the enumeration in its threadpool instead
    of on the event loop.
    """
    index, lane_lookup = _get_reference_data(request)

    try:
        names, roster = build_roster(body.players, lane_lookup)
        results = resolve_playable_comps(
            roster,
            index,
            excluded=frozenset(body.excluded_skinsets),
            max_players=get_settings().max_players,
        )
    except InvalidInputError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return FindCompsResponse(
        players=names,
        comps=[_comp_info(entry) for entry in results],
        total=len(results),
    )
