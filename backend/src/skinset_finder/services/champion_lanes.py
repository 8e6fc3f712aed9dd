"""Champion base lane lookup."""
import json
import logging
from pathlib import Path

from skinset_finder.errors import ReferenceDataError
from skinset_finder.models.lanes import Lane
from skinset_finder.utils.lane_normalizer import normalize_lane

logger = logging.getLogger(__name__)

CHAMPION_LANES_FILE = "champion_lanes.json"


class ChampionLaneLookup:
    """Lookup the lanes each champion is commonly drafted into.

    Used to seed a player's candidate lanes when a champion is added
    without an explicit lane selection.
    """

    def __init__(self, knowledge_dir: Path):
        self.knowledge_dir = Path(knowledge_dir)
        self._lanes: dict[str, frozenset[Lane]] = {}
        self._load_data()

    def _load_data(self):
        """Load champion_lanes.json, dropping lane names we don't recognize."""
        path = self.knowledge_dir / CHAMPION_LANES_FILE
        if not path.exists():
            logger.warning(f"{CHAMPION_LANES_FILE} not found at {path}")
            return

        with open(path, encoding="utf-8") as f:
            data = json.load(f)

        champions = data.get("champions") if isinstance(data, dict) else None
        if not isinstance(champions, dict):
            raise ReferenceDataError(f"{path} must contain a 'champions' object")

        for champion, lane_names in champions.items():
            if not isinstance(lane_names, list) or not all(isinstance(n, str) for n in lane_names):
                raise ReferenceDataError(
                    f"{path}: champion {champion!r} must map to a list of lane names"
                )
            lanes = set()
            for name in lane_names:
                lane = normalize_lane(name)
                if lane is None:
                    logger.warning(f"Ignoring unknown lane {name!r} for {champion}")
                    continue
                lanes.add(lane)
            self._lanes[champion] = frozenset(lanes)

    def get_lanes(self, champion: str) -> frozenset[Lane]:
        """Base lanes for a champion (empty if unknown)."""
        return self._lanes.get(champion, frozenset())

    def has_champion(self, champion: str) -> bool:
        return champion in self._lanes

    @property
    def champions(self) -> list[str]:
        """All known champions, sorted."""
        return sorted(self._lanes)
