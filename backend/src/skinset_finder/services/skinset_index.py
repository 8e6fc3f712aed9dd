"""Reverse index from champion to the skinsets it belongs to."""
import json
import logging
from collections import defaultdict
from pathlib import Path
from types import MappingProxyType
from typing import Iterable, Mapping

from skinset_finder.errors import ReferenceDataError

logger = logging.getLogger(__name__)

SKINSETS_FILE = "skinsets.json"


class SkinsetIndex:
    """Immutable champion -> skinsets lookup.

    Built once from the skinset -> champions reference feed and shared
    read-only by every query afterwards. There is no update operation.
    """

    def __init__(self, champion_skinsets: Mapping[str, Iterable[str]]):
        by_champion = {
            champion: frozenset(skinsets)
            for champion, skinsets in champion_skinsets.items()
        }
        by_skinset: dict[str, set[str]] = defaultdict(set)
        for champion, skinsets in by_champion.items():
            for skinset in skinsets:
                by_skinset[skinset].add(champion)

        self._by_champion: Mapping[str, frozenset[str]] = MappingProxyType(by_champion)
        self._by_skinset: Mapping[str, frozenset[str]] = MappingProxyType(
            {skinset: frozenset(champs) for skinset, champs in by_skinset.items()}
        )

    @classmethod
    def from_skinsets(cls, skinset_champions: Mapping[str, Iterable[str]]) -> "SkinsetIndex":
        """Build the index from a skinset -> champions mapping."""
        champion_skinsets: dict[str, set[str]] = defaultdict(set)
        for skinset, champions in skinset_champions.items():
            for champion in champions:
                champion_skinsets[champion].add(skinset)
        return cls(champion_skinsets)

    @classmethod
    def from_knowledge_dir(cls, knowledge_dir: Path) -> "SkinsetIndex":
        """Load skinsets.json from the knowledge directory.

        A missing file yields an empty index (every lookup misses) rather
        than an error, so the service can still start without reference data.
        """
        path = Path(knowledge_dir) / SKINSETS_FILE
        if not path.exists():
            logger.warning(f"{SKINSETS_FILE} not found at {path}")
            return cls({})

        with open(path, encoding="utf-8") as f:
            data = json.load(f)

        skinsets = data.get("skinsets") if isinstance(data, dict) else None
        if not isinstance(skinsets, dict):
            raise ReferenceDataError(f"{path} must contain a 'skinsets' object")
        for skinset, champions in skinsets.items():
            if not isinstance(champions, list) or not all(isinstance(c, str) for c in champions):
                raise ReferenceDataError(
                    f"{path}: skinset {skinset!r} must map to a list of champion names"
                )

        index = cls.from_skinsets(skinsets)
        logger.info(
            f"Loaded {len(index.skinsets)} skinsets covering {len(index)} champions from {path}"
        )
        return index

    def skinsets_for(self, champion: str) -> frozenset[str]:
        """Skinsets containing this champion; empty if the champion is unknown."""
        return self._by_champion.get(champion, frozenset())

    def champions_in(self, skinset: str) -> frozenset[str]:
        """Champions belonging to a skinset; empty if the skinset is unknown."""
        return self._by_skinset.get(skinset, frozenset())

    @property
    def skinsets(self) -> list[str]:
        """All skinset names, sorted."""
        return sorted(self._by_skinset)

    @property
    def champions(self) -> list[str]:
        """All indexed champions, sorted."""
        return sorted(self._by_champion)

    def __contains__(self, champion: object) -> bool:
        return champion in self._by_champion

    def __len__(self) -> int:
        return len(self._by_champion)

    def __repr__(self) -> str:
        return f"SkinsetIndex(champions={len(self)}, skinsets={len(self._by_skinset)})"

