#!/usr/bin/env python3
"""
Print every team comp that shares a skinset for a roster file.

The roster file uses the same shape as the POST /api/comps body:

    {
      "players": [
        {"name": "Alice", "champions": [{"champion": "Ahri", "lanes": ["MID"]}]},
        {"champions": [{"champion": "Lux"}]}
      ],
      "excluded_skinsets": ["Arcade"]
    }

Usage:
    python scripts/find_comps.py roster.json
    python scripts/find_comps.py roster.json --exclude "Star Guardian" --limit 20
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent / "backend" / "src"))

from skinset_finder.api.routes.comps import FindCompsRequest, build_roster
from skinset_finder.config import get_knowledge_dir, get_settings
from skinset_finder.errors import InvalidInputError
from skinset_finder.services.champion_lanes import ChampionLaneLookup
from skinset_finder.services.comp_finder import resolve_playable_comps
from skinset_finder.services.skinset_index import SkinsetIndex


def main():
    parser = argparse.ArgumentParser(
        description="Find League comps whose champions share a skinset",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("roster", type=Path, help="Roster JSON file")
    parser.add_argument("--knowledge-dir", "-k", type=Path,
                        help="Reference data directory (default: from settings)")
    parser.add_argument("--exclude", "-x", action="append", default=[], metavar="SKINSET",
                        help="Skinset to exclude (repeatable)")
    parser.add_argument("--limit", "-n", type=int, default=0,
                        help="Only print the first N comps (0 = all)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Log timing info")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    with open(args.roster, encoding="utf-8") as f:
        body = FindCompsRequest.model_validate(json.load(f))

    knowledge_dir = args.knowledge_dir or get_knowledge_dir()
    index = SkinsetIndex.from_knowledge_dir(knowledge_dir)
    lane_lookup = ChampionLaneLookup(knowledge_dir)

    try:
        names, roster = build_roster(body.players, lane_lookup)
        results = resolve_playable_comps(
            roster,
            index,
            excluded=frozenset(body.excluded_skinsets) | frozenset(args.exclude),
            max_players=get_settings().max_players,
        )
    except InvalidInputError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(" | ".join(names + ["Overlapping Skinsets"]))
    shown = results[: args.limit] if args.limit > 0 else results
    for entry in shown:
        picks = [f"{p.champion} {p.lane.display_name}" for p in entry.assignment]
        print(" | ".join(picks + [", ".join(entry.sorted_skinsets)]))

    print(f"\n{len(results)} comps found")
    return 0


if __name__ == "__main__":
    sys.exit(main())
