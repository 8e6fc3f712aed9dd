"""Tests for champion lane lookup."""
import json

import pytest

from skinset_finder.errors import ReferenceDataError
from skinset_finder.models.lanes import Lane
from skinset_finder.services.champion_lanes import ChampionLaneLookup


@pytest.fixture
def mock_lane_data(tmp_path):
    """Create mock champion lane data."""
    data = {
        "champions": {
            "Ahri": ["MID"],
            "Yasuo": ["MID", "TOP", "ADC"],
            "Lux": ["SUP", "Middle"],
            "Oddball": ["RIVER", "JNG"],
        }
    }
    (tmp_path / "champion_lanes.json").write_text(json.dumps(data))
    return tmp_path


def test_get_lanes(mock_lane_data):
    lookup = ChampionLaneLookup(mock_lane_data)
    assert lookup.get_lanes("Ahri") == {Lane.MID}
    assert lookup.get_lanes("Yasuo") == {Lane.MID, Lane.TOP, Lane.BOT}
    assert lookup.get_lanes("Lux") == {Lane.SUPPORT, Lane.MID}


def test_unknown_lane_names_ignored(mock_lane_data):
    lookup = ChampionLaneLookup(mock_lane_data)
    assert lookup.get_lanes("Oddball") == {Lane.JUNGLE}


def test_unknown_champion(mock_lane_data):
    lookup = ChampionLaneLookup(mock_lane_data)
    assert lookup.get_lanes("Teemo") == frozenset()
    assert not lookup.has_champion("Teemo")
    assert lookup.has_champion("Ahri")


def test_champions_sorted(mock_lane_data):
    lookup = ChampionLaneLookup(mock_lane_data)
    assert lookup.champions == ["Ahri", "Lux", "Oddball", "Yasuo"]


def test_missing_file(tmp_path):
    lookup = ChampionLaneLookup(tmp_path)
    assert lookup.champions == []


def test_malformed_file(tmp_path):
    (tmp_path / "champion_lanes.json").write_text(json.dumps({"champs": {}}))
    with pytest.raises(ReferenceDataError):
        ChampionLaneLookup(tmp_path)


def test_shipped_reference_data_is_consistent():
    """Every champion in a shipped skinset has lane data."""
    from skinset_finder.config import REPO_ROOT
    from skinset_finder.services.skinset_index import SkinsetIndex

    knowledge_dir = REPO_ROOT / "knowledge"
    lookup = ChampionLaneLookup(knowledge_dir)
    index = SkinsetIndex.from_knowledge_dir(knowledge_dir)

    assert len(index) > 0
    missing = [c for c in index.champions if not lookup.get_lanes(c)]
    assert missing == []


@pytest.mark.parametrize("lanes", ["MID", None, ["MID", 3]])
def test_lane_entry_must_be_list_of_names(tmp_path, lanes):
    """A bare string would otherwise be read as one lane per letter."""
    data = {"champions": {"Ahri": lanes}}
    (tmp_path / "champion_lanes.json").write_text(json.dumps(data))
    with pytest.raises(ReferenceDataError, match="'Ahri'"):
        ChampionLaneLookup(tmp_path)
