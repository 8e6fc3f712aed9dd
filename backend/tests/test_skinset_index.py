"""Tests for the skinset index."""
import json

import pytest

from skinset_finder.errors import ReferenceDataError
from skinset_finder.services.skinset_index import SkinsetIndex


@pytest.fixture
def mock_knowledge(tmp_path):
    """Create a mock skinsets.json."""
    data = {
        "skinsets": {
            "Star Guardian": ["Ahri", "Lux", "Jinx"],
            "Spirit Blossom": ["Ahri", "Yasuo"],
            "Empty": [],
        }
    }
    (tmp_path / "skinsets.json").write_text(json.dumps(data))
    return tmp_path


def test_from_skinsets_builds_reverse_index():
    index = SkinsetIndex.from_skinsets({"S1": ["A", "B"], "S2": ["B"]})
    assert index.skinsets_for("A") == {"S1"}
    assert index.skinsets_for("B") == {"S1", "S2"}
    assert index.champions_in("S1") == {"A", "B"}


def test_unknown_champion_has_no_skinsets():
    index = SkinsetIndex.from_skinsets({"S1": ["A"]})
    assert index.skinsets_for("Z") == frozenset()
    assert "Z" not in index
    assert "A" in index


def test_index_does_not_alias_source_data():
    source = {"A": {"S1"}}
    index = SkinsetIndex(source)
    source["A"].add("S2")
    source["B"] = {"S3"}
    assert index.skinsets_for("A") == {"S1"}
    assert "B" not in index


def test_index_is_read_only():
    index = SkinsetIndex({"A": {"S1"}})
    with pytest.raises(TypeError):
        index._by_champion["B"] = frozenset({"S2"})


def test_load_from_knowledge_dir(mock_knowledge):
    index = SkinsetIndex.from_knowledge_dir(mock_knowledge)
    assert len(index) == 4
    assert index.skinsets_for("Ahri") == {"Star Guardian", "Spirit Blossom"}
    assert index.champions == ["Ahri", "Jinx", "Lux", "Yasuo"]
    # A skinset with no champions never appears in a reverse lookup
    assert index.skinsets == ["Spirit Blossom", "Star Guardian"]


def test_missing_file_gives_empty_index(tmp_path):
    index = SkinsetIndex.from_knowledge_dir(tmp_path)
    assert len(index) == 0
    assert index.skinsets_for("Ahri") == frozenset()


def test_malformed_file_raises(tmp_path):
    (tmp_path / "skinsets.json").write_text(json.dumps(["not", "a", "dict"]))
    with pytest.raises(ReferenceDataError):
        SkinsetIndex.from_knowledge_dir(tmp_path)


@pytest.mark.parametrize(
    "skinsets",
    [
        {"Solo": "Ahri"},
        {"Solo": {"Ahri": True}},
        {"Solo": ["Ahri", 7]},
    ],
)
def test_skinset_entry_must_be_list_of_names(tmp_path, skinsets):
    """A bare string would otherwise be indexed letter by letter."""
    (tmp_path / "skinsets.json").write_text(json.dumps({"skinsets": skinsets}))
    with pytest.raises(ReferenceDataError, match="'Solo'"):
        SkinsetIndex.from_knowledge_dir(tmp_path)
