# tests/test_lookups.py

"""Static id -> name tables."""
import json

from domain.lookups import CHAMPIONS, QUEUES, NameLookup


def test_known_champion_and_queue():
    assert CHAMPIONS.name_for(103) == "Ahri"
    assert QUEUES.name_for(450) == "ARAM"
    assert len(QUEUES) == 5


def test_unknown_ids_fall_back_with_the_id():
    assert CHAMPIONS.name_for(99999) == "Champion 99999"
    assert QUEUES.name_for(1700) == "Other Queue"
    assert CHAMPIONS.name_for(None) == "Champion 0"


def test_merged_does_not_touch_original():
    extended = CHAMPIONS.merged({99999: "Newchamp"})

    assert extended.name_for(99999) == "Newchamp"
    assert 99999 not in CHAMPIONS
    assert extended.name_for(103) == "Ahri"


def test_with_data_dragon_layers_file_over_table(tmp_path):
    path = tmp_path / "champion.json"
    path.write_text(json.dumps({"data": {
        "Hwei": {"key": "910", "name": "Hwei"},
        "Ahri": {"key": "103", "name": "Ahri (DDragon)"},
        "Broken": {"name": "no key"},
    }}), encoding="utf-8")

    lookup = CHAMPIONS.with_data_dragon(path)

    assert lookup.name_for(910) == "Hwei"
    assert lookup.name_for(103) == "Ahri (DDragon)"
    assert lookup.name_for(1) == "Annie"


def test_custom_fallback():
    lookup = NameLookup({1: "one"}, fallback=lambda key: f"#{key}")
    assert lookup.name_for(2) == "#2"
