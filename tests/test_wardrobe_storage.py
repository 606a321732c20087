"""Wardrobe storage, taxonomy and model tests."""

from __future__ import annotations

import sqlite3
from datetime import date
from pathlib import Path
from typing import List

import pytest

from models import taxonomy
from models.item import Item, item_from_record
from models.outfit import Outfit, outfit_from_record
from tests.helpers import USER, complete_items, days_ago, make_item, make_outfit
from tools.wardrobe_store import SQLiteWardrobeStore


@pytest.fixture()
def store(tmp_path: Path) -> SQLiteWardrobeStore:
    return SQLiteWardrobeStore(tmp_path / "wardrobe.db")


def test_taxonomy_validation_normalises_and_rejects() -> None:
    """Validation helpers accept known vocabulary and reject everything else."""

    assert taxonomy.validate_item_type(" Top ") == "top"
    assert taxonomy.validate_status("Retired") == "retired"
    assert taxonomy.validate_rating(2) == 2

    with pytest.raises(ValueError):
        taxonomy.validate_item_type("dress")
    with pytest.raises(ValueError):
        taxonomy.validate_status("lost")
    with pytest.raises(ValueError):
        taxonomy.validate_rating(3)


def test_item_from_record_defaults_status() -> None:
    item = item_from_record({"id": "i1", "user_id": USER, "type": "Footwear"})
    assert item == Item(id="i1", user_id=USER, type="footwear", status="available")
    assert item.is_available

    with pytest.raises(ValueError):
        item_from_record({"id": "i2", "user_id": USER})


def test_outfit_from_record_accepts_camel_case() -> None:
    outfit = outfit_from_record(
        {
            "id": "o1",
            "user_id": USER,
            "rating": 2,
            "wearDate": "2025-03-01",
            "items": [{"itemId": "t", "itemType": "top"}, {"item_id": "b", "item_type": "bottom"}],
            "tags": ["tag-1", {"tagId": "tag-2"}],
        }
    )
    assert outfit.wear_date == date(2025, 3, 1)
    assert outfit.item_ids == ["t", "b"]
    assert outfit.has_tag("tag-1") and outfit.has_tag("tag-2")
    assert not outfit.is_ghost


def test_outfit_rejects_unknown_rating() -> None:
    with pytest.raises(ValueError):
        Outfit(id="o", user_id=USER, rating=5)


def test_available_and_unavailable_items_are_split(store: SQLiteWardrobeStore) -> None:
    store.add_item(make_item("top-1", "top"))
    store.add_item(make_item("top-2", "top", status="withheld"))
    store.add_item(make_item("shoes-1", "footwear", status="retired"))
    store.add_item(make_item("top-3", "top", user_id="other"))

    assert [item.id for item in store.list_available_items(USER)] == ["top-1"]
    assert [item.id for item in store.list_unavailable_items(USER)] == ["shoes-1", "top-2"]
    assert [item.id for item in store.list_available_items("other")] == ["top-3"]


def test_last_worn_dates_ignore_ghost_outfits(store: SQLiteWardrobeStore) -> None:
    store.add_outfit(make_outfit("old", complete_items("1"), worn=days_ago(20)))
    store.add_outfit(make_outfit("new", [("top-1", "top"), ("bottom-2", "bottom")], worn=days_ago(2)))
    store.add_outfit(make_outfit("idea", [("shoes-9", "footwear"), ("top-1", "top")]))

    last_worn = store.last_worn_dates_by_item(USER)

    assert last_worn["top-1"] == days_ago(2)
    assert last_worn["bottom-1"] == days_ago(20)
    assert last_worn["bottom-2"] == days_ago(2)
    assert "shoes-9" not in last_worn


def test_eligible_outfits_are_rated_and_ordered(store: SQLiteWardrobeStore) -> None:
    store.add_outfit(make_outfit("idea", complete_items("1"), rating=2))
    store.add_outfit(make_outfit("older", complete_items("2"), worn=days_ago(30)))
    store.add_outfit(make_outfit("miss", complete_items("3"), rating=0, worn=days_ago(1)))
    store.add_outfit(make_outfit("newer", complete_items("4"), rating=2, worn=days_ago(3), tags=["tag-a"]))

    eligible = store.list_eligible_outfits(USER, min_rating=1)

    assert [outfit.id for outfit in eligible] == ["newer", "older", "idea"]
    newer = eligible[0]
    assert [entry.item_type for entry in newer.items] == ["top", "bottom", "footwear"]
    assert newer.has_tag("tag-a")
    assert eligible[-1].is_ghost


def test_load_outfits_by_ids_is_user_scoped(store: SQLiteWardrobeStore) -> None:
    store.add_outfit(make_outfit("mine", complete_items("1"), worn=days_ago(1)))
    store.add_outfit(make_outfit("theirs", complete_items("2"), worn=days_ago(1), user_id="other"))

    loaded = store.load_outfits_by_ids(USER, ["mine", "theirs", "missing"])

    assert [outfit.id for outfit in loaded] == ["mine"]
    assert store.load_outfits_by_ids(USER, []) == []


def test_list_outfits_pages_worn_outfits_with_one_extra_row(store: SQLiteWardrobeStore) -> None:
    for index in range(5):
        store.add_outfit(make_outfit(f"o{index}", complete_items(str(index)), worn=days_ago(index + 1)))
    store.add_outfit(make_outfit("idea", complete_items("9")))

    first = store.list_outfits(USER, page=0, size=2)
    last = store.list_outfits(USER, page=2, size=2)

    assert [outfit.id for outfit in first] == ["o0", "o1", "o2"]
    assert [outfit.id for outfit in last] == ["o4"]
    assert all(not outfit.is_ghost for outfit in store.list_worn_outfits(USER))
    assert [outfit.id for outfit in store.list_all_outfits(USER)][-1] == "idea"


def test_add_outfit_replaces_items_and_delete_removes(store: SQLiteWardrobeStore) -> None:
    store.add_outfit(make_outfit("o", complete_items("1"), worn=days_ago(1)))
    store.add_outfit(make_outfit("o", complete_items("2"), worn=days_ago(1)))

    (reloaded,) = store.load_outfits_by_ids(USER, ["o"])
    assert sorted(reloaded.item_ids) == ["bottom-2", "shoes-2", "top-2"]

    assert store.delete_outfit(USER, "o") is True
    assert store.delete_outfit(USER, "o") is False
    assert store.load_outfits_by_ids(USER, ["o"]) == []
    assert store.last_worn_dates_by_item(USER) == {}


def test_tags_are_listed_by_name(store: SQLiteWardrobeStore) -> None:
    store.add_tag(USER, "tag-2", "Work")
    store.add_tag(USER, "tag-1", "Date night")
    store.add_tag("other", "tag-3", "Gym")

    assert store.list_tags(USER) == [{"id": "tag-1", "name": "Date night"}, {"id": "tag-2", "name": "Work"}]


def test_store_closes_every_connection(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Each store call opens its own connection and closes it afterwards."""

    opened: List[sqlite3.Connection] = []
    real_connect = sqlite3.connect

    def tracking_connect(*args, **kwargs) -> sqlite3.Connection:
        conn = real_connect(*args, **kwargs)
        opened.append(conn)
        return conn

    monkeypatch.setattr(sqlite3, "connect", tracking_connect)
    store = SQLiteWardrobeStore(tmp_path / "closing.db")
    store.add_item(make_item("top-1", "top"))
    store.add_outfit(make_outfit("o", complete_items("1"), worn=days_ago(1)))
    assert [outfit.id for outfit in store.list_eligible_outfits(USER)] == ["o"]

    assert len(opened) == 4
    for conn in opened:
        with pytest.raises(sqlite3.ProgrammingError):
            conn.execute("SELECT 1")
