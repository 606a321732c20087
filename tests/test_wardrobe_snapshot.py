"""Wardrobe snapshot and recency threshold tests."""

from logic.wardrobe_snapshot import build_wardrobe_snapshot, compute_recency_thresholds, recency_threshold_for_count
from tests.helpers import make_item


def test_empty_wardrobe_has_zero_counts_and_fallback_thresholds() -> None:
    snapshot = build_wardrobe_snapshot([])
    assert snapshot.total == 0
    assert all(count == 0 for count in snapshot.counts.values())
    assert snapshot.ratio("top") == 0.0

    thresholds = compute_recency_thresholds(snapshot)
    assert thresholds.as_dict() == {
        "layer": 7,
        "top": 7,
        "bottom": 7,
        "footwear": 7,
        "accessory": 7,
        "default": 7,
    }


def test_counts_per_type() -> None:
    items = [
        make_item("t1", "top"),
        make_item("t2", "top"),
        make_item("b1", "bottom"),
        make_item("a1", "accessory"),
    ]
    snapshot = build_wardrobe_snapshot(items)
    assert snapshot.total == 4
    assert snapshot.count("top") == 2
    assert snapshot.count("layer") == 0
    assert snapshot.ratio("top") == 0.5


def test_threshold_scales_with_count_and_is_floored() -> None:
    assert recency_threshold_for_count(0) == 7
    assert recency_threshold_for_count(1) == 3
    assert recency_threshold_for_count(4) == 3
    assert recency_threshold_for_count(10) == 7.5
    assert recency_threshold_for_count(40) == 30


def test_unknown_type_uses_default() -> None:
    thresholds = compute_recency_thresholds(build_wardrobe_snapshot([]))
    assert thresholds.for_type("hat") == 7
