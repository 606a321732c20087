"""Eligibility gate and virtual tag tests."""

from logic.eligibility import (
    filter_by_availability,
    filter_for_suggestions,
    is_complete_outfit,
    matches_tag,
)
from logic.virtual_tags import (
    IDEA_TAG,
    applicable_virtual_tags,
    get_virtual_tag,
    is_virtual_tag,
    virtual_tag_payload,
)
from tests.helpers import complete_items, days_ago, make_outfit


def test_availability_gate_drops_outfits_with_unavailable_items() -> None:
    keep = make_outfit("keep", complete_items("1"), worn=days_ago(3))
    drop = make_outfit("drop", complete_items("2"), worn=days_ago(3))

    result = filter_by_availability([keep, drop], {"bottom-2"})

    assert [outfit.id for outfit in result.outfits] == ["keep"]
    assert result.removed == {"drop": "contains unavailable item"}
    assert result.debug["input_count"] == 2


def test_availability_gate_applies_minimum_rating() -> None:
    miss = make_outfit("miss", complete_items(), rating=0, worn=days_ago(1))
    result = filter_by_availability([miss], set())
    assert result.outfits == []
    assert result.removed["miss"] == "rating below minimum"


def test_unknown_items_are_not_treated_as_unavailable() -> None:
    outfit = make_outfit("o", [("mystery", "top"), ("b", "bottom"), ("f", "footwear")], worn=days_ago(2))
    assert filter_by_availability([outfit], {"other"}).outfits == [outfit]


def test_completeness_requires_top_or_layer_bottom_and_footwear() -> None:
    assert is_complete_outfit(make_outfit("a", complete_items()))
    assert is_complete_outfit(make_outfit("b", [("l", "layer"), ("b", "bottom"), ("f", "footwear")]))
    assert not is_complete_outfit(make_outfit("c", [("t", "top"), ("b", "bottom")]))
    assert not is_complete_outfit(make_outfit("d", [("t", "top"), ("f", "footwear"), ("a", "accessory")]))
    assert not is_complete_outfit(make_outfit("e", [("a", "accessory"), ("b", "bottom"), ("f", "footwear")]))


def test_outfit_without_items_is_exempt_from_completeness() -> None:
    assert is_complete_outfit(make_outfit("empty", []))


def test_suggestion_filter_with_real_tag() -> None:
    tagged = make_outfit("tagged", complete_items("1"), worn=days_ago(4), tags=["work"])
    untagged = make_outfit("untagged", complete_items("2"), worn=days_ago(4))

    result = filter_for_suggestions([tagged, untagged], "work")

    assert [outfit.id for outfit in result.outfits] == ["tagged"]
    assert result.removed == {"untagged": "tag filter not matched"}


def test_idea_virtual_tag_matches_ghost_outfits_only() -> None:
    ghost = make_outfit("ghost", complete_items("1"))
    worn = make_outfit("worn", complete_items("2"), worn=days_ago(1))

    assert matches_tag(ghost, "idea_tag")
    assert not matches_tag(worn, "idea_tag")
    assert matches_tag(worn, None)
    assert applicable_virtual_tags(ghost) == [IDEA_TAG]
    assert applicable_virtual_tags(worn) == []


def test_virtual_tag_registry_lookup() -> None:
    assert is_virtual_tag("idea_tag")
    assert not is_virtual_tag("work")
    assert not is_virtual_tag(None)
    assert not is_virtual_tag("")
    assert get_virtual_tag("work") is None
    payload = virtual_tag_payload(IDEA_TAG)
    assert payload == {
        "id": "idea_tag",
        "name": "Idea",
        "hexColor": "#9CA3AF",
        "userId": "system",
        "virtual": True,
    }
