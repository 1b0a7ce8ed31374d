"""In-memory wardrobe store tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from models.color_theory import hex_to_rgb
from models.taxonomy import Category, ToneGroup
from models.wardrobe_item import WardrobeItem
from tools.wardrobe_store import DEMO_SEED, WardrobeStore


def test_seed_keeps_declared_order() -> None:
    store = WardrobeStore(seed=True)
    assert [(item.category, item.color) for item in store.items] == [
        (category, hex_to_rgb(hex_value)) for category, hex_value in DEMO_SEED
    ]
    assert len({item.item_id for item in store.items}) == len(DEMO_SEED)


def test_add_prepends_and_remove_by_id() -> None:
    store = WardrobeStore(seed=False)
    first = store.add("top", hex_to_rgb("FFFFFF"))
    second = store.add(Category.SHOES)
    assert store.items == [second, first]

    assert store.remove(first.item_id) is True
    assert store.remove(first.item_id) is False
    assert store.items == [second]


def test_add_rejects_duplicate_ids_and_unknown_category() -> None:
    store = WardrobeStore(seed=False)
    store.add_item(WardrobeItem(category=Category.TOP, item_id="dup"))
    with pytest.raises(ValueError):
        store.add_item(WardrobeItem(category=Category.BOTTOM, item_id="dup"))
    with pytest.raises(ValueError):
        store.add("hat")


def test_grouped_follows_category_declaration_order() -> None:
    store = WardrobeStore(seed=False)
    store.add(Category.ACCESSORY, hex_to_rgb("000000"))
    store.add(Category.TOP, hex_to_rgb("FFFFFF"))
    groups = store.grouped("")
    assert [category for category, _ in groups] == [Category.TOP, Category.ACCESSORY]


def test_grouped_search_matches_title_or_color_name() -> None:
    store = WardrobeStore(seed=True)

    shoes_only = store.grouped("  SHO ")
    assert [category for category, _ in shoes_only] == [Category.SHOES]
    assert len(shoes_only[0][1]) == 2

    whites = store.grouped("white")
    assert [(category, len(items)) for category, items in whites] == [
        (Category.TOP, 1),
        (Category.SHOES, 1),
    ]
    assert store.grouped("nothing-matches") == []


def test_distribution_counts_every_tone() -> None:
    store = WardrobeStore(seed=False)
    store.add(Category.TOP, hex_to_rgb("000000"))
    store.add(Category.TOP, hex_to_rgb("F2C94C"))
    store.add(Category.BOTTOM, None)
    assert store.distribution() == {ToneGroup.DARK: 1, ToneGroup.NEUTRAL: 1, ToneGroup.BRIGHT: 1}
    assert WardrobeStore(seed=False).distribution() == {tone: 0 for tone in ToneGroup}
