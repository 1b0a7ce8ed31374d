"""In-memory wardrobe collection with search, grouping and tone statistics."""
from __future__ import annotations

import logging
from typing import Dict, List, Optional, Tuple

from models.color_theory import RGB, hex_to_rgb
from models.taxonomy import Category, ToneGroup, validate_category
from models.wardrobe_item import WardrobeItem

logger = logging.getLogger(__name__)

DEMO_SEED: Tuple[Tuple[Category, str], ...] = (
    (Category.TOP, "FFFFFF"),
    (Category.TOP, "1F3A93"),
    (Category.TOP, "F2A6B3"),
    (Category.BOTTOM, "D2B48C"),
    (Category.BOTTOM, "000000"),
    (Category.BOTTOM, "3D6AA2"),
    (Category.SHOES, "FFFFFF"),
    (Category.SHOES, "8B4513"),
    (Category.ACCESSORY, "F39C12"),
    (Category.ACCESSORY, "000000"),
)


class WardrobeStore:
    """Owns the wardrobe items; newest additions come first."""

    def __init__(self, seed: bool = True) -> None:
        self._items: List[WardrobeItem] = []
        if seed:
            self._items = [
                WardrobeItem(category=category, color=hex_to_rgb(hex_value))
                for category, hex_value in DEMO_SEED
            ]
            logger.info("Seeded wardrobe with %s demo items", len(self._items))

    @property
    def items(self) -> List[WardrobeItem]:
        return list(self._items)

    def get(self, item_id: str) -> Optional[WardrobeItem]:
        return next((item for item in self._items if item.item_id == item_id), None)

    def add(self, category: "str | Category", color: Optional[RGB] = None) -> WardrobeItem:
        return self.add_item(WardrobeItem(category=validate_category(category), color=color))

    def add_item(self, item: WardrobeItem) -> WardrobeItem:
        if self.get(item.item_id) is not None:
            raise ValueError(f"Wardrobe already holds an item with id {item.item_id}")
        self._items.insert(0, item)
        logger.info("Added %s item %s", item.category.value, item.item_id)
        return item

    def remove(self, item_id: str) -> bool:
        before = len(self._items)
        self._items = [item for item in self._items if item.item_id != item_id]
        return len(self._items) < before

    def grouped(self, search: str = "") -> List[Tuple[Category, List[WardrobeItem]]]:
        """Items matching ``search`` grouped by category in declaration order.

        The query matches the category title or the coarse color name,
        case-insensitively. Empty groups are left out.
        """

        query = search.strip().lower()
        if query:
            matching = [
                item
                for item in self._items
                if query in item.category.display_title.lower() or query in item.color_name.lower()
            ]
        else:
            matching = self._items
        groups = [(category, [item for item in matching if item.category is category]) for category in Category]
        return [(category, members) for category, members in groups if members]

    def distribution(self) -> Dict[ToneGroup, int]:
        counts = {tone: 0 for tone in ToneGroup}
        for item in self._items:
            counts[item.tone] += 1
        return counts


__all__ = ["WardrobeStore", "DEMO_SEED"]
