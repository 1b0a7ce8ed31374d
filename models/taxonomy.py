"""Canonical taxonomy definitions for wardrobe items and color buckets.

This module centralises the closed vocabularies shared by the classifier, the
harmony rules and the stores: garment categories, color families and tone
groups. Helper functions keep validation logic consistent across the app.
"""

from enum import Enum
from typing import Dict


def _normalize_key(value: str) -> str:
    """Normalise a free-form string into a taxonomy key."""

    return value.strip().lower().replace(" ", "_")


class Category(str, Enum):
    """Garment categories, declared in display order."""

    TOP = "top"
    BOTTOM = "bottom"
    SHOES = "shoes"
    ACCESSORY = "accessory"

    @property
    def display_title(self) -> str:
        return CATEGORY_TITLES[self]


CATEGORY_TITLES: Dict[Category, str] = {
    Category.TOP: "Top",
    Category.BOTTOM: "Bottom",
    Category.SHOES: "Shoes",
    Category.ACCESSORY: "Accessory",
}


class ColorFamily(str, Enum):
    """Coarse hue or neutral bucket used for harmony matching."""

    RED = "red"
    PINK = "pink"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    TEAL = "teal"
    BLUE = "blue"
    NAVY = "navy"
    PURPLE = "purple"
    BROWN = "brown"
    WHITE = "white"
    GRAY = "gray"
    BLACK = "black"
    BEIGE = "beige"
    UNKNOWN = "unknown"


class ToneGroup(str, Enum):
    """Dark / neutral / bright bucket used for wardrobe statistics."""

    DARK = "dark"
    NEUTRAL = "neutral"
    BRIGHT = "bright"

    @property
    def display_title(self) -> str:
        return {"dark": "Darks", "neutral": "Neutrals", "bright": "Brights"}[self.value]


def validate_category(value: "str | Category") -> Category:
    """Validate and normalise a category value.

    Raises a :class:`ValueError` if the category is not part of the canonical
    taxonomy.
    """

    if isinstance(value, Category):
        return value
    key = _normalize_key(str(value))
    try:
        return Category(key)
    except ValueError:
        allowed = [category.value for category in Category]
        raise ValueError(f"Unsupported category '{value}'. Allowed: {allowed}") from None


__all__ = [
    "Category",
    "CATEGORY_TITLES",
    "ColorFamily",
    "ToneGroup",
    "validate_category",
]
