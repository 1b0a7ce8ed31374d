"""Domain types for wardrobe items, colors and looks."""

from models.color_theory import RGB, classify_family, classify_tone
from models.outfit import OutfitSuggestion, SavedLook, SavedLookItem, SuggestionItem
from models.taxonomy import Category, ColorFamily, ToneGroup
from models.wardrobe_item import WardrobeItem

__all__ = [
    "RGB",
    "Category",
    "ColorFamily",
    "ToneGroup",
    "classify_family",
    "classify_tone",
    "WardrobeItem",
    "OutfitSuggestion",
    "SuggestionItem",
    "SavedLook",
    "SavedLookItem",
]
