"""Outfit suggestion and saved look schemas."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Tuple
from uuid import NAMESPACE_URL, uuid4, uuid5

from models.color_theory import BLACK, RGB, hex_to_rgb

_SUGGESTION_NAMESPACE = uuid5(NAMESPACE_URL, "fitstyle/suggestions")


def suggestion_id(*parts: str) -> str:
    """Stable identifier for a generated suggestion."""

    return str(uuid5(_SUGGESTION_NAMESPACE, "/".join(parts)))


@dataclass(frozen=True)
class SuggestionItem:
    icon: str
    label: str


@dataclass
class OutfitSuggestion:
    """An ephemeral outfit proposal; ``is_saved`` is a local UI toggle."""

    id: str
    title: str
    explanation: str
    items: Tuple[SuggestionItem, ...]
    colors: Tuple[RGB, ...]
    is_saved: bool = False


@dataclass(frozen=True)
class SavedLookItem:
    icon: str
    label: str
    source_id: Optional[str] = None
    id: str = field(default_factory=lambda: str(uuid4()))


@dataclass(frozen=True)
class SavedLook:
    """A persisted, user-curated outfit.

    The thumbnail is transient: it never reaches disk and does not take part
    in equality. ``is_favorite`` mirrors the favorites id-set owned by the
    store.
    """

    title: str
    date_saved: datetime
    items: Tuple[SavedLookItem, ...] = ()
    colors: Tuple[RGB, ...] = ()
    notes: Optional[str] = None
    harmony: Optional[str] = None
    is_favorite: bool = False
    id: str = field(default_factory=lambda: str(uuid4()))
    thumbnail: Optional[bytes] = field(default=None, compare=False, repr=False)


def sample_suggestions() -> List[OutfitSuggestion]:
    """Canned suggestions shown when the wardrobe cannot form an outfit."""

    return [
        OutfitSuggestion(
            id=suggestion_id("sample", "smart-casual"),
            title="Smart Casual",
            explanation="Complementary colors: navy + beige",
            items=(
                SuggestionItem("tshirt.fill", "Navy Top"),
                SuggestionItem("hanger", "Beige Chino"),
                SuggestionItem("shoe.fill", "Brown Shoes"),
            ),
            colors=(RGB(0.08, 0.17, 0.36), RGB(0.90, 0.84, 0.72), hex_to_rgb("F2A6B3")),
        ),
        OutfitSuggestion(
            id=suggestion_id("sample", "street-style"),
            title="Street Style",
            explanation="Analogous colors: charcoal + black",
            items=(
                SuggestionItem("tshirt", "Graphic Tee"),
                SuggestionItem("figure.walk", "Joggers"),
                SuggestionItem("shoe.fill", "Sneakers"),
            ),
            colors=(RGB(0.20, 0.22, 0.27), BLACK, hex_to_rgb("F2A6B3")),
        ),
        OutfitSuggestion(
            id=suggestion_id("sample", "weekend-brunch"),
            title="Weekend Brunch",
            explanation="Triadic colors: teal + coral + sand",
            items=(
                SuggestionItem("tshirt.fill", "Teal Shirt"),
                SuggestionItem("hanger", "Sand Skirt"),
                SuggestionItem("shoe", "Coral Flats"),
            ),
            colors=(RGB(0.18, 0.60, 0.56), RGB(0.98, 0.52, 0.47), RGB(0.92, 0.85, 0.72)),
        ),
    ]


def sample_looks(now: Optional[datetime] = None) -> List[SavedLook]:
    """Built-in looks used to seed an empty saved-look collection."""

    now = now or datetime.now(timezone.utc)
    return [
        SavedLook(
            title="Smart Casual",
            date_saved=now - timedelta(days=1),
            items=(
                SavedLookItem("tshirt.fill", "Navy Top"),
                SavedLookItem("hanger", "Beige Chino"),
                SavedLookItem("shoe.fill", "Brown Shoes"),
            ),
            colors=(RGB(0.08, 0.17, 0.36), RGB(0.90, 0.84, 0.72), hex_to_rgb("F2A6B3")),
        ),
        SavedLook(
            title="Street Style",
            date_saved=now - timedelta(days=2),
            items=(
                SavedLookItem("tshirt", "Graphic Tee"),
                SavedLookItem("figure.walk", "Joggers"),
                SavedLookItem("shoe.fill", "Sneakers"),
            ),
            colors=(RGB(0.20, 0.22, 0.27), BLACK, hex_to_rgb("F2A6B3")),
        ),
    ]


__all__ = [
    "SuggestionItem",
    "OutfitSuggestion",
    "SavedLookItem",
    "SavedLook",
    "suggestion_id",
    "sample_suggestions",
    "sample_looks",
]
