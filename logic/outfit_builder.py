"""Deterministic outfit assembly under simple color harmony rules.

Three rules run in a fixed order (complementary, analogous, neutral base).
Every pick follows the same tie-break: the first item in wardrobe order whose
color family is preferred, else the first item of that category. There is no
scoring and no randomness, so a fixed wardrobe always yields the same list.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from models.color_theory import (
    GRAY,
    NEUTRAL_FAMILIES,
    analogous_families,
    analogous_label,
    complementary_families,
    complementary_label,
)
from models.outfit import OutfitSuggestion, SuggestionItem, sample_suggestions, suggestion_id
from models.taxonomy import Category, ColorFamily
from models.wardrobe_item import WardrobeItem

logger = logging.getLogger(__name__)

REQUIRED_CATEGORIES = (Category.TOP, Category.BOTTOM, Category.SHOES)

COMPLEMENTARY = "Complementary Mix"
ANALOGOUS = "Analogous Harmony"
NEUTRAL_BASE = "Neutral Base"

_COMPLEMENTARY_TOPS = (
    ColorFamily.BLUE,
    ColorFamily.NAVY,
    ColorFamily.RED,
    ColorFamily.PINK,
    ColorFamily.YELLOW,
)
_ANALOGOUS_TOPS = (ColorFamily.PINK, ColorFamily.RED, ColorFamily.BLUE, ColorFamily.NAVY)
_ACCENT_TOPS = (
    ColorFamily.PINK,
    ColorFamily.RED,
    ColorFamily.BLUE,
    ColorFamily.NAVY,
    ColorFamily.YELLOW,
)
_NEUTRAL_ACCESSORIES = (ColorFamily.WHITE, ColorFamily.GRAY, ColorFamily.BLACK)

_ICONS: Dict[Category, str] = {
    Category.TOP: "tshirt.fill",
    Category.BOTTOM: "hanger",
    Category.SHOES: "shoe.fill",
    Category.ACCESSORY: "sparkles",
}
_LABEL_SUFFIX: Dict[Category, str] = {
    Category.TOP: "Top",
    Category.BOTTOM: "Bottom",
    Category.SHOES: "Shoes",
    Category.ACCESSORY: "Acc.",
}


@dataclass(frozen=True)
class OutfitPick:
    """Items chosen by one rule before they are rendered as a suggestion."""

    top: WardrobeItem
    bottom: WardrobeItem
    shoes: WardrobeItem
    accessory: Optional[WardrobeItem] = None

    @property
    def items(self) -> List[WardrobeItem]:
        chosen = [self.top, self.bottom, self.shoes]
        if self.accessory is not None:
            chosen.append(self.accessory)
        return chosen


def first_preferred(
    candidates: Sequence[WardrobeItem], families: Iterable[ColorFamily]
) -> Optional[WardrobeItem]:
    """First candidate whose family is preferred, else the first candidate."""

    preferred = set(families)
    for item in candidates:
        if item.family in preferred:
            return item
    return candidates[0] if candidates else None


def _by_category(items: Iterable[WardrobeItem]) -> Dict[Category, List[WardrobeItem]]:
    grouped: Dict[Category, List[WardrobeItem]] = {category: [] for category in Category}
    for item in items:
        grouped[item.category].append(item)
    return grouped


def _label(item: WardrobeItem) -> str:
    return f"{item.color_name.capitalize()} {_LABEL_SUFFIX[item.category]}".strip()


def _render(rule: str, explanation: str, pick: OutfitPick) -> OutfitSuggestion:
    chosen = pick.items
    return OutfitSuggestion(
        id=suggestion_id(rule, *(item.item_id for item in chosen)),
        title=rule,
        explanation=explanation,
        items=tuple(SuggestionItem(_ICONS[item.category], _label(item)) for item in chosen),
        colors=tuple(item.color or GRAY for item in chosen),
    )


def _complementary(grouped: Dict[Category, List[WardrobeItem]]) -> Optional[OutfitSuggestion]:
    top = first_preferred(grouped[Category.TOP], _COMPLEMENTARY_TOPS)
    if top is None:
        return None
    bottom = first_preferred(grouped[Category.BOTTOM], complementary_families(top.family))
    shoes = first_preferred(grouped[Category.SHOES], ())
    if bottom is None or shoes is None:
        return None
    accessory = first_preferred(grouped[Category.ACCESSORY], ())
    pick = OutfitPick(top, bottom, shoes, accessory)
    return _render(COMPLEMENTARY, f"Complementary: {complementary_label(top.family)}", pick)


def _analogous(grouped: Dict[Category, List[WardrobeItem]]) -> Optional[OutfitSuggestion]:
    top = first_preferred(grouped[Category.TOP], _ANALOGOUS_TOPS)
    if top is None:
        return None
    bottom = first_preferred(grouped[Category.BOTTOM], analogous_families(top.family))
    shoes = first_preferred(grouped[Category.SHOES], ())
    if bottom is None or shoes is None:
        return None
    accessory = first_preferred(grouped[Category.ACCESSORY], ())
    pick = OutfitPick(top, bottom, shoes, accessory)
    return _render(ANALOGOUS, f"Analogous: {analogous_label(top.family)}", pick)


def _neutral_base(grouped: Dict[Category, List[WardrobeItem]]) -> Optional[OutfitSuggestion]:
    top = first_preferred(grouped[Category.TOP], _ACCENT_TOPS)
    bottom = first_preferred(grouped[Category.BOTTOM], NEUTRAL_FAMILIES)
    shoes = first_preferred(grouped[Category.SHOES], ())
    if top is None or bottom is None or shoes is None:
        return None
    accessory = first_preferred(grouped[Category.ACCESSORY], _NEUTRAL_ACCESSORIES)
    pick = OutfitPick(top, bottom, shoes, accessory)
    return _render(NEUTRAL_BASE, "Neutral base: bright + neutral", pick)


RULES: Sequence[Callable[[Dict[Category, List[WardrobeItem]]], Optional[OutfitSuggestion]]] = (
    _complementary,
    _analogous,
    _neutral_base,
)


def generate(items: Iterable[WardrobeItem]) -> List[OutfitSuggestion]:
    """Build suggestions from a wardrobe in insertion order.

    Wardrobes missing a top, bottom or pair of shoes get the canned sample
    suggestions instead of an empty list.
    """

    grouped = _by_category(items)
    missing = [category.value for category in REQUIRED_CATEGORIES if not grouped[category]]
    if missing:
        logger.info("Wardrobe lacks %s; returning sample suggestions", missing)
        return sample_suggestions()

    results: List[OutfitSuggestion] = []
    for rule in RULES:
        suggestion = rule(grouped)
        if suggestion is None:
            logger.debug("rule %s produced no outfit", rule.__name__)
            continue
        results.append(suggestion)
    if not results:
        logger.info("No harmony rule produced an outfit; returning sample suggestions")
        return sample_suggestions()
    logger.info("Generated %s suggestions: %s", len(results), [s.title for s in results])
    return results


def harmony_tag(explanation: str) -> Optional[str]:
    """Map an explanation to the harmony tag stored on saved looks."""

    lower = explanation.lower()
    if "complementary" in lower:
        return "Complementary"
    if "analogous" in lower:
        return "Analogous"
    if "neutral" in lower:
        return "Neutral"
    return None


_HEADLINES = {
    "Complementary": "Complementary Mix",
    "Analogous": "Analogous Blend",
    "Neutral": "Neutral Base",
}
_BODIES = {
    "Complementary": "Complementary Mix pairs opposite colors on the color wheel to create visual balance.",
    "Analogous": "Analogous Blend uses neighboring hues for a cohesive, calm look.",
    "Neutral": "Neutral Base anchors the outfit with muted tones and a single accent color.",
}


def harmony_headline(explanation: str) -> str:
    return _HEADLINES.get(harmony_tag(explanation) or "", "Color Harmony")


def harmony_body(explanation: str) -> str:
    """User-facing description of the rule behind an explanation."""

    return _BODIES.get(harmony_tag(explanation) or "", explanation)


__all__ = [
    "COMPLEMENTARY",
    "ANALOGOUS",
    "NEUTRAL_BASE",
    "OutfitPick",
    "first_preferred",
    "generate",
    "harmony_tag",
    "harmony_headline",
    "harmony_body",
]
