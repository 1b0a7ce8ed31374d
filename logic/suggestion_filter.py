"""Holds the latest generated suggestions and the user's harmony filter."""
from __future__ import annotations

import logging
from enum import Enum
from typing import Callable, Iterable, List, Optional

from logic.outfit_builder import generate
from models.outfit import OutfitSuggestion
from models.wardrobe_item import WardrobeItem

logger = logging.getLogger(__name__)


class HarmonyFilter(str, Enum):
    ALL = "All"
    COMPLEMENTARY = "Complementary"
    ANALOGOUS = "Analogous"
    NEUTRAL = "Neutral"

    def matches(self, text: Optional[str]) -> bool:
        """True when ``text`` mentions this filter's keyword (``ALL`` matches anything)."""

        if self is HarmonyFilter.ALL:
            return True
        return bool(text) and self.value.lower() in text.lower()

    @classmethod
    def parse(cls, value: "str | HarmonyFilter | None") -> "HarmonyFilter":
        if value is None:
            return cls.ALL
        if isinstance(value, cls):
            return value
        for candidate in cls:
            if candidate.value.lower() == str(value).strip().lower():
                return candidate
        raise ValueError(f"Unsupported harmony filter '{value}'. Allowed: {[f.value for f in cls]}")


class SuggestionFilterModel:
    """Last suggestion run plus a category filter over its explanations."""

    def __init__(
        self, generator: Callable[[Iterable[WardrobeItem]], List[OutfitSuggestion]] = generate
    ) -> None:
        self._generator = generator
        self._all: List[OutfitSuggestion] = []
        self.filter = HarmonyFilter.ALL

    @property
    def all(self) -> List[OutfitSuggestion]:
        return list(self._all)

    @property
    def filtered(self) -> List[OutfitSuggestion]:
        return [s for s in self._all if self.filter.matches(s.explanation)]

    def set_filter(self, value: "str | HarmonyFilter | None") -> HarmonyFilter:
        self.filter = HarmonyFilter.parse(value)
        return self.filter

    def load(self, items: Iterable[WardrobeItem]) -> List[OutfitSuggestion]:
        self._all = list(self._generator(items))
        return self.filtered

    def refresh(self, items: Iterable[WardrobeItem]) -> List[OutfitSuggestion]:
        logger.info("Refreshing suggestions with filter=%s", self.filter.value)
        return self.load(items)

    def find(self, suggestion_id: str) -> Optional[OutfitSuggestion]:
        return next((s for s in self._all if s.id == suggestion_id), None)

    def toggle_saved(self, suggestion_id: str) -> Optional[OutfitSuggestion]:
        """Flip the local saved marker; unknown ids are ignored."""

        suggestion = self.find(suggestion_id)
        if suggestion is not None:
            suggestion.is_saved = not suggestion.is_saved
        return suggestion


__all__ = ["HarmonyFilter", "SuggestionFilterModel"]
