"""FitStyle app bootstrap.

Builds every store once from :class:`AppConfig` and exposes the operations a
presentation layer calls: generate, save, favorite, edit and delete.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime, timezone
from typing import Dict, List, Optional, Tuple

from fitstyle_app.config import AppConfig
from fitstyle_app.logging_config import configure_logging, get_logger, log_event
from logic.outfit_builder import harmony_tag
from logic.suggestion_filter import SuggestionFilterModel
from logic.validation import LookEditInput, WardrobeItemInput
from memory.preferences import PreferenceStore
from memory.saved_looks import SavedLookStore, SelfTestResult
from models.color_theory import hex_to_rgb
from models.outfit import OutfitSuggestion, SavedLook, SavedLookItem
from models.taxonomy import Category, ToneGroup
from models.wardrobe_item import WardrobeItem
from tools.color_analysis import ColorAnalysisEngine
from tools.observability import instrument_operation
from tools.wardrobe_store import WardrobeStore

LOGGER = get_logger(__name__)


def to_saved_look(suggestion: OutfitSuggestion, now: Optional[datetime] = None) -> SavedLook:
    """Turn a generated suggestion into a new saved look (source ids are not tracked)."""

    return SavedLook(
        title=suggestion.title,
        date_saved=now or datetime.now(timezone.utc),
        items=tuple(SavedLookItem(icon=item.icon, label=item.label) for item in suggestion.items),
        colors=tuple(suggestion.colors),
        harmony=harmony_tag(suggestion.explanation),
    )


class FitStyleApp:
    """Wires together the stores, the rule engine and the analysis collaborator."""

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config = config or AppConfig.from_env()
        configure_logging(self.config.log_level)

        self.preferences = PreferenceStore(self.config.resolved_preferences_path)
        self.wardrobe = WardrobeStore(seed=self.config.seed_wardrobe)
        self.saved_looks = SavedLookStore(
            self.config.resolved_saved_looks_path, preferences=self.preferences
        )
        self.suggestions = SuggestionFilterModel()
        self.color_analysis = ColorAnalysisEngine(delay_seconds=self.config.analysis_delay_seconds)
        log_event(
            LOGGER,
            logging.INFO,
            "app_started",
            environment=self.config.environment or "local",
            wardrobe_items=len(self.wardrobe.items),
            saved_looks=len(self.saved_looks.looks),
        )

    # Wardrobe

    @instrument_operation("add_wardrobe_item", input_model=WardrobeItemInput)
    def add_wardrobe_item(self, *, category: str, color: Optional[str] = None) -> WardrobeItem:
        return self.wardrobe.add(category, hex_to_rgb(color) if color else None)

    @instrument_operation("remove_wardrobe_item")
    def remove_wardrobe_item(self, item_id: str) -> bool:
        return self.wardrobe.remove(item_id)

    def wardrobe_groups(self, search: str = "") -> List[Tuple[Category, List[WardrobeItem]]]:
        return self.wardrobe.grouped(search)

    def tone_distribution(self) -> Dict[ToneGroup, int]:
        return self.wardrobe.distribution()

    # Suggestions

    @instrument_operation("generate_suggestions")
    def generate_suggestions(self, harmony_filter: Optional[str] = None) -> List[OutfitSuggestion]:
        if harmony_filter is not None:
            self.suggestions.set_filter(harmony_filter)
        return self.suggestions.refresh(self.wardrobe.items)

    @instrument_operation("save_suggestion")
    def save_suggestion(self, suggestion_id: str) -> Optional[SavedLook]:
        """Save a generated suggestion once; repeat calls for a saved one return ``None``."""

        suggestion = self.suggestions.find(suggestion_id)
        if suggestion is None or suggestion.is_saved:
            return None
        look = self.saved_looks.save(to_saved_look(suggestion))
        self.suggestions.toggle_saved(suggestion_id)
        return look

    # Saved looks

    @instrument_operation("toggle_favorite")
    def toggle_favorite(self, look_id: str) -> Optional[SavedLook]:
        look = self.saved_looks.get(look_id)
        return self.saved_looks.toggle_favorite(look) if look else None

    @instrument_operation("edit_look", input_model=LookEditInput)
    def edit_look(
        self, *, look_id: str, title: Optional[str] = None, notes: Optional[str] = None
    ) -> Optional[SavedLook]:
        original = self.saved_looks.get(look_id)
        if original is None:
            return None
        updated = replace(
            original,
            title=title if title is not None else original.title,
            notes=notes if notes is not None else original.notes,
        )
        return self.saved_looks.update(original, updated)

    @instrument_operation("delete_look")
    def delete_look(self, look_id: str) -> bool:
        look = self.saved_looks.get(look_id)
        if look is None:
            return False
        self.saved_looks.delete(look)
        return True

    @instrument_operation("persistence_self_test")
    def run_self_test(self) -> SelfTestResult:
        return self.saved_looks.run_self_test()


__all__ = ["FitStyleApp", "to_saved_look"]
