"""Saved look persistence with a separately stored favorites id-set.

Looks live in one JSON array file that is rewritten in full on every
mutation. Favorite status is owned by an id-set kept in the preferences slot;
the ``is_favorite`` flag on each look is a cache refreshed from that set on
every load and every toggle. Records written before the flag existed load as
legacy entries and pick up their status from the id-set alone.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from enum import Enum
from pathlib import Path
from typing import List, Optional, Sequence, Set
from uuid import uuid4

from fitstyle_app.logging_config import log_event
from logic.suggestion_filter import HarmonyFilter
from logic.validation import LOOK_RECORDS, LookItemRecord, LookRecord
from memory.preferences import FILTER_KEY, SORT_KEY, PreferenceStore
from memory.storage import atomic_write_text
from models.color_theory import RGB, hex_to_rgb, rgb_to_hex
from models.outfit import SavedLook, SavedLookItem, sample_looks

LOGGER = logging.getLogger(__name__)

SELF_TEST_TITLE = "_Temp Test Look_"


class SortOrder(str, Enum):
    NEWEST = "Newest"
    OLDEST = "Oldest"

    @classmethod
    def parse(cls, value: "str | SortOrder | None") -> "SortOrder":
        if isinstance(value, cls):
            return value
        for candidate in cls:
            if candidate.value.lower() == str(value or "").strip().lower():
                return candidate
        raise ValueError(f"Unsupported sort order '{value}'. Allowed: {[s.value for s in cls]}")


@dataclass(frozen=True)
class SelfTestResult:
    present_after_save: bool
    present_after_delete: bool

    @property
    def passed(self) -> bool:
        return self.present_after_save and not self.present_after_delete


def look_to_record(look: SavedLook) -> LookRecord:
    """Serialise a look; colors become hex strings and the thumbnail is dropped."""

    return LookRecord(
        id=look.id,
        title=look.title,
        date_saved=look.date_saved,
        items=[
            LookItemRecord(id=item.id, icon=item.icon, label=item.label, source_id=item.source_id)
            for item in look.items
        ],
        colors=[rgb_to_hex(color) for color in look.colors],
        notes=look.notes,
        harmony=look.harmony,
        is_favorite=look.is_favorite,
    )


def record_to_look(record: LookRecord, favorite_ids: Set[str]) -> SavedLook:
    """Rebuild a look, keeping its persisted id and reconciling favorite status."""

    date_saved = record.date_saved
    if date_saved.tzinfo is None:
        date_saved = date_saved.replace(tzinfo=timezone.utc)
    return SavedLook(
        id=record.id,
        title=record.title,
        date_saved=date_saved,
        items=tuple(
            SavedLookItem(id=item.id, icon=item.icon, label=item.label, source_id=item.source_id)
            for item in record.items
        ),
        colors=tuple(hex_to_rgb(value) for value in record.colors),
        notes=record.notes,
        harmony=record.harmony,
        is_favorite=record.id in favorite_ids,
    )


class SavedLookStore:
    """Owns the saved-look collection, most recent first."""

    def __init__(
        self,
        path: str | Path = "data/saved_looks.json",
        preferences: PreferenceStore | None = None,
        samples: Optional[Sequence[SavedLook]] = None,
    ) -> None:
        self.path = Path(path)
        self.preferences = preferences or PreferenceStore(self.path.parent / "preferences.json")
        self._looks: List[SavedLook] = []
        self._favorite_ids: Set[str] = set()

        self._load_favorites()
        self.load_from_disk()
        if not self._looks:
            self._looks = list(sample_looks() if samples is None else samples)
            self._apply_favorites()
            self._save_to_disk()
            log_event(LOGGER, logging.INFO, "saved_looks_seeded", count=len(self._looks))

    @property
    def looks(self) -> List[SavedLook]:
        return list(self._looks)

    @property
    def favorite_ids(self) -> frozenset:
        return frozenset(self._favorite_ids)

    def get(self, look_id: str) -> Optional[SavedLook]:
        return next((look for look in self._looks if look.id == look_id), None)

    def save(self, look: SavedLook) -> SavedLook:
        """Prepend a look; no content dedup, so repeated saves give separate records.

        A look whose id is already stored is saved as a copy under a fresh id.
        """

        if self.get(look.id) is not None:
            look = replace(look, id=str(uuid4()))
        inserting = replace(look, is_favorite=look.id in self._favorite_ids)
        self._looks.insert(0, inserting)
        self._save_to_disk()
        return inserting

    def delete(self, look: SavedLook) -> None:
        self._looks = [existing for existing in self._looks if existing.id != look.id]
        if look.id in self._favorite_ids:
            self._favorite_ids.discard(look.id)
            self._persist_favorites()
        self._save_to_disk()

    def update(self, original: SavedLook, updated: SavedLook) -> Optional[SavedLook]:
        """Replace ``original`` with ``updated``; a vanished original is a no-op."""

        index = self._index_of(original)
        if index is None:
            LOGGER.debug("update skipped, look %s no longer present", original.id)
            return None
        replacement = replace(updated, is_favorite=updated.id in self._favorite_ids)
        self._looks[index] = replacement
        self._save_to_disk()
        return replacement

    def toggle_favorite(self, look: SavedLook) -> Optional[SavedLook]:
        index = self._index_of(look)
        if index is None:
            LOGGER.debug("toggle skipped, look %s no longer present", look.id)
            return None
        current = self._looks[index]
        toggled = replace(current, is_favorite=not current.is_favorite)
        if toggled.is_favorite:
            self._favorite_ids.add(toggled.id)
        else:
            self._favorite_ids.discard(toggled.id)
        self._looks[index] = toggled
        self._persist_favorites()
        self._save_to_disk()
        return toggled

    def _index_of(self, look: SavedLook) -> Optional[int]:
        for index, existing in enumerate(self._looks):
            if existing == look:
                return index
        return None

    # Favorites slot

    def _load_favorites(self) -> None:
        self._favorite_ids = self.preferences.load_id_set()

    def _persist_favorites(self) -> None:
        self.preferences.store_id_set(self._favorite_ids)

    def _apply_favorites(self) -> None:
        self._looks = [replace(look, is_favorite=look.id in self._favorite_ids) for look in self._looks]

    # Record file

    def load_from_disk(self) -> None:
        """Replace the in-memory collection with the record file's contents.

        A missing file is an empty collection; an unreadable one is logged
        and also yields an empty collection.
        """

        if not self.path.exists():
            log_event(LOGGER, logging.INFO, "saved_looks_missing", path=str(self.path))
            self._looks = []
            return
        try:
            records = LOOK_RECORDS.validate_json(self.path.read_bytes())
        except (OSError, ValueError) as exc:
            log_event(
                LOGGER,
                logging.ERROR,
                "saved_looks_load_failed",
                path=str(self.path),
                error=str(exc),
                exc_info=True,
            )
            self._looks = []
            return
        legacy = sum(1 for record in records if record.is_legacy)
        self._looks = [record_to_look(record, self._favorite_ids) for record in records]
        log_event(
            LOGGER,
            logging.INFO,
            "saved_looks_loaded",
            path=str(self.path),
            count=len(self._looks),
            legacy_records=legacy,
        )

    def _save_to_disk(self) -> None:
        try:
            payload = LOOK_RECORDS.dump_json(
                [look_to_record(look) for look in self._looks], by_alias=True, indent=2
            )
            atomic_write_text(self.path, payload.decode("utf-8"))
        except (OSError, TypeError, ValueError) as exc:
            log_event(
                LOGGER,
                logging.ERROR,
                "saved_looks_save_failed",
                path=str(self.path),
                error=str(exc),
                exc_info=True,
            )
            return
        log_event(LOGGER, logging.INFO, "saved_looks_saved", path=str(self.path), count=len(self._looks))

    # Browsing

    def displayed(
        self,
        harmony_filter: "str | HarmonyFilter | None" = None,
        search: str = "",
        sort: "str | SortOrder | None" = None,
    ) -> List[SavedLook]:
        """Looks as the browsing screen shows them: favorites first, then the rest.

        Explicit ``harmony_filter`` / ``sort`` values are remembered in the
        preferences slot and reused when later calls omit them.
        """

        if harmony_filter is None:
            active_filter = HarmonyFilter.parse(self.preferences.get(FILTER_KEY, HarmonyFilter.ALL.value))
        else:
            active_filter = HarmonyFilter.parse(harmony_filter)
            self.preferences.set(FILTER_KEY, active_filter.value)
        if sort is None:
            order = SortOrder.parse(self.preferences.get(SORT_KEY, SortOrder.NEWEST.value))
        else:
            order = SortOrder.parse(sort)
            self.preferences.set(SORT_KEY, order.value)

        matching = [look for look in self._looks if active_filter.matches(look.harmony)]
        query = search.strip().lower()
        if query:
            matching = [
                look
                for look in matching
                if query in look.title.lower() or (look.notes and query in look.notes.lower())
            ]
        ordered = sorted(matching, key=lambda look: look.date_saved, reverse=order is SortOrder.NEWEST)
        return [look for look in ordered if look.is_favorite] + [look for look in ordered if not look.is_favorite]

    # Diagnostics

    def run_self_test(self) -> SelfTestResult:
        """Save, reload, delete and reload a throwaway look, reporting what was seen."""

        log_event(LOGGER, logging.INFO, "self_test_started")
        temp = SavedLook(
            title=SELF_TEST_TITLE,
            date_saved=datetime.now(timezone.utc),
            items=(SavedLookItem("tshirt.fill", "Temp"),),
            colors=(RGB(0.8, 0.2, 0.3),),
            notes="Test",
            harmony="Complementary",
        )
        self.save(temp)
        self.load_from_disk()
        present_after_save = self.get(temp.id) is not None
        self.delete(temp)
        self.load_from_disk()
        present_after_delete = self.get(temp.id) is not None
        result = SelfTestResult(present_after_save, present_after_delete)
        log_event(
            LOGGER,
            logging.INFO if result.passed else logging.ERROR,
            "self_test_completed",
            present_after_save=present_after_save,
            present_after_delete=present_after_delete,
        )
        return result


__all__ = [
    "SavedLookStore",
    "SelfTestResult",
    "SortOrder",
    "look_to_record",
    "record_to_look",
]
