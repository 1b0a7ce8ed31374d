"""Small JSON-backed key-value slot for user preferences."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Iterable, Set

from fitstyle_app.logging_config import log_event
from memory.storage import atomic_write_text

LOGGER = logging.getLogger(__name__)

FAVORITES_KEY = "savedLooksFavorites"
SORT_KEY = "savedLooksSort"
FILTER_KEY = "savedLooksFilter"


class PreferenceStore:
    """Key-value preferences persisted as one JSON object.

    Every ``set`` rewrites the file. An unreadable file is logged and treated
    as empty so the app keeps working on defaults.
    """

    def __init__(self, path: str | Path = "data/preferences.json") -> None:
        self.path = Path(path)
        self._values: Dict[str, Any] = self._read()

    def _read(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            log_event(LOGGER, logging.WARNING, "preferences_load_failed", path=str(self.path), error=str(exc))
            return {}
        if not isinstance(data, dict):
            log_event(LOGGER, logging.WARNING, "preferences_load_failed", path=str(self.path), error="not an object")
            return {}
        return data

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value
        try:
            atomic_write_text(self.path, json.dumps(self._values, indent=2, sort_keys=True))
        except OSError as exc:
            log_event(LOGGER, logging.ERROR, "preferences_save_failed", path=str(self.path), error=str(exc))

    def load_id_set(self, key: str = FAVORITES_KEY) -> Set[str]:
        """Read an array of id strings; anything else counts as empty."""

        raw = self.get(key)
        if not isinstance(raw, list):
            if raw is not None:
                log_event(LOGGER, logging.WARNING, "favorites_load_failed", key=key, error="not a list")
            return set()
        return {str(value) for value in raw if isinstance(value, str) and value}

    def store_id_set(self, ids: Iterable[str], key: str = FAVORITES_KEY) -> None:
        self.set(key, sorted(ids))


__all__ = ["PreferenceStore", "FAVORITES_KEY", "SORT_KEY", "FILTER_KEY"]
