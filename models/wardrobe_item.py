"""Wardrobe item data model and helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import uuid4

from models.color_theory import RGB, classify_family, classify_tone, color_name
from models.taxonomy import Category, ColorFamily, ToneGroup, validate_category


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class WardrobeItem:
    """A garment in the user's wardrobe. Immutable once created."""

    category: Category
    color: Optional[RGB] = None
    item_id: str = field(default_factory=lambda: str(uuid4()))
    added_at: datetime = field(default_factory=_utcnow)

    def __post_init__(self) -> None:
        object.__setattr__(self, "category", validate_category(self.category))

    @property
    def family(self) -> ColorFamily:
        return classify_family(self.color)

    @property
    def tone(self) -> ToneGroup:
        return classify_tone(self.color)

    @property
    def color_name(self) -> str:
        return color_name(self.color)


__all__ = ["WardrobeItem"]
