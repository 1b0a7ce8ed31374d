"""Pydantic schemas for the persisted saved-look record and facade inputs."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator

from models.taxonomy import validate_category

REFERENCE_DATE = datetime(2001, 1, 1, tzinfo=timezone.utc)


class LookItemRecord(BaseModel):
    """One outfit line inside a persisted look."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    icon: str
    label: str
    source_id: Optional[str] = Field(default=None, alias="sourceId")


class LookRecord(BaseModel):
    """Wire format of a saved look.

    ``isFavorite`` is absent in records written before favorites were
    captured per record; ``None`` marks such legacy entries.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    date_saved: datetime = Field(alias="dateSaved")
    items: List[LookItemRecord] = []
    colors: List[str] = []
    notes: Optional[str] = None
    harmony: Optional[str] = None
    is_favorite: Optional[bool] = Field(default=None, alias="isFavorite")

    @field_validator("date_saved", mode="before")
    @classmethod
    def _reference_date_seconds(cls, value: Any) -> Any:
        """Numeric dates count seconds from 2001-01-01 UTC, as the mobile app writes them."""

        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return REFERENCE_DATE + timedelta(seconds=value)
        return value

    @property
    def is_legacy(self) -> bool:
        return self.is_favorite is None


LOOK_RECORDS = TypeAdapter(List[LookRecord])


class WardrobeItemInput(BaseModel):
    """Input contract for adding a wardrobe item."""

    category: str
    color: Optional[str] = Field(default=None, description="Hex color, 3/6/8 digits")

    @field_validator("category")
    @classmethod
    def _validate_category(cls, value: str) -> str:
        return validate_category(value).value


class LookEditInput(BaseModel):
    """Input contract for editing a saved look's user text."""

    look_id: str = Field(min_length=1)
    title: Optional[str] = Field(default=None, min_length=1)
    notes: Optional[str] = None


__all__ = [
    "LookItemRecord",
    "LookRecord",
    "LOOK_RECORDS",
    "WardrobeItemInput",
    "LookEditInput",
]
