"""FastAPI server exposing the FitStyle engine operations."""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field, ValidationError

from fitstyle_app.app import FitStyleApp
from models.color_theory import rgb_to_hex
from models.outfit import OutfitSuggestion, SavedLook
from models.wardrobe_item import WardrobeItem


class WardrobeItemRequest(BaseModel):
    """Request payload for adding a garment."""

    category: str = Field(..., description="top, bottom, shoes or accessory")
    color: str | None = Field(None, description="Hex color such as 1F3A93")


class LookEditRequest(BaseModel):
    title: str | None = None
    notes: str | None = None


def _item_payload(item: WardrobeItem) -> Dict[str, Any]:
    return {
        "id": item.item_id,
        "category": item.category.value,
        "color": rgb_to_hex(item.color) if item.color else None,
        "color_name": item.color_name,
        "family": item.family.value,
        "tone": item.tone.value,
        "added_at": item.added_at.isoformat(),
    }


def _suggestion_payload(suggestion: OutfitSuggestion) -> Dict[str, Any]:
    return {
        "id": suggestion.id,
        "title": suggestion.title,
        "explanation": suggestion.explanation,
        "items": [{"icon": item.icon, "label": item.label} for item in suggestion.items],
        "colors": [rgb_to_hex(color) for color in suggestion.colors],
        "is_saved": suggestion.is_saved,
    }


def _look_payload(look: SavedLook) -> Dict[str, Any]:
    return {
        "id": look.id,
        "title": look.title,
        "date_saved": look.date_saved.isoformat(),
        "items": [
            {"id": item.id, "icon": item.icon, "label": item.label, "source_id": item.source_id}
            for item in look.items
        ],
        "colors": [rgb_to_hex(color) for color in look.colors],
        "notes": look.notes,
        "harmony": look.harmony,
        "is_favorite": look.is_favorite,
    }


def create_app(fitstyle: FitStyleApp | None = None) -> FastAPI:
    """Build the HTTP surface around one app instance."""

    engine = fitstyle or FitStyleApp()
    api = FastAPI(title="FitStyle", version="0.1.0")

    @api.get("/healthz")
    async def healthcheck() -> dict:
        return {
            "status": "ok",
            "service": "fitstyle",
            "environment": engine.config.environment or "local",
        }

    @api.get("/wardrobe")
    async def wardrobe(search: str = "") -> List[dict]:
        return [
            {"category": category.value, "title": category.display_title, "items": [_item_payload(i) for i in items]}
            for category, items in engine.wardrobe_groups(search)
        ]

    @api.get("/wardrobe/distribution")
    async def distribution() -> dict:
        return {tone.value: count for tone, count in engine.tone_distribution().items()}

    @api.post("/wardrobe", status_code=201)
    async def add_item(request: WardrobeItemRequest) -> dict:
        try:
            item = engine.add_wardrobe_item(category=request.category, color=request.color)
        except ValidationError as exc:
            raise HTTPException(status_code=400, detail=exc.errors(include_url=False, include_context=False))
        return _item_payload(item)

    @api.delete("/wardrobe/{item_id}")
    async def remove_item(item_id: str) -> dict:
        if not engine.remove_wardrobe_item(item_id):
            raise HTTPException(status_code=404, detail="wardrobe item not found")
        return {"removed": item_id}

    @api.get("/suggestions")
    async def suggestions(filter: str | None = None) -> List[dict]:
        try:
            generated = engine.generate_suggestions(harmony_filter=filter)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc))
        return [_suggestion_payload(s) for s in generated]

    @api.post("/suggestions/{suggestion_id}/save", status_code=201)
    async def save_suggestion(suggestion_id: str) -> dict:
        look = engine.save_suggestion(suggestion_id)
        if look is None:
            raise HTTPException(status_code=404, detail="suggestion not found or already saved")
        return _look_payload(look)

    @api.get("/looks")
    async def looks(filter: str | None = None, search: str = "", sort: str | None = None) -> List[dict]:
        try:
            displayed = engine.saved_looks.displayed(harmony_filter=filter, search=search, sort=sort)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc))
        return [_look_payload(look) for look in displayed]

    @api.patch("/looks/{look_id}")
    async def edit_look(look_id: str, request: LookEditRequest) -> dict:
        try:
            look = engine.edit_look(look_id=look_id, title=request.title, notes=request.notes)
        except ValidationError as exc:
            raise HTTPException(status_code=400, detail=exc.errors(include_url=False, include_context=False))
        if look is None:
            raise HTTPException(status_code=404, detail="look not found")
        return _look_payload(look)

    @api.post("/looks/{look_id}/favorite")
    async def toggle_favorite(look_id: str) -> dict:
        look = engine.toggle_favorite(look_id)
        if look is None:
            raise HTTPException(status_code=404, detail="look not found")
        return _look_payload(look)

    @api.delete("/looks/{look_id}")
    async def delete_look(look_id: str) -> dict:
        if not engine.delete_look(look_id):
            raise HTTPException(status_code=404, detail="look not found")
        return {"deleted": look_id}

    @api.post("/diagnostics/self-test")
    async def self_test() -> dict:
        result = engine.run_self_test()
        return {
            "passed": result.passed,
            "present_after_save": result.present_after_save,
            "present_after_delete": result.present_after_delete,
        }

    return api


@lru_cache(maxsize=1)
def get_app() -> FastAPI:
    """Expose a lazily built FastAPI instance for ASGI servers."""

    return create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("server.api:get_app", factory=True, host="0.0.0.0", port=8080, reload=False)
