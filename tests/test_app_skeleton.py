"""Configuration, logging and app wiring tests."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path

import pytest

sys.path.append(str(Path(__file__).resolve().parents[1]))

from fitstyle_app.app import FitStyleApp, to_saved_look
from fitstyle_app.config import AppConfig
from fitstyle_app.logging_config import (
    JsonFormatter,
    correlation_context,
    operation_context,
    redact_for_log,
)
from logic.outfit_builder import COMPLEMENTARY


@pytest.fixture()
def app(tmp_path: Path) -> FitStyleApp:
    return FitStyleApp(AppConfig(data_dir=str(tmp_path), analysis_delay_seconds=0))


def test_config_from_env_merges_yaml_and_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_file = tmp_path / "local.yaml"
    config_file.write_text(
        "# local overrides\n"
        "data_dir: \"/srv/fitstyle\"\n"
        "analysis_delay_seconds: 0.2\n"
        "seed_wardrobe: false\n"
    )
    monkeypatch.setenv("APP_CONFIG_PATH", str(config_file))
    monkeypatch.setenv("FITSTYLE_ANALYSIS_DELAY_SECONDS", "0.1")
    monkeypatch.delenv("FITSTYLE_DATA_DIR", raising=False)
    monkeypatch.delenv("FITSTYLE_SEED_WARDROBE", raising=False)

    config = AppConfig.from_env()

    assert config.data_dir == "/srv/fitstyle"
    assert config.analysis_delay_seconds == pytest.approx(0.1)
    assert config.seed_wardrobe is False
    assert config.resolved_saved_looks_path == Path("/srv/fitstyle/saved_looks.json")


def test_config_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in (
        "APP_ENV",
        "APP_CONFIG_PATH",
        "FITSTYLE_DATA_DIR",
        "FITSTYLE_PREFERENCES_PATH",
        "FITSTYLE_SEED_WARDROBE",
    ):
        monkeypatch.delenv(key, raising=False)
    config = AppConfig.from_env()
    assert config.resolved_preferences_path == Path("data/preferences.json")
    assert config.seed_wardrobe is True


def test_json_formatter_redacts_notes() -> None:
    record = logging.LogRecord("fitstyle", logging.INFO, __file__, 1, "look_saved", None, None)
    record.event = "look_saved"
    record.details = {"notes": "my secret", "count": 2}
    with correlation_context("corr-1"):
        payload = json.loads(JsonFormatter().format(record))
    assert payload["correlation_id"] == "corr-1"
    assert payload["details"] == {"notes": "[redacted]", "count": 2}
    assert redact_for_log("mail me@example.com") == "mail [redacted-email]"
    assert redact_for_log(b"\x00\x01") == "[2 bytes]"


def test_each_top_level_operation_gets_its_own_correlation_id() -> None:
    with correlation_context("startup"):
        with operation_context("first") as first:
            with operation_context("nested") as nested:
                assert nested == first
        with operation_context("second") as second:
            pass
        with operation_context("explicit", correlation_id="req-1") as explicit:
            pass

    assert first != second
    assert "startup" not in {first, second}
    assert explicit == "req-1"


def test_facade_calls_log_distinct_correlation_ids(
    app: FitStyleApp, monkeypatch: pytest.MonkeyPatch
) -> None:
    seen = []

    def capture(logger, level, event, **fields):
        if event == "operation_completed":
            seen.append(fields["correlation_id"])

    monkeypatch.setattr("tools.observability.log_event", capture)
    app.generate_suggestions()
    app.generate_suggestions()

    assert len(seen) == 2
    assert seen[0] != seen[1]


def test_app_wires_seeded_wardrobe_and_samples(app: FitStyleApp, tmp_path: Path) -> None:
    assert len(app.wardrobe.items) == 10
    assert [look.title for look in app.saved_looks.looks] == ["Smart Casual", "Street Style"]
    assert (tmp_path / "saved_looks.json").exists()


def test_save_suggestion_creates_tagged_look_once(app: FitStyleApp) -> None:
    suggestions = app.generate_suggestions()
    complementary = next(s for s in suggestions if s.title == COMPLEMENTARY)

    look = app.save_suggestion(complementary.id)

    assert look is not None
    assert look.harmony == "Complementary"
    assert [item.label for item in look.items] == [item.label for item in complementary.items]
    assert all(item.source_id is None for item in look.items)
    assert app.saved_looks.looks[0] == look
    assert app.suggestions.find(complementary.id).is_saved is True
    assert app.save_suggestion(complementary.id) is None


def test_edit_favorite_and_delete_by_id(app: FitStyleApp) -> None:
    look = app.saved_looks.looks[0]

    edited = app.edit_look(look_id=look.id, notes="Friday")
    assert edited.notes == "Friday" and edited.title == look.title

    assert app.toggle_favorite(look.id).is_favorite is True
    assert app.delete_look(look.id) is True
    assert app.delete_look(look.id) is False
    assert app.toggle_favorite(look.id) is None
    assert look.id not in app.saved_looks.favorite_ids


def test_add_wardrobe_item_validates_category(app: FitStyleApp) -> None:
    item = app.add_wardrobe_item(category="Shoes", color="#000")
    assert app.wardrobe.items[0] == item
    with pytest.raises(ValueError):
        app.add_wardrobe_item(category="hat")


def test_to_saved_look_copies_suggestion(app: FitStyleApp) -> None:
    suggestion = app.generate_suggestions()[1]
    look = to_saved_look(suggestion)
    assert look.title == suggestion.title
    assert look.colors == suggestion.colors
    assert look.harmony == "Analogous"
    assert look.is_favorite is False
