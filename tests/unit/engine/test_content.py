"""Tests for content catalogs and loading."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from odyssey.core.exceptions import ContentError
from odyssey.engine.content import GameContent, load_content
from odyssey.models import ItemType


def _write(path: Path, data: Any) -> Path:
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def minimal_content() -> dict[str, Any]:
    return {
        "enemies": [{"name": "Xenobot", "hp": 50, "attack": 10, "defense": 3}],
        "items": {
            "Energy Cell": {"type": "consumable", "effect": "heal", "value": 30},
            "Laser Blade": {"type": "weapon", "stats": {"attack": 7}},
        },
        "quests": {
            "quest_001": {
                "id": "quest_001",
                "title": "First Contact",
                "type": "kill",
                "target": "Xenobot",
                "amount": 3,
                "rewards": {"xp": 50, "items": ["Energy Cell"]},
            }
        },
        "loot_table": ["Energy Cell"],
    }


class TestDefaultContent:
    """Tests for the built-in tables."""

    def test_tables_loaded(self, content: GameContent) -> None:
        assert len(content.enemies) == 5
        assert content.loot_table == ["Energy Cell", "Alien Crystal", "Data Chip"]
        assert "story_01" in content.quests
        assert content.quests.get("story_01").is_step_quest

    def test_item_lookup(self, content: GameContent) -> None:
        rifle = content.items.lookup("Plasma Rifle")

        assert rifle.type is ItemType.WEAPON
        assert rifle.attack_bonus == 5

    def test_unknown_item_lookup(self, content: GameContent) -> None:
        assert content.items.lookup("Ghost Blade") is None
        assert content.items.lookup(None) is None
        assert content.items.lookup("") is None


class TestLoadContent:
    """Tests for load_content."""

    def test_load_valid_file(self, tmp_path: Path, minimal_content: dict[str, Any]) -> None:
        content = load_content(_write(tmp_path / "content.json", minimal_content))

        assert [e.name for e in content.enemies] == ["Xenobot"]
        assert content.items.lookup("Laser Blade").attack_bonus == 7
        assert content.quests.get("quest_001").objective.amount == 3

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ContentError) as exc_info:
            load_content(tmp_path / "nope.json")

        assert exc_info.value.details["source"].endswith("nope.json")

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(ContentError):
            load_content(path)

    def test_schema_error(self, tmp_path: Path, minimal_content: dict[str, Any]) -> None:
        minimal_content["enemies"] = []

        with pytest.raises(ContentError):
            load_content(_write(tmp_path / "content.json", minimal_content))

    def test_unknown_loot_item(self, tmp_path: Path, minimal_content: dict[str, Any]) -> None:
        minimal_content["loot_table"] = ["Energy Cell", "Dark Matter"]

        with pytest.raises(ContentError) as exc_info:
            load_content(_write(tmp_path / "content.json", minimal_content))

        assert exc_info.value.details["missing"] == ["Dark Matter"]

    def test_quest_key_mismatch(self, tmp_path: Path, minimal_content: dict[str, Any]) -> None:
        minimal_content["quests"]["quest_999"] = minimal_content["quests"].pop("quest_001")

        with pytest.raises(ContentError):
            load_content(_write(tmp_path / "content.json", minimal_content))
