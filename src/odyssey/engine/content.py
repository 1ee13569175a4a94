"""Item catalog, quest catalog, and content loading.

GameContent bundles every read-only table the engine consults: enemy
templates, the item catalog, the quest catalog, and the victory loot table.
It is built from the defaults in odyssey.models.defaults or from a JSON
file with the same four top-level keys::

    {"enemies": [...], "items": {...}, "quests": {...}, "loot_table": [...]}
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from odyssey.core.exceptions import ContentError
from odyssey.core.logging import get_logger
from odyssey.models import Character, EnemyTemplate, ItemDef, QuestDef
from odyssey.models import defaults


logger = get_logger(__name__)


class ItemCatalog:
    """Read-only lookup of item definitions by id."""

    def __init__(self, items: dict[str, ItemDef]) -> None:
        self._items = dict(items)

    def lookup(self, item_id: str | None) -> ItemDef | None:
        """Get an item definition.

        Returns:
            The definition, or None for an empty or unknown id.
        """
        if not item_id:
            return None
        return self._items.get(item_id)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._items

    def __len__(self) -> int:
        return len(self._items)

    def ids(self) -> list[str]:
        return list(self._items)


class QuestCatalog:
    """Read-only lookup of quest definitions by id."""

    def __init__(self, quests: dict[str, QuestDef]) -> None:
        self._quests = dict(quests)

    def get(self, quest_id: str) -> QuestDef | None:
        return self._quests.get(quest_id)

    def __contains__(self, quest_id: object) -> bool:
        return quest_id in self._quests

    def __len__(self) -> int:
        return len(self._quests)

    def all(self) -> list[QuestDef]:
        return list(self._quests.values())

    def available_for(self, character: Character) -> list[QuestDef]:
        """Quests the character has neither accepted nor completed."""
        return [
            quest
            for quest in self._quests.values()
            if quest.id not in character.active_quests
            and quest.id not in character.completed_quests
        ]


class ContentFile(BaseModel):
    """Schema of a JSON content file."""

    model_config = ConfigDict(extra="forbid")

    enemies: list[EnemyTemplate] = Field(min_length=1)
    items: dict[str, ItemDef] = Field(default_factory=dict)
    quests: dict[str, QuestDef] = Field(default_factory=dict)
    loot_table: list[str] = Field(min_length=1)


@dataclass
class GameContent:
    """Every read-only table the engine consults."""

    enemies: list[EnemyTemplate]
    items: ItemCatalog
    quests: QuestCatalog
    loot_table: list[str] = field(default_factory=list)

    @classmethod
    def default(cls) -> "GameContent":
        """Build content from the built-in tables."""
        return _build(
            {
                "enemies": defaults.ENEMIES,
                "items": defaults.ITEMS,
                "quests": defaults.QUESTS,
                "loot_table": defaults.LOOT_TABLE,
            },
            source="<defaults>",
        )


def _build(data: Any, *, source: str) -> GameContent:
    """Validate raw content and cross-check its references.

    Raises:
        ContentError: On schema errors or dangling references.
    """
    try:
        parsed = TypeAdapter(ContentFile).validate_python(data)
    except PydanticValidationError as exc:
        raise ContentError(
            f"Invalid content: {exc.error_count()} validation error(s)",
            source=source,
            details={"errors": [err["msg"] for err in exc.errors()]},
        ) from exc

    for key, quest in parsed.quests.items():
        if quest.id != key:
            raise ContentError(
                f"Quest key {key!r} does not match its id {quest.id!r}",
                source=source,
            )

    missing_loot = [item for item in parsed.loot_table if item not in parsed.items]
    if missing_loot:
        raise ContentError(
            "Loot table references unknown items",
            source=source,
            details={"missing": missing_loot},
        )

    return GameContent(
        enemies=list(parsed.enemies),
        items=ItemCatalog(parsed.items),
        quests=QuestCatalog(parsed.quests),
        loot_table=list(parsed.loot_table),
    )


def load_content(path: str | Path) -> GameContent:
    """Load game content from a JSON file.

    Args:
        path: Path to the content file.

    Returns:
        Validated GameContent.

    Raises:
        ContentError: If the file cannot be read, parsed, or validated.
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ContentError(f"Cannot read content file: {exc}", source=str(path)) from exc
    except json.JSONDecodeError as exc:
        raise ContentError(f"Content file is not valid JSON: {exc}", source=str(path)) from exc

    content = _build(raw, source=str(path))
    logger.info(
        "Content loaded",
        source=str(path),
        enemies=len(content.enemies),
        items=len(content.items),
        quests=len(content.quests),
    )
    return content


__all__ = [
    "ItemCatalog",
    "QuestCatalog",
    "ContentFile",
    "GameContent",
    "load_content",
]
