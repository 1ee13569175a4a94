"""Pydantic V2 schemas for static item and quest definitions.

Definitions are read-only content. The validators accept the compact
content-file shapes (``stats: {attack, defense}`` on items, a flat
``type/target/amount`` triple on quests) and normalize them.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from odyssey.models.enums import ConsumableEffect, ItemType, ObjectiveType


class ItemDef(BaseModel):
    """An entry of the item catalog.

    Attributes:
        type: Item category.
        attack_bonus: Attack added while equipped.
        defense_bonus: Defense added while equipped.
        effect: What a consumable restores.
        value: Magnitude of the consumable effect.
        description: Flavor text.
        price: Shop price in credits.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: ItemType
    attack_bonus: int = 0
    defense_bonus: int = 0
    effect: ConsumableEffect | None = None
    value: int = Field(default=0, ge=0)
    description: str = ""
    price: int = Field(default=0, ge=0)

    @model_validator(mode="before")
    @classmethod
    def lift_stats(cls, data: Any) -> Any:
        """Accept ``stats: {attack, defense}`` as bonus fields."""
        if isinstance(data, dict) and isinstance(data.get("stats"), dict):
            data = dict(data)
            stats = data.pop("stats")
            data.setdefault("attack_bonus", stats.get("attack", 0))
            data.setdefault("defense_bonus", stats.get("defense", 0))
        return data


class Rewards(BaseModel):
    """XP and items granted on completing a quest or step."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    xp: int = Field(default=0, ge=0)
    items: list[str] = Field(default_factory=list)


class Objective(BaseModel):
    """The {type, target, amount} triple a quest requires progress against."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: ObjectiveType
    target: str = Field(min_length=1)
    amount: int = Field(default=1, ge=1)

    def matches(self, event_type: str, event_target: str) -> bool:
        return self.type == event_type and self.target == event_target


class Dialog(BaseModel):
    """Narrative shown when a quest step completes."""

    model_config = ConfigDict(frozen=True)

    title: str
    text: str


class QuestStep(Objective):
    """One ordered step of a step quest."""

    rewards: Rewards = Field(default_factory=Rewards)
    dialog: Dialog | None = None


class QuestDef(BaseModel):
    """A quest definition.

    Either ``objective`` (single-objective quest) or ``steps`` (step quest)
    drives progress. When both are present the steps win.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str = Field(min_length=1)
    title: str
    description: str = ""
    rewards: Rewards = Field(default_factory=Rewards)
    objective: Objective | None = None
    steps: list[QuestStep] = Field(default_factory=list)
    is_main_story: bool = False

    @model_validator(mode="before")
    @classmethod
    def lift_flat_objective(cls, data: Any) -> Any:
        """Accept a top-level ``type/target/amount`` as the objective."""
        if isinstance(data, dict) and "objective" not in data and "type" in data:
            data = dict(data)
            data["objective"] = {
                "type": data.pop("type"),
                "target": data.pop("target", ""),
                "amount": data.pop("amount", 1),
            }
        if isinstance(data, dict) and "isMainStory" in data:
            data = dict(data)
            data.setdefault("is_main_story", data.pop("isMainStory"))
        return data

    @model_validator(mode="after")
    def require_objective(self) -> "QuestDef":
        if self.objective is None and not self.steps:
            raise ValueError(f"quest {self.id!r} has neither an objective nor steps")
        return self

    @property
    def is_step_quest(self) -> bool:
        return bool(self.steps)

    def objective_at(self, step_index: int) -> Objective | None:
        """Resolve the current objective for a progress record.

        Returns:
            The step objective (or the flat objective), or None when the
            step index is past the last step.
        """
        if self.steps:
            if 0 <= step_index < len(self.steps):
                return self.steps[step_index]
            return None
        return self.objective


__all__ = [
    "ItemDef",
    "Rewards",
    "Objective",
    "Dialog",
    "QuestStep",
    "QuestDef",
]
