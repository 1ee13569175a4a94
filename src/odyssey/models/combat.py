"""Pydantic V2 schemas for combat encounters.

Enemies are created fresh per encounter from an EnemyTemplate and discarded
on victory. Status effects are stored in a map keyed by EffectType, so a
combatant can never carry two live effects of the same type.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field

from odyssey.models.enums import EffectType


class EnemyTemplate(BaseModel):
    """Static enemy definition from the content tables."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    name: str = Field(min_length=1)
    hp: int = Field(ge=1)
    attack: int = Field(ge=0)
    defense: int = Field(ge=0)
    locations: list[str] = Field(default_factory=list, description="Where it roams")


class Enemy(BaseModel):
    """An enemy in the active encounter.

    hp is not floored by validation: a single hit may push it below zero
    before the victory check runs, so callers test ``hp <= 0``.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    name: str = Field(min_length=1)
    hp: int
    max_hp: int = Field(ge=1)
    attack: int = Field(ge=0)
    defense: int = Field(ge=0)

    @computed_field(description="Whether the enemy has been defeated")
    @property
    def is_defeated(self) -> bool:
        return self.hp <= 0

    @classmethod
    def from_template(cls, template: EnemyTemplate, hp: int) -> "Enemy":
        """Spawn an enemy with scaled hp (max_hp set to the same value)."""
        hp = max(1, hp)
        return cls(
            name=template.name,
            hp=hp,
            max_hp=hp,
            attack=template.attack,
            defense=template.defense,
        )


class StatusEffect(BaseModel):
    """A timed modifier on a combatant.

    Attributes:
        type: Effect tag.
        duration: Turns remaining.
        value: Magnitude for boosts (None for stances).
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    type: EffectType
    duration: int
    value: int | None = None


class StatusEffects(BaseModel):
    """Live status effects of one combatant, at most one per type."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    effects: dict[EffectType, StatusEffect] = Field(default_factory=dict)

    def active(self) -> list[StatusEffect]:
        """Snapshot of the live effects in insertion order."""
        return list(self.effects.values())

    def __len__(self) -> int:
        return len(self.effects)

    def __contains__(self, effect_type: object) -> bool:
        return effect_type in self.effects

    def get(self, effect_type: EffectType) -> StatusEffect | None:
        return self.effects.get(effect_type)

    def value_of(self, effect_type: EffectType) -> int:
        """Magnitude of an effect, or 0 when absent or valueless."""
        effect = self.effects.get(effect_type)
        if effect is None or effect.value is None:
            return 0
        return effect.value

    def clear(self) -> None:
        self.effects.clear()


__all__ = [
    "EnemyTemplate",
    "Enemy",
    "StatusEffect",
    "StatusEffects",
]
