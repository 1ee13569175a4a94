"""Enumeration types for the Odyssey game engine.

These enums replace the string tags of the game's data tables so that role
dispatch, effect lookup, and quest objectives are matched exhaustively.
"""

from __future__ import annotations

from enum import StrEnum


class Role(StrEnum):
    """Character roles chosen at creation.

    The role selects base stats, critical-hit chance, and the special
    ability used in combat.
    """

    WARRIOR = "Warrior"
    ROGUE = "Rogue"
    SCIENTIST = "Scientist"

    @property
    def ability_name(self) -> str:
        """Display name of the role's special ability."""
        return _ABILITY_NAMES[self]


_ABILITY_NAMES: dict[Role, str] = {
    Role.WARRIOR: "Power Strike",
    Role.ROGUE: "Assassinate",
    Role.SCIENTIST: "Shield Boost",
}


class EffectType(StrEnum):
    """Timed status effects that can be active on a combatant."""

    BLOCKING = "blocking"
    """Halves the next incoming hit."""

    DODGING = "dodging"
    """Chance to avoid the next incoming hit entirely."""

    ATTACK_BOOST = "attackBoost"
    """Adds its value to effective attack."""

    DEFENSE_BOOST = "defenseBoost"
    """Adds its value to effective defense."""


class ItemType(StrEnum):
    """Item categories in the item catalog."""

    WEAPON = "weapon"
    ARMOR = "armor"
    ACCESSORY = "accessory"
    CONSUMABLE = "consumable"
    MATERIAL = "material"

    @property
    def is_equippable(self) -> bool:
        """Whether items of this type occupy an equipment slot."""
        return self in (ItemType.WEAPON, ItemType.ARMOR, ItemType.ACCESSORY)


class EquipmentSlot(StrEnum):
    """Equipment slots on a character."""

    WEAPON = "weapon"
    ARMOR = "armor"
    ACCESSORY = "accessory"


class ConsumableEffect(StrEnum):
    """What a consumable item restores when used."""

    HEAL = "heal"
    ENERGY = "energy"


class CombatPhase(StrEnum):
    """Phases of the combat state machine."""

    IDLE = "idle"
    ENCOUNTER = "encounter"
    VICTORY = "victory"
    DEFEAT = "defeat"


class CombatAction(StrEnum):
    """Player actions that resolve a turn."""

    ATTACK = "attack"
    BLOCK = "block"
    DODGE = "dodge"
    SPECIAL = "special"
    ITEM = "item"


class ObjectiveType(StrEnum):
    """Kinds of progress events a quest objective listens for."""

    KILL = "kill"
    COLLECT = "collect"


class QuestStatus(StrEnum):
    """Lifecycle of a quest for one character."""

    NOT_ACCEPTED = "not_accepted"
    ACTIVE = "active"
    COMPLETED = "completed"


__all__ = [
    "Role",
    "EffectType",
    "ItemType",
    "EquipmentSlot",
    "ConsumableEffect",
    "CombatPhase",
    "CombatAction",
    "ObjectiveType",
    "QuestStatus",
]
