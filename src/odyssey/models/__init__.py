"""Pydantic V2 schemas for the Odyssey game engine.

Submodules:
    enums: Enumeration types (Role, EffectType, ItemType, CombatPhase, ...)
    character: The player character, equipment, quest progress, role table
    combat: Enemies and status effects
    catalog: Item and quest definitions
    game_state: The GameSession record owned by the engine
    defaults: Built-in content tables

Example:
    >>> from odyssey.models import Character, Role
    >>> hero = Character(
    ...     name="Nova", role=Role.ROGUE, hp=90, max_hp=90,
    ...     attack=15, defense=5, energy=120, max_energy=120,
    ... )
"""

from __future__ import annotations

from odyssey.models.enums import (
    CombatAction,
    CombatPhase,
    ConsumableEffect,
    EffectType,
    EquipmentSlot,
    ItemType,
    ObjectiveType,
    QuestStatus,
    Role,
)
from odyssey.models.character import (
    ROLE_PROFILES,
    Character,
    Equipment,
    LevelGrowth,
    QuestProgress,
    RoleProfile,
    create_character,
)
from odyssey.models.combat import Enemy, EnemyTemplate, StatusEffect, StatusEffects
from odyssey.models.catalog import Dialog, ItemDef, Objective, QuestDef, QuestStep, Rewards
from odyssey.models.game_state import GameSession


__all__ = [
    # Enums
    "Role",
    "EffectType",
    "ItemType",
    "EquipmentSlot",
    "ConsumableEffect",
    "CombatPhase",
    "CombatAction",
    "ObjectiveType",
    "QuestStatus",
    # Character
    "Character",
    "Equipment",
    "QuestProgress",
    "LevelGrowth",
    "RoleProfile",
    "ROLE_PROFILES",
    "create_character",
    # Combat
    "Enemy",
    "EnemyTemplate",
    "StatusEffect",
    "StatusEffects",
    # Catalog
    "ItemDef",
    "Rewards",
    "Objective",
    "Dialog",
    "QuestStep",
    "QuestDef",
    # Session
    "GameSession",
]
