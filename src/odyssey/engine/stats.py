"""Effective attack and defense.

StatsResolver is a pure function of state: base stats, plus equipment
bonuses from the item catalog, plus active attack/defense boosts. It never
mutates anything, so the display layer and the damage math can call it any
number of times within a turn and get the same answer.
"""

from __future__ import annotations

from dataclasses import dataclass

from odyssey.core.logging import get_logger
from odyssey.engine.content import ItemCatalog
from odyssey.models import Character, EffectType, EquipmentSlot, StatusEffects


logger = get_logger(__name__)


@dataclass(frozen=True)
class EffectiveStats:
    """Attack and defense after equipment and buffs."""

    attack: int
    defense: int


class StatsResolver:
    """Compute effective stats from base stats, equipment, and buffs.

    Weapons add attack, armor adds defense, accessories add either or both.
    An equipped id missing from the catalog contributes nothing.
    """

    def __init__(self, items: ItemCatalog) -> None:
        self._items = items

    def equipment_bonus(self, character: Character) -> EffectiveStats:
        """Sum the bonuses of every equipped item."""
        attack = 0
        defense = 0
        for slot, item_id in character.equipment.equipped_items():
            item = self._items.lookup(item_id)
            if item is None:
                logger.debug("Equipped item missing from catalog", slot=slot, item=item_id)
                continue
            if slot in (EquipmentSlot.WEAPON, EquipmentSlot.ACCESSORY):
                attack += item.attack_bonus
            if slot in (EquipmentSlot.ARMOR, EquipmentSlot.ACCESSORY):
                defense += item.defense_bonus
        return EffectiveStats(attack=attack, defense=defense)

    def compute(self, character: Character, active_buffs: StatusEffects) -> EffectiveStats:
        """Compute effective attack and defense.

        Args:
            character: The character whose stats to resolve.
            active_buffs: The character's live status effects.

        Returns:
            EffectiveStats for the current state.
        """
        bonus = self.equipment_bonus(character)
        return EffectiveStats(
            attack=character.attack + bonus.attack + active_buffs.value_of(EffectType.ATTACK_BOOST),
            defense=character.defense + bonus.defense + active_buffs.value_of(EffectType.DEFENSE_BOOST),
        )


__all__ = ["EffectiveStats", "StatsResolver"]
