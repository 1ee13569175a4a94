"""Equipment slots and consumable use.

Equipping moves an item out of the inventory into its slot (the slot is the
item's type) and returns whatever was there before to the inventory.
"""

from __future__ import annotations

from dataclasses import dataclass

from odyssey.core.logging import get_logger
from odyssey.engine.content import ItemCatalog
from odyssey.engine.interfaces import MessageLog
from odyssey.models import Character, ConsumableEffect, EquipmentSlot, ItemType


logger = get_logger(__name__)


@dataclass(frozen=True)
class ItemUse:
    """Outcome of consuming one item.

    Attributes:
        item_id: The consumed item.
        effect: What it restored, or None for a consumable with no effect.
        restored: Amount of hp or energy actually restored.
    """

    item_id: str
    effect: ConsumableEffect | None
    restored: int


class InventoryManager:
    """Equip, unequip, and consume items for a character."""

    def __init__(self, items: ItemCatalog, message_log: MessageLog) -> None:
        self._items = items
        self._log = message_log

    def equip_item(self, character: Character, item_id: str) -> bool:
        """Equip an item from the inventory.

        Args:
            character: The character equipping.
            item_id: Weapon, armor, or accessory id held in the inventory.

        Returns:
            True on success. Unknown, non-equippable, or missing items are
            rejected with a message and no state change.
        """
        item = self._items.lookup(item_id)
        if item is None or not item.type.is_equippable:
            self._log.add("Cannot equip this item.")
            logger.debug("Equip rejected", item=item_id, reason="not_equippable")
            return False
        if not character.remove_item(item_id):
            self._log.add(f"You don't have {item_id}.")
            logger.debug("Equip rejected", item=item_id, reason="not_in_inventory")
            return False

        slot = EquipmentSlot(item.type.value)
        if character.equipment.get(slot) is not None:
            self.unequip_item(character, slot)

        character.equipment.set(slot, item_id)
        self._log.add(f"Equipped {item_id}.")
        logger.info("Item equipped", item=item_id, slot=slot)
        return True

    def unequip_item(self, character: Character, slot: EquipmentSlot | str) -> bool:
        """Move the item in ``slot`` back to the inventory.

        Returns:
            False if the slot was already empty.
        """
        slot = EquipmentSlot(slot)
        item_id = character.equipment.get(slot)
        if item_id is None:
            return False

        character.equipment.set(slot, None)
        character.add_item(item_id)
        self._log.add(f"Unequipped {item_id}.")
        logger.info("Item unequipped", item=item_id, slot=slot)
        return True

    def use_consumable(self, character: Character, item_id: str) -> ItemUse | None:
        """Consume one unit of a consumable.

        Heals are capped at max hp and energy restores at max energy.

        Returns:
            The ItemUse, or None if the item is unknown, not a consumable,
            or not in the inventory.
        """
        item = self._items.lookup(item_id)
        if item is None or item.type is not ItemType.CONSUMABLE:
            logger.debug("Consumable rejected", item=item_id, reason="not_consumable")
            return None
        if not character.remove_item(item_id):
            logger.debug("Consumable rejected", item=item_id, reason="not_in_inventory")
            return None

        if item.effect is ConsumableEffect.HEAL:
            restored = character.heal(item.value)
            self._log.add(f"You used {item_id} and recovered {restored} HP.")
        elif item.effect is ConsumableEffect.ENERGY:
            restored = character.restore_energy(item.value)
            self._log.add(f"You used {item_id} and restored {restored} Energy.")
        else:
            restored = 0
            self._log.add(f"You used {item_id} but nothing happened.")

        logger.info("Consumable used", item=item_id, effect=item.effect, restored=restored)
        return ItemUse(item_id=item_id, effect=item.effect, restored=restored)


__all__ = ["ItemUse", "InventoryManager"]
