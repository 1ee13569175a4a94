"""Pydantic V2 schemas for the player character.

The Character is owned by the GameSession and mutated only by the engine
(CombatEngine, ProgressionManager, QuestTracker, InventoryManager). The
clamping helpers keep hp and energy inside their bounds so the invariants
``0 <= hp <= max_hp`` and ``0 <= energy <= max_energy`` hold between turns.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field

from odyssey.core.constants import STARTING_CREDITS, STARTING_LEVEL
from odyssey.core.exceptions import ValidationError
from odyssey.models.enums import EquipmentSlot, Role


class Equipment(BaseModel):
    """Three optional equipment slots, each holding an item identifier."""

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    weapon: str | None = Field(default=None, description="Equipped weapon id")
    armor: str | None = Field(default=None, description="Equipped armor id")
    accessory: str | None = Field(default=None, description="Equipped accessory id")

    def get(self, slot: EquipmentSlot) -> str | None:
        return getattr(self, slot.value)

    def set(self, slot: EquipmentSlot, item_id: str | None) -> None:
        setattr(self, slot.value, item_id)

    def equipped_items(self) -> list[tuple[EquipmentSlot, str]]:
        """Get every occupied slot with its item id."""
        return [(slot, item) for slot in EquipmentSlot if (item := self.get(slot)) is not None]


class QuestProgress(BaseModel):
    """Mutable progress of one accepted quest.

    Attributes:
        progress: Units counted toward the current objective.
        current_step: Index of the current step for step quests (0 otherwise).
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    progress: int = Field(default=0, ge=0)
    current_step: int = Field(default=0, ge=0)


class LevelGrowth(BaseModel):
    """Stat increments applied by exactly one level-up."""

    model_config = ConfigDict(frozen=True)

    max_hp: int = 10
    attack: int = 2
    defense: int = 1


class RoleProfile(BaseModel):
    """Creation-table entry for a role."""

    model_config = ConfigDict(frozen=True)

    hp: int = Field(ge=1)
    attack: int = Field(ge=0)
    defense: int = Field(ge=0)
    max_energy: int = Field(ge=0)
    growth: LevelGrowth = Field(default_factory=LevelGrowth)


ROLE_PROFILES: dict[Role, RoleProfile] = {
    Role.WARRIOR: RoleProfile(hp=120, attack=12, defense=8, max_energy=100),
    Role.ROGUE: RoleProfile(hp=90, attack=15, defense=5, max_energy=120),
    Role.SCIENTIST: RoleProfile(hp=100, attack=10, defense=10, max_energy=150),
}


class Character(BaseModel):
    """The player character.

    Attributes:
        name: Character name.
        race: Flavor race (Human, Cyborg, Android, ...).
        role: Role selecting stats and special ability.
        hp: Current hit points.
        max_hp: Maximum hit points.
        attack: Base attack.
        defense: Base defense.
        energy: Current energy for special abilities.
        max_energy: Maximum energy.
        level: Character level.
        xp: Experience toward the next level.
        xp_to_next_level: Threshold for the next level-up.
        equipment: Equipped item ids.
        inventory: Carried item ids (duplicates allowed).
        active_quests: Progress keyed by quest id.
        completed_quests: Ids of completed quests in completion order.
        credits: Currency.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    name: str = Field(min_length=1, max_length=100)
    race: str = Field(default="Human")
    role: Role
    hp: int = Field(ge=0)
    max_hp: int = Field(ge=1)
    attack: int = Field(ge=0)
    defense: int = Field(ge=0)
    energy: int = Field(ge=0)
    max_energy: int = Field(ge=0)
    level: int = Field(default=STARTING_LEVEL, ge=1)
    xp: int = Field(default=0, ge=0)
    xp_to_next_level: int = Field(default=100, ge=1)
    equipment: Equipment = Field(default_factory=Equipment)
    inventory: list[str] = Field(default_factory=list)
    active_quests: dict[str, QuestProgress] = Field(default_factory=dict)
    completed_quests: list[str] = Field(default_factory=list)
    credits: int = Field(default=STARTING_CREDITS, ge=0)

    @computed_field(description="Whether the character has fallen")
    @property
    def is_defeated(self) -> bool:
        return self.hp <= 0

    def take_damage(self, amount: int) -> int:
        """Apply damage, clamping hp at zero.

        Returns:
            The hp actually lost.
        """
        if amount <= 0:
            return 0
        before = self.hp
        self.hp = max(0, self.hp - amount)
        return before - self.hp

    def heal(self, amount: int) -> int:
        """Restore hp up to max_hp and return the amount restored."""
        if amount <= 0:
            return 0
        before = self.hp
        self.hp = min(self.max_hp, self.hp + amount)
        return self.hp - before

    def restore_energy(self, amount: int) -> int:
        """Restore energy up to max_energy and return the amount restored."""
        if amount <= 0:
            return 0
        before = self.energy
        self.energy = min(self.max_energy, self.energy + amount)
        return self.energy - before

    def spend_energy(self, amount: int) -> bool:
        """Spend energy if enough is available.

        Returns:
            False (and no change) when energy is insufficient.
        """
        if self.energy < amount:
            return False
        self.energy -= amount
        return True

    def has_item(self, item_id: str) -> bool:
        return item_id in self.inventory

    def remove_item(self, item_id: str) -> bool:
        """Remove one unit of an item from the inventory."""
        if item_id not in self.inventory:
            return False
        self.inventory.remove(item_id)
        return True

    def add_item(self, item_id: str) -> None:
        self.inventory.append(item_id)


# =============================================================================
# Factory
# =============================================================================


def create_character(name: str, race: str, role: Role | str) -> Character:
    """Create a level-1 character from the role table.

    Args:
        name: Character name.
        race: Flavor race.
        role: Role enum or its string value ("Warrior", "Rogue", "Scientist").

    Returns:
        A character at full hp and energy with empty equipment.

    Raises:
        ValidationError: If the role is not one of the fixed roles.

    Example:
        >>> hero = create_character("Nova", "Android", "Rogue")
        >>> hero.max_energy
        120
    """
    try:
        role = Role(role)
    except ValueError as exc:
        raise ValidationError(
            f"Unknown role: {role}",
            field_name="role",
            invalid_value=role,
            details={"valid_roles": [r.value for r in Role]},
        ) from exc

    profile = ROLE_PROFILES[role]
    return Character(
        name=name,
        race=race,
        role=role,
        hp=profile.hp,
        max_hp=profile.hp,
        attack=profile.attack,
        defense=profile.defense,
        energy=profile.max_energy,
        max_energy=profile.max_energy,
    )


__all__ = [
    "create_character",
    "Equipment",
    "QuestProgress",
    "LevelGrowth",
    "RoleProfile",
    "ROLE_PROFILES",
    "Character",
]
