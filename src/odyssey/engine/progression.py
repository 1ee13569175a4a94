"""Experience and level-up resolution.

The level threshold is ``level * xp_per_level``, taken from the level the
character holds when the award is resolved. One large award can cross
several levels at that threshold (250 XP at level 1 reaches level 3 with
50 left over). Excess XP always carries over.
"""

from __future__ import annotations

from odyssey.core.config import GameSettings, get_settings
from odyssey.core.logging import get_logger
from odyssey.engine.interfaces import LevelUpEvent, NullRenderer, Renderer
from odyssey.models import ROLE_PROFILES, Character


logger = get_logger(__name__)


class ProgressionManager:
    """Apply XP gains and resolve level-ups.

    Each level-up applies one growth increment from the role table, heals
    to full, raises max energy and refills it, and notifies the renderer.
    """

    def __init__(
        self,
        renderer: Renderer | None = None,
        settings: GameSettings | None = None,
    ) -> None:
        """Initialize the progression manager.

        Args:
            renderer: Receives one show_level_up call per level gained.
            settings: Game rules; defaults to the application settings.
        """
        self._renderer = renderer or NullRenderer()
        self._settings = settings or get_settings().game

    def threshold(self, level: int) -> int:
        """XP needed to advance from ``level``."""
        return level * self._settings.xp_per_level

    def gain_xp(self, character: Character, amount: int) -> list[LevelUpEvent]:
        """Add XP and apply every level-up it triggers.

        Args:
            character: The character receiving XP.
            amount: XP to add. Non-positive amounts still run the level check.

        Returns:
            One LevelUpEvent per level gained, in order.
        """
        if amount > 0:
            character.xp += amount
        logger.debug("XP gained", character=character.name, amount=amount, xp=character.xp)
        return self.resolve_level_ups(character)

    def resolve_level_ups(self, character: Character) -> list[LevelUpEvent]:
        """Level up while the character's XP meets the threshold.

        The threshold is fixed at the level held on entry; the next
        award uses the new level.
        """
        events: list[LevelUpEvent] = []
        growth = ROLE_PROFILES[character.role].growth
        energy_growth = self._settings.level_up_energy_growth
        threshold = self.threshold(character.level)

        while character.xp >= threshold:
            character.xp -= threshold
            character.level += 1
            character.max_hp += growth.max_hp
            character.attack += growth.attack
            character.defense += growth.defense
            character.hp = character.max_hp
            character.max_energy += energy_growth
            character.energy = character.max_energy

            event = LevelUpEvent(
                level=character.level,
                max_hp=growth.max_hp,
                attack=growth.attack,
                defense=growth.defense,
                max_energy=energy_growth,
            )
            events.append(event)
            self._renderer.show_level_up(event.level, event.deltas)
            logger.info(
                "Level up",
                character=character.name,
                level=character.level,
                xp=character.xp,
            )

        character.xp_to_next_level = self.threshold(character.level)
        return events


__all__ = ["ProgressionManager"]
