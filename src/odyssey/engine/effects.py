"""Status effect bookkeeping.

Effects tick once at the start of every player-initiated action, before the
action adds its own effect, so a stance raised this turn is still active
when the enemy answers.
"""

from __future__ import annotations

from odyssey.core.logging import get_logger
from odyssey.models import EffectType, StatusEffect, StatusEffects


logger = get_logger(__name__)


class StatusEffectTracker:
    """Advance, expire, and replace timed status effects."""

    def tick(self, effects: StatusEffects) -> list[StatusEffect]:
        """Decrement every duration by one and drop expired effects.

        Args:
            effects: The combatant's effect map, updated in place.

        Returns:
            The effects that expired this tick.
        """
        expired: list[StatusEffect] = []
        for effect in effects.active():
            effect.duration -= 1
            if effect.duration <= 0:
                expired.append(effects.effects.pop(effect.type))
        if expired:
            logger.debug("Status effects expired", expired=[e.type for e in expired])
        return expired

    def add_or_replace(
        self,
        effects: StatusEffects,
        effect_type: EffectType,
        duration: int,
        value: int | None = None,
    ) -> StatusEffect:
        """Set an effect, replacing any live effect of the same type.

        Returns:
            The newly added effect.
        """
        effects.effects.pop(effect_type, None)
        effect = StatusEffect(type=effect_type, duration=duration, value=value)
        effects.effects[effect_type] = effect
        logger.debug("Status effect set", type=effect_type, duration=duration, value=value)
        return effect

    def has(self, effects: StatusEffects, effect_type: EffectType) -> bool:
        return effect_type in effects


__all__ = ["StatusEffectTracker"]
