"""The session record owned by the combat engine.

GameSession is the single source of truth for one play session: the
character, the current enemy (if any), both combatants' status effects,
and the combat phase. It is passed explicitly to the engine components;
nothing in the engine keeps module-level state.
"""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from odyssey.models.character import Character
from odyssey.models.combat import Enemy, StatusEffects
from odyssey.models.enums import CombatPhase


class GameSession(BaseModel):
    """Mutable state of one play session.

    Attributes:
        session_id: Unique session identifier.
        character: The player character.
        enemy: Enemy of the active encounter, None outside combat.
        player_effects: Status effects on the player.
        enemy_effects: Status effects on the enemy.
        phase: Current combat phase.
        turn: Turns resolved in the current encounter.
        encounters_won: Victories in this session.
    """

    model_config = ConfigDict(validate_assignment=True, extra="forbid")

    session_id: UUID = Field(default_factory=uuid4)
    character: Character
    enemy: Enemy | None = None
    player_effects: StatusEffects = Field(default_factory=StatusEffects)
    enemy_effects: StatusEffects = Field(default_factory=StatusEffects)
    phase: CombatPhase = CombatPhase.IDLE
    turn: int = Field(default=0, ge=0)
    encounters_won: int = Field(default=0, ge=0)

    @property
    def in_encounter(self) -> bool:
        return self.phase == CombatPhase.ENCOUNTER and self.enemy is not None


__all__ = ["GameSession"]
