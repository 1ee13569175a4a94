"""Galactic Odyssey - turn-based RPG core.

Combat resolution, status effects, progression, and quests for a
single-player, menu-driven sci-fi role-playing game.

ARCHITECTURE:
- One GameSession record is the source of truth for a play session
- The CombatEngine resolves each player action, enemy reaction included,
  synchronously before returning
- Rendering and the narrative log are injected collaborators; the engine
  never draws anything itself

Example:
    >>> from odyssey import CombatEngine, create_character
    >>>
    >>> hero = create_character("Nova", race="Android", role="Warrior")
    >>> engine = CombatEngine.new_game(hero)
    >>> engine.accept_quest("quest_001")
    >>> engine.start_encounter()
    >>> result = engine.player_attack()
    >>> print(result.messages)

Modules:
    core: Configuration, logging, and base exceptions.
    models: Pydantic V2 schemas and built-in content tables.
    engine: Combat state machine and its rules components.
"""

from __future__ import annotations

# Core
from odyssey.core.config import GameSettings, Settings, get_settings
from odyssey.core.exceptions import OdysseyError
from odyssey.core.logging import configure_logging, get_logger

# Models
from odyssey.models import (
    Character,
    CombatPhase,
    EffectType,
    Enemy,
    GameSession,
    Role,
    StatusEffect,
    StatusEffects,
    create_character,
)

# Engine
from odyssey.engine import (
    ActionResult,
    CombatEngine,
    GameContent,
    ProgressionManager,
    QuestTracker,
    StatsResolver,
    StatusEffectTracker,
    load_content,
)


__version__ = "0.1.0"
__author__ = "Galactic Odyssey Team"
__all__ = [
    # Version info
    "__version__",
    "__author__",
    # Core
    "OdysseyError",
    "Settings",
    "GameSettings",
    "get_settings",
    "configure_logging",
    "get_logger",
    # Models
    "Character",
    "Role",
    "Enemy",
    "EffectType",
    "StatusEffect",
    "StatusEffects",
    "CombatPhase",
    "GameSession",
    "create_character",
    # Engine
    "ActionResult",
    "CombatEngine",
    "GameContent",
    "load_content",
    "StatsResolver",
    "StatusEffectTracker",
    "ProgressionManager",
    "QuestTracker",
]
