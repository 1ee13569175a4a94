"""Game engine module for the Odyssey RPG core.

This module resolves combat turns, status effects, progression, and quests
against one explicit GameSession.

Submodules:
    rng: Injectable random source
    interfaces: Renderer and message log collaborators
    content: Item/quest catalogs and content loading
    stats: Effective attack/defense resolution
    effects: Timed status effect bookkeeping
    progression: XP gain and level-ups
    quests: Quest acceptance, progress, and rewards
    inventory: Equipment slots and consumables
    combat: The combat state machine

Example:
    >>> from odyssey.engine import CombatEngine
    >>> from odyssey.models import create_character
    >>>
    >>> engine = CombatEngine.new_game(create_character("Nova", "Android", "Rogue"))
    >>> engine.start_encounter()
    >>> result = engine.player_attack()
"""

from __future__ import annotations

# =============================================================================
# Randomness & Collaborators
# =============================================================================
from odyssey.engine.rng import RNG
from odyssey.engine.interfaces import (
    InMemoryMessageLog,
    LevelUpEvent,
    MessageLog,
    NullRenderer,
    Renderer,
    render_session,
)

# =============================================================================
# Content
# =============================================================================
from odyssey.engine.content import (
    ContentFile,
    GameContent,
    ItemCatalog,
    QuestCatalog,
    load_content,
)

# =============================================================================
# Rules Components
# =============================================================================
from odyssey.engine.stats import EffectiveStats, StatsResolver
from odyssey.engine.effects import StatusEffectTracker
from odyssey.engine.progression import ProgressionManager
from odyssey.engine.quests import QuestTracker, QuestUpdate
from odyssey.engine.inventory import InventoryManager, ItemUse

# =============================================================================
# Combat
# =============================================================================
from odyssey.engine.combat import ActionResult, CombatEngine


__all__ = [
    # Randomness & Collaborators
    "RNG",
    "Renderer",
    "NullRenderer",
    "MessageLog",
    "InMemoryMessageLog",
    "LevelUpEvent",
    "render_session",
    # Content
    "ContentFile",
    "GameContent",
    "ItemCatalog",
    "QuestCatalog",
    "load_content",
    # Rules Components
    "EffectiveStats",
    "StatsResolver",
    "StatusEffectTracker",
    "ProgressionManager",
    "QuestTracker",
    "QuestUpdate",
    "InventoryManager",
    "ItemUse",
    # Combat
    "ActionResult",
    "CombatEngine",
]
