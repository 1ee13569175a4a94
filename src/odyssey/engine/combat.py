"""Turn-based combat state machine.

The engine owns one GameSession and resolves every player action, including
the enemy's answer, before returning:

    IDLE --start_encounter--> ENCOUNTER --(player action, enemy reaction)*-->
        VICTORY (enemy hp <= 0, back to IDLE) | DEFEAT (player hp <= 0, terminal)

Each action ticks both combatants' status effects first, then acts. The only
exceptions are a special ability refused for lack of energy, which changes
nothing, and combat items, which never tick effects.

Actions never raise during play. A rejected action (no enemy, defeated,
insufficient energy, unusable item) returns an ActionResult with
``accepted=False`` and leaves the session untouched.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from odyssey.core.config import GameSettings, get_settings
from odyssey.core.constants import GUARD_DURATION
from odyssey.core.exceptions import CombatError
from odyssey.core.logging import bind_context, get_logger, unbind_context
from odyssey.engine.content import GameContent, load_content
from odyssey.engine.effects import StatusEffectTracker
from odyssey.engine.interfaces import (
    InMemoryMessageLog,
    LevelUpEvent,
    MessageLog,
    NullRenderer,
    Renderer,
    render_session,
)
from odyssey.engine.inventory import InventoryManager
from odyssey.engine.progression import ProgressionManager
from odyssey.engine.quests import QuestTracker, QuestUpdate
from odyssey.engine.rng import RNG
from odyssey.engine.stats import EffectiveStats, StatsResolver
from odyssey.models import (
    Character,
    CombatAction,
    CombatPhase,
    EffectType,
    Enemy,
    EnemyTemplate,
    GameSession,
    ObjectiveType,
    Role,
)


logger = get_logger(__name__)


@dataclass
class ActionResult:
    """Outcome of one player action.

    Attributes:
        accepted: False when the action was rejected with no state change.
        action: The action attempted.
        phase: Combat phase at the end of the action (VICTORY for the
            winning blow, even though the session itself returns to IDLE).
        damage_dealt: Damage dealt to the enemy.
        damage_taken: Damage taken from the enemy's reaction.
        critical: Whether a basic attack was a critical hit.
        dodged: Whether the enemy's attack was dodged.
        blocked: Whether the enemy's attack was halved by blocking.
        energy_spent: Energy spent on a special ability.
        xp_gained: Victory XP.
        loot: Item found on victory.
        level_ups: Level-ups triggered by victory XP.
        quest_updates: Quest progress triggered by the victory.
        messages: Narrative lines produced by the action.
    """

    accepted: bool
    action: CombatAction
    phase: CombatPhase
    damage_dealt: int = 0
    damage_taken: int = 0
    critical: bool = False
    dodged: bool = False
    blocked: bool = False
    energy_spent: int = 0
    xp_gained: int = 0
    loot: str | None = None
    level_ups: list[LevelUpEvent] = field(default_factory=list)
    quest_updates: list[QuestUpdate] = field(default_factory=list)
    messages: list[str] = field(default_factory=list)

    @property
    def is_victory(self) -> bool:
        return self.phase == CombatPhase.VICTORY

    @property
    def is_defeat(self) -> bool:
        return self.phase == CombatPhase.DEFEAT


class CombatEngine:
    """Resolve encounters for one session.

    Collaborators are injected at construction. Any that are omitted are
    built from ``content`` and ``settings``, so the simplest setup is::

        engine = CombatEngine(GameSession(character=hero), GameContent.default())
        engine.start_encounter()
        result = engine.player_attack()

    Attributes:
        session: The session record the engine mutates.
        content: Enemy templates, items, quests, and loot table.
    """

    def __init__(
        self,
        session: GameSession,
        content: GameContent,
        *,
        renderer: Renderer | None = None,
        message_log: MessageLog | None = None,
        settings: GameSettings | None = None,
        rng: RNG | None = None,
        stats: StatsResolver | None = None,
        effects: StatusEffectTracker | None = None,
        progression: ProgressionManager | None = None,
        quests: QuestTracker | None = None,
        inventory: InventoryManager | None = None,
    ) -> None:
        """Initialize the combat engine.

        Args:
            session: The session record to drive.
            content: Game content tables.
            renderer: Rendering collaborator.
            message_log: Narrative line sink.
            settings: Game rules; defaults to the application settings.
            rng: Random source; seeded from settings when omitted.
            stats: Effective stat resolver.
            effects: Status effect tracker.
            progression: XP and level-up manager.
            quests: Quest tracker.
            inventory: Equipment and consumable manager.
        """
        self.session = session
        self.content = content
        self._settings = settings or get_settings().game
        self._renderer = renderer or NullRenderer()
        self._log = message_log if message_log is not None else InMemoryMessageLog()
        self._rng = rng or RNG(self._settings.rng_seed)
        self._stats = stats or StatsResolver(content.items)
        self._effects = effects or StatusEffectTracker()
        self._progression = progression or ProgressionManager(self._renderer, self._settings)
        self._quests = quests or QuestTracker(
            content.quests,
            self._log,
            renderer=self._renderer,
            progression=self._progression,
            settings=self._settings,
        )
        self._inventory = inventory or InventoryManager(content.items, self._log)
        logger.info("CombatEngine initialized", session_id=str(session.session_id))

    @classmethod
    def new_game(
        cls,
        character: Character,
        *,
        renderer: Renderer | None = None,
        message_log: MessageLog | None = None,
        settings: GameSettings | None = None,
    ) -> "CombatEngine":
        """Start a fresh session for a character.

        Content comes from ``settings.content_path`` when set, otherwise
        from the built-in tables.

        Raises:
            ContentError: If the configured content file is invalid.
        """
        settings = settings or get_settings().game
        if settings.content_path is not None:
            content = load_content(settings.content_path)
        else:
            content = GameContent.default()
        return cls(
            GameSession(character=character),
            content,
            renderer=renderer,
            message_log=message_log,
            settings=settings,
        )

    # =========================================================================
    # Accessors
    # =========================================================================

    @property
    def character(self) -> Character:
        return self.session.character

    @property
    def enemy(self) -> Enemy | None:
        return self.session.enemy

    @property
    def phase(self) -> CombatPhase:
        return self.session.phase

    @property
    def message_log(self) -> MessageLog:
        return self._log

    @property
    def inventory(self) -> InventoryManager:
        return self._inventory

    @property
    def quests(self) -> QuestTracker:
        return self._quests

    def effective_stats(self) -> EffectiveStats:
        """Player attack and defense with equipment and buffs applied."""
        return self._stats.compute(self.character, self.session.player_effects)

    # =========================================================================
    # Encounter lifecycle
    # =========================================================================

    def start_encounter(self, template: EnemyTemplate | None = None) -> Enemy | None:
        """Spawn an enemy and enter the ENCOUNTER phase.

        The template is drawn uniformly from the content's enemies unless
        given. Its hp is scaled by a uniform factor from the configured
        range and max hp is set to the scaled value. Both combatants'
        status effects are cleared.

        Returns:
            The spawned enemy, or None if the session is already defeated.

        Raises:
            CombatError: If no template is given and the content has no
                enemies.
        """
        if self.session.phase == CombatPhase.DEFEAT:
            logger.warning("Encounter refused", reason="session_defeated")
            return None

        if template is None:
            if not self.content.enemies:
                raise CombatError("No enemy templates loaded")
            template = self._rng.choice(self.content.enemies)
        factor = self._rng.uniform_factor(
            self._settings.enemy_hp_min_factor,
            self._settings.enemy_hp_max_factor,
        )
        enemy = Enemy.from_template(template, math.floor(template.hp * factor))

        self.session.enemy = enemy
        self.session.player_effects.clear()
        self.session.enemy_effects.clear()
        self.session.phase = CombatPhase.ENCOUNTER
        self.session.turn = 0

        bind_context(encounter=enemy.name)
        self._log.add(f"You encountered a {enemy.name}!")
        logger.info("Encounter started", enemy=enemy.name, hp=enemy.hp, factor=round(factor, 3))
        self._render()
        return enemy

    # =========================================================================
    # Player actions
    # =========================================================================

    def player_attack(self) -> ActionResult:
        """Basic attack using effective attack against the enemy's defense."""
        rejected = self._reject_if_idle(CombatAction.ATTACK)
        if rejected is not None:
            return rejected
        result = self._begin_turn(CombatAction.ATTACK)
        enemy = self._active_enemy()

        crit_chance = (
            self._settings.rogue_crit_chance
            if self.character.role is Role.ROGUE
            else self._settings.crit_chance
        )
        result.critical = self._rng.chance(crit_chance)
        multiplier = self._settings.crit_multiplier if result.critical else 1.0
        base = max(0, self.effective_stats().attack - enemy.defense)
        damage = math.floor(base * multiplier)
        self._hit_enemy(result, damage)

        if result.critical:
            self._say(result, f"CRITICAL HIT! You hit the {enemy.name} for {damage} damage!")
        else:
            self._say(result, f"You hit the {enemy.name} for {damage} damage.")

        return self._finish_offense(result)

    def player_block(self) -> ActionResult:
        """Raise a guard that halves the enemy's next hit."""
        rejected = self._reject_if_idle(CombatAction.BLOCK)
        if rejected is not None:
            return rejected
        result = self._begin_turn(CombatAction.BLOCK)

        self._effects.add_or_replace(self.session.player_effects, EffectType.BLOCKING, GUARD_DURATION)
        self._say(result, "You raise your guard, ready to block the next attack!")
        self._enemy_reaction(result)
        return self._end_turn(result)

    def player_dodge(self) -> ActionResult:
        """Prepare to dodge the enemy's next attack."""
        rejected = self._reject_if_idle(CombatAction.DODGE)
        if rejected is not None:
            return rejected
        result = self._begin_turn(CombatAction.DODGE)

        self._effects.add_or_replace(self.session.player_effects, EffectType.DODGING, GUARD_DURATION)
        self._say(result, "You prepare to dodge the next attack!")
        self._enemy_reaction(result)
        return self._end_turn(result)

    def player_special_ability(self) -> ActionResult:
        """Use the role's special ability.

        Refused with no state change, effects untouched, when energy is
        below the ability cost. Power Strike and Assassinate scale base
        attack (equipment and buffs excluded). Shield Boost grants a
        defense boost and always lets the enemy answer.
        """
        rejected = self._reject_if_idle(CombatAction.SPECIAL)
        if rejected is not None:
            return rejected

        cost = self._settings.special_ability_cost
        if self.character.energy < cost:
            result = ActionResult(accepted=False, action=CombatAction.SPECIAL, phase=self.phase)
            self._say(result, "Not enough energy to use special ability!")
            logger.info("Action rejected", action=CombatAction.SPECIAL, reason="insufficient_energy",
                        energy=self.character.energy, cost=cost)
            return result

        result = self._begin_turn(CombatAction.SPECIAL)
        self.character.spend_energy(cost)
        result.energy_spent = cost
        enemy = self._active_enemy()
        base = max(0, self.character.attack - enemy.defense)
        ability = self.character.role.ability_name

        match self.character.role:
            case Role.WARRIOR:
                damage = math.floor(base * self._settings.warrior_ability_multiplier)
                self._hit_enemy(result, damage)
                self._say(result, f"{ability.upper()}! You unleash a devastating blow for {damage} damage!")
                return self._finish_offense(result)
            case Role.ROGUE:
                damage = math.floor(base * self._settings.rogue_ability_multiplier)
                self._hit_enemy(result, damage)
                self._say(result, f"{ability.upper()}! You strike a critical weak point for {damage} damage!")
                return self._finish_offense(result)
            case Role.SCIENTIST:
                duration = self._settings.scientist_shield_duration
                self._effects.add_or_replace(
                    self.session.player_effects,
                    EffectType.DEFENSE_BOOST,
                    duration,
                    self._settings.scientist_shield_value,
                )
                self._say(
                    result,
                    f"{ability}! You activate a defensive shield. Defense increased for {duration} turns.",
                )
                self._enemy_reaction(result)
                return self._end_turn(result)

    def use_combat_item(self, item_id: str) -> ActionResult:
        """Consume one item mid-fight, then let the enemy answer.

        Status effects do not tick for item use.
        """
        rejected = self._reject_if_idle(CombatAction.ITEM)
        if rejected is not None:
            return rejected

        used = self._inventory.use_consumable(self.character, item_id)
        if used is None:
            logger.info("Action rejected", action=CombatAction.ITEM, reason="unusable_item", item=item_id)
            return ActionResult(accepted=False, action=CombatAction.ITEM, phase=self.phase)

        result = ActionResult(accepted=True, action=CombatAction.ITEM, phase=self.phase)
        self.session.turn += 1
        self._enemy_reaction(result)
        return self._end_turn(result)

    # =========================================================================
    # Progression and quest delegates
    # =========================================================================

    def gain_xp(self, amount: int) -> list[LevelUpEvent]:
        return self._progression.gain_xp(self.character, amount)

    def check_quest_progress(self, event_type: str, target: str, amount: int = 1) -> list[QuestUpdate]:
        return self._quests.check_quest_progress(self.character, event_type, target, amount)

    def accept_quest(self, quest_id: str) -> bool:
        return self._quests.accept_quest(self.character, quest_id)

    def apply_quest_item(self, item_name: str) -> bool:
        return self._quests.apply_quest_item(self.character, item_name)

    # =========================================================================
    # Turn internals
    # =========================================================================

    def _reject_if_idle(self, action: CombatAction) -> ActionResult | None:
        if self.session.in_encounter:
            return None
        logger.info("Action rejected", action=action, reason="no_active_encounter", phase=self.phase)
        return ActionResult(accepted=False, action=action, phase=self.phase)

    def _active_enemy(self) -> Enemy:
        enemy = self.session.enemy
        if enemy is None:
            raise CombatError("No enemy in the current encounter", details={"phase": self.phase})
        return enemy

    def _begin_turn(self, action: CombatAction) -> ActionResult:
        """Tick both effect maps and open a result for the action."""
        self._effects.tick(self.session.player_effects)
        self._effects.tick(self.session.enemy_effects)
        self.session.turn += 1
        logger.debug("Turn started", action=action, turn=self.session.turn)
        return ActionResult(accepted=True, action=action, phase=self.phase)

    def _hit_enemy(self, result: ActionResult, damage: int) -> None:
        self._active_enemy().hp -= damage
        result.damage_dealt = damage

    def _finish_offense(self, result: ActionResult) -> ActionResult:
        """Resolve victory if the enemy fell, otherwise let it answer."""
        if self._active_enemy().hp <= 0:
            self._resolve_victory(result)
            return result
        self._enemy_reaction(result)
        return self._end_turn(result)

    def _enemy_reaction(self, result: ActionResult) -> None:
        enemy = self._active_enemy()
        character = self.character
        effects = self.session.player_effects
        regen = self._settings.energy_regen

        if EffectType.DODGING in effects:
            if self._rng.chance(self._settings.dodge_chance):
                character.restore_energy(regen)
                result.dodged = True
                self._say(result, f"You successfully dodged {enemy.name}'s attack!")
                return
            self._say(result, f"You tried to dodge but {enemy.name} still hit you!")

        damage = max(0, enemy.attack - self.effective_stats().defense)
        if EffectType.BLOCKING in effects:
            damage = math.floor(damage * self._settings.block_reduction)
            result.blocked = True
            self._say(result, f"You blocked {enemy.name}'s attack, reducing damage!")

        result.damage_taken = character.take_damage(damage)
        character.restore_energy(regen)
        self._say(result, f"{enemy.name} hits you for {damage} damage.")

        if character.hp <= 0:
            self._resolve_defeat(result)

    def _end_turn(self, result: ActionResult) -> ActionResult:
        result.phase = self.phase
        logger.info(
            "Action resolved",
            action=result.action,
            turn=self.session.turn,
            dealt=result.damage_dealt,
            taken=result.damage_taken,
            hp=self.character.hp,
            energy=self.character.energy,
            phase=result.phase,
        )
        self._render()
        return result

    def _resolve_victory(self, result: ActionResult) -> None:
        enemy = self._active_enemy()
        enemy.hp = max(0, enemy.hp)
        name = enemy.name
        xp = math.floor(
            enemy.attack * self._settings.victory_xp_attack_weight
            + enemy.defense * self._settings.victory_xp_defense_weight
        )
        loot = self._rng.choice(self.content.loot_table) if self.content.loot_table else None

        # The encounter is over before any side effect runs.
        self.session.enemy = None
        self.session.enemy_effects.clear()
        self.session.phase = CombatPhase.IDLE
        self.session.encounters_won += 1

        character = self.character
        character.energy = character.max_energy
        result.level_ups = self._progression.gain_xp(character, xp)
        result.quest_updates = self._quests.check_quest_progress(character, ObjectiveType.KILL, name, 1)
        if loot is not None:
            character.add_item(loot)

        result.phase = CombatPhase.VICTORY
        result.xp_gained = xp
        result.loot = loot
        self._say(result, f"You defeated the {name}!")
        if loot is not None:
            self._say(result, f"You gained {xp} XP and found a {loot}.")
        else:
            self._say(result, f"You gained {xp} XP.")
        self._renderer.show_outcome_message(f"Victory! {name} defeated!")

        logger.info("Victory", enemy=name, xp=xp, loot=loot, turns=self.session.turn)
        unbind_context("encounter")
        self._render()

    def _resolve_defeat(self, result: ActionResult) -> None:
        self.session.phase = CombatPhase.DEFEAT
        self._say(result, "You have been defeated...")
        self._renderer.show_outcome_message("You have been defeated...")
        logger.info("Defeat", enemy=self._active_enemy().name, turns=self.session.turn)
        unbind_context("encounter")

    def _say(self, result: ActionResult, text: str) -> None:
        self._log.add(text)
        result.messages.append(text)

    def _render(self) -> None:
        render_session(self._renderer, self.session)


__all__ = ["ActionResult", "CombatEngine"]
