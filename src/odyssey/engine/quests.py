"""Quest acceptance, progress, and reward granting.

Each quest moves NotAccepted -> Active(progress, current_step) -> Completed
for a given character, with no other transitions. Progress is driven by
typed events ("kill" Xenobot, "collect" Scrap Metal) reported by the combat
engine or the surrounding application.

Quest XP is added straight to ``character.xp`` without running the level-up
loop, so a quest reward can leave XP above the threshold until the next
``gain_xp`` call. Setting ``quest_xp_triggers_level_up`` evaluates level-ups
right after the reward instead.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from odyssey.core.config import GameSettings, get_settings
from odyssey.core.logging import get_logger
from odyssey.engine.content import QuestCatalog
from odyssey.engine.interfaces import MessageLog, NullRenderer, Renderer
from odyssey.engine.progression import ProgressionManager
from odyssey.models import (
    Character,
    QuestDef,
    QuestProgress,
    QuestStatus,
    Rewards,
)


logger = get_logger(__name__)


@dataclass
class QuestUpdate:
    """What one progress event did to one quest.

    Attributes:
        quest_id: The quest that advanced.
        progress: Progress after the event (0 after a step completes).
        current_step: Step index after the event.
        step_completed: Whether a step of a step quest completed.
        quest_completed: Whether the quest as a whole completed.
        xp_granted: XP granted by this event.
        items_granted: Items granted by this event.
    """

    quest_id: str
    progress: int = 0
    current_step: int = 0
    step_completed: bool = False
    quest_completed: bool = False
    xp_granted: int = 0
    items_granted: list[str] = field(default_factory=list)


class QuestTracker:
    """Track quest state for a character and grant rewards.

    Unknown quest ids, duplicate accepts, and non-matching events are
    silent no-ops. Nothing here raises during play.
    """

    def __init__(
        self,
        quests: QuestCatalog,
        message_log: MessageLog,
        renderer: Renderer | None = None,
        progression: ProgressionManager | None = None,
        settings: GameSettings | None = None,
    ) -> None:
        """Initialize the quest tracker.

        Args:
            quests: Quest definitions.
            message_log: Narrative line sink.
            renderer: Receives dialogs and completion messages.
            progression: Used for level checks when quest XP is configured
                to trigger them.
            settings: Game rules; defaults to the application settings.
        """
        self._quests = quests
        self._log = message_log
        self._renderer = renderer or NullRenderer()
        self._progression = progression
        self._settings = settings or get_settings().game

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def status(self, character: Character, quest_id: str) -> QuestStatus:
        if quest_id in character.completed_quests:
            return QuestStatus.COMPLETED
        if quest_id in character.active_quests:
            return QuestStatus.ACTIVE
        return QuestStatus.NOT_ACCEPTED

    def get_quest(self, quest_id: str) -> QuestDef | None:
        return self._quests.get(quest_id)

    def available_quests(self, character: Character) -> list[QuestDef]:
        """Quests the character has neither accepted nor completed."""
        return self._quests.available_for(character)

    # -------------------------------------------------------------------------
    # Transitions
    # -------------------------------------------------------------------------

    def accept_quest(self, character: Character, quest_id: str) -> bool:
        """Start a quest at progress 0, step 0.

        Returns:
            True if the quest became active; False for an unknown id or a
            quest that is already active or completed.
        """
        if self.status(character, quest_id) is not QuestStatus.NOT_ACCEPTED:
            logger.debug("Quest accept ignored", quest_id=quest_id, reason="already_tracked")
            return False

        quest = self._quests.get(quest_id)
        if quest is None:
            logger.debug("Quest accept ignored", quest_id=quest_id, reason="unknown_quest")
            return False

        character.active_quests[quest_id] = QuestProgress()
        self._log.add(f"Quest Accepted: {quest.title}")
        self._renderer.show_outcome_message(f"Quest Accepted: {quest.title}")
        logger.info("Quest accepted", quest_id=quest_id, title=quest.title)
        return True

    def check_quest_progress(
        self,
        character: Character,
        event_type: str,
        event_target: str,
        amount: int = 1,
    ) -> list[QuestUpdate]:
        """Report a progress event to every active quest.

        A quest advances when its current objective matches the event's type
        and target and its progress is still below the objective amount.

        Args:
            character: The character whose quests advance.
            event_type: Objective type, e.g. "kill" or "collect".
            event_target: Enemy name or item id.
            amount: Units to add to progress. Non-positive amounts are ignored.

        Returns:
            One QuestUpdate per quest that advanced.
        """
        updates: list[QuestUpdate] = []
        if amount <= 0:
            logger.debug("Quest event ignored", event_type=event_type, target=event_target, amount=amount)
            return updates
        for quest_id in list(character.active_quests):
            quest = self._quests.get(quest_id)
            if quest is None:
                continue
            record = character.active_quests[quest_id]
            objective = quest.objective_at(record.current_step)
            if objective is None or not objective.matches(event_type, event_target):
                continue
            if record.progress >= objective.amount:
                continue
            updates.append(self._advance(character, quest, record, amount))
        return updates

    def apply_quest_item(self, character: Character, item_name: str) -> bool:
        """Hand one inventory item to the first active quest that wants it.

        Only the objective's target is compared with the item name. The
        item counts as one unit of the objective's own type, only the
        chosen quest advances, and one unit leaves the inventory.

        Returns:
            True if an item was used.
        """
        if not character.has_item(item_name):
            self._log.add(f"You don't have any {item_name}.")
            return False

        for quest_id in list(character.active_quests):
            quest = self._quests.get(quest_id)
            if quest is None:
                continue
            record = character.active_quests[quest_id]
            objective = quest.objective_at(record.current_step)
            if objective is None or objective.target != item_name:
                continue
            if record.progress >= objective.amount:
                continue

            character.remove_item(item_name)
            self._advance(character, quest, record, 1)
            self._log.add(f"Used {item_name} for quest: {quest.title}")
            logger.info("Quest item applied", quest_id=quest_id, item=item_name)
            return True

        logger.debug("Quest item not applicable", item=item_name)
        return False

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _advance(
        self,
        character: Character,
        quest: QuestDef,
        record: QuestProgress,
        amount: int,
    ) -> QuestUpdate:
        objective = quest.objective_at(record.current_step)
        record.progress += amount
        update = QuestUpdate(
            quest_id=quest.id,
            progress=record.progress,
            current_step=record.current_step,
        )
        logger.debug(
            "Quest progress",
            quest_id=quest.id,
            progress=record.progress,
            step=record.current_step,
        )

        if objective is None or record.progress < objective.amount:
            return update

        if quest.is_step_quest:
            self._complete_step(character, quest, record, update)
        else:
            self._complete_quest(character, quest, update)
        return update

    def _complete_step(
        self,
        character: Character,
        quest: QuestDef,
        record: QuestProgress,
        update: QuestUpdate,
    ) -> None:
        step = quest.steps[record.current_step]
        self._grant(character, step.rewards, update, label="Step Reward")

        if step.dialog is not None:
            self._renderer.show_dialog(step.dialog.title, step.dialog.text)

        record.progress = 0
        record.current_step += 1
        update.progress = 0
        update.current_step = record.current_step
        update.step_completed = True
        self._log.add("Quest Step Completed!")
        logger.info("Quest step completed", quest_id=quest.id, step=record.current_step)

        if record.current_step >= len(quest.steps):
            self._complete_quest(character, quest, update)

    def _complete_quest(self, character: Character, quest: QuestDef, update: QuestUpdate) -> None:
        self._grant(character, quest.rewards, update, label="Quest Reward")
        character.active_quests.pop(quest.id, None)
        character.completed_quests.append(quest.id)
        update.quest_completed = True

        self._log.add(f"Quest Completed: {quest.title}!")
        self._renderer.show_outcome_message(f"Quest Completed: {quest.title}")
        logger.info("Quest completed", quest_id=quest.id, title=quest.title)

    def _grant(self, character: Character, rewards: Rewards, update: QuestUpdate, *, label: str) -> None:
        if rewards.xp:
            character.xp += rewards.xp
            update.xp_granted += rewards.xp
            self._log.add(f"{label}: +{rewards.xp} XP")
            if self._settings.quest_xp_triggers_level_up and self._progression is not None:
                self._progression.resolve_level_ups(character)

        for item in rewards.items:
            character.add_item(item)
            update.items_granted.append(item)
            self._log.add(f"{label}: +1 {item}")


__all__ = ["QuestUpdate", "QuestTracker"]
