"""Collaborator interfaces consumed by the engine.

The engine never draws a screen. It reports state changes to a Renderer and
appends narrative lines to a MessageLog; both are supplied by the
surrounding application. Null and in-memory implementations are provided
for headless play and tests.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from odyssey.core.constants import MAX_LOG_LINES


if TYPE_CHECKING:
    from odyssey.models import Character, Enemy, GameSession, StatusEffects


@dataclass(frozen=True)
class LevelUpEvent:
    """Notification emitted once per level gained.

    Attributes:
        level: The new level.
        max_hp: Max hp gained.
        attack: Attack gained.
        defense: Defense gained.
        max_energy: Max energy gained.
    """

    level: int
    max_hp: int
    attack: int
    defense: int
    max_energy: int

    @property
    def deltas(self) -> dict[str, int]:
        return {
            "maxHp": self.max_hp,
            "attack": self.attack,
            "defense": self.defense,
            "maxEnergy": self.max_energy,
        }


@runtime_checkable
class Renderer(Protocol):
    """Rendering collaborator, invoked after state changes."""

    def render(
        self,
        character: "Character",
        enemy: "Enemy | None",
        effects: "StatusEffects",
    ) -> None: ...

    def show_outcome_message(self, text: str) -> None: ...

    def show_level_up(self, level: int, deltas: dict[str, int]) -> None: ...

    def show_dialog(self, title: str, text: str) -> None: ...


class NullRenderer:
    """Renderer that ignores every call."""

    def render(self, character: "Character", enemy: "Enemy | None", effects: "StatusEffects") -> None:
        pass

    def show_outcome_message(self, text: str) -> None:
        pass

    def show_level_up(self, level: int, deltas: dict[str, int]) -> None:
        pass

    def show_dialog(self, title: str, text: str) -> None:
        pass


@runtime_checkable
class MessageLog(Protocol):
    """Append-only narrative line sink."""

    def add(self, text: str) -> None: ...


@dataclass
class InMemoryMessageLog:
    """Bounded in-memory message log.

    Attributes:
        lines: The most recent narrative lines, oldest first.
    """

    lines: deque[str] = field(default_factory=lambda: deque(maxlen=MAX_LOG_LINES))

    def add(self, text: str) -> None:
        self.lines.append(text)

    def tail(self, count: int = 10) -> list[str]:
        """Get the last ``count`` lines."""
        return list(self.lines)[-count:]

    def __contains__(self, text: object) -> bool:
        """Substring match against any logged line."""
        return isinstance(text, str) and any(text in line for line in self.lines)


def render_session(renderer: Renderer, session: "GameSession") -> None:
    """Push the current session snapshot to a renderer."""
    renderer.render(session.character, session.enemy, session.player_effects)


__all__ = [
    "LevelUpEvent",
    "Renderer",
    "NullRenderer",
    "MessageLog",
    "InMemoryMessageLog",
    "render_session",
]
