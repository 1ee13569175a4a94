"""Pytest configuration and shared fixtures.

This module provides common fixtures and configuration for all tests
in the Odyssey engine test suite.
"""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Any, Iterable

import pytest

from odyssey.engine.rng import RNG


if TYPE_CHECKING:
    from collections.abc import Generator


# =============================================================================
# Test Doubles
# =============================================================================


class ScriptedRNG(RNG):
    """RNG whose draws are queued by the test.

    Once the queue is empty every draw returns ``fallback`` (0.5 by default:
    no critical hit, no successful dodge).
    """

    def __init__(self, values: Iterable[float] = (), fallback: float = 0.5) -> None:
        super().__init__(seed=0)
        self.values: deque[float] = deque(values)
        self.fallback = fallback
        self.draws = 0

    def push(self, *values: float) -> None:
        self.values.extend(values)

    def random(self) -> float:
        self.draws += 1
        if self.values:
            return self.values.popleft()
        return self.fallback


class RecordingRenderer:
    """Renderer that records every call for assertions."""

    def __init__(self) -> None:
        self.renders: list[tuple[Any, Any, Any]] = []
        self.outcomes: list[str] = []
        self.level_ups: list[tuple[int, dict[str, int]]] = []
        self.dialogs: list[tuple[str, str]] = []

    def render(self, character: Any, enemy: Any, effects: Any) -> None:
        self.renders.append((character, enemy, effects))

    def show_outcome_message(self, text: str) -> None:
        self.outcomes.append(text)

    def show_level_up(self, level: int, deltas: dict[str, int]) -> None:
        self.level_ups.append((level, deltas))

    def show_dialog(self, title: str, text: str) -> None:
        self.dialogs.append((title, text))


# =============================================================================
# Configuration Fixtures
# =============================================================================


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """Reset the settings cache before and after each test."""
    from odyssey.core.config import clear_settings_cache

    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture(autouse=True)
def reset_log_context() -> Generator[None, None, None]:
    """Drop structlog context variables bound during a test."""
    from odyssey.core.logging import clear_context

    clear_context()
    yield
    clear_context()


@pytest.fixture
def game_settings() -> Any:
    """Default game rules.

    Returns:
        GameSettings instance.
    """
    from odyssey.core.config import GameSettings

    return GameSettings()


# =============================================================================
# Content Fixtures
# =============================================================================


@pytest.fixture
def content() -> Any:
    """Built-in game content.

    Returns:
        GameContent instance.
    """
    from odyssey.engine.content import GameContent

    return GameContent.default()


@pytest.fixture
def xenobot() -> Any:
    """A weak, predictable enemy template (attack 8, defense 2).

    Returns:
        EnemyTemplate instance.
    """
    from odyssey.models import EnemyTemplate

    return EnemyTemplate(name="Xenobot", hp=100, attack=8, defense=2)


# =============================================================================
# Character Fixtures
# =============================================================================


@pytest.fixture
def warrior() -> Any:
    """A level-1 Warrior (120 hp, 12 atk, 8 def, 100 energy)."""
    from odyssey.models import create_character

    return create_character("Rex", "Human", "Warrior")


@pytest.fixture
def rogue() -> Any:
    """A level-1 Rogue (90 hp, 15 atk, 5 def, 120 energy)."""
    from odyssey.models import create_character

    return create_character("Nova", "Android", "Rogue")


@pytest.fixture
def scientist() -> Any:
    """A level-1 Scientist (100 hp, 10 atk, 10 def, 150 energy)."""
    from odyssey.models import create_character

    return create_character("Ada", "Cyborg", "Scientist")


# =============================================================================
# Engine Fixtures
# =============================================================================


@pytest.fixture
def rng() -> ScriptedRNG:
    """A scripted RNG with an empty queue."""
    return ScriptedRNG()


@pytest.fixture
def renderer() -> RecordingRenderer:
    """A renderer that records calls."""
    return RecordingRenderer()


@pytest.fixture
def message_log() -> Any:
    """An empty in-memory narrative log."""
    from odyssey.engine.interfaces import InMemoryMessageLog

    return InMemoryMessageLog()


@pytest.fixture
def make_engine(
    content: Any,
    rng: ScriptedRNG,
    renderer: RecordingRenderer,
    message_log: Any,
    game_settings: Any,
) -> Any:
    """Factory building a CombatEngine around a character.

    Returns:
        Callable taking a Character and optional GameSettings.
    """
    from odyssey.engine.combat import CombatEngine
    from odyssey.models import GameSession

    def _make(character: Any, settings: Any = None) -> CombatEngine:
        return CombatEngine(
            GameSession(character=character),
            content,
            renderer=renderer,
            message_log=message_log,
            settings=settings or game_settings,
            rng=rng,
        )

    return _make


@pytest.fixture
def spawn() -> Any:
    """Start an encounter against a template with exact hp.

    Returns:
        Callable ``spawn(engine, template, hp=None)`` returning the Enemy.
    """

    def _spawn(engine: Any, template: Any, hp: int | None = None) -> Any:
        enemy = engine.start_encounter(template)
        enemy.hp = template.hp if hp is None else hp
        enemy.max_hp = max(enemy.hp, 1)
        return enemy

    return _spawn
