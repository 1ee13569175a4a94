"""Tests for XP gain and level-ups."""

from __future__ import annotations

from typing import Any

import pytest

from odyssey.core.config import GameSettings
from odyssey.engine.progression import ProgressionManager
from odyssey.models import Character


@pytest.fixture
def progression(renderer: Any, game_settings: GameSettings) -> ProgressionManager:
    return ProgressionManager(renderer, game_settings)


class TestGainXp:
    """Tests for ProgressionManager.gain_xp."""

    def test_below_threshold(self, progression: ProgressionManager, warrior: Character) -> None:
        events = progression.gain_xp(warrior, 60)

        assert events == []
        assert warrior.level == 1
        assert warrior.xp == 60

    def test_single_level_up(
        self, progression: ProgressionManager, warrior: Character, renderer: Any
    ) -> None:
        warrior.hp = 30
        warrior.energy = 5

        events = progression.gain_xp(warrior, 130)

        assert len(events) == 1
        assert warrior.level == 2
        assert warrior.xp == 30
        assert warrior.max_hp == 130
        assert warrior.hp == 130
        assert warrior.attack == 14
        assert warrior.defense == 9
        assert warrior.max_energy == 110
        assert warrior.energy == 110
        assert warrior.xp_to_next_level == 200
        assert renderer.level_ups == [
            (2, {"maxHp": 10, "attack": 2, "defense": 1, "maxEnergy": 10})
        ]

    def test_multi_level_carry_over(
        self, progression: ProgressionManager, warrior: Character, renderer: Any
    ) -> None:
        """Test 250 XP from level 1 reaches level 3 with 50 left over."""
        events = progression.gain_xp(warrior, 250)

        assert warrior.level == 3
        assert warrior.xp == 50
        assert [e.level for e in events] == [2, 3]
        assert len(renderer.level_ups) == 2
        assert warrior.max_hp == 140
        assert warrior.attack == 16
        assert warrior.defense == 10
        assert warrior.max_energy == 120
        assert warrior.xp < warrior.xp_to_next_level

    def test_exact_threshold(self, progression: ProgressionManager, rogue: Character) -> None:
        progression.gain_xp(rogue, 100)

        assert rogue.level == 2
        assert rogue.xp == 0

    def test_zero_amount_resolves_pending_xp(
        self, progression: ProgressionManager, scientist: Character
    ) -> None:
        """Test a zero award still levels a character already over threshold."""
        scientist.xp = 120

        events = progression.gain_xp(scientist, 0)

        assert len(events) == 1
        assert scientist.level == 2
        assert scientist.xp == 20

    def test_custom_threshold(self, renderer: Any, warrior: Character) -> None:
        manager = ProgressionManager(renderer, GameSettings(xp_per_level=50))

        manager.gain_xp(warrior, 150)

        assert warrior.level == 4
        assert warrior.xp == 0
        assert warrior.xp_to_next_level == 200

    def test_next_award_uses_new_level(
        self, progression: ProgressionManager, warrior: Character
    ) -> None:
        """Test the threshold rises only between awards."""
        progression.gain_xp(warrior, 250)

        events = progression.gain_xp(warrior, 240)

        assert events == []
        assert warrior.level == 3
        assert warrior.xp == 290
        assert warrior.xp_to_next_level == 300
