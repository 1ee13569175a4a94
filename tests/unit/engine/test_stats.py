"""Tests for effective stat resolution."""

from __future__ import annotations

from typing import Any

import pytest

from odyssey.engine.content import ItemCatalog
from odyssey.engine.effects import StatusEffectTracker
from odyssey.engine.stats import EffectiveStats, StatsResolver
from odyssey.models import Character, EffectType, ItemDef, StatusEffects


@pytest.fixture
def resolver(content: Any) -> StatsResolver:
    return StatsResolver(content.items)


class TestStatsResolver:
    """Tests for StatsResolver.compute."""

    def test_base_stats_only(self, resolver: StatsResolver, warrior: Character) -> None:
        stats = resolver.compute(warrior, StatusEffects())

        assert stats == EffectiveStats(attack=12, defense=8)

    def test_equipment_bonuses(self, resolver: StatsResolver, warrior: Character) -> None:
        """Test weapon adds attack, armor and accessory add defense."""
        warrior.equipment.weapon = "Plasma Rifle"
        warrior.equipment.armor = "Kevlar Vest"
        warrior.equipment.accessory = "Shield Generator"

        stats = resolver.compute(warrior, StatusEffects())

        assert stats.attack == 12 + 5
        assert stats.defense == 8 + 4 + 3

    def test_accessory_can_add_both(self, warrior: Character) -> None:
        items = ItemCatalog(
            {"Combat Visor": ItemDef.model_validate({"type": "accessory", "stats": {"attack": 2, "defense": 1}})}
        )
        warrior.equipment.accessory = "Combat Visor"

        stats = StatsResolver(items).compute(warrior, StatusEffects())

        assert stats == EffectiveStats(attack=14, defense=9)

    def test_weapon_defense_ignored(self, warrior: Character) -> None:
        """Test a weapon only contributes attack."""
        items = ItemCatalog(
            {"Riot Baton": ItemDef.model_validate({"type": "weapon", "stats": {"attack": 2, "defense": 9}})}
        )
        warrior.equipment.weapon = "Riot Baton"

        assert StatsResolver(items).compute(warrior, StatusEffects()).defense == 8

    def test_missing_catalog_entry_contributes_zero(
        self, resolver: StatsResolver, warrior: Character
    ) -> None:
        warrior.equipment.weapon = "Ghost Blade"
        warrior.equipment.armor = "Phantom Mail"

        stats = resolver.compute(warrior, StatusEffects())

        assert stats == EffectiveStats(attack=12, defense=8)

    def test_buffs_added(self, resolver: StatsResolver, warrior: Character) -> None:
        effects = StatusEffects()
        tracker = StatusEffectTracker()
        tracker.add_or_replace(effects, EffectType.ATTACK_BOOST, 2, 3)
        tracker.add_or_replace(effects, EffectType.DEFENSE_BOOST, 3, 5)

        stats = resolver.compute(warrior, effects)

        assert stats == EffectiveStats(attack=15, defense=13)

    def test_stances_do_not_change_stats(self, resolver: StatsResolver, warrior: Character) -> None:
        effects = StatusEffects()
        tracker = StatusEffectTracker()
        tracker.add_or_replace(effects, EffectType.BLOCKING, 1)
        tracker.add_or_replace(effects, EffectType.DODGING, 1)

        assert resolver.compute(warrior, effects) == EffectiveStats(attack=12, defense=8)

    def test_idempotent(self, resolver: StatsResolver, warrior: Character) -> None:
        """Test repeated calls with unchanged state give identical results."""
        warrior.equipment.weapon = "Laser Blade"
        effects = StatusEffects()
        StatusEffectTracker().add_or_replace(effects, EffectType.DEFENSE_BOOST, 3, 5)
        snapshot = warrior.model_dump()

        first = resolver.compute(warrior, effects)
        second = resolver.compute(warrior, effects)

        assert first == second
        assert warrior.model_dump() == snapshot
        assert len(effects) == 1
