"""Tests for the RNG wrapper."""

from __future__ import annotations

import pytest

from odyssey.engine.rng import RNG


class TestRNG:
    """Tests for the RNG class."""

    def test_seeded_reproducible(self) -> None:
        first = RNG(seed=42)
        second = RNG(seed=42)

        assert [first.random() for _ in range(5)] == [second.random() for _ in range(5)]
        assert first.seed == 42

    def test_random_range(self) -> None:
        rng = RNG(seed=1)
        for _ in range(100):
            assert 0.0 <= rng.random() < 1.0

    def test_uniform_factor_range(self) -> None:
        rng = RNG(seed=3)
        for _ in range(100):
            assert 0.8 <= rng.uniform_factor(0.8, 1.2) < 1.2

    def test_chance_extremes(self) -> None:
        rng = RNG(seed=5)

        assert not any(rng.chance(0.0) for _ in range(50))
        assert all(rng.chance(1.0) for _ in range(50))

    def test_choice_from_sequence(self) -> None:
        rng = RNG(seed=7)
        table = ["Energy Cell", "Alien Crystal", "Data Chip"]

        for _ in range(30):
            assert rng.choice(table) in table

    def test_choice_empty_raises(self) -> None:
        with pytest.raises(ValueError):
            RNG().choice([])


class TestScriptedRNG:
    """Tests for the scripted test double used across the suite."""

    def test_queued_values_drive_choice(self, rng: RNG) -> None:
        rng.push(0.0, 0.99)

        assert rng.choice(["a", "b", "c"]) == "a"
        assert rng.choice(["a", "b", "c"]) == "c"
        assert rng.random() == 0.5
