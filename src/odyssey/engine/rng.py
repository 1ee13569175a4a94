"""Random draws for the combat engine.

All chance-based rules (critical hits, dodges, enemy selection, hp scaling,
loot) draw from one RNG instance injected into the engine, so a seeded
session replays identically and tests can force specific draws.
"""

from __future__ import annotations

from random import Random
from typing import Sequence, TypeVar

from odyssey.core.logging import get_logger


T = TypeVar("T")

logger = get_logger(__name__)


class RNG:
    """Wrapper around random.Random.

    Example:
        >>> rng = RNG(seed=42)
        >>> 0.0 <= rng.random() < 1.0
        True
    """

    def __init__(self, seed: int | None = None) -> None:
        """Initialize the generator.

        Args:
            seed: Optional seed for reproducible draws.
        """
        self._seed = seed
        self._random = Random(seed)
        logger.debug("RNG initialized", seed=seed)

    @property
    def seed(self) -> int | None:
        return self._seed

    def random(self) -> float:
        """Return the next float in [0.0, 1.0)."""
        return self._random.random()

    def chance(self, probability: float) -> bool:
        """One uniform draw; True when it falls below ``probability``."""
        return self.random() < probability

    def uniform_factor(self, low: float, high: float) -> float:
        """A factor in [low, high) from one uniform draw."""
        return low + self.random() * (high - low)

    def choice(self, seq: Sequence[T]) -> T:
        """Return a uniformly chosen element of a non-empty sequence."""
        if not seq:
            raise ValueError("Cannot choose from an empty sequence.")
        return seq[int(self.random() * len(seq))]


__all__ = ["RNG"]
