"""Configuration management for the Odyssey game engine.

This module provides centralized configuration using pydantic-settings,
supporting environment variables, .env files, and runtime overrides. Every
tunable number of the combat and progression rules lives in GameSettings so
balance changes never require touching engine code.

Example:
    >>> from odyssey.core.config import get_settings
    >>> settings = get_settings()
    >>> settings.game.special_ability_cost
    30

Environment Variables:
    ODYSSEY_LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    ODYSSEY_JSON_LOGS: Emit JSON log lines instead of console output
    ODYSSEY_GAME_RNG_SEED: Fixed seed for reproducible sessions
    ODYSSEY_GAME_CONTENT_PATH: JSON file replacing the built-in content
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Annotated, Literal

from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from odyssey.core.exceptions import ConfigurationError


Probability = Annotated[float, Field(ge=0.0, le=1.0)]


class GameSettings(BaseSettings):
    """Tunable rules for combat, energy, and progression.

    Attributes:
        special_ability_cost: Energy spent by a special ability.
        crit_chance: Critical hit chance for basic attacks.
        rogue_crit_chance: Critical hit chance for Rogues.
        crit_multiplier: Damage multiplier on a critical hit.
        dodge_chance: Chance that a dodging player avoids the enemy attack.
        block_reduction: Multiplier applied to damage while blocking.
        energy_regen: Energy regained after each enemy reaction.
        enemy_hp_min_factor: Lower bound of the enemy hp scaling factor.
        enemy_hp_max_factor: Upper bound (exclusive) of the hp scaling factor.
        victory_xp_attack_weight: XP per point of enemy attack.
        victory_xp_defense_weight: XP per point of enemy defense.
        xp_per_level: Level threshold multiplier (threshold = level * this).
        level_up_energy_growth: Max energy gained per level.
        warrior_ability_multiplier: Power Strike damage multiplier.
        rogue_ability_multiplier: Assassinate damage multiplier.
        scientist_shield_value: Defense granted by Shield Boost.
        scientist_shield_duration: Turns Shield Boost lasts.
        quest_xp_triggers_level_up: Run quest XP through the leveling loop.
        rng_seed: Optional seed for reproducible sessions.
        content_path: Optional JSON content file replacing built-in tables.
    """

    model_config = SettingsConfigDict(
        env_prefix="ODYSSEY_GAME_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    special_ability_cost: int = Field(default=30, ge=0, description="Special ability energy cost")
    crit_chance: Probability = Field(default=0.15, description="Base critical hit chance")
    rogue_crit_chance: Probability = Field(default=0.25, description="Rogue critical hit chance")
    crit_multiplier: float = Field(default=2.0, ge=1.0, description="Critical damage multiplier")
    dodge_chance: Probability = Field(default=0.30, description="Dodge success chance")
    block_reduction: Probability = Field(default=0.5, description="Damage multiplier while blocking")
    energy_regen: int = Field(default=5, ge=0, description="Energy regained per enemy reaction")
    enemy_hp_min_factor: float = Field(default=0.8, gt=0.0, description="Enemy hp scale lower bound")
    enemy_hp_max_factor: float = Field(default=1.2, gt=0.0, description="Enemy hp scale upper bound")
    victory_xp_attack_weight: float = Field(default=2.0, ge=0.0)
    victory_xp_defense_weight: float = Field(default=3.0, ge=0.0)
    xp_per_level: int = Field(default=100, ge=1, description="XP threshold per level")
    level_up_energy_growth: int = Field(default=10, ge=0)
    warrior_ability_multiplier: float = Field(default=1.5, ge=0.0)
    rogue_ability_multiplier: float = Field(default=2.5, ge=0.0)
    scientist_shield_value: int = Field(default=5, ge=0)
    scientist_shield_duration: int = Field(default=3, ge=1)
    quest_xp_triggers_level_up: bool = Field(
        default=False,
        description="Evaluate level-ups immediately after quest XP rewards",
    )
    rng_seed: int | None = Field(default=None, description="Seed for reproducible sessions")
    content_path: Path | None = Field(default=None, description="JSON content file")

    @model_validator(mode="after")
    def validate_hp_factors(self) -> "GameSettings":
        """Ensure the enemy hp scaling range is not inverted.

        Returns:
            Self if validation passes.

        Raises:
            ConfigurationError: If the lower bound exceeds the upper bound.
        """
        if self.enemy_hp_min_factor > self.enemy_hp_max_factor:
            raise ConfigurationError(
                f"enemy_hp_min_factor ({self.enemy_hp_min_factor}) must not exceed "
                f"enemy_hp_max_factor ({self.enemy_hp_max_factor})",
                config_key="enemy_hp_min_factor",
            )
        return self


class Settings(BaseSettings):
    """Main application settings.

    Attributes:
        app_name: Application name.
        app_version: Application version string.
        debug: Enable debug mode.
        log_level: Application logging level.
        json_logs: Render logs as JSON.
        game: Game rule settings.
    """

    model_config = SettingsConfigDict(
        env_prefix="ODYSSEY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_nested_delimiter="__",
    )

    app_name: str = Field(default="Galactic Odyssey", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    debug: bool = Field(default=False, description="Enable debug mode")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    json_logs: bool = Field(default=False, description="Emit JSON log lines")

    game: GameSettings = Field(default_factory=GameSettings)


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings once per process from the environment and ``.env``.

    Raises:
        ConfigurationError: If a value fails validation.
    """
    try:
        settings = Settings()
    except ConfigurationError:
        raise
    except Exception as exc:
        raise ConfigurationError(
            f"Invalid Odyssey settings: {exc}",
            details={"cause": type(exc).__name__},
        ) from exc
    return settings


def clear_settings_cache() -> None:
    """Forget the cached settings so the next call re-reads the environment."""
    get_settings.cache_clear()


__all__ = [
    "GameSettings",
    "Settings",
    "get_settings",
    "clear_settings_cache",
]
