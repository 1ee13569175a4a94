"""Core module providing configuration, logging, and base exceptions.

Exports:
    Exceptions:
        OdysseyError: Base exception for all application errors.
        ConfigurationError: Configuration-related errors.
        ContentError: Malformed game content.

    Configuration:
        Settings: Main application settings class.
        GameSettings: Combat and progression tunables.
        get_settings: Get the settings singleton.
        clear_settings_cache: Force settings reload.

    Logging:
        configure_logging: Set up application logging.
        get_logger: Get a configured logger instance.
        bind_context: Add context to log entries.
        clear_context: Clear logging context.
"""

from __future__ import annotations

from odyssey.core.config import (
    GameSettings,
    Settings,
    clear_settings_cache,
    get_settings,
)
from odyssey.core.exceptions import (
    CombatError,
    ConfigurationError,
    ContentError,
    GameEngineError,
    OdysseyError,
    ValidationError,
)
from odyssey.core.logging import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
    unbind_context,
)


__all__ = [
    # Exceptions
    "OdysseyError",
    "ConfigurationError",
    "ContentError",
    "ValidationError",
    "GameEngineError",
    "CombatError",
    # Configuration
    "Settings",
    "GameSettings",
    "get_settings",
    "clear_settings_cache",
    # Logging
    "configure_logging",
    "get_logger",
    "bind_context",
    "unbind_context",
    "clear_context",
]
