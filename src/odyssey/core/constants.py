"""Application-wide constants for the Odyssey game engine.

Rule tunables live in odyssey.core.config.GameSettings; the values here are
structural limits that never change between sessions.
"""

from __future__ import annotations

# =============================================================================
# Narrative Log
# =============================================================================

MAX_LOG_LINES = 200
"""Maximum narrative lines kept by the in-memory message log."""

# =============================================================================
# Character Defaults
# =============================================================================

STARTING_LEVEL = 1
"""Level of a freshly created character."""

STARTING_CREDITS = 100
"""Credits a freshly created character carries."""

# =============================================================================
# Status Effects
# =============================================================================

GUARD_DURATION = 1
"""Turns a block or dodge stance lasts."""


__all__ = [
    "MAX_LOG_LINES",
    "STARTING_LEVEL",
    "STARTING_CREDITS",
    "GUARD_DURATION",
]
