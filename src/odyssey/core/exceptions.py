"""Exception hierarchy for the Odyssey game engine.

Turn resolution never raises for expected inputs: a refused player action
comes back as an ActionResult with ``accepted=False``. Exceptions are kept
for the edges of the engine, where bad input is a programming or packaging
mistake rather than a game event:

- loading settings (ConfigurationError)
- loading content tables (ContentError)
- creating a character with an unknown role (ValidationError)
- starting an encounter with no enemy templates, or asking for the
  current enemy outside an encounter (CombatError)

Example:
    >>> from odyssey.core.exceptions import ContentError
    >>> raise ContentError("Loot table references unknown items", source="content.json")
"""

from __future__ import annotations

from typing import Any


def _with_context(details: dict[str, Any] | None, **context: Any) -> dict[str, Any]:
    """Merge keyword context into ``details``, skipping None values."""
    merged = dict(details or {})
    merged.update({key: value for key, value in context.items() if value is not None})
    return merged


class OdysseyError(Exception):
    """Base exception for all Odyssey errors.

    Attributes:
        message: Human-readable description.
        details: Structured context, rendered after the message.
    """

    def __init__(self, message: str, *, details: dict[str, Any] | None = None) -> None:
        self.message = message
        self.details = details or {}
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if not self.details:
            return self.message
        context = ", ".join(f"{key}={value!r}" for key, value in self.details.items())
        return f"{self.message} [{context}]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}(message={self.message!r}, details={self.details!r})"


# =============================================================================
# Boundary Exceptions
# =============================================================================


class ConfigurationError(OdysseyError):
    """Settings could not be loaded or are inconsistent."""

    def __init__(
        self,
        message: str,
        *,
        config_key: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=_with_context(details, config_key=config_key))


class ContentError(OdysseyError):
    """A content table failed validation or references something missing.

    Raised by odyssey.engine.content when a JSON file cannot be read,
    does not match the schema, or points at unknown items or quest ids.
    """

    def __init__(
        self,
        message: str,
        *,
        source: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=_with_context(details, source=source))


class ValidationError(OdysseyError):
    """A value passed to a factory is outside its allowed set.

    Distinct from pydantic's ValidationError, which model fields raise.
    """

    def __init__(
        self,
        message: str,
        *,
        field_name: str | None = None,
        invalid_value: Any | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message,
            details=_with_context(details, field_name=field_name, invalid_value=invalid_value),
        )


# =============================================================================
# Engine Exceptions
# =============================================================================


class GameEngineError(OdysseyError):
    """Base exception for engine misuse."""


class CombatError(GameEngineError):
    """Raised when an encounter cannot be set up from the loaded content."""

    def __init__(
        self,
        message: str,
        *,
        enemy_name: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message, details=_with_context(details, enemy_name=enemy_name))


__all__ = [
    "OdysseyError",
    # Boundary
    "ConfigurationError",
    "ContentError",
    "ValidationError",
    # Engine
    "GameEngineError",
    "CombatError",
]
