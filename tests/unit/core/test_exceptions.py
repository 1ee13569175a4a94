"""Tests for the exception hierarchy."""

from __future__ import annotations

import pytest

from odyssey.core.exceptions import (
    CombatError,
    ConfigurationError,
    ContentError,
    GameEngineError,
    OdysseyError,
    ValidationError,
)


class TestOdysseyError:
    """Tests for the base OdysseyError exception."""

    def test_basic_message(self) -> None:
        """Test exception with basic message."""
        exc = OdysseyError("Test error message")
        assert exc.message == "Test error message"
        assert exc.details == {}
        assert str(exc) == "Test error message"

    def test_with_details(self) -> None:
        """Test exception with additional details."""
        exc = OdysseyError("Test error", details={"key": "value", "count": 42})
        assert exc.details == {"key": "value", "count": 42}
        assert "key='value'" in str(exc)
        assert "count=42" in str(exc)

    def test_repr(self) -> None:
        """Test exception repr output."""
        repr_str = repr(OdysseyError("Test", details={"x": 1}))
        assert "OdysseyError" in repr_str
        assert "Test" in repr_str
        assert "x" in repr_str


class TestContextualExceptions:
    """Tests for exceptions carrying keyword context."""

    def test_configuration_error_key(self) -> None:
        exc = ConfigurationError("Bad value", config_key="dodge_chance")
        assert exc.details["config_key"] == "dodge_chance"

    def test_content_error_source(self) -> None:
        exc = ContentError("Unknown loot item", source="content.json", details={"missing": ["X"]})
        assert exc.details == {"missing": ["X"], "source": "content.json"}

    def test_validation_error_field(self) -> None:
        exc = ValidationError("Unknown role", field_name="role", invalid_value="Bard")
        assert exc.details["field_name"] == "role"
        assert exc.details["invalid_value"] == "Bard"

    def test_combat_error_enemy(self) -> None:
        exc = CombatError("No enemy templates loaded", enemy_name="Xenobot")
        assert exc.details["enemy_name"] == "Xenobot"


class TestHierarchy:
    """Tests for exception inheritance."""

    @pytest.mark.parametrize(
        "exc_type",
        [ConfigurationError, ContentError, ValidationError, GameEngineError, CombatError],
    )
    def test_all_derive_from_base(self, exc_type: type[OdysseyError]) -> None:
        assert issubclass(exc_type, OdysseyError)

    def test_combat_error_is_engine_error(self) -> None:
        with pytest.raises(GameEngineError):
            raise CombatError("boom")
