"""Tests for structured logging setup."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pytest
import structlog
from structlog.testing import capture_logs

from odyssey.core.config import Settings
from odyssey.core.logging import (
    _app_context,
    _plain_enums,
    bind_context,
    configure_logging,
    get_logger,
    unbind_context,
)
from odyssey.models import CombatPhase, EffectType


if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def restore_structlog() -> Generator[None, None, None]:
    yield
    structlog.reset_defaults()


class TestProcessors:
    """Tests for the custom processors."""

    def test_plain_enums(self) -> None:
        event = _plain_enums(None, "info", {"phase": CombatPhase.VICTORY, "type": EffectType.DODGING, "hp": 3})

        assert event == {"phase": "victory", "type": "dodging", "hp": 3}

    def test_app_context(self) -> None:
        processor = _app_context("Galactic Odyssey", "0.1.0")

        event = processor(None, "info", {"event": "Victory"})

        assert event["app"] == "Galactic Odyssey"
        assert event["version"] == "0.1.0"


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_json_renderer_from_settings(self, restore_structlog: None) -> None:
        configure_logging(Settings(json_logs=True))

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_renderer_override(self, restore_structlog: None) -> None:
        configure_logging(Settings(json_logs=True), json_format=False, level="DEBUG")

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)


class TestContext:
    """Tests for contextvar helpers and engine log events."""

    def test_bind_and_unbind(self) -> None:
        bind_context(encounter="Sand Worm", turn=2)
        unbind_context("turn")

        assert structlog.contextvars.get_contextvars() == {"encounter": "Sand Worm"}

    def test_encounter_bound_until_victory(
        self, make_engine: Any, warrior: Any, xenobot: Any, spawn: Any
    ) -> None:
        engine = make_engine(warrior)

        with capture_logs() as logs:
            spawn(engine, xenobot, hp=5)
            assert structlog.contextvars.get_contextvars()["encounter"] == "Xenobot"
            engine.player_attack()

        assert "encounter" not in structlog.contextvars.get_contextvars()
        events = [entry["event"] for entry in logs]
        assert "Encounter started" in events
        assert "Victory" in events

    def test_get_logger(self) -> None:
        with capture_logs() as logs:
            get_logger("odyssey.test").info("Quest accepted", quest_id="quest_001")

        assert logs == [{"event": "Quest accepted", "quest_id": "quest_001", "log_level": "info"}]
