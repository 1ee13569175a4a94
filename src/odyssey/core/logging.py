"""Structured diagnostics for the Odyssey game engine.

Engine components log state transitions (encounter start, action resolved,
victory, quest step) as structlog events with key/value fields. This is
separate from the narrative MessageLog the player reads.

Example:
    >>> from odyssey.core.logging import configure_logging, get_logger
    >>> configure_logging(level="DEBUG")
    >>> get_logger(__name__).info("Encounter started", enemy="Xenobot", hp=47)
"""

from __future__ import annotations

import logging
import sys
from enum import Enum
from typing import TYPE_CHECKING, Any

import structlog
from structlog.types import Processor


if TYPE_CHECKING:
    from structlog.types import EventDict, WrappedLogger

    from odyssey.core.config import Settings


_STDLIB_FORMAT = "%(asctime)s %(levelname)-8s %(name)s | %(message)s"


def _app_context(app_name: str, app_version: str) -> Processor:
    """Build a processor stamping the application name and version."""

    def processor(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("app", app_name)
        event_dict.setdefault("version", app_version)
        return event_dict

    return processor


def _plain_enums(logger: WrappedLogger, method_name: str, event_dict: EventDict) -> EventDict:
    """Render enum fields (phase, action, effect type) by value."""
    for key, value in event_dict.items():
        if isinstance(value, Enum):
            event_dict[key] = value.value
    return event_dict


def configure_logging(
    settings: Settings | None = None,
    *,
    level: str | None = None,
    json_format: bool | None = None,
    log_file: str | None = None,
) -> None:
    """Install structlog and stdlib logging for the process.

    Explicit keyword arguments win over ``settings``; with neither, the
    application settings are used.

    Args:
        settings: Settings providing log_level, json_logs, app name/version.
        level: Logging level name.
        json_format: Emit one JSON object per line instead of console output.
        log_file: Also append stdlib log records to this file.
    """
    if settings is None:
        from odyssey.core.config import get_settings

        settings = get_settings()

    level_name = (level or settings.log_level).upper()
    use_json = settings.json_logs if json_format is None else json_format
    numeric_level = getattr(logging, level_name, logging.INFO)

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _app_context(settings.app_name, settings.app_version),
        _plain_enums,
        structlog.processors.StackInfoRenderer(),
    ]
    if use_json:
        processors += [structlog.processors.format_exc_info, structlog.processors.JSONRenderer()]
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
    logging.basicConfig(format=_STDLIB_FORMAT, level=numeric_level, handlers=handlers, force=True)


def get_logger(name: str | None = None) -> structlog.BoundLogger:
    """Get a structlog logger, usually ``get_logger(__name__)``."""
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> None:
    """Attach fields to every log event on this context until unbound.

    Example:
        >>> bind_context(encounter="Sand Worm")
    """
    structlog.contextvars.bind_contextvars(**kwargs)


def unbind_context(*keys: str) -> None:
    structlog.contextvars.unbind_contextvars(*keys)


def clear_context() -> None:
    structlog.contextvars.clear_contextvars()


__all__ = [
    "configure_logging",
    "get_logger",
    "bind_context",
    "unbind_context",
    "clear_context",
]
