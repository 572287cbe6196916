"""Structured logging for the extraction library.

Events are emitted through structlog on top of stdlib ``logging``, so an
embedding application's handlers and levels decide where they go. Nothing is
configured on import.
"""

from __future__ import annotations

import logging

import structlog
from structlog.types import Processor

from ..config.settings import get_settings


def configure_logging(level: str | int | None = None, *, json: bool = False) -> None:
    """Route readermode events into stdlib logging.

    Args:
        level: Minimum level; defaults to ``ReaderSettings.log_level``.
        json: Render events as JSON instead of ``key=value`` pairs.
    """
    if level is None:
        level = get_settings().log_level
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer() if json else structlog.processors.KeyValueRenderer(
            key_order=["event", "logger", "level"]
        ),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )


def get_logger(name: str | None = None):
    return structlog.get_logger(name)
