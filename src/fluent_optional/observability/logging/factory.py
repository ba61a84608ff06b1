"""Observability – structlog configuration driven by OptionalSettings."""
from __future__ import annotations

import logging
from typing import Any

import structlog

from fluent_optional.config import EnvSettingsLoader, OptionalSettings


def configure_logging(settings: OptionalSettings | None = None) -> OptionalSettings:
    """Route structlog through a stdlib root handler.

    When *settings* is omitted they are loaded from ``FLUENT_OPTIONAL_*``
    environment variables. Returns the settings that were applied.
    """
    if settings is None:
        settings = EnvSettingsLoader().load(OptionalSettings)

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
    ]
    structlog.configure(
        processors=shared_processors + [structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    renderer: Any = (
        structlog.processors.JSONRenderer()
        if settings.json_logs
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            renderer,
        ],
    )
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(settings.level)
    return settings


__all__ = ["configure_logging"]
