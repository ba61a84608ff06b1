"""Observability – get_logger helper."""
from __future__ import annotations

import logging
from typing import Any

import structlog


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Until the application configures structlog (for instance through
    :func:`configure_logging`), events go to the stdlib logger *name* and
    are dropped by ``filter_by_level`` before any other processor runs, so
    a disabled level costs no rendering.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    if structlog.is_configured():
        logger = structlog.get_logger(name)
    else:
        logger = structlog.wrap_logger(
            logging.getLogger(name),
            processors=[structlog.stdlib.filter_by_level, *structlog.get_config()["processors"]],
            wrapper_class=structlog.stdlib.BoundLogger,
        )
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["get_logger"]
