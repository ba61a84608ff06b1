"""Observability – structured logging helpers."""
from fluent_optional.observability.logging.factory import configure_logging
from fluent_optional.observability.logging.processors import get_logger

__all__ = ["configure_logging", "get_logger"]
