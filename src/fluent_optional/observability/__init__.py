"""Observability – logging setup for the library."""
from fluent_optional.observability.logging import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
