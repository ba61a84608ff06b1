"""Config settings – Settings base class and the library's own settings."""
from __future__ import annotations

import dataclasses
import logging
from typing import ClassVar

from fluent_optional.config.validation import InvalidSettingValueError

_LEVEL_NAMES = frozenset({"CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET"})


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings."""

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


@dataclasses.dataclass
class OptionalSettings(Settings):
    """Logging knobs, read from ``FLUENT_OPTIONAL_*`` environment variables."""

    _prefix: ClassVar[str] = "FLUENT_OPTIONAL"

    log_level: str = "WARNING"
    json_logs: bool = True

    def _validate(self) -> None:
        self.log_level = self.log_level.upper()
        if self.log_level not in _LEVEL_NAMES:
            raise InvalidSettingValueError(
                "log_level", self.log_level, f"expected one of {sorted(_LEVEL_NAMES)}"
            )

    @property
    def level(self) -> int:
        """Numeric stdlib level for ``log_level``."""
        return logging.getLevelName(self.log_level)


__all__ = ["OptionalSettings", "Settings"]
