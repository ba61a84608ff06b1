"""Config – 12-factor settings and loaders."""

from fluent_optional.config.settings import (
    EnvSettingsLoader,
    OptionalSettings,
    Settings,
)
from fluent_optional.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "OptionalSettings",
    "Settings",
]
