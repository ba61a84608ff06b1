"""Config settings – 12-factor env-based configuration."""
from fluent_optional.config.settings.base import OptionalSettings, Settings
from fluent_optional.config.settings.loaders import EnvSettingsLoader

__all__ = ["EnvSettingsLoader", "OptionalSettings", "Settings"]
